# src/tests/test_observations.py
import numpy as np

from src.game.config import HEIGHT, PLATFORM_BASE, PLATFORM_SPACER, PLATFORM_WIDTH
from src.game.level import Sprite
from src.game.simulation import Simulation
from src.env.observations import (
    build_observation, floor_at_x, hazard_near_x, OBS_SIZE, PROBE_OFFSETS
)


def make_sim() -> Simulation:
    sim = Simulation(seed=123)
    sim.start_game()
    return sim


def test_shape_dtype_and_ranges():
    obs = build_observation(make_sim())
    assert isinstance(obs, np.ndarray) and obs.dtype == np.float32 and obs.shape == (OBS_SIZE,)
    assert 0.0 <= obs[0] <= 1.0, "y_top_norm out of range"
    assert -1.0 <= obs[1] <= 1.0, "dy_norm out of range"
    assert 0.0 <= obs[2] <= 1.0, "speed_norm out of range"
    for i in range(len(PROBE_OFFSETS)):
        floor_n, hazard = obs[3 + 2 * i: 5 + 2 * i]
        assert 0.0 <= floor_n <= 1.0
        assert hazard in (0.0, 1.0)


def test_opening_terrain_under_every_probe():
    obs = build_observation(make_sim())
    expected = np.float32((PLATFORM_BASE - 2 * PLATFORM_SPACER) / HEIGHT)
    for i in range(len(PROBE_OFFSETS)):
        assert obs[3 + 2 * i] == expected
        assert obs[4 + 2 * i] == 0.0


def test_gap_sentinel_and_hazard_flag():
    sim = make_sim()
    sim.spawner.platforms.clear()
    near = sim.player.x + PROBE_OFFSETS[0]
    sim.spawner.enemies.append(Sprite(x=near - PLATFORM_WIDTH / 2, y=300, kind="spikes"))
    obs = build_observation(sim)
    assert obs[3] == 1.0, "Expected no-floor sentinel over a gap"
    assert obs[4] == 1.0, "Expected hazard at the near probe"
    assert obs[6] == 0.0


def test_floor_picks_highest_tile():
    tiles = [Sprite(x=0, y=320), Sprite(x=10, y=256), Sprite(x=100, y=192)]
    assert floor_at_x(tiles, 20) == 256
    assert floor_at_x(tiles, 5) == 320
    assert floor_at_x(tiles, 60) is None
    assert hazard_near_x([Sprite(x=200, kind="slime")], 216) == 1
    assert hazard_near_x([Sprite(x=200, kind="slime")], 240) == 0
