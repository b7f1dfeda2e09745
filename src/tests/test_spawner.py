# src/tests/test_spawner.py
import math
import pytest

from src.game.config import (
    WIDTH, PLATFORM_WIDTH, PLATFORM_BASE, PLATFORM_SPACER, MAX_ENEMIES,
    START_PLATFORM_COUNT, START_PLATFORM_LENGTH
)
from src.game.level import Spawner, Sprite, HAZARD_KINDS, TERRAIN_KINDS


def snapshot(spawner: Spawner):
    return (
        [(s.x, s.y, s.kind) for s in spawner.platforms],
        [(s.x, s.y, s.kind) for s in spawner.environment],
        [(s.x, s.y, s.kind) for s in spawner.enemies],
        spawner.platform_height, spawner.platform_length, spawner.gap_length, spawner.score,
    )


def test_opening_layout():
    sp = Spawner(seed=7)
    assert len(sp.platforms) == START_PLATFORM_COUNT
    assert all(p.kind == "grass" for p in sp.platforms)
    assert len(sp.water) == math.ceil(WIDTH / PLATFORM_WIDTH + 2)
    assert sp.score == 0 and sp.gap_length == 0
    assert sp.platform_height == 2 and sp.platform_length == START_PLATFORM_LENGTH


def test_first_fifteen_spawns_are_tier_two_terrain():
    sp = Spawner(seed=7)
    for i in range(15):
        tile = sp.spawn(6)
        assert tile is not None
        assert tile.kind == "grass"
        assert tile.x == WIDTH + PLATFORM_WIDTH % 6
        assert tile.y == PLATFORM_BASE - 2 * PLATFORM_SPACER
        assert sp.score == i + 1
    assert len(sp.platforms) == START_PLATFORM_COUNT + 15
    assert sp.environment == [] and sp.enemies == []
    assert sp.platform_length == 0

    # both counters exhausted -> reseed, nothing emitted
    assert sp.spawn(6) is None
    assert sp.score == 16
    assert 4 <= sp.gap_length <= 6
    assert 3 <= sp.platform_length <= 24
    assert 0 <= sp.platform_height <= 4


def test_counters_never_negative_and_terrain_keeps_coming():
    sp = Spawner(seed=3)
    streak = longest = 0
    for _ in range(3000):
        tile = sp.spawn(6)
        assert sp.gap_length >= 0 and sp.platform_length >= 0
        assert 0 <= sp.platform_height <= 4
        streak = 0 if tile is not None else streak + 1
        longest = max(longest, streak)
    # reseed step + at most `speed` gap slots between two terrain runs
    assert longest <= 7
    assert sp.score == 3000


def test_reset_replays_the_same_spawns():
    sp = Spawner(seed=2024)
    for _ in range(400):
        sp.spawn(9)
    first = snapshot(sp)
    sp.reset()
    assert sp.score == 0
    for _ in range(400):
        sp.spawn(9)
    assert snapshot(sp) == first


def test_missing_seed_is_frozen():
    sp = Spawner(seed=None)
    assert isinstance(sp.seed, int)
    a = [sp.spawn(6) for _ in range(50)]
    sp.reset()
    b = [sp.spawn(6) for _ in range(50)]
    assert [(t.x, t.y, t.kind) if t else None for t in a] == [(t.x, t.y, t.kind) if t else None for t in b]


@pytest.mark.parametrize("height, expected", [(2, {"grass"}), (3, {"bridge"}), (4, {"box"}),
                                              (0, {"grass1", "grass2"}), (1, {"grass1", "grass2"})])
def test_tile_type_by_tier(height, expected):
    sp = Spawner(seed=11)
    sp.platform_height = height
    sp.platform_length = 5
    kinds = {sp.tile_type() for _ in range(100)}
    assert kinds == expected


def test_cliff_only_ends_low_runs():
    sp = Spawner(seed=5)
    sp.platform_length = 1
    sp.platform_height = 2
    assert {sp.tile_type() for _ in range(200)} == {"grass"}
    sp.platform_height = 0
    kinds = {sp.tile_type() for _ in range(200)}
    assert "cliff" in kinds
    assert kinds <= {"grass1", "grass2", "cliff"}


def test_no_decorations_or_hazards_early():
    sp = Spawner(seed=8)
    for _ in range(40):
        sp.spawn(6)
    assert sp.environment == []
    for _ in range(60):
        sp.spawn(6)
    assert sp.enemies == []


def test_hazards_capped_and_on_top_of_terrain():
    sp = Spawner(seed=1)
    sp.score = 200
    sp.platform_length = 10_000
    for _ in range(500):
        sp.spawn(6)
        assert len(sp.enemies) <= MAX_ENEMIES
    assert len(sp.enemies) == MAX_ENEMIES
    for e in sp.enemies:
        assert e.kind in HAZARD_KINDS
        assert e.y == sp.surface_y() - PLATFORM_WIDTH


def test_no_hazard_near_the_end_of_a_run():
    sp = Spawner(seed=1)
    sp.score = 200
    for _ in range(500):
        sp.platform_length = 5
        sp.gap_length = 0
        sp.spawn(6)
    assert sp.enemies == []


def test_hazard_spacing_gate():
    sp = Spawner(seed=1)
    assert sp._hazard_spacing_ok()
    sp.enemies = [Sprite(x=WIDTH - 2 * PLATFORM_WIDTH, kind="spikes")]
    assert not sp._hazard_spacing_ok()
    sp.enemies = [Sprite(x=WIDTH - 3 * PLATFORM_WIDTH, kind="slime")]
    assert sp._hazard_spacing_ok()
    sp.enemies = [Sprite(x=WIDTH - 10, kind="slime")]
    assert sp._hazard_spacing_ok()


def test_decorations_only_on_low_terrain():
    sp = Spawner(seed=4)
    sp.score = 100
    sp.platform_height = 3
    sp.platform_length = 10_000
    for _ in range(500):
        sp.spawn(6)
    assert sp.environment == []

    sp.platform_height = 1
    for _ in range(500):
        sp.spawn(6)
    assert sp.environment
    kinds = [e.kind for e in sp.environment]
    assert set(kinds) <= {"plant", "bush1", "bush2"}
    for i, kind in enumerate(kinds):
        if kind == "bush1":
            bush2 = sp.environment[i + 1]
            assert bush2.kind == "bush2"
            assert bush2.x == sp.environment[i].x + PLATFORM_WIDTH


def test_short_runs_only_get_plants():
    sp = Spawner(seed=4)
    sp.score = 100
    sp.platform_height = 1
    for _ in range(500):
        # two tiles left once this one is emitted: too short for a bush pair
        sp.gap_length = 0
        sp.platform_length = 3
        sp.spawn(6)
    kinds = {e.kind for e in sp.environment}
    assert kinds == {"plant"}


def test_new_spawner_starts_from_the_reset_layout():
    sp = Spawner(seed=21)
    fresh = snapshot(sp)
    for _ in range(200):
        sp.spawn(6)
    sp.reset()
    assert snapshot(sp) == fresh
    assert len(sp.water) == math.ceil(WIDTH / PLATFORM_WIDTH + 2)


def test_backfill_never_drives_length_negative():
    sp = Spawner(seed=1)
    sp.platform_length = 0
    tile = sp.backfill(7)
    assert tile.kind in TERRAIN_KINDS
    assert tile.x == WIDTH + PLATFORM_WIDTH % 7
    assert sp.platform_length == 0


def test_prune_only_once_fully_off_screen():
    kept = [Sprite(x=-PLATFORM_WIDTH), Sprite(x=0)]
    assert Spawner.prune(kept) is None
    assert len(kept) == 2

    items = [Sprite(x=-PLATFORM_WIDTH - 1), Sprite(x=-PLATFORM_WIDTH - 5)]
    removed = Spawner.prune(items)
    assert removed is not None and removed.x == -PLATFORM_WIDTH - 1
    assert len(items) == 1  # one per call, oldest first

    assert Spawner.prune([]) is None


def test_recycle_water_keeps_the_strip_whole():
    sp = Spawner(seed=1)
    n = len(sp.water)
    first = sp.water[0]
    for tile in sp.water:
        tile.x -= 40
    sp.recycle_water()
    assert len(sp.water) == n
    assert sp.water[-1] is first
    assert first.x == sp.water[-2].x + PLATFORM_WIDTH


def test_unknown_sprite_kind_rejected():
    with pytest.raises(ValueError):
        Sprite(x=0, y=0, kind="lava")
