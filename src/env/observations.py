# src/env/observations.py
from __future__ import annotations
from typing import Iterable, List, Optional, Tuple
import numpy as np

from src.game.config import HEIGHT, PLAYER_H, MAX_DY, MAX_SPEED, PLATFORM_WIDTH

# Probe positions ahead of the player's left edge (world space, px)
PROBE_OFFSETS: Tuple[int, int, int] = (96, 192, 288)
# Horizontal window around a probe x within which a hazard counts as "near"
HAZARD_WINDOW_PX: int = PLATFORM_WIDTH // 2
OBS_SIZE = 3 + 2 * len(PROBE_OFFSETS)


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else (1.0 if x > 1.0 else x)

def _norm_top_y(y_top: float) -> float:
    """Normalize the player's top coordinate into [0,1] using [0, HEIGHT-PLAYER_H]."""
    return _clamp01(y_top / max(1, HEIGHT - PLAYER_H))

def _norm_dy(dy: float, dy_max: float = MAX_DY) -> float:
    """Clip dy to [-dy_max, dy_max] and scale to [-1,1]."""
    vv = max(-dy_max, min(dy, dy_max))
    return vv / dy_max

def floor_at_x(platforms: Iterable, x: float) -> Optional[float]:
    """Top of the highest terrain tile covering x, None over a gap."""
    floor_y: Optional[float] = None
    for p in platforms:
        if p.x <= x < p.x + p.width:
            floor_y = p.y if (floor_y is None or p.y < floor_y) else floor_y
    return floor_y

def hazard_near_x(enemies: Iterable, x: float, window_px: int = HAZARD_WINDOW_PX) -> int:
    for e in enemies:
        if abs((e.x + e.width / 2) - x) <= window_px:
            return 1
    return 0

def build_observation(sim, probe_offsets: Tuple[int, ...] = PROBE_OFFSETS) -> np.ndarray:
    """
    Returns a fixed (9,) float32 vector:
      [ y_top_norm, dy_norm, speed_norm,
        floor@96, hazard@96,
        floor@192, hazard@192,
        floor@288, hazard@288 ]
    - floor is the tile top over HEIGHT, sentinel 1.0 when the probe is over a gap
    - hazard flags are 0.0/1.0
    """
    player = sim.player
    spawner = sim.spawner

    feats: List[float] = [
        _norm_top_y(float(player.y)),
        _norm_dy(float(player.dy)),
        _clamp01(player.speed / float(MAX_SPEED)),
    ]

    for dx in probe_offsets:
        px = player.x + dx
        floor_y = floor_at_x(spawner.platforms, px)
        floor_norm = 1.0 if floor_y is None else _clamp01(floor_y / float(HEIGHT))
        feats.extend([floor_norm, float(hazard_near_x(spawner.enemies, px))])

    return np.asarray(feats, dtype=np.float32)
