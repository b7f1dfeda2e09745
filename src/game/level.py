# src/game/level.py
from __future__ import annotations
import math
import random
from dataclasses import dataclass
from typing import List, Optional
from .config import (
    WIDTH, PLATFORM_WIDTH, PLATFORM_BASE, PLATFORM_SPACER, MAX_PLATFORM_HEIGHT,
    START_PLATFORM_HEIGHT, START_PLATFORM_LENGTH, START_GAP_LENGTH,
    START_PLATFORM_COUNT, START_PLATFORM_STEP,
    ENV_MIN_SCORE, ENV_ROLL, ENEMY_MIN_SCORE, ENEMY_CHANCE, MAX_ENEMIES, ENEMY_MIN_RUN
)
from .vector import Vector

TERRAIN_KINDS = ("grass", "grass1", "grass2", "bridge", "box", "cliff")
DECOR_KINDS = ("plant", "bush1", "bush2")
HAZARD_KINDS = ("spikes", "slime")
SPRITE_KINDS = TERRAIN_KINDS + DECOR_KINDS + HAZARD_KINDS + ("water",)


def bound(num: int, low: int, high: int) -> int:
    return max(min(num, high), low)


@dataclass
class Sprite(Vector):
    """Passive scenery tile (terrain, water, decoration or hazard) scrolling with the world."""
    width: float = PLATFORM_WIDTH
    height: float = PLATFORM_WIDTH
    kind: str = "grass"

    def __post_init__(self):
        if self.kind not in SPRITE_KINDS:
            raise ValueError(f"Unknown sprite kind: {self.kind!r}")

    @property
    def right(self) -> float:
        return self.x + self.width

    def update(self, speed: float):
        self.dx = -speed
        self.advance()

    def draw(self, surface, images):
        surface.draw_image(images[self.kind], self.x, self.y)


class Spawner:
    """
    Procedural terrain for the endless run. Owns the difficulty counters and
    every scenery collection; the simulation scrolls them, we append on the
    right and prune on the left.
    Collections are ordered oldest-first, which is also left-to-right.
    """
    def __init__(self, seed: int | None):
        if seed is None:
            seed = random.randrange(0, 2**32 - 1)
        self.seed = seed
        self.reset()

    def reset(self):
        """Back to the opening layout. Reseeding makes every run with this seed identical."""
        self.rng = random.Random(self.seed)
        self.platform_height = START_PLATFORM_HEIGHT
        self.platform_length = START_PLATFORM_LENGTH
        self.gap_length = START_GAP_LENGTH
        self.score = 0
        self.environment: List[Sprite] = []
        self.enemies: List[Sprite] = []
        self.platforms: List[Sprite] = [
            Sprite(x=i * START_PLATFORM_STEP, y=self.surface_y(), kind="grass")
            for i in range(START_PLATFORM_COUNT)
        ]
        water_tiles = math.ceil(WIDTH / PLATFORM_WIDTH + 2)
        self.water: List[Sprite] = [
            Sprite(x=i * PLATFORM_WIDTH, y=PLATFORM_BASE, kind="water")
            for i in range(water_tiles)
        ]

    # --- geometry ---

    def surface_y(self) -> float:
        """Top of a terrain tile at the current height tier."""
        return PLATFORM_BASE - self.platform_height * PLATFORM_SPACER

    @staticmethod
    def spawn_x(speed: int) -> float:
        return WIDTH + PLATFORM_WIDTH % max(1, speed)

    def _rand(self, low: int, high: int) -> int:
        # inclusive on both ends; tolerate an inverted range at very low speeds
        if high < low:
            low, high = high, low
        return self.rng.randint(low, high)

    # --- policy ---

    def tile_type(self) -> str:
        """Terrain kind for the current tier; the last tile of a low run may become a cliff edge."""
        if self.platform_height <= 1:
            kind = "grass1" if self.rng.random() > 0.5 else "grass2"
        elif self.platform_height == 2:
            kind = "grass"
        elif self.platform_height == 3:
            kind = "bridge"
        else:
            kind = "box"

        if self.platform_length == 1 and self.platform_height < 2 and self._rand(0, 3) == 0:
            kind = "cliff"
        return kind

    def spawn(self, speed: int) -> Optional[Sprite]:
        """
        One spawn step, evaluated in order: gap, terrain (+ decorations, + hazard),
        or reseed the counters. Returns the terrain tile emitted, if any.
        """
        self.score += 1

        if self.gap_length > 0:
            self.gap_length -= 1
            return None

        if self.platform_length > 0:
            tile = self._emit_platform(speed)
            self.spawn_environment(speed)
            self.spawn_enemy(speed)
            return tile

        self.gap_length = max(0, self._rand(speed - 2, speed))
        self.platform_height = bound(
            self._rand(0, self.platform_height + self._rand(0, 2)), 0, MAX_PLATFORM_HEIGHT
        )
        self.platform_length = max(0, self._rand(speed // 2, speed * 4))
        return None

    def backfill(self, speed: int) -> Sprite:
        """Emit a tile right away so a speed change does not open an unfair gap."""
        return self._emit_platform(speed)

    def _emit_platform(self, speed: int) -> Sprite:
        tile = Sprite(x=self.spawn_x(speed), y=self.surface_y(), kind=self.tile_type())
        self.platforms.append(tile)
        self.platform_length = max(0, self.platform_length - 1)
        return tile

    def spawn_environment(self, speed: int):
        if not (self.score > ENV_MIN_SCORE and self._rand(0, ENV_ROLL) == 0
                and self.platform_height < 3):
            return
        x = self.spawn_x(speed)
        y = self.surface_y() - PLATFORM_WIDTH
        if self.rng.random() > 0.5:
            self.environment.append(Sprite(x=x, y=y, kind="plant"))
        elif self.platform_length > 2:
            self.environment.append(Sprite(x=x, y=y, kind="bush1"))
            self.environment.append(Sprite(x=x + PLATFORM_WIDTH, y=y, kind="bush2"))

    def _hazard_spacing_ok(self) -> bool:
        # either far enough ahead of the last hazard or practically on top of it
        if not self.enemies:
            return True
        ahead = WIDTH - self.enemies[-1].x
        return ahead >= PLATFORM_WIDTH * 3 or ahead < PLATFORM_WIDTH

    def spawn_enemy(self, speed: int):
        if (self.score > ENEMY_MIN_SCORE and self.rng.random() > ENEMY_CHANCE
                and len(self.enemies) < MAX_ENEMIES and self.platform_length > ENEMY_MIN_RUN
                and self._hazard_spacing_ok()):
            kind = "spikes" if self.rng.random() > 0.5 else "slime"
            self.enemies.append(Sprite(
                x=self.spawn_x(speed),
                y=self.surface_y() - PLATFORM_WIDTH,
                kind=kind
            ))

    # --- housekeeping ---

    @staticmethod
    def prune(items: List[Sprite]) -> Optional[Sprite]:
        """Drop the oldest entry once it is fully past the left edge."""
        if items and items[0].x < -PLATFORM_WIDTH:
            return items.pop(0)
        return None

    def recycle_water(self):
        """Move the off-screen water tile to the back so the strip never ends."""
        if self.water and self.water[0].x < -PLATFORM_WIDTH:
            tile = self.water.pop(0)
            tile.x = self.water[-1].x + PLATFORM_WIDTH if self.water else 0
            self.water.append(tile)
