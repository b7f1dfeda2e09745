# src/game/simulation.py
from __future__ import annotations
import math
from typing import Callable, List, Mapping, Optional
from .config import (
    WIDTH, HEIGHT, PLAYER_START_X, PLAYER_START_Y, START_SPEED, MAX_SPEED,
    PLATFORM_WIDTH, SPEEDUP_FACTOR, LANDING_ANGLE_MIN, LANDING_ANGLE_MAX, LANDING_SINK,
    SCORE_TEXT_X, SCORE_TEXT_Y, SEED_DEFAULT, DEBUG_LOG
)
from .assets import Assets
from .background import Background
from .level import Spawner
from .player import Player
from .surface import NullSurface

IDLE = "idle"
RUNNING = "running"
GAME_OVER = "game_over"


class Simulation:
    """
    The endless-run frame loop plus its state machine:
        idle -> running -> game_over -> (start_game) -> running

    One call to tick() is one display frame. Sub-steps always run in the same
    order: background, water, environment, player, platforms, enemies, spawn,
    speed escalation. A tick on a non-running simulation is a no-op, which is
    how the outer loop knows to stop scheduling.
    """

    def __init__(self, surface=None, assets: Optional[Assets] = None, seed: int | None = SEED_DEFAULT):
        self.surface = surface if surface is not None else NullSurface()
        self.assets = assets if assets is not None else Assets.headless()
        self.spawner = Spawner(seed)
        self.background = Background()
        self.player = self._new_player()
        self.state = IDLE
        self.ticker = 0
        self.death_cause: Optional[str] = None   # "fall" | "enemy" | None
        self._listeners: List[Callable[[int], None]] = []

    # -------------------- Lifecycle --------------------

    @property
    def seed(self) -> int:
        return self.spawner.seed

    @property
    def score(self) -> int:
        return self.spawner.score

    @property
    def running(self) -> bool:
        return self.state == RUNNING

    @property
    def spawn_interval(self) -> int:
        """Ticks between spawn steps; shrinks as speed grows so terrain density stays constant."""
        return max(1, PLATFORM_WIDTH // max(1, self.player.speed))

    def add_game_over_listener(self, callback: Callable[[int], None]):
        self._listeners.append(callback)

    def _new_player(self) -> Player:
        player = Player(x=float(PLAYER_START_X), y=float(PLAYER_START_Y))
        player.set_speed(START_SPEED)
        return player

    def start_game(self):
        """Reset every collection and the difficulty state, then begin running."""
        self.spawner.reset()
        self.background.reset()
        self.player = self._new_player()
        self.ticker = 0
        self.death_cause = None
        self.state = RUNNING

        sounds = self.assets.sounds
        sounds["game_over"].pause()
        sounds["bg"].current_time = 0
        sounds["bg"].play()

    restart = start_game

    def game_over(self, cause: str):
        if self.state != RUNNING:
            return
        self.state = GAME_OVER
        self.death_cause = cause

        sounds = self.assets.sounds
        sounds["bg"].pause()
        sounds["game_over"].current_time = 0
        sounds["game_over"].play()

        if DEBUG_LOG:
            print(f"[GAME OVER] cause={cause} score={self.score} speed={self.player.speed} seed={self.seed}")
        for callback in self._listeners:
            callback(self.score)

    # -------------------- Frame --------------------

    def tick(self, keys: Optional[Mapping[str, bool]] = None) -> bool:
        """Advance one frame. Returns False (and does nothing) unless running."""
        if self.state != RUNNING:
            return False
        jump = bool(keys.get("jump", False)) if keys else False

        self.surface.clear_rect(0, 0, WIDTH, HEIGHT)
        self.background.draw(self.surface, self.assets.images)

        self._update_water()
        self._update_environment()
        if not self._update_player(jump):
            return True
        self._update_platforms()
        if not self._update_enemies():
            return True

        self.surface.fill_text(f"Score: {self.score}m", SCORE_TEXT_X, SCORE_TEXT_Y)

        if self.ticker % self.spawn_interval == 0:
            self.spawner.spawn(self.player.speed)

        self._maybe_speed_up()
        self.ticker += 1
        return True

    def _update_water(self):
        for tile in self.spawner.water:
            tile.update(self.player.speed)
            tile.draw(self.surface, self.assets.images)
        self.spawner.recycle_water()

    def _update_environment(self):
        for sprite in self.spawner.environment:
            sprite.update(self.player.speed)
            sprite.draw(self.surface, self.assets.images)
        self.spawner.prune(self.spawner.environment)

    def _update_player(self, jump: bool) -> bool:
        if self.player.update(jump):
            self.assets.sounds["jump"].play()
        self.player.draw(self.surface, self.assets.images["avatar_normal"])

        if self.player.bottom_reached(HEIGHT):
            self.game_over("fall")
            return False
        return True

    def _landing_on(self, platform) -> bool:
        player = self.player
        if player.min_distance(platform) > player.height / 2 + platform.height / 2:
            return False
        angle = math.degrees(math.atan2(player.y - platform.y, player.x - platform.x))
        return LANDING_ANGLE_MIN < angle < LANDING_ANGLE_MAX

    def _update_platforms(self):
        # assume no support until a platform proves otherwise
        self.player.is_falling = True
        for platform in self.spawner.platforms:
            platform.update(self.player.speed)
            platform.draw(self.surface, self.assets.images)
            if self._landing_on(platform):
                self.player.land_on(platform.y, sink=LANDING_SINK)
        self.spawner.prune(self.spawner.platforms)

    def _update_enemies(self) -> bool:
        threshold = self.player.width - PLATFORM_WIDTH / 2
        for enemy in self.spawner.enemies:
            enemy.update(self.player.speed)
            enemy.draw(self.surface, self.assets.images)
            if self.player.min_distance(enemy) <= threshold:
                self.game_over("enemy")
                return False
        self.spawner.prune(self.spawner.enemies)
        return True

    def _maybe_speed_up(self):
        """Escalate speed while airborne. Mid-run, add a tile so the faster spacing leaves no hole."""
        interval = self.spawn_interval
        if self.ticker > interval * self.player.speed * SPEEDUP_FACTOR and self.player.dy != 0:
            self.player.set_speed(min(self.player.speed + 1, MAX_SPEED))
            self.ticker = 0
            if DEBUG_LOG:
                print(f"[SPEED] {self.player.speed} at score={self.score}")
            if self.spawner.gap_length == 0:
                self.spawner.backfill(self.player.speed)
