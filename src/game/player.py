# src/game/player.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from .config import (
    PLAYER_W, PLAYER_H, GRAVITY, JUMP_DY, JUMP_HOLD_FRAMES, START_SPEED,
    MAX_SPEED, PLAYER_SHEET_COLS, ANIM_FRAME_SPEED, PLATFORM_WIDTH
)
from .vector import Vector


class Animation:
    """Loops over frames start..end of a sprite sheet, one step every `frame_speed` updates."""

    def __init__(self, frame_speed: int, start: int, end: int):
        self.frame_speed = max(1, int(frame_speed))
        self.sequence: List[int] = list(range(start, end + 1))
        self.current = 0
        self._counter = 0

    @property
    def frame(self) -> int:
        return self.sequence[self.current]

    def update(self):
        if self._counter >= self.frame_speed - 1:
            self.current = (self.current + 1) % len(self.sequence)
        self._counter = (self._counter + 1) % self.frame_speed

    def clip(self, frame_w: int, frame_h: int, cols: int = PLAYER_SHEET_COLS) -> Tuple[int, int, int, int]:
        """Source rect (x, y, w, h) of the current frame inside the sheet."""
        row, col = divmod(self.frame, cols)
        return col * frame_w, row * frame_h, frame_w, frame_h


@dataclass
class Player(Vector):
    """
    Auto-running avatar. x stays fixed, the world scrolls by `speed`.
    - is_jumping: a jump started and we have not landed yet
    - is_falling: no platform supported us this frame (set by the simulation)
    """
    width: float = PLAYER_W
    height: float = PLAYER_H
    speed: int = START_SPEED
    gravity: float = GRAVITY
    jump_dy: float = JUMP_DY
    is_jumping: bool = False
    is_falling: bool = False
    jump_counter: int = 0
    walk_anim: Animation = field(default_factory=lambda: Animation(ANIM_FRAME_SPEED, 0, 15))
    jump_anim: Animation = field(default_factory=lambda: Animation(ANIM_FRAME_SPEED, 15, 15))
    fall_anim: Animation = field(default_factory=lambda: Animation(ANIM_FRAME_SPEED, 11, 11))
    anim: Optional[Animation] = None

    def __post_init__(self):
        if self.anim is None:
            self.anim = self.walk_anim

    @property
    def pose(self) -> str:
        if self.dy < 0:
            return "jump"
        if self.dy > 0:
            return "fall"
        return "walk"

    @property
    def airborne(self) -> bool:
        return self.is_jumping or self.is_falling

    def update(self, jump_pressed: bool) -> bool:
        """One frame of jump input + vertical physics. Returns True when a jump starts."""
        jumped = False
        if jump_pressed and self.dy == 0 and not self.is_jumping and not self.is_falling:
            self.is_jumping = True
            self.dy = self.jump_dy
            self.jump_counter = JUMP_HOLD_FRAMES
            jumped = True

        # holding the button keeps lifting until the hold budget runs out
        if jump_pressed and self.jump_counter > 0:
            self.dy = self.jump_dy

        self.jump_counter = max(self.jump_counter - 1, 0)

        self.advance()

        if self.airborne:
            self.dy += self.gravity

        self.anim = {"jump": self.jump_anim, "fall": self.fall_anim}.get(self.pose, self.walk_anim)
        self.anim.update()
        return jumped

    def land_on(self, top_y: float, sink: float = 0.0):
        """Rest the player's feet on a surface whose top is at `top_y`."""
        self.y = top_y - self.height + sink
        self.dy = 0
        self.is_jumping = False
        self.is_falling = False

    def set_speed(self, speed: int):
        """Clamp speed to [0, MAX_SPEED] and keep the run cycle in step with it."""
        self.speed = max(0, min(int(speed), MAX_SPEED))
        self.walk_anim.frame_speed = max(1, PLATFORM_WIDTH // max(1, self.speed) - 1)

    def bottom_reached(self, bottom: float) -> bool:
        return self.y + self.height >= bottom

    def draw(self, surface, image):
        surface.draw_image(image, self.x, self.y,
                           clip=self.anim.clip(int(self.width), int(self.height)))
