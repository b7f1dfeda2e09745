# src/game/surface.py
"""
Drawing surfaces the simulation renders into.

The simulation only ever calls draw_image / clear_rect / fill_text, so any
backend (a pygame window, an off-screen buffer, nothing at all for training)
can sit behind it.
"""
from __future__ import annotations
from typing import Any, Optional, Protocol, Tuple
import pygame
from .config import COLOR_BG, COLOR_FG

Clip = Tuple[int, int, int, int]


class DrawSurface(Protocol):
    def draw_image(self, image: Any, x: float, y: float, clip: Optional[Clip] = None) -> None: ...
    def clear_rect(self, x: float, y: float, w: float, h: float) -> None: ...
    def fill_text(self, text: str, x: float, y: float) -> None: ...


class NullSurface:
    """Headless surface: accepts every call and draws nothing."""

    def draw_image(self, image, x, y, clip=None):
        pass

    def clear_rect(self, x, y, w, h):
        pass

    def fill_text(self, text, x, y):
        pass


class PygameSurface:
    """Blits image handles (pygame.Surface) onto a target surface."""

    def __init__(self, target: pygame.Surface, font: Optional[pygame.font.Font] = None):
        self.target = target
        self.font = font

    def draw_image(self, image: pygame.Surface, x, y, clip=None):
        area = pygame.Rect(clip) if clip is not None else None
        self.target.blit(image, (int(x), int(y)), area)

    def clear_rect(self, x, y, w, h):
        self.target.fill(COLOR_BG, pygame.Rect(int(x), int(y), int(w), int(h)))

    def fill_text(self, text, x, y):
        if self.font is None:
            # font module is initialised on the first text draw
            if not pygame.font.get_init():
                pygame.font.init()
            self.font = pygame.font.SysFont("arial", 20)
        self.target.blit(self.font.render(text, True, COLOR_FG), (int(x), int(y)))
