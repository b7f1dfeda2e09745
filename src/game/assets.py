# src/game/assets.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict
import pygame
from .config import PLATFORM_WIDTH, PLAYER_W, PLAYER_H, PLAYER_SHEET_COLS, WIDTH, HEIGHT, SPRITE_COLORS

IMAGE_NAMES = tuple(SPRITE_COLORS.keys())
SOUND_NAMES = ("bg", "jump", "game_over")


class SilentSound:
    """Sound handle with the play/pause/current_time contract and no audio output."""

    def __init__(self):
        self.current_time = 0.0
        self.playing = False
        self.play_count = 0

    def play(self):
        self.playing = True
        self.play_count += 1

    def pause(self):
        self.playing = False


@dataclass
class Assets:
    images: Dict[str, Any] = field(default_factory=dict)
    sounds: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def headless(cls) -> "Assets":
        """Image handles are just their names; nothing is ever blitted."""
        return cls(
            images={name: name for name in IMAGE_NAMES},
            sounds={name: SilentSound() for name in SOUND_NAMES},
        )


def _image_size(name: str):
    if name in ("bg", "sky", "backdrop", "backdrop2"):
        return WIDTH, HEIGHT
    if name == "avatar_normal":
        # 16 frames on a PLAYER_SHEET_COLS-wide grid
        rows = -(-16 // PLAYER_SHEET_COLS)
        return PLAYER_W * PLAYER_SHEET_COLS, PLAYER_H * rows
    return PLATFORM_WIDTH, PLATFORM_WIDTH


def _placeholder(name: str) -> pygame.Surface:
    w, h = _image_size(name)
    color = SPRITE_COLORS[name]
    if name in ("sky", "backdrop", "backdrop2"):
        # parallax strips: transparent except for a band, so lower layers show through
        surf = pygame.Surface((w, h), pygame.SRCALPHA)
        band_top = {"sky": 40, "backdrop": h // 2, "backdrop2": h - 140}[name]
        pygame.draw.rect(surf, color, pygame.Rect(0, band_top, w, 60))
        for bx in range(0, w, 160):
            pygame.draw.rect(surf, color, pygame.Rect(bx, band_top - 30, 80, 30))
        return surf
    surf = pygame.Surface((w, h), pygame.SRCALPHA)
    if name == "avatar_normal":
        for i in range(16):
            row, col = divmod(i, PLAYER_SHEET_COLS)
            r = pygame.Rect(col * PLAYER_W, row * PLAYER_H, PLAYER_W, PLAYER_H)
            pygame.draw.rect(surf, color, r.inflate(-8, -4), border_radius=8)
        return surf
    if name == "spikes":
        pygame.draw.polygon(surf, color, ((0, h), (w // 2, 0), (w, h)))
        return surf
    pygame.draw.rect(surf, color, surf.get_rect())
    return surf


def placeholder_assets() -> Assets:
    """Coloured stand-ins for every image the simulation references, silent sounds."""
    return Assets(
        images={name: _placeholder(name) for name in IMAGE_NAMES},
        sounds={name: SilentSound() for name in SOUND_NAMES},
    )
