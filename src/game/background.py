# src/game/background.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List
from .config import WIDTH, PARALLAX_SPEEDS


@dataclass
class ParallaxLayer:
    name: str      # image handle name
    speed: float   # px/frame, independent of the player's speed
    x: float = 0.0
    y: float = 0.0
    width: float = WIDTH


class Background:
    """Static backdrop plus layers that pan at their own speeds and loop seamlessly."""

    def __init__(self):
        self.layers: List[ParallaxLayer] = [ParallaxLayer(name, speed) for name, speed in PARALLAX_SPEEDS]

    def reset(self):
        for layer in self.layers:
            layer.x = 0.0
            layer.y = 0.0

    def draw(self, surface, images):
        surface.draw_image(images["bg"], 0, 0)
        for layer in self.layers:
            layer.x -= layer.speed
            # two copies side by side so the seam never shows
            surface.draw_image(images[layer.name], layer.x, layer.y)
            surface.draw_image(images[layer.name], layer.x + WIDTH, layer.y)
            if layer.x + layer.width <= 0:
                layer.x = 0.0
