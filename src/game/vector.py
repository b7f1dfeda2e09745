# src/game/vector.py
from __future__ import annotations
import math
from dataclasses import dataclass
import numpy as np


@dataclass
class Vector:
    """
    Position (top-left) + per-frame delta. Boxes carry width/height so the
    distance helpers can work on centres.
    """
    x: float = 0.0
    y: float = 0.0
    dx: float = 0.0
    dy: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def center(self) -> tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2

    def advance(self):
        """Move by (dx, dy). No clamping here, callers bound positions."""
        self.x += self.dx
        self.y += self.dy

    def min_distance(self, other: "Vector") -> float:
        """
        Approximate the smallest centre-to-centre distance while both boxes
        travel their deltas over one step. The step is sampled at 1/max(|d|)
        increments of t in [0, 1), so faster movers get finer sampling.
        """
        ax, ay = self.center
        bx, by = other.center

        fastest = max(abs(self.dx), abs(self.dy), abs(other.dx), abs(other.dy))
        if fastest == 0:
            return math.hypot(ax - bx, ay - by)

        t = np.arange(0.0, 1.0, 1.0 / fastest)
        x = (ax + self.dx * t) - (bx + other.dx * t)
        y = (ay + self.dy * t) - (by + other.dy * t)
        return float(np.sqrt(np.min(x * x + y * y)))
