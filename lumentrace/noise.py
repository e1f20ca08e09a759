"""A marble-like texture driven by Perlin turbulence."""

from __future__ import annotations

import math
import random as _random

from .aabb import Vector
from .perlin import Perlin
from .texture import Texture


class Noise(Texture):
    """A grey marble texture whose grain runs along ``axis``."""

    def __init__(
        self,
        scale: float,
        turbulence_depth: int,
        turbulence_size: float,
        grid_size: int,
        axis: int,
        rng: _random.Random | None = None,
    ) -> None:
        self.perlin = Perlin(grid_size, rng)
        self.scale = scale
        self.turbulence_depth = turbulence_depth
        self.turbulence_size = turbulence_size
        self.axis = int(axis)

    def __str__(self) -> str:
        return f"noise(perlin: {self.perlin})"

    def value(self, u: float, v: float, p: Vector) -> Vector:
        """Grey level from a sine of the axis coordinate perturbed by turbulence."""
        turb = self.turbulence_size * self.perlin.turbulence(p, self.turbulence_depth)
        phase = self.scale * p[self.axis]
        level = 0.5 * (1.0 + math.sin(phase + turb))
        return (level, level, level)