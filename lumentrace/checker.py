"""A three dimensional checkerboard texture."""

from __future__ import annotations

import math

from .aabb import Vector
from .texture import Texture


class Checker(Texture):
    """Alternates between two textures in a 3-D checkerboard pattern."""

    def __init__(self, odd: Texture, even: Texture, scale: float = 10.0) -> None:
        self.odd = odd
        self.even = even
        self.scale = scale

    def __str__(self) -> str:
        return f"checker(odd: {self.odd}, even: {self.even}"

    def value(self, u: float, v: float, p: Vector) -> Vector:
        """Colour of ``odd`` where the sine product is negative, else ``even``."""
        sines = math.prod(math.sin(c * self.scale) for c in p)
        if sines < 0.0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)