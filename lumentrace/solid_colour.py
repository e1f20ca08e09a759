"""A texture of a single colour."""

from __future__ import annotations

from dataclasses import dataclass

from .aabb import Vector
from .texture import Texture


@dataclass(frozen=True)
class SolidColour(Texture):
    """A texture that has the same colour everywhere."""

    colour_value: Vector

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> SolidColour:
        """Build a solid colour from red, green and blue components."""
        return cls((r, g, b))

    def __str__(self) -> str:
        return f"solid_colour(colour_value: {self.colour_value}"

    def value(self, u: float, v: float, p: Vector) -> Vector:
        """Return the stored colour whatever the coordinates."""
        return self.colour_value