"""A texture sampled from an image file."""

from __future__ import annotations

import math
from os import PathLike

from PIL import Image

from .aabb import Vector
from .texture import Texture

COLOUR_SCALE = 1.0 / 255.0


def _clamp(x: float, lo: float, hi: float) -> float:
    if x < lo:
        return lo
    if x > hi:
        return hi
    return x


def _pixel_index(x: float) -> int:
    """Truncate to an unsigned pixel index; NaN and negatives become 0."""
    if math.isnan(x) or x <= 0.0:
        return 0
    return int(x)


class ImageTexture(Texture):
    """Maps ``(u, v)`` in the unit square onto the pixels of an RGB image."""

    def __init__(self, image: Image.Image) -> None:
        self._image = image.convert("RGB")
        self.width, self.height = self._image.size

    @classmethod
    def open(cls, path: str | PathLike) -> ImageTexture:
        """Load an image file; raises OSError if it cannot be read."""
        try:
            with Image.open(path) as img:
                rgb = img.convert("RGB")
        except OSError as exc:
            raise OSError(f"Unable to open {path}") from exc
        return cls(rgb)

    def __str__(self) -> str:
        return f"Image {{ width: {self.width}, height: {self.height} }}"

    def value(self, u: float, v: float, p: Vector) -> Vector:
        """Colour of the pixel at ``(u, v)``, with ``v`` growing upwards."""
        u = _clamp(u, 0.0, 1.0)
        v = 1.0 - _clamp(v, 0.0, 1.0)
        i = min(_pixel_index(u * self.width), self.width - 1)
        j = min(_pixel_index(v * self.height), self.height - 1)
        r, g, b = self._image.getpixel((i, j))
        return (r * COLOUR_SCALE, g * COLOUR_SCALE, b * COLOUR_SCALE)