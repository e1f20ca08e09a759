"""Splitting an image into square tiles and assembling rendered tiles."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

COLOR_CHANNELS = 4
"""Bytes per pixel (RGBA)."""


@dataclass(frozen=True)
class TileBounds:
    """Inclusive pixel bounds of a tile."""

    x_min: int
    y_min: int
    x_max: int
    y_max: int

    def pixels(self):
        """Yield ``(i, j, tx, ty)``: image and tile coordinates of each pixel."""
        for j in range(self.y_min, self.y_max + 1):
            for i in range(self.x_min, self.x_max + 1):
                yield i, j, i - self.x_min, j - self.y_min


def get_tile_count(tile_size: int, dimension: int) -> int:
    """Number of tiles of ``tile_size`` needed to cover ``dimension`` pixels."""
    return -(-dimension // tile_size)


def get_tile_bounds(
    tile_idx: int, tile_size: int, image_width: int, image_height: int
) -> TileBounds:
    """Bounds of a tile; tiles are counted row by row from the first row."""
    n_tiles_x = get_tile_count(tile_size, image_width)
    tile_x = tile_idx % n_tiles_x
    tile_y = tile_idx // n_tiles_x

    y_min = tile_y * tile_size
    y_max = min(y_min + tile_size - 1, image_height - 1)
    x_min = tile_x * tile_size
    x_max = min(x_min + tile_size - 1, image_width - 1)
    return TileBounds(x_min, y_min, x_max, y_max)


def _tile_offset(tx: int, ty: int, tile_size: int) -> int:
    return (ty * tile_size + tx) * COLOR_CHANNELS


def render_tile(
    trace: Callable[[int, int], bytes], bounds: TileBounds, tile_size: int
) -> bytearray:
    """Render a tile with ``trace(i, j)`` returning RGBA bytes per pixel."""
    tile = bytearray(tile_size * tile_size * COLOR_CHANNELS)
    for i, j, tx, ty in bounds.pixels():
        offset = _tile_offset(tx, ty, tile_size)
        tile[offset : offset + COLOR_CHANNELS] = trace(i, j)
    return tile


def copy_tile(
    image: bytearray,
    tile_pixels: bytes,
    bounds: TileBounds,
    tile_size: int,
    image_width: int,
    image_height: int,
) -> None:
    """Copy a rendered tile into ``image``, flipping it upside down."""
    for i, j, tx, ty in bounds.pixels():
        src = _tile_offset(tx, ty, tile_size)
        dst = ((image_height - j - 1) * image_width + i) * COLOR_CHANNELS
        image[dst : dst + COLOR_CHANNELS] = tile_pixels[src : src + COLOR_CHANNELS]