"""Perlin gradient noise."""

from __future__ import annotations

import math
import random as _random
from itertools import product

from .aabb import Vector

_INDEX_MAX = 2**64 - 1


def _lattice_index(f: float) -> int:
    """Convert a floored coordinate to an unsigned lattice index, saturating."""
    if math.isnan(f) or f <= 0.0:
        return 0
    if f >= _INDEX_MAX:
        return _INDEX_MAX
    return int(f)


def _split(c: float) -> tuple[float, int]:
    """Return the fractional part and lattice index of a coordinate."""
    f = float(math.floor(c)) if math.isfinite(c) else c
    return c - f, _lattice_index(f)


def _smooth(t: float) -> float:
    return t * t * (3.0 - 2.0 * t)


def _unit_vector(v: Vector) -> Vector:
    length = math.sqrt(sum(c * c for c in v))
    return tuple(c / length for c in v)


class Perlin:
    """A Perlin noise generator over a lattice of random unit gradients."""

    def __init__(self, size: int = 256, rng: _random.Random | None = None) -> None:
        rng = rng if rng is not None else _random.Random()
        self.random = [
            _unit_vector(tuple(rng.uniform(-1.0, 1.0) for _ in range(3))) for _ in range(size)
        ]
        self.perm_x = self._permutation(size, rng)
        self.perm_y = self._permutation(size, rng)
        self.perm_z = self._permutation(size, rng)

    @staticmethod
    def _permutation(n: int, rng: _random.Random) -> list[int]:
        perm = list(range(n))
        rng.shuffle(perm)
        return perm

    def __str__(self) -> str:
        return (
            f"Perlin {{ random: {self.random}, perm_x: {self.perm_x}, "
            f"perm_y: {self.perm_y}, perm_z: {self.perm_z} }}"
        )

    def noise(self, p: Vector) -> float:
        """Evaluate the noise function at point ``p``."""
        (u, i), (v, j), (w, k) = (_split(c) for c in p)
        uu, vv, ww = _smooth(u), _smooth(v), _smooth(w)

        accum = 0.0
        for di, dj, dk in product((0, 1), repeat=3):
            x = self.perm_x[(i + di) & 255]
            y = self.perm_y[(j + dj) & 255]
            z = self.perm_z[(k + dk) & 255]
            gradient = self.random[x ^ y ^ z]
            weight_v = (u - di, v - dj, w - dk)
            accum += (
                (di * uu + (1 - di) * (1.0 - uu))
                * (dj * vv + (1 - dj) * (1.0 - vv))
                * (dk * ww + (1 - dk) * (1.0 - ww))
                * sum(g * c for g, c in zip(gradient, weight_v))
            )
        return accum

    def turbulence(self, p: Vector, depth: int) -> float:
        """Sum ``depth`` octaves of noise, each at double frequency and half weight."""
        accum = 0.0
        point = tuple(p)
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(point)
            weight *= 0.5
            point = tuple(c * 2.0 for c in point)
        return abs(accum)