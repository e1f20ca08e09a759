"""Rays and axis aligned bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass

Vector = tuple[float, float, float]


def _fmt(v) -> str:
    return "(" + ", ".join(str(c) for c in v) + ")"


@dataclass(frozen=True)
class Ray:
    """A ray with an origin, a direction and a time of emission."""

    origin: Vector
    direction: Vector
    time: float = 0.0

    def at(self, t: float) -> Vector:
        """Return the point at parameter ``t`` along the ray."""
        return tuple(o + t * d for o, d in zip(self.origin, self.direction))

    def __str__(self) -> str:
        return f"ray(origin: {_fmt(self.origin)}, direction: {_fmt(self.direction)}, time: {self.time})"


def _inverse(d: float) -> float:
    if d == 0.0:
        return math.copysign(math.inf, d)
    return 1.0 / d


@dataclass(frozen=True)
class AABB:
    """An axis aligned bounding box given by its minimum and maximum corners."""

    min: Vector
    max: Vector

    def __str__(self) -> str:
        return f"aabb(min: {_fmt(self.min)}, max: {_fmt(self.max)})"

    @staticmethod
    def surrounding_box(box0: AABB, box1: AABB) -> AABB:
        """Return the smallest box that encloses both boxes."""
        small = tuple(min(a, b) for a, b in zip(box0.min, box1.min))
        big = tuple(max(a, b) for a, b in zip(box0.max, box1.max))
        return AABB(small, big)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> bool:
        """Return True if the ray crosses the box within ``(t_min, t_max)``."""
        for lo, hi, origin, direction in zip(self.min, self.max, ray.origin, ray.direction):
            inv_d = _inverse(direction)
            t0 = (lo - origin) * inv_d
            t1 = (hi - origin) * inv_d
            if inv_d < 0.0:
                t0, t1 = t1, t0
            tmin = t0 if t0 > t_min else t_min
            tmax = t1 if t1 < t_max else t_max
            if tmax <= tmin:
                return False
        return True