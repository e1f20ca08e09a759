"""The interface shared by every object a ray can intersect."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from .aabb import AABB, Ray, Vector
from .hit_record import HitRecord


class Hittable(ABC):
    """A geometric object that can be intersected by rays."""

    @abstractmethod
    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        """Return the intersection within ``(t_min, t_max)``, or None."""

    @abstractmethod
    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        """Return a box enclosing the object over ``[time0, time1]``, or None."""

    def pdf_value(self, origin: Vector, v: Vector) -> float:
        """Density of sampling direction ``v`` from ``origin`` towards the object."""
        return 0.0

    def random(self, origin: Vector) -> Vector:
        """Return a random direction from ``origin`` towards the object."""
        return (1.0, 0.0, 0.0)


def get_sphere_uv(p: Vector) -> tuple[float, float]:
    """Return ``(u, v)`` coordinates of a point on the unit sphere at the origin."""
    x, y, z = p
    phi = math.atan2(z, x)
    theta = math.asin(y)
    return 1.0 - (phi + math.pi) / (2.0 * math.pi), (theta + math.pi / 2.0) / math.pi