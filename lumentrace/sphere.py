"""A sphere that rays can intersect."""

from __future__ import annotations

import math
from typing import Any

from .aabb import AABB, Ray, Vector
from .hit_record import HitRecord
from .hittable import Hittable, get_sphere_uv

_RAY_EPSILON = 0.001


def _sub(a: Vector, b: Vector) -> Vector:
    return tuple(x - y for x, y in zip(a, b))


def _dot(a: Vector, b: Vector) -> float:
    return sum(x * y for x, y in zip(a, b))


def _sphere_uv(p: Vector) -> tuple[float, float]:
    """Texture coordinates of ``p``; NaN where ``p`` is off the unit sphere."""
    try:
        return get_sphere_uv(p)
    except ValueError:
        return math.nan, math.nan


def _nearest_root(
    oc: Vector, direction: Vector, radius: float, t_min: float, t_max: float
) -> float | None:
    """Smallest ray parameter in ``(t_min, t_max)`` where the ray meets the sphere."""
    a = _dot(direction, direction)
    half_b = _dot(oc, direction)
    c = _dot(oc, oc) - radius * radius
    discriminant = half_b * half_b - a * c
    if discriminant <= 0.0:
        return None
    root = math.sqrt(discriminant)
    for t in ((-half_b - root) / a, (-half_b + root) / a):
        if t_min < t < t_max:
            return t
    return None


class Sphere(Hittable):
    """A sphere; a negative radius turns the normals inward (hollow bubbles)."""

    def __init__(self, center: Vector, radius: float, material: Any) -> None:
        self.center = tuple(center)
        self.radius = radius
        self.material = material

    def __str__(self) -> str:
        return f"sphere(center: {self.center}, radius: {self.radius}, material: {self.material})"

    def _hit_record(self, ray: Ray, t: float) -> HitRecord:
        point = ray.at(t)
        outward_normal = tuple((p - c) / self.radius for p, c in zip(point, self.center))
        u, v = _sphere_uv(outward_normal)
        return HitRecord.from_ray(ray, t, point, outward_normal, self.material, u, v)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        oc = _sub(ray.origin, self.center)
        t = _nearest_root(oc, ray.direction, self.radius, t_min, t_max)
        return None if t is None else self._hit_record(ray, t)

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        r = abs(self.radius)
        return AABB(
            tuple(c - r for c in self.center),
            tuple(c + r for c in self.center),
        )

    def pdf_value(self, origin: Vector, v: Vector) -> float:
        if self.hit(Ray(tuple(origin), tuple(v), 0.0), _RAY_EPSILON, math.inf) is None:
            return 0.0
        offset = _sub(self.center, origin)
        x = 1.0 - self.radius * self.radius / _dot(offset, offset)
        cos_theta_max = math.sqrt(x) if x >= 0.0 else math.nan
        solid_angle = 2.0 * math.pi * (1.0 - cos_theta_max)
        return 1.0 / solid_angle