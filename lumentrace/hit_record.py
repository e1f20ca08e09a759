"""Details of a ray/surface intersection."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from .aabb import Ray, Vector


def _dot(a: Vector, b: Vector) -> float:
    return sum(x * y for x, y in zip(a, b))


def _orient(ray: Ray, outward_normal: Vector) -> tuple[bool, Vector]:
    front_face = _dot(ray.direction, outward_normal) < 0.0
    normal = tuple(outward_normal) if front_face else tuple(-c for c in outward_normal)
    return front_face, normal


@dataclass(frozen=True)
class HitRecord:
    """Information recorded where a ray meets a surface."""

    t: float
    point: Vector
    normal: Vector
    front_face: bool
    material: Any
    u: float
    v: float

    @classmethod
    def from_ray(cls, ray: Ray, t, point, outward_normal, material, u, v) -> HitRecord:
        """Build a record, orienting the normal against the incident ray."""
        front_face, normal = _orient(ray, outward_normal)
        return cls(t, tuple(point), normal, front_face, material, u, v)

    def update_point(self, p) -> HitRecord:
        """Return a copy with the intersection point replaced."""
        return replace(self, point=tuple(p))

    def update_normal(self, ray: Ray, outward_normal) -> HitRecord:
        """Return a copy with the normal re-oriented against ``ray``."""
        front_face, normal = _orient(ray, outward_normal)
        return replace(self, front_face=front_face, normal=normal)

    def flip_front_face(self) -> HitRecord:
        """Return a copy with ``front_face`` inverted."""
        return replace(self, front_face=not self.front_face)

    def __str__(self) -> str:
        return (
            f"hit_record(t: {self.t}, point: {self.point}, normal: {self.normal}, "
            f"front_face: {self.front_face}, material: {self.material}, u: {self.u}, v: {self.v})"
        )