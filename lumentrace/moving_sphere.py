"""A sphere whose centre moves linearly over time."""

from __future__ import annotations

from typing import Any

from .aabb import AABB, Ray, Vector
from .hit_record import HitRecord
from .hittable import Hittable
from .sphere import _nearest_root, _sphere_uv


class MovingSphere(Hittable):
    """A sphere moving from ``center0`` at ``time0`` to ``center1`` at ``time1``."""

    def __init__(
        self,
        center0: Vector,
        center1: Vector,
        time0: float,
        time1: float,
        radius: float,
        material: Any,
    ) -> None:
        self.center0 = tuple(center0)
        self.center1 = tuple(center1)
        self.time0 = time0
        self.time1 = time1
        self.radius = radius
        self.material = material

    def __str__(self) -> str:
        return (
            f"moving_sphere(center0: {self.center0}, center1: {self.center1}, "
            f"time0: {self.time0}, time1: {self.time1} radius: {self.radius}, "
            f"material: {self.material})"
        )

    def center(self, time: float) -> Vector:
        """Centre at ``time``, interpolated between the two end positions."""
        if self.time0 == self.time1:
            return self.center0
        s = (time - self.time0) / (self.time1 - self.time0)
        return tuple(a + (b - a) * s for a, b in zip(self.center0, self.center1))

    def _hit_record(self, ray: Ray, t: float) -> HitRecord:
        point = ray.at(t)
        at_ray_time = self.center(ray.time)
        outward_normal = tuple((p - c) / self.radius for p, c in zip(point, at_ray_time))
        # Texture coordinates are taken relative to the centre at parameter t.
        relative = tuple((p - c) / self.radius for p, c in zip(point, self.center(t)))
        u, v = _sphere_uv(relative)
        return HitRecord.from_ray(ray, t, point, outward_normal, self.material, u, v)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        center = self.center(ray.time)
        oc = tuple(o - c for o, c in zip(ray.origin, center))
        t = _nearest_root(oc, ray.direction, self.radius, t_min, t_max)
        return None if t is None else self._hit_record(ray, t)

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        r = abs(self.radius)

        def box_at(time: float) -> AABB:
            c = self.center(time)
            return AABB(tuple(x - r for x in c), tuple(x + r for x in c))

        return AABB.surrounding_box(box_at(time0), box_at(time1))