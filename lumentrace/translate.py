"""A wrapper that moves an object by a fixed offset."""

from __future__ import annotations

from .aabb import AABB, Ray, Vector
from .hit_record import HitRecord
from .hittable import Hittable


def _add(a: Vector, b: Vector) -> Vector:
    return tuple(x + y for x, y in zip(a, b))


def _sub(a: Vector, b: Vector) -> Vector:
    return tuple(x - y for x, y in zip(a, b))


class Translate(Hittable):
    """Wraps an object and displaces it by ``offset``."""

    def __init__(self, obj: Hittable, displacement: Vector) -> None:
        self.object = obj
        self.offset = tuple(displacement)

    def __str__(self) -> str:
        return f"translate(object: {self.object}, offset: {self.offset})"

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        moved = Ray(_sub(ray.origin, self.offset), ray.direction, ray.time)
        rec = self.object.hit(moved, t_min, t_max)
        if rec is None:
            return None
        return rec.update_point(_add(rec.point, self.offset)).update_normal(moved, rec.normal)

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        box = self.object.bounding_box(time0, time1)
        if box is None:
            return None
        return AABB(_add(box.min, self.offset), _add(box.max, self.offset))

    def pdf_value(self, origin: Vector, v: Vector) -> float:
        return self.object.pdf_value(_sub(origin, self.offset), v)

    def random(self, origin: Vector) -> Vector:
        return self.object.random(_sub(origin, self.offset))