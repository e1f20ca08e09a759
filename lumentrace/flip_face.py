"""A wrapper that flips which side of an object faces forward."""

from __future__ import annotations

from .aabb import AABB, Ray, Vector
from .hit_record import HitRecord
from .hittable import Hittable


class FlipFace(Hittable):
    """Wraps an object and inverts the ``front_face`` of its hits."""

    def __init__(self, obj: Hittable) -> None:
        self.object = obj

    def __str__(self) -> str:
        return f"flip_face(object: {self.object})"

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        rec = self.object.hit(ray, t_min, t_max)
        return None if rec is None else rec.flip_front_face()

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        return self.object.bounding_box(time0, time1)

    def pdf_value(self, origin: Vector, v: Vector) -> float:
        return self.object.pdf_value(origin, v)

    def random(self, origin: Vector) -> Vector:
        return self.object.random(origin)