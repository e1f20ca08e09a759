"""A wrapper that rotates an object about a coordinate axis."""

from __future__ import annotations

import math
from enum import IntEnum
from itertools import product

from .aabb import AABB, Ray, Vector
from .hit_record import HitRecord
from .hittable import Hittable


class Axis(IntEnum):
    """Coordinate axes."""

    X = 0
    Y = 1
    Z = 2


def _rotate(v: Vector, axis: Axis, sin_theta: float, cos_theta: float) -> Vector:
    x, y, z = v
    if axis == Axis.X:
        return (x, y * cos_theta - z * sin_theta, z * cos_theta + y * sin_theta)
    if axis == Axis.Y:
        return (x * cos_theta + z * sin_theta, y, z * cos_theta - x * sin_theta)
    if axis == Axis.Z:
        return (x * cos_theta - y * sin_theta, y * cos_theta + x * sin_theta, z)
    raise ValueError(f"Invalid axis {axis}")


def _rotate_neg(v: Vector, axis: Axis, sin_theta: float, cos_theta: float) -> Vector:
    return _rotate(v, axis, -sin_theta, cos_theta)


def _rotated_bbox(obj: Hittable, axis: Axis, sin_theta: float, cos_theta: float) -> AABB:
    bbox = obj.bounding_box(0.0, 1.0)
    if bbox is None:
        raise ValueError("Missing bounding box for rotated object")
    corners = [
        _rotate(corner, axis, sin_theta, cos_theta)
        for corner in product(*zip(bbox.min, bbox.max))
    ]
    return AABB(
        tuple(min(c[i] for c in corners) for i in range(3)),
        tuple(max(c[i] for c in corners) for i in range(3)),
    )


class Rotate(Hittable):
    """Wraps an object and rotates it by ``degrees`` about ``axis``."""

    def __init__(self, obj: Hittable, axis: int, degrees: float) -> None:
        try:
            axis = Axis(axis)
        except ValueError:
            raise ValueError(f"Invalid axis {axis}") from None
        radians = math.radians(degrees)
        self.object = obj
        self.axis = axis
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)
        self.bbox = _rotated_bbox(obj, axis, self.sin_theta, self.cos_theta)

    def __str__(self) -> str:
        return (
            f"rotate(object: {self.object}, axis: {int(self.axis)}, bbox: {self.bbox}, "
            f"sin_theta: {self.sin_theta}, cos_theta: {self.cos_theta})"
        )

    def _to_object(self, v: Vector) -> Vector:
        return _rotate_neg(v, self.axis, self.sin_theta, self.cos_theta)

    def _to_world(self, v: Vector) -> Vector:
        return _rotate(v, self.axis, self.sin_theta, self.cos_theta)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        rotated = Ray(self._to_object(ray.origin), self._to_object(ray.direction), ray.time)
        rec = self.object.hit(rotated, t_min, t_max)
        if rec is None:
            return None
        point = self._to_world(rec.point)
        normal = self._to_world(rec.normal)
        return rec.update_point(point).update_normal(rotated, normal)

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        return self.bbox

    def pdf_value(self, origin: Vector, v: Vector) -> float:
        return self.object.pdf_value(self._to_object(origin), self._to_object(v))

    def random(self, origin: Vector) -> Vector:
        return self.object.random(self._to_object(origin))