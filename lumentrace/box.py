"""An axis aligned box built from six rectangles."""

from __future__ import annotations

from typing import Any

from .aabb import AABB, Ray, Vector
from .flip_face import FlipFace
from .hit_record import HitRecord
from .hittable import Hittable
from .hittable_list import HittableList
from .rects import XYRect, XZRect, YZRect


class Box(Hittable):
    """An axis aligned box between corners ``p0`` (minimum) and ``p1`` (maximum)."""

    def __init__(self, p0: Vector, p1: Vector, material: Any) -> None:
        self.box_min = tuple(p0)
        self.box_max = tuple(p1)
        (x0, y0, z0), (x1, y1, z1) = self.box_min, self.box_max
        self.sides = HittableList(
            [
                XYRect(x0, x1, y0, y1, z1, material),
                FlipFace(XYRect(x0, x1, y0, y1, z0, material)),
                XZRect(x0, x1, z0, z1, y1, material),
                FlipFace(XZRect(x0, x1, z0, z1, y0, material)),
                YZRect(y0, y1, z0, z1, x1, material),
                FlipFace(YZRect(y0, y1, z0, z1, x0, material)),
            ]
        )

    def __str__(self) -> str:
        return f"box(box_min: {self.box_min}, box_max: {self.box_max}, sides: {self.sides})"

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        return self.sides.hit(ray, t_min, t_max)

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        return AABB(self.box_min, self.box_max)

    def pdf_value(self, origin: Vector, v: Vector) -> float:
        return self.sides.pdf_value(origin, v)

    def random(self, origin: Vector) -> Vector:
        return self.sides.random(origin)