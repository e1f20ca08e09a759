"""Axis aligned rectangles in the xy, xz and yz planes."""

from __future__ import annotations

import math
import random
from typing import Any

from .aabb import AABB, Ray, Vector
from .hit_record import HitRecord
from .hittable import Hittable

MIN_THICKNESS = 0.0001
"""Half the thickness given to the bounding box of a flat object."""

RAY_EPSILON = 0.001
"""Smallest ray parameter accepted when sampling towards an object."""


def _div(a: float, b: float) -> float:
    """Divide with IEEE semantics: a zero divisor gives an infinity or NaN."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _dot(a: Vector, b: Vector) -> float:
    return sum(x * y for x, y in zip(a, b))


class _AxisRect(Hittable):
    """A rectangle ``[a0, a1] x [b0, b1]`` lying in the plane ``k``."""

    _name = "rect"
    _labels = ("a0", "a1", "b0", "b1", "k")
    # Indices of the first, second and plane axes.
    _axes = (0, 1, 2)
    _normal: Vector = (0.0, 0.0, 1.0)

    def __init__(
        self, a0: float, a1: float, b0: float, b1: float, k: float, material: Any
    ) -> None:
        self.a0 = a0
        self.a1 = a1
        self.b0 = b0
        self.b1 = b1
        self.k = k
        self.area = (a1 - a0) * (b1 - b0)
        self.material = material

    def __str__(self) -> str:
        la0, la1, lb0, lb1, lk = self._labels
        return (
            f"{self._name}({la0}: {self.a0}, {la1}: {self.a1}, {lb0}: {self.b0}, "
            f"{lb1}:{self.b1}, {lk}: {self.k}, area: {self.area}, material: {self.material})"
        )

    def _place(self, a: float, b: float, k: float) -> Vector:
        coords = [0.0, 0.0, 0.0]
        ia, ib, ik = self._axes
        coords[ia], coords[ib], coords[ik] = a, b, k
        return tuple(coords)

    def _rect_hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        ia, ib, ik = self._axes
        t = _div(self.k - ray.origin[ik], ray.direction[ik])
        if t < t_min or t > t_max:
            return None
        a = ray.origin[ia] + t * ray.direction[ia]
        b = ray.origin[ib] + t * ray.direction[ib]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None
        return HitRecord.from_ray(
            ray,
            t,
            ray.at(t),
            self._normal,
            self.material,
            _div(a - self.a0, self.a1 - self.a0),
            _div(b - self.b0, self.b1 - self.b0),
        )

    def _rect_bounding_box(self) -> AABB:
        return AABB(
            self._place(self.a0, self.b0, self.k - MIN_THICKNESS),
            self._place(self.a1, self.b1, self.k + MIN_THICKNESS),
        )

    def _rect_pdf_value(self, origin: Vector, v: Vector) -> float:
        rec = self._rect_hit(Ray(tuple(origin), tuple(v), 0.0), RAY_EPSILON, math.inf)
        if rec is None:
            return 0.0
        v_len_sq = _dot(v, v)
        v_len = math.sqrt(v_len_sq)
        v_unit = tuple(_div(c, v_len) for c in v)
        n_len = math.sqrt(_dot(rec.normal, rec.normal))
        n_unit = tuple(_div(c, n_len) for c in rec.normal)
        distance_squared = rec.t * rec.t * v_len_sq
        cosine = abs(_dot(v_unit, n_unit))
        return _div(distance_squared, cosine * self.area)

    def _rect_random(self, origin: Vector) -> Vector:
        point = self._place(
            random.uniform(self.a0, self.a1), random.uniform(self.b0, self.b1), self.k
        )
        return tuple(p - o for p, o in zip(point, origin))


class XYRect(_AxisRect):
    """Rectangle ``[x0, x1] x [y0, y1]`` in the plane ``z``."""

    _name = "xy_rect"
    _labels = ("x0", "x1", "y0", "y1", "z")
    _axes = (0, 1, 2)
    _normal = (0.0, 0.0, 0.1)

    def __init__(
        self, x0: float, x1: float, y0: float, y1: float, z: float, material: Any
    ) -> None:
        super().__init__(x0, x1, y0, y1, z, material)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        return self._rect_hit(ray, t_min, t_max)

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        """Box padded by ``MIN_THICKNESS`` along z so it has volume."""
        return self._rect_bounding_box()

    def pdf_value(self, origin: Vector, v: Vector) -> float:
        return self._rect_pdf_value(origin, v)

    def random(self, origin: Vector) -> Vector:
        return self._rect_random(origin)


class XZRect(_AxisRect):
    """Rectangle ``[x0, x1] x [z0, z1]`` in the plane ``y``."""

    _name = "xz_rect"
    _labels = ("x0", "x1", "z0", "z1", "y")
    _axes = (0, 2, 1)
    _normal = (0.0, 1.0, 0.0)

    def __init__(
        self, x0: float, x1: float, z0: float, z1: float, y: float, material: Any
    ) -> None:
        super().__init__(x0, x1, z0, z1, y, material)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        return self._rect_hit(ray, t_min, t_max)

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        """Box padded by ``MIN_THICKNESS`` along y so it has volume."""
        return self._rect_bounding_box()

    def pdf_value(self, origin: Vector, v: Vector) -> float:
        return self._rect_pdf_value(origin, v)

    def random(self, origin: Vector) -> Vector:
        return self._rect_random(origin)


class YZRect(_AxisRect):
    """Rectangle ``[y0, y1] x [z0, z1]`` in the plane ``x``."""

    _name = "yz_rect"
    _labels = ("y0", "y1", "z0", "z1", "x")
    _axes = (1, 2, 0)
    _normal = (1.0, 0.0, 0.0)

    def __init__(
        self, y0: float, y1: float, z0: float, z1: float, x: float, material: Any
    ) -> None:
        super().__init__(y0, y1, z0, z1, x, material)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        return self._rect_hit(ray, t_min, t_max)

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        """Box padded by ``MIN_THICKNESS`` along x so it has volume."""
        return self._rect_bounding_box()

    def pdf_value(self, origin: Vector, v: Vector) -> float:
        return self._rect_pdf_value(origin, v)

    def random(self, origin: Vector) -> Vector:
        return self._rect_random(origin)