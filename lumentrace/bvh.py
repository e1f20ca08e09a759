"""A bounding volume hierarchy to speed up ray intersection."""

from __future__ import annotations

import random
from collections.abc import Iterable

from .aabb import AABB, Ray
from .hit_record import HitRecord
from .hittable import Hittable


class BVH(Hittable):
    """A node of a bounding volume hierarchy."""

    def __init__(
        self, left: Hittable, right: Hittable, bbox: AABB | None, leaf: bool = False
    ) -> None:
        self.left = left
        self.right = right
        self.bbox = bbox
        self.leaf = leaf

    def __str__(self) -> str:
        return f"[bvh(left: {self.left}, right: {self.right}, bbox: {self.bbox})]"

    @classmethod
    def build(cls, objects: Iterable[Hittable], time0: float, time1: float) -> BVH:
        """Build a hierarchy over the objects; each must have a bounding box."""
        objects = list(objects)
        if not objects:
            raise ValueError("No objects in BVH")
        return cls._split(objects, time0, time1)

    @classmethod
    def _split(cls, objects: list[Hittable], time0: float, time1: float) -> BVH:
        axis = random.randint(0, 2)
        n = len(objects)
        if n == 1:
            only = objects[0]
            return cls(only, only, only.bounding_box(time0, time1), leaf=True)

        def key(obj: Hittable) -> float:
            box = obj.bounding_box(time0, time1)
            if box is None:
                raise ValueError("No bounding box for object in BVH")
            return box.min[axis]

        ordered = sorted(objects, key=key)
        if n == 2:
            left, right = ordered
        else:
            half = n // 2
            left = cls._split(ordered[:half], time0, time1)
            right = cls._split(ordered[half:], time0, time1)

        left_box = left.bounding_box(time0, time1)
        right_box = right.bounding_box(time0, time1)
        if left_box is None or right_box is None:
            raise ValueError("No bounding box for object in BVH")
        return cls(left, right, AABB.surrounding_box(left_box, right_box))

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        if self.bbox is None or not self.bbox.hit(ray, t_min, t_max):
            return None
        if self.leaf:
            return self.left.hit(ray, t_min, t_max)
        left_hit = self.left.hit(ray, t_min, t_max)
        if left_hit is None:
            return self.right.hit(ray, t_min, t_max)
        right_hit = self.right.hit(ray, t_min, left_hit.t)
        return left_hit if right_hit is None else right_hit

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        """The stored box; it already covers the build time interval."""
        return self.bbox