"""A collection of hittable objects treated as one."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator

from .aabb import AABB, Ray, Vector
from .hit_record import HitRecord
from .hittable import Hittable


class HittableList(Hittable):
    """A list of objects; a ray hits the closest of them."""

    def __init__(self, objects: Iterable[Hittable] = ()) -> None:
        self.objects: list[Hittable] = list(objects)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def __str__(self) -> str:
        return "[" + ", ".join(str(o) for o in self.objects) + "]"

    def add(self, obj: Hittable) -> None:
        """Append an object."""
        self.objects.append(obj)

    def clear(self) -> None:
        """Remove every object."""
        self.objects.clear()

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        closest = None
        for obj in self.objects:
            rec = obj.hit(ray, t_min, t_max if closest is None else closest.t)
            if rec is not None:
                closest = rec
        return closest

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        """Box around all objects; None if empty or any object has no box."""
        result = None
        for obj in self.objects:
            box = obj.bounding_box(time0, time1)
            if box is None:
                return None
            result = box if result is None else AABB.surrounding_box(box, result)
        return result

    def pdf_value(self, origin: Vector, v: Vector) -> float:
        if not self.objects:
            return 0.0
        weight = 1.0 / len(self.objects)
        return sum(weight * obj.pdf_value(origin, v) for obj in self.objects)

    def random(self, origin: Vector) -> Vector:
        if not self.objects:
            return (0.0, 0.0, 0.0)
        return random.choice(self.objects).random(origin)