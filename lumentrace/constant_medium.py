"""A participating medium of constant density, for smoke and fog."""

from __future__ import annotations

import math
import random
from typing import Any

from .aabb import AABB, Ray
from .hit_record import HitRecord
from .hittable import Hittable
from .rects import MIN_THICKNESS


class ConstantMedium(Hittable):
    """A volume of constant ``density`` bounded by a convex object.

    ``phase_function`` is the material that scatters rays inside the medium,
    usually an isotropic one.
    """

    def __init__(self, boundary: Hittable, density: float, phase_function: Any) -> None:
        self.boundary = boundary
        if density == 0.0:
            self.neg_inv_density = -math.copysign(math.inf, density)
        else:
            self.neg_inv_density = -1.0 / density
        self.phase_function = phase_function

    def __str__(self) -> str:
        return (
            f"constant_medium(boundary: {self.boundary}, "
            f"neg_inv_density: {self.neg_inv_density}, "
            f"phase_function: {self.phase_function})"
        )

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        rec1 = self.boundary.hit(ray, -math.inf, math.inf)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(ray, rec1.t + MIN_THICKNESS, math.inf)
        if rec2 is None:
            return None

        t0 = max(rec1.t, t_min)
        t1 = min(rec2.t, t_max)
        if t0 >= t1:
            return None
        t0 = max(t0, 0.0)

        ray_length = math.sqrt(sum(c * c for c in ray.direction))
        distance_inside = (t1 - t0) * ray_length
        sample = random.random()
        hit_distance = math.inf if sample == 0.0 else self.neg_inv_density * math.log(sample)
        if hit_distance > distance_inside:
            return None

        t = t0 + hit_distance / ray_length
        # Normal and texture coordinates are arbitrary inside a volume.
        return HitRecord.from_ray(
            ray, t, ray.at(t), (1.0, 0.0, 0.0), self.phase_function, 0.0, 1.0
        )

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        return self.boundary.bounding_box(time0, time1)