import math

import pytest

from lumentrace.aabb import AABB, Ray
from lumentrace.moving_sphere import MovingSphere
from lumentrace.sphere import Sphere

MATERIAL = object()


def _moving():
    return MovingSphere((0.0, 0.0, -5.0), (10.0, 0.0, -5.0), 0.0, 1.0, 1.0, MATERIAL)


def test_center_at_end_times():
    ms = _moving()
    assert ms.center(0.0) == pytest.approx(ms.center0)
    assert ms.center(1.0) == pytest.approx(ms.center1)


def test_center_midpoint():
    ms = MovingSphere((0.0, 0.0, 0.0), (2.0, 0.0, 0.0), 0.0, 1.0, 1.0, MATERIAL)
    assert ms.center(0.5) == pytest.approx((1.0, 0.0, 0.0))


def test_center_static_when_times_equal():
    ms = MovingSphere((1.0, 2.0, 3.0), (7.0, 8.0, 9.0), 0.5, 0.5, 1.0, MATERIAL)
    assert ms.center(0.0) == (1.0, 2.0, 3.0)
    assert ms.center(3.0) == (1.0, 2.0, 3.0)


def test_hit_depends_on_ray_time():
    ms = _moving()
    direction = (0.0, 0.0, -1.0)
    assert ms.hit(Ray((0.0, 0.0, 0.0), direction, 0.0), 0.001, math.inf) is not None
    assert ms.hit(Ray((0.0, 0.0, 0.0), direction, 1.0), 0.001, math.inf) is None
    assert ms.hit(Ray((10.0, 0.0, 0.0), direction, 1.0), 0.001, math.inf).material is MATERIAL


def test_hit_point_on_sphere_at_ray_time():
    ms = _moving()
    ray = Ray((5.0, 0.5, 0.0), (0.0, 0.0, -1.0), 0.5)
    rec = ms.hit(ray, 0.001, math.inf)
    assert math.dist(rec.point, ms.center(0.5)) == pytest.approx(ms.radius)
    assert rec.front_face is True
    assert sum(n * d for n, d in zip(rec.normal, ray.direction)) < 0.0


def test_hit_outside_range_is_none():
    ms = _moving()
    ray = Ray((0.0, 0.0, 0.0), (0.0, 0.0, -1.0), 0.0)
    assert ms.hit(ray, 0.001, 2.0) is None


def test_bounding_box_surrounds_both_positions():
    ms = _moving()
    start = Sphere(ms.center0, 1.0, MATERIAL).bounding_box(0.0, 1.0)
    end = Sphere(ms.center1, 1.0, MATERIAL).bounding_box(0.0, 1.0)
    assert ms.bounding_box(0.0, 1.0) == AABB.surrounding_box(start, end)


def test_bounding_box_over_instant_matches_static_sphere():
    ms = _moving()
    assert ms.bounding_box(0.0, 0.0) == Sphere(ms.center0, 1.0, MATERIAL).bounding_box(0.0, 0.0)


def test_str_describes_moving_sphere():
    assert str(_moving()).startswith("moving_sphere(center0:")