import math

import pytest

from lumentrace.aabb import AABB
from lumentrace.hittable import Hittable, get_sphere_uv


class _Dot(Hittable):
    def hit(self, ray, t_min, t_max):
        return None

    def bounding_box(self, time0, time1):
        return AABB((0.0, 0.0, 0.0), (1.0, 1.0, 1.0))


def test_abstract_cannot_instantiate():
    with pytest.raises(TypeError):
        Hittable()


def test_default_pdf_value_is_zero():
    assert Hittable.pdf_value(_Dot(), (0.0, 0.0, 0.0), (1.0, 2.0, 3.0)) == 0.0


def test_default_random_direction():
    assert Hittable.random(_Dot(), (5.0, 5.0, 5.0)) == (1.0, 0.0, 0.0)


def test_sphere_uv_on_positive_x():
    assert get_sphere_uv((1.0, 0.0, 0.0)) == pytest.approx((0.5, 0.5))


def test_sphere_uv_poles():
    _, v_top = get_sphere_uv((0.0, 1.0, 0.0))
    _, v_bottom = get_sphere_uv((0.0, -1.0, 0.0))
    assert v_top == pytest.approx(1.0)
    assert v_bottom == pytest.approx(0.0)


@pytest.mark.parametrize("angle", [0.1 * k for k in range(63)])
def test_sphere_uv_in_unit_square(angle):
    p = (math.cos(angle) * 0.6, 0.8 * math.sin(angle), math.sin(angle) * 0.6)
    u, v = get_sphere_uv(p)
    assert 0.0 <= u <= 1.0
    assert 0.0 <= v <= 1.0