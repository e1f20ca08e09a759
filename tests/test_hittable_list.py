import math

from lumentrace.aabb import AABB, Ray
from lumentrace.hit_record import HitRecord
from lumentrace.hittable import Hittable
from lumentrace.hittable_list import HittableList


class _Wall(Hittable):
    """A plane z = const with configurable box, pdf and direction."""

    def __init__(self, z, has_box=True, pdf=0.0, direction=(0.0, 0.0, 1.0)):
        self.z = z
        self.has_box = has_box
        self.pdf = pdf
        self.direction = direction

    def hit(self, ray, t_min, t_max):
        dz = ray.direction[2]
        if dz == 0.0:
            return None
        t = (self.z - ray.origin[2]) / dz
        if not t_min < t < t_max:
            return None
        return HitRecord.from_ray(ray, t, ray.at(t), (0.0, 0.0, 1.0), self, 0.0, 0.0)

    def bounding_box(self, time0, time1):
        if not self.has_box:
            return None
        return AABB((-1.0, -1.0, self.z - 0.1), (1.0, 1.0, self.z + 0.1))

    def pdf_value(self, origin, v):
        return self.pdf

    def random(self, origin):
        return self.direction


RAY = Ray((0.0, 0.0, 0.0), (0.0, 0.0, 1.0))


def test_hit_returns_closest_regardless_of_order():
    far, near = _Wall(5.0), _Wall(2.0)
    for objects in ([far, near], [near, far]):
        rec = HittableList(objects).hit(RAY, 0.001, math.inf)
        assert rec.material is near
        assert rec.t == 2.0


def test_hit_none_when_empty_or_missed():
    assert HittableList().hit(RAY, 0.001, math.inf) is None
    assert HittableList([_Wall(-3.0)]).hit(RAY, 0.001, math.inf) is None


def test_add_and_clear():
    world = HittableList()
    world.add(_Wall(1.0))
    world.add(_Wall(2.0))
    assert len(world) == 2
    world.clear()
    assert len(world) == 0
    assert world.hit(RAY, 0.001, math.inf) is None


def test_bounding_box_surrounds_all():
    a, b = _Wall(1.0), _Wall(4.0)
    box = HittableList([a, b]).bounding_box(0.0, 1.0)
    assert box == AABB.surrounding_box(a.bounding_box(0.0, 1.0), b.bounding_box(0.0, 1.0))


def test_bounding_box_none_cases():
    assert HittableList().bounding_box(0.0, 1.0) is None
    assert HittableList([_Wall(1.0), _Wall(2.0, has_box=False)]).bounding_box(0.0, 1.0) is None


def test_pdf_value_is_average():
    world = HittableList([_Wall(1.0, pdf=2.0), _Wall(2.0, pdf=4.0)])
    assert world.pdf_value((0.0, 0.0, 0.0), (0.0, 0.0, 1.0)) == 3.0


def test_pdf_value_empty_is_zero():
    assert HittableList().pdf_value((0.0, 0.0, 0.0), (0.0, 0.0, 1.0)) == 0.0


def test_random_empty_is_zero_vector():
    assert HittableList().random((0.0, 0.0, 0.0)) == (0.0, 0.0, 0.0)


def test_random_picks_a_member():
    dirs = [(1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)]
    world = HittableList(_Wall(float(i), direction=d) for i, d in enumerate(dirs))
    for _ in range(30):
        assert world.random((0.0, 0.0, 0.0)) in dirs


def test_random_single_delegates():
    world = HittableList([_Wall(1.0, direction=(0.0, 2.0, 0.0))])
    assert world.random((0.0, 0.0, 0.0)) == (0.0, 2.0, 0.0)