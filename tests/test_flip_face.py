import math

from lumentrace.aabb import AABB, Ray
from lumentrace.flip_face import FlipFace
from lumentrace.hit_record import HitRecord
from lumentrace.hittable import Hittable


class _Wall(Hittable):
    def __init__(self, z):
        self.z = z
        self.seen = []

    def hit(self, ray, t_min, t_max):
        t = (self.z - ray.origin[2]) / ray.direction[2]
        if not t_min < t < t_max:
            return None
        return HitRecord.from_ray(ray, t, ray.at(t), (0.0, 0.0, 1.0), self, 0.0, 0.0)

    def bounding_box(self, time0, time1):
        return AABB((-1.0, -1.0, self.z), (1.0, 1.0, self.z))

    def pdf_value(self, origin, v):
        self.seen.append((origin, v))
        return 0.25

    def random(self, origin):
        self.seen.append(origin)
        return (0.0, 1.0, 0.0)


RAY = Ray((0.0, 0.0, 10.0), (0.0, 0.0, -1.0))


def test_hit_flips_front_face_only():
    wall = _Wall(0.0)
    inner = wall.hit(RAY, 0.0, math.inf)
    flipped = FlipFace(wall).hit(RAY, 0.0, math.inf)
    assert flipped.front_face is (not inner.front_face)
    assert flipped.t == inner.t
    assert flipped.normal == inner.normal
    assert flipped.point == inner.point


def test_miss_stays_miss():
    assert FlipFace(_Wall(20.0)).hit(RAY, 0.0, math.inf) is None


def test_bounding_box_delegates():
    wall = _Wall(3.0)
    assert FlipFace(wall).bounding_box(0.0, 1.0) == wall.bounding_box(0.0, 1.0)


def test_pdf_and_random_delegate():
    wall = _Wall(0.0)
    flip = FlipFace(wall)
    assert flip.pdf_value((1.0, 2.0, 3.0), (0.0, 0.0, 1.0)) == 0.25
    assert flip.random((4.0, 5.0, 6.0)) == (0.0, 1.0, 0.0)
    assert wall.seen == [((1.0, 2.0, 3.0), (0.0, 0.0, 1.0)), (4.0, 5.0, 6.0)]