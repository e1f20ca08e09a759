import pytest

from lumentrace.aabb import Ray
from lumentrace.hit_record import HitRecord

MATERIAL = object()


@pytest.fixture
def incoming():
    return Ray((0.0, 0.0, 5.0), (0.0, 0.0, -1.0))


def test_front_face_keeps_outward_normal(incoming):
    rec = HitRecord.from_ray(incoming, 5.0, (0.0, 0.0, 0.0), (0.0, 0.0, 1.0), MATERIAL, 0.2, 0.7)
    assert rec.front_face is True
    assert rec.normal == (0.0, 0.0, 1.0)
    assert rec.material is MATERIAL
    assert (rec.t, rec.u, rec.v) == (5.0, 0.2, 0.7)


def test_back_face_negates_normal(incoming):
    rec = HitRecord.from_ray(incoming, 5.0, (0.0, 0.0, 0.0), (0.0, 0.0, -1.0), MATERIAL, 0.0, 0.0)
    assert rec.front_face is False
    assert rec.normal == (-0.0, -0.0, 1.0)


def test_update_point_only_changes_point(incoming):
    rec = HitRecord.from_ray(incoming, 5.0, (0.0, 0.0, 0.0), (0.0, 0.0, 1.0), MATERIAL, 0.1, 0.2)
    moved = rec.update_point((1.0, 2.0, 3.0))
    assert moved.point == (1.0, 2.0, 3.0)
    assert moved.normal == rec.normal
    assert moved.front_face == rec.front_face
    assert moved.t == rec.t
    assert rec.point == (0.0, 0.0, 0.0)


def test_update_normal_reorients(incoming):
    rec = HitRecord.from_ray(incoming, 5.0, (0.0, 0.0, 0.0), (0.0, 0.0, 1.0), MATERIAL, 0.1, 0.2)
    other = Ray((0.0, 0.0, -5.0), (0.0, 0.0, 1.0))
    updated = rec.update_normal(other, (0.0, 0.0, 1.0))
    assert updated.front_face is False
    assert updated.normal == (-0.0, -0.0, -1.0)
    assert updated.point == rec.point


def test_flip_front_face_twice_is_identity(incoming):
    rec = HitRecord.from_ray(incoming, 5.0, (0.0, 0.0, 0.0), (0.0, 0.0, 1.0), MATERIAL, 0.0, 0.0)
    flipped = rec.flip_front_face()
    assert flipped.front_face is not rec.front_face
    assert flipped.normal == rec.normal
    assert flipped.flip_front_face() == rec