import pytest

from noether.matrix import Mat4
from noether.transform import Transform
from noether.vector import Vec3, Vec4


def test_default_transform_is_identity():
    assert Transform().local_transform() == Mat4.identity()


def test_local_transform_composes_translation_rotation_scale():
    t = Transform(Vec3(1.0, 2.0, 3.0), Vec3(10.0, 20.0, 30.0), Vec3(2.0, 3.0, 4.0))
    expected = Mat4.translation(1.0, 2.0, 3.0) * Mat4.rotation(10.0, 20.0, 30.0) * Mat4.scale(2.0, 3.0, 4.0)
    assert list(t.local_transform()) == pytest.approx(list(expected))


def test_local_transform_without_rotation_scales_then_moves():
    t = Transform(position=Vec3(0.0, -3.0, 0.0), scale=Vec3(100.0, 1.0, 100.0))
    p = t.local_transform() * Vec4(0.5, 0.5, 0.5, 1.0)
    assert list(p) == pytest.approx([50.0, -2.5, 50.0, 1.0])


def test_transform_direction_without_rotation_is_unchanged():
    t = Transform(position=Vec3(5.0, 5.0, 5.0), scale=Vec3(3.0, 3.0, 3.0))
    assert t.transform_direction(Vec3(1.0, 2.0, 3.0)) == Vec3(1.0, 2.0, 3.0)


def test_transform_direction_preserves_length():
    t = Transform(rotation=Vec3(-30.0, 45.0, 12.0))
    v = Vec3(0.3, -1.2, 2.0)
    assert t.transform_direction(v).magnitude() == pytest.approx(v.magnitude())


def test_transform_direction_ignores_position():
    a = Transform(rotation=Vec3(20.0, 40.0, 60.0))
    b = Transform(position=Vec3(9.0, 9.0, 9.0), rotation=Vec3(20.0, 40.0, 60.0))
    v = Vec3(1.0, 0.0, -1.0)
    assert a.transform_direction(v) == b.transform_direction(v)


def test_transforms_are_independent_instances():
    a = Transform()
    b = Transform()
    a.position = Vec3(1.0, 0.0, 0.0)
    assert b.position == Vec3(0.0, 0.0, 0.0)