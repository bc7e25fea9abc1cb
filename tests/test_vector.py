import pytest

from noether.vector import Vec2, Vec3, Vec4


def test_vec2_magnitude_three_four():
    assert Vec2(3.0, 4.0).magnitude() == pytest.approx(5.0)
    assert Vec2(3.0, 4.0).sqr_magnitude() == pytest.approx(25.0)


def test_vec2_normalised_has_unit_length():
    v = Vec2(7.0, -2.5).normalised()
    assert v.magnitude() == pytest.approx(1.0)


def test_vec2_zero_normalise_raises():
    with pytest.raises(ZeroDivisionError):
        Vec2().normalised()


def test_vec2_dot_of_perpendicular_is_zero():
    assert Vec2.up().dot(Vec2.right()) == 0.0
    assert Vec2.up().dot(Vec2.down()) == -1.0


def test_vec2_arithmetic_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2(0.25, 4.0)
    assert (a + b) - b == a
    assert -(-a) == a
    assert a * 2.0 == a + a
    assert 2.0 * a == a * 2.0


def test_vec2_hadamard_matches_mul():
    a = Vec2(2.0, 3.0)
    b = Vec2(-1.0, 0.5)
    assert a.hadamard(b) == a * b


def test_vec2_lerp_endpoints_and_clamp():
    a = Vec2(1.0, 2.0)
    b = Vec2(5.0, -6.0)
    assert a.lerp(b, 0.0) == a
    assert a.lerp(b, 1.0) == b
    assert a.lerp_clamped(b, 3.0) == b
    assert a.lerp_clamped(b, -1.0) == a


def test_vec2_add_scaled():
    a = Vec2(1.0, 1.0)
    b = Vec2(2.0, -3.0)
    assert a.add_scaled(b, 2.0) == a + b * 2.0


def test_vec3_cross_of_axes():
    assert Vec3.right().cross(Vec3.up()) == Vec3.back()
    assert Vec3.up().cross(Vec3.right()) == -Vec3.back()


def test_vec3_cross_is_perpendicular():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)


def test_vec3_normalised_unit_and_zero():
    assert Vec3(1.0, -2.0, 2.0).normalised().magnitude() == pytest.approx(1.0)
    with pytest.raises(ZeroDivisionError):
        Vec3().normalised()


def test_vec3_arithmetic():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(0.5, -1.0, 4.0)
    assert (a - b) + b == a
    assert a + 1.0 - 1.0 == a
    assert a.hadamard(b) == a * b
    assert a.add_scaled(b, 3.0) == a + b * 3.0


def test_vec3_lerp():
    a = Vec3(0.0, 1.0, 2.0)
    b = Vec3(4.0, -1.0, 6.0)
    assert a.lerp(b, 0.0) == a
    assert a.lerp(b, 1.0) == b
    assert a.lerp_clamped(b, 10.0) == b
    mid = a.lerp(b, 0.5)
    assert (mid - a) == (b - mid)


def test_vec3_from_vec4_drops_w():
    assert Vec3.from_vec4(Vec4(1.0, 2.0, 3.0, 9.0)) == Vec3(1.0, 2.0, 3.0)


def test_vec4_colour_aliases():
    c = Vec4(0.1, 0.2, 0.3, 0.4)
    assert (c.r, c.g, c.b, c.a) == (c.x, c.y, c.z, c.w)


def test_direction_from_euler_zero_looks_back():
    d = Vec3.direction_from_euler(Vec3(0.0, 0.0, 0.0))
    assert (d.x, d.y, d.z) == pytest.approx((0.0, 0.0, 1.0), abs=1e-6)


def test_direction_from_euler_pitch_up_looks_down():
    d = Vec3.direction_from_euler(Vec3(90.0, 0.0, 0.0))
    assert (d.x, d.y, d.z) == pytest.approx((0.0, -1.0, 0.0), abs=1e-6)


def test_direction_from_euler_is_unit():
    d = Vec3.direction_from_euler(Vec3(-30.0, 45.0, 12.0))
    assert d.magnitude() == pytest.approx(1.0)


def test_vectors_are_hashable_and_equal_by_value():
    assert {Vec3(1.0, 2.0, 3.0), Vec3(1.0, 2.0, 3.0)} == {Vec3(1.0, 2.0, 3.0)}