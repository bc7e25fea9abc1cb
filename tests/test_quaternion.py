import math

import pytest

from noether.quaternion import Quat


def norm(q):
    return math.sqrt(q.r ** 2 + q.i ** 2 + q.j ** 2 + q.k ** 2)


def test_identity_components():
    assert Quat.identity() == Quat(1.0, 0.0, 0.0, 0.0)


def test_zero_normalises_to_identity():
    assert Quat(0.0, 0.0, 0.0, 0.0).normalised() == Quat.identity()


def test_normalised_has_unit_norm():
    assert norm(Quat(2.0, -1.0, 3.5, 0.25).normalised()) == pytest.approx(1.0)


def test_normalising_unit_quaternion_is_stable():
    q = Quat(0.0, 0.0, 1.0, 0.0)
    assert q.normalised() == q


def test_normalised_keeps_direction():
    q = Quat(1.0, 2.0, 3.0, 4.0)
    n = q.normalised()
    assert n.i / n.r == pytest.approx(q.i / q.r)
    assert n.k / n.j == pytest.approx(q.k / q.j)