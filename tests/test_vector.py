import math

import pytest

from minirt.vector import Matrix3, Vec3


def test_add_then_sub_round_trip():
    a = Vec3(1.5, -2.0, 3.25)
    b = Vec3(-4.0, 0.5, 7.0)
    assert (a + b) - b == a


def test_neg_is_minus_one_times():
    a = Vec3(1.0, -2.0, 3.0)
    assert -a == a * -1
    assert -a == -1 * a


def test_mul_and_rmul_agree():
    a = Vec3(1.0, 2.0, 3.0)
    assert a * 2.5 == 2.5 * a


def test_bool_false_only_for_zero():
    assert not Vec3()
    assert Vec3(0, 0, 1e-9)
    assert Vec3(-1, 0, 0)


def test_cross_of_axes():
    x = Vec3(1, 0, 0)
    y = Vec3(0, 1, 0)
    assert x.cross(y) == Vec3(0, 0, 1)


@pytest.mark.parametrize(
    "a,b",
    [
        (Vec3(1, 2, 3), Vec3(-3, 0.5, 4)),
        (Vec3(0.1, -7, 2), Vec3(5, 5, -5)),
    ],
)
def test_cross_is_orthogonal(a, b):
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0, abs=1e-9)
    assert c.dot(b) == pytest.approx(0.0, abs=1e-9)


def test_dot_with_self_is_square_length():
    a = Vec3(2.0, -3.0, 6.0)
    assert a.dot(a) == pytest.approx(a.length() ** 2)


def test_normalized_has_unit_length_and_same_direction():
    a = Vec3(3.0, -4.0, 12.0)
    n = a.normalized()
    assert n.length() == pytest.approx(1.0)
    assert n.cross(a).length() == pytest.approx(0.0, abs=1e-9)
    assert n.dot(a) > 0


def test_normalized_zero_stays_zero():
    assert Vec3().normalized() == Vec3()


def test_identity_matrix_leaves_vector():
    v = Vec3(1.5, -2.5, 9.0)
    assert Matrix3().apply(v) == v


def test_matrix_apply_picks_columns():
    m = Matrix3(Vec3(0, 1, 0), Vec3(-1, 0, 0), Vec3(0, 0, 1))
    assert m.apply(Vec3(1, 0, 0)) == m.vx
    assert m.apply(Vec3(0, 1, 0)) == m.vy
    assert m.apply(Vec3(0, 0, 1)) == m.vz


def test_matrix_apply_is_linear():
    m = Matrix3(Vec3(1, 2, 3), Vec3(4, 5, 6), Vec3(7, 8, 10))
    a = Vec3(1, -1, 2)
    b = Vec3(0.5, 3, -2)
    lhs = m.apply(a + b)
    rhs = m.apply(a) + m.apply(b)
    assert math.isclose(lhs.x, rhs.x)
    assert math.isclose(lhs.y, rhs.y)
    assert math.isclose(lhs.z, rhs.z)