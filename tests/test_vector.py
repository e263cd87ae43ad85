import math

import pytest

from nori.vector import Normal, Point, Vector


def test_constant_fills_every_component():
    assert Vector.constant(2.5, 3) == Vector(2.5, 2.5, 2.5)


def test_constant_rejects_zero_dimension():
    with pytest.raises(ValueError):
        Vector.constant(1.0, 0)


def test_empty_vector_rejected():
    with pytest.raises(ValueError):
        Vector()


def test_components_and_accessors():
    v = Vector(1.0, 2.0, 3.0, 4.0)
    assert (v.x, v.y, v.z, v.w) == (1.0, 2.0, 3.0, 4.0)
    assert v.dimension == 4
    assert list(v) == [1.0, 2.0, 3.0, 4.0]


def test_dot_with_self_is_squared_norm():
    v = Vector(1.5, -2.0, 0.5)
    assert v.dot(v) == pytest.approx(v.squared_norm())
    assert v.norm() == pytest.approx(math.sqrt(v.squared_norm()))


def test_cross_is_orthogonal_to_inputs():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0, abs=1e-12)
    assert c.dot(b) == pytest.approx(0.0, abs=1e-12)


def test_cross_is_anticommutative():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(0.0, -1.0, 5.0)
    assert a.cross(b) == -(b.cross(a))


def test_cross_requires_3d():
    with pytest.raises(ValueError):
        Vector(1.0, 0.0).cross(Vector(0.0, 1.0))


def test_normalized_has_unit_length():
    v = Vector(3.0, -7.0, 2.0)
    assert v.normalized().norm() == pytest.approx(1.0)


def test_normalized_zero_vector_unchanged():
    assert Vector(0.0, 0.0, 0.0).normalized() == Vector(0.0, 0.0, 0.0)


def test_cwise_min_and_max():
    a = Vector(1.0, 5.0, 3.0)
    b = Vector(4.0, 2.0, 6.0)
    assert a.cwise_min(b) == Vector(1.0, 2.0, 3.0)
    assert a.cwise_max(b) == Vector(4.0, 5.0, 6.0)


def test_dimension_mismatch_raises():
    with pytest.raises(ValueError):
        Vector(1.0, 2.0) + Vector(1.0, 2.0, 3.0)
    with pytest.raises(ValueError):
        Vector(1.0, 2.0).dot(Vector(1.0, 2.0, 3.0))


def test_add_then_subtract_round_trip():
    a = Vector(0.5, 1.25, -2.0)
    b = Vector(2.0, -0.75, 4.0)
    assert (a + b) - b == a


def test_scalar_multiply_and_divide_round_trip():
    v = Vector(1.0, -2.0, 4.0)
    assert (v * 4.0) / 4.0 == v
    assert 2.0 * v == v * 2.0


def test_subclass_type_preserved():
    p = Point(1.0, 2.0, 3.0) + Vector(1.0, 1.0, 1.0)
    assert type(p) is Point
    assert p == Point(2.0, 3.0, 4.0)
    n = Normal(0.0, 0.0, 2.0).normalized()
    assert type(n) is Normal
    assert n == Normal(0.0, 0.0, 1.0)


def test_string_form():
    assert str(Vector(1.0, 2.0)) == "[1.000000, 2.000000]"


def test_hash_matches_equality():
    assert hash(Vector(1.0, 2.0)) == hash(Vector(1.0, 2.0))
    assert {Vector(1.0, 2.0), Vector(1.0, 2.0)} == {Vector(1.0, 2.0)}