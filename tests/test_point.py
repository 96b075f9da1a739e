"""Tests for Point3D: factories, metrics, transforms and vector algebra."""

import dataclasses
import logging
import math

import numpy as np
import pytest

from geom3d import DegenerateVectorError, InvalidGeometryError, MissingValueError, Point3D


# ------------------------------------------------------------------
# Construction and factories
# ------------------------------------------------------------------


def test_coordinates_stored_as_float():
    """Integer input is stored as float."""
    p = Point3D(1, 2, 3)
    assert (p.x, p.y, p.z) == (1.0, 2.0, 3.0)
    assert isinstance(p.x, float)


def test_origin():
    assert Point3D.origin() == Point3D(0, 0, 0)


def test_immutable():
    """Attributes cannot be reassigned."""
    p = Point3D(1, 2, 3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 5.0


def test_from_spherical_on_x_axis():
    """theta=0, phi=pi/2 points along +x."""
    p = Point3D.from_spherical(2.0, 0.0, math.pi / 2)
    assert p == Point3D(2.0, 0.0, 0.0)


def test_from_spherical_pole():
    """phi=0 points along +z regardless of theta."""
    p = Point3D.from_spherical(3.0, 1.234, 0.0)
    assert p.x == pytest.approx(0.0)
    assert p.y == pytest.approx(0.0)
    assert p.z == pytest.approx(3.0)


def test_from_cylindrical():
    p = Point3D.from_cylindrical(2.0, math.pi / 2, 5.0)
    assert p.x == pytest.approx(0.0, abs=1e-12)
    assert p.y == pytest.approx(2.0)
    assert p.z == 5.0


@pytest.mark.parametrize("factory", [Point3D.from_spherical, Point3D.from_cylindrical])
def test_negative_radius_rejected(factory):
    """Negative radius is an invalid argument (and a ValueError)."""
    with pytest.raises(InvalidGeometryError):
        factory(-1.0, 0.0, 0.0)
    with pytest.raises(ValueError):
        factory(-1.0, 0.0, 0.0)


def test_zero_radius_allowed():
    assert Point3D.from_spherical(0.0, 1.0, 2.0) == Point3D.origin()


def test_array_round_trip():
    p = Point3D(1.5, -2.0, 3.25)
    np.testing.assert_array_equal(p.to_array(), [1.5, -2.0, 3.25])
    assert Point3D.from_array(np.array([1.5, -2.0, 3.25])) == p


def test_from_array_rejects_wrong_shape():
    with pytest.raises(InvalidGeometryError):
        Point3D.from_array(np.zeros(4))


# ------------------------------------------------------------------
# Metrics
# ------------------------------------------------------------------


def test_distance_to():
    assert Point3D(0, 0, 0).distance_to(Point3D(3, 4, 0)) == pytest.approx(5.0)


def test_manhattan_distance():
    assert Point3D(1, 2, 3).manhattan_distance_to(Point3D(4, 6, 8)) == pytest.approx(12.0)


def test_magnitude():
    assert Point3D(3, 4, 12).magnitude() == pytest.approx(13.0)


# ------------------------------------------------------------------
# Rotations are about the coordinate origin
# ------------------------------------------------------------------


def test_rotate_x_quarter_turn():
    """+y goes to +z."""
    assert Point3D(0, 1, 0).rotate_x(math.pi / 2) == Point3D(0, 0, 1)


def test_rotate_y_quarter_turn():
    """+z goes to +x."""
    assert Point3D(0, 0, 1).rotate_y(math.pi / 2) == Point3D(1, 0, 0)


def test_rotate_z_quarter_turn():
    """+x goes to +y."""
    assert Point3D(1, 0, 0).rotate_z(math.pi / 2) == Point3D(0, 1, 0)


def test_rotation_pivot_is_origin():
    """A point off the axis swings around the origin, not itself."""
    p = Point3D(1, 0, 5).rotate_z(math.pi)
    assert p == Point3D(-1, 0, 5)


def test_rotation_preserves_magnitude():
    p = Point3D(1.5, -2.0, 0.7)
    q = p.rotate_x(0.3).rotate_y(1.1).rotate_z(-2.4)
    assert q.magnitude() == pytest.approx(p.magnitude())


# ------------------------------------------------------------------
# Translate / scale
# ------------------------------------------------------------------


def test_translate_and_back():
    p = Point3D(1.1, 2.2, 3.3)
    assert p.translate(0.3, -7.0, 1e3).translate(-0.3, 7.0, -1e3) == p


def test_scale_mirrors_with_negative_factor():
    assert Point3D(1, 2, 3).scale(-1, 2, 0.5) == Point3D(-1, 4, 1.5)


def test_scale_zero_factor_warns(caplog):
    """Zero factor is accepted but logged."""
    with caplog.at_level(logging.WARNING, logger="geom3d.point"):
        p = Point3D(1, 2, 3).scale(0, 1, 1)
    assert p == Point3D(0, 2, 3)
    assert any("zero scale factor" in r.getMessage() for r in caplog.records)


# ------------------------------------------------------------------
# Vector algebra
# ------------------------------------------------------------------


def test_dot_product_commutative():
    a, b = Point3D(1, 2, 3), Point3D(4, -5, 6)
    assert a.dot_product(b) == b.dot_product(a) == pytest.approx(12.0)


def test_cross_product_right_hand_rule():
    """i x j = k."""
    assert Point3D(1, 0, 0).cross_product(Point3D(0, 1, 0)) == Point3D(0, 0, 1)


def test_cross_product_anticommutative():
    a, b = Point3D(1, 2, 3), Point3D(4, 5, 6)
    assert a.cross_product(b) == Point3D(-3, 6, -3)
    assert a.cross_product(b) == -b.cross_product(a)


def test_cross_product_orthogonal_to_inputs():
    a, b = Point3D(1, 2, 3), Point3D(-2, 0.5, 4)
    c = a.cross_product(b)
    assert c.dot_product(a) == pytest.approx(0.0, abs=1e-12)
    assert c.dot_product(b) == pytest.approx(0.0, abs=1e-12)


def test_normalize():
    n = Point3D(3, 4, 0).normalize()
    assert n == Point3D(0.6, 0.8, 0.0)
    assert n.magnitude() == pytest.approx(1.0)


@pytest.mark.parametrize("vector", [Point3D(0, 0, 0), Point3D(1e-11, 0, 0)])
def test_normalize_zero_vector_raises(vector):
    """Zero and near-zero vectors raise an arithmetic error."""
    with pytest.raises(DegenerateVectorError):
        vector.normalize()
    with pytest.raises(ZeroDivisionError):
        vector.normalize()
    with pytest.raises(ArithmeticError):
        vector.normalize()


def test_midpoint():
    assert Point3D(0, 0, 0).midpoint(Point3D(2, 4, -6)) == Point3D(1, 2, -3)


@pytest.mark.parametrize(
    "method",
    ["distance_to", "manhattan_distance_to", "dot_product", "cross_product", "midpoint"],
)
def test_missing_argument_raises(method):
    """None for a required point raises MissingValueError (a TypeError)."""
    p = Point3D(1, 2, 3)
    with pytest.raises(MissingValueError):
        getattr(p, method)(None)
    with pytest.raises(TypeError):
        getattr(p, method)(None)


# ------------------------------------------------------------------
# Operators, equality, hashing, rendering
# ------------------------------------------------------------------


def test_operators():
    a, b = Point3D(1, 2, 3), Point3D(4, 5, 6)
    assert a + b == Point3D(5, 7, 9)
    assert b - a == Point3D(3, 3, 3)
    assert -a == Point3D(-1, -2, -3)
    assert a * 2 == 2 * a == Point3D(2, 4, 6)


def test_unpacking():
    x, y, z = Point3D(1, 2, 3)
    assert (x, y, z) == (1.0, 2.0, 3.0)


def test_equality_within_epsilon():
    assert Point3D(1, 2, 3) == Point3D(1 + 1e-11, 2 - 1e-11, 3)
    assert Point3D(1, 2, 3) != Point3D(1 + 1e-9, 2, 3)


def test_equality_with_other_types():
    p = Point3D(0, 0, 0)
    assert p != (0, 0, 0)
    assert p != None  # noqa: E711


def test_hash_consistent_for_identical_values():
    """Identically computed points collapse in a set."""
    points = {Point3D(1, 2, 3), Point3D(1.0, 2.0, 3.0), Point3D(0.5, 1, 1.5) * 2}
    assert len(points) == 1


def test_hash_negative_zero():
    assert hash(Point3D(-0.0, 0.0, -0.0)) == hash(Point3D(0.0, 0.0, 0.0))


def test_str_format():
    assert str(Point3D(1, 2.346, -3)) == "Point3D(1.00, 2.35, -3.00)"
