import math

import pytest

from genvec.axis import Axis, almost_equal, deg_to_rad


def test_deg_to_rad_half_turn_is_pi():
    assert deg_to_rad(180) == pytest.approx(math.pi)


def test_deg_to_rad_zero():
    assert deg_to_rad(0) == 0


def test_deg_to_rad_is_linear():
    assert deg_to_rad(90) * 2 == pytest.approx(deg_to_rad(180))
    assert deg_to_rad(-45) == pytest.approx(-deg_to_rad(45))


def test_almost_equal_within_epsilon():
    assert almost_equal(1.0, 1.0 + 1e-12, 1e-10)


def test_almost_equal_outside_epsilon():
    assert not almost_equal(1.0, 1.1, 1e-10)


def test_almost_equal_is_symmetric():
    assert almost_equal(2.0, 2.5, 0.5) == almost_equal(2.5, 2.0, 0.5)
    assert almost_equal(2.5, 2.0, 0.5)


def test_axis_members_are_distinct():
    assert len({Axis.X, Axis.Y, Axis.Z}) == 3
    assert Axis("z") is Axis.Z