import math

import pytest

from genvec.axis import Axis
from genvec.floats import V2F, V3F
from genvec.ints import V2I, V3I


# --- random between ---------------------------------------------------------


def test_v2i_rand_between_in_range():
    start, end = V2I(10, 20), V2I(30, 40)
    for _ in range(10):
        r = start.rand_between(end)
        assert 10 <= r.x <= 30
        assert 20 <= r.y <= 40
        assert isinstance(r.x, int)


def test_v2i_rand_between_comp_in_range():
    start = V2I(10, 20)
    for _ in range(10):
        r = start.rand_between_comp(30, 40)
        assert 10 <= r.x <= 30
        assert 20 <= r.y <= 40


def test_v2i_rand_between_in_place():
    v = V2I(10, 20)
    v.rand_between_in_place(V2I(30, 40))
    assert 10 <= v.x <= 30
    assert 20 <= v.y <= 40


def test_v2i_rand_between_comp_in_place():
    v = V2I(10, 20)
    v.rand_between_comp_in_place(30, 40)
    assert 10 <= v.x <= 30
    assert 20 <= v.y <= 40


def test_v2i_rand_between_reversed_returns_start():
    start = V2I(30, 40)
    for _ in range(10):
        assert start.rand_between(V2I(10, 20)) == V2I(30, 40)


def test_v2i_rand_between_in_place_reversed_unchanged():
    v = V2I(30, 40)
    v.rand_between_in_place(V2I(10, 20))
    assert v == V2I(30, 40)


def test_v3i_rand_between_in_range():
    start, end = V3I(10, 20, 30), V3I(40, 50, 60)
    for _ in range(10):
        r = start.rand_between(end)
        assert 10 <= r.x <= 40
        assert 20 <= r.y <= 50
        assert 30 <= r.z <= 60


def test_v3i_rand_between_comp_in_range():
    start = V3I(10, 20, 30)
    for _ in range(10):
        r = start.rand_between_comp(40, 50, 60)
        assert 10 <= r.x <= 40
        assert 20 <= r.y <= 50
        assert 30 <= r.z <= 60


def test_v3i_rand_between_in_place():
    v = V3I(10, 20, 30)
    v.rand_between_in_place(V3I(40, 50, 60))
    assert 10 <= v.x <= 40
    assert 20 <= v.y <= 50
    assert 30 <= v.z <= 60


def test_v3i_rand_between_comp_in_place():
    v = V3I(10, 20, 30)
    v.rand_between_comp_in_place(40, 50, 60)
    assert 10 <= v.x <= 40
    assert 20 <= v.y <= 50
    assert 30 <= v.z <= 60


def test_v3i_rand_between_reversed_returns_start():
    start = V3I(40, 50, 60)
    for _ in range(10):
        assert start.rand_between(V3I(10, 20, 30)) == V3I(40, 50, 60)


def test_rand_between_equal_bounds():
    assert V3I(5, 6, 7).rand_between(V3I(5, 6, 7)) == V3I(5, 6, 7)


# --- random in --------------------------------------------------------------


def test_v2i_rand_in_range():
    v = V2I(10, 20)
    for _ in range(10):
        r = v.rand_in()
        assert 0 <= r.x <= 10
        assert 0 <= r.y <= 20


def test_v2i_rand_in_in_place():
    v = V2I(10, 20)
    v.rand_in_in_place()
    assert 0 <= v.x <= 10
    assert 0 <= v.y <= 20


def test_v3i_rand_in_range():
    v = V3I(10, 20, 30)
    for _ in range(10):
        r = v.rand_in()
        assert 0 <= r.x <= 10
        assert 0 <= r.y <= 20
        assert 0 <= r.z <= 30


def test_v3i_rand_in_in_place():
    v = V3I(10, 20, 30)
    v.rand_in_in_place()
    assert 0 <= v.x <= 10
    assert 0 <= v.y <= 20
    assert 0 <= v.z <= 30


def test_rand_in_zero_is_zero():
    assert V3I(0, 0, 0).rand_in() == V3I(0, 0, 0)


def test_rand_in_negative_raises():
    with pytest.raises(ValueError):
        V2I(-1, 5).rand_in()
    with pytest.raises(ValueError):
        V3I(1, 2, -3).rand_in_in_place()


# --- rotation ---------------------------------------------------------------


@pytest.mark.parametrize(
    "degrees, expected",
    [(0, (0, 1)), (90, (-1, 0)), (180, (0, -1))],
)
def test_v2i_rotate_deg(degrees, expected):
    r = V2I(0, 1).rotate_deg(degrees)
    assert isinstance(r, V2F)
    assert r.x == pytest.approx(expected[0], abs=1e-10)
    assert r.y == pytest.approx(expected[1], abs=1e-10)


def test_v2i_rotate_rad():
    r = V2I(1, 0).rotate_rad(math.pi / 2)
    assert r.x == pytest.approx(0, abs=1e-10)
    assert r.y == pytest.approx(1, abs=1e-10)


@pytest.mark.parametrize(
    "degrees, axis, expected",
    [
        (0, Axis.Z, (0, 1, 0)),
        (90, Axis.Z, (-1, 0, 0)),
        (180, Axis.Z, (0, -1, 0)),
        (0, Axis.Y, (0, 1, 0)),
        (90, Axis.Y, (-1, 1, 0)),
        (180, Axis.Y, (0, 1, 0)),
        (0, Axis.X, (0, 1, 0)),
        (90, Axis.X, (0, 0, 0)),
        (180, Axis.X, (0, -1, 0)),
    ],
)
def test_v3i_rotate_deg(degrees, axis, expected):
    r = V3I(0, 1, 0).rotate_deg(degrees, axis)
    assert isinstance(r, V3F)
    assert r.x == pytest.approx(expected[0], abs=1e-10)
    assert r.y == pytest.approx(expected[1], abs=1e-10)
    assert r.z == pytest.approx(expected[2], abs=1e-10)


# --- trigonometry and roots -------------------------------------------------


def test_v2i_sin():
    r = V2I(0, 1).sin()
    assert r.x == pytest.approx(0, abs=1e-10)
    assert r.y == pytest.approx(math.sin(1), abs=1e-10)


def test_v3i_sin():
    r = V3I(0, 1, 3).sin()
    assert r.x == pytest.approx(0, abs=1e-10)
    assert r.y == pytest.approx(math.sin(1), abs=1e-10)
    assert r.z == pytest.approx(math.sin(3), abs=1e-10)


def test_v2i_tan():
    r = V2I(0, 1).tan()
    assert r.x == pytest.approx(0, abs=1e-10)
    assert r.y == pytest.approx(math.tan(1), abs=1e-10)


def test_v3i_tan():
    r = V3I(0, 1, 3).tan()
    assert r.x == pytest.approx(0, abs=1e-10)
    assert r.y == pytest.approx(math.tan(1), abs=1e-10)
    assert r.z == pytest.approx(math.tan(3), abs=1e-10)


def test_v2i_sqrt():
    assert V2I(4, 9).sqrt() == V2F(2.0, 3.0)


def test_v3i_sqrt_negative_is_nan():
    r = V3I(16, -1, 0).sqrt()
    assert r.x == 4.0
    assert math.isnan(r.y)
    assert r.z == 0.0


# --- slices -----------------------------------------------------------------


def test_from_slice_and_to_list_round_trip():
    assert V2I.from_slice([3, 4, 5]) == V2I(3, 4)
    assert V3I.from_slice([1, 2, 3]).to_list() == [1, 2, 3]
    assert V2I(7, 8).to_list() == [7, 8]


def test_from_slice_too_short_raises():
    with pytest.raises(ValueError):
        V2I.from_slice([1])
    with pytest.raises(ValueError):
        V3I.from_slice([1, 2])


def test_apply_to_slice():
    target = [0, 0, 0, 9]
    V3I(1, 2, 3).apply_to_slice(target)
    assert target == [1, 2, 3, 9]
    target2 = [0, 0]
    V2I(5, 6).apply_to_slice(target2)
    assert target2 == [5, 6]


def test_apply_to_slice_too_short_raises():
    with pytest.raises(ValueError):
        V2I(1, 2).apply_to_slice([0])
    with pytest.raises(ValueError):
        V3I(1, 2, 3).apply_to_slice([0, 0])


def test_unpacking():
    x, y, z = V3I(1, 2, 3)
    assert (x, y, z) == (1, 2, 3)


# --- subtraction ------------------------------------------------------------


def test_v2i_sub_variants():
    v = V2I(10, 20)
    assert v.sub(V2I(1, 2)) == V2I(9, 18)
    assert v.sub_comp(3, 4) == V2I(7, 16)
    assert v.sub_scalar(5) == V2I(5, 15)
    assert v == V2I(10, 20)


def test_v2i_sub_in_place_variants():
    v = V2I(10, 20)
    v.sub_in_place(V2I(1, 2))
    assert v == V2I(9, 18)
    v.sub_comp_in_place(3, 4)
    assert v == V2I(6, 14)
    v.sub_scalar_in_place(6)
    assert v == V2I(0, 8)


def test_v3i_sub_variants():
    v = V3I(10, 20, 30)
    assert v.sub(V3I(1, 2, 3)) == V3I(9, 18, 27)
    assert v.sub_comp(1, 1, 1) == V3I(9, 19, 29)
    assert v.sub_scalar(10) == V3I(0, 10, 20)


def test_v3i_sub_in_place_variants():
    v = V3I(10, 20, 30)
    v.sub_in_place(V3I(1, 2, 3))
    assert v == V3I(9, 18, 27)
    v.sub_comp_in_place(9, 8, 7)
    assert v == V3I(0, 10, 20)
    v.sub_scalar_in_place(5)
    assert v == V3I(-5, 5, 15)


# --- swizzles ---------------------------------------------------------------


def test_v2i_swizzle():
    v = V2I(1, 2)
    assert v.swizzle_yx() == V2I(2, 1)
    v.swizzle_in_place_yx()
    assert v == V2I(2, 1)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("xzy", V3I(1, 3, 2)),
        ("yxz", V3I(2, 1, 3)),
        ("yzx", V3I(2, 3, 1)),
        ("zxy", V3I(3, 1, 2)),
        ("zyx", V3I(3, 2, 1)),
    ],
)
def test_v3i_swizzles(name, expected):
    v = V3I(1, 2, 3)
    assert getattr(v, f"swizzle_{name}")() == expected
    getattr(v, f"swizzle_in_place_{name}")()
    assert v == expected


# --- conversions ------------------------------------------------------------


def test_v2i_to_float():
    assert V2I(1, -2).to_v2f64() == V2F(1.0, -2.0)
    assert V2I(16777217, 3).to_v2f32() == V2F(16777216.0, 3.0)


def test_v3i_to_float():
    assert V3I(1, 2, 3).to_v3f64() == V3F(1.0, 2.0, 3.0)
    assert V3I(16777217, 0, -1).to_v3f32() == V3F(16777216.0, 0.0, -1.0)


def test_v2i_integer_conversions_wrap():
    v = V2I(300, -129)
    assert v.to_v2i8() == V2I(44, 127)
    assert v.to_v2i16() == V2I(300, -129)
    assert V2I(70000, 0).to_v2i16() == V2I(4464, 0)
    assert V2I(2**31, 1).to_v2i32() == V2I(-(2**31), 1)
    assert V2I(2**63, 5).to_v2i64() == V2I(-(2**63), 5)
    assert V2I(2**63, 5).to_v2i() == V2I(-(2**63), 5)


def test_v3i_integer_conversions_wrap():
    v = V3I(128, 256, -1)
    assert v.to_v3i8() == V3I(-128, 0, -1)
    assert v.to_v3i16() == V3I(128, 256, -1)
    assert V3I(2**32 + 7, 0, 0).to_v3i32() == V3I(7, 0, 0)
    assert V3I(2**64 + 1, 2, 3).to_v3i64() == V3I(1, 2, 3)
    assert V3I(2**64 + 1, 2, 3).to_v3i() == V3I(1, 2, 3)