import math

import pytest

from fdfview.geometry import Vec, difx, dify, hypotenuse, rot_rect_h, round_half_up


def test_hypotenuse_classic_triangle():
    assert hypotenuse(3, 4) == pytest.approx(5.0)


@pytest.mark.parametrize("a,b", [(1.0, 2.0), (7.5, 0.25), (10, 10)])
def test_hypotenuse_is_symmetric_and_matches_hypot(a, b):
    assert hypotenuse(a, b) == pytest.approx(hypotenuse(b, a))
    assert hypotenuse(a, b) == pytest.approx(math.hypot(a, b))


@pytest.mark.parametrize("value", [0.0, 3.0, 12.5])
def test_hypotenuse_with_zero_leg(value):
    assert hypotenuse(value, 0) == pytest.approx(value)


@pytest.mark.parametrize("length,width", [(10, 4), (3, 3), (20, 7)])
def test_rot_rect_h_quarter_turn_gives_length(length, width):
    assert rot_rect_h(math.pi / 2, length, width) == pytest.approx(length)


@pytest.mark.parametrize("side", [1, 5, 12])
def test_rot_rect_h_unrotated_square_gives_side(side):
    assert rot_rect_h(0, side, side) == pytest.approx(side)


def test_difx_dify_simple_offset():
    a = Vec(1, 2, 0)
    b = Vec(4, 9, 0)
    assert difx(a, b) == 3
    assert dify(a, b) == b.y - a.y


@pytest.mark.parametrize(
    "a,b",
    [(Vec(0, 0), Vec(5, -3)), (Vec(-2, 7), Vec(10, 1)), (Vec(3, 3), Vec(3, 3))],
)
def test_differences_are_antisymmetric(a, b):
    assert difx(a, b) == -difx(b, a)
    assert dify(a, b) == -dify(b, a)


def test_differences_truncate_towards_zero():
    a = Vec(0.0, 0.0)
    b = Vec(2.7, -2.7)
    assert difx(a, b) == 2
    assert dify(a, b) == -2


@pytest.mark.parametrize("n", range(0, 20))
def test_round_half_up_on_integers_and_halves(n):
    assert round_half_up(float(n)) == n
    assert round_half_up(n + 0.5) == n + 1
    assert round_half_up(n + 0.49) == n


def test_vec_defaults_and_mutation():
    v = Vec()
    v.x += 1.5
    v.color = 0xFFFFFF
    assert (v.x, v.y, v.z, v.color) == (1.5, 0.0, 0.0, 0xFFFFFF)