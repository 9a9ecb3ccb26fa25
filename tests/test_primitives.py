import math

import pytest

from noisekit.primitives import (
    PRIME_X,
    PRIME_Y,
    PRIME_Z,
    cubic_lerp,
    fast_floor,
    fast_round,
    grad_coord2,
    grad_coord3,
    grad_coord_dual2,
    grad_coord_dual3,
    grad_coord_out2,
    grad_coord_out3,
    hash2,
    hash3,
    interp_hermite,
    interp_quintic,
    lerp,
    ping_pong,
    to_int32,
    val_coord2,
    val_coord3,
)
from noisekit.tables_2d import RAND_VECS_2D
from noisekit.tables_3d import RAND_VECS_3D

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
POINTS = [(0, 0), (1, 2), (-3, 7), (PRIME_X, -PRIME_Y), (12345, -678)]


@pytest.mark.parametrize("value", [0, 5, -5, INT32_MAX, INT32_MIN, 2**40 + 3, -(2**35) - 1])
def test_to_int32_wraps_modulo_2_32(value):
    wrapped = to_int32(value)
    assert INT32_MIN <= wrapped <= INT32_MAX
    assert (wrapped - value) % 2**32 == 0


def test_to_int32_keeps_in_range_values():
    assert to_int32(INT32_MAX) == INT32_MAX
    assert to_int32(INT32_MAX + 1) == INT32_MIN


@pytest.mark.parametrize("f", [0.25, 3.7, -0.3, -2.5, 100.01, -99.99])
def test_fast_floor_matches_floor_for_fractions(f):
    assert fast_floor(f) == math.floor(f)


def test_fast_floor_negative_whole_number_steps_down():
    assert fast_floor(-3.0) == math.floor(-3.0) - 1
    assert fast_floor(4.0) == 4


@pytest.mark.parametrize("f", [0.2, 0.7, 2.5, -0.2, -0.7, -2.5, 10.49])
def test_fast_round_is_within_half(f):
    r = fast_round(f)
    assert abs(r - f) <= 0.5
    assert fast_round(-f) == -r


@pytest.mark.parametrize("a,b", [(0.0, 1.0), (-2.0, 5.0), (3.5, 3.5)])
def test_lerp_endpoints(a, b):
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0) == pytest.approx(b)


@pytest.mark.parametrize("func", [interp_hermite, interp_quintic])
def test_interpolants_fix_endpoints_and_midpoint(func):
    assert func(0.0) == 0.0
    assert func(1.0) == 1.0
    assert func(0.5) == pytest.approx(0.5)
    for t in (0.1, 0.3, 0.8):
        assert func(t) + func(1 - t) == pytest.approx(1.0)


def test_cubic_lerp_passes_through_inner_points():
    a, b, c, d = -1.0, 0.25, 0.75, 2.0
    assert cubic_lerp(a, b, c, d, 0.0) == b
    assert cubic_lerp(a, b, c, d, 1.0) == pytest.approx(c)


@pytest.mark.parametrize("t", [0.0, 0.25, 0.5, 0.9, 1.3, 1.75, 3.2, 7.6])
def test_ping_pong_folds_into_unit_interval(t):
    v = ping_pong(t)
    assert 0.0 <= v <= 1.0
    assert ping_pong(t + 2) == pytest.approx(v)


def test_ping_pong_mirrors_about_one():
    assert ping_pong(0.25) == pytest.approx(0.25)
    assert ping_pong(1.75) == pytest.approx(ping_pong(0.25))


@pytest.mark.parametrize("x,y", POINTS)
def test_hash_properties(x, y):
    seed = 1337
    h = hash2(seed, x, y)
    assert INT32_MIN <= h <= INT32_MAX
    assert h == hash2(seed, y, x)
    assert hash3(seed, x, y, 0) == h
    assert hash2(seed + 2**32, x, y) == h


def test_hash_of_zero_is_zero():
    assert hash2(0, 0, 0) == 0
    assert hash3(0, 0, 0, 0) == 0


@pytest.mark.parametrize("x,y", POINTS)
def test_val_coord_range_and_consistency(x, y):
    v = val_coord2(42, x, y)
    assert -1.0 <= v < 1.0
    assert val_coord3(42, x, y, 0) == v


@pytest.mark.parametrize("x,y", POINTS)
def test_grad_coord2_is_linear_and_bounded(x, y):
    assert grad_coord2(7, x, y, 0.0, 0.0) == 0.0
    g = grad_coord2(7, x, y, 0.3, -0.4)
    assert grad_coord2(7, x, y, 0.6, -0.8) == pytest.approx(2 * g)
    assert abs(g) <= 0.5 + 1e-6


@pytest.mark.parametrize("x,y", POINTS)
def test_grad_coord3_is_linear_and_bounded(x, y):
    z = PRIME_Z
    assert grad_coord3(7, x, y, z, 0.0, 0.0, 0.0) == 0.0
    g = grad_coord3(7, x, y, z, 0.1, 0.2, -0.3)
    assert grad_coord3(7, x, y, z, -0.1, -0.2, 0.3) == pytest.approx(-g)
    # 3D gradients have length sqrt(2)
    assert abs(g) <= math.sqrt(2) * math.sqrt(0.14) + 1e-6


@pytest.mark.parametrize("x,y", POINTS)
def test_grad_coord_out2_returns_table_unit_vector(x, y):
    xo, yo = grad_coord_out2(3, x, y)
    pairs = set(zip(RAND_VECS_2D[0::2], RAND_VECS_2D[1::2]))
    assert (xo, yo) in pairs
    assert math.hypot(xo, yo) == pytest.approx(1.0, abs=1e-5)


@pytest.mark.parametrize("x,y", POINTS)
def test_grad_coord_out3_returns_table_unit_vector(x, y):
    vec = grad_coord_out3(3, x, y, PRIME_Z)
    triples = set(zip(RAND_VECS_3D[0::4], RAND_VECS_3D[1::4], RAND_VECS_3D[2::4]))
    assert vec in triples
    assert math.sqrt(sum(c * c for c in vec)) == pytest.approx(1.0, abs=1e-5)


@pytest.mark.parametrize("x,y", POINTS)
def test_grad_coord_dual2_scales_linearly(x, y):
    assert grad_coord_dual2(9, x, y, 0.0, 0.0) == (0.0, 0.0)
    a = grad_coord_dual2(9, x, y, 0.2, 0.1)
    b = grad_coord_dual2(9, x, y, 0.4, 0.2)
    assert b[0] == pytest.approx(2 * a[0])
    assert b[1] == pytest.approx(2 * a[1])


@pytest.mark.parametrize("x,y", POINTS)
def test_grad_coord_dual3_scales_linearly(x, y):
    assert grad_coord_dual3(9, x, y, 5, 0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)
    a = grad_coord_dual3(9, x, y, 5, 0.2, 0.1, -0.3)
    b = grad_coord_dual3(9, x, y, 5, -0.2, -0.1, 0.3)
    assert b == pytest.approx(tuple(-c for c in a))