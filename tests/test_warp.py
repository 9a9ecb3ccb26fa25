import itertools
import math

import pytest

from noisekit.primitives import PRIME_X, PRIME_Y, PRIME_Z, grad_coord_out2, grad_coord_out3, to_int32
from noisekit.warp import (
    basic_grid_2d,
    basic_grid_3d,
    open_simplex2_gradient_3d,
    simplex_gradient_2d,
)

SEED = 1337

_POINTS_2D = [(x * 3.7 - 20.0, y * 5.3 - 15.0) for x in range(12) for y in range(10)]
_POINTS_3D = [
    (x * 4.1 - 9.0, y * 3.3 - 7.0, z * 6.7 - 11.0)
    for x, y, z in itertools.product(range(5), range(5), range(4))
]


def test_basic_grid_2d_on_lattice_point_is_the_hashed_vector():
    expected = grad_coord_out2(SEED, to_int32(3 * PRIME_X), to_int32(-2 * PRIME_Y))
    dx, dy = basic_grid_2d(SEED, 1.0, 1.0, 3.0, -2.0)
    assert dx == pytest.approx(expected[0])
    assert dy == pytest.approx(expected[1])


def test_basic_grid_3d_on_lattice_point_is_the_hashed_vector():
    expected = grad_coord_out3(
        SEED, to_int32(1 * PRIME_X), to_int32(4 * PRIME_Y), to_int32(-5 * PRIME_Z)
    )
    result = basic_grid_3d(SEED, 1.0, 1.0, 1.0, 4.0, -5.0)
    assert result == pytest.approx(expected)


def test_basic_grid_offsets_never_exceed_amplitude():
    for x, y in _POINTS_2D:
        dx, dy = basic_grid_2d(SEED, 2.5, 0.1, x, y)
        assert math.hypot(dx, dy) <= 2.5 + 1e-6
    for p in _POINTS_3D:
        assert math.sqrt(sum(c * c for c in basic_grid_3d(SEED, 2.5, 0.1, *p))) <= 2.5 + 1e-6


@pytest.mark.parametrize("out_grad_only", [False, True])
def test_amplitude_scales_offsets_linearly(out_grad_only):
    for x, y in _POINTS_2D[::7]:
        one = simplex_gradient_2d(SEED, 1.0, 0.05, x, y, out_grad_only)
        three = simplex_gradient_2d(SEED, 3.0, 0.05, x, y, out_grad_only)
        assert three == pytest.approx(tuple(3 * c for c in one))
    for p in _POINTS_3D[::9]:
        one = open_simplex2_gradient_3d(SEED, 1.0, 0.05, *p, out_grad_only)
        three = open_simplex2_gradient_3d(SEED, 3.0, 0.05, *p, out_grad_only)
        assert three == pytest.approx(tuple(3 * c for c in one))


def test_zero_amplitude_gives_no_offset():
    assert basic_grid_2d(SEED, 0.0, 0.1, 4.2, 9.1) == (0.0, 0.0)
    assert basic_grid_3d(SEED, 0.0, 0.1, 4.2, 9.1, 1.3) == (0.0, 0.0, 0.0)
    assert simplex_gradient_2d(SEED, 0.0, 0.1, 4.2, 9.1, False) == (0.0, 0.0)
    assert open_simplex2_gradient_3d(SEED, 0.0, 0.1, 4.2, 9.1, 1.3, True) == (0.0, 0.0, 0.0)


def test_frequency_is_equivalent_to_scaling_position():
    for x, y in _POINTS_2D[::5]:
        assert simplex_gradient_2d(SEED, 1.0, 2.0, x, y, False) == pytest.approx(
            simplex_gradient_2d(SEED, 1.0, 1.0, 2 * x, 2 * y, False)
        )
        assert basic_grid_2d(SEED, 1.0, 2.0, x, y) == pytest.approx(
            basic_grid_2d(SEED, 1.0, 1.0, 2 * x, 2 * y)
        )
    for x, y, z in _POINTS_3D[::5]:
        assert open_simplex2_gradient_3d(SEED, 1.0, 2.0, x, y, z, False) == pytest.approx(
            open_simplex2_gradient_3d(SEED, 1.0, 1.0, 2 * x, 2 * y, 2 * z, False)
        )


def test_gradient_modes_differ():
    dual = [simplex_gradient_2d(SEED, 1.0, 0.07, x, y, False) for x, y in _POINTS_2D]
    raw = [simplex_gradient_2d(SEED, 1.0, 0.07, x, y, True) for x, y in _POINTS_2D]
    assert dual != raw
    dual3 = [open_simplex2_gradient_3d(SEED, 1.0, 0.07, *p, False) for p in _POINTS_3D]
    raw3 = [open_simplex2_gradient_3d(SEED, 1.0, 0.07, *p, True) for p in _POINTS_3D]
    assert dual3 != raw3


def test_warps_are_seed_dependent_and_deterministic():
    first = [simplex_gradient_2d(SEED, 1.0, 0.07, x, y, False) for x, y in _POINTS_2D]
    again = [simplex_gradient_2d(SEED, 1.0, 0.07, x, y, False) for x, y in _POINTS_2D]
    other = [simplex_gradient_2d(SEED + 1, 1.0, 0.07, x, y, False) for x, y in _POINTS_2D]
    assert first == again
    assert first != other
    grid = [basic_grid_3d(SEED, 1.0, 0.07, *p) for p in _POINTS_3D]
    grid_other = [basic_grid_3d(SEED + 1, 1.0, 0.07, *p) for p in _POINTS_3D]
    assert grid != grid_other


def test_warps_are_continuous():
    for x, y in _POINTS_2D[::11]:
        a = simplex_gradient_2d(SEED, 1.0, 0.1, x, y, False)
        b = simplex_gradient_2d(SEED, 1.0, 0.1, x + 1e-4, y - 1e-4, False)
        assert all(abs(p - q) < 1e-3 for p, q in zip(a, b))
    for x, y, z in _POINTS_3D[::13]:
        a = open_simplex2_gradient_3d(SEED, 1.0, 0.1, x, y, z, True)
        b = open_simplex2_gradient_3d(SEED, 1.0, 0.1, x + 1e-4, y, z + 1e-4, True)
        assert all(abs(p - q) < 1e-3 for p, q in zip(a, b))


def test_large_seed_wraps_to_32_bits():
    assert open_simplex2_gradient_3d(SEED + 2**32, 1.0, 0.1, 3.3, 4.4, 5.5, False) == (
        open_simplex2_gradient_3d(SEED, 1.0, 0.1, 3.3, 4.4, 5.5, False)
    )
    assert basic_grid_2d(SEED - 2**32, 1.0, 0.1, 3.3, 4.4) == basic_grid_2d(
        SEED, 1.0, 0.1, 3.3, 4.4
    )