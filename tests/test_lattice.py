import itertools

import pytest

from noisekit.lattice import (
    perlin_2d,
    perlin_3d,
    value_2d,
    value_3d,
    value_cubic_2d,
    value_cubic_3d,
)
from noisekit.primitives import PRIME_X, PRIME_Y, PRIME_Z, to_int32, val_coord2, val_coord3

SEED = 1337

_SAMPLES_2D = [(x * 0.37 - 5.1, y * 0.53 - 4.2) for x in range(25) for y in range(20)]
_SAMPLES_3D = [
    (x * 0.61 - 3.3, y * 0.47 - 2.9, z * 0.71 - 1.7)
    for x, y, z in itertools.product(range(8), range(8), range(6))
]


@pytest.mark.parametrize("point", [(0.0, 0.0), (3.0, -7.0), (-12.0, 40.0)])
def test_perlin_2d_is_zero_on_lattice_points(point):
    assert perlin_2d(SEED, *point) == 0.0


@pytest.mark.parametrize("point", [(0.0, 0.0, 0.0), (2.0, -3.0, 9.0)])
def test_perlin_3d_is_zero_on_lattice_points(point):
    assert perlin_3d(SEED, *point) == 0.0


def test_value_2d_on_lattice_point_matches_hashed_value():
    expected = val_coord2(SEED, to_int32(4 * PRIME_X), to_int32(-3 * PRIME_Y))
    assert value_2d(SEED, 4.0, -3.0) == pytest.approx(expected)


def test_value_3d_on_lattice_point_matches_hashed_value():
    expected = val_coord3(
        SEED, to_int32(2 * PRIME_X), to_int32(5 * PRIME_Y), to_int32(-1 * PRIME_Z)
    )
    assert value_3d(SEED, 2.0, 5.0, -1.0) == pytest.approx(expected)


def test_value_cubic_2d_on_lattice_point_is_scaled_hashed_value():
    hashed = val_coord2(SEED, to_int32(6 * PRIME_X), to_int32(1 * PRIME_Y))
    assert value_cubic_2d(SEED, 6.0, 1.0) * 2.25 == pytest.approx(hashed)


def test_value_cubic_3d_on_lattice_point_is_scaled_hashed_value():
    hashed = val_coord3(
        SEED, to_int32(-2 * PRIME_X), to_int32(3 * PRIME_Y), to_int32(7 * PRIME_Z)
    )
    assert value_cubic_3d(SEED, -2.0, 3.0, 7.0) * 3.375 == pytest.approx(hashed)


@pytest.mark.parametrize("func", [perlin_2d, value_2d, value_cubic_2d])
def test_2d_output_is_bounded(func):
    assert all(-1.0001 <= func(SEED, x, y) <= 1.0001 for x, y in _SAMPLES_2D)


@pytest.mark.parametrize("func", [perlin_3d, value_3d, value_cubic_3d])
def test_3d_output_is_bounded(func):
    assert all(-1.0001 <= func(SEED, x, y, z) <= 1.0001 for x, y, z in _SAMPLES_3D)


@pytest.mark.parametrize("func", [perlin_2d, value_2d, value_cubic_2d])
def test_2d_is_deterministic_and_seed_dependent(func):
    first = [func(SEED, x, y) for x, y in _SAMPLES_2D[:50]]
    again = [func(SEED, x, y) for x, y in _SAMPLES_2D[:50]]
    other = [func(SEED + 1, x, y) for x, y in _SAMPLES_2D[:50]]
    assert first == again
    assert first != other


@pytest.mark.parametrize("func", [perlin_3d, value_3d, value_cubic_3d])
def test_3d_is_deterministic_and_seed_dependent(func):
    first = [func(SEED, *p) for p in _SAMPLES_3D[:50]]
    again = [func(SEED, *p) for p in _SAMPLES_3D[:50]]
    other = [func(SEED + 1, *p) for p in _SAMPLES_3D[:50]]
    assert first == again
    assert first != other


@pytest.mark.parametrize("func", [perlin_2d, value_2d, value_cubic_2d])
def test_2d_is_continuous(func):
    for x, y in _SAMPLES_2D[::17]:
        assert abs(func(SEED, x, y) - func(SEED, x + 1e-5, y + 1e-5)) < 1e-3


@pytest.mark.parametrize("func", [perlin_3d, value_3d, value_cubic_3d])
def test_3d_is_continuous(func):
    for x, y, z in _SAMPLES_3D[::23]:
        assert abs(func(SEED, x, y, z) - func(SEED, x + 1e-5, y, z - 1e-5)) < 1e-3


def test_large_seed_wraps_to_32_bits():
    assert perlin_2d(SEED + 2**32, 1.3, 2.7) == perlin_2d(SEED, 1.3, 2.7)
    assert value_cubic_3d(SEED - 2**32, 0.4, 1.1, 2.2) == value_cubic_3d(SEED, 0.4, 1.1, 2.2)