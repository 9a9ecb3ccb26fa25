"""Lattice-based noise: Perlin gradient noise, cubic value noise and value noise."""

from __future__ import annotations

from noisekit.primitives import (
    PRIME_X,
    PRIME_Y,
    PRIME_Z,
    cubic_lerp,
    fast_floor,
    grad_coord2,
    grad_coord3,
    interp_hermite,
    interp_quintic,
    lerp,
    to_int32,
    val_coord2,
    val_coord3,
)

_PERLIN_SCALE_2D = 1.4247691104677813
_PERLIN_SCALE_3D = 0.964921414852142333984375
_CUBIC_SCALE_2D = 1 / (1.5 * 1.5)
_CUBIC_SCALE_3D = 1 / (1.5 * 1.5 * 1.5)


def _cubic_axis(base: int, prime: int) -> tuple[int, int, int, int]:
    """The four primed lattice coordinates around base used by cubic interpolation."""
    primed = to_int32(base * prime)
    return (
        to_int32(primed - prime),
        primed,
        to_int32(primed + prime),
        to_int32(primed + (prime << 1)),
    )


def perlin_2d(seed: int, x: float, y: float) -> float:
    """2D Perlin gradient noise, roughly within -1..1."""
    seed = to_int32(seed)
    x0 = fast_floor(x)
    y0 = fast_floor(y)

    xd0 = x - x0
    yd0 = y - y0
    xd1 = xd0 - 1
    yd1 = yd0 - 1

    xs = interp_quintic(xd0)
    ys = interp_quintic(yd0)

    x0 = to_int32(x0 * PRIME_X)
    y0 = to_int32(y0 * PRIME_Y)
    x1 = to_int32(x0 + PRIME_X)
    y1 = to_int32(y0 + PRIME_Y)

    xf0 = lerp(grad_coord2(seed, x0, y0, xd0, yd0), grad_coord2(seed, x1, y0, xd1, yd0), xs)
    xf1 = lerp(grad_coord2(seed, x0, y1, xd0, yd1), grad_coord2(seed, x1, y1, xd1, yd1), xs)

    return lerp(xf0, xf1, ys) * _PERLIN_SCALE_2D


def perlin_3d(seed: int, x: float, y: float, z: float) -> float:
    """3D Perlin gradient noise, roughly within -1..1."""
    seed = to_int32(seed)
    x0 = fast_floor(x)
    y0 = fast_floor(y)
    z0 = fast_floor(z)

    xd0 = x - x0
    yd0 = y - y0
    zd0 = z - z0
    xd1 = xd0 - 1
    yd1 = yd0 - 1
    zd1 = zd0 - 1

    xs = interp_quintic(xd0)
    ys = interp_quintic(yd0)
    zs = interp_quintic(zd0)

    x0 = to_int32(x0 * PRIME_X)
    y0 = to_int32(y0 * PRIME_Y)
    z0 = to_int32(z0 * PRIME_Z)
    x1 = to_int32(x0 + PRIME_X)
    y1 = to_int32(y0 + PRIME_Y)
    z1 = to_int32(z0 + PRIME_Z)

    def row(yp: int, zp: int, yd: float, zd: float) -> float:
        return lerp(
            grad_coord3(seed, x0, yp, zp, xd0, yd, zd),
            grad_coord3(seed, x1, yp, zp, xd1, yd, zd),
            xs,
        )

    yf0 = lerp(row(y0, z0, yd0, zd0), row(y1, z0, yd1, zd0), ys)
    yf1 = lerp(row(y0, z1, yd0, zd1), row(y1, z1, yd1, zd1), ys)

    return lerp(yf0, yf1, zs) * _PERLIN_SCALE_3D


def value_cubic_2d(seed: int, x: float, y: float) -> float:
    """2D value noise with cubic interpolation over a 4x4 neighbourhood."""
    seed = to_int32(seed)
    x1 = fast_floor(x)
    y1 = fast_floor(y)
    xs = x - x1
    ys = y - y1

    xp = _cubic_axis(x1, PRIME_X)
    yp = _cubic_axis(y1, PRIME_Y)

    rows = (cubic_lerp(*(val_coord2(seed, xi, yi) for xi in xp), xs) for yi in yp)
    return cubic_lerp(*rows, ys) * _CUBIC_SCALE_2D


def value_cubic_3d(seed: int, x: float, y: float, z: float) -> float:
    """3D value noise with cubic interpolation over a 4x4x4 neighbourhood."""
    seed = to_int32(seed)
    x1 = fast_floor(x)
    y1 = fast_floor(y)
    z1 = fast_floor(z)
    xs = x - x1
    ys = y - y1
    zs = z - z1

    xp = _cubic_axis(x1, PRIME_X)
    yp = _cubic_axis(y1, PRIME_Y)
    zp = _cubic_axis(z1, PRIME_Z)

    def plane(zi: int) -> float:
        rows = (cubic_lerp(*(val_coord3(seed, xi, yi, zi) for xi in xp), xs) for yi in yp)
        return cubic_lerp(*rows, ys)

    return cubic_lerp(*(plane(zi) for zi in zp), zs) * _CUBIC_SCALE_3D


def value_2d(seed: int, x: float, y: float) -> float:
    """2D value noise with Hermite interpolation, within -1..1."""
    seed = to_int32(seed)
    x0 = fast_floor(x)
    y0 = fast_floor(y)

    xs = interp_hermite(x - x0)
    ys = interp_hermite(y - y0)

    x0 = to_int32(x0 * PRIME_X)
    y0 = to_int32(y0 * PRIME_Y)
    x1 = to_int32(x0 + PRIME_X)
    y1 = to_int32(y0 + PRIME_Y)

    xf0 = lerp(val_coord2(seed, x0, y0), val_coord2(seed, x1, y0), xs)
    xf1 = lerp(val_coord2(seed, x0, y1), val_coord2(seed, x1, y1), xs)

    return lerp(xf0, xf1, ys)


def value_3d(seed: int, x: float, y: float, z: float) -> float:
    """3D value noise with Hermite interpolation, within -1..1."""
    seed = to_int32(seed)
    x0 = fast_floor(x)
    y0 = fast_floor(y)
    z0 = fast_floor(z)

    xs = interp_hermite(x - x0)
    ys = interp_hermite(y - y0)
    zs = interp_hermite(z - z0)

    x0 = to_int32(x0 * PRIME_X)
    y0 = to_int32(y0 * PRIME_Y)
    z0 = to_int32(z0 * PRIME_Z)
    x1 = to_int32(x0 + PRIME_X)
    y1 = to_int32(y0 + PRIME_Y)
    z1 = to_int32(z0 + PRIME_Z)

    xf00 = lerp(val_coord3(seed, x0, y0, z0), val_coord3(seed, x1, y0, z0), xs)
    xf10 = lerp(val_coord3(seed, x0, y1, z0), val_coord3(seed, x1, y1, z0), xs)
    xf01 = lerp(val_coord3(seed, x0, y0, z1), val_coord3(seed, x1, y0, z1), xs)
    xf11 = lerp(val_coord3(seed, x0, y1, z1), val_coord3(seed, x1, y1, z1), xs)

    yf0 = lerp(xf00, xf10, ys)
    yf1 = lerp(xf01, xf11, ys)

    return lerp(yf0, yf1, zs)