"""OpenSimplex2S ("smooth") noise in 2D and 3D.

Inputs are expected already skewed (2D) or rotated (3D) by the caller.
"""

from __future__ import annotations

from noisekit.primitives import (
    PRIME_X,
    PRIME_Y,
    PRIME_Z,
    fast_floor,
    grad_coord2,
    grad_coord3,
    to_int32,
)

_SQRT3 = 1.7320508075688772935274463415059
_G2 = (3 - _SQRT3) / 6
_C_SCALE = 2 * (1 - 2 * _G2) * (1 / _G2 - 2)
_C_OFFSET = -2 * (1 - 2 * _G2) * (1 - 2 * _G2)
_RADIUS_2D = 2.0 / 3.0

_SEED_OFFSET_3D = 1293373
_SCALE_2D = 18.24196194486065
_SCALE_3D = 9.046026385208288


def _falloff(a: float) -> float:
    return (a * a) * (a * a)


def _corner2(seed: int, i: int, j: int, dx: float, dy: float) -> float:
    """Contribution of one outer 2D vertex, zero outside its radius."""
    a = _RADIUS_2D - dx * dx - dy * dy
    if a <= 0:
        return 0.0
    return _falloff(a) * grad_coord2(seed, to_int32(i), to_int32(j), dx, dy)


def open_simplex2s_2d(seed: int, x: float, y: float) -> float:
    """2D OpenSimplex2S noise at a pre-skewed position, roughly within -1..1."""
    seed = to_int32(seed)
    i = fast_floor(x)
    j = fast_floor(y)
    xi = x - i
    yi = y - j

    i = to_int32(i * PRIME_X)
    j = to_int32(j * PRIME_Y)
    i1 = to_int32(i + PRIME_X)
    j1 = to_int32(j + PRIME_Y)

    t = (xi + yi) * _G2
    x0 = xi - t
    y0 = yi - t

    a0 = _RADIUS_2D - x0 * x0 - y0 * y0
    value = _falloff(a0) * grad_coord2(seed, i, j, x0, y0)

    a1 = _C_SCALE * t + (_C_OFFSET + a0)
    x1 = x0 - (1 - 2 * _G2)
    y1 = y0 - (1 - 2 * _G2)
    value += _falloff(a1) * grad_coord2(seed, i1, j1, x1, y1)

    xmyi = xi - yi
    if t > _G2:
        if xi + xmyi > 1:
            value += _corner2(
                seed, i + (PRIME_X << 1), j + PRIME_Y, x0 + (3 * _G2 - 2), y0 + (3 * _G2 - 1)
            )
        else:
            value += _corner2(seed, i, j + PRIME_Y, x0 + _G2, y0 + (_G2 - 1))

        if yi - xmyi > 1:
            value += _corner2(
                seed, i + PRIME_X, j + (PRIME_Y << 1), x0 + (3 * _G2 - 1), y0 + (3 * _G2 - 2)
            )
        else:
            value += _corner2(seed, i + PRIME_X, j, x0 + (_G2 - 1), y0 + _G2)
    else:
        if xi + xmyi < 0:
            value += _corner2(seed, i - PRIME_X, j, x0 + (1 - _G2), y0 - _G2)
        else:
            value += _corner2(seed, i + PRIME_X, j, x0 + (_G2 - 1), y0 + _G2)

        if yi < xmyi:
            value += _corner2(seed, i, j - PRIME_Y, x0 - _G2, y0 - (_G2 - 1))
        else:
            value += _corner2(seed, i, j + PRIME_Y, x0 + _G2, y0 + (_G2 - 1))

    return value * _SCALE_2D


def _corner3(
    seed: int, i: int, j: int, k: int, dx: float, dy: float, dz: float, a: float
) -> float:
    """Contribution of one 3D vertex with precomputed attenuation a."""
    if a <= 0:
        return 0.0
    return _falloff(a) * grad_coord3(seed, to_int32(i), to_int32(j), to_int32(k), dx, dy, dz)


def open_simplex2s_3d(seed: int, x: float, y: float, z: float) -> float:
    """3D OpenSimplex2S noise at a pre-rotated position, roughly within -1..1."""
    seed = to_int32(seed)
    i = fast_floor(x)
    j = fast_floor(y)
    k = fast_floor(z)
    xi = x - i
    yi = y - j
    zi = z - k

    i = to_int32(i * PRIME_X)
    j = to_int32(j * PRIME_Y)
    k = to_int32(k * PRIME_Z)
    seed2 = to_int32(seed + _SEED_OFFSET_3D)

    x_mask = int(-0.5 - xi)
    y_mask = int(-0.5 - yi)
    z_mask = int(-0.5 - zi)
    x_sign = x_mask | 1
    y_sign = y_mask | 1
    z_sign = z_mask | 1

    x0 = xi + x_mask
    y0 = yi + y_mask
    z0 = zi + z_mask
    a0 = 0.75 - x0 * x0 - y0 * y0 - z0 * z0
    value = _falloff(a0) * grad_coord3(
        seed,
        to_int32(i + (x_mask & PRIME_X)),
        to_int32(j + (y_mask & PRIME_Y)),
        to_int32(k + (z_mask & PRIME_Z)),
        x0,
        y0,
        z0,
    )

    x1 = xi - 0.5
    y1 = yi - 0.5
    z1 = zi - 0.5
    a1 = 0.75 - x1 * x1 - y1 * y1 - z1 * z1
    value += _falloff(a1) * grad_coord3(
        seed2,
        to_int32(i + PRIME_X),
        to_int32(j + PRIME_Y),
        to_int32(k + PRIME_Z),
        x1,
        y1,
        z1,
    )

    x_flip0 = (x_sign << 1) * x1
    y_flip0 = (y_sign << 1) * y1
    z_flip0 = (z_sign << 1) * z1
    x_flip1 = (-2 - (x_mask << 2)) * x1 - 1.0
    y_flip1 = (-2 - (y_mask << 2)) * y1 - 1.0
    z_flip1 = (-2 - (z_mask << 2)) * z1 - 1.0

    skip5 = False
    a2 = x_flip0 + a0
    if a2 > 0:
        value += _corner3(
            seed,
            i + (~x_mask & PRIME_X),
            j + (y_mask & PRIME_Y),
            k + (z_mask & PRIME_Z),
            x0 - x_sign,
            y0,
            z0,
            a2,
        )
    else:
        value += _corner3(
            seed,
            i + (x_mask & PRIME_X),
            j + (~y_mask & PRIME_Y),
            k + (~z_mask & PRIME_Z),
            x0,
            y0 - y_sign,
            z0 - z_sign,
            y_flip0 + z_flip0 + a0,
        )
        a4 = x_flip1 + a1
        if a4 > 0:
            value += _corner3(
                seed2,
                i + (x_mask & (PRIME_X * 2)),
                j + PRIME_Y,
                k + PRIME_Z,
                x_sign + x1,
                y1,
                z1,
                a4,
            )
            skip5 = True

    skip9 = False
    a6 = y_flip0 + a0
    if a6 > 0:
        value += _corner3(
            seed,
            i + (x_mask & PRIME_X),
            j + (~y_mask & PRIME_Y),
            k + (z_mask & PRIME_Z),
            x0,
            y0 - y_sign,
            z0,
            a6,
        )
    else:
        value += _corner3(
            seed,
            i + (~x_mask & PRIME_X),
            j + (y_mask & PRIME_Y),
            k + (~z_mask & PRIME_Z),
            x0 - x_sign,
            y0,
            z0 - z_sign,
            x_flip0 + z_flip0 + a0,
        )
        a8 = y_flip1 + a1
        if a8 > 0:
            value += _corner3(
                seed2,
                i + PRIME_X,
                j + (y_mask & (PRIME_Y << 1)),
                k + PRIME_Z,
                x1,
                y_sign + y1,
                z1,
                a8,
            )
            skip9 = True

    skip_d = False
    a_a = z_flip0 + a0
    if a_a > 0:
        value += _corner3(
            seed,
            i + (x_mask & PRIME_X),
            j + (y_mask & PRIME_Y),
            k + (~z_mask & PRIME_Z),
            x0,
            y0,
            z0 - z_sign,
            a_a,
        )
    else:
        value += _corner3(
            seed,
            i + (~x_mask & PRIME_X),
            j + (~y_mask & PRIME_Y),
            k + (z_mask & PRIME_Z),
            x0 - x_sign,
            y0 - y_sign,
            z0,
            x_flip0 + y_flip0 + a0,
        )
        a_c = z_flip1 + a1
        if a_c > 0:
            value += _corner3(
                seed2,
                i + PRIME_X,
                j + PRIME_Y,
                k + (z_mask & (PRIME_Z << 1)),
                x1,
                y1,
                z_sign + z1,
                a_c,
            )
            skip_d = True

    if not skip5:
        value += _corner3(
            seed2,
            i + PRIME_X,
            j + (y_mask & (PRIME_Y << 1)),
            k + (z_mask & (PRIME_Z << 1)),
            x1,
            y_sign + y1,
            z_sign + z1,
            y_flip1 + z_flip1 + a1,
        )

    if not skip9:
        value += _corner3(
            seed2,
            i + (x_mask & (PRIME_X * 2)),
            j + PRIME_Y,
            k + (z_mask & (PRIME_Z << 1)),
            x_sign + x1,
            y1,
            z_sign + z1,
            x_flip1 + z_flip1 + a1,
        )

    if not skip_d:
        value += _corner3(
            seed2,
            i + (x_mask & (PRIME_X << 1)),
            j + (y_mask & (PRIME_Y << 1)),
            k + PRIME_Z,
            x_sign + x1,
            y_sign + y1,
            z1,
            x_flip1 + y_flip1 + a1,
        )

    return value * _SCALE_3D