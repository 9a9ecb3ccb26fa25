"""Domain warp offsets: basic grid, simplex gradient (2D) and OpenSimplex2 gradient (3D).

Each function returns the displacement to add to the input position.
Simplex-based warps expect coordinates already skewed (2D) or rotated (3D).
"""

from __future__ import annotations

from noisekit.primitives import (
    PRIME_X,
    PRIME_Y,
    PRIME_Z,
    fast_floor,
    fast_round,
    grad_coord_dual2,
    grad_coord_dual3,
    grad_coord_out2,
    grad_coord_out3,
    interp_hermite,
    lerp,
    to_int32,
)

_SQRT3 = 1.7320508075688772935274463415059
_G2 = (3 - _SQRT3) / 6
_C_SCALE = 2 * (1 - 2 * _G2) * (1 / _G2 - 2)
_C_OFFSET = -2 * (1 - 2 * _G2) * (1 - 2 * _G2)
_SEED_OFFSET_3D = 1293373


def _falloff(a: float) -> float:
    return (a * a) * (a * a)


def _lerp_vec(a: tuple[float, ...], b: tuple[float, ...], t: float) -> tuple[float, ...]:
    return tuple(lerp(p, q, t) for p, q in zip(a, b))


def basic_grid_2d(
    seed: int, warp_amp: float, frequency: float, x: float, y: float
) -> tuple[float, float]:
    """Offset from bilinearly interpolated random vectors on a square grid."""
    seed = to_int32(seed)
    xf = x * frequency
    yf = y * frequency

    x0 = fast_floor(xf)
    y0 = fast_floor(yf)

    xs = interp_hermite(xf - x0)
    ys = interp_hermite(yf - y0)

    x0 = to_int32(x0 * PRIME_X)
    y0 = to_int32(y0 * PRIME_Y)
    x1 = to_int32(x0 + PRIME_X)
    y1 = to_int32(y0 + PRIME_Y)

    row0 = _lerp_vec(grad_coord_out2(seed, x0, y0), grad_coord_out2(seed, x1, y0), xs)
    row1 = _lerp_vec(grad_coord_out2(seed, x0, y1), grad_coord_out2(seed, x1, y1), xs)

    dx, dy = _lerp_vec(row0, row1, ys)
    return dx * warp_amp, dy * warp_amp


def basic_grid_3d(
    seed: int, warp_amp: float, frequency: float, x: float, y: float, z: float
) -> tuple[float, float, float]:
    """Offset from trilinearly interpolated random vectors on a cubic grid."""
    seed = to_int32(seed)
    xf = x * frequency
    yf = y * frequency
    zf = z * frequency

    x0 = fast_floor(xf)
    y0 = fast_floor(yf)
    z0 = fast_floor(zf)

    xs = interp_hermite(xf - x0)
    ys = interp_hermite(yf - y0)
    zs = interp_hermite(zf - z0)

    x0 = to_int32(x0 * PRIME_X)
    y0 = to_int32(y0 * PRIME_Y)
    z0 = to_int32(z0 * PRIME_Z)
    x1 = to_int32(x0 + PRIME_X)
    y1 = to_int32(y0 + PRIME_Y)
    z1 = to_int32(z0 + PRIME_Z)

    def plane(zp: int) -> tuple[float, ...]:
        row0 = _lerp_vec(
            grad_coord_out3(seed, x0, y0, zp), grad_coord_out3(seed, x1, y0, zp), xs
        )
        row1 = _lerp_vec(
            grad_coord_out3(seed, x0, y1, zp), grad_coord_out3(seed, x1, y1, zp), xs
        )
        return _lerp_vec(row0, row1, ys)

    dx, dy, dz = _lerp_vec(plane(z0), plane(z1), zs)
    return dx * warp_amp, dy * warp_amp, dz * warp_amp


def simplex_gradient_2d(
    seed: int,
    warp_amp: float,
    frequency: float,
    x: float,
    y: float,
    out_grad_only: bool,
) -> tuple[float, float]:
    """Offset from a simplex-weighted sum of hashed vectors.

    With out_grad_only the raw random vectors are summed; otherwise each is
    scaled by the corner's gradient value.
    """
    seed = to_int32(seed)
    x *= frequency
    y *= frequency

    i = fast_floor(x)
    j = fast_floor(y)
    xi = x - i
    yi = y - j

    t = (xi + yi) * _G2
    x0 = xi - t
    y0 = yi - t

    i = to_int32(i * PRIME_X)
    j = to_int32(j * PRIME_Y)

    vx = vy = 0.0

    def add(weight: float, ci: int, cj: int, dx: float, dy: float) -> None:
        nonlocal vx, vy
        if out_grad_only:
            xo, yo = grad_coord_out2(seed, ci, cj)
        else:
            xo, yo = grad_coord_dual2(seed, ci, cj, dx, dy)
        vx += weight * xo
        vy += weight * yo

    a = 0.5 - x0 * x0 - y0 * y0
    if a > 0:
        add(_falloff(a), i, j, x0, y0)

    c = _C_SCALE * t + (_C_OFFSET + a)
    if c > 0:
        x2 = x0 + (2 * _G2 - 1)
        y2 = y0 + (2 * _G2 - 1)
        add(_falloff(c), to_int32(i + PRIME_X), to_int32(j + PRIME_Y), x2, y2)

    if y0 > x0:
        x1 = x0 + _G2
        y1 = y0 + (_G2 - 1)
        corner = (i, to_int32(j + PRIME_Y))
    else:
        x1 = x0 + (_G2 - 1)
        y1 = y0 + _G2
        corner = (to_int32(i + PRIME_X), j)
    b = 0.5 - x1 * x1 - y1 * y1
    if b > 0:
        add(_falloff(b), *corner, x1, y1)

    return vx * warp_amp, vy * warp_amp


def open_simplex2_gradient_3d(
    seed: int,
    warp_amp: float,
    frequency: float,
    x: float,
    y: float,
    z: float,
    out_grad_only: bool,
) -> tuple[float, float, float]:
    """Offset from an OpenSimplex2-weighted sum of hashed 3D vectors.

    With out_grad_only the raw random vectors are summed; otherwise each is
    scaled by the vertex's gradient value.
    """
    seed = to_int32(seed)
    x *= frequency
    y *= frequency
    z *= frequency

    i = fast_round(x)
    j = fast_round(y)
    k = fast_round(z)
    x0 = x - i
    y0 = y - j
    z0 = z - k

    x_sign = int(-x0 - 1.0) | 1
    y_sign = int(-y0 - 1.0) | 1
    z_sign = int(-z0 - 1.0) | 1

    ax0 = x_sign * -x0
    ay0 = y_sign * -y0
    az0 = z_sign * -z0

    i = to_int32(i * PRIME_X)
    j = to_int32(j * PRIME_Y)
    k = to_int32(k * PRIME_Z)

    vx = vy = vz = 0.0

    def add(
        weight: float, vseed: int, ci: int, cj: int, ck: int, dx: float, dy: float, dz: float
    ) -> None:
        nonlocal vx, vy, vz
        if out_grad_only:
            xo, yo, zo = grad_coord_out3(vseed, ci, cj, ck)
        else:
            xo, yo, zo = grad_coord_dual3(vseed, ci, cj, ck, dx, dy, dz)
        vx += weight * xo
        vy += weight * yo
        vz += weight * zo

    a = (0.6 - x0 * x0) - (y0 * y0 + z0 * z0)
    for lattice in range(2):
        if a > 0:
            add(_falloff(a), seed, i, j, k, x0, y0, z0)

        b = a + 1
        i1, j1, k1 = i, j, k
        x1, y1, z1 = x0, y0, z0

        if ax0 >= ay0 and ax0 >= az0:
            x1 += x_sign
            b -= x_sign * 2 * x1
            i1 = to_int32(i1 - x_sign * PRIME_X)
        elif ay0 > ax0 and ay0 >= az0:
            y1 += y_sign
            b -= y_sign * 2 * y1
            j1 = to_int32(j1 - y_sign * PRIME_Y)
        else:
            z1 += z_sign
            b -= z_sign * 2 * z1
            k1 = to_int32(k1 - z_sign * PRIME_Z)

        if b > 0:
            add(_falloff(b), seed, i1, j1, k1, x1, y1, z1)

        if lattice == 1:
            break

        ax0 = 0.5 - ax0
        ay0 = 0.5 - ay0
        az0 = 0.5 - az0

        x0 = x_sign * ax0
        y0 = y_sign * ay0
        z0 = z_sign * az0

        a += (0.75 - ax0) - (ay0 + az0)

        i = to_int32(i + ((x_sign >> 1) & PRIME_X))
        j = to_int32(j + ((y_sign >> 1) & PRIME_Y))
        k = to_int32(k + ((z_sign >> 1) & PRIME_Z))

        x_sign = -x_sign
        y_sign = -y_sign
        z_sign = -z_sign

        seed = to_int32(seed + _SEED_OFFSET_3D)

    return vx * warp_amp, vy * warp_amp, vz * warp_amp