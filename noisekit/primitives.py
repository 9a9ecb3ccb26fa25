"""Integer hashing, interpolation helpers and gradient lookups shared by the noise generators.

Integer arithmetic wraps to signed 32 bits, so hashes match the reference
generator for any seed and lattice coordinate.
"""

from __future__ import annotations

from noisekit.tables_2d import GRADIENTS_2D, RAND_VECS_2D
from noisekit.tables_3d import GRADIENTS_3D, RAND_VECS_3D

PRIME_X = 501125321
PRIME_Y = 1136930381
PRIME_Z = 1720413743

_HASH_MULTIPLIER = 0x27D4EB2D
_INT32_SCALE = 1 / 2147483648.0


def to_int32(value: int) -> int:
    """Wrap an integer to the signed 32-bit range."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def fast_floor(f: float) -> int:
    """Floor by truncation; negative whole numbers step one further down."""
    return int(f) if f >= 0 else int(f) - 1


def fast_round(f: float) -> int:
    """Round half away from zero."""
    return int(f + 0.5) if f >= 0 else int(f - 0.5)


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from a to b."""
    return a + t * (b - a)


def interp_hermite(t: float) -> float:
    """Cubic Hermite smoothstep."""
    return t * t * (3 - 2 * t)


def interp_quintic(t: float) -> float:
    """Quintic smootherstep."""
    return t * t * t * (t * (t * 6 - 15) + 10)


def cubic_lerp(a: float, b: float, c: float, d: float, t: float) -> float:
    """Cubic interpolation between b and c using neighbours a and d."""
    p = (d - c) - (a - b)
    return t * t * t * p + t * t * ((a - b) - p) + t * (c - a) + b


def ping_pong(t: float) -> float:
    """Fold t into a triangle wave between 0 and 1 with period 2."""
    t -= int(t * 0.5) * 2
    return t if t < 1 else 2 - t


def hash2(seed: int, x_primed: int, y_primed: int) -> int:
    """Hash a seed and two primed lattice coordinates."""
    return to_int32((seed ^ x_primed ^ y_primed) * _HASH_MULTIPLIER)


def hash3(seed: int, x_primed: int, y_primed: int, z_primed: int) -> int:
    """Hash a seed and three primed lattice coordinates."""
    return to_int32((seed ^ x_primed ^ y_primed ^ z_primed) * _HASH_MULTIPLIER)


def _value_from_hash(h: int) -> float:
    h = to_int32(h * h)
    h ^= to_int32(h << 19)
    return h * _INT32_SCALE


def val_coord2(seed: int, x_primed: int, y_primed: int) -> float:
    """Pseudo-random value in [-1, 1) for a 2D lattice point."""
    return _value_from_hash(hash2(seed, x_primed, y_primed))


def val_coord3(seed: int, x_primed: int, y_primed: int, z_primed: int) -> float:
    """Pseudo-random value in [-1, 1) for a 3D lattice point."""
    return _value_from_hash(hash3(seed, x_primed, y_primed, z_primed))


def grad_coord2(seed: int, x_primed: int, y_primed: int, xd: float, yd: float) -> float:
    """Dot product of a hashed 2D gradient with the offset (xd, yd)."""
    h = hash2(seed, x_primed, y_primed)
    h ^= h >> 15
    index = h & (127 << 1)
    return xd * GRADIENTS_2D[index] + yd * GRADIENTS_2D[index | 1]


def grad_coord3(
    seed: int, x_primed: int, y_primed: int, z_primed: int, xd: float, yd: float, zd: float
) -> float:
    """Dot product of a hashed 3D gradient with the offset (xd, yd, zd)."""
    h = hash3(seed, x_primed, y_primed, z_primed)
    h ^= h >> 15
    index = h & (63 << 2)
    return xd * GRADIENTS_3D[index] + yd * GRADIENTS_3D[index | 1] + zd * GRADIENTS_3D[index | 2]


def grad_coord_out2(seed: int, x_primed: int, y_primed: int) -> tuple[float, float]:
    """Hashed random 2D unit vector for a lattice point."""
    index = hash2(seed, x_primed, y_primed) & (255 << 1)
    return RAND_VECS_2D[index], RAND_VECS_2D[index | 1]


def grad_coord_out3(
    seed: int, x_primed: int, y_primed: int, z_primed: int
) -> tuple[float, float, float]:
    """Hashed random 3D unit vector for a lattice point."""
    index = hash3(seed, x_primed, y_primed, z_primed) & (255 << 2)
    return RAND_VECS_3D[index], RAND_VECS_3D[index | 1], RAND_VECS_3D[index | 2]


def grad_coord_dual2(
    seed: int, x_primed: int, y_primed: int, xd: float, yd: float
) -> tuple[float, float]:
    """Gradient dot product scaled onto a second hashed random 2D vector."""
    h = hash2(seed, x_primed, y_primed)
    index1 = h & (127 << 1)
    index2 = (h >> 7) & (255 << 1)
    value = xd * GRADIENTS_2D[index1] + yd * GRADIENTS_2D[index1 | 1]
    return value * RAND_VECS_2D[index2], value * RAND_VECS_2D[index2 | 1]


def grad_coord_dual3(
    seed: int, x_primed: int, y_primed: int, z_primed: int, xd: float, yd: float, zd: float
) -> tuple[float, float, float]:
    """Gradient dot product scaled onto a second hashed random 3D vector."""
    h = hash3(seed, x_primed, y_primed, z_primed)
    index1 = h & (63 << 2)
    index2 = (h >> 6) & (255 << 2)
    value = xd * GRADIENTS_3D[index1] + yd * GRADIENTS_3D[index1 | 1] + zd * GRADIENTS_3D[index1 | 2]
    return (
        value * RAND_VECS_3D[index2],
        value * RAND_VECS_3D[index2 | 1],
        value * RAND_VECS_3D[index2 | 2],
    )