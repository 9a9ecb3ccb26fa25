# noisekit

Coherent noise functions for procedural content, written in pure Python with
no dependencies. The package offers:

- OpenSimplex2S ("smooth" simplex) noise in 2D and 3D
- Perlin gradient noise, value noise and cubic value noise in 2D and 3D
- Domain warp offsets: basic grid, simplex gradient (2D) and OpenSimplex2
  gradient (3D)
- The hashing, interpolation and gradient lookup helpers behind them
- A small wall-clock `Timer` and helpers for elapsed time

Every noise function is deterministic: the same seed and position always give
the same value. Integer arithmetic wraps to signed 32 bits, so any `int` seed
is accepted.

## Installation

```
pip install noisekit
```

Python 3.10 or newer is required.

## Noise functions

Each function takes the seed first, then the coordinates. The functions apply
no frequency of their own, so scale your coordinates first (for example,
multiply them by 0.01).

```python
from noisekit.lattice import perlin_2d, perlin_3d, value_2d, value_cubic_3d
from noisekit.opensimplex2s import open_simplex2s_2d, open_simplex2s_3d

seed = 1337
x, y, z = 10.0 * 0.01, 20.0 * 0.01, 5.0 * 0.01

perlin_2d(seed, x, y)
perlin_3d(seed, x, y, z)
value_2d(seed, x, y)          # within -1..1
value_cubic_3d(seed, x, y, z)
```

Module `noisekit.lattice` has `perlin_2d`, `perlin_3d`, `value_2d`,
`value_3d`, `value_cubic_2d` and `value_cubic_3d`.

### OpenSimplex2S input

`open_simplex2s_2d` expects coordinates that are already skewed, and
`open_simplex2s_3d` expects coordinates that are already rotated. You apply
the transform yourself:

```python
import math

F2 = 0.5 * (math.sqrt(3) - 1)

def skew_2d(x, y):
    t = (x + y) * F2
    return x + t, y + t

def rotate_3d(x, y, z):
    r = (x + y + z) * (2.0 / 3.0)
    return r - x, r - y, r - z

open_simplex2s_2d(seed, *skew_2d(x, y))
open_simplex2s_3d(seed, *rotate_3d(x, y, z))
```

The result is roughly within -1..1.

## Domain warp offsets

The functions in `noisekit.warp` return a displacement tuple. Add it to your
position, then sample noise at the moved position. Each one takes the seed, an
amplitude, a frequency that it applies to the coordinates, and the position:

```python
from noisekit.warp import basic_grid_2d, simplex_gradient_2d

dx, dy = basic_grid_2d(7, 30.0, 0.01, 100.0, 50.0)
value = perlin_2d(seed, (100.0 + dx) * 0.01, (50.0 + dy) * 0.01)
```

- `basic_grid_2d(seed, warp_amp, frequency, x, y)` and
  `basic_grid_3d(seed, warp_amp, frequency, x, y, z)` interpolate random
  vectors on a square or cubic grid.
- `simplex_gradient_2d(seed, warp_amp, frequency, x, y, out_grad_only)` expects
  skewed coordinates.
- `open_simplex2_gradient_3d(seed, warp_amp, frequency, x, y, z, out_grad_only)`
  expects rotated coordinates.

If `out_grad_only` is true, these functions sum the raw hashed random vectors.
If it is false, they scale each vector by the gradient value at its corner.

## Helpers

`noisekit.primitives` holds the building blocks:

- `PRIME_X`, `PRIME_Y` and `PRIME_Z`, and `to_int32`
- `fast_floor`, `fast_round`, `lerp`, `interp_hermite`, `interp_quintic`,
  `cubic_lerp` and `ping_pong`
- `hash2` and `hash3`, `val_coord2` and `val_coord3`, `grad_coord2` and
  `grad_coord3`, `grad_coord_out2` and `grad_coord_out3`, and
  `grad_coord_dual2` and `grad_coord_dual3`

The lookup tables are `GRADIENTS_2D` and `RAND_VECS_2D` in
`noisekit.tables_2d`, and `GRADIENTS_3D` and `RAND_VECS_3D` in
`noisekit.tables_3d`. They hold single-precision values.

## What the package does not do

There is no configurable generator object. The package does not apply
frequency, skew or rotation for you, and it does not combine octaves into
fractals (FBm, ridged or ping-pong). It has no cellular (Worley) noise and no
plain OpenSimplex2 noise function. The only warp it provides is the
single-octave offset functions listed above.

## Timing

```python
from noisekit.clock import Timer, elapsed, now

timer = Timer()          # starts running at once
# ... work ...
duration = timer.stop()  # total running time so far, in seconds
timer.start()            # resume
timer.reset()            # set back to zero and start again

print(now())             # current high-resolution clock reading
print(elapsed())         # seconds since the clock was first consulted
```

Calling `start()` on a timer that is already running raises `RuntimeError`.
Pass `Timer(False)` to create a timer that is not running yet.

## Running the tests

```
pip install noisekit[test]
pytest
```