# maths2

A compact maths toolkit for games and simulations, written in pure Python with
no dependencies.

## Modules

### `maths2.scalar`

- `deg_to_rad(deg)`, `rad_to_deg(rad)`: angle conversion.
- `invsqrt(number)`: approximate `1/sqrt(number)` using the bit-level trick on
  the 64-bit float representation followed by two Newton steps.
  `fast_sqrt(x)` returns `x * invsqrt(x)`. Both are approximations.
- `clamp(x, low, high)`: restrict `x` to `[low, high]`.
- `normalize(x, low, high)`: `(x - low) / (high - low)`.
  `int_normalize(x, low, high)` does the same with integer division truncated
  toward zero. Both raise `ZeroDivisionError` when `low == high`.
- `sign(x)`: `1`, `0` or `-1`.
- `round_to(x, step)`: round to the nearest multiple of `step`, halves rounding up.
- `double_equal(a, b)`: `True` when `a` and `b` differ by less than
  `DOUBLE_EPSILON` (`1e-12`). `float_equal(a, b)` rounds both values and their
  difference to single precision first, then compares against the same epsilon.
- Constants `FLOAT_EPSILON` (`1e-6`) and `DOUBLE_EPSILON` (`1e-12`).

### `maths2.easing`

- `lerp(a, b, t)`, `step(edge, x)`, `smoothstep(edge0, edge1, x)`.
- Easing curves for `t` in `[0, 1]`: `ease_quad_in`, `ease_quad_out`,
  `ease_quad_inout`, `ease_cubic_*`, `ease_back_*` and `ease_bounce_*`.

### `maths2.rng`

- `splitmix64(seed)`: advance a splitmix64 seed and return `(next_seed, output)`.
- `Rng(seed=0)`: a xoshiro256** generator whose state is seeded through
  splitmix64. A seed of `0` is replaced by a fixed default seed. The same seed
  always gives the same sequence.
  - `next_u64()`: the next raw 64-bit output. The generator is also an
    iterator over these values.
  - `random()`: a float in `[0.0, 1.0)` from the top 53 bits.
  - `int_range(low, high)`: an integer in the closed range `[low, high]`;
    raises `ValueError` when `high < low`.
  - `float_range(low, high)`: a value computed at single precision.
  - `double_range(low, high)`: a value computed at double precision.
  - `state`: the four 64-bit state words as a tuple.

### `maths2.vectors`

Immutable dataclasses `Vec2(x, y)` and `Vec3(x, y, z)` with `+`, `-`, scalar
`*`, `scale`, `cross` (a float for `Vec2`, a `Vec3` for `Vec3`), `dot`,
`length`, `distance`, `distance2` (squared), `normalized` (the zero vector
stays zero), `to_homogeneous` (a `Quaternion` with `w = 1`), `is_close`
(component-wise within `FLOAT_EPSILON`) and the class method `from_angle`
(`Vec2` on the unit circle; `Vec3` in the XZ plane). `Vec2.to_vec3()` and
`Vec3.to_vec2()` convert between the two. `Quaternion(x, y, z, w)` is a plain
four-component value.

### `maths2.geometry2d`

- `point_direction(origin, target)`: angle in radians from origin to target.
- `distance_2d(x1, y1, x2, y2)`.
- `Ray2(origin, direction)` with `from_angle`, `from_points` and `point_at(t)`.
- `Rect(pos, size)` with `from_bounds(low, high)`, `contains_point` (edges
  included) and `overlaps` (interiors only).
- `RectBounds(low, high)` with `to_rect` and `contains_point`.
- `Circle(pos, radius)` with `contains_point`, `overlaps_circle` and
  `overlaps_rect`.
- `Triangle(a, b, c)` with `contains_point`, for either winding.

### `maths2.geometry3d`

- `Plane3(normal, d)` with `from_points(a, b, c)`, `signed_distance`,
  `project` and `contains_point`.
- `Ray3(origin, direction)` with `from_points`, `from_direction`, `point_at(t)`
  and `hit_plane(plane)`, which returns the parameter `t` or `None` when the ray
  is parallel to the plane or the plane lies behind it.
- `BBox(low, high)` with `contains_point` and `overlaps`.
- `Sphere(pos, radius)` with `contains_point`, `overlaps_sphere` and
  `overlaps_bbox`.
- `Triangle3(a, b, c)` with `contains_point`, which requires the point to lie
  in the triangle's plane within `FLOAT_EPSILON`.

## Installation

```
pip install .
```

## Usage

```python
from maths2.vectors import Vec2, Vec3
from maths2.geometry2d import Circle, Rect
from maths2.geometry3d import Plane3, Ray3
from maths2.rng import Rng
from maths2.easing import ease_bounce_out

v = Vec2(3, 4)
v.length()                      # 5.0
(v * 2).normalized()            # Vec2(x=0.6, y=0.8)

rect = Rect(Vec2(4, 5), Vec2(50, 50))
rect.contains_point(Vec2(10, 10))               # True
Circle(Vec2(0, 0), 2).overlaps_rect(rect)       # False

plane = Plane3.from_points(Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(0, 1, 0))
ray = Ray3.from_direction(Vec3(0, 0, 5), Vec3(0, 0, -1))
ray.hit_plane(plane)            # 5.0

rng = Rng(42)
rng.int_range(0, 255)           # the same value every time for seed 42
rng.random()                    # a float in [0, 1)

ease_bounce_out(0.5)
```

## What it does not do

This is a library only. It provides no command-line program, and it has no
matrices, quaternion arithmetic or ray intersection tests other than
ray–plane.

## Running the tests

```
pip install .[test]
pytest
```