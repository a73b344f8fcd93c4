# genvec

Small, mutable 2D and 3D vector types for Python, with float and integer
components:

- `genvec.floats`: `V2F` and `V3F`, vectors with float components
- `genvec.ints`: `V2I` and `V3I`, vectors with integer components
- `genvec.axis`: the `Axis` enumeration and two numeric helpers

The vectors are slotted dataclasses with `x`, `y` (and `z`) fields. They
compare by value, and iterating over one yields its components in order.
Most operations come in two forms. One returns a new vector. The `_in_place`
form changes the vector it is called on and returns `None`.

## Installation

```
pip install genvec
```

No dependencies outside the standard library.

## Usage

```python
from genvec.axis import Axis
from genvec.floats import V2F, V3F
from genvec.ints import V2I, V3I

v = V2F(0.0, 1.0)
r = v.rotate_deg(90)            # approximately V2F(-1.0, 0.0)
v.sub_scalar_in_place(0.5)      # v is now V2F(-0.5, 0.5)

w = V3F(1.0, 2.0, 3.0)
w.swizzle_zyx()                 # V3F(3.0, 2.0, 1.0)
w.rotate_deg(90, Axis.Z)        # approximately V3F(-2.0, 1.0, 3.0)

p = V2I(10, 20)
p.rand_in()                     # x in [0, 10], y in [0, 20]
p.rand_between(V2I(30, 40))     # x in [10, 30], y in [20, 40]
p.sin()                         # a V2F

V3I.from_slice([1, 2, 3]).to_list()   # [1, 2, 3]
```

## Operations

Both float and integer vectors have these operations:

- `sub`, `sub_comp`, `sub_scalar` (and `_in_place` forms) subtract another
  vector, separate component values, or one scalar from every component.
- Swizzles reorder the components, each with an `_in_place` form.
  2D vectors have `swizzle_yx`. 3D vectors have `swizzle_xzy`,
  `swizzle_yxz`, `swizzle_yzx`, `swizzle_zxy` and `swizzle_zyx`.
- `from_slice(values)` is a class method that builds a vector from the
  first items of a sequence. `to_list()` returns the components as a new
  list. `apply_to_slice(values)` writes the components into the first items
  of a mutable sequence. `from_slice` and `apply_to_slice` raise
  `ValueError` when the sequence is shorter than the vector.
- `rand_between(to)`, `rand_between_comp(...)` and `rand_in()`, with
  `_in_place` forms, return random vectors. They are described below.

Float vectors also have `sin`, `tan`, `sqrt` and `round`, each with an
`_in_place` form. `sqrt` gives NaN for negative components. `sin` and `tan`
give NaN for infinite components. `round` rounds halves away from zero.

Integer vectors have `sin`, `tan` and `sqrt` that return a float vector
(`V2F` or `V3F`). They have no `_in_place` forms.

### Rotation

- `V2F.rotate_rad(angle_rad)`, `V2F.rotate_deg(degrees)` and
  `V2F.rotate_deg_in_place(degrees)` rotate counterclockwise.
- `V2I.rotate_rad` and `V2I.rotate_deg` return a rotated `V2F`.
- `V3F.rotate_deg(degrees, axis)`, `V3F.rotate_deg_in_place(degrees, axis)`
  and `V3I.rotate_deg(degrees, axis)` take an `Axis`. `V3I.rotate_deg`
  returns a `V3F`.

`Axis.Z` is a standard counterclockwise rotation in the x–y plane and
leaves `z` unchanged. The other two axes use these formulas, with angle `d`:

- `Axis.Y` leaves `y` unchanged and sets
  `x = cos(d)·x − sin(d)·y` and `z = −sin(d)·x + cos(d)·z`.
- `Axis.X` leaves `x` unchanged and sets
  `y = cos(d)·y − sin(d)·z` and `z = −sin(d)·z + cos(d)·z`.

### Random values

- Float vectors: `rand_between` picks each component uniformly between the
  vector's value and the target's, in either order. `rand_in` multiplies
  each component by a uniform value in `[0, 1)`.
- Integer vectors: `rand_between` picks each component from the inclusive
  range `[own, target]`. If the target is not greater than the vector's
  value, the component is left as it is. `rand_in` picks each component
  from `[0, own]` and raises `ValueError` for a negative component.

### Conversions

`to_v2f64`, `to_v2f32`, `to_v2i`, `to_v2i64`, `to_v2i32`, `to_v2i16` and
`to_v2i8` convert a vector. `V3F` and `V3I` have the matching `to_v3...`
methods.

- The float conversions return `V2F` or `V3F`. The `f32` forms round each
  component to single precision.
- The integer conversions return `V2I` or `V3I`. Floats are truncated
  toward zero, and the result wraps around like a signed integer of the
  given width. `to_v2i` and `to_v3i` use 64 bits.

## Helpers

`genvec.axis` provides:

- `Axis`, with members `X`, `Y` and `Z`
- `deg_to_rad(degrees)`
- `almost_equal(a, b, epsilon)`, which returns `True` when `a` and `b`
  differ by no more than `epsilon`

## What genvec does not provide

Subtraction is the only arithmetic between vectors. There is no addition,
multiplication or division of vectors. There is no dot product, length,
normalisation or angle between vectors. Python operators such as `+` and
`-` are not overloaded.

## Running the tests

```
pip install -e .[test]
pytest
```