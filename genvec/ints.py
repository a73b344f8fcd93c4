"""Two- and three-component vectors with integer components."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator, MutableSequence, Sequence

from genvec.axis import Axis
from genvec.floats import V2F, V3F

_rng = random.Random()


def _wrap(value: int, bits: int) -> int:
    """Wrap ``value`` into a signed integer of ``bits`` width."""
    modulus = 1 << bits
    wrapped = value % modulus
    return wrapped - modulus if wrapped >= modulus // 2 else wrapped


def _rand_between(start: int, end: int) -> int:
    """Return a random integer in [start, end], or ``start`` if the range is empty."""
    span = end - start
    if span > 0:
        return start + _rng.randint(0, span)
    return start


def _rand_in(limit: int) -> int:
    """Return a random integer in [0, limit]."""
    if limit < 0:
        raise ValueError(f"cannot draw a random value in [0, {limit}]")
    return _rng.randint(0, limit)


@dataclass(slots=True)
class V2I:
    """A two-component vector of integers."""

    x: int = 0
    y: int = 0

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    @classmethod
    def from_slice(cls, values: Sequence[int]) -> V2I:
        """Build a vector from the first two items of ``values``."""
        if len(values) < 2:
            raise ValueError("V2I.from_slice: slice length < 2")
        return cls(values[0], values[1])

    def to_list(self) -> list[int]:
        """Return the components as a new list."""
        return [self.x, self.y]

    def apply_to_slice(self, values: MutableSequence[int]) -> None:
        """Write the components into the first two items of ``values``."""
        if len(values) < 2:
            raise ValueError("V2I.apply_to_slice: slice length < 2")
        values[0], values[1] = self.x, self.y

    def rand_between(self, to: V2I) -> V2I:
        """Return a vector with each component random in [self, to]."""
        return self.rand_between_comp(to.x, to.y)

    def rand_between_comp(self, to_x: int, to_y: int) -> V2I:
        """Return a vector with each component random in [self, given value]."""
        return V2I(_rand_between(self.x, to_x), _rand_between(self.y, to_y))

    def rand_between_in_place(self, to: V2I) -> None:
        """Set each component to a random value in [current, to]."""
        self.rand_between_comp_in_place(to.x, to.y)

    def rand_between_comp_in_place(self, to_x: int, to_y: int) -> None:
        """Set each component to a random value in [current, given value]."""
        self.x = _rand_between(self.x, to_x)
        self.y = _rand_between(self.y, to_y)

    def rand_in(self) -> V2I:
        """Return a vector with each component random in [0, this one's]."""
        return V2I(_rand_in(self.x), _rand_in(self.y))

    def rand_in_in_place(self) -> None:
        """Set each component to a random value in [0, current]."""
        self.x, self.y = _rand_in(self.x), _rand_in(self.y)

    def rotate_rad(self, angle_rad: float) -> V2F:
        """Return a float vector rotated counterclockwise by ``angle_rad`` radians."""
        return self.to_v2f64().rotate_rad(angle_rad)

    def rotate_deg(self, degrees: float) -> V2F:
        """Return a float vector rotated counterclockwise by ``degrees``."""
        return self.to_v2f64().rotate_deg(degrees)

    def sin(self) -> V2F:
        """Return a float vector of the sine of each component."""
        return self.to_v2f64().sin()

    def sqrt(self) -> V2F:
        """Return a float vector of the square root of each component."""
        return self.to_v2f64().sqrt()

    def tan(self) -> V2F:
        """Return a float vector of the tangent of each component."""
        return self.to_v2f64().tan()

    def sub(self, other: V2I) -> V2I:
        """Return the component-wise difference ``self - other``."""
        return V2I(self.x - other.x, self.y - other.y)

    def sub_in_place(self, other: V2I) -> None:
        """Subtract ``other`` component-wise."""
        self.x -= other.x
        self.y -= other.y

    def sub_comp(self, x: int, y: int) -> V2I:
        """Return this vector with ``x`` and ``y`` subtracted."""
        return V2I(self.x - x, self.y - y)

    def sub_comp_in_place(self, x: int, y: int) -> None:
        """Subtract ``x`` and ``y`` from the components."""
        self.x -= x
        self.y -= y

    def sub_scalar(self, scalar: int) -> V2I:
        """Return this vector with ``scalar`` subtracted from each component."""
        return V2I(self.x - scalar, self.y - scalar)

    def sub_scalar_in_place(self, scalar: int) -> None:
        """Subtract ``scalar`` from each component."""
        self.x -= scalar
        self.y -= scalar

    def swizzle_yx(self) -> V2I:
        """Return a vector with X and Y swapped."""
        return V2I(self.y, self.x)

    def swizzle_in_place_yx(self) -> None:
        """Swap X and Y."""
        self.x, self.y = self.y, self.x

    def to_v2f64(self) -> V2F:
        """Return a float vector with double-precision components."""
        return V2F(float(self.x), float(self.y))

    def to_v2f32(self) -> V2F:
        """Return a float vector with components rounded to single precision."""
        return self.to_v2f64().to_v2f32()

    def to_v2i64(self) -> V2I:
        """Return a copy with components wrapped to 64 bits."""
        return V2I(_wrap(self.x, 64), _wrap(self.y, 64))

    def to_v2i32(self) -> V2I:
        """Return a copy with components wrapped to 32 bits."""
        return V2I(_wrap(self.x, 32), _wrap(self.y, 32))

    def to_v2i16(self) -> V2I:
        """Return a copy with components wrapped to 16 bits."""
        return V2I(_wrap(self.x, 16), _wrap(self.y, 16))

    def to_v2i8(self) -> V2I:
        """Return a copy with components wrapped to 8 bits."""
        return V2I(_wrap(self.x, 8), _wrap(self.y, 8))

    def to_v2i(self) -> V2I:
        """Return a copy with components wrapped to the native integer width."""
        return self.to_v2i64()


@dataclass(slots=True)
class V3I:
    """A three-component vector of integers."""

    x: int = 0
    y: int = 0
    z: int = 0

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y
        yield self.z

    @classmethod
    def from_slice(cls, values: Sequence[int]) -> V3I:
        """Build a vector from the first three items of ``values``."""
        if len(values) < 3:
            raise ValueError("V3I.from_slice: slice length < 3")
        return cls(values[0], values[1], values[2])

    def to_list(self) -> list[int]:
        """Return the components as a new list."""
        return [self.x, self.y, self.z]

    def apply_to_slice(self, values: MutableSequence[int]) -> None:
        """Write the components into the first three items of ``values``."""
        if len(values) < 3:
            raise ValueError("V3I.apply_to_slice: slice length < 3")
        values[0], values[1], values[2] = self.x, self.y, self.z

    def rand_between(self, to: V3I) -> V3I:
        """Return a vector with each component random in [self, to]."""
        return self.rand_between_comp(to.x, to.y, to.z)

    def rand_between_comp(self, to_x: int, to_y: int, to_z: int) -> V3I:
        """Return a vector with each component random in [self, given value]."""
        return V3I(
            _rand_between(self.x, to_x),
            _rand_between(self.y, to_y),
            _rand_between(self.z, to_z),
        )

    def rand_between_in_place(self, to: V3I) -> None:
        """Set each component to a random value in [current, to]."""
        self.rand_between_comp_in_place(to.x, to.y, to.z)

    def rand_between_comp_in_place(self, to_x: int, to_y: int, to_z: int) -> None:
        """Set each component to a random value in [current, given value]."""
        self.x = _rand_between(self.x, to_x)
        self.y = _rand_between(self.y, to_y)
        self.z = _rand_between(self.z, to_z)

    def rand_in(self) -> V3I:
        """Return a vector with each component random in [0, this one's]."""
        return V3I(_rand_in(self.x), _rand_in(self.y), _rand_in(self.z))

    def rand_in_in_place(self) -> None:
        """Set each component to a random value in [0, current]."""
        self.x, self.y, self.z = _rand_in(self.x), _rand_in(self.y), _rand_in(self.z)

    def rotate_deg(self, degrees: float, axis: Axis) -> V3F:
        """Return a float vector rotated counterclockwise by ``degrees`` around ``axis``."""
        return self.to_v3f64().rotate_deg(degrees, axis)

    def sin(self) -> V3F:
        """Return a float vector of the sine of each component."""
        return self.to_v3f64().sin()

    def sqrt(self) -> V3F:
        """Return a float vector of the square root of each component."""
        return self.to_v3f64().sqrt()

    def tan(self) -> V3F:
        """Return a float vector of the tangent of each component."""
        return self.to_v3f64().tan()

    def sub(self, other: V3I) -> V3I:
        """Return the component-wise difference ``self - other``."""
        return V3I(self.x - other.x, self.y - other.y, self.z - other.z)

    def sub_in_place(self, other: V3I) -> None:
        """Subtract ``other`` component-wise."""
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z

    def sub_comp(self, x: int, y: int, z: int) -> V3I:
        """Return this vector with ``x``, ``y`` and ``z`` subtracted."""
        return V3I(self.x - x, self.y - y, self.z - z)

    def sub_comp_in_place(self, x: int, y: int, z: int) -> None:
        """Subtract ``x``, ``y`` and ``z`` from the components."""
        self.x -= x
        self.y -= y
        self.z -= z

    def sub_scalar(self, scalar: int) -> V3I:
        """Return this vector with ``scalar`` subtracted from each component."""
        return V3I(self.x - scalar, self.y - scalar, self.z - scalar)

    def sub_scalar_in_place(self, scalar: int) -> None:
        """Subtract ``scalar`` from each component."""
        self.x -= scalar
        self.y -= scalar
        self.z -= scalar

    def swizzle_xzy(self) -> V3I:
        """Return (x, z, y)."""
        return V3I(self.x, self.z, self.y)

    def swizzle_in_place_xzy(self) -> None:
        """Reorder components to (x, z, y)."""
        self.y, self.z = self.z, self.y

    def swizzle_yxz(self) -> V3I:
        """Return (y, x, z)."""
        return V3I(self.y, self.x, self.z)

    def swizzle_in_place_yxz(self) -> None:
        """Reorder components to (y, x, z)."""
        self.x, self.y = self.y, self.x

    def swizzle_yzx(self) -> V3I:
        """Return (y, z, x)."""
        return V3I(self.y, self.z, self.x)

    def swizzle_in_place_yzx(self) -> None:
        """Reorder components to (y, z, x)."""
        self.x, self.y, self.z = self.y, self.z, self.x

    def swizzle_zxy(self) -> V3I:
        """Return (z, x, y)."""
        return V3I(self.z, self.x, self.y)

    def swizzle_in_place_zxy(self) -> None:
        """Reorder components to (z, x, y)."""
        self.x, self.y, self.z = self.z, self.x, self.y

    def swizzle_zyx(self) -> V3I:
        """Return (z, y, x)."""
        return V3I(self.z, self.y, self.x)

    def swizzle_in_place_zyx(self) -> None:
        """Reorder components to (z, y, x)."""
        self.x, self.z = self.z, self.x

    def to_v3f64(self) -> V3F:
        """Return a float vector with double-precision components."""
        return V3F(float(self.x), float(self.y), float(self.z))

    def to_v3f32(self) -> V3F:
        """Return a float vector with components rounded to single precision."""
        return self.to_v3f64().to_v3f32()

    def _wrapped(self, bits: int) -> V3I:
        return V3I(_wrap(self.x, bits), _wrap(self.y, bits), _wrap(self.z, bits))

    def to_v3i64(self) -> V3I:
        """Return a copy with components wrapped to 64 bits."""
        return self._wrapped(64)

    def to_v3i32(self) -> V3I:
        """Return a copy with components wrapped to 32 bits."""
        return self._wrapped(32)

    def to_v3i16(self) -> V3I:
        """Return a copy with components wrapped to 16 bits."""
        return self._wrapped(16)

    def to_v3i8(self) -> V3I:
        """Return a copy with components wrapped to 8 bits."""
        return self._wrapped(8)

    def to_v3i(self) -> V3I:
        """Return a copy with components wrapped to the native integer width."""
        return self._wrapped(64)