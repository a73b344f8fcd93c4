"""Two- and three-component vectors with floating-point components."""

from __future__ import annotations

import math
import random
import struct
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, MutableSequence, Sequence

from genvec.axis import Axis, deg_to_rad

if TYPE_CHECKING:
    from genvec.ints import V2I, V3I

_rng = random.Random()


def _round(value: float) -> float:
    """Round half away from zero."""
    if not math.isfinite(value):
        return value
    truncated = float(math.trunc(value))
    if abs(value - truncated) >= 0.5:
        truncated += math.copysign(1.0, value)
    return math.copysign(truncated, value)


def _sqrt(value: float) -> float:
    if math.isnan(value) or value < 0:
        return math.nan
    return math.sqrt(value)


def _sin(value: float) -> float:
    return math.nan if math.isinf(value) else math.sin(value)


def _tan(value: float) -> float:
    return math.nan if math.isinf(value) else math.tan(value)


def _to_f32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _to_int(value: float, bits: int) -> int:
    """Truncate toward zero and wrap into a signed integer of ``bits`` width."""
    modulus = 1 << bits
    wrapped = math.trunc(value) % modulus
    return wrapped - modulus if wrapped >= modulus // 2 else wrapped


def _lerp_random(start: float, end: float) -> float:
    return start + _rng.random() * (end - start)


def _rotate2(x: float, y: float, angle_rad: float) -> tuple[float, float]:
    cos_a, sin_a = math.cos(angle_rad), math.sin(angle_rad)
    return x * cos_a - y * sin_a, x * sin_a + y * cos_a


def _rotate3(
    x: float, y: float, z: float, degrees: float, axis: Axis
) -> tuple[float, float, float]:
    d = deg_to_rad(degrees)
    cos_d, sin_d = math.cos(d), math.sin(d)
    if axis is Axis.Z:
        return cos_d * x - sin_d * y, sin_d * x + cos_d * y, z
    if axis is Axis.Y:
        return cos_d * x - sin_d * y, y, -sin_d * x + cos_d * z
    return x, cos_d * y - sin_d * z, -sin_d * z + cos_d * z


@dataclass(slots=True)
class V2F:
    """A two-component vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    @classmethod
    def from_slice(cls, values: Sequence[float]) -> V2F:
        """Build a vector from the first two items of ``values``."""
        if len(values) < 2:
            raise ValueError("V2F.from_slice: slice length < 2")
        return cls(values[0], values[1])

    def to_list(self) -> list[float]:
        """Return the components as a new list."""
        return [self.x, self.y]

    def apply_to_slice(self, values: MutableSequence[float]) -> None:
        """Write the components into the first two items of ``values``."""
        if len(values) < 2:
            raise ValueError("V2F.apply_to_slice: slice length < 2")
        values[0], values[1] = self.x, self.y

    def rand_between(self, to: V2F) -> V2F:
        """Return a vector with each component random between this and ``to``."""
        return self.rand_between_comp(to.x, to.y)

    def rand_between_comp(self, to_x: float, to_y: float) -> V2F:
        """Return a vector with each component random between this and the given values."""
        return V2F(_lerp_random(self.x, to_x), _lerp_random(self.y, to_y))

    def rand_between_in_place(self, to: V2F) -> None:
        """Set each component to a random value between it and ``to``."""
        self.rand_between_comp_in_place(to.x, to.y)

    def rand_between_comp_in_place(self, to_x: float, to_y: float) -> None:
        """Set each component to a random value between it and the given values."""
        self.x = _lerp_random(self.x, to_x)
        self.y = _lerp_random(self.y, to_y)

    def rand_in(self) -> V2F:
        """Return a vector with each component random between 0 and this one's."""
        return V2F(_rng.random() * self.x, _rng.random() * self.y)

    def rand_in_in_place(self) -> None:
        """Set each component to a random value between 0 and its current value."""
        self.x = _rng.random() * self.x
        self.y = _rng.random() * self.y

    def rotate_rad(self, angle_rad: float) -> V2F:
        """Return this vector rotated counterclockwise by ``angle_rad`` radians."""
        return V2F(*_rotate2(self.x, self.y, angle_rad))

    def rotate_deg(self, degrees: float) -> V2F:
        """Return this vector rotated counterclockwise by ``degrees``."""
        return self.rotate_rad(deg_to_rad(degrees))

    def rotate_deg_in_place(self, degrees: float) -> None:
        """Rotate this vector counterclockwise by ``degrees``."""
        self.x, self.y = _rotate2(self.x, self.y, deg_to_rad(degrees))

    def round(self) -> V2F:
        """Return a vector with each component rounded half away from zero."""
        return V2F(_round(self.x), _round(self.y))

    def round_in_place(self) -> None:
        """Round each component half away from zero."""
        self.x, self.y = _round(self.x), _round(self.y)

    def sin(self) -> V2F:
        """Return the sine of each component."""
        return V2F(_sin(self.x), _sin(self.y))

    def sin_in_place(self) -> None:
        """Replace each component with its sine."""
        self.x, self.y = _sin(self.x), _sin(self.y)

    def sqrt(self) -> V2F:
        """Return the square root of each component (NaN for negatives)."""
        return V2F(_sqrt(self.x), _sqrt(self.y))

    def sqrt_in_place(self) -> None:
        """Replace each component with its square root (NaN for negatives)."""
        self.x, self.y = _sqrt(self.x), _sqrt(self.y)

    def tan(self) -> V2F:
        """Return the tangent of each component."""
        return V2F(_tan(self.x), _tan(self.y))

    def tan_in_place(self) -> None:
        """Replace each component with its tangent."""
        self.x, self.y = _tan(self.x), _tan(self.y)

    def sub(self, other: V2F) -> V2F:
        """Return the component-wise difference ``self - other``."""
        return V2F(self.x - other.x, self.y - other.y)

    def sub_in_place(self, other: V2F) -> None:
        """Subtract ``other`` component-wise."""
        self.x -= other.x
        self.y -= other.y

    def sub_comp(self, x: float, y: float) -> V2F:
        """Return this vector with ``x`` and ``y`` subtracted."""
        return V2F(self.x - x, self.y - y)

    def sub_comp_in_place(self, x: float, y: float) -> None:
        """Subtract ``x`` and ``y`` from the components."""
        self.x -= x
        self.y -= y

    def sub_scalar(self, scalar: float) -> V2F:
        """Return this vector with ``scalar`` subtracted from each component."""
        return V2F(self.x - scalar, self.y - scalar)

    def sub_scalar_in_place(self, scalar: float) -> None:
        """Subtract ``scalar`` from each component."""
        self.x -= scalar
        self.y -= scalar

    def swizzle_yx(self) -> V2F:
        """Return a vector with X and Y swapped."""
        return V2F(self.y, self.x)

    def swizzle_in_place_yx(self) -> None:
        """Swap X and Y."""
        self.x, self.y = self.y, self.x

    def to_v2f64(self) -> V2F:
        """Return a copy with double-precision components."""
        return V2F(float(self.x), float(self.y))

    def to_v2f32(self) -> V2F:
        """Return a copy with components rounded to single precision."""
        return V2F(_to_f32(self.x), _to_f32(self.y))

    def _to_v2i(self, bits: int) -> V2I:
        from genvec.ints import V2I

        return V2I(_to_int(self.x, bits), _to_int(self.y, bits))

    def to_v2i64(self) -> V2I:
        """Return an integer vector with components truncated to 64 bits."""
        return self._to_v2i(64)

    def to_v2i32(self) -> V2I:
        """Return an integer vector with components truncated to 32 bits."""
        return self._to_v2i(32)

    def to_v2i16(self) -> V2I:
        """Return an integer vector with components truncated to 16 bits."""
        return self._to_v2i(16)

    def to_v2i8(self) -> V2I:
        """Return an integer vector with components truncated to 8 bits."""
        return self._to_v2i(8)

    def to_v2i(self) -> V2I:
        """Return an integer vector with components truncated toward zero."""
        return self._to_v2i(64)


@dataclass(slots=True)
class V3F:
    """A three-component vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    @classmethod
    def from_slice(cls, values: Sequence[float]) -> V3F:
        """Build a vector from the first three items of ``values``."""
        if len(values) < 3:
            raise ValueError("V3F.from_slice: slice length < 3")
        return cls(values[0], values[1], values[2])

    def to_list(self) -> list[float]:
        """Return the components as a new list."""
        return [self.x, self.y, self.z]

    def apply_to_slice(self, values: MutableSequence[float]) -> None:
        """Write the components into the first three items of ``values``."""
        if len(values) < 3:
            raise ValueError("V3F.apply_to_slice: slice length < 3")
        values[0], values[1], values[2] = self.x, self.y, self.z

    def rand_between(self, to: V3F) -> V3F:
        """Return a vector with each component random between this and ``to``."""
        return self.rand_between_comp(to.x, to.y, to.z)

    def rand_between_comp(self, to_x: float, to_y: float, to_z: float) -> V3F:
        """Return a vector with each component random between this and the given values."""
        return V3F(
            _lerp_random(self.x, to_x),
            _lerp_random(self.y, to_y),
            _lerp_random(self.z, to_z),
        )

    def rand_between_in_place(self, to: V3F) -> None:
        """Set each component to a random value between it and ``to``."""
        self.rand_between_comp_in_place(to.x, to.y, to.z)

    def rand_between_comp_in_place(
        self, to_x: float, to_y: float, to_z: float
    ) -> None:
        """Set each component to a random value between it and the given values."""
        self.x = _lerp_random(self.x, to_x)
        self.y = _lerp_random(self.y, to_y)
        self.z = _lerp_random(self.z, to_z)

    def rand_in(self) -> V3F:
        """Return a vector with each component random between 0 and this one's."""
        return V3F(
            _rng.random() * self.x, _rng.random() * self.y, _rng.random() * self.z
        )

    def rand_in_in_place(self) -> None:
        """Set each component to a random value between 0 and its current value."""
        self.x = _rng.random() * self.x
        self.y = _rng.random() * self.y
        self.z = _rng.random() * self.z

    def rotate_deg(self, degrees: float, axis: Axis) -> V3F:
        """Return this vector rotated counterclockwise by ``degrees`` around ``axis``."""
        return V3F(*_rotate3(self.x, self.y, self.z, degrees, axis))

    def rotate_deg_in_place(self, degrees: float, axis: Axis) -> None:
        """Rotate this vector counterclockwise by ``degrees`` around ``axis``."""
        self.x, self.y, self.z = _rotate3(self.x, self.y, self.z, degrees, axis)

    def round(self) -> V3F:
        """Return a vector with each component rounded half away from zero."""
        return V3F(_round(self.x), _round(self.y), _round(self.z))

    def round_in_place(self) -> None:
        """Round each component half away from zero."""
        self.x, self.y, self.z = _round(self.x), _round(self.y), _round(self.z)

    def sin(self) -> V3F:
        """Return the sine of each component."""
        return V3F(_sin(self.x), _sin(self.y), _sin(self.z))

    def sin_in_place(self) -> None:
        """Replace each component with its sine."""
        self.x, self.y, self.z = _sin(self.x), _sin(self.y), _sin(self.z)

    def sqrt(self) -> V3F:
        """Return the square root of each component (NaN for negatives)."""
        return V3F(_sqrt(self.x), _sqrt(self.y), _sqrt(self.z))

    def sqrt_in_place(self) -> None:
        """Replace each component with its square root (NaN for negatives)."""
        self.x, self.y, self.z = _sqrt(self.x), _sqrt(self.y), _sqrt(self.z)

    def tan(self) -> V3F:
        """Return the tangent of each component."""
        return V3F(_tan(self.x), _tan(self.y), _tan(self.z))

    def tan_in_place(self) -> None:
        """Replace each component with its tangent."""
        self.x, self.y, self.z = _tan(self.x), _tan(self.y), _tan(self.z)

    def sub(self, other: V3F) -> V3F:
        """Return the component-wise difference ``self - other``."""
        return V3F(self.x - other.x, self.y - other.y, self.z - other.z)

    def sub_in_place(self, other: V3F) -> None:
        """Subtract ``other`` component-wise."""
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z

    def sub_comp(self, x: float, y: float, z: float) -> V3F:
        """Return this vector with ``x``, ``y`` and ``z`` subtracted."""
        return V3F(self.x - x, self.y - y, self.z - z)

    def sub_comp_in_place(self, x: float, y: float, z: float) -> None:
        """Subtract ``x``, ``y`` and ``z`` from the components."""
        self.x -= x
        self.y -= y
        self.z -= z

    def sub_scalar(self, scalar: float) -> V3F:
        """Return this vector with ``scalar`` subtracted from each component."""
        return V3F(self.x - scalar, self.y - scalar, self.z - scalar)

    def sub_scalar_in_place(self, scalar: float) -> None:
        """Subtract ``scalar`` from each component."""
        self.x -= scalar
        self.y -= scalar
        self.z -= scalar

    def swizzle_xzy(self) -> V3F:
        """Return (x, z, y)."""
        return V3F(self.x, self.z, self.y)

    def swizzle_in_place_xzy(self) -> None:
        """Reorder components to (x, z, y)."""
        self.y, self.z = self.z, self.y

    def swizzle_yxz(self) -> V3F:
        """Return (y, x, z)."""
        return V3F(self.y, self.x, self.z)

    def swizzle_in_place_yxz(self) -> None:
        """Reorder components to (y, x, z)."""
        self.x, self.y = self.y, self.x

    def swizzle_yzx(self) -> V3F:
        """Return (y, z, x)."""
        return V3F(self.y, self.z, self.x)

    def swizzle_in_place_yzx(self) -> None:
        """Reorder components to (y, z, x)."""
        self.x, self.y, self.z = self.y, self.z, self.x

    def swizzle_zxy(self) -> V3F:
        """Return (z, x, y)."""
        return V3F(self.z, self.x, self.y)

    def swizzle_in_place_zxy(self) -> None:
        """Reorder components to (z, x, y)."""
        self.x, self.y, self.z = self.z, self.x, self.y

    def swizzle_zyx(self) -> V3F:
        """Return (z, y, x)."""
        return V3F(self.z, self.y, self.x)

    def swizzle_in_place_zyx(self) -> None:
        """Reorder components to (z, y, x)."""
        self.x, self.z = self.z, self.x

    def to_v3f64(self) -> V3F:
        """Return a copy with double-precision components."""
        return V3F(float(self.x), float(self.y), float(self.z))

    def to_v3f32(self) -> V3F:
        """Return a copy with components rounded to single precision."""
        return V3F(_to_f32(self.x), _to_f32(self.y), _to_f32(self.z))

    def _to_v3i(self, bits: int) -> V3I:
        from genvec.ints import V3I

        return V3I(
            _to_int(self.x, bits), _to_int(self.y, bits), _to_int(self.z, bits)
        )

    def to_v3i64(self) -> V3I:
        """Return an integer vector with components truncated to 64 bits."""
        return self._to_v3i(64)

    def to_v3i32(self) -> V3I:
        """Return an integer vector with components truncated to 32 bits."""
        return self._to_v3i(32)

    def to_v3i16(self) -> V3I:
        """Return an integer vector with components truncated to 16 bits."""
        return self._to_v3i(16)

    def to_v3i8(self) -> V3I:
        """Return an integer vector with components truncated to 8 bits."""
        return self._to_v3i(8)

    def to_v3i(self) -> V3I:
        """Return an integer vector with components truncated toward zero."""
        return self._to_v3i(64)