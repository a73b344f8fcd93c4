"""Rotation axes and small numeric helpers shared by the vector types."""

from __future__ import annotations

import math
from enum import Enum

_DEG_TO_RAD = math.pi / 180.0


class Axis(Enum):
    """Axis around which a three-component vector is rotated."""

    X = "x"
    Y = "y"
    Z = "z"


def deg_to_rad(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * _DEG_TO_RAD


def almost_equal(a: float, b: float, epsilon: float) -> bool:
    """Return True if ``a`` and ``b`` differ by no more than ``epsilon``."""
    return abs(a - b) <= epsilon