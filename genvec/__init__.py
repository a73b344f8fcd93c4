"""Mutable 2D and 3D vectors with float (floats) and integer (ints) components, plus rotation axes and helpers (axis)."""

__version__ = "0.1.0"
__all__ = ["axis", "floats", "ints"]