"""Scalar helpers: angle conversion, random numbers and clamping."""

from __future__ import annotations

import random
from typing import TypeVar

PIE = 3.141592
VEC3_EPSILON = 0.000001

T = TypeVar("T")


def to_radians(degs: float) -> float:
    """Convert degrees to radians."""
    return degs * (PIE / 180.0)


def to_degrees(rads: float) -> float:
    """Convert radians to degrees."""
    return rads * (180.0 / PIE)


def random_unit() -> float:
    """Return a random float in the range [0, 1]."""
    return random.random()


def random_int(a: int, b: int) -> int:
    """Return a random integer in [min(a, b), max(a, b)), or ``a`` when equal."""
    if a > b:
        a, b = b, a
    if a == b:
        return a
    return a + random.randrange(b - a)


def random_float(a: int, b: int) -> float:
    """Return a random float built from a random integer in range plus a unit fraction."""
    if a > b:
        a, b = b, a
    if a == b:
        return float(b)
    return float(random_int(a, b)) + random_unit()


def clamp(v: T, lo: T, hi: T) -> T:
    """Limit ``v`` to the range ``lo`` .. ``hi``."""
    if v < lo:  # type: ignore[operator]
        return lo
    if v > hi:  # type: ignore[operator]
        return hi
    return v