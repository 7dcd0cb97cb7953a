"""Small 2D, 3D and 4D vector types and 3D vector operations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator

from littleengine.scalar import clamp


@dataclass
class Vec2:
    """A 2D vector."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def splat(cls, v: float) -> "Vec2":
        """Build a vector with every component set to ``v``."""
        return cls(v, v)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass
class Vec3:
    """A 3D vector, also used for points and RGB colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def splat(cls, v: float) -> "Vec3":
        """Build a vector with every component set to ``v``."""
        return cls(v, v, v)

    def __add__(self, other: object) -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: object) -> "Vec3":
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, Real):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: object) -> "Vec3":
        if isinstance(other, Real):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, other: object) -> "Vec3":
        if not isinstance(other, Real):
            return NotImplemented
        return Vec3(self.x / other, self.y / other, self.z / other)

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z


@dataclass
class Vec4:
    """A 4D vector, also used for RGBA colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @classmethod
    def splat(cls, v: float) -> "Vec4":
        """Build a vector with every component set to ``v``."""
        return cls(v, v, v, v)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w


def dot(a: Vec3, b: Vec3) -> float:
    """Dot product of two 3D vectors."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def length(v: Vec3) -> float:
    """Euclidean length of a 3D vector."""
    return math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)


def cross(a: Vec3, b: Vec3) -> Vec3:
    """Cross product of two 3D vectors."""
    return Vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def normalize(v: Vec3) -> Vec3:
    """Scale ``v`` to unit length; raises ZeroDivisionError for a zero vector."""
    size = length(v)
    if size == 0.0:
        raise ZeroDivisionError("cannot normalize a zero-length vector")
    return v * (1.0 / size)


def reflect(v: Vec3, n: Vec3) -> Vec3:
    """Reflect ``v`` around the normal ``n``."""
    return -2.0 * n * dot(n, v) + v


def clamp_vec(v: Vec3, lo: Vec3, hi: Vec3) -> Vec3:
    """Clamp each component of ``v`` between the matching components of ``lo`` and ``hi``."""
    return Vec3(
        clamp(v.x, lo.x, hi.x),
        clamp(v.y, lo.y, hi.y),
        clamp(v.z, lo.z, hi.z),
    )


def lerp(a: Vec3, b: Vec3, t: float) -> Vec3:
    """Linear interpolation from ``a`` to ``b`` by ``t``."""
    return (1.0 - t) * a + t * b