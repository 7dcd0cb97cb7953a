"""Quaternions for 3D orientation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from littleengine.matrix import Mat4
from littleengine.scalar import to_radians
from littleengine.vectors import Vec3, cross, normalize
from littleengine.vectors import dot as vec_dot

QUAT_EPSILON = 0.000001


def _half_sqrt(value: float) -> float:
    # A negative radicand yields no usable component; treat it as zero.
    return 0.5 * math.sqrt(value) if value > 0.0 else 0.0


@dataclass(eq=False)
class Quat:
    """A quaternion with vector part (x, y, z) and scalar part s."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    s: float = 1.0

    @classmethod
    def from_axis_angle(cls, angle: float, axis: Vec3) -> "Quat":
        """Rotation of ``angle`` degrees about ``axis``."""
        half = to_radians(angle / 2.0)
        sin_half = math.sin(half)
        unit = normalize(axis)
        return cls(unit.x * sin_half, unit.y * sin_half, unit.z * sin_half, math.cos(half))

    @classmethod
    def from_matrix(cls, m: Mat4) -> "Quat":
        """Extract the rotation held in the upper 3x3 part of ``m``."""
        s = _half_sqrt(1.0 + m.xx + m.yy + m.zz)
        if s > 0.0:
            coeff = 1.0 / (4.0 * s)
            return cls(coeff * (m.zy - m.yz), coeff * (m.xz - m.zx), coeff * (m.yx - m.xy), s)

        x = _half_sqrt(1.0 + m.xx - m.yy - m.zz)
        if x > 0.0:
            coeff = 1.0 / (4.0 * x)
            return cls(x, coeff * (m.xy + m.yx), coeff * (m.xz + m.zx), coeff * (m.zy - m.yz))

        y = _half_sqrt(1.0 - m.xx + m.yy - m.zz)
        if y > 0.0:
            coeff = 1.0 / (4.0 * y)
            return cls(coeff * (m.xy + m.yx), y, coeff * (m.yz + m.zy), coeff * (m.xz - m.zx))

        z = _half_sqrt(1.0 - m.xx - m.yy + m.zz)
        coeff = 1.0 / (4.0 * z)
        return cls(coeff * (m.xz + m.zx), coeff * (m.yz + m.zy), z, coeff * (m.yx - m.xy))

    def norm(self) -> float:
        """Length of the quaternion."""
        return math.sqrt(self.x**2 + self.y**2 + self.z**2 + self.s**2)

    def unit(self) -> "Quat":
        """This quaternion scaled to unit length."""
        coeff = 1.0 / self.norm()
        return Quat(self.x * coeff, self.y * coeff, self.z * coeff, self.s * coeff)

    def conjugate(self) -> "Quat":
        """Quaternion with the vector part negated."""
        return Quat(-self.x, -self.y, -self.z, self.s)

    def inverse(self) -> "Quat":
        """Multiplicative inverse."""
        inv_len = 1.0 / dot(self, self)
        return self.conjugate() * inv_len

    def to_matrix(self) -> Mat4:
        """Rotation matrix for this quaternion."""
        x, y, z, s = self.x, self.y, self.z, self.s
        x2, y2, z2 = x * x, y * y, z * z
        return Mat4(
            1.0 - 2.0 * (y2 + z2), 2.0 * (x * y - s * z), 2.0 * (x * z + s * y), 0.0,
            2.0 * (x * y + s * z), 1.0 - 2.0 * (x2 + z2), 2.0 * (y * z - s * x), 0.0,
            2.0 * (x * z - s * y), 2.0 * (y * z + s * x), 1.0 - 2.0 * (x2 + y2), 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    def rotate(self, v: Vec3) -> Vec3:
        """Rotate the vector ``v`` by this quaternion."""
        u = axis(self)
        a = u * 2.0 * vec_dot(u, v)
        b = v * (self.s * self.s - vec_dot(u, u))
        c = cross(u, v) * 2.0 * self.s
        return a + b + c

    def __add__(self, other: object) -> "Quat":
        if not isinstance(other, Quat):
            return NotImplemented
        return Quat(self.x + other.x, self.y + other.y, self.z + other.z, self.s + other.s)

    def __mul__(self, other: object) -> "Quat | Vec3":
        if isinstance(other, Quat):
            return Quat(
                self.s * other.x + self.x * other.s + self.y * other.z - self.z * other.y,
                self.s * other.y + self.y * other.s + self.z * other.x - self.x * other.z,
                self.s * other.z + self.z * other.s + self.x * other.y - self.y * other.x,
                self.s * other.s - self.x * other.x - self.y * other.y - self.z * other.z,
            )
        if isinstance(other, Vec3):
            return self.rotate(other)
        if isinstance(other, Real):
            return Quat(self.x * other, self.y * other, self.z * other, self.s * other)
        return NotImplemented

    def __rmul__(self, other: object) -> "Quat | Vec3":
        if isinstance(other, Vec3):
            return self.rotate(other)
        if isinstance(other, Real):
            return Quat(self.x * other, self.y * other, self.z * other, self.s * other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quat):
            return NotImplemented
        return (
            abs(self.x - other.x) <= QUAT_EPSILON
            and abs(self.y - other.y) <= QUAT_EPSILON
            and abs(self.z - other.z) <= QUAT_EPSILON
            and abs(self.s - other.s) <= QUAT_EPSILON
        )

    __hash__ = None  # type: ignore[assignment]


def dot(a: Quat, b: Quat) -> float:
    """Four-component dot product of two quaternions."""
    return a.x * b.x + a.y * b.y + a.z * b.z + a.s * b.s


def axis(q: Quat) -> Vec3:
    """Vector part of ``q``."""
    return Vec3(q.x, q.y, q.z)


def mix(a: Quat, b: Quat, t: float) -> Quat:
    """Component-wise linear blend from ``a`` to ``b`` by ``t``."""
    return (1.0 - t) * a + t * b