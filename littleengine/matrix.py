"""Row-major 4x4 matrices and the usual transformation and projection builders."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from numbers import Real
from typing import Iterable

from littleengine.scalar import to_radians
from littleengine.vectors import Vec3, Vec4, cross, normalize


@dataclass
class Mat4:
    """A 4x4 matrix stored row by row; a default instance is the identity."""

    xx: float = 1.0
    xy: float = 0.0
    xz: float = 0.0
    xw: float = 0.0
    yx: float = 0.0
    yy: float = 1.0
    yz: float = 0.0
    yw: float = 0.0
    zx: float = 0.0
    zy: float = 0.0
    zz: float = 1.0
    zw: float = 0.0
    wx: float = 0.0
    wy: float = 0.0
    wz: float = 0.0
    ww: float = 1.0

    @classmethod
    def identity(cls) -> "Mat4":
        """Return the identity matrix."""
        return cls()

    @classmethod
    def from_values(cls, values: Iterable[float]) -> "Mat4":
        """Build a matrix from 16 values given row by row."""
        flat = tuple(values)
        if len(flat) != 16:
            raise ValueError(f"a 4x4 matrix needs 16 values, got {len(flat)}")
        return cls(*flat)

    def _flat(self) -> tuple[float, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))

    def _rows(self) -> list[tuple[float, ...]]:
        flat = self._flat()
        return [flat[start:start + 4] for start in (0, 4, 8, 12)]

    def __getitem__(self, key: int | tuple[int, int]) -> float:
        if isinstance(key, tuple):
            row, col = key
            if not (0 <= row < 4 and 0 <= col < 4):
                raise IndexError(f"matrix index {key} out of range")
            return self._flat()[row * 4 + col]
        return self._flat()[key]

    def _scaled(self, factor: float) -> "Mat4":
        return Mat4.from_values(value * factor for value in self._flat())

    def __mul__(self, other: object) -> "Mat4 | Vec4":
        if isinstance(other, Mat4):
            cols = list(zip(*other._rows()))
            return Mat4.from_values(
                sum(a * b for a, b in zip(row, col))
                for row in self._rows()
                for col in cols
            )
        if isinstance(other, Vec4):
            vec = tuple(other)
            return Vec4(*(sum(a * b for a, b in zip(row, vec)) for row in self._rows()))
        if isinstance(other, Real):
            return self._scaled(float(other))
        return NotImplemented

    def __rmul__(self, other: object) -> "Mat4":
        if isinstance(other, Real):
            return self._scaled(float(other))
        return NotImplemented

    def __truediv__(self, other: object) -> "Mat4":
        if not isinstance(other, Real):
            return NotImplemented
        return Mat4.from_values(value / other for value in self._flat())

    def __add__(self, other: object) -> "Mat4":
        if not isinstance(other, Mat4):
            return NotImplemented
        return Mat4.from_values(a + b for a, b in zip(self._flat(), other._flat()))

    def __sub__(self, other: object) -> "Mat4":
        if not isinstance(other, Mat4):
            return NotImplemented
        return Mat4.from_values(a - b for a, b in zip(self._flat(), other._flat()))


def translate(t: Vec3) -> Mat4:
    """Translation matrix for the vector ``t``."""
    return Mat4(xw=t.x, yw=t.y, zw=t.z)


def scale(s: Vec3) -> Mat4:
    """Scaling matrix for the per-axis factors in ``s``."""
    return Mat4(xx=s.x, yy=s.y, zz=s.z)


def rotation_x(angle: float) -> Mat4:
    """Rotation about the X axis by ``angle`` degrees."""
    c = math.cos(to_radians(angle))
    s = math.sin(to_radians(angle))
    return Mat4(yy=c, yz=-s, zy=s, zz=c)


def rotation_y(angle: float) -> Mat4:
    """Rotation about the Y axis by ``angle`` degrees."""
    c = math.cos(to_radians(angle))
    s = math.sin(to_radians(angle))
    return Mat4(xx=c, xz=s, zx=-s, zz=c)


def rotation_z(angle: float) -> Mat4:
    """Rotation about the Z axis by ``angle`` degrees."""
    c = math.cos(to_radians(angle))
    s = math.sin(to_radians(angle))
    return Mat4(xx=c, xy=s, yx=-s, yy=c)


def look_at(pos: Vec3, target: Vec3, up: Vec3) -> Mat4:
    """View matrix for a camera at ``pos`` looking at ``target``."""
    cd = normalize(pos - target)
    cr = normalize(cross(up, cd))
    cu = normalize(cross(cd, cr))
    return Mat4(
        cr.x, cr.y, cr.z, -pos.x * cr.x - pos.y * cr.y - pos.z * cr.z,
        cu.x, cu.y, cu.z, -pos.x * cu.x - pos.y * cu.y - pos.z * cu.z,
        cd.x, cd.y, cd.z, -pos.x * cd.x - pos.y * cd.y - pos.z * cd.z,
        0.0, 0.0, 0.0, 1.0,
    )


def orthogonal(
    l: float, r: float, b: float, t: float, n: float = -1.0, f: float = 1.0
) -> Mat4:
    """Orthographic projection for the given box."""
    return Mat4(
        xx=2.0 / (r - l),
        xw=-((r + l) / (r - l)),
        yy=2.0 / (t - b),
        yw=-((t + b) / (t - b)),
        zz=-2.0 / (f - n),
        zw=-((f + n) / (f - n)),
        ww=1.0,
    )


def frustum(l: float, r: float, b: float, t: float, n: float, f: float) -> Mat4:
    """Perspective projection for the given view frustum."""
    return Mat4(
        xx=(2.0 * n) / (r - l),
        xz=(r + l) / (r - l),
        yy=(2.0 * n) / (t - b),
        yz=(t + b) / (t - b),
        zz=-(f + n) / (f - n),
        zw=(-2.0 * f * n) / (f - n),
        wz=-1.0,
        ww=0.0,
    )


def perspective(fov: float, aspect_ratio: float, near: float, far: float) -> Mat4:
    """Perspective projection from a vertical field of view in degrees."""
    ymax = near * math.tan(to_radians(fov / 2.0))
    xmax = ymax * aspect_ratio
    return frustum(-xmax, xmax, -ymax, ymax, near, far)