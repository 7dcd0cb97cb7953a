"""Translation, orientation and scaling combined into one transform."""

from __future__ import annotations

from dataclasses import dataclass, field

from littleengine.matrix import Mat4
from littleengine.quaternion import Quat
from littleengine.vectors import Vec3


@dataclass
class Transform:
    """Translation, rotation and per-axis scaling of an object."""

    translation: Vec3 = field(default_factory=Vec3)
    orientation: Quat = field(default_factory=Quat)
    scaling: Vec3 = field(default_factory=lambda: Vec3.splat(1.0))

    def matrix(self) -> Mat4:
        """Combine translation, rotation and scaling into a single matrix."""
        x = self.orientation.rotate(Vec3(1.0, 0.0, 0.0)) * self.scaling.x
        y = self.orientation.rotate(Vec3(0.0, 1.0, 0.0)) * self.scaling.y
        z = self.orientation.rotate(Vec3(0.0, 0.0, 1.0)) * self.scaling.z
        p = self.translation
        return Mat4(
            x.x, y.x, z.x, p.x,
            x.y, y.y, z.y, p.y,
            x.z, y.z, z.z, p.z,
            0.0, 0.0, 0.0, 1.0,
        )

    def inverse(self) -> "Transform":
        """Transform that undoes this one."""
        orientation = self.orientation.inverse()
        scaling = Vec3(1.0 / self.scaling.x, 1.0 / self.scaling.y, 1.0 / self.scaling.z)
        translation = orientation.rotate(scaling * (-1.0 * self.translation))
        return Transform(translation, orientation, scaling)


def combine(t1: Transform, t2: Transform) -> Transform:
    """Apply ``t2`` inside the space of ``t1``."""
    scaling = t1.scaling * t2.scaling
    orientation = t1.orientation * t2.orientation
    translation = t1.translation + t1.orientation.rotate(t1.scaling * t2.translation)
    return Transform(translation, orientation, scaling)


def transform_from_matrix(m: Mat4) -> Transform:
    """Decompose a matrix into translation, orientation and scaling."""
    translation = Vec3(m.xw, m.yw, m.zw)
    orientation = Quat.from_matrix(m)
    rot_scale = Mat4(
        m.xx, m.xy, m.xz, 0.0,
        m.yx, m.yy, m.yz, 0.0,
        m.zx, m.zy, m.zz, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )
    inv_rot = orientation.inverse().to_matrix()
    scale_skew = rot_scale * inv_rot
    scaling = Vec3(scale_skew.xx, scale_skew.yy, scale_skew.zz)
    return Transform(translation, orientation, scaling)