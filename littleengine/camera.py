"""Free-flying perspective camera."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from littleengine.matrix import Mat4, look_at, perspective
from littleengine.scalar import clamp, to_radians
from littleengine.vectors import Vec3, cross, normalize

MOUSE_SENSITIVITY = 0.15
NEAR_PLANE = 1e-1
FAR_PLANE = 1e3


@dataclass
class Camera:
    """Camera with a position, a viewing direction and yaw/pitch angles in degrees."""

    fov: float = 45.0
    up: Vec3 = field(default_factory=lambda: Vec3(0.0, 1.0, 0.0))
    pos: Vec3 = field(default_factory=lambda: Vec3(0.0, 16.0, -20.0))
    front: Vec3 = field(default_factory=lambda: Vec3(0.0, -0.4, 1.0))
    velocity: float = 0.0
    pitch: float = 0.0
    yaw: float = 90.0

    def view(self) -> Mat4:
        """View matrix for the current position and direction."""
        return look_at(self.pos, self.pos + self.front, self.up)

    def projection(self, ratio: float) -> Mat4:
        """Perspective projection for the given aspect ratio."""
        return perspective(self.fov, ratio, NEAR_PLANE, FAR_PLANE)

    def _side(self) -> Vec3:
        return normalize(cross(self.up, self.front))

    def move_forwards(self) -> None:
        """Step along the viewing direction."""
        self.pos = self.pos + self.velocity * self.front

    def move_backwards(self) -> None:
        """Step against the viewing direction."""
        self.pos = self.pos - self.velocity * self.front

    def move_left(self) -> None:
        """Step to the left."""
        self.pos = self.pos + self.velocity * self._side()

    def move_right(self) -> None:
        """Step to the right."""
        self.pos = self.pos - self.velocity * self._side()

    def rotate(self, dx: float, dy: float) -> None:
        """Turn the camera by a relative mouse movement."""
        self.yaw += MOUSE_SENSITIVITY * dx
        self.pitch = clamp(self.pitch + MOUSE_SENSITIVITY * -dy, -89.0, 89.0)
        pitch = to_radians(self.pitch)
        yaw = to_radians(self.yaw)
        self.front = normalize(
            Vec3(
                math.cos(pitch) * math.cos(yaw),
                math.sin(pitch),
                math.cos(pitch) * math.sin(yaw),
            )
        )