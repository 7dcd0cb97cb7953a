"""Simple gravity and collision response between spheres and boxes."""

from __future__ import annotations

from dataclasses import dataclass

from littleengine.shapes import Shape
from littleengine.transform import Transform
from littleengine.vectors import Vec3, clamp_vec, dot, length, reflect

GRAVITY = Vec3(0.0, -0.66, 0.0)


def _unit_or_zero(v: Vec3) -> Vec3:
    size = length(v)
    if size == 0.0:
        return Vec3()
    return v * (1.0 / size)


@dataclass
class AABB:
    """Axis-aligned bounding box given by its minimum and maximum corners."""

    min: Vec3
    max: Vec3

    def intersects(self, other: "AABB") -> bool:
        """True when the boxes overlap or touch on every axis."""
        return all(
            lo1 <= hi2 and hi1 >= lo2
            for lo1, hi1, lo2, hi2 in zip(self.min, self.max, other.min, other.max)
        )


def average_size(transform: Transform) -> float:
    """Mean of the scaling factors, used as a radius."""
    s = transform.scaling
    return (s.x + s.y + s.z) / 3.0


def get_aabb(pos: Vec3, size: Vec3) -> AABB:
    """Box centred on ``pos`` with half extents ``size``."""
    return AABB(pos - size, pos + size)


def simple_gravity(velocity: Vec3, dt: float) -> Vec3:
    """Velocity after applying constant downward gravity for ``dt`` seconds."""
    return velocity + GRAVITY * dt


def sphere_vs_sphere(a: Shape, b: Shape) -> bool:
    """Separate two colliding spheres and bounce their velocities; True on contact."""
    pos1 = a.transform.translation
    pos2 = b.transform.translation
    distance = length(pos1 - pos2)
    total = average_size(a.transform) + average_size(b.transform)
    if distance > total:
        return False

    normal = _unit_or_zero(pos2 - pos1)
    a.transform.translation = pos2 + total * -1.0 * normal
    b.transform.translation = pos1 + total * 1.0 * normal

    v1 = reflect(a.velocity, -1.0 * normal)
    v2 = reflect(b.velocity, 1.0 * normal)
    v1 = v1 * dot(_unit_or_zero(v1), -1.0 * normal)
    v2 = v2 * dot(_unit_or_zero(v2), 1.0 * normal)
    a.velocity = 0.8 * v1
    b.velocity = 0.8 * v2
    return True


def aabb_vs_aabb(a: Shape, b: Shape) -> bool:
    """Push box ``a`` out of box ``b`` along the shallowest axis; True on contact."""
    box1 = get_aabb(a.transform.translation, a.transform.scaling)
    box2 = get_aabb(b.transform.translation, b.transform.scaling)
    if not box1.intersects(box2):
        return False

    def shallowest(d1: float, d2: float) -> float:
        return d1 if abs(d1) < abs(d2) else d2

    dx = shallowest(box1.min.x - box2.max.x, box1.max.x - box2.min.x)
    dy = shallowest(box1.min.y - box2.max.y, box1.max.y - box2.min.y)
    dz = shallowest(box1.min.z - box2.max.z, box1.max.z - box2.min.z)

    if abs(dx) < abs(dy) and abs(dx) < abs(dz):
        push = Vec3(-dx, 0.0, 0.0)
    elif abs(dy) < abs(dx) and abs(dy) < abs(dz):
        push = Vec3(0.0, -dy, 0.0)
    else:
        push = Vec3(0.0, 0.0, -dz)

    normal = _unit_or_zero(push)
    a.transform.translation = a.transform.translation + push
    a.velocity = reflect(a.velocity * 0.7, normal)
    return True


def sphere_vs_aabb(sphere: Shape, box: Shape) -> bool:
    """Push a sphere out of a box and bounce its velocity; True on contact."""
    s_pos = sphere.transform.translation
    box_pos = box.transform.translation
    box_scale = box.transform.scaling
    radius = average_size(sphere.transform)

    clamped = clamp_vec(s_pos - box_pos, -1.0 * box_scale, box_scale)
    closest = clamped + box_pos
    if length(s_pos - closest) > radius:
        return False

    diff = s_pos - closest
    normal = _unit_or_zero(diff)
    sphere.transform.translation = s_pos + (normal * radius - diff)
    sphere.velocity = 0.8 * reflect(sphere.velocity, normal)
    return True