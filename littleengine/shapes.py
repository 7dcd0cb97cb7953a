"""Primitive shapes with generated geometry: cube, UV sphere and torus."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from littleengine.scalar import to_radians
from littleengine.transform import Transform
from littleengine.vectors import Vec2, Vec3


class DrawMode(Enum):
    """How the vertex data of a shape is assembled into primitives."""

    POINTS = "points"
    LINES = "lines"
    TRIANGLES = "triangles"


@dataclass
class Vertex:
    """A vertex with position, normal and texture coordinate."""

    pos: Vec3 = field(default_factory=Vec3)
    norm: Vec3 = field(default_factory=Vec3)
    tc: Vec2 = field(default_factory=Vec2)


@dataclass
class Shape:
    """A renderable object: geometry plus appearance and physical state."""

    color: Vec3 = field(default_factory=lambda: Vec3.splat(1.0))
    checkered: bool = False
    sub_divide: bool = False
    lines: float = 0.0
    divs: float = 0.0
    draw: bool = True
    transform: Transform = field(default_factory=Transform)
    velocity: Vec3 = field(default_factory=Vec3)
    mode: DrawMode = DrawMode.TRIANGLES
    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    def vertex_count(self) -> int:
        """Number of vertices in the shape's geometry."""
        return len(self.vertices)

    def triangles(self) -> Iterator[tuple[int, int, int]]:
        """Vertex index triples of each triangle in the shape."""
        if self.mode is not DrawMode.TRIANGLES:
            raise ValueError(f"shape is drawn as {self.mode.value}, not triangles")
        order = self.indices if self.indices else range(len(self.vertices))
        it = iter(order)
        return zip(it, it, it)


def _grid_indices(rows: int, cols: int) -> list[int]:
    """Two triangles per cell joining ring ``i`` to ring ``i + 1``, wrapping columns."""
    indices: list[int] = []
    for i in range(rows - 1):
        for j in range(cols):
            nxt = (j + 1) % cols
            indices += [
                i * cols + j,
                i * cols + nxt,
                (i + 1) * cols + nxt,
                (i + 1) * cols + j,
                i * cols + j,
                (i + 1) * cols + nxt,
            ]
    return indices


_CUBE_DATA = (
    # front face
    ((1.0, -1.0, 1.0), (0.0, 0.0, 1.0), (1.0, 0.0)),
    ((-1.0, -1.0, 1.0), (0.0, 0.0, 1.0), (0.0, 0.0)),
    ((-1.0, 1.0, 1.0), (0.0, 0.0, 1.0), (0.0, 1.0)),
    ((1.0, 1.0, 1.0), (0.0, 0.0, 1.0), (1.0, 1.0)),
    # back face
    ((1.0, -1.0, -1.0), (0.0, 0.0, -1.0), (1.0, 0.0)),
    ((-1.0, -1.0, -1.0), (0.0, 0.0, -1.0), (0.0, 0.0)),
    ((-1.0, 1.0, -1.0), (0.0, 0.0, -1.0), (0.0, 1.0)),
    ((1.0, 1.0, -1.0), (0.0, 0.0, -1.0), (1.0, 1.0)),
    # left face
    ((-1.0, -1.0, 1.0), (-1.0, 0.0, 0.0), (1.0, 0.0)),
    ((-1.0, -1.0, -1.0), (-1.0, 0.0, 0.0), (0.0, 0.0)),
    ((-1.0, 1.0, -1.0), (-1.0, 0.0, 0.0), (0.0, 1.0)),
    ((-1.0, 1.0, 1.0), (-1.0, 0.0, 0.0), (1.0, 1.0)),
    # right face
    ((1.0, -1.0, 1.0), (1.0, 0.0, 0.0), (1.0, 0.0)),
    ((1.0, -1.0, -1.0), (1.0, 0.0, 0.0), (0.0, 0.0)),
    ((1.0, 1.0, -1.0), (1.0, 0.0, 0.0), (0.0, 1.0)),
    ((1.0, 1.0, 1.0), (1.0, 0.0, 0.0), (1.0, 1.0)),
    # top face
    ((-1.0, 1.0, 1.0), (0.0, 1.0, 0.0), (0.0, 0.0)),
    ((1.0, 1.0, 1.0), (0.0, 1.0, 0.0), (1.0, 0.0)),
    ((-1.0, 1.0, -1.0), (0.0, 1.0, 0.0), (0.0, 1.0)),
    ((1.0, 1.0, -1.0), (0.0, 1.0, 0.0), (1.0, 1.0)),
    # bottom face
    ((-1.0, -1.0, 1.0), (0.0, -1.0, 0.0), (0.0, 0.0)),
    ((1.0, -1.0, 1.0), (0.0, -1.0, 0.0), (1.0, 0.0)),
    ((-1.0, -1.0, -1.0), (0.0, -1.0, 0.0), (0.0, 1.0)),
    ((1.0, -1.0, -1.0), (0.0, -1.0, 0.0), (1.0, 1.0)),
)

_CUBE_INDICES = (
    0, 1, 2, 0, 2, 3,
    4, 5, 6, 4, 6, 7,
    8, 9, 10, 8, 10, 11,
    12, 13, 14, 12, 14, 15,
    16, 18, 19, 19, 17, 16,
    20, 22, 23, 23, 21, 20,
)


class Cube(Shape):
    """A cube spanning -1..1 on every axis, with per-face normals."""

    def __init__(self, color: Vec3, color_cube: bool = False) -> None:
        super().__init__(
            color=color,
            mode=DrawMode.TRIANGLES,
            vertices=[Vertex(Vec3(*p), Vec3(*n), Vec2(*t)) for p, n, t in _CUBE_DATA],
            indices=list(_CUBE_INDICES),
        )
        self.color_cube = color_cube


class Sphere(Shape):
    """A unit UV sphere with ``longs`` meridian and ``lats`` parallel vertex rings."""

    def __init__(self, longs: int, lats: int, color: Vec3) -> None:
        if longs < 2 or lats < 2:
            raise ValueError("a sphere needs at least 2 longitudes and 2 latitudes")
        lat_angle = 180.0 / (lats - 1)
        long_angle = 360.0 / (longs - 1)
        vertices: list[Vertex] = []
        for i in range(lats):
            theta = to_radians(90.0 - i * lat_angle)
            y = math.sin(theta)
            v = i / (lats - 1)
            for j in range(longs):
                epsilon = to_radians(j * long_angle)
                x = math.cos(theta) * math.cos(epsilon)
                z = math.cos(theta) * math.sin(epsilon)
                vertices.append(
                    Vertex(Vec3(x, y, z), Vec3(x, y, z), Vec2(j / (longs - 1), v))
                )
        super().__init__(
            color=color,
            mode=DrawMode.TRIANGLES,
            vertices=vertices,
            indices=_grid_indices(lats, longs),
        )


class Torus(Shape):
    """A torus with tube radius 0.3 around a ring of radius 0.7 in the XZ plane."""

    def __init__(self, divs: int, color: Vec3) -> None:
        if divs < 2:
            raise ValueError("a torus needs at least 2 divisions")
        angle = 360.0 / (divs - 1.0)
        vertices: list[Vertex] = []
        for i in range(divs):
            epsilon = to_radians(angle * i)
            for j in range(divs):
                theta = to_radians(angle * j)
                hyp = 0.7 + 0.3 * math.cos(theta)
                pos = Vec3(
                    hyp * math.cos(epsilon),
                    0.3 * math.sin(theta),
                    hyp * math.sin(epsilon),
                )
                norm = Vec3(
                    math.cos(theta) * math.cos(epsilon),
                    math.sin(theta),
                    math.cos(theta) * math.sin(epsilon),
                )
                vertices.append(Vertex(pos, norm))
        super().__init__(
            color=color,
            mode=DrawMode.TRIANGLES,
            vertices=vertices,
            indices=_grid_indices(divs, divs),
        )