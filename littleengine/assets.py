"""Named collection of the shapes that make up a scene."""

from __future__ import annotations

from typing import Iterator

from littleengine.shapes import Cube, Shape, Sphere, Torus
from littleengine.vectors import Vec3


class DuplicateShapeError(ValueError):
    """Raised when a shape is added under a name that is already taken."""


class AssetManager:
    """Keeps shapes by unique name, ordered by name."""

    def __init__(self) -> None:
        self.shapes: dict[str, Shape] = {}
        self.object_list: list[str] = []

    def _insert(self, name: str, shape: Shape) -> Shape:
        if name in self.shapes:
            raise DuplicateShapeError(f"object {name!r} already exists, please change name")
        self.shapes[name] = shape
        return shape

    def add_shape(self, name: str) -> Shape:
        """Add an empty shape under ``name``."""
        return self._insert(name, Shape())

    def add_sphere(self, name: str, longs: int, lats: int, color: Vec3) -> Sphere:
        """Add a sphere under ``name``."""
        sphere = Sphere(longs, lats, color)
        self._insert(name, sphere)
        return sphere

    def add_cube(self, name: str, color: Vec3) -> Cube:
        """Add a cube under ``name``."""
        cube = Cube(color, False)
        self._insert(name, cube)
        return cube

    def add_torus(self, name: str, divs: int, color: Vec3) -> Torus:
        """Add a torus under ``name``."""
        torus = Torus(divs, color)
        self._insert(name, torus)
        return torus

    def get_shape(self, name: str) -> Shape:
        """Return the shape stored under ``name``; raises KeyError if there is none."""
        try:
            return self.shapes[name]
        except KeyError:
            raise KeyError(f"object {name!r} does not exist") from None

    def remove_shape(self, name: str) -> Shape:
        """Remove and return the shape under ``name``; raises KeyError if there is none."""
        try:
            return self.shapes.pop(name)
        except KeyError:
            raise KeyError(f"object {name!r} not found") from None

    def refresh_shape_list(self) -> list[str]:
        """Rebuild and return the name list used for selection, in name order."""
        self.object_list = sorted(self.shapes)
        return self.object_list

    @property
    def object_list_size(self) -> int:
        """Number of names in the last refreshed list."""
        return len(self.object_list)

    def list_shapes(self) -> str:
        """Human-readable listing of the available shapes."""
        lines = [
            f"number of available objects: {len(self.shapes)}",
            "list of objects:",
        ]
        lines.extend(f"{name}." for name in self)
        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self.shapes)

    def __contains__(self, name: object) -> bool:
        return name in self.shapes

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.shapes))