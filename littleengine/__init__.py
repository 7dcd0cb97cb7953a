"""Core of a small 3D engine: vector, matrix and quaternion maths, shapes, physics and a scene world."""

__version__ = "0.1.0"

__all__ = [
    "assets",
    "camera",
    "matrix",
    "physics",
    "quaternion",
    "scalar",
    "shapes",
    "transform",
    "vectors",
    "world",
]