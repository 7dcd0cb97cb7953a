[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "littleengine"
version = "0.1.0"
description = "A small 3D engine core: vector, matrix and quaternion maths, procedural shapes, simple physics and a scene world"
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "graphics", "linear-algebra", "quaternion", "physics", "mesh"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["littleengine"]

[tool.pytest.ini_options]
addopts = "-ra"
