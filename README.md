# littleengine

The core of a small 3D engine, in pure Python. It has no dependencies outside
the standard library.

## Modules

- `littleengine.scalar`: `to_radians`, `to_degrees`, `clamp`, and the random
  helpers `random_unit`, `random_int` and `random_float`.
- `littleengine.vectors`: the dataclasses `Vec2`, `Vec3` and `Vec4`. `Vec3`
  supports `+`, `-`, unary `-`, `/` by a number, and `*` by a number or
  component-wise by another `Vec3`. The module also has `dot`, `cross`,
  `length`, `normalize` (raises `ZeroDivisionError` for a zero vector),
  `reflect`, `clamp_vec` and `lerp`.
- `littleengine.matrix`: `Mat4`, a row-major 4x4 matrix whose default value is
  the identity. It supports `m[row, col]` and `m[i]` indexing, `+`, `-`,
  `/` by a number, and `*` by a number, a `Mat4` or a `Vec4`.
  `Mat4.from_values` takes exactly 16 values and raises `ValueError`
  otherwise. The builders are `translate`, `scale`, `rotation_x`,
  `rotation_y`, `rotation_z` (angles in degrees), `look_at`, `orthogonal`,
  `frustum` and `perspective`.
- `littleengine.quaternion`: `Quat`, with `from_axis_angle`, `from_matrix`,
  `norm`, `unit`, `conjugate`, `inverse`, `to_matrix` and `rotate`.
  Multiplying a `Quat` by a `Vec3` rotates it. Equality compares components
  within a tolerance of 1e-6. There are also the module functions `dot`,
  `axis` and `mix`.
- `littleengine.transform`: `Transform` holds a translation, an orientation
  and a scaling. Use `matrix()` to get the combined matrix and `inverse()` to
  undo the transform. `combine` applies one transform inside another, and
  `transform_from_matrix` decomposes a matrix.
- `littleengine.shapes`: `Shape` holds vertices, indices, a `DrawMode`,
  colour, transform and velocity. The generated meshes are `Cube`,
  `Sphere(longs, lats, color)` and `Torus(divs, color)`. `vertex_count()`
  counts vertices, and `triangles()` yields index triples. `triangles()`
  raises `ValueError` unless the mode is `DrawMode.TRIANGLES`.
- `littleengine.physics`: `AABB` with `intersects`, `average_size`,
  `get_aabb`, `simple_gravity`, `sphere_vs_sphere`, `sphere_vs_aabb` and
  `aabb_vs_aabb`. Each collision function moves the shapes apart, updates
  their velocities, and returns `True` if they were in contact.
- `littleengine.assets`: `AssetManager`, a registry of shapes by name.
  - The `add_shape`, `add_sphere`, `add_cube` and `add_torus` methods raise
    `DuplicateShapeError` if the name is already taken.
  - `get_shape` and `remove_shape` raise `KeyError` for an unknown name.
  - Iteration yields the names in sorted order, and `len` and `in` also work.
  - `refresh_shape_list()` rebuilds the sorted `object_list`.
  - `list_shapes()` returns a text listing.
- `littleengine.camera`: `Camera`, a fly-through camera.
  - `view()` and `projection(ratio)` return its matrices.
  - `move_forwards`, `move_backwards`, `move_left` and `move_right` move it by
    its `velocity`.
  - `rotate(dx, dy)` turns it by a mouse movement, with pitch clamped to
    ±89°.
- `littleengine.world`: `World`, a demo scene of two spheres, two cubes and a
  torus above a platform.
  - `load()` builds the scene.
  - `update(dt, aspect_ratio)` applies gravity and collisions unless `pause`
    is set, then refreshes `view` and `projection`. It raises `RuntimeError`
    if called before `load()`.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Example

```python
from littleengine.world import World

world = World()
world.load()

for _ in range(60):
    world.update(1 / 60, 16 / 9)

ball = world.assets.get_shape("ball1")
print(ball.transform.translation, ball.velocity)
```

Shapes can also be built and managed directly:

```python
from littleengine.assets import AssetManager
from littleengine.vectors import Vec3

assets = AssetManager()
assets.add_torus("ring", 40, Vec3(0.3, 0.88, 0.2))
ring = assets.get_shape("ring")
print(ring.vertex_count(), len(list(ring.triangles())))
```

## What it does not do

The package only computes scene state: geometry, transforms, physics and
camera matrices. It does not:

- open a window or draw anything;
- read keyboard or mouse input;
- provide an editing interface;
- load shaders, textures or model files.

There is no command to run. To display a scene, pass the vertices, indices
and matrices it produces to a rendering library of your choice.

## Running the tests

```
pytest
```