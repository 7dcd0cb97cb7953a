import math

import pytest

from littleengine.shapes import Cube, DrawMode, Shape, Sphere, Torus, Vertex
from littleengine.vectors import Vec3, length


def test_default_shape_is_empty_and_visible():
    shape = Shape()
    assert shape.vertex_count() == 0
    assert shape.draw is True
    assert list(shape.triangles()) == []
    assert tuple(shape.color) == (1.0, 1.0, 1.0)


def test_cube_geometry_counts():
    cube = Cube(Vec3(0.5, 0.2, 0.1))
    assert cube.vertex_count() == 24
    assert len(cube.indices) == 36
    assert len(list(cube.triangles())) == 12
    assert tuple(cube.color) == (0.5, 0.2, 0.1)


def test_cube_first_vertex_from_data():
    cube = Cube(Vec3.splat(1.0))
    first = cube.vertices[0]
    assert tuple(first.pos) == (1.0, -1.0, 1.0)
    assert tuple(first.norm) == (0.0, 0.0, 1.0)
    assert tuple(first.tc) == (1.0, 0.0)


def test_cube_vertices_on_surface_with_unit_normals():
    cube = Cube(Vec3.splat(1.0))
    for vertex in cube.vertices:
        assert max(abs(c) for c in vertex.pos) == 1.0
        assert length(vertex.norm) == pytest.approx(1.0)


def test_sphere_counts_and_index_bounds():
    sphere = Sphere(10, 8, Vec3.splat(0.4))
    assert sphere.vertex_count() == 10 * 8
    assert len(sphere.indices) == 6 * (8 - 1) * 10
    assert all(0 <= i < sphere.vertex_count() for i in sphere.indices)


def test_sphere_vertices_unit_length_and_normal_equals_position():
    sphere = Sphere(12, 9, Vec3.splat(1.0))
    for vertex in sphere.vertices:
        assert length(vertex.pos) == pytest.approx(1.0)
        assert tuple(vertex.norm) == tuple(vertex.pos)
        assert 0.0 <= vertex.tc.x <= 1.0
        assert 0.0 <= vertex.tc.y <= 1.0


def test_sphere_poles():
    sphere = Sphere(6, 5, Vec3.splat(1.0))
    assert sphere.vertices[0].pos.y == pytest.approx(1.0)
    assert sphere.vertices[-1].pos.y == pytest.approx(-1.0, abs=1e-5)


@pytest.mark.parametrize("longs,lats", [(1, 5), (5, 1), (0, 0)])
def test_sphere_rejects_too_few_rings(longs, lats):
    with pytest.raises(ValueError):
        Sphere(longs, lats, Vec3.splat(1.0))


def test_torus_counts_and_index_bounds():
    torus = Torus(7, Vec3.splat(0.3))
    assert torus.vertex_count() == 49
    assert len(torus.indices) == 6 * 6 * 7
    assert all(0 <= i < torus.vertex_count() for i in torus.indices)


def test_torus_vertices_lie_on_tube():
    torus = Torus(9, Vec3.splat(1.0))
    for vertex in torus.vertices:
        ring = math.hypot(vertex.pos.x, vertex.pos.z)
        assert (ring - 0.7) ** 2 + vertex.pos.y ** 2 == pytest.approx(0.3 ** 2, abs=1e-6)
        assert length(vertex.norm) == pytest.approx(1.0)


def test_torus_rejects_too_few_divisions():
    with pytest.raises(ValueError):
        Torus(1, Vec3.splat(1.0))


def test_triangles_without_indices_uses_vertex_order():
    shape = Shape(vertices=[Vertex() for _ in range(6)])
    assert list(shape.triangles()) == [(0, 1, 2), (3, 4, 5)]


def test_triangles_rejected_for_other_modes():
    shape = Shape(mode=DrawMode.LINES, vertices=[Vertex(), Vertex()])
    with pytest.raises(ValueError):
        shape.triangles()