import pytest

from littleengine.matrix import Mat4, translate
from littleengine.quaternion import Quat
from littleengine.transform import Transform, combine, transform_from_matrix
from littleengine.vectors import Vec3, Vec4


def _flat(m):
    return [m[i] for i in range(16)]


def _vec(v):
    return pytest.approx(tuple(v), abs=1e-5)


def test_default_transform_is_identity_matrix():
    assert _flat(Transform().matrix()) == pytest.approx(_flat(Mat4.identity()))


def test_translation_only_matches_translate():
    t = Vec3(2.0, -3.0, 5.0)
    assert _flat(Transform(translation=t).matrix()) == pytest.approx(_flat(translate(t)))


def test_matrix_maps_point_like_components():
    q = Quat.from_axis_angle(30.0, Vec3(0.0, 1.0, 0.0))
    tr = Transform(Vec3(1.0, 2.0, 3.0), q, Vec3(2.0, 3.0, 4.0))
    p = Vec3(0.5, -1.0, 2.0)
    out = tr.matrix() * Vec4(p.x, p.y, p.z, 1.0)
    expected = q.rotate(tr.scaling * p) + tr.translation
    assert (out.x, out.y, out.z) == _vec(expected)
    assert out.w == pytest.approx(1.0)


def test_inverse_scaling_is_reciprocal():
    tr = Transform(scaling=Vec3(2.0, 4.0, 5.0))
    inv = tr.inverse()
    assert tuple(inv.scaling * tr.scaling) == _vec(Vec3.splat(1.0))


def test_combine_with_inverse_gives_identity():
    q = Quat.from_axis_angle(50.0, Vec3(1.0, 1.0, 0.0))
    tr = Transform(Vec3(3.0, -2.0, 7.0), q, Vec3.splat(2.5))
    result = combine(tr, tr.inverse())
    assert tuple(result.translation) == _vec(Vec3())
    assert tuple(result.scaling) == _vec(Vec3.splat(1.0))
    assert result.orientation == Quat()


def test_combine_with_identity_keeps_transform():
    q = Quat.from_axis_angle(20.0, Vec3(0.0, 0.0, 1.0))
    tr = Transform(Vec3(1.0, 1.0, 1.0), q, Vec3(1.0, 2.0, 3.0))
    result = combine(tr, Transform())
    assert tuple(result.translation) == _vec(tr.translation)
    assert tuple(result.scaling) == _vec(tr.scaling)
    assert result.orientation == tr.orientation


def test_from_matrix_round_trip_unit_scale():
    q = Quat.from_axis_angle(70.0, Vec3(0.0, 1.0, 1.0))
    tr = Transform(Vec3(-4.0, 0.5, 9.0), q)
    back = transform_from_matrix(tr.matrix())
    assert tuple(back.translation) == _vec(tr.translation)
    assert tuple(back.scaling) == _vec(Vec3.splat(1.0))
    assert _flat(back.matrix()) == pytest.approx(_flat(tr.matrix()), abs=1e-5)