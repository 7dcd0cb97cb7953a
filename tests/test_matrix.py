import pytest

from littleengine.matrix import (
    Mat4,
    frustum,
    look_at,
    orthogonal,
    perspective,
    rotation_x,
    rotation_y,
    rotation_z,
    scale,
    translate,
)
from littleengine.vectors import Vec3, Vec4


def _values(m: Mat4) -> list:
    return [m[i] for i in range(16)]


def _sample() -> Mat4:
    return Mat4.from_values(range(1, 17))


def test_default_is_identity():
    assert Mat4() == Mat4.identity()
    assert Mat4.identity()[0, 0] == 1.0
    assert Mat4.identity()[0, 1] == 0.0


def test_from_values_row_major_and_indexing():
    m = _sample()
    assert m.xw == 4
    assert m.yx == 5
    assert m[1, 3] == m[7] == m.yw


def test_from_values_wrong_length():
    with pytest.raises(ValueError):
        Mat4.from_values([1.0, 2.0])


def test_index_out_of_range():
    with pytest.raises(IndexError):
        _sample()[4, 0]


def test_identity_is_neutral():
    m = _sample()
    assert m * Mat4.identity() == m
    assert Mat4.identity() * m == m


def test_scalar_multiplication_both_sides_and_division():
    m = _sample()
    assert m * 2.0 == 2.0 * m
    assert (m * 2.0)[5] == m[5] * 2.0
    assert (m * 2.0) / 2.0 == m


def test_add_and_sub_round_trip():
    m = _sample()
    n = rotation_x(30.0)
    assert (m + n) - n == m
    assert (m - m) == Mat4.from_values([0.0] * 16)


def test_equality_is_exact():
    m = _sample()
    other = Mat4.from_values(range(1, 17))
    assert m == other
    other.ww += 1e-12
    assert m != other


def test_unsupported_operand():
    with pytest.raises(TypeError):
        _sample() * "x"


def test_translate_moves_points_not_directions():
    t = translate(Vec3(4.0, 5.0, 6.0))
    assert t * Vec4(1.0, 2.0, 3.0, 1.0) == Vec4(5.0, 7.0, 9.0, 1.0)
    assert t * Vec4(1.0, 2.0, 3.0, 0.0) == Vec4(1.0, 2.0, 3.0, 0.0)


def test_scale_multiplies_components():
    s = scale(Vec3(2.0, 3.0, 4.0))
    assert s * Vec4(1.0, 1.0, 1.0, 1.0) == Vec4(2.0, 3.0, 4.0, 1.0)


@pytest.mark.parametrize("rot", [rotation_x, rotation_y, rotation_z])
def test_rotation_inverse_is_negative_angle(rot):
    product = rot(37.0) * rot(-37.0)
    assert _values(product) == pytest.approx(_values(Mat4.identity()), abs=1e-9)


@pytest.mark.parametrize("rot", [rotation_x, rotation_y, rotation_z])
def test_rotation_preserves_length(rot):
    v = rot(71.0) * Vec4(1.0, 2.0, 3.0, 0.0)
    assert abs(v.x**2 + v.y**2 + v.z**2 - 14.0) < 1e-9
    assert v.w == 0.0


def test_composition_is_associative():
    a, b, c = rotation_x(10.0), translate(Vec3(1.0, 2.0, 3.0)), scale(Vec3(2.0, 2.0, 2.0))
    assert _values((a * b) * c) == pytest.approx(_values(a * (b * c)), abs=1e-9)


def test_orthogonal_maps_box_corners_to_ndc():
    proj = orthogonal(0.0, 800.0, 0.0, 600.0)
    low = proj * Vec4(0.0, 0.0, 0.0, 1.0)
    high = proj * Vec4(800.0, 600.0, 0.0, 1.0)
    assert [low.x, low.y, low.z, low.w] == pytest.approx([-1.0, -1.0, 0.0, 1.0], abs=1e-9)
    assert [high.x, high.y, high.z, high.w] == pytest.approx([1.0, 1.0, 0.0, 1.0], abs=1e-9)


def test_perspective_near_and_far_planes():
    near, far = 0.1, 1000.0
    proj = perspective(45.0, 16.0 / 9.0, near, far)
    at_near = proj * Vec4(0.0, 0.0, -near, 1.0)
    at_far = proj * Vec4(0.0, 0.0, -far, 1.0)
    assert abs(at_near.z / at_near.w + 1.0) < 1e-6
    assert abs(at_far.z / at_far.w - 1.0) < 1e-6


def test_frustum_is_symmetric_for_centred_box():
    proj = frustum(-1.0, 1.0, -1.0, 1.0, 1.0, 10.0)
    assert proj.xz == 0.0
    assert proj.yz == 0.0
    assert proj.wz == -1.0
    assert proj.ww == 0.0


def test_look_at_puts_eye_at_origin_and_target_ahead():
    pos = Vec3(0.0, 16.0, -20.0)
    target = Vec3(3.0, 10.0, 5.0)
    view = look_at(pos, target, Vec3(0.0, 1.0, 0.0))
    eye = view * Vec4(pos.x, pos.y, pos.z, 1.0)
    assert [eye.x, eye.y, eye.z, eye.w] == pytest.approx([0.0, 0.0, 0.0, 1.0], abs=1e-9)
    ahead = view * Vec4(target.x, target.y, target.z, 1.0)
    assert abs(ahead.x) < 1e-9
    assert abs(ahead.y) < 1e-9
    assert ahead.z < 0.0