import math

import numpy as np
import pytest

from zengine import maths


def _apply(matrix, point):
    result = matrix @ np.array([*point, 1.0])
    return result[:3] / result[3]


def test_radians_half_turn():
    assert maths.radians(180.0) == pytest.approx(math.pi)


def test_clamp_inside_and_outside():
    assert maths.clamp(0.5, 0.0, 1.0) == 0.5
    assert maths.clamp(-3.0, 0.0, 1.0) == 0.0
    assert maths.clamp(7.0, 0.0, 1.0) == 1.0


def test_clamp_empty_range_raises():
    with pytest.raises(ValueError):
        maths.clamp(0.5, 1.0, 0.0)


def test_normalize_gives_unit_length_and_same_direction():
    vector = np.array([3.0, -4.0, 12.0])
    unit = maths.normalize(vector)
    assert np.linalg.norm(unit) == pytest.approx(1.0)
    assert np.allclose(np.cross(unit, vector), 0.0)
    assert np.dot(unit, vector) > 0


def test_normalize_zero_raises():
    with pytest.raises(ValueError):
        maths.normalize([0.0, 0.0, 0.0])


def test_ortho_maps_box_corners_to_unit_cube():
    projection = maths.ortho(-2.0, 6.0, -1.0, 3.0, 0.5, 10.0)
    assert np.allclose(_apply(projection, (-2.0, -1.0, -0.5)), [-1.0, -1.0, -1.0])
    assert np.allclose(_apply(projection, (6.0, 3.0, -10.0)), [1.0, 1.0, 1.0])


def test_ortho_default_depth_range():
    assert np.allclose(maths.ortho(-1.0, 1.0, -1.0, 1.0), maths.ortho(-1.0, 1.0, -1.0, 1.0, -1.0, 1.0))


def test_ortho_degenerate_raises():
    with pytest.raises(ValueError):
        maths.ortho(1.0, 1.0, 0.0, 1.0)


def test_perspective_maps_near_and_far_planes():
    near, far = 0.1, 100.0
    projection = maths.perspective(maths.radians(45.0), 16.0 / 9.0, near, far)
    assert _apply(projection, (0.0, 0.0, -near))[2] == pytest.approx(-1.0)
    assert _apply(projection, (0.0, 0.0, -far))[2] == pytest.approx(1.0)


def test_perspective_edge_of_view_maps_to_unit_y():
    fovy = maths.radians(60.0)
    projection = maths.perspective(fovy, 1.0, 1.0, 10.0)
    depth = 5.0
    edge_y = depth * math.tan(fovy / 2.0)
    assert _apply(projection, (0.0, edge_y, -depth))[1] == pytest.approx(1.0)


def test_perspective_zero_aspect_raises():
    with pytest.raises(ValueError):
        maths.perspective(1.0, 0.0, 0.1, 10.0)


def test_look_at_puts_eye_at_origin_and_target_on_negative_z():
    eye = (3.0, 2.0, 5.0)
    center = (0.0, 0.0, 0.0)
    view = maths.look_at(eye, center, (0.0, 1.0, 0.0))
    assert np.allclose(_apply(view, eye), 0.0)
    target = _apply(view, center)
    assert np.allclose(target[:2], 0.0)
    assert target[2] == pytest.approx(-np.linalg.norm(eye))
    assert np.allclose(view[:3, :3] @ view[:3, :3].T, np.identity(3))


def test_translate_moves_points():
    matrix = maths.translate(np.identity(4), (1.0, 2.0, 3.0))
    assert np.allclose(_apply(matrix, (4.0, 5.0, 6.0)), [5.0, 7.0, 9.0])


def test_rotate_about_z_quarter_turn():
    matrix = maths.rotate(np.identity(4), math.pi / 2.0, (0.0, 0.0, 1.0))
    assert np.allclose(_apply(matrix, (1.0, 0.0, 0.0)), [0.0, 1.0, 0.0])


def test_rotate_preserves_length():
    matrix = maths.rotate(np.identity(4), 0.7, (1.0, 2.0, 3.0))
    point = np.array([2.0, -1.0, 0.5])
    assert np.linalg.norm(_apply(matrix, point)) == pytest.approx(np.linalg.norm(point))


def test_translate_then_rotate_composes():
    matrix = maths.rotate(maths.translate(np.identity(4), (1.0, 0.0, 0.0)), math.pi, (0.0, 0.0, 1.0))
    assert np.allclose(_apply(matrix, (1.0, 0.0, 0.0)), [0.0, 0.0, 0.0])


def test_angle_axis_matches_rotation_matrix():
    axis = maths.normalize([1.0, 1.0, 0.0])
    angle = 1.1
    quaternion = maths.angle_axis(angle, axis)
    matrix = maths.rotate(np.identity(4), angle, axis)
    vector = np.array([0.3, -0.2, 0.9])
    assert np.allclose(maths.quat_rotate(quaternion, vector), _apply(matrix, vector))
    assert np.linalg.norm(quaternion) == pytest.approx(1.0)


def test_quat_multiply_identity():
    identity = np.array([1.0, 0.0, 0.0, 0.0])
    q = maths.angle_axis(0.4, maths.normalize([0.0, 1.0, 1.0]))
    assert np.allclose(maths.quat_multiply(identity, q), q)
    assert np.allclose(maths.quat_multiply(q, identity), q)


def test_quat_multiply_composes_rotations():
    qa = maths.angle_axis(0.5, (0.0, 1.0, 0.0))
    qb = maths.angle_axis(0.8, (1.0, 0.0, 0.0))
    vector = np.array([0.2, 0.4, -1.0])
    combined = maths.quat_rotate(maths.quat_multiply(qa, qb), vector)
    sequential = maths.quat_rotate(qa, maths.quat_rotate(qb, vector))
    assert np.allclose(combined, sequential)


def test_quat_rotate_wrong_shape_raises():
    with pytest.raises(ValueError):
        maths.quat_rotate([1.0, 0.0, 0.0], [1.0, 0.0, 0.0])