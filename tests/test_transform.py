import math

import numpy as np
import pytest

from moteur.transform import (
    Transform,
    deg_to_rad,
    matrix_to_quaternion,
    quaternion_from_axis_angle,
    quaternion_multiply,
    quaternion_to_matrix,
    rad_to_deg,
)


def _apply(matrix, point):
    return (np.append(np.asarray(point, dtype=float), 1.0) @ matrix)[:3]


def test_deg_to_rad_half_turn():
    assert deg_to_rad(180) == pytest.approx(math.pi)


@pytest.mark.parametrize("angle", [-720.0, -33.3, 0.0, 12.5, 359.0])
def test_degree_radian_round_trip(angle):
    assert rad_to_deg(deg_to_rad(angle)) == pytest.approx(angle)


def test_axis_angle_is_unit_and_normalises_axis():
    q = quaternion_from_axis_angle((0.0, 0.0, 5.0), 1.2)
    assert np.linalg.norm(q) == pytest.approx(1.0)
    assert q[0] == pytest.approx(0.0)
    assert q[1] == pytest.approx(0.0)


def test_axis_angle_rejects_zero_axis():
    with pytest.raises(ValueError):
        quaternion_from_axis_angle((0.0, 0.0, 0.0), 1.0)


def test_quarter_turn_about_z_maps_x_to_y():
    m = quaternion_to_matrix(quaternion_from_axis_angle((0, 0, 1), math.pi / 2))
    assert _apply(m, (1, 0, 0)) == pytest.approx(np.array([0, 1, 0]), abs=1e-12)


@pytest.mark.parametrize(
    "axis,angle",
    [((1, 0, 0), 0.3), ((0, 1, 0), 2.9), ((1, 2, 3), 1.1), ((-1, 0.5, 0.2), 3.0)],
)
def test_matrix_quaternion_round_trip(axis, angle):
    q = quaternion_from_axis_angle(axis, angle)
    back = matrix_to_quaternion(quaternion_to_matrix(q))
    if back[3] * q[3] < 0:
        back = -back
    assert back == pytest.approx(q, abs=1e-9)


def test_multiply_matches_matrix_composition():
    a = quaternion_from_axis_angle((1, 0, 0), 0.7)
    b = quaternion_from_axis_angle((0, 1, 1), -1.3)
    combined = quaternion_to_matrix(quaternion_multiply(a, b))
    expected = quaternion_to_matrix(a) @ quaternion_to_matrix(b)
    assert combined == pytest.approx(expected, abs=1e-12)


def test_new_transform_renders_identity():
    t = Transform()
    assert np.array_equal(t.render_matrix, np.identity(4))
    assert t.rotation_vector() == pytest.approx(np.zeros(3))


def test_set_position_translates():
    t = Transform()
    t.set_position((1.0, 2.0, 3.0))
    assert _apply(t.render_matrix, (0, 0, 0)) == pytest.approx(np.array([1, 2, 3]))
    assert list(t.position) == [1.0, 2.0, 3.0]


def test_set_position_x_resets_other_axes():
    t = Transform()
    t.set_position((1.0, 2.0, 3.0))
    t.set_position_x(5.0)
    assert list(t.position) == [5.0, 0.0, 0.0]


def test_set_scale_z_zeroes_other_axes():
    t = Transform()
    t.set_scale_z(4.0)
    assert list(t.scale) == [0.0, 0.0, 4.0]
    assert _apply(t.render_matrix, (1, 1, 1)) == pytest.approx(np.array([0, 0, 4]))


def test_scale_is_applied_before_translation():
    t = Transform()
    t.set_scale((2.0, 2.0, 2.0))
    t.set_position((10.0, 0.0, 0.0))
    assert _apply(t.render_matrix, (1, 1, 1)) == pytest.approx(np.array([12, 2, 2]))


def test_set_rotation_yaw_turns_about_z():
    t = Transform()
    t.set_rotation(0.0, 0.0, 90.0)
    assert t.yaw == pytest.approx(math.pi / 2)
    assert _apply(t.render_matrix, (1, 0, 0)) == pytest.approx(np.array([0, 1, 0]), abs=1e-12)


def test_set_rotation_in_radians():
    t = Transform()
    t.set_rotation(0.4, 0.5, 0.6, is_radian=True)
    assert (t.roll, t.pitch, t.yaw) == (0.4, 0.5, 0.6)


def test_set_pitch_updates_quaternion_only():
    t = Transform()
    t.set_pitch(30.0)
    assert t.rotation == pytest.approx(quaternion_from_axis_angle((0, 1, 0), deg_to_rad(30.0)))
    assert np.array_equal(t.rotation_matrix, np.identity(4))


def test_add_pitch_accumulates_angle():
    t = Transform()
    t.add_pitch(10.0)
    t.add_pitch(20.0)
    assert t.pitch == pytest.approx(deg_to_rad(30.0))


def test_add_rotation_keeps_matrix_orthonormal():
    t = Transform()
    t.set_rotation(10.0, 20.0, 30.0)
    t.add_rotation(15.0, 25.0, 35.0)
    r = t.rotation_matrix[:3, :3]
    assert r @ r.T == pytest.approx(np.identity(3), abs=1e-9)
    assert np.linalg.det(r) == pytest.approx(1.0)