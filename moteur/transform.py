"""Position, scale and rotation of an object, kept as row-vector matrices."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

_DIR = np.array([1.0, 0.0, 0.0])
_RIGHT = np.array([0.0, 1.0, 0.0])
_UP = np.array([0.0, 0.0, 1.0])


def deg_to_rad(angle: float) -> float:
    """Convert degrees to radians."""
    return angle * (math.pi / 180)


def rad_to_deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * (180 / math.pi)


def _identity_quaternion() -> np.ndarray:
    return np.array([0.0, 0.0, 0.0, 1.0])


def quaternion_from_axis_angle(axis: Sequence[float], angle: float) -> np.ndarray:
    """Quaternion (x, y, z, w) rotating by ``angle`` radians about ``axis``."""
    vector = np.asarray(axis, dtype=float)
    norm = np.linalg.norm(vector)
    if norm == 0.0:
        raise ValueError("rotation axis must not be zero")
    half = angle / 2.0
    return np.append(vector / norm * math.sin(half), math.cos(half))


def quaternion_multiply(a: Sequence[float], b: Sequence[float]) -> np.ndarray:
    """Combine rotations: ``a`` applied first, then ``b``."""
    ax, ay, az, aw = np.asarray(a, dtype=float)
    bx, by, bz, bw = np.asarray(b, dtype=float)
    return np.array(
        [
            bw * ax + bx * aw + by * az - bz * ay,
            bw * ay - bx * az + by * aw + bz * ax,
            bw * az + bx * ay - by * ax + bz * aw,
            bw * aw - bx * ax - by * ay - bz * az,
        ]
    )


def quaternion_to_matrix(q: Sequence[float]) -> np.ndarray:
    """4x4 rotation matrix for row vectors from a quaternion."""
    x, y, z, w = np.asarray(q, dtype=float)
    return np.array(
        [
            [1 - 2 * (y * y + z * z), 2 * (x * y + z * w), 2 * (x * z - y * w), 0.0],
            [2 * (x * y - z * w), 1 - 2 * (x * x + z * z), 2 * (y * z + x * w), 0.0],
            [2 * (x * z + y * w), 2 * (y * z - x * w), 1 - 2 * (x * x + y * y), 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def matrix_to_quaternion(m: np.ndarray) -> np.ndarray:
    """Quaternion (x, y, z, w) of the rotation held by a row-vector matrix."""
    r = np.asarray(m, dtype=float)[:3, :3]
    trace = r[0, 0] + r[1, 1] + r[2, 2]
    if trace > 0:
        s = math.sqrt(trace + 1.0) * 2
        return np.array(
            [(r[1, 2] - r[2, 1]) / s, (r[2, 0] - r[0, 2]) / s, (r[0, 1] - r[1, 0]) / s, s / 4]
        )
    if r[0, 0] >= r[1, 1] and r[0, 0] >= r[2, 2]:
        s = math.sqrt(1.0 + r[0, 0] - r[1, 1] - r[2, 2]) * 2
        return np.array(
            [s / 4, (r[0, 1] + r[1, 0]) / s, (r[0, 2] + r[2, 0]) / s, (r[1, 2] - r[2, 1]) / s]
        )
    if r[1, 1] >= r[2, 2]:
        s = math.sqrt(1.0 + r[1, 1] - r[0, 0] - r[2, 2]) * 2
        return np.array(
            [(r[0, 1] + r[1, 0]) / s, s / 4, (r[1, 2] + r[2, 1]) / s, (r[2, 0] - r[0, 2]) / s]
        )
    s = math.sqrt(1.0 + r[2, 2] - r[0, 0] - r[1, 1]) * 2
    return np.array(
        [(r[0, 2] + r[2, 0]) / s, (r[1, 2] + r[2, 1]) / s, s / 4, (r[0, 1] - r[1, 0]) / s]
    )


def _translation(x: float, y: float, z: float) -> np.ndarray:
    matrix = np.identity(4)
    matrix[3, :3] = (x, y, z)
    return matrix


def _scaling(x: float, y: float, z: float) -> np.ndarray:
    return np.diag([x, y, z, 1.0])


class Transform:
    """Scale, rotation and translation combined into one render matrix.

    Roll turns about the x axis, pitch about y and yaw about z. Angles are
    taken in degrees unless ``is_radian`` is true and are stored in radians.
    """

    def __init__(self) -> None:
        self.roll = 0.0
        self.pitch = 0.0
        self.yaw = 0.0
        self.rotation = _identity_quaternion()
        self.position = np.zeros(3)
        self.scale = np.ones(3)
        self.scale_matrix = np.identity(4)
        self.position_matrix = np.identity(4)
        self.rotation_matrix = np.identity(4)
        self.render_matrix = np.identity(4)
        self.update_render()

    @staticmethod
    def _radians(angle: float, is_radian: bool) -> float:
        return angle if is_radian else deg_to_rad(angle)

    def _turn(self, axis: np.ndarray, angle: float) -> None:
        self.rotation = quaternion_multiply(
            self.rotation, quaternion_from_axis_angle(axis, angle)
        )

    def create_rotation(
        self, roll: float, pitch: float, yaw: float, is_radian: bool = False
    ) -> None:
        """Store the angles and fold roll, pitch and yaw into the quaternion."""
        self.roll = self._radians(roll, is_radian)
        self.pitch = self._radians(pitch, is_radian)
        self.yaw = self._radians(yaw, is_radian)
        self._turn(_DIR, self.roll)
        self._turn(_RIGHT, self.pitch)
        self._turn(_UP, self.yaw)

    def set_rotation(
        self, roll: float, pitch: float, yaw: float, is_radian: bool = False
    ) -> None:
        """Rotate and rebuild the rotation and render matrices."""
        self.create_rotation(roll, pitch, yaw, is_radian)
        self.rotation_matrix = quaternion_to_matrix(self.rotation)
        self.update_render()

    def add_rotation(
        self, yaw: float, pitch: float, roll: float, is_radian: bool = False
    ) -> None:
        """Add a rotation on top of the current rotation matrix."""
        self.create_rotation(roll, pitch, yaw, is_radian)
        current = matrix_to_quaternion(self.rotation_matrix)
        self.rotation = quaternion_multiply(self.rotation, current)
        self.rotation_matrix = quaternion_to_matrix(self.rotation)
        self.update_render()

    def set_roll(self, angle: float, is_radian: bool = False) -> None:
        """Set the roll and fold it into the quaternion."""
        self.roll = self._radians(angle, is_radian)
        self._turn(_DIR, self.roll)
        self.update_render()

    def set_pitch(self, angle: float, is_radian: bool = False) -> None:
        """Set the pitch and fold it into the quaternion."""
        self.pitch = self._radians(angle, is_radian)
        self._turn(_RIGHT, self.pitch)
        self.update_render()

    def set_yaw(self, angle: float, is_radian: bool = False) -> None:
        """Set the yaw and fold it into the quaternion."""
        self.yaw = self._radians(angle, is_radian)
        self._turn(_UP, self.yaw)
        self.update_render()

    def add_roll(self, angle: float, is_radian: bool = False) -> None:
        """Increase the roll and fold the new total into the quaternion."""
        self.roll += self._radians(angle, is_radian)
        self._turn(_DIR, self.roll)
        self.update_render()

    def add_pitch(self, angle: float, is_radian: bool = False) -> None:
        """Increase the pitch and fold the new total into the quaternion."""
        self.pitch += self._radians(angle, is_radian)
        self._turn(_RIGHT, self.pitch)
        self.update_render()

    def add_yaw(self, angle: float, is_radian: bool = False) -> None:
        """Increase the yaw and fold the new total into the quaternion."""
        self.yaw += self._radians(angle, is_radian)
        self._turn(_UP, self.yaw)
        self.update_render()

    def rotation_vector(self) -> np.ndarray:
        """The x, y, z parts of the matrix's quaternion, passed through deg_to_rad."""
        q = matrix_to_quaternion(self.rotation_matrix)
        return np.array([deg_to_rad(q[0]), deg_to_rad(q[1]), deg_to_rad(q[2])])

    def set_position(self, position: Sequence[float]) -> None:
        """Translate to ``position``."""
        x, y, z = (float(v) for v in position)
        self.position = np.array([x, y, z])
        self.position_matrix = _translation(x, y, z)
        self.update_render()

    def set_position_x(self, value: float) -> None:
        """Translate to (value, 0, 0)."""
        self.set_position((value, 0.0, 0.0))

    def set_position_y(self, value: float) -> None:
        """Translate to (0, value, 0)."""
        self.set_position((0.0, value, 0.0))

    def set_position_z(self, value: float) -> None:
        """Translate to (0, 0, value)."""
        self.set_position((0.0, 0.0, value))

    def set_scale(self, scale: Sequence[float]) -> None:
        """Scale by ``scale`` along each axis."""
        x, y, z = (float(v) for v in scale)
        self.scale = np.array([x, y, z])
        self.scale_matrix = _scaling(x, y, z)
        self.update_render()

    def set_scale_x(self, value: float) -> None:
        """Scale by (value, 0, 0)."""
        self.set_scale((value, 0.0, 0.0))

    def set_scale_y(self, value: float) -> None:
        """Scale by (0, value, 0)."""
        self.set_scale((0.0, value, 0.0))

    def set_scale_z(self, value: float) -> None:
        """Scale by (0, 0, value)."""
        self.set_scale((0.0, 0.0, value))

    def update_render(self) -> None:
        """Rebuild the render matrix as scale, then rotation, then translation."""
        self.render_matrix = self.scale_matrix @ self.rotation_matrix @ self.position_matrix