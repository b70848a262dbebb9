"""Rotation quaternions."""

from __future__ import annotations

import math
from dataclasses import dataclass

from trispace.util import Vec3


def _clamp_unit(value: float) -> float:
    return max(-1.0, min(1.0, value))


@dataclass(frozen=True)
class Quat:
    """A quaternion w + xi + yj + zk."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def norm(self) -> float:
        """Squared magnitude."""
        return self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z

    def normalized(self) -> Quat:
        """Return the unit quaternion with the same orientation."""
        magnitude = math.sqrt(self.norm())
        return Quat(self.w / magnitude, self.x / magnitude, self.y / magnitude, self.z / magnitude)

    @staticmethod
    def from_axis_angle(axis: Vec3, angle: float) -> Quat:
        """Rotation of angle radians about a unit axis."""
        s = math.sin(angle / 2)
        return Quat(math.cos(angle / 2), axis.x * s, axis.y * s, axis.z * s)

    @staticmethod
    def from_angles(angles: Vec3) -> Quat:
        """Rotation from Euler angles in radians."""
        hx, hy, hz = angles.x * 0.5, angles.y * 0.5, angles.z * 0.5
        sin_x, cos_x = math.sin(hx), math.cos(hx)
        cos_y_cos_z = math.cos(hy) * math.cos(hz)
        sin_y_sin_z = math.sin(hy) * math.sin(hz)
        cos_y_sin_z = math.cos(hy) * math.sin(hz)
        sin_y_cos_z = math.sin(hy) * math.cos(hz)
        return Quat(
            cos_y_cos_z * cos_x - sin_y_sin_z * sin_x,
            cos_y_cos_z * sin_x + sin_y_sin_z * cos_x,
            sin_y_cos_z * cos_x + cos_y_sin_z * sin_x,
            cos_y_sin_z * cos_x - sin_y_cos_z * sin_x,
        ).normalized()

    def to_axis_angle(self) -> tuple[Vec3, float]:
        """Return (axis, angle); a near-zero rotation gets the x axis."""
        q = self.normalized() if self.w > 1 else self
        w = _clamp_unit(q.w)
        angle = 2 * math.acos(w)
        s = math.sqrt(max(0.0, 1 - w * w))
        if s < 0.001:
            return Vec3(1.0, 0.0, 0.0), angle
        return Vec3(q.x / s, q.y / s, q.z / s), angle

    def to_matrix(self) -> tuple[float, ...]:
        """Return the 4x4 rotation matrix as 16 floats, row by row."""
        w, x, y, z = self.w, self.x, self.y, self.z
        return (
            1 - 2 * y * y - 2 * z * z, 2 * x * y - 2 * w * z, 2 * x * z + 2 * w * y, 0.0,
            2 * x * y + 2 * w * z, 1 - 2 * x * x - 2 * z * z, 2 * y * z - 2 * w * x, 0.0,
            2 * x * z - 2 * w * y, 2 * y * z + 2 * w * x, 1 - 2 * x * x - 2 * y * y, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    def __mul__(self, other: Quat) -> Quat:
        return Quat(
            self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
            self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
            self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
            self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
        )

    def rotate(self, v: Vec3) -> Vec3:
        """Rotate a vector by this quaternion."""
        w, x, y, z = self.w, self.x, self.y, self.z
        return Vec3(
            w * w * v.x + 2 * y * w * v.z - 2 * z * w * v.y + x * x * v.x
            + 2 * y * x * v.y + 2 * z * x * v.z - z * z * v.x - y * y * v.x,
            2 * x * y * v.x + y * y * v.y + 2 * z * y * v.z + 2 * w * z * v.x
            - z * z * v.y + w * w * v.y - 2 * x * w * v.z - x * x * v.y,
            2 * x * z * v.x + 2 * y * z * v.y + z * z * v.z - 2 * w * y * v.x
            - y * y * v.z + 2 * w * x * v.y - x * x * v.z + w * w * v.z,
        )

    def inverse(self) -> Quat:
        """Multiplicative inverse; the zero quaternion is returned unchanged."""
        n = self.norm()
        if n <= 0:
            return self
        inv = 1 / n
        return Quat(self.w * inv, -self.x * inv, -self.y * inv, -self.z * inv)


QUAT_INITIAL = Quat(1.0, 0.0, 0.0, 0.0)


def quat_look_at(pos: Vec3, target: Vec3, forward: Vec3, up: Vec3) -> Quat:
    """Rotation that turns the forward direction towards target as seen from pos."""
    diff = (target - pos).normalized()
    axis = forward.cross(diff).normalized()
    if axis.length() <= 0.000001:
        axis = up
    angle = math.acos(_clamp_unit(forward.dot(diff)))
    return Quat.from_axis_angle(axis, angle)