"""Vector helpers, random numbers and ray intersection tests."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

EPSILON = 0.0001
TWO_PI = 2 * math.pi


def rad_to_deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * 180.0 / math.pi


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * math.pi / 180.0


@dataclass(frozen=True)
class Vec2:
    """A point or direction in the plane."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Vec3:
    """A point or direction in space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scaled(self, factor: float) -> Vec3:
        """Return the vector multiplied by a scalar."""
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    def dot(self, other: Vec3) -> float:
        """Return the dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Return the cross product."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vec3:
        """Return the unit vector in the same direction; the zero vector stays zero."""
        magnitude = self.length()
        if magnitude == 0:
            return self
        return self.scaled(1.0 / magnitude)


def distance3d(a: Vec3, b: Vec3) -> float:
    """Distance between two points in space."""
    return math.sqrt((b.x - a.x) ** 2 + (b.y - a.y) ** 2 + (b.z - a.z) ** 2)


def distance2d(a: Vec2, b: Vec2) -> float:
    """Distance between two points in the plane."""
    return math.sqrt((b.x - a.x) ** 2 + (b.y - a.y) ** 2)


def clamp_angle(angle: float) -> float:
    """Wrap an angle that is at most one turn out of range into [0, 2*pi]."""
    if angle < 0:
        angle += TWO_PI
    if angle > TWO_PI:
        angle -= TWO_PI
    return angle


def randr(max_value: int, rng: random.Random | None = None) -> int:
    """Random integer in the range 0..max_value, both ends included."""
    return (rng or random).randint(0, max_value)


def randf(max_value: float, rng: random.Random | None = None) -> float:
    """Random float in the range 0..max_value."""
    return (rng or random).random() * max_value


def intersect_triangle(
    origin: Vec3, direction: Vec3, vert0: Vec3, vert1: Vec3, vert2: Vec3
) -> tuple[float, float, float] | None:
    """Möller-Trumbore ray/triangle test with back-face culling.

    Returns (t, u, v) on a hit, where t is the distance along the ray and
    u, v are barycentric coordinates, or None on a miss.
    """
    edge1 = vert1 - vert0
    edge2 = vert2 - vert0

    pvec = direction.cross(edge2)
    det = edge1.dot(pvec)
    if det < EPSILON:
        return None

    tvec = origin - vert0
    u = tvec.dot(pvec)
    if u < 0.0 or u > det:
        return None

    qvec = tvec.cross(edge1)
    v = direction.dot(qvec)
    if v < 0.0 or u + v > det:
        return None

    inv_det = 1.0 / det
    t = edge2.dot(qvec) * inv_det
    return t, u * inv_det, v * inv_det


def calc_rot_to_target(pos: Vec3, target: Vec3) -> tuple[float, float]:
    """Return (y rotation, x rotation) that turns from pos towards target."""
    diff = (pos - target).normalized()
    y_rot = clamp_angle(math.atan2(diff.z, diff.x) - math.pi / 2)
    x_rot = math.asin(max(-1.0, min(1.0, diff.y)))
    return y_rot, x_rot


def check_hit_sphere(position: Vec3, direction: Vec3, center: Vec3, radius: float) -> float:
    """Test a ray against a sphere.

    Returns the distance along the ray to the point nearest the centre, or -1
    if the ray misses.
    """
    oc = position - center
    b = oc.dot(direction)
    c = oc.dot(oc) - radius * radius
    if not (c > 0.0 and b > 0.0):
        if b * b - c >= 0:
            return -b
    return -1.0


def lerpf(a: float, b: float, step: float) -> float:
    """Linear interpolation between two numbers."""
    return a + step * (b - a)


def lerpv3(a: Vec3, b: Vec3, step: float) -> Vec3:
    """Component-wise linear interpolation between two vectors."""
    return Vec3(lerpf(a.x, b.x, step), lerpf(a.y, b.y, step), lerpf(a.z, b.z, step))