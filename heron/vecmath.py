"""Small immutable vector and quaternion types used by the physics components."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

EPSILON = 1.1920929e-07
"""Machine epsilon of a single precision float, used for "near zero" checks."""

_Number = Union[int, float]


def is_near_zero(value) -> bool:
    """Return True if a number (or every component of a vector) is within epsilon of zero."""
    if isinstance(value, (int, float)):
        return abs(value) < EPSILON
    return value.is_near_zero()


@dataclass(frozen=True)
class Vec2:
    """A two dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, other) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other) -> Vec2:
        if isinstance(other, (int, float)):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other) -> Vec2:
        if isinstance(other, (int, float)):
            return Vec2(self.x / other, self.y / other)
        return NotImplemented

    def extend(self, z: float) -> Vec3:
        """Return a three dimensional vector with the given ``z`` component."""
        return Vec3(self.x, self.y, z)

    def length(self) -> float:
        return math.hypot(self.x, self.y)


@dataclass(frozen=True)
class Vec3:
    """A three dimensional vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, other) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other) -> Vec3:
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, other) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x / other.x, self.y / other.y, self.z / other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def recip(self) -> Vec3:
        """Component-wise reciprocal."""
        return Vec3(1.0 / self.x, 1.0 / self.y, 1.0 / self.z)

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> Vec3:
        """Return the vector scaled to unit length.

        Raises ValueError for a vector of zero length.
        """
        length = self.length()
        if length == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return self / length

    def is_near_zero(self) -> bool:
        return all(is_near_zero(component) for component in self)


Vec2.ZERO = Vec2(0.0, 0.0)
Vec2.X = Vec2(1.0, 0.0)
Vec2.Y = Vec2(0.0, 1.0)

Vec3.ZERO = Vec3(0.0, 0.0, 0.0)
Vec3.X = Vec3(1.0, 0.0, 0.0)
Vec3.Y = Vec3(0.0, 1.0, 0.0)
Vec3.Z = Vec3(0.0, 0.0, 1.0)


@dataclass(frozen=True)
class Quat:
    """A rotation quaternion stored as ``(x, y, z, w)``."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    @property
    def xyz(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)

    @classmethod
    def from_axis_angle(cls, axis: Vec3, angle: float) -> Quat:
        """Rotation of ``angle`` radians around the (normalized) ``axis``."""
        half = angle * 0.5
        s = math.sin(half)
        return cls(axis.x * s, axis.y * s, axis.z * s, math.cos(half))

    @classmethod
    def from_rotation_x(cls, angle: float) -> Quat:
        half = angle * 0.5
        return cls(math.sin(half), 0.0, 0.0, math.cos(half))

    @classmethod
    def from_rotation_y(cls, angle: float) -> Quat:
        half = angle * 0.5
        return cls(0.0, math.sin(half), 0.0, math.cos(half))

    @classmethod
    def from_rotation_z(cls, angle: float) -> Quat:
        half = angle * 0.5
        return cls(0.0, 0.0, math.sin(half), math.cos(half))

    def __mul__(self, other):
        if isinstance(other, Quat):
            x0, y0, z0, w0 = self
            x1, y1, z1, w1 = other
            return Quat(
                w0 * x1 + x0 * w1 + y0 * z1 - z0 * y1,
                w0 * y1 - x0 * z1 + y0 * w1 + z0 * x1,
                w0 * z1 + x0 * y1 - y0 * x1 + z0 * w1,
                w0 * w1 - x0 * x1 - y0 * y1 - z0 * z1,
            )
        if isinstance(other, Vec3):
            return self.mul_vec3(other)
        return NotImplemented

    def mul_vec3(self, v: Vec3) -> Vec3:
        """Rotate a vector by this quaternion."""
        w = self.w
        b = self.xyz
        b2 = b.dot(b)
        return v * (w * w - b2) + b * (v.dot(b) * 2.0) + b.cross(v) * (w * 2.0)

    def length_squared(self) -> float:
        return sum(c * c for c in self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def to_axis_angle(self) -> tuple[Vec3, float]:
        """Return the rotation axis and the angle in radians."""
        scale_sq = max(1.0 - self.w * self.w, 0.0)
        angle = 2.0 * math.acos(max(-1.0, min(1.0, self.w)))
        if scale_sq >= 1.0e-16:
            return self.xyz * (1.0 / math.sqrt(scale_sq)), angle
        return Vec3.X, angle


Quat.IDENTITY = Quat(0.0, 0.0, 0.0, 1.0)