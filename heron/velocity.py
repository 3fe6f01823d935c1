"""Linear and angular velocity and acceleration components."""

from __future__ import annotations

from dataclasses import dataclass, replace

from heron.vecmath import Quat, Vec2, Vec3


@dataclass(frozen=True)
class AxisAngle:
    """An axis-angle rotation stored as one vector.

    The direction of ``axis`` is the rotation axis and its length is the angle
    in radians. ``axis`` is therefore **not** normalized.
    """

    axis: Vec3 = Vec3.ZERO

    @classmethod
    def new(cls, axis: Vec3, angle: float) -> AxisAngle:
        """Rotation of ``angle`` radians around ``axis``.

        Raises ValueError if ``axis`` has zero length.
        """
        return cls(axis.normalize() * angle)

    @classmethod
    def from_quat(cls, quat: Quat) -> AxisAngle:
        """Axis-angle equivalent of a quaternion, scaled by its length."""
        length = quat.length()
        axis, angle = quat.to_axis_angle()
        return cls(axis.normalize() * (angle * length))

    def to_quat(self) -> Quat:
        """Quaternion for this rotation; the identity when the angle is near zero."""
        if self.is_near_zero():
            return Quat.IDENTITY
        angle = self.axis.length()
        return Quat.from_axis_angle(self.axis / angle, angle)

    def angle_squared(self) -> float:
        """Squared angle; cheaper than ``angle`` for comparisons."""
        return self.axis.length_squared()

    def angle(self) -> float:
        """Angle around the axis, in radians."""
        return self.axis.length()

    def is_near_zero(self) -> bool:
        return self.axis.is_near_zero()

    def __float__(self) -> float:
        return self.angle()

    def __mul__(self, other) -> AxisAngle:
        if isinstance(other, (int, float)):
            return AxisAngle(self.axis * other)
        return NotImplemented

    def __rmul__(self, other) -> AxisAngle:
        return self.__mul__(other)


def _split_vector(v, owner: str) -> tuple[Vec3, AxisAngle]:
    """Linear and angular parts for a Vec3, Vec2, AxisAngle or Quat."""
    if isinstance(v, Vec3):
        return v, AxisAngle()
    if isinstance(v, Vec2):
        return v.extend(0.0), AxisAngle()
    if isinstance(v, AxisAngle):
        return Vec3.ZERO, v
    if isinstance(v, Quat):
        return Vec3.ZERO, AxisAngle.from_quat(v)
    raise TypeError(f"cannot build {owner} from {type(v).__name__}")


@dataclass
class Velocity:
    """Linear velocity in units per second and angular velocity in radians per second."""

    linear: Vec3 = Vec3.ZERO
    angular: AxisAngle = AxisAngle()

    @classmethod
    def from_linear(cls, linear: Vec3) -> Velocity:
        """Only a linear part; the angular part is zero."""
        return cls(linear=linear, angular=AxisAngle())

    @classmethod
    def from_angular(cls, angular: AxisAngle) -> Velocity:
        """Only an angular part; the linear part is zero."""
        return cls(linear=Vec3.ZERO, angular=angular)

    @classmethod
    def from_vector(cls, v) -> Velocity:
        """Build from a Vec3 or Vec2 (linear) or an AxisAngle or Quat (angular)."""
        linear, angular = _split_vector(v, cls.__name__)
        return cls(linear=linear, angular=angular)

    def with_linear(self, linear: Vec3) -> Velocity:
        """A copy with the given linear part."""
        return replace(self, linear=linear)

    def with_angular(self, angular: AxisAngle) -> Velocity:
        """A copy with the given angular part."""
        return replace(self, angular=angular)

    def is_near_zero(self) -> bool:
        return self.linear.is_near_zero() and self.angular.is_near_zero()


@dataclass
class Acceleration:
    """Linear acceleration in units per second squared and angular in radians per second squared."""

    linear: Vec3 = Vec3.ZERO
    angular: AxisAngle = AxisAngle()

    @classmethod
    def from_linear(cls, linear: Vec3) -> Acceleration:
        """Only a linear part; the angular part is zero."""
        return cls(linear=linear, angular=AxisAngle())

    @classmethod
    def from_angular(cls, angular: AxisAngle) -> Acceleration:
        """Only an angular part; the linear part is zero."""
        return cls(linear=Vec3.ZERO, angular=angular)

    @classmethod
    def from_vector(cls, v) -> Acceleration:
        """Build from a Vec3 or Vec2 (linear) or an AxisAngle or Quat (angular)."""
        linear, angular = _split_vector(v, cls.__name__)
        return cls(linear=linear, angular=angular)

    def with_linear(self, linear: Vec3) -> Acceleration:
        """A copy with the given linear part."""
        return replace(self, linear=linear)

    def with_angular(self, angular: AxisAngle) -> Acceleration:
        """A copy with the given angular part."""
        return replace(self, angular=angular)

    def is_near_zero(self) -> bool:
        return self.linear.is_near_zero() and self.angular.is_near_zero()