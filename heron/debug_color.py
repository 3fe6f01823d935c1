"""Colours used to render collision shapes for debugging."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from heron.shapes import RigidBody
from heron.vecmath import EPSILON

DEFAULT_ALPHA_2D = 0.4
DEFAULT_ALPHA_3D = 0.8
"""3D debug rendering uses wireframes, easier to read with more opaque colours."""


def is_near(v1: float, v2: float) -> bool:
    """True if two numbers differ by at most epsilon."""
    return abs(v2 - v1) <= EPSILON


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components between 0 and 1."""

    r: float
    g: float
    b: float
    a: float = 1.0


@dataclass(frozen=True)
class DebugColor:
    """The colour of each kind of collider in debug rendering."""

    sensor: Color
    static_body: Color
    dynamic_body: Color
    kinematic_body: Color

    @classmethod
    def _with_alpha(cls, alpha: float) -> DebugColor:
        return cls(
            sensor=Color(0.0, 0.63, 0.0, alpha),
            static_body=Color(0.64, 0.0, 0.16, alpha),
            dynamic_body=Color(0.0, 0.18, 0.54, alpha),
            kinematic_body=Color(0.21, 0.07, 0.7, alpha),
        )

    @classmethod
    def for_2d(cls) -> DebugColor:
        """Default colours for filled 2D rendering."""
        return cls._with_alpha(DEFAULT_ALPHA_2D)

    @classmethod
    def for_3d(cls) -> DebugColor:
        """Default colours for 3D wireframe rendering."""
        return cls._with_alpha(DEFAULT_ALPHA_3D)

    def for_collider_type(
        self, rigid_body: Optional[RigidBody], is_sensor_shape: bool
    ) -> Color:
        """Colour of a shape given its body kind and whether it is a sensor shape.

        A shape without a rigid body is drawn like a dynamic body.
        """
        if is_sensor_shape or rigid_body is RigidBody.SENSOR:
            return self.sensor
        if rigid_body is RigidBody.STATIC:
            return self.static_body
        if rigid_body in (
            RigidBody.KINEMATIC_POSITION_BASED,
            RigidBody.KINEMATIC_VELOCITY_BASED,
        ):
            return self.kinematic_body
        return self.dynamic_body