"""Restrictions on the rotations that forces may cause on a rigid body."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RotationConstraints:
    """Which axes forces and torques may rotate a body around.

    Angular velocity may still be set directly; this only restricts how
    rotation changes when forces are applied. The default allows every axis.
    """

    allow_x: bool = True
    allow_y: bool = True
    allow_z: bool = True

    @classmethod
    def lock(cls) -> RotationConstraints:
        """Lock rotations around all axes."""
        return cls(allow_x=False, allow_y=False, allow_z=False)

    @classmethod
    def allow(cls) -> RotationConstraints:
        """Allow rotations around all axes."""
        return cls(allow_x=True, allow_y=True, allow_z=True)

    @classmethod
    def restrict_to_x_only(cls) -> RotationConstraints:
        """Allow rotation around the x axis only."""
        return cls(allow_x=True, allow_y=False, allow_z=False)

    @classmethod
    def restrict_to_y_only(cls) -> RotationConstraints:
        """Allow rotation around the y axis only."""
        return cls(allow_x=False, allow_y=True, allow_z=False)

    @classmethod
    def restrict_to_z_only(cls) -> RotationConstraints:
        """Allow rotation around the z axis only."""
        return cls(allow_x=False, allow_y=False, allow_z=True)