"""The world's gravity."""

from __future__ import annotations

from dataclasses import dataclass

from heron.vecmath import Vec2, Vec3


@dataclass(frozen=True)
class Gravity:
    """Resource holding the gravity vector of the world. Defaults to zero."""

    vector: Vec3 = Vec3.ZERO

    @classmethod
    def from_vector(cls, v) -> Gravity:
        """Build from a 3D vector, or from a 2D vector with ``z`` set to zero."""
        if isinstance(v, Vec3):
            return cls(v)
        if isinstance(v, Vec2):
            return cls(v.extend(0.0))
        raise TypeError(f"expected Vec2 or Vec3, got {type(v).__name__}")