"""Collision shapes, rigid body kinds, physics materials and the step run criterion."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar, Iterable, Optional

from heron.physics_time import PhysicsTime
from heron.step import PhysicsSteps
from heron.vecmath import Vec2, Vec3


class PhysicsSystem(enum.Enum):
    """Labels of the physics systems, run after the regular update."""

    VELOCITY_UPDATE = "velocity_update"
    """Updates velocities to reflect the physics world."""

    TRANSFORM_UPDATE = "transform_update"
    """Updates transforms to reflect the physics world."""

    EVENTS = "events"
    """Emits collision events."""


def should_run(physics_steps: PhysicsSteps, physics_time: PhysicsTime) -> bool:
    """True if the physics systems should run in the current frame."""
    return physics_steps.is_step_frame() and physics_time.scale > 0.0


class CollisionShape:
    """Base class of the shapes that can be attached to a rigid body.

    A shape is attached to the rigid body of its own entity, or to the one of
    its parent entity if its own entity has none. The default shape is a
    ``Sphere`` of radius 1.
    """

    __slots__ = ()


@dataclass(frozen=True)
class Sphere(CollisionShape):
    """A sphere (a circle in 2D) defined by its radius."""

    radius: float = 1.0


@dataclass(frozen=True)
class Capsule(CollisionShape):
    """A capsule.

    ``half_segment`` is the distance from the centre to the centre of a
    hemisphere; ``radius`` is the radius of the hemispheres.
    """

    half_segment: float
    radius: float


@dataclass(frozen=True)
class Cuboid(CollisionShape):
    """A cuboid (rectangle in 2D) given by its half extents.

    In 2D the ``z`` extent is ignored. ``border_radius``, if set, is added
    around the cuboid to round its corners.
    """

    half_extends: Vec3
    border_radius: Optional[float] = None


@dataclass(frozen=True)
class ConvexHull(CollisionShape):
    """A convex polygon or polyhedron described by its points.

    ``border_radius``, if set, is added around the hull to round it.
    """

    points: tuple[Vec3, ...]
    border_radius: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))


@dataclass(frozen=True)
class HeightField(CollisionShape):
    """A shape defined by the height of a grid of points, suited to floors with relief.

    In 2D only ``size.x`` and the first row of ``heights`` are used.
    """

    size: Vec2
    heights: tuple[tuple[float, ...], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        rows: Iterable[Iterable[float]] = self.heights
        object.__setattr__(self, "heights", tuple(tuple(row) for row in rows))


@dataclass(frozen=True)
class Cone(CollisionShape):
    """A cone with a circular base (3D only)."""

    half_height: float
    radius: float


@dataclass(frozen=True)
class Cylinder(CollisionShape):
    """A cylinder with a circular base (3D only)."""

    half_height: float
    radius: float


class RigidBody(enum.Enum):
    """Kind of rigid body. ``DYNAMIC`` is the usual default."""

    DYNAMIC = "dynamic"
    """Affected by forces and affecting other bodies."""

    STATIC = "static"
    """Never moves, but affects other bodies."""

    KINEMATIC_POSITION_BASED = "kinematic_position_based"
    """Moved by setting its position; affects others but is not affected."""

    KINEMATIC_VELOCITY_BASED = "kinematic_velocity_based"
    """Moved by setting its velocity; affects others but is not affected."""

    SENSOR = "sensor"
    """Neither affected nor affecting, but still takes part in collision events."""

    def can_have_velocity(self) -> bool:
        """True if this kind of body can be moved by a velocity."""
        return self in (RigidBody.DYNAMIC, RigidBody.KINEMATIC_VELOCITY_BASED)


@dataclass(frozen=True)
class SensorShape:
    """Marks the collision shape of the same entity as a sensor."""


@dataclass
class PhysicMaterial:
    """Physical properties of a rigid body.

    ``restitution`` sets how bouncy it is (0 to 1 typically), ``density`` how
    heavy it is (must be positive except for sensors and static bodies), and
    ``friction`` how much it resists sliding (0 to 1 typically).
    """

    PERFECTLY_INELASTIC_RESTITUTION: ClassVar[float] = 0.0
    PERFECTLY_ELASTIC_RESTITUTION: ClassVar[float] = 1.0

    restitution: float = 0.0
    density: float = 1.0
    friction: float = 0.0