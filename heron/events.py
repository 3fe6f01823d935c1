"""Collision events emitted when two shapes start or stop colliding."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Hashable

from heron.layers import CollisionLayers


@dataclass(frozen=True)
class CollisionData:
    """Data about one of the two entities involved in a collision."""

    rigid_body_entity: Hashable
    collision_shape_entity: Hashable
    collision_layers: CollisionLayers


class CollisionEventKind(enum.Enum):
    """Whether a collision started or stopped."""

    STARTED = "started"
    STOPPED = "stopped"


@dataclass(frozen=True)
class CollisionEvent:
    """An event fired when the collision state between two entities changed."""

    kind: CollisionEventKind
    data1: CollisionData
    data2: CollisionData

    @classmethod
    def started(cls, data1: CollisionData, data2: CollisionData) -> CollisionEvent:
        """The two entities started to collide."""
        return cls(CollisionEventKind.STARTED, data1, data2)

    @classmethod
    def stopped(cls, data1: CollisionData, data2: CollisionData) -> CollisionEvent:
        """The two entities no longer collide."""
        return cls(CollisionEventKind.STOPPED, data1, data2)

    def is_started(self) -> bool:
        return self.kind is CollisionEventKind.STARTED

    def is_stopped(self) -> bool:
        return self.kind is CollisionEventKind.STOPPED

    def data(self) -> tuple[CollisionData, CollisionData]:
        """The data of both entities."""
        return self.data1, self.data2

    def collision_shape_entities(self) -> tuple[Hashable, Hashable]:
        """The entities holding the collision shapes involved."""
        return self.data1.collision_shape_entity, self.data2.collision_shape_entity

    def rigid_body_entities(self) -> tuple[Hashable, Hashable]:
        """The entities holding the rigid bodies involved."""
        return self.data1.rigid_body_entity, self.data2.rigid_body_entity

    def collision_layers(self) -> tuple[CollisionLayers, CollisionLayers]:
        """The collision layers of both shapes."""
        return self.data1.collision_layers, self.data2.collision_layers