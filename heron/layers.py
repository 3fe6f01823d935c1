"""Collision layers: groups and masks deciding which shapes interact."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Iterable

_ALL_BITS = 0xFFFF_FFFF
MAX_LAYERS = 32


class PhysicsLayer(enum.Enum):
    """Base class for an enum describing collision layers.

    Each member gets a bit according to its position in the enum: the first
    member is ``1``, the second ``2``, the third ``4`` and so on. At most 32
    members are supported.
    """

    @classmethod
    def _members(cls) -> list[PhysicsLayer]:
        members = list(cls)
        if len(members) > MAX_LAYERS:
            raise ValueError(f"Reached the maximum of {MAX_LAYERS} layers")
        return members

    def to_bits(self) -> int:
        """Return the bit of this layer."""
        return 1 << type(self)._members().index(self)

    @classmethod
    def all_bits(cls) -> int:
        """Return the bits of every layer of the enum."""
        count = len(cls._members())
        return _ALL_BITS if count == MAX_LAYERS else (1 << count) - 1


@dataclass(frozen=True)
class CollisionLayers:
    """The groups a collision shape belongs to and the masks it collides with.

    Two shapes A and B interact if and only if a group of A is in the masks of
    B and a group of B is in the masks of A. The default contains every layer
    in both groups and masks.
    """

    groups: int = _ALL_BITS
    masks: int = _ALL_BITS

    def __post_init__(self) -> None:
        object.__setattr__(self, "groups", self.groups & _ALL_BITS)
        object.__setattr__(self, "masks", self.masks & _ALL_BITS)

    @classmethod
    def new(cls, group, mask) -> CollisionLayers:
        """Layers with a single group and a single mask."""
        return cls.from_bits(group.to_bits(), mask.to_bits())

    @classmethod
    def all(cls, layer_type) -> CollisionLayers:
        """Every layer of ``layer_type`` in both groups and masks."""
        bits = layer_type.all_bits()
        return cls.from_bits(bits, bits)

    @classmethod
    def none(cls) -> CollisionLayers:
        """No layer at all: interacts with nothing."""
        return cls.from_bits(0, 0)

    @classmethod
    def from_bits(cls, groups: int, masks: int) -> CollisionLayers:
        return cls(groups=groups, masks=masks)

    def interacts_with(self, other: CollisionLayers) -> bool:
        return (self.groups & other.masks) != 0 and (other.groups & self.masks) != 0

    def contains_group(self, layer) -> bool:
        return (self.groups & layer.to_bits()) != 0

    def with_group(self, layer) -> CollisionLayers:
        return replace(self, groups=self.groups | layer.to_bits())

    def with_groups(self, layers: Iterable) -> CollisionLayers:
        groups = self.groups
        for layer in layers:
            groups |= layer.to_bits()
        return replace(self, groups=groups)

    def without_group(self, layer) -> CollisionLayers:
        return replace(self, groups=self.groups & ~layer.to_bits())

    def contains_mask(self, layer) -> bool:
        return (self.masks & layer.to_bits()) != 0

    def with_mask(self, layer) -> CollisionLayers:
        return replace(self, masks=self.masks | layer.to_bits())

    def with_masks(self, layers: Iterable) -> CollisionLayers:
        masks = self.masks
        for layer in layers:
            masks |= layer.to_bits()
        return replace(self, masks=masks)

    def without_mask(self, layer) -> CollisionLayers:
        return replace(self, masks=self.masks & ~layer.to_bits())