import enum
import string

import pytest

from heron.layers import CollisionLayers, PhysicsLayer


class SampleLayer(PhysicsLayer):
    ONE = enum.auto()
    TWO = enum.auto()


class MyLayer(PhysicsLayer):
    WORLD = enum.auto()
    PLAYER = enum.auto()
    ENEMIES = enum.auto()


MaxLayerCount = PhysicsLayer(
    "MaxLayerCount",
    list(string.ascii_uppercase) + ["AA", "AB", "AC", "AD", "AE", "AF"],
)

TooManyLayers = PhysicsLayer("TooManyLayers", [f"L{i}" for i in range(33)])


def test_sample_layer_bits():
    assert SampleLayer.ONE.to_bits() == 1
    assert SampleLayer.TWO.to_bits() == 2
    assert SampleLayer.all_bits() == 3
    assert CollisionLayers.new(SampleLayer.ONE, SampleLayer.TWO) == CollisionLayers.from_bits(1, 2)
    assert CollisionLayers.all(SampleLayer) == CollisionLayers.from_bits(3, 3)


def test_all_interacts_with_all():
    assert CollisionLayers.all(SampleLayer).interacts_with(CollisionLayers.all(SampleLayer))


@pytest.mark.parametrize(
    "other",
    [
        CollisionLayers.all(SampleLayer),
        CollisionLayers.none(),
        CollisionLayers.none().with_group(SampleLayer.ONE).with_group(SampleLayer.TWO),
        CollisionLayers.all(SampleLayer)
        .without_group(SampleLayer.ONE)
        .without_group(SampleLayer.TWO),
    ],
)
def test_none_does_not_interact_with_anything(other):
    assert not CollisionLayers.none().interacts_with(other)
    assert not other.interacts_with(CollisionLayers.none())


def test_with_layer_adds_interaction():
    c1 = CollisionLayers.none().with_group(SampleLayer.ONE).with_mask(SampleLayer.TWO)
    c2 = CollisionLayers.none().with_group(SampleLayer.TWO).with_mask(SampleLayer.ONE)
    assert c1.interacts_with(c2)
    assert c2.interacts_with(c1)
    assert not c1.interacts_with(c1)
    assert not c2.interacts_with(c2)


def test_without_layer_removes_interaction():
    c1 = (
        CollisionLayers.all(SampleLayer)
        .without_group(SampleLayer.ONE)
        .without_mask(SampleLayer.TWO)
    )
    c2 = (
        CollisionLayers.all(SampleLayer)
        .without_group(SampleLayer.TWO)
        .without_mask(SampleLayer.ONE)
    )
    assert c1.interacts_with(c2)
    assert c2.interacts_with(c1)
    assert not c1.interacts_with(c1)
    assert not c2.interacts_with(c2)


@pytest.mark.parametrize(
    "layer, expected_bits",
    [(MyLayer.WORLD, 1), (MyLayer.PLAYER, 2), (MyLayer.ENEMIES, 4)],
)
def test_returns_expected_bits(layer, expected_bits):
    assert layer.to_bits() == expected_bits
    assert CollisionLayers.new(layer, layer) == CollisionLayers.from_bits(
        expected_bits, expected_bits
    )


def test_returns_expected_all_bits_mask():
    assert MyLayer.all_bits() == 0b111
    assert CollisionLayers.all(MyLayer) == CollisionLayers.from_bits(0b111, 0b111)


def test_max_layers_bits():
    assert MaxLayerCount.all_bits() == 0xFFFFFFFF
    assert MaxLayerCount.AF.to_bits() == 1 << 31


def test_more_than_32_layers_rejected():
    with pytest.raises(ValueError):
        TooManyLayers.all_bits()
    with pytest.raises(ValueError):
        TooManyLayers.L0.to_bits()


def test_default_contains_everything():
    layers = CollisionLayers()
    assert layers.groups == 0xFFFFFFFF
    assert layers.masks == 0xFFFFFFFF
    assert layers.contains_group(MyLayer.PLAYER)
    assert layers.contains_mask(MyLayer.ENEMIES)


def test_new_sets_single_group_and_mask():
    layers = CollisionLayers.new(MyLayer.PLAYER, MyLayer.ENEMIES)
    assert layers.contains_group(MyLayer.PLAYER)
    assert not layers.contains_group(MyLayer.ENEMIES)
    assert layers.contains_mask(MyLayer.ENEMIES)
    assert not layers.contains_mask(MyLayer.PLAYER)


def test_with_groups_and_masks_accept_iterables():
    layers = (
        CollisionLayers.none()
        .with_groups([MyLayer.WORLD, MyLayer.PLAYER])
        .with_masks(iter([MyLayer.ENEMIES, MyLayer.WORLD]))
    )
    assert layers == CollisionLayers.from_bits(0b011, 0b101)


def test_without_keeps_bits_within_32():
    layers = CollisionLayers().without_group(MyLayer.WORLD).without_mask(MyLayer.ENEMIES)
    assert layers.groups == 0xFFFFFFFE
    assert layers.masks == 0xFFFFFFFB


def test_layers_are_immutable_values():
    base = CollisionLayers.none()
    changed = base.with_group(MyLayer.WORLD)
    assert base == CollisionLayers.none()
    assert changed.contains_group(MyLayer.WORLD)


def test_player_enemy_filtering():
    player = CollisionLayers.new(MyLayer.PLAYER, MyLayer.ENEMIES)
    enemy = CollisionLayers.new(MyLayer.ENEMIES, MyLayer.PLAYER)
    world = CollisionLayers.new(MyLayer.WORLD, MyLayer.WORLD)
    assert player.interacts_with(enemy)
    assert not player.interacts_with(world)
    assert not enemy.interacts_with(enemy)