import pytest

from heron.physics_time import PhysicsTime
from heron.shapes import (
    Capsule,
    CollisionShape,
    Cone,
    ConvexHull,
    Cuboid,
    Cylinder,
    HeightField,
    PhysicMaterial,
    RigidBody,
    SensorShape,
    Sphere,
    should_run,
)
from heron.step import PhysicsSteps
from heron.vecmath import Vec2, Vec3


def test_default_sphere_has_unit_radius():
    assert Sphere().radius == 1.0


@pytest.mark.parametrize(
    "factory",
    [
        lambda: Sphere(2.0),
        lambda: Capsule(half_segment=1.0, radius=0.5),
        lambda: Cuboid(Vec3(1.0, 2.0, 3.0)),
        lambda: ConvexHull([Vec3(0.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0)]),
        lambda: HeightField(Vec2(2.0, 2.0), [[0.0, 1.0], [1.0, 0.0]]),
        lambda: Cone(half_height=2.0, radius=1.0),
        lambda: Cylinder(half_height=1.0, radius=0.5),
    ],
)
def test_every_shape_is_a_collision_shape(factory):
    shape = factory()
    assert isinstance(shape, CollisionShape)
    assert shape == factory()
    assert shape != Sphere(99.0)


def test_cuboid_border_radius_defaults_to_none():
    cuboid = Cuboid(Vec3(0.5, 0.5, 0.5))
    assert cuboid.border_radius is None
    assert Cuboid(Vec3(0.3, 0.3, 0.3), 0.3).border_radius == 0.3


def test_convex_hull_points_become_tuple():
    points = [Vec3(-1.0, -1.0, 0.0), Vec3(1.0, -1.0, 0.0), Vec3(0.0, 1.0, 0.0)]
    hull = ConvexHull(points)
    assert hull.points == tuple(points)
    points.append(Vec3(5.0, 5.0, 0.0))
    assert len(hull.points) == 3


def test_height_field_rows_become_tuples():
    field = HeightField(Vec2(700.0, 0.0), [[50.0, 0.0, 10.0]])
    assert field.heights == ((50.0, 0.0, 10.0),)
    assert field == HeightField(Vec2(700.0, 0.0), [(50.0, 0.0, 10.0)])


@pytest.mark.parametrize(
    "body, expected",
    [
        (RigidBody.DYNAMIC, True),
        (RigidBody.KINEMATIC_VELOCITY_BASED, True),
        (RigidBody.STATIC, False),
        (RigidBody.SENSOR, False),
        (RigidBody.KINEMATIC_POSITION_BASED, False),
    ],
)
def test_can_have_velocity(body, expected):
    assert body.can_have_velocity() is expected


def test_sensor_shapes_are_equal():
    sensor = SensorShape()
    other = SensorShape()
    assert sensor == other
    assert not (sensor != other)


def test_physic_material_defaults():
    material = PhysicMaterial()
    assert material.restitution == PhysicMaterial.PERFECTLY_INELASTIC_RESTITUTION
    assert material.density == 1.0
    assert material.friction == 0.0


def test_physic_material_constants_order():
    assert (
        PhysicMaterial.PERFECTLY_INELASTIC_RESTITUTION
        < PhysicMaterial.PERFECTLY_ELASTIC_RESTITUTION
    )
    assert PhysicMaterial(restitution=0.7).restitution == 0.7


def test_should_run_every_frame_with_positive_scale():
    steps = PhysicsSteps.every_frame(1.0)
    assert should_run(steps, PhysicsTime(1.0)) is True


def test_should_not_run_when_paused():
    time = PhysicsTime(1.0)
    time.pause()
    assert should_run(PhysicsSteps.every_frame(1.0), time) is False


def test_should_not_run_with_zero_scale():
    assert should_run(PhysicsSteps(), PhysicsTime(0.0)) is False


def test_should_run_follows_timer():
    steps = PhysicsSteps.from_delta_time(1.0)
    steps.update(0.9)
    assert should_run(steps, PhysicsTime(1.0)) is False
    steps.update(0.2)
    assert should_run(steps, PhysicsTime(1.0)) is True