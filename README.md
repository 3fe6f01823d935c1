# heron

Building blocks for a rigid-body physics setup: collision layers, collision
shapes, rigid-body kinds, velocities and accelerations, gravity, time scaling,
physics step scheduling, collision events, and 3D debug wireframes.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `heron.vecmath`: immutable `Vec2`, `Vec3` and `Quat` types, and `is_near_zero`.
- `heron.layers`: `PhysicsLayer` and `CollisionLayers`.
- `heron.shapes`: collision shapes (`Sphere`, `Capsule`, `Cuboid`, `ConvexHull`,
  `HeightField`, `Cone`, `Cylinder`), `RigidBody`, `SensorShape`,
  `PhysicMaterial`, `PhysicsSystem` and `should_run`.
- `heron.velocity`: `AxisAngle`, `Velocity` and `Acceleration`.
- `heron.gravity`: `Gravity`.
- `heron.constraints`: `RotationConstraints`.
- `heron.physics_time`: `PhysicsTime`.
- `heron.step`: `PhysicsSteps` and `PhysicsStepDuration`.
- `heron.events`: `CollisionData`, `CollisionEventKind` and `CollisionEvent`.
- `heron.debug_color`: `Color`, `DebugColor` and `is_near`.
- `heron.wireframe`: `DebugLines`, `Line` and the `add_*` outline functions.

## Collision layers

Define layers by subclassing `PhysicsLayer`. Each member gets its own bit, in
the order it is declared (the first is `1`, the second `2`, and so on), and
there can be at most 32 members. Members need distinct values.

```python
import enum
from heron.layers import PhysicsLayer, CollisionLayers

class Layer(PhysicsLayer):
    WORLD = enum.auto()
    PLAYER = enum.auto()
    ENEMY = enum.auto()

player = CollisionLayers.new(Layer.PLAYER, Layer.WORLD)
ground = CollisionLayers.none().with_group(Layer.WORLD).with_masks([Layer.PLAYER, Layer.ENEMY])

assert player.interacts_with(ground)
assert player.contains_group(Layer.PLAYER)
assert Layer.all_bits() == 0b111
```

Two layer sets interact only when each one's groups overlap the other's masks.
`CollisionLayers()` has every bit set, so it interacts with everything.
`CollisionLayers.none()` interacts with nothing. `CollisionLayers.all(Layer)`
holds every layer of the given enum.

## Bodies, shapes and materials

```python
from heron.shapes import Cuboid, Sphere, RigidBody, PhysicMaterial
from heron.vecmath import Vec3

ground = Cuboid(half_extends=Vec3(500.0, 25.0, 0.0))
ball = Sphere(radius=15.0)
bouncy = PhysicMaterial(restitution=0.7)

assert RigidBody.DYNAMIC.can_have_velocity()
assert not RigidBody.STATIC.can_have_velocity()
```

`RotationConstraints.lock()`, `allow()` and `restrict_to_x_only()` (and the `y`
and `z` variants) describe which axes forces may rotate a body around.

## Motion

```python
import math
from heron.velocity import Velocity, AxisAngle
from heron.gravity import Gravity
from heron.vecmath import Vec2, Vec3

gravity = Gravity.from_vector(Vec2(0.0, -600.0))
velocity = Velocity.from_linear(Vec3(300.0, 0.0, 0.0)).with_angular(
    AxisAngle.new(Vec3(0.0, 0.0, 1.0), -math.pi)
)
```

`AxisAngle` converts to and from a `Quat` with `to_quat()` and `from_quat()`.
`AxisAngle.new` and `Vec3.normalize` raise `ValueError` for a zero-length axis.

## Time and steps

```python
from datetime import timedelta
from heron.physics_time import PhysicsTime
from heron.step import PhysicsSteps
from heron.shapes import should_run

time = PhysicsTime(0.5)
time.pause()   # the scale drops to 0
time.resume()  # the scale goes back to 0.5
assert time.scale == 0.5

steps = PhysicsSteps.from_steps_per_seconds(10.0)
steps.update(timedelta(seconds=0.11))
assert steps.is_step_frame()
assert should_run(steps, time)
```

Durations may be given as a `timedelta` or a number of seconds. By default
`PhysicsSteps()` steps every frame, advancing by the frame time capped at 0.2
seconds. A negative time scale, or a step rate or duration that is not positive,
raises `ValueError`.

## Collision events

`CollisionEvent.started(...)` and `CollisionEvent.stopped(...)` each hold a pair
of `CollisionData` records. Use `rigid_body_entities()`,
`collision_shape_entities()` and `collision_layers()` to read both sides at once,
and `is_started()` / `is_stopped()` to tell them apart.

## Debug wireframes

`heron.wireframe` turns 3D shapes into coloured line segments collected in a
`DebugLines` buffer. `heron.debug_color.DebugColor` picks a colour from the kind
of rigid body. Shapes it cannot outline are logged as a warning.

```python
from heron.wireframe import DebugLines, add_shape_outline
from heron.debug_color import DebugColor
from heron.shapes import Sphere, RigidBody
from heron.vecmath import Vec3, Quat

lines = DebugLines()
color = DebugColor.for_3d().for_collider_type(RigidBody.DYNAMIC, False)
add_shape_outline(Sphere(radius=1.0), Vec3(0.0, 0.0, 0.0), Quat(), color, lines)
assert len(lines) > 0
```

## What this package does not do

It holds the data and bookkeeping around a physics simulation, not the
simulation itself: there is no physics world that moves bodies, resolves
contacts, produces collision events or answers ray and shape casts. The debug
support produces line segments for 3D shapes only; it does not draw them on
screen and has no filled 2D rendering.