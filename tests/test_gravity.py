import pytest

from heron.gravity import Gravity
from heron.vecmath import Vec2, Vec3


def test_default_is_zero():
    assert Gravity().vector == Vec3.ZERO


def test_from_vec3_keeps_vector():
    v = Vec3(0.0, -9.81, 0.0)
    assert Gravity.from_vector(v).vector == v


def test_from_vec2_extends_with_zero_z():
    g = Gravity.from_vector(Vec2(0.0, -600.0))
    assert g.vector == Vec2(0.0, -600.0).extend(0.0)
    assert g.vector.z == 0.0


def test_equality():
    assert Gravity.from_vector(Vec2(1.0, 2.0)) == Gravity(Vec3(1.0, 2.0, 0.0))


def test_rejects_other_types():
    with pytest.raises(TypeError):
        Gravity.from_vector((0.0, -9.81, 0.0))