import pytest

from heron.constraints import RotationConstraints


def axes(c):
    return (c.allow_x, c.allow_y, c.allow_z)


def test_default_allows_everything():
    assert RotationConstraints() == RotationConstraints.allow()
    assert all(axes(RotationConstraints()))


def test_lock_forbids_everything():
    locked = RotationConstraints.lock()
    assert locked == RotationConstraints(allow_x=False, allow_y=False, allow_z=False)
    assert locked != RotationConstraints.allow()


@pytest.mark.parametrize(
    "builder, allowed_index",
    [
        (RotationConstraints.restrict_to_x_only, 0),
        (RotationConstraints.restrict_to_y_only, 1),
        (RotationConstraints.restrict_to_z_only, 2),
    ],
)
def test_restrict_to_single_axis(builder, allowed_index):
    flags = axes(builder())
    assert flags[allowed_index] is True
    assert sum(flags) == 1


def test_fields_can_be_changed():
    constraints = RotationConstraints.lock()
    constraints.allow_y = True
    assert constraints == RotationConstraints.restrict_to_y_only()