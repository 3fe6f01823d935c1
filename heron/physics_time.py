"""Time scale of the physics simulation."""

from __future__ import annotations


def _check_scale(scale: float) -> float:
    if not scale >= 0.0:
        raise ValueError(f"Negative scale: {scale}")
    return float(scale)


class PhysicsTime:
    """Resource controlling the physics time scale.

    A scale of zero pauses the simulation. The scale must never be negative.
    """

    __slots__ = ("_scale", "_previous_scale")

    def __init__(self, scale: float = 1.0) -> None:
        self._scale = _check_scale(scale)
        self._previous_scale: float | None = None

    @property
    def scale(self) -> float:
        """The physics time scale."""
        return self._scale

    @scale.setter
    def scale(self, value: float) -> None:
        self._scale = _check_scale(value)

    def pause(self) -> None:
        """Pause the simulation, remembering the current scale."""
        self._previous_scale = self._scale
        self._scale = 0.0

    def resume(self) -> None:
        """Restore the scale in use before the last pause."""
        if self._previous_scale is not None:
            self._scale = self._previous_scale
            self._previous_scale = None

    def __repr__(self) -> str:
        return f"PhysicsTime(scale={self._scale!r})"