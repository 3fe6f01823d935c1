"""Control of how often physics steps run and how far each one advances."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from datetime import timedelta
from typing import Union

DurationLike = Union[timedelta, int, float]

DEFAULT_MAX_DELTA_TIME = timedelta(seconds=0.2)


def _to_timedelta(value: DurationLike) -> timedelta:
    if isinstance(value, timedelta):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return timedelta(seconds=value)
    raise TypeError(f"expected a timedelta or a number of seconds, got {type(value).__name__}")


def _positive_duration(value: DurationLike) -> timedelta:
    duration = _to_timedelta(value)
    if duration <= timedelta(0):
        raise ValueError(f"Invalid duration: {duration!r}")
    return duration


@dataclass(frozen=True)
class PhysicsStepDuration:
    """How far a physics step advances the simulation time."""

    class Kind(enum.Enum):
        EXACT = "exact"
        MAX_DELTA_TIME = "max_delta_time"

    kind: PhysicsStepDuration.Kind
    duration: timedelta

    def exact(self, delta_time: DurationLike) -> timedelta:
        """The duration of this step given the frame's delta time."""
        if self.kind is PhysicsStepDuration.Kind.EXACT:
            return self.duration
        return min(_to_timedelta(delta_time), self.duration)


class _Mode(enum.Enum):
    MAX_DELTA_TIME = "max_delta_time"
    EVERY_FRAME = "every_frame"
    TIMER = "timer"


@dataclass
class _RepeatingTimer:
    duration: timedelta
    elapsed: timedelta = timedelta(0)
    times_finished: int = 0

    def tick(self, delta: timedelta) -> None:
        self.elapsed += delta
        if self.elapsed >= self.duration:
            self.times_finished = self.elapsed // self.duration
            self.elapsed -= self.duration * self.times_finished
        else:
            self.times_finished = 0

    @property
    def just_finished(self) -> bool:
        return self.times_finished > 0


class PhysicsSteps:
    """Resource controlling how many physics steps are performed.

    A physics update runs at most once per frame. This tunes precision and
    cost; it does not change the speed of the simulation. By default a step
    runs every frame, advancing by the frame time capped at 0.2 seconds.
    """

    __slots__ = ("_mode", "_duration", "_timer")

    def __init__(self) -> None:
        self._mode = _Mode.MAX_DELTA_TIME
        self._duration = DEFAULT_MAX_DELTA_TIME
        self._timer: _RepeatingTimer | None = None

    @classmethod
    def _with_mode(cls, mode: _Mode, duration: timedelta) -> PhysicsSteps:
        steps = cls()
        steps._mode = mode
        steps._duration = duration
        steps._timer = _RepeatingTimer(duration) if mode is _Mode.TIMER else None
        return steps

    @classmethod
    def from_steps_per_seconds(cls, steps_per_second: float) -> PhysicsSteps:
        """Run at the given number of steps per second.

        Raises ValueError if the rate is NaN, infinite, zero or negative.
        """
        if not (math.isfinite(steps_per_second) and steps_per_second > 0.0):
            raise ValueError(f"Invalid steps per second: {steps_per_second}")
        return cls._with_mode(_Mode.TIMER, timedelta(seconds=1.0 / steps_per_second))

    @classmethod
    def from_delta_time(cls, duration: DurationLike) -> PhysicsSteps:
        """Wait for the given duration between steps. Raises ValueError if not positive."""
        return cls._with_mode(_Mode.TIMER, _positive_duration(duration))

    @classmethod
    def every_frame(cls, duration: DurationLike) -> PhysicsSteps:
        """Step every frame, always advancing by ``duration``. Meant for testing."""
        return cls._with_mode(_Mode.EVERY_FRAME, _positive_duration(duration))

    @classmethod
    def from_max_delta_time(cls, max_delta: DurationLike) -> PhysicsSteps:
        """Step every frame by the frame time, capped at ``max_delta``."""
        return cls._with_mode(_Mode.MAX_DELTA_TIME, _to_timedelta(max_delta))

    def is_step_frame(self) -> bool:
        """True if the current frame performs a physics step."""
        if self._timer is not None:
            return self._timer.just_finished
        return True

    def duration(self) -> PhysicsStepDuration:
        """Time that elapses in each physics step."""
        if self._mode is _Mode.MAX_DELTA_TIME:
            return PhysicsStepDuration(PhysicsStepDuration.Kind.MAX_DELTA_TIME, self._duration)
        return PhysicsStepDuration(PhysicsStepDuration.Kind.EXACT, self._duration)

    def update(self, delta: DurationLike) -> None:
        """Advance by one frame of ``delta`` time."""
        if self._timer is not None:
            self._timer.tick(_to_timedelta(delta))

    def __repr__(self) -> str:
        return f"PhysicsSteps(mode={self._mode.value}, duration={self._duration!r})"