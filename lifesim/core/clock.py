"""Clock and step timer for tick-driven simulation."""

from __future__ import annotations

from typing import List

from lifesim.core.speed import DEFAULT_SPEED, SimulationSpeed, step_interval
from lifesim.interfaces.clock import ClockSubscriber, IClock
from lifesim.interfaces.engine import ISimulationEngine


def _validate_elapsed(elapsed: float) -> None:
    if elapsed < 0:
        raise ValueError("elapsed must be >= 0")


class Clock(IClock):
    """Simple pub/sub clock that notifies subscribers on tick()."""

    def __init__(self) -> None:
        self._tick_count = 0
        self._elapsed = 0.0
        self._subscribers: List[ClockSubscriber] = []

    @property
    def tick_count(self) -> int:
        return self._tick_count

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def subscribe(self, subscriber: ClockSubscriber) -> None:
        if subscriber not in self._subscribers:
            self._subscribers.append(subscriber)

    def unsubscribe(self, subscriber: ClockSubscriber) -> None:
        if subscriber in self._subscribers:
            self._subscribers.remove(subscriber)

    def tick(self, elapsed: float) -> None:
        _validate_elapsed(elapsed)
        if elapsed == 0:
            return

        self._tick_count += 1
        self._elapsed += elapsed

        for subscriber in list(self._subscribers):
            subscriber.tick(elapsed)

    def reset(self) -> None:
        self._tick_count = 0
        self._elapsed = 0.0


class StepTimer:
    """Steps an engine at a fixed interval while it is running.

    Each tick subtracts the elapsed time from a countdown; when the countdown
    reaches zero or below the engine is stepped once and the countdown is
    reset to the full interval. Surplus time is not carried over, so a long
    tick yields at most one step.
    """

    def __init__(
        self, engine: ISimulationEngine, speed: SimulationSpeed = DEFAULT_SPEED
    ):
        self._engine = engine
        self._speed = SimulationSpeed(speed)
        self._interval = step_interval(self._speed)
        self._remaining = self._interval

    @property
    def speed(self) -> SimulationSpeed:
        return self._speed

    @speed.setter
    def speed(self, speed: SimulationSpeed) -> None:
        self._speed = SimulationSpeed(speed)
        self._interval = step_interval(self._speed)
        self.reset()

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def remaining(self) -> float:
        return self._remaining

    def reset(self) -> None:
        self._remaining = self._interval

    def tick(self, elapsed: float) -> None:
        _validate_elapsed(elapsed)
        if not self._engine.is_running:
            return

        self._remaining -= elapsed
        if self._remaining <= 0:
            self._engine.step()
            self.reset()
