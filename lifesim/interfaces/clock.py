"""Clock interface for simulation timing and pub/sub tick propagation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol


class ClockSubscriber(Protocol):
    """Anything that can advance on clock ticks."""

    def tick(self, elapsed: float) -> None:
        """Advance the subscriber by the given number of seconds."""
        ...


class IClock(ABC):
    """Clock interface used by the session and step timers."""

    @property
    @abstractmethod
    def tick_count(self) -> int:
        """Number of non-empty ticks delivered."""
        ...

    @property
    @abstractmethod
    def elapsed(self) -> float:
        """Total number of seconds elapsed."""
        ...

    @abstractmethod
    def subscribe(self, subscriber: ClockSubscriber) -> None:
        """Subscribe a component to clock ticks."""
        ...

    @abstractmethod
    def unsubscribe(self, subscriber: ClockSubscriber) -> None:
        """Unsubscribe a component from clock ticks."""
        ...

    @abstractmethod
    def tick(self, elapsed: float) -> None:
        """Advance the clock and notify subscribers."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Reset elapsed time and tick count to zero."""
        ...
