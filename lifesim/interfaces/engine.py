"""Simulation engine interface and the events it publishes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from lifesim.core.grid import Grid
    from lifesim.core.state import SimulationState, SimulationStats


@dataclass(frozen=True)
class SimulationInitialized:
    """Published once a grid has been bound to the engine."""

    total_cell_count: int
    dead_cell_count: int
    living_cell_count: int
    step_count: int


@dataclass(frozen=True)
class SimulationChanged:
    """Published after start, pause, every step and every external flip."""

    dead_cell_count: int
    living_cell_count: int
    step_count: int
    is_running: bool


class SimulationListener(Protocol):
    """Receiver of engine events.

    Listeners may implement either hook; missing hooks are skipped.
    """

    def on_simulation_initialized(self, event: SimulationInitialized) -> None:
        ...

    def on_simulation_changed(self, event: SimulationChanged) -> None:
        ...


class ISimulationEngine(ABC):
    """Rule engine contract consumed by sessions and presentation layers."""

    @property
    @abstractmethod
    def is_initialized(self) -> bool:
        """True once a grid has been bound."""
        ...

    @property
    @abstractmethod
    def is_running(self) -> bool:
        """True while the engine should be stepped by its timer."""
        ...

    @property
    @abstractmethod
    def grid(self) -> "Grid":
        """The bound grid."""
        ...

    @property
    @abstractmethod
    def stats(self) -> "SimulationStats":
        """Point-in-time counters."""
        ...

    @property
    @abstractmethod
    def state(self) -> "SimulationState":
        """Run flag plus counters."""
        ...

    @abstractmethod
    def subscribe(self, listener: SimulationListener) -> None:
        """Register a listener for engine events."""
        ...

    @abstractmethod
    def unsubscribe(self, listener: SimulationListener) -> None:
        """Remove a previously registered listener."""
        ...

    @abstractmethod
    def initialize(self, grid: "Grid") -> None:
        """Bind a grid and reset counters."""
        ...

    @abstractmethod
    def start(self) -> None:
        """Mark the simulation as running."""
        ...

    @abstractmethod
    def pause(self) -> None:
        """Mark the simulation as paused."""
        ...

    @abstractmethod
    def step(self) -> bool:
        """Advance one generation. Returns False when nothing was computed."""
        ...

    @abstractmethod
    def reset(self, grid: "Grid") -> None:
        """Pause and re-initialize with a fresh grid."""
        ...
