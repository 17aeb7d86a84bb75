"""Snapshot types for simulation counters and run state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lifesim.core.grid import Grid


@dataclass(frozen=True)
class SimulationStats:
    """Counters derived from the grid plus the generation counter."""

    total_cell_count: int
    living_cell_count: int
    step_count: int = 0

    @property
    def dead_cell_count(self) -> int:
        return self.total_cell_count - self.living_cell_count

    @classmethod
    def from_grid(cls, grid: "Grid", step_count: int = 0) -> "SimulationStats":
        """Recompute the counters by scanning every cell."""
        return cls(
            total_cell_count=grid.size,
            living_cell_count=grid.living_count(),
            step_count=step_count,
        )


@dataclass(frozen=True)
class SimulationState:
    is_running: bool
    stats: SimulationStats
