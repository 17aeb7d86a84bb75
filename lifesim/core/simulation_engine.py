"""Simulation engine: rule application and incremental bookkeeping."""

from __future__ import annotations

import logging
from typing import List, Optional

from typing_extensions import override

from lifesim.core.bounds import BoundingBox, LiveRegionTracker
from lifesim.core.exceptions import EngineNotInitializedError
from lifesim.core.grid import Grid
from lifesim.core.rules import should_toggle
from lifesim.core.state import SimulationState, SimulationStats
from lifesim.interfaces.engine import (
    ISimulationEngine,
    SimulationChanged,
    SimulationInitialized,
    SimulationListener,
)

logger = logging.getLogger(__name__)


class SimulationEngine(ISimulationEngine):
    """Owns a grid and advances it one synchronous generation at a time.

    The engine subscribes to every cell of the bound grid and keeps a mirror
    of their states. Each notification that actually changes a cell adjusts
    the living/dead counters by one, so a step costs O(flips) in bookkeeping
    instead of a full rescan. recount() provides the full-scan figures for
    verification.

    Attributes:
        _states: Mirror of cell states in the grid's flat index order; doubles
            as the pre-step snapshot the rule is evaluated against.
        _stepping: True while a step is applying its flips, so per-cell
            notifications do not each publish a change event.
    """

    def __init__(self, track_bounds: bool = False):
        self._grid: Optional[Grid] = None
        self._states: List[bool] = []
        self._living_cell_count = 0
        self._step_count = 0
        self._running = False
        self._stepping = False
        self._track_bounds = track_bounds
        self._tracker: Optional[LiveRegionTracker] = None
        self._listeners: List[SimulationListener] = []

    # ==========================================================
    # Accessors
    # ==========================================================

    @property
    @override
    def is_initialized(self) -> bool:
        return self._grid is not None

    @property
    @override
    def is_running(self) -> bool:
        return self._running

    @property
    @override
    def grid(self) -> Grid:
        return self._require_grid("access the grid")

    @property
    def total_cell_count(self) -> int:
        return len(self._states)

    @property
    def living_cell_count(self) -> int:
        return self._living_cell_count

    @property
    def dead_cell_count(self) -> int:
        return len(self._states) - self._living_cell_count

    @property
    def step_count(self) -> int:
        return self._step_count

    @property
    @override
    def stats(self) -> SimulationStats:
        self._require_grid("read statistics")
        return SimulationStats(
            total_cell_count=len(self._states),
            living_cell_count=self._living_cell_count,
            step_count=self._step_count,
        )

    @property
    @override
    def state(self) -> SimulationState:
        return SimulationState(is_running=self._running, stats=self.stats)

    @property
    def bounding_box(self) -> Optional[BoundingBox]:
        """Box around the living cells, or None if tracking is off or all are dead."""
        if self._tracker is None:
            return None
        return self._tracker.bounding_box

    def recount(self) -> SimulationStats:
        """Recompute the counters from the grid by full scan."""
        grid = self._require_grid("recount")
        return SimulationStats.from_grid(grid, step_count=self._step_count)

    # ==========================================================
    # Listener registry
    # ==========================================================

    @override
    def subscribe(self, listener: SimulationListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    @override
    def unsubscribe(self, listener: SimulationListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, hook: str, event: object) -> None:
        for listener in list(self._listeners):
            handler = getattr(listener, hook, None)
            if callable(handler):
                handler(event)

    def _publish_changed(self) -> None:
        self._notify(
            "on_simulation_changed",
            SimulationChanged(
                dead_cell_count=self.dead_cell_count,
                living_cell_count=self._living_cell_count,
                step_count=self._step_count,
                is_running=self._running,
            ),
        )

    # ==========================================================
    # Lifecycle
    # ==========================================================

    @override
    def initialize(self, grid: Grid) -> None:
        """Bind grid, count its living cells and reset the step counter."""
        self._detach()

        self._grid = grid
        self._states = grid.states()
        self._living_cell_count = sum(self._states)
        self._step_count = 0
        self._running = False
        self._tracker = None
        if self._track_bounds:
            self._tracker = LiveRegionTracker(grid.width, grid.height)
            for cell in grid:
                if cell.alive:
                    self._tracker.record(cell.x, cell.y, True)

        for cell in grid:
            cell.subscribe(self._on_cell_state_changed)

        logger.debug(
            "Simulation initialized: %d cells, %d living",
            len(self._states),
            self._living_cell_count,
        )
        self._notify(
            "on_simulation_initialized",
            SimulationInitialized(
                total_cell_count=len(self._states),
                dead_cell_count=self.dead_cell_count,
                living_cell_count=self._living_cell_count,
                step_count=self._step_count,
            ),
        )

    @override
    def start(self) -> None:
        self._require_grid("start")
        self._running = True
        self._publish_changed()

    @override
    def pause(self) -> None:
        self._require_grid("pause")
        self._running = False
        self._publish_changed()

    @override
    def reset(self, grid: Grid) -> None:
        if self._grid is not None:
            self.pause()
        self.initialize(grid)

    @override
    def step(self) -> bool:
        """Compute the next generation.

        Returns:
            True if a generation was computed, False if the grid had no
            living cells (the engine is paused in that case).

        Raises:
            EngineNotInitializedError: If no grid has been bound.
        """
        grid = self._require_grid("step")

        if self._living_cell_count == 0:
            logger.info(
                "Simulation step not completed as there aren't any living cells"
            )
            if self._running:
                self._running = False
                self._publish_changed()
            return False

        # Every decision reads the pre-step mirror; flips are applied afterwards
        states = self._states
        neighbor_table = grid.neighbor_indices()
        to_toggle = [
            index
            for index, alive in enumerate(states)
            if should_toggle(alive, sum(states[n] for n in neighbor_table[index]))
        ]

        cells = grid.cells
        self._stepping = True
        try:
            for index in to_toggle:
                cells[index].toggle_state()
        finally:
            self._stepping = False

        self._step_count += 1
        logger.debug(
            "Simulation step %d: %d flips, %d living",
            self._step_count,
            len(to_toggle),
            self._living_cell_count,
        )
        self._publish_changed()
        return True

    # ==========================================================
    # Cell notifications
    # ==========================================================

    def _on_cell_state_changed(self, alive: bool, x: int, y: int) -> None:
        assert self._grid is not None
        index = self._grid.index_of(x, y)
        if self._states[index] == alive:
            return

        self._states[index] = alive
        self._living_cell_count += 1 if alive else -1
        if self._tracker is not None:
            self._tracker.record(x, y, alive)

        if not self._stepping:
            self._publish_changed()

    # ==========================================================
    # Helpers
    # ==========================================================

    def _detach(self) -> None:
        if self._grid is None:
            return
        for cell in self._grid:
            cell.unsubscribe(self._on_cell_state_changed)
        self._grid = None

    def _require_grid(self, operation: str) -> Grid:
        if self._grid is None:
            raise EngineNotInitializedError(operation)
        return self._grid
