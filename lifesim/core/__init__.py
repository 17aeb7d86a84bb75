"""Core modules for the simulation.

Core infrastructure for the rule engine:
- cell: binary-state unit with change notification
- grid: flat cell buffer with clipped neighbor lookup
- map_generator: empty and seeded grid construction
- rules: survival/birth rule evaluation
- simulation_engine: state machine, stepping and incremental counters
- bounds: live-region bounding box tracking
- speed, clock: step interval policy and tick-driven step timer
"""

from lifesim.core.bounds import BoundingBox, LiveRegionTracker
from lifesim.core.cell import Cell
from lifesim.core.clock import Clock, StepTimer
from lifesim.core.exceptions import (
    ConfigurationError,
    EngineNotInitializedError,
    GridBoundsError,
    SimulatorError,
)
from lifesim.core.grid import Grid
from lifesim.core.map_generator import (
    MapGenerator,
    generate_map,
    generate_map_from_seed,
)
from lifesim.core.rules import next_state, should_toggle
from lifesim.core.simulation_engine import SimulationEngine
from lifesim.core.speed import STEP_INTERVALS, SimulationSpeed, step_interval
from lifesim.core.state import SimulationState, SimulationStats

__all__ = [
    # Grid model
    "Cell",
    "Grid",
    "MapGenerator",
    "generate_map",
    "generate_map_from_seed",
    # Rules and engine
    "next_state",
    "should_toggle",
    "SimulationEngine",
    "SimulationState",
    "SimulationStats",
    "BoundingBox",
    "LiveRegionTracker",
    # Timing
    "Clock",
    "StepTimer",
    "SimulationSpeed",
    "STEP_INTERVALS",
    "step_interval",
    # Errors
    "SimulatorError",
    "ConfigurationError",
    "EngineNotInitializedError",
    "GridBoundsError",
]
