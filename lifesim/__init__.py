"""Life-style cellular automaton simulation.

This package provides the simulation core behind an interactive Game of Life
front end: grid construction (optionally seeded), synchronous rule
application, incremental live/dead statistics and tick-driven stepping.

Getting started:
    from lifesim import SimulationEngine, generate_map_from_seed

    grid = generate_map_from_seed(32, 32, seed=42, living_probability=0.3)
    engine = SimulationEngine()
    engine.initialize(grid)
    engine.step()
"""

from lifesim.core.bounds import BoundingBox
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
from lifesim.core.simulation_engine import SimulationEngine
from lifesim.core.speed import SimulationSpeed, step_interval
from lifesim.core.state import SimulationState, SimulationStats
from lifesim.session import SimulationSession
from lifesim.utils.config_loader import SimulationConfig, get_config, load_config

__all__ = [
    # Core
    "Cell",
    "Grid",
    "MapGenerator",
    "generate_map",
    "generate_map_from_seed",
    "SimulationEngine",
    "SimulationState",
    "SimulationStats",
    "BoundingBox",
    # Timing
    "Clock",
    "StepTimer",
    "SimulationSpeed",
    "step_interval",
    # Session and configuration
    "SimulationSession",
    "SimulationConfig",
    "get_config",
    "load_config",
    # Errors
    "SimulatorError",
    "ConfigurationError",
    "EngineNotInitializedError",
    "GridBoundsError",
]
