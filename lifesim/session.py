"""Session wiring map generation, the engine and the step timer together."""

from __future__ import annotations

import logging
from contextlib import nullcontext
from dataclasses import dataclass, field
from typing import ContextManager, Optional

from lifesim.core.clock import Clock, StepTimer
from lifesim.core.grid import Grid
from lifesim.core.map_generator import MapGenerator
from lifesim.core.simulation_engine import SimulationEngine
from lifesim.core.speed import SimulationSpeed
from lifesim.core.state import SimulationState
from lifesim.interfaces.cell import SeedSource
from lifesim.utils.config_loader import SimulationConfig, get_config
from lifesim.utils.rng import generate_random_seed

logger = logging.getLogger(__name__)


@dataclass
class ConfigSeedSource(SeedSource):
    """Seed source that serves the values from a loaded configuration."""

    config: SimulationConfig

    def get_random_seed_value(self) -> Optional[int]:
        return self.config.generation.seed

    def get_living_probability(self) -> float:
        return self.config.generation.living_probability


@dataclass
class SimulationSession:
    """Front-end facing controller for one simulation.

    Reads the seed and living probability from the seed source before every
    initialize, builds the grid and hands it to the engine. All engine calls
    go through the optional lock so multi-threaded hosts can serialize them;
    single-threaded hosts can leave it unset.
    """

    config: SimulationConfig = field(default_factory=get_config)
    seed_source: Optional[SeedSource] = None
    lock: ContextManager | None = None
    engine: SimulationEngine = field(init=False)
    clock: Clock = field(init=False)
    timer: StepTimer = field(init=False)
    generator: MapGenerator = field(init=False)

    def __post_init__(self) -> None:
        if self.lock is None:
            self.lock = nullcontext()
        if self.seed_source is None:
            self.seed_source = ConfigSeedSource(self.config)
        self.engine = SimulationEngine(track_bounds=self.config.tracking.bounding_box)
        self.generator = MapGenerator(self.config.grid.width, self.config.grid.height)
        self.timer = StepTimer(self.engine, self.config.timing.speed)
        self.clock = Clock()
        self.clock.subscribe(self.timer)

    @property
    def grid(self) -> Grid:
        return self.engine.grid

    @property
    def state(self) -> SimulationState:
        assert self.lock is not None
        with self.lock:
            return self.engine.state

    @property
    def speed(self) -> SimulationSpeed:
        return self.timer.speed

    @speed.setter
    def speed(self, speed: SimulationSpeed) -> None:
        assert self.lock is not None
        with self.lock:
            self.timer.speed = speed

    def generate_grid(self) -> Grid:
        """Build a grid from the seed source's current values.

        A seed of None yields an all-dead grid.
        """
        assert self.seed_source is not None
        seed = self.seed_source.get_random_seed_value()
        if seed is None:
            return self.generator.generate()
        return self.generator.generate_from_seed(
            seed, self.seed_source.get_living_probability()
        )

    def initialize(self) -> Grid:
        grid = self.generate_grid()
        assert self.lock is not None
        with self.lock:
            self.engine.initialize(grid)
            self.timer.reset()
        return grid

    def start(self) -> None:
        assert self.lock is not None
        with self.lock:
            self.engine.start()

    def pause(self) -> None:
        assert self.lock is not None
        with self.lock:
            self.engine.pause()

    def toggle(self) -> bool:
        """Flip between running and paused. Returns the new run state."""
        assert self.lock is not None
        with self.lock:
            if self.engine.is_running:
                self.engine.pause()
            else:
                self.engine.start()
            return self.engine.is_running

    def step(self) -> bool:
        assert self.lock is not None
        with self.lock:
            return self.engine.step()

    def reset(self) -> Grid:
        """Pause, then re-initialize with a freshly generated grid."""
        grid = self.generate_grid()
        assert self.lock is not None
        with self.lock:
            self.engine.reset(grid)
            self.timer.reset()
        logger.debug("Simulation reset")
        return grid

    def tick(self, elapsed: float) -> None:
        """Advance wall-clock time; steps the engine when its interval runs out."""
        assert self.lock is not None
        with self.lock:
            self.clock.tick(elapsed)

    @staticmethod
    def generate_random_seed() -> int:
        return generate_random_seed()
