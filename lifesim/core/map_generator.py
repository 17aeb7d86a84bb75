"""Grid construction, optionally seeded with a reproducible live pattern."""

from __future__ import annotations

import logging
import random

from lifesim.core.grid import Grid
from lifesim.utils.rng import random_float01

logger = logging.getLogger(__name__)


class MapGenerator:
    """Builds grids of a configured size.

    Seeded generation draws one random value per cell, visiting x in
    ascending order in the outer loop and y in ascending order in the inner
    loop. That order fixes which draw lands on which cell, so the same seed
    always produces the same pattern.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(
                f"Map dimensions must be positive, got {width}x{height}"
            )
        self._width = width
        self._height = height

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def generate(self) -> Grid:
        """Create a grid with every cell dead."""
        return Grid(self._width, self._height)

    def generate_cell_state_map(
        self, seed: int, living_probability: float
    ) -> list[list[bool]]:
        """Return a [x][y] map of initial states for the given seed.

        No random values are drawn when living_probability <= 0.
        """
        _validate_probability(living_probability)
        states = [[False] * self._height for _ in range(self._width)]
        if living_probability <= 0:
            return states

        rng = random.Random(seed)
        threshold = 1 - living_probability
        for x in range(self._width):
            for y in range(self._height):
                states[x][y] = random_float01(rng) >= threshold
        return states

    def generate_from_seed(self, seed: int, living_probability: float) -> Grid:
        """Create a grid and bring cells to life according to the seed.

        Cells are brought to life through toggle_state(), so any observer
        attached during population sees the same notifications as during
        simulation.
        """
        grid = self.generate()
        states = self.generate_cell_state_map(seed, living_probability)
        for x, column in enumerate(states):
            for y, alive in enumerate(column):
                if alive:
                    grid.cell_at(x, y).toggle_state()

        logger.debug(
            "Generated %dx%d map from seed %d (p=%.3f): %d living cells",
            self._width,
            self._height,
            seed,
            living_probability,
            grid.living_count(),
        )
        return grid


def _validate_probability(living_probability: float) -> None:
    if not 0.0 <= living_probability <= 1.0:
        raise ValueError(
            f"living_probability must be in [0, 1], got {living_probability}"
        )


def generate_map(width: int, height: int) -> Grid:
    """Create an all-dead width x height grid."""
    return MapGenerator(width, height).generate()


def generate_map_from_seed(
    width: int, height: int, seed: int, living_probability: float
) -> Grid:
    """Create a width x height grid seeded with a reproducible pattern."""
    return MapGenerator(width, height).generate_from_seed(seed, living_probability)
