"""Life rule evaluation.

For living cells:
- one or no living neighbors: dies of solitude
- four or more living neighbors: dies of overpopulation
- two or three living neighbors: survives

For dead cells:
- exactly three living neighbors: becomes populated
"""

SOLITUDE_LIMIT = 1
OVERPOPULATION_LIMIT = 4
BIRTH_COUNT = 3


def next_state(alive: bool, living_neighbors: int) -> bool:
    """Return the cell's state in the next generation."""
    if alive:
        return SOLITUDE_LIMIT < living_neighbors < OVERPOPULATION_LIMIT
    return living_neighbors == BIRTH_COUNT


def should_toggle(alive: bool, living_neighbors: int) -> bool:
    """True when the cell flips in the next generation."""
    return next_state(alive, living_neighbors) != alive
