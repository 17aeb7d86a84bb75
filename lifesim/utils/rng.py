"""Random number helpers shared by map generation and seed handling."""

from __future__ import annotations

import random
import time
from typing import Optional

RANDOM_MIN_INT = -100_000
"""Lower bound (inclusive) of the integer draw behind each random float."""

RANDOM_MAX_INT = 100_000
"""Upper bound (exclusive) of the integer draw behind each random float."""

SEED_MIN = -(2**31)
SEED_MAX = 2**31 - 1


def map_float01(value: float, min_from: float, max_from: float) -> float:
    """Linearly map value from [min_from, max_from] onto [0, 1]."""
    if max_from == min_from:
        raise ValueError("min_from and max_from must differ")
    return (value - min_from) / (max_from - min_from)


def random_float01(rng: random.Random) -> float:
    """Draw a uniform float in [0, 1) from rng.

    One integer is drawn from [RANDOM_MIN_INT, RANDOM_MAX_INT) and mapped
    linearly, so each call consumes exactly one draw.
    """
    value = rng.randrange(RANDOM_MIN_INT, RANDOM_MAX_INT)
    return map_float01(value, RANDOM_MIN_INT, RANDOM_MAX_INT)


def generate_random_seed(rng: Optional[random.Random] = None) -> int:
    """Return a random signed 32-bit seed.

    Without an explicit rng, a generator seeded from the current time in
    milliseconds is used.
    """
    if rng is None:
        rng = random.Random(time.time_ns() // 1_000_000)
    return rng.randint(SEED_MIN, SEED_MAX)


def parse_seed(text: object) -> Optional[int]:
    """Parse a seed entered as text.

    Returns None for empty or unparsable input and for values outside the
    signed 32-bit range, which callers treat as "generate without seeding".
    """
    if text is None or isinstance(text, bool):
        return None
    if isinstance(text, int):
        seed = text
    else:
        try:
            seed = int(str(text).strip())
        except ValueError:
            return None
    if not SEED_MIN <= seed <= SEED_MAX:
        return None
    return seed
