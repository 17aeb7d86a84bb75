"""Discrete simulation speeds and their step intervals."""

from enum import IntEnum


class SimulationSpeed(IntEnum):
    """Simulation speed enumeration, slowest first."""

    VERY_SLOW = 0
    SLOW = 1
    MEDIUM_SLOW = 2
    MEDIUM = 3
    MEDIUM_FAST = 4
    FAST = 5
    VERY_FAST = 6

    @classmethod
    def from_name(cls, name: str) -> "SimulationSpeed":
        """Look up a speed by name, e.g. "medium_fast", "MediumFast" or "very-slow".

        Raises:
            ValueError: If the name matches no speed.
        """
        key = "".join(ch for ch in name if ch.isalnum()).upper()
        for speed in cls:
            if speed.name.replace("_", "") == key:
                return speed
        raise ValueError(
            f"Unknown simulation speed '{name}'. "
            f"Available: {[speed.name.lower() for speed in cls]}"
        )


# Seconds between steps
STEP_INTERVALS: dict[SimulationSpeed, float] = {
    SimulationSpeed.VERY_SLOW: 5.0,
    SimulationSpeed.SLOW: 2.5,
    SimulationSpeed.MEDIUM_SLOW: 1.0,
    SimulationSpeed.MEDIUM: 0.5,
    SimulationSpeed.MEDIUM_FAST: 0.25,
    SimulationSpeed.FAST: 0.1,
    SimulationSpeed.VERY_FAST: 0.05,
}

DEFAULT_SPEED = SimulationSpeed.MEDIUM


def step_interval(speed: SimulationSpeed) -> float:
    """Return the number of seconds between steps at the given speed."""
    return STEP_INTERVALS[SimulationSpeed(speed)]
