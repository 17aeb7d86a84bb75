import pytest

from lifesim.core.speed import (
    DEFAULT_SPEED,
    STEP_INTERVALS,
    SimulationSpeed,
    step_interval,
)


def test_speed_levels_are_ordered():
    assert [s.value for s in SimulationSpeed] == list(range(7))
    assert SimulationSpeed.VERY_SLOW < SimulationSpeed.VERY_FAST


@pytest.mark.parametrize(
    "speed,seconds",
    [
        (SimulationSpeed.VERY_SLOW, 5.0),
        (SimulationSpeed.SLOW, 2.5),
        (SimulationSpeed.MEDIUM_SLOW, 1.0),
        (SimulationSpeed.MEDIUM, 0.5),
        (SimulationSpeed.MEDIUM_FAST, 0.25),
        (SimulationSpeed.FAST, 0.1),
        (SimulationSpeed.VERY_FAST, 0.05),
    ],
)
def test_step_interval(speed, seconds):
    assert step_interval(speed) == seconds


def test_every_speed_has_an_interval():
    assert set(STEP_INTERVALS) == set(SimulationSpeed)


def test_intervals_shrink_as_speed_grows():
    intervals = [step_interval(s) for s in SimulationSpeed]
    assert intervals == sorted(intervals, reverse=True)


def test_step_interval_accepts_plain_int():
    assert step_interval(3) == 0.5


def test_default_speed_is_medium():
    assert DEFAULT_SPEED is SimulationSpeed.MEDIUM


@pytest.mark.parametrize(
    "name,expected",
    [
        ("medium", SimulationSpeed.MEDIUM),
        ("MEDIUM_FAST", SimulationSpeed.MEDIUM_FAST),
        ("VerySlow", SimulationSpeed.VERY_SLOW),
        ("very-fast", SimulationSpeed.VERY_FAST),
    ],
)
def test_from_name(name, expected):
    assert SimulationSpeed.from_name(name) is expected


def test_from_name_unknown():
    with pytest.raises(ValueError, match="Unknown simulation speed"):
        SimulationSpeed.from_name("ludicrous")
