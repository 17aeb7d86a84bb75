import pytest

from lifesim.core.clock import Clock, StepTimer
from lifesim.core.speed import SimulationSpeed


class Subscriber:
    def __init__(self):
        self.calls = 0
        self.elapsed = []

    def tick(self, elapsed: float) -> None:
        self.calls += 1
        self.elapsed.append(elapsed)


class DummyEngine:
    def __init__(self, running: bool = True):
        self.is_running = running
        self.steps = 0

    def step(self) -> bool:
        self.steps += 1
        return True


def test_clock_subscribe_unsubscribe_and_tick():
    clock = Clock()
    sub = Subscriber()

    clock.subscribe(sub)
    clock.subscribe(sub)  # should not duplicate
    clock.tick(0.5)

    assert clock.tick_count == 1
    assert clock.elapsed == pytest.approx(0.5)
    assert sub.calls == 1
    assert sub.elapsed == [0.5]

    clock.unsubscribe(sub)
    clock.tick(0.25)
    assert sub.calls == 1  # no new calls after unsubscribe
    assert clock.elapsed == pytest.approx(0.75)


def test_clock_zero_tick_is_ignored():
    clock = Clock()
    sub = Subscriber()
    clock.subscribe(sub)

    clock.tick(0)
    assert clock.tick_count == 0
    assert sub.calls == 0


def test_clock_reset():
    clock = Clock()
    clock.tick(4)
    clock.reset()
    assert clock.tick_count == 0
    assert clock.elapsed == 0


def test_clock_negative_elapsed():
    clock = Clock()
    with pytest.raises(ValueError):
        clock.tick(-1)


def test_step_timer_steps_once_per_interval():
    engine = DummyEngine()
    timer = StepTimer(engine, SimulationSpeed.MEDIUM)  # 0.5s

    timer.tick(0.2)
    timer.tick(0.2)
    assert engine.steps == 0
    timer.tick(0.1)
    assert engine.steps == 1
    assert timer.remaining == pytest.approx(0.5)


def test_step_timer_long_tick_steps_once():
    engine = DummyEngine()
    timer = StepTimer(engine, SimulationSpeed.VERY_FAST)

    timer.tick(10.0)
    assert engine.steps == 1


def test_step_timer_idle_when_paused():
    engine = DummyEngine(running=False)
    timer = StepTimer(engine, SimulationSpeed.VERY_FAST)

    timer.tick(1.0)
    assert engine.steps == 0
    assert timer.remaining == pytest.approx(0.05)


def test_step_timer_speed_change_resets_countdown():
    engine = DummyEngine()
    timer = StepTimer(engine, SimulationSpeed.SLOW)
    timer.tick(1.0)
    assert timer.remaining == pytest.approx(1.5)

    timer.speed = SimulationSpeed.FAST
    assert timer.speed is SimulationSpeed.FAST
    assert timer.interval == pytest.approx(0.1)
    assert timer.remaining == pytest.approx(0.1)


def test_step_timer_driven_by_clock():
    engine = DummyEngine()
    clock = Clock()
    clock.subscribe(StepTimer(engine, SimulationSpeed.MEDIUM_SLOW))  # 1.0s

    for _ in range(10):
        clock.tick(0.25)
    # Countdown hits zero on the 4th and 8th tick
    assert engine.steps == 2


def test_step_timer_negative_elapsed():
    timer = StepTimer(DummyEngine())
    with pytest.raises(ValueError):
        timer.tick(-0.1)
