import pytest

from lifesim.core.simulation_engine import SimulationEngine
from lifesim.interfaces.clock import IClock
from lifesim.interfaces.engine import (
    ISimulationEngine,
    SimulationChanged,
    SimulationInitialized,
)


def test_abstract_interfaces_cannot_be_instantiated():
    with pytest.raises(TypeError):
        ISimulationEngine()  # type: ignore[abstract]
    with pytest.raises(TypeError):
        IClock()  # type: ignore[abstract]


def test_engine_implements_interface():
    assert isinstance(SimulationEngine(), ISimulationEngine)


def test_events_are_frozen():
    event = SimulationChanged(
        dead_cell_count=1, living_cell_count=2, step_count=3, is_running=False
    )
    with pytest.raises(AttributeError):
        event.step_count = 4

    init = SimulationInitialized(
        total_cell_count=3, dead_cell_count=1, living_cell_count=2, step_count=0
    )
    assert init == SimulationInitialized(3, 1, 2, 0)
