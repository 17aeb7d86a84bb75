"""Interface abstractions for the simulation.

Defines behavioral contracts that all implementations must satisfy:
- IClock, ClockSubscriber: pub/sub tick source for step timers
- ISimulationEngine, SimulationListener: rule engine and its event consumers
- SimulationInitialized, SimulationChanged: events published by the engine
- CellObserver, SeedSource: cell callbacks and the generation input provider
"""

from lifesim.interfaces.cell import CellObserver, SeedSource
from lifesim.interfaces.clock import ClockSubscriber, IClock
from lifesim.interfaces.engine import (
    ISimulationEngine,
    SimulationChanged,
    SimulationInitialized,
    SimulationListener,
)

__all__ = [
    "IClock",
    "ClockSubscriber",
    "ISimulationEngine",
    "SimulationListener",
    "SimulationInitialized",
    "SimulationChanged",
    "CellObserver",
    "SeedSource",
]
