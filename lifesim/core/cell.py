"""Single binary-state grid cell with change notification."""

from __future__ import annotations

from typing import List

from lifesim.interfaces.cell import CellObserver


class Cell:
    """A dead/alive unit pinned to fixed grid coordinates.

    Every call to set_state() notifies observers, including assignments that
    leave the value unchanged. Observers that need edge triggers must keep
    the previous value themselves.
    """

    __slots__ = ("_x", "_y", "_alive", "_observers")

    def __init__(self, x: int, y: int, alive: bool = False):
        self._x = x
        self._y = y
        self._alive = alive
        self._observers: List[CellObserver] = []

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def position(self) -> tuple[int, int]:
        return (self._x, self._y)

    @property
    def alive(self) -> bool:
        return self._alive

    def subscribe(self, observer: CellObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def unsubscribe(self, observer: CellObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def set_state(self, alive: bool) -> None:
        """Assign the state and notify observers with (alive, x, y)."""
        self._alive = bool(alive)
        for observer in list(self._observers):
            observer(self._alive, self._x, self._y)

    def toggle_state(self) -> None:
        """Flip the state through set_state()."""
        self.set_state(not self._alive)

    def __repr__(self) -> str:
        state = "alive" if self._alive else "dead"
        return f"Cell(x={self._x}, y={self._y}, {state})"
