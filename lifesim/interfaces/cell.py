"""Protocols for cell observers and the seed/probability source."""

from __future__ import annotations

from typing import Optional, Protocol


class CellObserver(Protocol):
    """Callback invoked on every cell state assignment."""

    def __call__(self, alive: bool, x: int, y: int) -> None:
        ...


class SeedSource(Protocol):
    """Collaborator that supplies generation inputs before each initialize.

    In the interactive front end this is the UI panel holding the seed text
    field and the living probability slider.
    """

    def get_random_seed_value(self) -> Optional[int]:
        """Return the seed, or None when no usable seed was entered."""
        ...

    def get_living_probability(self) -> float:
        """Return the chance in [0, 1] that a seeded cell starts alive."""
        ...
