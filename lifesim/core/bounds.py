"""Bounding box tracking for the live region of a grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class BoundingBox:
    """Inclusive cell-coordinate rectangle enclosing every living cell."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1

    def contains(self, x: int, y: int) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y


class LiveRegionTracker:
    """Keeps per-column and per-row living counts.

    Each flip is an O(1) update; reading the box scans the column and row
    counters, which is O(width + height) rather than O(width * height).
    """

    def __init__(self, width: int, height: int):
        self._columns = [0] * width
        self._rows = [0] * height

    def clear(self) -> None:
        self._columns = [0] * len(self._columns)
        self._rows = [0] * len(self._rows)

    def record(self, x: int, y: int, alive: bool) -> None:
        """Account for a cell at (x, y) becoming alive or dead."""
        delta = 1 if alive else -1
        self._columns[x] += delta
        self._rows[y] += delta

    @property
    def bounding_box(self) -> Optional[BoundingBox]:
        xs = [x for x, count in enumerate(self._columns) if count]
        if not xs:
            return None
        ys = [y for y, count in enumerate(self._rows) if count]
        return BoundingBox(min_x=xs[0], min_y=ys[0], max_x=xs[-1], max_y=ys[-1])
