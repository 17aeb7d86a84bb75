"""Fixed-size cell grid backed by a single flat buffer."""

from __future__ import annotations

from typing import Iterator, List

from lifesim.core.cell import Cell
from lifesim.core.exceptions import GridBoundsError

# Orthogonal neighbors first, then diagonals
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
    (-1, -1),
    (1, -1),
    (-1, 1),
    (1, 1),
)

ALIVE_GLYPH = "x"
DEAD_GLYPH = "_"


class Grid:
    """W x H cells stored row-major, index = y * width + x.

    Cells are created once at construction and never replaced, so
    coordinates stay unique and stable for the grid's lifetime.

    Attributes:
        _cells: Flat list of cells.
        _neighbor_indices: Flat indices of each cell's in-bounds neighbors,
            computed lazily on first use.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got {width}x{height}"
            )
        self._width = width
        self._height = height
        self._cells: List[Cell] = [
            Cell(x, y) for y in range(height) for x in range(width)
        ]
        self._neighbor_indices: List[tuple[int, ...]] | None = None

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> int:
        return self._width * self._height

    @property
    def cells(self) -> tuple[Cell, ...]:
        return tuple(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def index_of(self, x: int, y: int) -> int:
        """Return the flat buffer index for (x, y).

        Raises:
            GridBoundsError: If the coordinate is outside the grid.
        """
        if not self.in_bounds(x, y):
            raise GridBoundsError(x, y, self._width, self._height)
        return y * self._width + x

    def cell_at(self, x: int, y: int) -> Cell:
        return self._cells[self.index_of(x, y)]

    def neighbors(self, x: int, y: int) -> list[Cell]:
        """Return the up-to-8 adjacent cells, clipped at the edges."""
        indices = self.neighbor_indices()[self.index_of(x, y)]
        return [self._cells[i] for i in indices]

    def neighbor_indices(self) -> List[tuple[int, ...]]:
        """Flat neighbor index table, one tuple per cell."""
        if self._neighbor_indices is None:
            table: List[tuple[int, ...]] = []
            for y in range(self._height):
                for x in range(self._width):
                    table.append(
                        tuple(
                            (y + dy) * self._width + (x + dx)
                            for dx, dy in NEIGHBOR_OFFSETS
                            if self.in_bounds(x + dx, y + dy)
                        )
                    )
            self._neighbor_indices = table
        return self._neighbor_indices

    def living_count(self) -> int:
        """Count living cells by full scan."""
        return sum(1 for cell in self._cells if cell.alive)

    def states(self) -> list[bool]:
        """Snapshot of every cell's state in flat index order."""
        return [cell.alive for cell in self._cells]

    def format_text(self) -> str:
        """Render the grid as text, top row (y = height - 1) first."""
        rows = []
        for y in range(self._height - 1, -1, -1):
            start = y * self._width
            rows.append(
                " ".join(
                    ALIVE_GLYPH if cell.alive else DEAD_GLYPH
                    for cell in self._cells[start : start + self._width]
                )
            )
        return "\n".join(rows)

    def __repr__(self) -> str:
        return (
            f"Grid(width={self._width}, height={self._height}, "
            f"living={self.living_count()})"
        )
