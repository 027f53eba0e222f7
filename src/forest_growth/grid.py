"""Fixed-size occupancy store for the simulation grid."""

from typing import Iterator, Optional, Tuple

import numpy as np

from .cell import Cell, Position
from .positions import in_bounds


class GridStore:
    """Square grid of optional cells backed by a numpy object array.

    Empty slots hold ``None``. Callers are expected to bounds-check
    positions before indexing; an out-of-range position raises
    ``IndexError`` instead of wrapping around like numpy would.
    """

    def __init__(self, size: int):
        if size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size
        self._cells = np.empty((size, size), dtype=object)

    def contains(self, position: Position) -> bool:
        return in_bounds(position, self.size)

    def _index(self, position: Position) -> Tuple[int, int]:
        if not self.contains(position):
            raise IndexError(f"Position {position} outside {self.size}x{self.size} grid")
        return position[0], position[1]

    def get(self, position: Position) -> Optional[Cell]:
        return self._cells[self._index(position)]

    def set(self, position: Position, cell: Cell) -> None:
        self._cells[self._index(position)] = cell

    def clear(self, position: Position) -> None:
        self._cells[self._index(position)] = None

    def clear_all(self) -> None:
        self._cells.fill(None)

    def is_empty(self, position: Position) -> bool:
        return self.get(position) is None

    def cells(self) -> Iterator[Tuple[Position, Cell]]:
        """Iterate over occupied positions in row-major order."""
        for (x, y), cell in np.ndenumerate(self._cells):
            if cell is not None:
                yield (x, y), cell

    def __len__(self) -> int:
        return sum(1 for _ in self.cells())
