"""Board representation for the playfield."""

from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np
from numpy.typing import NDArray


# Dimensions of the standard board.
WIDTH = 10
HEIGHT = 20

Grid = NDArray[np.uint8]

EMPTY = 0
FILLED = 1


def create_empty_grid() -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((HEIGHT, WIDTH), dtype=np.uint8)


class Board:
    """Fixed-size grid of empty or filled cells.

    The grid is indexed ``grid[y, x]`` with ``y == 0`` being the top row.
    Only :meth:`commit`, :meth:`clear_full_rows` and :meth:`reset` mutate it.
    """

    width: int = WIDTH
    height: int = HEIGHT

    def __init__(self) -> None:
        self.grid: Grid = create_empty_grid()

    def is_occupied(self, x: int, y: int) -> bool:
        """Return ``True`` if ``(x, y)`` is filled or lies outside the board.

        Cells above the board (``y < 0``) are always free so that a piece can
        spawn partly out of view.  Anything beside or below the board is
        treated as occupied, which makes collision checks fail closed.
        """

        if y < 0:
            return False
        if 0 <= x < self.width and y < self.height:
            return bool(self.grid[y, x] != EMPTY)
        return True

    def commit(self, cells: Iterable[Tuple[int, int]]) -> None:
        """Mark every given cell as filled.

        Cells above the board are dropped silently.

        Raises:
            IndexError: If a cell with ``y >= 0`` lies outside the board.
        """

        for x, y in cells:
            if y < 0:
                continue
            if not (0 <= x < self.width and y < self.height):
                raise IndexError(f"Cell ({x}, {y}) out of bounds")
            self.grid[y, x] = FILLED

    def clear_full_rows(self) -> int:
        """Clear completed rows and return how many were removed.

        Rows are scanned bottom to top.  After a full row is removed everything
        above it shifts down by one and the same row index is examined again,
        since the row that moved into it may be full as well.
        """

        cleared = 0
        y = self.height - 1
        while y >= 0:
            if np.all(self.grid[y] != EMPTY):
                cleared += 1
                self.grid[1 : y + 1] = self.grid[:y].copy()
                self.grid[0] = EMPTY
            else:
                y -= 1
        return cleared

    def reset(self) -> None:
        """Empty every cell."""

        self.grid.fill(EMPTY)

    def snapshot(self) -> Grid:
        """Return a copy of the grid that is safe to read without locking."""

        return self.grid.copy()
