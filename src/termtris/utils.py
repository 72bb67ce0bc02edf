"""Utility helpers for the game engine."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from .board import Board, EMPTY, FILLED
from .piece import Piece
from .shapes import Offsets


def can_place(
    board: Board,
    piece: Piece,
    dx: int,
    dy: int,
    offsets: Optional[Offsets] = None,
) -> bool:
    """Return ``True`` if ``piece`` fits on ``board`` after moving by ``(dx, dy)``.

    Every resulting cell must lie between the side walls and above the floor.
    Cells above the top edge are accepted without consulting the grid, so a
    freshly spawned piece may poke out of view.  ``offsets`` lets callers test
    a rotation candidate before committing it to the piece.
    """

    for x, y in piece.cells(offsets):
        new_x = x + dx
        new_y = y + dy
        if new_x < 0 or new_x >= board.width or new_y >= board.height:
            return False
        if new_y >= 0 and board.is_occupied(new_x, new_y):
            return False
    return True


def render_grid(
    board: Board, cells: Iterable[Tuple[int, int]] = ()
) -> List[List[int]]:
    """Return a copy of the board grid with ``cells`` overlaid as filled.

    This lets renderers draw the live piece without locking it into the
    board.  Cells outside the visible grid are skipped.
    """

    grid = [[FILLED if value != EMPTY else EMPTY for value in row] for row in board.snapshot()]
    for x, y in cells:
        if 0 <= y < board.height and 0 <= x < board.width:
            grid[y][x] = FILLED
    return grid
