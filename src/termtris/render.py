"""Text rendering of a game frame.

:func:`build_frame` turns the board, the live piece's cells, the score and
the preview shape into an immutable :class:`Frame`.  Nothing here touches the
terminal; a display sink only has to write ``frame.lines()`` top to bottom.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .board import Board
from .shapes import ShapeType, shape_offsets
from .utils import render_grid


PREVIEW_SIZE = 4

FILLED_GLYPH = "[ ]"
EMPTY_GLYPH = "   "
BORDER_GLYPH = "|"
FLOOR_GLYPH = "-"

Rows = Tuple[Tuple[bool, ...], ...]


def preview_grid(shape: Optional[ShapeType]) -> Rows:
    """Return a 4x4 grid marking ``shape``'s spawn offsets.

    Offsets that fall outside the window (negative or too large) are dropped.
    """

    cells = [[False] * PREVIEW_SIZE for _ in range(PREVIEW_SIZE)]
    if shape is not None:
        for x, y in shape_offsets(shape):
            if 0 <= x < PREVIEW_SIZE and 0 <= y < PREVIEW_SIZE:
                cells[y][x] = True
    return tuple(tuple(row) for row in cells)


@dataclass(frozen=True)
class Frame:
    """Snapshot of everything drawn for one loop iteration."""

    score: int
    grid: Rows
    preview: Rows

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def lines(self) -> List[str]:
        """Return the frame as fixed-width text lines."""

        out = [f"Score: {self.score}"]
        for row in self.grid:
            body = "".join(FILLED_GLYPH if cell else EMPTY_GLYPH for cell in row)
            out.append(f"{BORDER_GLYPH}{body}{BORDER_GLYPH}")
        out.append(FLOOR_GLYPH * (self.width * len(FILLED_GLYPH) + 2))
        out.append("Next:")
        for row in self.preview:
            out.append(" " + "".join(FILLED_GLYPH if cell else EMPTY_GLYPH for cell in row))
        return out


def build_frame(
    board: Board,
    cells: Iterable[Tuple[int, int]],
    score: int,
    upcoming: Optional[ShapeType],
) -> Frame:
    """Compose a frame from the board with the live piece's ``cells`` overlaid."""

    grid = tuple(tuple(bool(value) for value in row) for row in render_grid(board, cells))
    return Frame(score=score, grid=grid, preview=preview_grid(upcoming))
