"""The live, falling piece."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .board import WIDTH
from .shapes import Offsets, ShapeType, rotate_offsets, shape_offsets


@dataclass
class Piece:
    """Active falling piece in the game.

    ``offsets`` starts as a copy of the catalog shape and is replaced on every
    successful rotation; ``shape`` only records which catalog entry the piece
    came from.  ``anchor`` is stored as ``(x, y)``.
    """

    shape: ShapeType
    offsets: Offsets = field(default_factory=list)
    anchor: Tuple[int, int] = (WIDTH // 2, 0)

    @classmethod
    def spawn(cls, shape: ShapeType, width: int = WIDTH) -> "Piece":
        """Create a piece in spawn orientation at the top centre."""

        return cls(shape, shape_offsets(shape), (width // 2, 0))

    def move(self, dx: int, dy: int) -> None:
        """Shift the anchor by ``(dx, dy)`` without any collision check."""

        x, y = self.anchor
        self.anchor = (x + dx, y + dy)

    def rotated(self) -> Offsets:
        """Return the offsets this piece would have after a clockwise turn."""

        return rotate_offsets(self.offsets)

    def cells(self, offsets: Optional[Offsets] = None) -> List[Tuple[int, int]]:
        """Return the board coordinates covered by the piece.

        ``offsets`` may be given to compute the cells of a candidate
        orientation without touching the piece itself.
        """

        x, y = self.anchor
        return [(x + ox, y + oy) for ox, oy in (self.offsets if offsets is None else offsets)]
