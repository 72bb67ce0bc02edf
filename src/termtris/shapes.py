"""Shape catalog for the falling pieces.

Each of the seven canonical shapes is a fixed list of four ``(dx, dy)``
offsets relative to the piece's anchor.  ``dx`` grows to the right and
``dy`` grows downwards, matching the board's ``(x, y)`` coordinates.

Rotations are not tabulated.  A live piece keeps its current offsets and
rotating it simply maps every offset through :func:`rotate_offsets`, so
four successive rotations bring a piece back to where it started.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Dict, List, Optional, Tuple

Offset = Tuple[int, int]
Offsets = List[Offset]


class ShapeType(str, Enum):
    """Enumeration of the seven standard shapes."""

    O = "O"  # square
    T = "T"
    L = "L"
    J = "J"
    S = "S"
    Z = "Z"
    I = "I"  # line


# Offsets in spawn orientation, relative to the anchor.  The anchor itself is
# always one of the cells, which is why every shape lists ``(0, 0)`` first.
SHAPE_OFFSETS: Dict[ShapeType, Tuple[Offset, ...]] = {
    ShapeType.O: ((0, 0), (1, 0), (0, 1), (1, 1)),
    ShapeType.T: ((0, 0), (-1, 0), (1, 0), (0, 1)),
    ShapeType.L: ((0, 0), (1, 0), (0, 1), (0, 2)),
    ShapeType.J: ((0, 0), (-1, 0), (0, 1), (0, 2)),
    ShapeType.S: ((0, 0), (1, 0), (0, 1), (-1, 1)),
    ShapeType.Z: ((0, 0), (-1, 0), (0, 1), (1, 1)),
    ShapeType.I: ((0, 0), (1, 0), (2, 0), (3, 0)),
}


def shape_offsets(shape: ShapeType) -> Offsets:
    """Return a fresh, mutable copy of ``shape``'s spawn offsets."""

    return list(SHAPE_OFFSETS[shape])


def rotate_offsets(offsets: Offsets) -> Offsets:
    """Return ``offsets`` rotated 90 degrees clockwise about the anchor.

    Every offset ``(x, y)`` becomes ``(-y, x)``.  No normalisation or
    wall-kick is applied, so asymmetric shapes such as the line pivot around
    their first cell rather than their centre.
    """

    return [(-y, x) for x, y in offsets]


def random_shape(rng: Optional[random.Random] = None) -> ShapeType:
    """Return a shape chosen uniformly from the catalog."""

    return (rng or random).choice(list(ShapeType))
