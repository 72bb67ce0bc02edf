"""High level game session container."""

from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .board import Board
from .commands import Command
from .config import LINE_CLEAR_BONUS
from .piece import Piece
from .shapes import ShapeType, random_shape
from .utils import can_place


LOGGER = logging.getLogger(__name__)


@dataclass
class GameSession:
    """Mutable state for a single game.

    The session owns the board, the live piece, the preview shape, the score
    and the game-over flag.  Every method that changes them takes ``lock`` so
    the game loop and any other thread see consistent state.
    """

    board: Board = field(default_factory=Board)
    active: Optional[Piece] = None
    upcoming: Optional[ShapeType] = None
    score: int = 0
    lines: int = 0
    pieces: int = 0
    game_over: bool = False
    line_bonus: int = LINE_CLEAR_BONUS
    rng: random.Random = field(default_factory=random.Random, repr=False)
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    def reset_game(self) -> None:
        """Reset the entire session for a new game."""

        with self.lock:
            self.board.reset()
            self.active = None
            self.score = 0
            self.lines = 0
            self.pieces = 0
            self.game_over = False
            self.upcoming = random_shape(self.rng)

    def spawn(self, shape: ShapeType) -> bool:
        """Make ``shape`` the live piece at the top centre of the board.

        Returns ``False`` and flags game over if the piece collides
        immediately.
        """

        with self.lock:
            self.active = Piece.spawn(shape, self.board.width)
            if not can_place(self.board, self.active, 0, 0):
                self.game_over = True
                LOGGER.info("Spawn of %s blocked, game over with score %d", shape.value, self.score)
                return False
            LOGGER.debug("Spawned %s at %s", shape.value, self.active.anchor)
            return True

    def spawn_next(self) -> bool:
        """Spawn the preview shape and draw a new preview on success."""

        with self.lock:
            shape = self.upcoming or random_shape(self.rng)
            if not self.spawn(shape):
                return False
            self.upcoming = random_shape(self.rng)
            return True

    def can_place(self, dx: int, dy: int) -> bool:
        """Return ``True`` if the live piece fits after moving by ``(dx, dy)``."""

        with self.lock:
            return self.active is not None and can_place(self.board, self.active, dx, dy)

    def try_move(self, dx: int, dy: int) -> bool:
        """Move the live piece if the target position is free.

        A ``False`` result for ``dy > 0`` means the piece has landed.
        """

        with self.lock:
            if not self.can_place(dx, dy):
                return False
            self.active.move(dx, dy)
            return True

    def try_rotate(self) -> bool:
        """Rotate the live piece clockwise unless the result would collide."""

        with self.lock:
            if self.active is None:
                return False
            candidate = self.active.rotated()
            if not can_place(self.board, self.active, 0, 0, offsets=candidate):
                return False
            self.active.offsets = candidate
            return True

    def occupied_cells(self) -> List[Tuple[int, int]]:
        """Return the board cells covered by the live piece."""

        with self.lock:
            return self.active.cells() if self.active is not None else []

    def land(self) -> int:
        """Commit the live piece, clear full rows and score them.

        Returns the number of rows cleared.
        """

        with self.lock:
            self.board.commit(self.occupied_cells())
            self.active = None
            self.pieces += 1
            cleared = self.board.clear_full_rows()
            if cleared:
                self.lines += cleared
                self.score += self.line_bonus * cleared
                LOGGER.debug("Cleared %d row(s). Score: %d", cleared, self.score)
            return cleared

    def apply(self, command: Command) -> bool:
        """Apply a player command to the live piece.

        Returns whether the piece moved or turned.  Commands that do not act
        on a piece are ignored.
        """

        with self.lock:
            if self.game_over or self.active is None:
                return False
            if command is Command.LEFT:
                return self.try_move(-1, 0)
            if command is Command.RIGHT:
                return self.try_move(1, 0)
            if command is Command.DOWN:
                return self.try_move(0, 1)
            if command is Command.ROTATE:
                return self.try_rotate()
            return False

    def end(self) -> None:
        """Flag the session as over, e.g. when play is interrupted."""

        with self.lock:
            self.game_over = True
