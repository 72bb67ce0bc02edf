"""Game loop tying gravity, player input and rendering together.

The loop is a small state machine::

    SPAWNING -> FALLING -> LANDING -> SPAWNING ...
                                   \\-> GAME_OVER

Each call to :meth:`GameLoop.step` advances it by one iteration and draws
exactly one frame.  :meth:`GameLoop.run` repeats ``step`` until game over
while an :class:`~termtris.commands.InputReader` feeds commands from the
keyboard on a second thread.
"""

from __future__ import annotations

import logging
import queue
import time
from enum import Enum
from typing import Callable, Optional, Protocol

from .clock import GravityClock
from .commands import Command, InputReader, KeySource
from .config import GameConfig
from .game_state import GameSession
from .render import Frame, build_frame


LOGGER = logging.getLogger(__name__)


class Phase(str, Enum):
    """States of the game loop."""

    SPAWNING = "spawning"
    FALLING = "falling"
    LANDING = "landing"
    GAME_OVER = "game_over"


class Display(Protocol):
    def show_frame(self, frame: Frame) -> None:
        ...


class GameLoop:
    """Drive one game session from first spawn to game over."""

    def __init__(
        self,
        session: GameSession,
        display: Display,
        keys: Optional[KeySource] = None,
        *,
        config: Optional[GameConfig] = None,
        clock: Optional[Callable[[], float]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.session = session
        self.display = display
        self.keys = keys
        self.config = config or GameConfig()
        self.commands: "queue.Queue[Command]" = queue.Queue(maxsize=self.config.queue_size)
        self.gravity = GravityClock(self.config.gravity_ms, clock=clock)
        self.phase = Phase.SPAWNING
        self.reader: Optional[InputReader] = None
        self._sleep = sleep

    def _spawn(self) -> None:
        self.phase = Phase.FALLING if self.session.spawn_next() else Phase.GAME_OVER

    def _drain_commands(self) -> None:
        """Apply queued commands until the queue is empty or the piece lands."""

        while self.phase is Phase.FALLING:
            try:
                command = self.commands.get_nowait()
            except queue.Empty:
                return
            moved = self.session.apply(command)
            if command is Command.DOWN and not moved:
                self.phase = Phase.LANDING

    def _land(self) -> None:
        self.session.land()
        self._spawn()

    def render(self) -> Frame:
        """Draw the current session state and return the frame shown."""

        session = self.session
        with session.lock:
            frame = build_frame(
                session.board, session.occupied_cells(), session.score, session.upcoming
            )
        self.display.show_frame(frame)
        return frame

    def step(self) -> Phase:
        """Run a single loop iteration and return the resulting phase."""

        if self.phase is Phase.SPAWNING:
            self._spawn()
        if self.phase is Phase.FALLING:
            self._drain_commands()
        if self.phase is Phase.FALLING and self.gravity.due():
            if not self.session.try_move(0, 1):
                self.phase = Phase.LANDING
        # The landed piece is merged before drawing so no frame shows it
        # hovering after it has stopped.
        if self.phase is Phase.LANDING:
            self._land()
        self.render()
        return self.phase

    def _clear_commands(self) -> None:
        while True:
            try:
                self.commands.get_nowait()
            except queue.Empty:
                return

    def run(self) -> int:
        """Play until game over and return the final score."""

        self.session.reset_game()
        self._clear_commands()
        self.phase = Phase.SPAWNING
        self.gravity.reset()
        LOGGER.info("Game started")

        if self.keys is not None:
            self.reader = InputReader(
                self.keys,
                self.commands,
                lambda: self.session.game_over,
                poll_ms=self.config.poll_ms,
            )
            self.reader.start()
        try:
            while self.step() is not Phase.GAME_OVER:
                self._sleep(self.config.frame_ms / 1000.0)
        finally:
            self.session.end()
            if self.reader is not None:
                self.reader.join()
                self.reader = None

        LOGGER.info(
            "Game over. Score: %d, lines: %d, pieces: %d",
            self.session.score,
            self.session.lines,
            self.session.pieces,
        )
        return self.session.score
