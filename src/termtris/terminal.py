"""Curses front-end: display sink and key source in one object.

The game loop draws from the main thread while the input reader polls keys
from its own thread.  curses is not thread-safe, so every call into the
screen goes through ``_lock``; ``getch`` runs in no-delay mode and never
holds the lock for long.
"""

from __future__ import annotations

import curses
import threading
from typing import List

from .commands import NO_KEY
from .render import Frame


PROMPT = "Do you want to play again? (Y/N)"


class CursesTerminal:
    """Wrap a curses window for drawing frames and reading keys."""

    def __init__(self, stdscr: "curses.window") -> None:
        self._screen = stdscr
        self._lock = threading.Lock()
        try:
            curses.curs_set(0)
        except curses.error:
            # Some terminals cannot hide the cursor.
            pass
        stdscr.nodelay(True)
        stdscr.keypad(True)

    def _write_lines(self, lines: List[str]) -> None:
        for row, text in enumerate(lines):
            try:
                self._screen.addstr(row, 0, text)
                self._screen.clrtoeol()
            except curses.error:
                # Line does not fit in the window; it is clipped.
                pass
        self._screen.refresh()

    def show_frame(self, frame: Frame) -> None:
        """Redraw ``frame`` in place from the top-left corner."""

        with self._lock:
            self._write_lines(frame.lines())

    def show_game_over(self, score: int) -> None:
        """Replace the board with the final score and the replay prompt."""

        with self._lock:
            self._screen.erase()
            self._write_lines(["Game Over!", f"Final Score: {score}", PROMPT])

    def read_key(self) -> int:
        """Return the next pending key code or ``NO_KEY``."""

        with self._lock:
            key = self._screen.getch()
        return NO_KEY if key == curses.ERR else key
