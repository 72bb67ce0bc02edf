"""Player commands and the background key reader.

Raw key codes come from a *key source*: any object with a non-blocking
``read_key()`` that returns a curses key code, or ``NO_KEY`` when nothing is
pending.  :class:`InputReader` polls such a source on its own thread and
pushes decoded :class:`Command` values into a bounded queue that the game
loop drains between gravity ticks.
"""

from __future__ import annotations

import curses
import logging
import queue
import threading
import time
from enum import Enum
from typing import Callable, Dict, Optional, Protocol


LOGGER = logging.getLogger(__name__)

NO_KEY = -1


class Command(str, Enum):
    """Discrete actions a key press can produce."""

    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"
    ROTATE = "rotate"
    YES = "yes"
    NO = "no"


# Commands that act on the live piece.  YES/NO only matter at the replay prompt.
PIECE_COMMANDS = frozenset({Command.LEFT, Command.RIGHT, Command.DOWN, Command.ROTATE})

KEY_BINDINGS: Dict[int, Command] = {
    curses.KEY_LEFT: Command.LEFT,
    curses.KEY_RIGHT: Command.RIGHT,
    curses.KEY_DOWN: Command.DOWN,
    ord(" "): Command.ROTATE,
    ord("y"): Command.YES,
    ord("Y"): Command.YES,
    ord("n"): Command.NO,
    ord("N"): Command.NO,
}


class KeySource(Protocol):
    def read_key(self) -> int:
        ...


def decode_key(key: int) -> Optional[Command]:
    """Return the command bound to ``key`` or ``None`` if it is unbound."""

    return KEY_BINDINGS.get(key)


class InputReader(threading.Thread):
    """Poll a key source and enqueue piece commands until the game ends.

    ``is_over`` is checked before every poll; once it returns ``True`` the
    thread exits, so the owner can ``join()`` it right after flagging game
    over.  Keys that do not map to a piece command are discarded, and so are
    commands arriving while the queue is full.
    """

    def __init__(
        self,
        keys: KeySource,
        commands: "queue.Queue[Command]",
        is_over: Callable[[], bool],
        *,
        poll_ms: int = 10,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        super().__init__(name="termtris-input", daemon=True)
        self._keys = keys
        self._commands = commands
        self._is_over = is_over
        self._poll_s = poll_ms / 1000.0
        self._sleep = sleep

    def poll_once(self) -> bool:
        """Read at most one key and enqueue its command.

        Returns ``True`` if a key was read, whether or not it was bound.
        """

        key = self._keys.read_key()
        if key == NO_KEY:
            return False
        command = decode_key(key)
        if command in PIECE_COMMANDS:
            try:
                self._commands.put_nowait(command)
            except queue.Full:
                LOGGER.debug("Command queue full, dropping %s", command.value)
        return True

    def run(self) -> None:
        while not self._is_over():
            if not self.poll_once():
                self._sleep(self._poll_s)
