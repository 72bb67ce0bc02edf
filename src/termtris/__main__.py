"""Terminal entry point.

Run with: `python -m termtris` (or the ``termtris`` console script).

Each session plays until game over, then the player is asked whether to
play again; only Y or N are accepted.  Settings come from ``TERMTRIS_*``
environment variables, see :class:`termtris.config.GameConfig`.
"""

from __future__ import annotations

import curses
import logging
import random
import sys
import time
from typing import Callable

from .commands import NO_KEY, Command, KeySource, decode_key
from .config import GameConfig
from .game_state import GameSession
from .runner import GameLoop
from .terminal import CursesTerminal


LOGGER = logging.getLogger(__name__)


def configure_logging(config: GameConfig) -> None:
    """Send log records to ``config.log_file`` if set, otherwise discard them.

    curses owns the terminal, so nothing is ever written to stderr.
    """

    package_logger = logging.getLogger("termtris")
    if config.log_file:
        logging.basicConfig(
            filename=config.log_file,
            level=logging.getLevelName(config.log_level),
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )
    else:
        package_logger.addHandler(logging.NullHandler())
        package_logger.propagate = False


def ask_play_again(
    keys: KeySource, *, poll_ms: int = 10, sleep: Callable[[float], None] = time.sleep
) -> bool:
    """Wait for Y or N and return ``True`` for Y.  Other keys are ignored."""

    while True:
        key = keys.read_key()
        if key == NO_KEY:
            sleep(poll_ms / 1000.0)
            continue
        command = decode_key(key)
        if command is Command.YES:
            return True
        if command is Command.NO:
            return False


def play(terminal: CursesTerminal, config: GameConfig) -> None:
    """Run sessions on ``terminal`` until the player declines a replay."""

    session = GameSession(line_bonus=config.line_bonus, rng=random.Random(config.seed))
    while True:
        loop = GameLoop(session, terminal, terminal, config=config)
        score = loop.run()
        terminal.show_game_over(score)
        if not ask_play_again(terminal, poll_ms=config.poll_ms):
            return


def main() -> int:
    config = GameConfig.from_env()
    configure_logging(config)
    try:
        curses.wrapper(lambda stdscr: play(CursesTerminal(stdscr), config))
    except KeyboardInterrupt:
        LOGGER.info("Interrupted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
