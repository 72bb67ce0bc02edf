"""Runtime settings for a game session."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional


# Milliseconds between automatic downward moves.
GRAVITY_MS = 200
# Milliseconds the main loop sleeps between iterations.
FRAME_MS = 10
# Score awarded per cleared row.
LINE_CLEAR_BONUS = 100

ENV_PREFIX = "TERMTRIS_"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class GameConfig:
    """Timing, scoring and logging settings.

    Gameplay constants have fixed defaults; only the random seed and the
    logging destination can be changed from the environment.
    """

    gravity_ms: int = GRAVITY_MS
    frame_ms: int = FRAME_MS
    poll_ms: int = FRAME_MS
    line_bonus: int = LINE_CLEAR_BONUS
    queue_size: int = 32
    seed: Optional[int] = None
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        for name in ("gravity_ms", "frame_ms", "poll_ms", "line_bonus", "queue_size"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GameConfig":
        """Build a config from ``TERMTRIS_*`` environment variables.

        Recognised variables are ``TERMTRIS_SEED``, ``TERMTRIS_LOG_LEVEL`` and
        ``TERMTRIS_LOG_FILE``.  Unset or empty variables keep their defaults.

        Raises:
            ValueError: If ``TERMTRIS_SEED`` is not an integer or
                ``TERMTRIS_LOG_LEVEL`` is not a standard level name.
        """

        env = os.environ if environ is None else environ
        seed: Optional[int] = None
        raw_seed = env.get(ENV_PREFIX + "SEED", "").strip()
        if raw_seed:
            try:
                seed = int(raw_seed)
            except ValueError:
                raise ValueError(f"{ENV_PREFIX}SEED must be an integer, got {raw_seed!r}") from None
        return cls(
            seed=seed,
            log_level=env.get(ENV_PREFIX + "LOG_LEVEL", "").strip().upper() or cls.log_level,
            log_file=env.get(ENV_PREFIX + "LOG_FILE", "").strip() or None,
        )
