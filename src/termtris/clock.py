"""Wall-clock gravity timer."""

from __future__ import annotations

import time
from typing import Callable, Optional


class GravityClock:
    """Report when the next gravity tick is due.

    ``clock`` returns the current time in seconds and defaults to
    :func:`time.monotonic`; tests pass a fake to step time by hand.
    """

    def __init__(self, interval_ms: int, *, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock or time.monotonic
        self.interval = interval_ms / 1000.0
        self._last = self._clock()

    def reset(self) -> None:
        """Start a fresh interval from now."""

        self._last = self._clock()

    def due(self) -> bool:
        """Return ``True`` once per elapsed interval and restart the timer."""

        now = self._clock()
        if now - self._last >= self.interval:
            self._last = now
            return True
        return False
