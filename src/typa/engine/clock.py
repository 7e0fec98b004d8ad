"""Session timing."""

from __future__ import annotations

import time
from collections.abc import Callable


class SessionClock:
    """Elapsed time since the first keystroke, frozen once the session ends.

    Times are seconds as floats. ``now`` is injectable so tests can drive
    the clock by hand.
    """

    def __init__(
        self,
        mode_limit: float | None = None,
        now: Callable[[], float] = time.monotonic,
    ) -> None:
        self.mode_limit = mode_limit
        self._now = now
        self._started_at: float | None = None
        self._frozen: float | None = None

    @property
    def started(self) -> bool:
        return self._started_at is not None

    @property
    def stopped(self) -> bool:
        return self._frozen is not None

    def start(self) -> None:
        """Record the start instant. Later calls do nothing."""
        if self._started_at is None:
            self._started_at = self._now()

    def stop(self, clamp_to_limit: bool = False) -> float:
        """Freeze elapsed time and return it.

        With ``clamp_to_limit`` the frozen value never exceeds the mode limit,
        so a time test that is noticed a few milliseconds late still reports
        exactly its configured duration.
        """
        if self._frozen is None:
            elapsed = self.elapsed()
            if clamp_to_limit and self.mode_limit is not None:
                elapsed = min(elapsed, float(self.mode_limit))
            self._frozen = elapsed
        return self._frozen

    def elapsed(self) -> float:
        if self._frozen is not None:
            return self._frozen
        if self._started_at is None:
            return 0.0
        return max(0.0, self._now() - self._started_at)

    def is_expired(self, mode_limit: float | None = None) -> bool:
        """True once elapsed time reaches the limit. No limit never expires."""
        limit = self.mode_limit if mode_limit is None else mode_limit
        if limit is None or not self.started:
            return False
        return self.elapsed() >= limit

    def remaining(self) -> float | None:
        if self.mode_limit is None:
            return None
        return max(0.0, float(self.mode_limit) - self.elapsed())
