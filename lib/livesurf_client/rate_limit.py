from __future__ import annotations

import logging
import threading
from collections import deque

from .clock import Clock, SystemClock

log = logging.getLogger(__name__)


class SlidingWindowRateLimiter:
    """
    Sliding-window rate limiter.

    Allows at most `limit` acquisitions in any trailing `window_s` seconds.
    The lock is held across the wait, so threads sharing one limiter are
    served one at a time and the ceiling holds exactly.
    """

    def __init__(self, limit: int, *, window_s: float = 1.0, clock: Clock | None = None):
        if limit < 1:
            raise ValueError(f"limit must be >= 1, got {limit}")
        self.limit = limit
        self.window_s = window_s
        self._clock = clock or SystemClock()
        self._timestamps: deque[float] = deque()
        self._lock = threading.Lock()

    def _prune(self, now: float) -> None:
        cutoff = now - self.window_s
        while self._timestamps and self._timestamps[0] <= cutoff:
            self._timestamps.popleft()

    def in_window(self) -> int:
        with self._lock:
            self._prune(self._clock.now())
            return len(self._timestamps)

    def acquire_slot(self) -> float:
        """Block until a request may be sent. Returns the time spent waiting."""
        waited = 0.0
        with self._lock:
            now = self._clock.now()
            self._prune(now)
            if len(self._timestamps) >= self.limit:
                wait = self.window_s - (now - self._timestamps[0])
                if wait > 0:
                    log.debug("rate limit reached (%d/%ss), waiting %.3fs", self.limit, self.window_s, wait)
                    self._clock.sleep(wait)
                    waited = wait
            self._timestamps.append(self._clock.now())
        return waited
