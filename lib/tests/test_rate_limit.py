from __future__ import annotations

import threading
import time

import pytest

from livesurf_client.clock import SystemClock
from livesurf_client.rate_limit import SlidingWindowRateLimiter


def test_acquire_under_limit_does_not_wait(clock) -> None:
    limiter = SlidingWindowRateLimiter(3, clock=clock)
    for _ in range(3):
        assert limiter.acquire_slot() == 0.0
    assert clock.sleeps == []
    assert limiter.in_window() == 3


def test_burst_never_exceeds_ceiling_in_trailing_window(clock) -> None:
    limiter = SlidingWindowRateLimiter(10, clock=clock)
    dispatched: list[float] = []
    for _ in range(35):
        limiter.acquire_slot()
        dispatched.append(clock.now())

    for ts in dispatched:
        in_window = [t for t in dispatched if ts - 1.0 < t <= ts]
        assert len(in_window) <= 10
    assert dispatched[-1] == pytest.approx(3.0)


def test_wait_is_exact_remainder_of_window(clock) -> None:
    limiter = SlidingWindowRateLimiter(2, clock=clock)
    limiter.acquire_slot()
    clock.advance(0.3)
    limiter.acquire_slot()
    clock.advance(0.2)

    waited = limiter.acquire_slot()

    assert waited == pytest.approx(0.5)
    assert clock.sleeps == [pytest.approx(0.5)]


def test_old_entries_expire(clock) -> None:
    limiter = SlidingWindowRateLimiter(2, clock=clock)
    limiter.acquire_slot()
    limiter.acquire_slot()
    clock.advance(1.0)
    assert limiter.in_window() == 0
    assert limiter.acquire_slot() == 0.0
    assert clock.sleeps == []


def test_limit_must_be_positive() -> None:
    with pytest.raises(ValueError):
        SlidingWindowRateLimiter(0)


class _LockCheckingClock:
    def __init__(self) -> None:
        self.t = 0.0
        self.limiter: SlidingWindowRateLimiter | None = None
        self.locked_during_sleep: list[bool] = []

    def now(self) -> float:
        return self.t

    def sleep(self, seconds: float) -> None:
        self.locked_during_sleep.append(self.limiter._lock.locked())
        self.t += seconds


def test_lock_is_held_while_waiting_for_a_slot() -> None:
    clock = _LockCheckingClock()
    limiter = SlidingWindowRateLimiter(2, clock=clock)
    clock.limiter = limiter

    for _ in range(5):
        limiter.acquire_slot()

    assert clock.locked_during_sleep == [True, True]


def test_concurrent_threads_stay_under_ceiling() -> None:
    limit = 3
    window_s = 0.2
    limiter = SlidingWindowRateLimiter(limit, window_s=window_s, clock=SystemClock())
    start = threading.Barrier(6)
    counts: list[int] = []
    counts_lock = threading.Lock()

    def worker() -> None:
        start.wait()
        for _ in range(3):
            limiter.acquire_slot()
            seen = limiter.in_window()
            with counts_lock:
                counts.append(seen)

    threads = [threading.Thread(target=worker) for _ in range(6)]
    began = time.monotonic()
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)
    elapsed = time.monotonic() - began

    assert len(counts) == 18
    assert max(counts) <= limit
    # 18 slots at 3 per 0.2s window need at least five full windows
    assert elapsed >= 5 * window_s - 0.05
