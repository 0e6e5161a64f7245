from __future__ import annotations

import math
import random

JITTER_RATIO = 0.2


def backoff_delay(attempt: int, initial_backoff_s: float, *, rng: random.Random | None = None) -> float:
    """
    Delay in seconds before retrying after failed attempt number `attempt`.

    The base doubles per attempt starting from `initial_backoff_s`; a uniform
    integer jitter of up to 20% of the base (in milliseconds) is added or
    subtracted. Negative results are clamped to zero.
    """
    if attempt < 1:
        raise ValueError(f"attempt must be >= 1, got {attempt}")
    source = rng or random
    base_ms = initial_backoff_s * 1000 * (2 ** (attempt - 1))
    jitter_ms = math.floor(base_ms * JITTER_RATIO)
    delay_ms = base_ms + source.randint(-jitter_ms, jitter_ms)
    return max(0.0, delay_ms / 1000)
