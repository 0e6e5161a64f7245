from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.livesurf.ru/"
DEFAULT_USER_AGENT = "livesurf-client/1.0.0"


def normalize_api_root(base_url: str) -> str:
    return base_url.strip().rstrip("/") + "/"


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = 15.0
    rate_limit: int = 10
    max_retries: int = 3
    initial_backoff_s: float = 0.5
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        if not (self.api_key or "").strip():
            raise ValueError("api_key must not be empty")
        if not (self.base_url or "").strip().rstrip("/"):
            raise ValueError("base_url must not be empty")
        if self.timeout_s <= 0:
            raise ValueError(f"timeout_s must be > 0, got {self.timeout_s}")
        if self.rate_limit < 1:
            raise ValueError(f"rate_limit must be >= 1, got {self.rate_limit}")
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {self.max_retries}")
        if self.initial_backoff_s < 0:
            raise ValueError(f"initial_backoff_s must be >= 0, got {self.initial_backoff_s}")
        object.__setattr__(self, "base_url", normalize_api_root(self.base_url))

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1
