from __future__ import annotations

import json
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx

from .backoff import backoff_delay
from .clock import Clock, SystemClock
from .config_types import ClientConfig
from .errors import ApiError, AuthError, NetworkError
from .rate_limit import SlidingWindowRateLimiter

log = logging.getLogger(__name__)

ALLOWED_METHODS = frozenset({"GET", "POST", "PATCH", "DELETE"})
MAX_DETAILS_CHARS = 1000


class RetryReason(str, Enum):
    RATE_LIMITED = "rate_limited"
    SERVER_ERROR = "server_error"
    NETWORK = "network"


class CallState(str, Enum):
    ATTEMPTING = "attempting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class Success:
    payload: Any


@dataclass(frozen=True)
class RetryableFailure:
    reason: RetryReason
    message: str
    status_code: int | None = None
    details: str | None = None
    cause: Exception | None = None


@dataclass(frozen=True)
class FatalFailure:
    status_code: int
    message: str
    details: str | None = None


Outcome = Success | RetryableFailure | FatalFailure


def classify_status(status_code: int) -> RetryReason | None:
    if status_code == 429:
        return RetryReason.RATE_LIMITED
    if 500 <= status_code < 600:
        return RetryReason.SERVER_ERROR
    return None


def next_state(outcome: Outcome, attempt: int, max_retries: int) -> CallState:
    """Transition out of ATTEMPTING(attempt) for the given outcome."""
    if isinstance(outcome, Success):
        return CallState.SUCCEEDED
    if isinstance(outcome, FatalFailure):
        return CallState.FAILED
    if attempt <= max_retries:
        return CallState.ATTEMPTING
    return CallState.FAILED


def decode_body(text: str) -> Any:
    """Parse a response body as JSON, passing non-JSON text through unchanged."""
    try:
        return json.loads(text)
    except ValueError:
        return text


def _error_message(data: Any, text: str) -> str:
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])
    return text


def _describe(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


class Dispatcher:
    """
    Sends one logical request to completion.

    Every attempt, retries included, first takes a slot from the rate limiter.
    429 and 5xx responses and transport errors are retried with exponential
    backoff up to `cfg.max_retries` times; any other non-2xx status fails on
    the first attempt.
    """

    def __init__(
            self,
            cfg: ClientConfig,
            *,
            transport: httpx.BaseTransport | None = None,
            clock: Clock | None = None,
            rng: random.Random | None = None,
    ):
        self._cfg = cfg
        self._clock = clock or SystemClock()
        self._rng = rng
        self._limiter = SlidingWindowRateLimiter(cfg.rate_limit, clock=self._clock)
        headers = {
            "Accept": "application/json",
            "Authorization": cfg.api_key,
            "Content-Type": "application/json",
            "User-Agent": cfg.user_agent,
        }
        self._client = httpx.Client(
            base_url=cfg.base_url,
            timeout=cfg.timeout_s,
            headers=headers,
            follow_redirects=True,
            transport=transport,
        )

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    @property
    def limiter(self) -> SlidingWindowRateLimiter:
        return self._limiter

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> Dispatcher:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def execute(
            self,
            method: str,
            path: str,
            body: Any | None = None,
            *,
            params: dict[str, Any] | None = None,
    ) -> Any:
        """
        Perform `method` on `path` and return the decoded response body.

        Makes at most `cfg.max_attempts` attempts. Raises ApiError (AuthError
        for 401/403) for failing HTTP statuses and NetworkError when the
        transport keeps failing.

        `cfg.timeout_s` is applied by httpx to each phase of an attempt
        (connect, write, each read, pool acquisition), not to the attempt as
        a whole, so a peer that trickles bytes can keep one attempt open
        longer than `timeout_s`.
        """
        verb = method.upper()
        if verb not in ALLOWED_METHODS:
            raise ValueError(f"unsupported method: {method}")
        endpoint = path.lstrip("/")

        attempt = 1
        while True:
            self._limiter.acquire_slot()
            log.debug("%s /%s attempt %d/%d", verb, endpoint, attempt, self._cfg.max_attempts)
            outcome = self._send(verb, endpoint, body, params)
            state = next_state(outcome, attempt, self._cfg.max_retries)

            if state is CallState.SUCCEEDED:
                return outcome.payload
            if state is CallState.FAILED:
                if isinstance(outcome, RetryableFailure) and outcome.reason is RetryReason.NETWORK:
                    raise NetworkError(f"Connection error: {outcome.message}") from outcome.cause
                raise self._api_error(outcome)

            delay = backoff_delay(attempt, self._cfg.initial_backoff_s, rng=self._rng)
            log.warning(
                "%s /%s failed (%s: %s), retry %d/%d in %.2fs",
                verb,
                endpoint,
                outcome.reason.value,
                outcome.status_code or outcome.message,
                attempt,
                self._cfg.max_retries,
                delay,
            )
            self._clock.sleep(delay)
            attempt += 1

    def _send(self, verb: str, endpoint: str, body: Any | None, params: dict[str, Any] | None) -> Outcome:
        try:
            r = self._client.request(verb, endpoint, json=body, params=params)
        except httpx.RequestError as e:
            return RetryableFailure(RetryReason.NETWORK, _describe(e), cause=e)

        text = r.text
        data = decode_body(text)
        if r.is_success:
            return Success(data)

        message = _error_message(data, text) or f"{verb} /{endpoint} failed with {r.status_code}"
        details = text[:MAX_DETAILS_CHARS] if text else None
        reason = classify_status(r.status_code)
        if reason is not None:
            return RetryableFailure(reason, message, status_code=r.status_code, details=details)
        return FatalFailure(r.status_code, message, details)

    @staticmethod
    def _api_error(outcome: RetryableFailure | FatalFailure) -> ApiError:
        status = outcome.status_code or 0
        msg = f"API error ({status}): {outcome.message}"
        if status in (401, 403):
            return AuthError(status, msg, outcome.details)
        return ApiError(status, msg, outcome.details)
