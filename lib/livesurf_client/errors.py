from __future__ import annotations


class LiveSurfError(Exception):
    """Base client error."""


class NetworkError(LiveSurfError):
    """Transport/network layer error, raised once retries are exhausted."""


class ApiError(LiveSurfError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.details = details


class AuthError(ApiError):
    """Auth-related API error."""
