from .client import LiveSurfClient
from .config_types import ClientConfig
from .errors import ApiError, AuthError, LiveSurfError, NetworkError

__all__ = ["LiveSurfClient", "ClientConfig", "ApiError", "AuthError", "LiveSurfError", "NetworkError"]
