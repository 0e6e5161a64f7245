from __future__ import annotations

import os
import tomllib
from dataclasses import asdict, dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir
from livesurf_client.config_types import DEFAULT_BASE_URL

from . import console

APP_NAME = "livesurf"
CONFIG_FILENAME = "config.toml"
ENV_API_KEY = "LIVESURF_API_KEY"
ENV_BASE_URL = "LIVESURF_BASE_URL"

SETTING_KEYS = ("base_url", "timeout_s", "rate_limit", "max_retries", "initial_backoff_s")

_WARNED_BASE_URL_SCHEME = False


@dataclass
class AppConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = 15.0
    rate_limit: int = 10
    max_retries: int = 3
    initial_backoff_s: float = 0.5


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig()


def normalize_base_url(raw: str | None, *, warn: bool = False) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value + "/"

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        scheme = "http://"
    else:
        scheme = "https://"

    normalized = f"{scheme}{value}/"
    if warn:
        _warn_missing_scheme(normalized)
    return normalized


def _warn_missing_scheme(normalized: str) -> None:
    global _WARNED_BASE_URL_SCHEME
    if _WARNED_BASE_URL_SCHEME:
        return
    console.warn(f"base_url missing scheme, assuming {normalized}")
    _WARNED_BASE_URL_SCHEME = True


def _coerce(value: Any, kind: type, default: Any, *, minimum: float) -> Any:
    try:
        coerced = kind(value)
    except (TypeError, ValueError):
        return default
    if coerced < minimum:
        return default
    return coerced


def from_toml(data: dict[str, Any]) -> AppConfig:
    defaults = default_config()
    base_url = normalize_base_url(str(data.get("base_url") or ""), warn=True)
    timeout_s = _coerce(data.get("timeout_s", defaults.timeout_s), float, defaults.timeout_s, minimum=0.001)
    return AppConfig(
        base_url=base_url or defaults.base_url,
        timeout_s=timeout_s,
        rate_limit=_coerce(data.get("rate_limit", defaults.rate_limit), int, defaults.rate_limit, minimum=1),
        max_retries=_coerce(data.get("max_retries", defaults.max_retries), int, defaults.max_retries, minimum=0),
        initial_backoff_s=_coerce(
            data.get("initial_backoff_s", defaults.initial_backoff_s),
            float,
            defaults.initial_backoff_s,
            minimum=0,
        ),
    )


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return asdict(cfg)


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return default_config()
    except tomllib.TOMLDecodeError as exc:
        console.warn(f"Ignoring invalid config {path}: {exc}")
        return default_config()
    return from_toml(data)


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    return path


def resolve_base_url(cfg: AppConfig, override: str | None = None) -> str:
    raw = override or os.getenv(ENV_BASE_URL, "").strip() or cfg.base_url
    return normalize_base_url(raw, warn=True) or DEFAULT_BASE_URL


def resolve_api_key(option_value: str | None = None) -> str:
    return (option_value or os.getenv(ENV_API_KEY, "")).strip()
