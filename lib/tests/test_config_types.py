from __future__ import annotations

import dataclasses

import pytest

from livesurf_client.config_types import DEFAULT_BASE_URL, ClientConfig


def test_defaults() -> None:
    cfg = ClientConfig(api_key="key")
    assert cfg.base_url == DEFAULT_BASE_URL
    assert cfg.timeout_s == 15.0
    assert cfg.rate_limit == 10
    assert cfg.max_retries == 3
    assert cfg.initial_backoff_s == 0.5
    assert cfg.max_attempts == 4


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("https://example.test", "https://example.test/"),
        ("https://example.test///", "https://example.test/"),
        ("https://example.test/api/", "https://example.test/api/"),
    ],
)
def test_base_url_ends_with_single_slash(raw: str, expected: str) -> None:
    assert ClientConfig(api_key="key", base_url=raw).base_url == expected


@pytest.mark.parametrize(
    "kwargs",
    [
        {"api_key": ""},
        {"api_key": "key", "base_url": "///"},
        {"api_key": "key", "timeout_s": 0},
        {"api_key": "key", "rate_limit": 0},
        {"api_key": "key", "max_retries": -1},
        {"api_key": "key", "initial_backoff_s": -0.1},
    ],
)
def test_invalid_values_rejected(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        ClientConfig(**kwargs)


def test_config_is_immutable() -> None:
    cfg = ClientConfig(api_key="key")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.rate_limit = 5  # type: ignore[misc]


def test_zero_retries_allowed() -> None:
    assert ClientConfig(api_key="key", max_retries=0).max_attempts == 1
