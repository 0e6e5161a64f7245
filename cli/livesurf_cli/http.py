from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import typer
from livesurf_client import ApiError, AuthError, LiveSurfClient, NetworkError
from livesurf_client.config_types import ClientConfig

from . import console
from .config import ENV_API_KEY, AppConfig, load_config, resolve_api_key, resolve_base_url


def make_client(
    cfg: AppConfig,
    *,
    api_key: str | None,
    base_url_override: str | None,
) -> LiveSurfClient:
    key = resolve_api_key(api_key)
    if not key:
        console.err(f"API key is not set. Pass --api-key or export {ENV_API_KEY}.")
        raise typer.Exit(code=2)
    return LiveSurfClient(
        ClientConfig(
            api_key=key,
            base_url=resolve_base_url(cfg, base_url_override),
            timeout_s=cfg.timeout_s,
            rate_limit=cfg.rate_limit,
            max_retries=cfg.max_retries,
            initial_backoff_s=cfg.initial_backoff_s,
        )
    )


def parse_json_option(raw: str | None, *, option: str = "--data") -> dict[str, Any] | None:
    if raw is None:
        return None
    try:
        data = json.loads(raw)
    except ValueError as exc:
        console.err(f"{option} is not valid JSON: {exc}")
        raise typer.Exit(code=2)
    if not isinstance(data, dict):
        console.err(f"{option} must be a JSON object.")
        raise typer.Exit(code=2)
    return data


def run_call(ctx: typer.Context, call: Callable[[LiveSurfClient], Any]) -> Any:
    """Build a client from local settings, run one call and print its result."""
    opts = ctx.obj or {}
    client = make_client(load_config(), api_key=opts.get("api_key"), base_url_override=opts.get("base_url"))
    try:
        data = call(client)
    except AuthError as e:
        console.err(f"Unauthorized: {e}")
        raise typer.Exit(code=2)
    except ApiError as e:
        console.err(str(e))
        raise typer.Exit(code=2)
    except NetworkError as e:
        console.err(str(e))
        raise typer.Exit(code=2)
    finally:
        client.close()
    console.print_json(data)
    return data
