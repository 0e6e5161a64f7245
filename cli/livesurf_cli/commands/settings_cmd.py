from __future__ import annotations

import os

import typer
from livesurf_client.config_types import DEFAULT_BASE_URL

from .. import console
from ..config import (
    SETTING_KEYS,
    config_path,
    default_config,
    load_config,
    normalize_base_url,
    save_config,
)

app = typer.Typer(help="Manage local CLI settings (~/.config/livesurf/config.toml).")


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        base_url: str = typer.Option(
            DEFAULT_BASE_URL,
            "--base-url",
            help="API base URL.",
        ),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.base_url = normalize_base_url(base_url, warn=True)
    if not cfg.base_url:
        console.err("Base URL cannot be empty.")
        raise typer.Exit(code=2)
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_settings():
    cfg = load_config()
    console.console.print(
        f"base_url={cfg.base_url} timeout_s={cfg.timeout_s} rate_limit={cfg.rate_limit} "
        f"max_retries={cfg.max_retries} initial_backoff_s={cfg.initial_backoff_s}"
    )


@app.command("get")
def get_setting(
        key: str = typer.Argument(..., help=f"Setting key ({', '.join(SETTING_KEYS)})."),
):
    cfg = load_config()
    k = key.strip().lower()
    if k not in SETTING_KEYS:
        console.err(f"Unknown setting: {key}")
        raise typer.Exit(code=2)
    console.console.print(str(getattr(cfg, k)))


@app.command("set")
def set_setting(
        base_url: str | None = typer.Option(None, "--base-url", help="Set API base URL."),
        timeout_s: float | None = typer.Option(None, "--timeout", min=0.001, help="Per-request timeout, seconds."),
        rate_limit: int | None = typer.Option(None, "--rate-limit", min=1, help="Requests per second."),
        max_retries: int | None = typer.Option(None, "--max-retries", min=0, help="Retries on 429/5xx/network errors."),
        initial_backoff_s: float | None = typer.Option(
            None, "--initial-backoff", min=0, help="Delay before the first retry, seconds."
        ),
):
    cfg = load_config()
    if base_url is not None:
        cfg.base_url = normalize_base_url(base_url, warn=True)
        if not cfg.base_url:
            console.err("Base URL cannot be empty.")
            raise typer.Exit(code=2)
    if timeout_s is not None:
        cfg.timeout_s = timeout_s
    if rate_limit is not None:
        cfg.rate_limit = rate_limit
    if max_retries is not None:
        cfg.max_retries = max_retries
    if initial_backoff_s is not None:
        cfg.initial_backoff_s = initial_backoff_s
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
