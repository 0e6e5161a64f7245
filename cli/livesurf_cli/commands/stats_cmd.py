from __future__ import annotations

import typer

from .. import console
from ..http import run_call


def parse_params(pairs: list[str]) -> dict[str, str]:
    params: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            console.err(f"Invalid parameter {pair!r}, expected key=value.")
            raise typer.Exit(code=2)
        params[key] = value.strip()
    return params


def stats(
        ctx: typer.Context,
        param: list[str] = typer.Option([], "--param", "-p", help="Query parameter as key=value (repeatable)."),
):
    """Compiled page statistics."""
    params = parse_params(param)
    run_call(ctx, lambda c: c.get_stats(params))
