from __future__ import annotations

import typer

from ..http import run_call

app = typer.Typer(help="Account profile and work mode.")


@app.command("show")
def show_user(ctx: typer.Context):
    run_call(ctx, lambda c: c.get_user())


@app.command("auto-mode")
def auto_mode(ctx: typer.Context):
    """Switch the account to automatic mode."""
    run_call(ctx, lambda c: c.set_auto_mode())


@app.command("manual-mode")
def manual_mode(ctx: typer.Context):
    """Switch the account to manual mode."""
    run_call(ctx, lambda c: c.set_manual_mode())
