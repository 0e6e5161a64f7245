from __future__ import annotations

import typer
from livesurf_client.client import SOURCE_KINDS

from .. import console
from ..http import run_call

app = typer.Typer(help="Reference data: categories, countries, languages, traffic sources.")


@app.command("categories")
def categories(ctx: typer.Context):
    run_call(ctx, lambda c: c.get_categories())


@app.command("countries")
def countries(ctx: typer.Context):
    run_call(ctx, lambda c: c.get_countries())


@app.command("languages")
def languages(ctx: typer.Context):
    run_call(ctx, lambda c: c.get_languages())


@app.command("sources")
def sources(
        ctx: typer.Context,
        kind: str = typer.Argument(..., help=f"Source kind: {', '.join(SOURCE_KINDS)}."),
):
    k = kind.strip().lower()
    if k not in SOURCE_KINDS:
        console.err(f"Unknown source kind: {kind}. Use {', '.join(SOURCE_KINDS)}.")
        raise typer.Exit(code=2)
    run_call(ctx, lambda c: c.get_sources(k))
