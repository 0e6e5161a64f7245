from __future__ import annotations

import typer

from .. import console
from ..http import parse_json_option, run_call

app = typer.Typer(help="Pages inside groups.")


@app.command("get")
def get_page(ctx: typer.Context, page_id: int = typer.Argument(..., help="Page ID.")):
    run_call(ctx, lambda c: c.get_page(page_id))


@app.command("create")
def create_page(
        ctx: typer.Context,
        data: str = typer.Option(..., "--data", help="Page fields as a JSON object."),
):
    body = parse_json_option(data)
    run_call(ctx, lambda c: c.create_page(body))


@app.command("update")
def update_page(
        ctx: typer.Context,
        page_id: int = typer.Argument(..., help="Page ID."),
        data: str = typer.Option(..., "--data", help="Fields to change as a JSON object."),
):
    body = parse_json_option(data)
    run_call(ctx, lambda c: c.update_page(page_id, body))


@app.command("delete")
def delete_page(
        ctx: typer.Context,
        page_id: int = typer.Argument(..., help="Page ID."),
        yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
):
    if not yes and not typer.confirm(f"Delete page {page_id}?", default=False):
        console.info("Aborted.")
        raise typer.Exit(code=1)
    run_call(ctx, lambda c: c.delete_page(page_id))


@app.command("clone")
def clone_page(ctx: typer.Context, page_id: int = typer.Argument(..., help="Page ID.")):
    run_call(ctx, lambda c: c.clone_page(page_id))


@app.command("up")
def move_up(ctx: typer.Context, page_id: int = typer.Argument(..., help="Page ID.")):
    """Move the page one position up in its group."""
    run_call(ctx, lambda c: c.move_page_up(page_id))


@app.command("down")
def move_down(ctx: typer.Context, page_id: int = typer.Argument(..., help="Page ID.")):
    """Move the page one position down in its group."""
    run_call(ctx, lambda c: c.move_page_down(page_id))


@app.command("start")
def start_page(ctx: typer.Context, page_id: int = typer.Argument(..., help="Page ID.")):
    run_call(ctx, lambda c: c.start_page(page_id))


@app.command("stop")
def stop_page(ctx: typer.Context, page_id: int = typer.Argument(..., help="Page ID.")):
    run_call(ctx, lambda c: c.stop_page(page_id))
