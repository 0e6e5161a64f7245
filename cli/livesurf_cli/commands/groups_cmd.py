from __future__ import annotations

import typer

from .. import console
from ..http import parse_json_option, run_call

GROUPS_USAGE = """\
Usage:
  livesurf groups list
  livesurf groups get <id>
  livesurf groups create --data '<json>'
  livesurf groups update <id> --data '<json>'
  livesurf groups delete <id> [--yes]
  livesurf groups clone <id> [--data '<json>']
  livesurf groups add-credits <id> <credits>
"""

app = typer.Typer(help="Page groups.\n\n" + GROUPS_USAGE)


@app.command("list")
def list_groups(ctx: typer.Context):
    run_call(ctx, lambda c: c.get_groups())


@app.command("get")
def get_group(ctx: typer.Context, group_id: int = typer.Argument(..., help="Group ID.")):
    run_call(ctx, lambda c: c.get_group(group_id))


@app.command("create")
def create_group(
        ctx: typer.Context,
        data: str = typer.Option(..., "--data", help="Group fields as a JSON object."),
):
    body = parse_json_option(data)
    run_call(ctx, lambda c: c.create_group(body))


@app.command("update")
def update_group(
        ctx: typer.Context,
        group_id: int = typer.Argument(..., help="Group ID."),
        data: str = typer.Option(..., "--data", help="Fields to change as a JSON object."),
):
    body = parse_json_option(data)
    run_call(ctx, lambda c: c.update_group(group_id, body))


@app.command("delete")
def delete_group(
        ctx: typer.Context,
        group_id: int = typer.Argument(..., help="Group ID."),
        yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
):
    if not yes and not typer.confirm(f"Delete group {group_id}?", default=False):
        console.info("Aborted.")
        raise typer.Exit(code=1)
    run_call(ctx, lambda c: c.delete_group(group_id))


@app.command("clone")
def clone_group(
        ctx: typer.Context,
        group_id: int = typer.Argument(..., help="Group ID."),
        data: str | None = typer.Option(None, "--data", help="Overrides for the copy as a JSON object."),
):
    body = parse_json_option(data)
    run_call(ctx, lambda c: c.clone_group(group_id, body))


@app.command("add-credits")
def add_credits(
        ctx: typer.Context,
        group_id: int = typer.Argument(..., help="Group ID."),
        credits: int = typer.Argument(..., min=1, help="Credits to transfer to the group."),
):
    run_call(ctx, lambda c: c.add_group_credits(group_id, credits))
