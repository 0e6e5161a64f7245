from __future__ import annotations

import typer

from .commands import catalog_cmd, groups_cmd, pages_cmd, settings_cmd, stats_cmd, user_cmd
from .config import ENV_API_KEY
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="livesurf",
        help="LiveSurf API command line client",
        no_args_is_help=True,
    )

    app.add_typer(settings_cmd.app, name="settings")
    app.add_typer(user_cmd.app, name="user")
    app.add_typer(groups_cmd.app, name="groups")
    app.add_typer(pages_cmd.app, name="pages")
    app.add_typer(catalog_cmd.app, name="catalog")
    app.command("stats")(stats_cmd.stats)

    @app.callback()
    def _main(
            ctx: typer.Context,
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
            api_key: str | None = typer.Option(
                None, "--api-key", envvar=ENV_API_KEY, help="API key.", show_envvar=True
            ),
            base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
    ):
        setup_logging(verbose)
        ctx.obj = {"api_key": api_key, "base_url": base_url}

    return app


app = _build_app()
