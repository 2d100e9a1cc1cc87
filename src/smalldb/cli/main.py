from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer

from smalldb.common import create_logger, setup_cli_logging
from smalldb.settings import get_settings

from .commands import kv as kv_commands

logger = create_logger("cli")

app = typer.Typer(
    help="smalldb command-line interface.",
    context_settings={"help_option_names": ["-h", "--help"]},
)
app.command("get")(kv_commands.get)
app.command("set")(kv_commands.set_)
app.command("delete")(kv_commands.delete)
app.command("list")(kv_commands.list_)


@app.callback(invoke_without_command=True)
def _root_callback(
    ctx: typer.Context,
    db: Annotated[
        Path | None,
        typer.Option("--db", help="Database file (defaults to the configured database path)."),
    ] = None,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output")] = False,
) -> None:
    # Respect NO_COLOR environment variable and --no-color flag
    if no_color or os.getenv("NO_COLOR"):
        ctx.color = False

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    ctx.obj = db if db is not None else get_settings().database.path
    logger.debug("Using database", path=str(ctx.obj), command=ctx.invoked_subcommand)


def _setup_logging() -> None:
    settings = get_settings()
    if settings.logging.enabled:
        setup_cli_logging(app_info=settings.app, config=settings.logging)
        logger.debug("CLI logging initialized", config=settings.logging.model_dump())


def main() -> None:
    """Entrypoint for the smalldb CLI."""
    _setup_logging()
    app()
