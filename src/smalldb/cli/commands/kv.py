"""CLI commands reading and writing store entries."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Literal

import typer
import yaml
from pydantic import JsonValue
from result import is_err

from smalldb.store import JsonStore, StoreError

FormatOption = Annotated[
    Literal["json", "yaml"],
    typer.Option("--format", "-f", show_default=True, case_sensitive=False, help="Output format (json or yaml)."),
]
KeyArgument = Annotated[str, typer.Argument(help="Entry key.")]


def get(ctx: typer.Context, key: KeyArgument) -> None:
    """Print the value stored under KEY as JSON."""
    store = _open_store(ctx)
    value, found = store.get(key)
    if not found:
        typer.secho(f"Key '{key}' not found", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(value, indent=2))


def set_(
    ctx: typer.Context,
    key: KeyArgument,
    value: Annotated[str, typer.Argument(help="JSON value (stored as a plain string if it is not valid JSON).")],
) -> None:
    """Store VALUE under KEY."""
    store = _open_store(ctx)
    result = store.set(key, _parse_value(value))
    if is_err(result):
        _handle_error(result.err())
        raise typer.Exit(code=1)


def delete(ctx: typer.Context, key: KeyArgument) -> None:
    """Remove KEY. Removing a missing key is not an error."""
    store = _open_store(ctx)
    result = store.delete(key)
    if is_err(result):
        _handle_error(result.err())
        raise typer.Exit(code=1)


def list_(ctx: typer.Context, format: FormatOption = "json") -> None:
    """Print every stored entry."""
    store = _open_store(ctx)
    typer.echo(_format_payload(store.get_all(), format.lower()))


def _open_store(ctx: typer.Context) -> JsonStore[JsonValue]:
    path: Path = ctx.obj
    result = JsonStore.open(path, JsonValue)
    if is_err(result):
        _handle_error(result.err())
        raise typer.Exit(code=1)
    return result.unwrap()


def _parse_value(raw: str) -> JsonValue:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _format_payload(payload: dict[str, JsonValue], format: str) -> str:
    if format == "yaml":
        return yaml.safe_dump(payload, sort_keys=True)
    return json.dumps(payload, indent=2, sort_keys=True)


def _handle_error(error: StoreError) -> None:
    message = error.message
    error_path = getattr(error, "path", None)
    if error_path is not None:
        message = f"{message} ({error_path})"

    typer.secho(message, err=True, fg=typer.colors.RED)
