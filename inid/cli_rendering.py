"""CLI output and error rendering helpers."""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import ConfigParseError, SchemaReferenceError
from .models.schema import ConfigSchema


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, ConfigParseError):
        typer.secho(
            f"{command_name} failed [{exc.code}]: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
    elif isinstance(exc, SchemaReferenceError):
        typer.secho(f"{command_name} failed: {exc.detail}", fg=typer.colors.RED, err=True)
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_check_summary(source: str, schema: ConfigSchema) -> None:
    """Print a one-line success summary and per-section field counts."""

    typer.echo(f"OK: {source} matches {len(schema.sections)} section(s)")
    for section in schema.sections:
        typer.echo(f"  [{section.name}] {len(section.fields)} field(s)")
