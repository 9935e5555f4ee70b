"""Command-line interface for inid.

Responsibilities:
- Expose commands that validate INI files against a declared schema.
- Resolve `module:attribute` schema references and parser options.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
import sys
from typing import Annotated, Any

import typer

from . import __version__
from .cli_rendering import echo_check_summary, exit_with_command_error
from .cli_runtime import load_schema_reference, resolve_parser_options
from .models.schema import ConfigSchema
from .parser import ConfigParser
from .telemetry.logger import configure_log_sink
from .writer import render_config

app = typer.Typer(
    name="inid",
    no_args_is_help=True,
    help="Validate INI configuration files against declared schemas.",
)

SchemaOption = Annotated[
    str,
    typer.Option(
        "--schema",
        "-s",
        help="Schema reference as `package.module:Attribute` (dataclass or ConfigSchema).",
    ),
]
EncodingOption = Annotated[
    str | None,
    typer.Option("--encoding", help="Config file encoding (overrides `INID_ENCODING`)."),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Log parse events to stderr."),
]


def _version_callback(value: bool) -> None:
    """Print the package version and exit when `--version` is passed."""

    if value:
        typer.echo(f"inid {__version__}")
        raise typer.Exit(0)


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Validate INI configuration files against declared schemas."""


def _parse_with_reference(
    config_path: Path,
    schema_reference: str,
    encoding: str | None,
    verbose: bool,
) -> tuple[ConfigSchema, Any]:
    """Resolve the schema and options, then parse the config file."""

    if verbose:
        configure_log_sink(sys.stderr, level="DEBUG", replace_handlers=True)
    schema = load_schema_reference(schema_reference)
    parser = ConfigParser(schema, resolve_parser_options(encoding))
    return schema, parser.parse_file(config_path)


@app.command("check")
def check_command(
    config_path: Annotated[Path, typer.Argument(help="Path to the INI file to validate.")],
    schema_reference: SchemaOption,
    encoding: EncodingOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Parse a config file and report whether it matches the schema."""

    try:
        schema, _ = _parse_with_reference(config_path, schema_reference, encoding, verbose)
    except Exception as exc:
        exit_with_command_error("check", exc)

    echo_check_summary(str(config_path), schema)


@app.command("show")
def show_command(
    config_path: Annotated[Path, typer.Argument(help="Path to the INI file to render.")],
    schema_reference: SchemaOption,
    encoding: EncodingOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Parse a config file and print its normalized INI rendering."""

    try:
        schema, record = _parse_with_reference(
            config_path, schema_reference, encoding, verbose
        )
        rendered = render_config(record, schema)
    except Exception as exc:
        exit_with_command_error("show", exc)

    typer.echo(rendered, nl=False)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
