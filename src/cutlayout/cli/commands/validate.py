"""Validate command for checking configuration files.

This module provides the `validate` command that checks a JSON configuration
file for errors and dry-runs the fit check of every piece against the stock,
without computing a layout.
"""

from pathlib import Path
from typing import Annotated

import typer

from cutlayout.application import GenerateCutLayoutCommand
from cutlayout.application.config import ConfigError, config_to_input, load_config


def display_config_error(error: ConfigError) -> None:
    """Display a configuration loading error on stderr.

    Args:
        error: The ConfigError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
            value = detail.get("value")
            if value is not None and not isinstance(value, dict):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a cut layout configuration file.

    Checks the configuration file for:
    - JSON syntax errors
    - Schema validation errors (missing fields, invalid values, etc.)
    - Pieces that cannot fit the stock panel once the kerf is added

    Exit codes:
        0 - Configuration is valid
        1 - Configuration has errors (cannot be used)

    Example:
        cutlayout validate kitchen.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_config_error(e)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    errors = GenerateCutLayoutCommand().check(config_to_input(config))
    if errors:
        typer.echo("Errors:", err=True)
        for error in errors:
            typer.echo(f"  - {error}", err=True)
        typer.echo()
        typer.echo(f"Validation failed: {len(errors)} error(s)", err=True)
        raise typer.Exit(code=1)

    total = sum(piece.quantity for piece in config.pieces)
    typer.echo(
        f"Stock: {config.stock.length:g} x {config.stock.width:g} mm, "
        f"kerf {config.kerf:g} mm"
    )
    typer.echo(f"Cut list: {len(config.pieces)} row(s), {total} piece(s)")
    typer.echo("Validation passed. Configuration is valid.")
