"""Validate command for checking project files.

Loads a project file, checks its material references and constructs every
wall, reporting the diagnostics without printing the elements.
"""

from pathlib import Path
from typing import Annotated

import typer

from strawbuild.application import ConstructWallsCommand, ProjectOutput
from strawbuild.application.config import (
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)
from strawbuild.domain import StrawbuildError


def display_load_error(error: ConfigError) -> None:
    """Display a configuration loading error on stderr."""
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
            path = detail.get("path") or "<root>"
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
            value = detail.get("value")
            if value is not None and not isinstance(value, (dict, list)):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def display_validation_result(result: ValidationResult) -> None:
    """Display material reference errors and warnings."""
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()


def _display_construction_diagnostics(output: ProjectOutput) -> tuple[int, int]:
    """Display grouped construction diagnostics per wall.

    Returns:
        Tuple of (error count, warning count) after grouping.
    """
    error_count = 0
    warning_count = 0
    for wall in output.walls:
        warnings, errors = wall.results.group_diagnostics()
        for diagnostic in errors:
            typer.echo(f"  [{wall.name}] error: {diagnostic.description}", err=True)
        for diagnostic in warnings:
            typer.echo(f"  [{wall.name}] warning: {diagnostic.description}")
        error_count += len(errors)
        warning_count += len(warnings)
    return error_count, warning_count


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file to validate"),
    ],
) -> None:
    """Validate a project file.

    Checks the project file for:
    - JSON syntax errors
    - Schema validation errors (missing required fields, invalid types, etc.)
    - Unknown or unsuitable materials
    - Construction errors and warnings of every wall

    Exit codes:
        0 - Project is valid with no warnings
        1 - Project has errors
        2 - Project is valid but has warnings

    Example:
        strawbuild validate house.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    result = validate_config(config)
    display_validation_result(result)
    if not result.is_valid:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        output = ConstructWallsCommand().execute(config)
    except StrawbuildError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    error_count, warning_count = _display_construction_diagnostics(output)
    warning_count += len(result.warnings)

    if error_count:
        typer.echo(
            f"Validation failed: {error_count} error(s), {warning_count} warning(s)",
            err=True,
        )
        raise typer.Exit(code=1)
    if warning_count:
        typer.echo(f"Validation passed with {warning_count} warning(s)")
        raise typer.Exit(code=2)
    typer.echo("Validation passed. Project is valid.")
    raise typer.Exit(code=0)
