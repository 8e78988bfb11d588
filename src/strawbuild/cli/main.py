"""Typer CLI for straw-bale wall construction."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from strawbuild.application import ConstructWallsCommand
from strawbuild.application.config import ConfigError, load_config, validate_config
from strawbuild.cli.commands import (
    display_load_error,
    display_validation_result,
    materials_command,
    validate_command,
)
from strawbuild.domain import StrawbuildError
from strawbuild.infrastructure import JsonExporter, ReportFormatter


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


app = typer.Typer(
    name="strawbuild",
    help="Generate straw-bale wall constructions from a project file.",
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Generate straw-bale wall constructions from a project file."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
app.command(name="validate")(validate_command)
app.command(name="materials")(materials_command)


@app.command()
def construct(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file"),
    ],
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = OutputFormat.TEXT,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the output to this file"),
    ] = None,
    elements: Annotated[
        bool,
        typer.Option(
            "--elements/--no-elements",
            help="Include the element table in the text report",
        ),
    ] = True,
) -> None:
    """Construct every wall of a project and report the result.

    Exit codes:
        0 - All walls constructed without problems
        1 - Configuration error or construction errors
        2 - Constructed with warnings

    Examples:
        strawbuild construct house.json
        strawbuild construct house.json --format json --output house-result.json
    """
    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_config(config)
    if not result.is_valid:
        display_validation_result(result)
        raise typer.Exit(code=1)

    try:
        output = ConstructWallsCommand().execute(config)
    except StrawbuildError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if output_format == OutputFormat.JSON:
        text = JsonExporter().export(output)
    else:
        text = ReportFormatter(show_elements=elements).format(output)

    if output_file is not None:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(text)
        typer.echo(f"Output written to: {output_file}")
    else:
        typer.echo(text)

    raise typer.Exit(code=output.exit_code)


if __name__ == "__main__":
    app()
