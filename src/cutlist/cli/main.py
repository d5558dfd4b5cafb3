"""Typer CLI for cut list generation."""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Annotated

import typer

from cutlist.application import CutListOutput, GenerateCutListCommand
from cutlist.application.config import (
    ConfigError,
    ProjectConfiguration,
    load_config,
)
from cutlist.cli.commands import display_load_error, validate_command
from cutlist.domain import ConstructionSettings
from cutlist.infrastructure import CostReportFormatter, CutListFormatter, JsonExporter

OUTPUT_FORMATS = ("all", "cutlist", "costs", "json")

app = typer.Typer(
    name="cutlist",
    help="Generate cabinet cut lists and material cost estimates.",
)

# Register validate command
app.command(name="validate")(validate_command)


def _load(config_file: Path) -> ProjectConfiguration:
    try:
        return load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


def _run(config: ProjectConfiguration, force: bool) -> CutListOutput:
    try:
        command = GenerateCutListCommand.from_config(config)
        result = command.execute_config(config, validate=not force)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        typer.echo("Use --force to generate panels anyway.", err=True)
        raise typer.Exit(code=1)
    return result


@app.command()
def generate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: all, cutlist, costs, json"),
    ] = "all",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the output to a file instead of stdout"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", help="Generate panels even for cabinets that fail validation"),
    ] = False,
) -> None:
    """Generate the cut list and cost estimate of a project.

    Examples:
        cutlist generate kitchen.json
        cutlist generate kitchen.json --format json --output kitchen-cutlist.json
    """
    output_format = output_format.lower()
    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Error: unknown format '{output_format}'. "
            f"Choose one of: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    config = _load(config_file)
    result = _run(config, force)
    assert result.summary is not None

    if output_format == "json":
        text = JsonExporter().export(result)
    elif output_format == "cutlist":
        text = CutListFormatter().format(result.panels)
    elif output_format == "costs":
        text = CostReportFormatter().format(result.summary)
    else:
        text = "\n\n".join(
            [
                CutListFormatter().format(result.panels),
                CostReportFormatter().format(result.summary),
            ]
        )

    if output_file is not None:
        output_file.write_text(text + "\n", encoding="utf-8")
        typer.echo(f"Wrote {len(result.panels)} panels to {output_file}")
    else:
        typer.echo(text)


@app.command()
def estimate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file"),
    ],
    currency: Annotated[
        str,
        typer.Option("--currency", help="Currency label appended to amounts"),
    ] = "",
    force: Annotated[
        bool,
        typer.Option("--force", help="Estimate even for cabinets that fail validation"),
    ] = False,
) -> None:
    """Show only the material cost estimate and hardware list of a project."""
    config = _load(config_file)
    result = _run(config, force)
    assert result.summary is not None
    typer.echo(CostReportFormatter(currency=currency).format(result.summary))


@app.command()
def settings() -> None:
    """Print the default construction settings as JSON.

    The output can be copied into the "settings" section of a project
    file and edited there.
    """
    typer.echo(json.dumps(asdict(ConstructionSettings()), indent=2))


if __name__ == "__main__":
    app()
