"""Typer-based CLI application for FinQA-Methodology."""

import logging
from importlib.metadata import version as get_version
from typing import Annotated

import typer

from finqa_methodology.cli.commands.serve import serve
from finqa_methodology.cli.commands.show import list_pipelines, show_pipeline, show_summary

# Configure logging for CLI output
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"finqa-methodology {get_version('finqa-methodology')}")
        raise typer.Exit()


# Main Typer app
app = typer.Typer(
    name="finqa-methodology",
    help="FinQA-Methodology CLI - explore the intent-aware retrieval pipelines.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """FinQA-Methodology CLI - explore the intent-aware retrieval pipelines."""


app.command(name="serve")(serve)
app.command(name="list")(list_pipelines)
app.command(name="show")(show_pipeline)
app.command(name="summary")(show_summary)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
