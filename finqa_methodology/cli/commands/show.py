"""list/show/summary commands - Print pipeline details to the terminal."""

from typing import Annotated

import typer

from finqa_methodology.catalog import get_catalog
from finqa_methodology.diagram.render import SUMMARY_TITLE, render_detail_text, summary_dataframe
from finqa_methodology.exceptions import UnknownPipelineError


def list_pipelines() -> None:
    """List the available retrieval pipelines."""
    typer.echo("\nAvailable Pipelines:")
    typer.echo("-" * 60)
    for descriptor in get_catalog():
        typer.echo(f"  {descriptor.id.value:<12} {descriptor.title} ({len(descriptor.steps)} steps)")
    typer.echo("\nUse 'finqa-methodology show <pipeline>' to see its steps.")


def show_pipeline(
    pipeline: Annotated[str, typer.Argument(help="Pipeline id: advice, comparison, factual or explanation")],
) -> None:
    """Show the ordered steps of one pipeline.

    Examples:
      finqa-methodology show factual
      finqa-methodology show explanation
    """
    try:
        descriptor = get_catalog().get(pipeline)
    except UnknownPipelineError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None
    typer.echo(render_detail_text(descriptor))


def show_summary() -> None:
    """Show the intent-specific ranking signals table."""
    typer.echo(f"\n{SUMMARY_TITLE}")
    typer.echo("=" * 60)
    typer.echo(summary_dataframe().to_string(index=False))
