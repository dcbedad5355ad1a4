"""serve command - Launch the methodology diagram web app."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from omegaconf.errors import OmegaConfBaseException

from finqa_methodology.diagram.config import DiagramConfig
from finqa_methodology.diagram.ui import launch

logger = logging.getLogger("FinQA-Methodology")


def serve(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="YAML file with host, port, share and title keys"),
    ] = None,
    host: Annotated[str | None, typer.Option("--host", help="Server host (default: FINQA_DIAGRAM_HOST)")] = None,
    port: Annotated[int | None, typer.Option("--port", help="Server port (default: FINQA_DIAGRAM_PORT)")] = None,
    share: Annotated[
        bool | None, typer.Option("--share/--no-share", help="Create a public Gradio share link")
    ] = None,
) -> None:
    """Launch the interactive methodology diagram.

    Options given on the command line override the config file, which overrides
    FINQA_DIAGRAM_* environment variables.

    Examples:
      finqa-methodology serve
      finqa-methodology serve --port 8080
      finqa-methodology serve --config configs/diagram.yaml --share
    """
    try:
        config = DiagramConfig.from_yaml(config_file) if config_file else DiagramConfig.from_env()
    except (FileNotFoundError, ValueError, OmegaConfBaseException) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None
    if config_file:
        logger.info(f"Loaded diagram config from {config_file}")

    if host is not None:
        config.host = host
    if port is not None:
        config.port = port
    if share is not None:
        config.share = share

    launch(config)
