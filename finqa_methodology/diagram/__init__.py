"""Interactive methodology diagram built on Gradio."""

from finqa_methodology.diagram.config import DiagramConfig
from finqa_methodology.diagram.ui import create_methodology_app

__all__ = ["DiagramConfig", "create_methodology_app"]
