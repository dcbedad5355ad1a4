"""Gradio methodology diagram for intent-aware financial QA retrieval."""

from __future__ import annotations

import logging
from functools import partial

import gradio as gr

from finqa_methodology.catalog import CLASSIFIER_STAGE, INPUT_STAGE, OUTPUT_STAGE, PipelineCatalog, get_catalog
from finqa_methodology.diagram.config import DiagramConfig
from finqa_methodology.diagram.render import (
    SUMMARY_TITLE,
    SelectorBox,
    render_arrow,
    render_detail_panel,
    render_selector_css,
    render_stage,
    selected_descriptor,
    selector_boxes,
    styled_summary,
)
from finqa_methodology.schema import PipelineId
from finqa_methodology.selection import SelectionState, on_pipeline_clicked

logger = logging.getLogger("FinQA-Methodology")

PAGE_HINT = "Click on any pipeline to see details"


def _box_classes(box: SelectorBox) -> list[str]:
    return ["pipeline-box", "pipeline-box-active"] if box.active else ["pipeline-box"]


# === UI Update Handlers ===


def detail_panel_update(state: SelectionState, catalog: PipelineCatalog | None = None) -> dict:
    """Show the selected pipeline's detail panel, or hide the panel when nothing is selected."""
    descriptor = selected_descriptor(catalog if catalog is not None else get_catalog(), state)
    if descriptor is None:
        return gr.update(value="", visible=False)
    return gr.update(value=render_detail_panel(descriptor), visible=True)


def selector_box_updates(state: SelectionState, catalog: PipelineCatalog | None = None) -> list[dict]:
    """Mark exactly the selected pipeline's box as active."""
    return [
        gr.update(variant="primary" if box.active else "secondary", elem_classes=_box_classes(box))
        for box in selector_boxes(catalog if catalog is not None else get_catalog(), state)
    ]


def on_pipeline_click(pipeline_id: PipelineId | str, state: SelectionState) -> tuple:
    """Handle a selector box click - returns new state, detail panel update and box updates."""
    new_state = on_pipeline_clicked(state, pipeline_id)
    return (new_state, detail_panel_update(new_state), *selector_box_updates(new_state))


# === UI Component Builders ===


def build_pipeline_row(catalog: PipelineCatalog, state: SelectionState) -> list[gr.Button]:
    """Build one selector button per pipeline, in catalog order."""
    with gr.Row(equal_height=True):
        return [
            gr.Button(
                box.label,
                elem_id=box.elem_id,
                elem_classes=_box_classes(box),
                variant="primary" if box.active else "secondary",
            )
            for box in selector_boxes(catalog, state)
        ]


# === Main App Factory ===


def create_methodology_app(config: DiagramConfig | None = None) -> gr.Blocks:
    """Create the Gradio methodology diagram application."""
    config = config or DiagramConfig.from_env()
    catalog = get_catalog()
    initial_state = SelectionState()

    with gr.Blocks(title=config.title, css=render_selector_css(catalog)) as app:
        gr.Markdown(f"# {config.title}")
        gr.Markdown(PAGE_HINT)

        selection_state = gr.State(initial_state)

        gr.HTML(
            render_stage(INPUT_STAGE, "input")
            + render_arrow()
            + render_stage(CLASSIFIER_STAGE, "classifier")
            + render_arrow()
        )
        buttons = build_pipeline_row(catalog, initial_state)
        detail_panel = gr.HTML(visible=False)
        gr.HTML(render_arrow() + render_stage(OUTPUT_STAGE, "output"))

        gr.Markdown(f"## {SUMMARY_TITLE}")
        gr.Dataframe(value=styled_summary(catalog), interactive=False)

        # Event handlers
        for descriptor, button in zip(catalog, buttons, strict=True):
            button.click(
                fn=partial(on_pipeline_click, descriptor.id),
                inputs=[selection_state],
                outputs=[selection_state, detail_panel, *buttons],
            )

    logger.info(f"Built methodology diagram with {len(catalog)} pipelines")
    return app


def launch(config: DiagramConfig | None = None) -> None:
    """Build the app and serve it with the given launch configuration."""
    config = config or DiagramConfig.from_env()
    app = create_methodology_app(config)
    logger.info(f"Serving methodology diagram on http://{config.host}:{config.port}")
    app.launch(server_name=config.host, server_port=config.port, share=config.share)


def main() -> None:
    """Launch the methodology diagram application."""
    launch()


if __name__ == "__main__":
    main()
