"""Single-selection toggle state for the pipeline selector boxes."""

import logging
from dataclasses import dataclass

from finqa_methodology.schema import PipelineId

logger = logging.getLogger("FinQA-Methodology")


@dataclass(frozen=True)
class SelectionState:
    """Currently selected pipeline, or None when no detail panel is shown."""

    selected: PipelineId | None = None

    def __post_init__(self) -> None:
        if self.selected is not None:
            object.__setattr__(self, "selected", PipelineId.parse(self.selected))

    def is_selected(self, pipeline_id: PipelineId | str) -> bool:
        return self.selected is PipelineId.parse(pipeline_id)

    def click(self, pipeline_id: PipelineId | str) -> "SelectionState":
        return on_pipeline_clicked(self, pipeline_id)


def on_pipeline_clicked(state: SelectionState, pipeline_id: PipelineId | str) -> SelectionState:
    """Apply a selector box click to the selection state.

    Clicking the selected pipeline clears the selection. Clicking any other pipeline
    replaces the selection, so at most one pipeline is ever selected.

    Args:
        state: Current selection state.
        pipeline_id: Pipeline whose selector box was clicked.

    Returns:
        New selection state. The input state is not modified.

    Raises:
        UnknownPipelineError: If pipeline_id is not one of the fixed pipelines.
    """
    clicked = PipelineId.parse(pipeline_id)
    if state.selected is clicked:
        logger.debug(f"Deselected pipeline '{clicked.value}'")
        return SelectionState()
    logger.debug(f"Selected pipeline '{clicked.value}'")
    return SelectionState(selected=clicked)
