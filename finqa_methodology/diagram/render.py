"""Pure rendering of the methodology diagram from catalog and selection state.

Everything here is a deterministic function of its inputs so the Gradio layer
only has to map the results onto component updates.
"""

from dataclasses import dataclass
from html import escape

import pandas as pd

from finqa_methodology.catalog import SUMMARY_ROWS, PipelineCatalog
from finqa_methodology.schema import DiagramStage, PipelineDescriptor, PipelineId, SummaryRow
from finqa_methodology.selection import SelectionState

SUMMARY_TITLE = "Summary: Intent-Specific Ranking Signals"
SUMMARY_COLUMNS = ["Intent", "Primary Signal", "Secondary Signals", "Key Tech"]

_ARROW_SVG = (
    '<div class="diagram-arrow" style="display:flex;justify-content:center;margin:8px 0;">'
    '<svg width="24" height="32" viewBox="0 0 24 24" fill="none" stroke="#9ca3af">'
    '<path d="M12 4v12m0 0l-4-4m4 4l4-4" stroke-width="2"/>'
    "</svg></div>"
)

_STAGE_COLORS = {
    "input": ("#eff6ff", "#60a5fa", "#2563eb"),
    "classifier": ("#fff7ed", "#fb923c", "#ea580c"),
    "output": ("#eef2ff", "#818cf8", "#4f46e5"),
}


@dataclass(frozen=True)
class SelectorBox:
    """Display state of one clickable pipeline box."""

    pipeline_id: PipelineId
    label: str
    accent_color: str
    active: bool

    @property
    def elem_id(self) -> str:
        return f"pipeline-{self.pipeline_id.value}"


def selector_boxes(catalog: PipelineCatalog, state: SelectionState) -> list[SelectorBox]:
    """Build one selector box per pipeline, active iff it is the current selection."""
    return [
        SelectorBox(
            pipeline_id=descriptor.id,
            label=descriptor.selector_label,
            accent_color=descriptor.accent_color,
            active=state.selected is descriptor.id,
        )
        for descriptor in catalog
    ]


def selected_descriptor(catalog: PipelineCatalog, state: SelectionState) -> PipelineDescriptor | None:
    if state.selected is None:
        return None
    return catalog.get(state.selected)


def render_arrow() -> str:
    return _ARROW_SVG


def render_stage(stage: DiagramStage, kind: str) -> str:
    """Render a fixed diagram box (input, classifier or output) as HTML."""
    background, border, heading_color = _STAGE_COLORS[kind]
    caption_style = "font-size:12px;color:#6b7280;margin-top:4px;"
    if stage.italic_caption:
        caption_style += "font-style:italic;"
    return (
        '<div style="display:flex;justify-content:center;">'
        f'<div class="diagram-stage diagram-stage-{kind}" style="background:{background};'
        f"border:2px solid {border};border-radius:8px;padding:16px;text-align:center;max-width:28rem;\">"
        f'<div style="font-size:14px;font-weight:600;color:{heading_color};">{escape(stage.heading)}</div>'
        f'<div style="color:#374151;margin-top:4px;">{escape(stage.label)}</div>'
        f'<div style="{caption_style}">{escape(stage.caption)}</div>'
        "</div></div>"
    )


def render_detail_panel(descriptor: PipelineDescriptor) -> str:
    """Render the detail panel of a pipeline as HTML.

    Steps are numbered in stored order. Line breaks in a step's detail become <br> tags.
    """
    color = descriptor.accent_color
    step_items = []
    for index, step in enumerate(descriptor.steps, start=1):
        detail_html = "<br>".join(escape(line) for line in step.detail_lines)
        step_items.append(
            '<div class="pipeline-step" style="background:white;border-radius:8px;padding:12px;'
            'box-shadow:0 1px 2px rgba(0,0,0,0.05);display:flex;gap:12px;align-items:flex-start;">'
            f'<div class="pipeline-step-number" style="background:{color};color:white;border-radius:9999px;'
            "width:24px;height:24px;flex-shrink:0;display:flex;align-items:center;justify-content:center;"
            f'font-size:14px;font-weight:700;">{index}</div>'
            "<div>"
            f'<div class="pipeline-step-name" style="font-weight:600;color:#1f2937;">{escape(step.name)}</div>'
            f'<div class="pipeline-step-technique" style="font-size:12px;color:#6b7280;font-family:monospace;">'
            f"{escape(step.technique)}</div>"
            f'<div class="pipeline-step-detail" style="font-size:14px;color:#4b5563;margin-top:4px;">'
            f"{detail_html}</div>"
            "</div></div>"
        )

    return (
        f'<div class="pipeline-detail" data-pipeline="{descriptor.id.value}" '
        f'style="background:{color}10;border-left:4px solid {color};border-radius:8px;padding:24px;">'
        f'<h3 style="color:{color};font-weight:700;font-size:18px;margin:0 0 8px 0;">{escape(descriptor.title)}</h3>'
        f'<p style="color:#4b5563;font-style:italic;font-size:14px;margin:0 0 16px 0;">'
        f"Example: {escape(descriptor.example_query)}</p>"
        f'<div style="display:flex;flex-direction:column;gap:12px;">{"".join(step_items)}</div>'
        "</div>"
    )


def render_detail_text(descriptor: PipelineDescriptor) -> str:
    """Render the detail panel of a pipeline as plain text for the terminal."""
    lines = [descriptor.title, f"Example: {descriptor.example_query}", ""]
    for index, step in enumerate(descriptor.steps, start=1):
        lines.append(f"  {index}. {step.name}  [{step.technique}]")
        lines.extend(f"     {line}" for line in step.detail_lines)
    return "\n".join(lines)


def render_selector_css(catalog: PipelineCatalog) -> str:
    """CSS giving each selector box its accent color, tinted when active."""
    rules = []
    for descriptor in catalog:
        selector = f"#pipeline-{descriptor.id.value}"
        color = descriptor.accent_color
        rules.append(
            f"{selector} {{ border: 2px solid {color} !important; color: {color} !important; "
            "background: white !important; font-weight: 700; }"
        )
        rules.append(
            f"{selector}.pipeline-box-active {{ background: {color}15 !important; "
            "box-shadow: 0 10px 15px -3px rgba(0,0,0,0.1); transform: scale(1.05); }"
        )
    return "\n".join(rules)


def summary_dataframe(rows: tuple[SummaryRow, ...] = SUMMARY_ROWS) -> pd.DataFrame:
    """Build the static ranking-signals summary table."""
    return pd.DataFrame(
        [[row.intent, row.primary_signal, row.secondary_signals, row.key_tech] for row in rows],
        columns=SUMMARY_COLUMNS,
    )


def styled_summary(catalog: PipelineCatalog, rows: tuple[SummaryRow, ...] = SUMMARY_ROWS):
    """Summary table with each intent label tinted by its pipeline's accent color."""
    colors = [catalog.get(row.pipeline_id).accent_color for row in rows]
    return summary_dataframe(rows).style.apply(
        lambda column: [f"color: {color}; font-weight: 600" for color in colors],
        subset=["Intent"],
    )
