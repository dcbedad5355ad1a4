"""Data model for the intent-aware retrieval methodology diagram."""

from dataclasses import dataclass
from enum import Enum

from finqa_methodology.exceptions import EmptyPipelineStepsError, UnknownPipelineError


class PipelineId(str, Enum):
    """Closed set of retrieval pipelines, one per query intent."""

    ADVICE = "advice"
    COMPARISON = "comparison"
    FACTUAL = "factual"
    EXPLANATION = "explanation"

    @classmethod
    def parse(cls, value: "PipelineId | str") -> "PipelineId":
        """Convert a raw id into a PipelineId, failing fast on anything else."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownPipelineError(value, [member.value for member in cls]) from None


@dataclass(frozen=True)
class PipelineStep:
    """One stage of a retrieval pipeline.

    Attributes:
        name: Short label of the processing stage.
        technique: Short label of the underlying method or tool.
        detail: Free-form description. Embedded newlines are rendered as separate lines.
    """

    name: str
    technique: str
    detail: str

    @property
    def detail_lines(self) -> list[str]:
        return self.detail.split("\n")


@dataclass(frozen=True)
class PipelineDescriptor:
    """One retrieval strategy shown in the diagram.

    Attributes:
        id: Pipeline identifier.
        title: Title shown on the detail panel.
        selector_label: Short label shown on the selector box.
        example_query: Sample user query this pipeline is meant for.
        accent_color: Hex color used for the selector box, detail panel and summary row.
        steps: Processing steps in execution order.
    """

    id: PipelineId
    title: str
    selector_label: str
    example_query: str
    accent_color: str
    steps: tuple[PipelineStep, ...]

    def __post_init__(self) -> None:
        if not self.steps:
            raise EmptyPipelineStepsError(self.id.value)


@dataclass(frozen=True)
class SummaryRow:
    """Row of the intent-specific ranking signals table."""

    pipeline_id: PipelineId
    intent: str
    primary_signal: str
    secondary_signals: str
    key_tech: str


@dataclass(frozen=True)
class DiagramStage:
    """Fixed, non-interactive box of the diagram (input, classifier, output)."""

    heading: str
    label: str
    caption: str
    italic_caption: bool = False
