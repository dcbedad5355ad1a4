"""Read-only catalog of the four intent-specific retrieval pipelines."""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from finqa_methodology.exceptions import IncompleteCatalogError, UnknownPipelineError
from finqa_methodology.schema import DiagramStage, PipelineDescriptor, PipelineId, PipelineStep, SummaryRow

_DESCRIPTORS = (
    PipelineDescriptor(
        id=PipelineId.ADVICE,
        title="ADVICE-SEEKING Pipeline",
        selector_label="💡 ADVICE",
        example_query='"Should I invest in index funds for retirement?"',
        accent_color="#22c55e",
        steps=(
            PipelineStep(
                name="Query2Doc Expansion",
                technique="LLM (GPT-4/Llama-3)",
                detail="Generate pseudo-document with relevant financial knowledge",
            ),
            PipelineStep(
                name="Hybrid Retrieval",
                technique="BM25 + E5-base + RRF",
                detail="Top-100 from each, merge with Reciprocal Rank Fusion",
            ),
            PipelineStep(
                name="Argument Quality Scoring",
                technique="Custom scorer",
                detail=(
                    "Discourse markers: 'because', 'therefore', 'for example'\n"
                    "Evidence detection: numerical data, citations\n"
                    "Personal experience: first-person markers"
                ),
            ),
            PipelineStep(
                name="Cross-Encoder Re-rank",
                technique="BGE-reranker-base",
                detail="Final = λ₁·CE + λ₂·ArgQuality + λ₃·DiscourseScore",
            ),
        ),
    ),
    PipelineDescriptor(
        id=PipelineId.COMPARISON,
        title="COMPARISON Pipeline",
        selector_label="⚖️ COMPARISON",
        example_query='"What is the difference between ETFs and mutual funds?"',
        accent_color="#f59e0b",
        steps=(
            PipelineStep(
                name="Entity Extraction",
                technique="SpaCy + regex patterns",
                detail="Extract Entity_A='ETF', Entity_B='mutual fund' from 'X vs Y' patterns",
            ),
            PipelineStep(
                name="Dual-Entity Retrieval",
                technique="Boolean + Dense filtering",
                detail="Query AND Entity_A AND Entity_B\nHard constraint: document MUST mention both",
            ),
            PipelineStep(
                name="Comparative Structure Scoring",
                technique="Custom financial scorer",
                detail=(
                    "Coverage balance: min(A,B)/max(A,B)\n"
                    "Comparative language: 'better than', 'whereas'\n"
                    "Aspect coverage: fees, risk, returns, liquidity, tax"
                ),
            ),
            PipelineStep(
                name="Cross-Encoder Re-rank",
                technique="BGE-reranker + constraints",
                detail="Reject docs missing either entity",
            ),
        ),
    ),
    PipelineDescriptor(
        id=PipelineId.FACTUAL,
        title="FACTUAL Pipeline",
        selector_label="📖 FACTUAL",
        example_query='"What is a Roth IRA?"',
        accent_color="#3b82f6",
        steps=(
            PipelineStep(
                name="Entity-Centric Query",
                technique="NER + pattern matching",
                detail="Extract main entity: 'Roth IRA'\nExpand: 'Roth IRA definition explanation'",
            ),
            PipelineStep(
                name="ColBERT Retrieval",
                technique="ColBERTv2 / RAGatouille",
                detail="Late interaction preserves term-level matching\nBetter for specific financial terms",
            ),
            PipelineStep(
                name="Definition Pattern Scoring",
                technique="Regex + dependency parse",
                detail=(
                    "Patterns: 'X is a...', 'X refers to...', 'X means...'\n"
                    "Entity prominence: early position = higher score"
                ),
            ),
            PipelineStep(
                name="RAG-Ready Output",
                technique="Extractive preparation",
                detail="Extract definitional sentences for downstream QA",
            ),
        ),
    ),
    PipelineDescriptor(
        id=PipelineId.EXPLANATION,
        title="EXPLANATION Pipeline",
        selector_label="❓ EXPLANATION",
        example_query='"Why do stock prices drop after earnings?"',
        accent_color="#ec4899",
        steps=(
            PipelineStep(
                name="HyDE Expansion",
                technique="LLM hypothesis generation",
                detail=(
                    "Generate: 'Stock prices drop after earnings because...'\n"
                    "Use embedding of hypothesis for retrieval"
                ),
            ),
            PipelineStep(
                name="Dense Retrieval",
                technique="E5-large embeddings",
                detail="Encode HyDE document, retrieve similar passages",
            ),
            PipelineStep(
                name="Causal Pattern Scoring",
                technique="Discourse relation mining",
                detail="Markers: 'because', 'due to', 'caused by', 'leads to'\nChain depth: A→B→C multi-step reasoning",
            ),
            PipelineStep(
                name="Cross-Encoder Re-rank",
                technique="BGE-reranker + causal score",
                detail="Prioritize documents with complete causal explanations",
            ),
        ),
    ),
)

# Literal text, not derived from the pipeline steps.
SUMMARY_ROWS: tuple[SummaryRow, ...] = (
    SummaryRow(
        pipeline_id=PipelineId.ADVICE,
        intent="ADVICE",
        primary_signal="Argument Quality",
        secondary_signals="Discourse markers, Evidence presence",
        key_tech="Query2Doc + CrossEncoder",
    ),
    SummaryRow(
        pipeline_id=PipelineId.COMPARISON,
        intent="COMPARISON",
        primary_signal="Dual-entity coverage",
        secondary_signals="Comparative language, Aspect coverage",
        key_tech="Entity filtering + Custom",
    ),
    SummaryRow(
        pipeline_id=PipelineId.FACTUAL,
        intent="FACTUAL",
        primary_signal="Definition pattern",
        secondary_signals="Entity prominence",
        key_tech="ColBERT + Patterns",
    ),
    SummaryRow(
        pipeline_id=PipelineId.EXPLANATION,
        intent="EXPLANATION",
        primary_signal="Causal markers",
        secondary_signals="Reasoning chain depth",
        key_tech="HyDE + Causal detection",
    ),
)

INPUT_STAGE = DiagramStage(
    heading="📥 INPUT",
    label="User Query",
    caption='"Should I invest in ETFs or mutual funds?"',
    italic_caption=True,
)
CLASSIFIER_STAGE = DiagramStage(
    heading="🎯 INTENT CLASSIFIER",
    label="DistilBERT fine-tuned",
    caption="LLM-annotated FiQA queries (~650 samples)",
)
OUTPUT_STAGE = DiagramStage(
    heading="📤 OUTPUT",
    label="Ranked Results",
    caption="Top-K documents optimized for query intent",
)


class PipelineCatalog:
    """Immutable lookup from PipelineId to its PipelineDescriptor.

    Iteration order is the display order of the selector boxes.
    """

    def __init__(self, descriptors: tuple[PipelineDescriptor, ...] = _DESCRIPTORS):
        ids = [descriptor.id for descriptor in descriptors]
        if len(ids) != len(set(ids)) or set(ids) != set(PipelineId):
            raise IncompleteCatalogError([pid.value for pid in ids], [pid.value for pid in PipelineId])
        self._descriptors: Mapping[PipelineId, PipelineDescriptor] = MappingProxyType({
            descriptor.id: descriptor for descriptor in descriptors
        })

    def get(self, pipeline_id: PipelineId | str) -> PipelineDescriptor:
        """Return the descriptor for a pipeline.

        Args:
            pipeline_id: A PipelineId, or its string value.

        Returns:
            The same descriptor object on every call for a given id.

        Raises:
            UnknownPipelineError: If the id is not one of the fixed pipelines.
        """
        return self._descriptors[PipelineId.parse(pipeline_id)]

    def ids(self) -> list[PipelineId]:
        return list(self._descriptors)

    def __iter__(self) -> Iterator[PipelineDescriptor]:
        return iter(self._descriptors.values())

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, pipeline_id: object) -> bool:
        try:
            return PipelineId.parse(pipeline_id) in self._descriptors  # type: ignore[arg-type]
        except UnknownPipelineError:
            return False


_DEFAULT_CATALOG = PipelineCatalog()


def get_catalog() -> PipelineCatalog:
    """Return the process-wide pipeline catalog."""
    return _DEFAULT_CATALOG
