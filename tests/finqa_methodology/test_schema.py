"""Tests for the pipeline data model."""

import pytest

from finqa_methodology.exceptions import EmptyPipelineStepsError, UnknownPipelineError
from finqa_methodology.schema import PipelineDescriptor, PipelineId, PipelineStep


class TestPipelineId:
    def test_parse_accepts_string_values(self):
        assert PipelineId.parse("advice") is PipelineId.ADVICE
        assert PipelineId.parse("explanation") is PipelineId.EXPLANATION

    def test_parse_returns_member_unchanged(self):
        assert PipelineId.parse(PipelineId.FACTUAL) is PipelineId.FACTUAL

    def test_parse_rejects_unknown_id(self):
        with pytest.raises(UnknownPipelineError) as exc_info:
            PipelineId.parse("sentiment")

        assert exc_info.value.pipeline_id == "sentiment"
        assert exc_info.value.valid_ids == ["advice", "comparison", "factual", "explanation"]
        assert "Unknown pipeline 'sentiment'" in str(exc_info.value)

    def test_parse_is_case_sensitive(self):
        with pytest.raises(UnknownPipelineError):
            PipelineId.parse("ADVICE")

    def test_unknown_pipeline_error_is_key_error(self):
        with pytest.raises(KeyError):
            PipelineId.parse("")


class TestPipelineStep:
    def test_detail_lines_split_on_newlines(self):
        step = PipelineStep(name="Scoring", technique="Regex", detail="first line\nsecond line")
        assert step.detail_lines == ["first line", "second line"]

    def test_single_line_detail(self):
        step = PipelineStep(name="Scoring", technique="Regex", detail="only line")
        assert step.detail_lines == ["only line"]


class TestPipelineDescriptor:
    def test_empty_steps_rejected(self):
        with pytest.raises(EmptyPipelineStepsError):
            PipelineDescriptor(
                id=PipelineId.ADVICE,
                title="ADVICE-SEEKING Pipeline",
                selector_label="ADVICE",
                example_query='"Should I?"',
                accent_color="#22c55e",
                steps=(),
            )

    def test_descriptor_is_frozen(self, catalog):
        descriptor = catalog.get(PipelineId.ADVICE)
        with pytest.raises(AttributeError):
            descriptor.title = "changed"
