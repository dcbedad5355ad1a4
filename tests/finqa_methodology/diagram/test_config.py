"""Tests for diagram launch configuration."""

import pytest
from omegaconf.errors import ConfigKeyError, ValidationError

from finqa_methodology.diagram.config import DiagramConfig


class TestDiagramConfig:
    def test_defaults(self, monkeypatch):
        for name in ("FINQA_DIAGRAM_HOST", "FINQA_DIAGRAM_PORT", "FINQA_DIAGRAM_SHARE"):
            monkeypatch.delenv(name, raising=False)

        config = DiagramConfig.from_env()

        assert config.host == "127.0.0.1"
        assert config.port == 7860
        assert config.share is False
        assert config.title == "Intent-Aware Retrieval for Financial QA"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("FINQA_DIAGRAM_HOST", "0.0.0.0")
        monkeypatch.setenv("FINQA_DIAGRAM_PORT", "8080")
        monkeypatch.setenv("FINQA_DIAGRAM_SHARE", "true")

        config = DiagramConfig.from_env()

        assert config.host == "0.0.0.0"
        assert config.port == 8080
        assert config.share is True

    def test_from_env_rejects_non_integer_port(self, monkeypatch):
        monkeypatch.setenv("FINQA_DIAGRAM_PORT", "abc")

        with pytest.raises(ValueError, match="FINQA_DIAGRAM_PORT must be an integer"):
            DiagramConfig.from_env()

    def test_from_yaml_overrides_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("FINQA_DIAGRAM_HOST", "0.0.0.0")
        monkeypatch.delenv("FINQA_DIAGRAM_PORT", raising=False)
        config_file = tmp_path / "diagram.yaml"
        config_file.write_text("port: 9000\ntitle: Methodology\n")

        config = DiagramConfig.from_yaml(config_file)

        assert isinstance(config, DiagramConfig)
        assert config.host == "0.0.0.0"
        assert config.port == 9000
        assert config.title == "Methodology"

    def test_from_yaml_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            DiagramConfig.from_yaml(tmp_path / "missing.yaml")

    def test_from_yaml_rejects_unknown_key(self, tmp_path):
        config_file = tmp_path / "diagram.yaml"
        config_file.write_text("colour: red\n")

        with pytest.raises(ConfigKeyError):
            DiagramConfig.from_yaml(config_file)

    def test_from_yaml_rejects_bad_type(self, tmp_path):
        config_file = tmp_path / "diagram.yaml"
        config_file.write_text("port: not-a-port\n")

        with pytest.raises(ValidationError):
            DiagramConfig.from_yaml(config_file)
