import os
from dataclasses import dataclass
from pathlib import Path

from omegaconf import OmegaConf


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class DiagramConfig:
    """Launch configuration for the methodology diagram web app."""

    host: str = "127.0.0.1"
    port: int = 7860
    share: bool = False
    title: str = "Intent-Aware Retrieval for Financial QA"

    @classmethod
    def from_env(cls) -> "DiagramConfig":
        """Create config from environment variables.

        Raises:
            ValueError: If FINQA_DIAGRAM_PORT is not an integer.
        """
        raw_port = os.getenv("FINQA_DIAGRAM_PORT", "7860")
        try:
            port = int(raw_port)
        except ValueError:
            raise ValueError(f"FINQA_DIAGRAM_PORT must be an integer, got '{raw_port}'") from None  # noqa: TRY003
        return cls(
            host=os.getenv("FINQA_DIAGRAM_HOST", "127.0.0.1"),
            port=port,
            share=_env_flag("FINQA_DIAGRAM_SHARE"),
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> "DiagramConfig":
        """Load config from a YAML file, using environment values for missing keys.

        Raises:
            FileNotFoundError: If the file does not exist.
            omegaconf.errors.ConfigKeyError: If the file contains an unknown key.
            omegaconf.errors.ValidationError: If a value has the wrong type.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")  # noqa: TRY003
        base = OmegaConf.structured(cls.from_env())
        merged = OmegaConf.merge(base, OmegaConf.load(path))
        return OmegaConf.to_object(merged)  # type: ignore[return-value]
