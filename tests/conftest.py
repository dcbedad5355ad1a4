import pytest
from typer.testing import CliRunner

from finqa_methodology.catalog import PipelineCatalog, get_catalog
from finqa_methodology.selection import SelectionState


@pytest.fixture
def catalog() -> PipelineCatalog:
    """Return the process-wide pipeline catalog."""
    return get_catalog()


@pytest.fixture
def empty_selection() -> SelectionState:
    """Return the initial selection state (nothing selected)."""
    return SelectionState()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CliRunner for testing commands."""
    return CliRunner()
