from pathlib import Path

import pytest

from models.content import ContentNode
from settings import Settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the sample content files used by loader and CLI tests."""
    return FIXTURES_DIR


@pytest.fixture
def settings() -> Settings:
    """Settings with built-in defaults, independent of any .env in the working directory."""
    return Settings(_env_file=None)


@pytest.fixture
def table_node(fixtures_dir: Path) -> ContentNode:
    """A table node setting every recognised style path."""
    return ContentNode.load(fixtures_dir / "table.json")
