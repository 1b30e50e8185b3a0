"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add the project root to the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from keyquotes.core import FileConverter
from tests.fixtures.sample_documents import (
    LOOSE_DOCUMENT,
    STRICT_DOCUMENT,
    LOOSE_SIMPLE_DOCUMENT,
)


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")
    config.addinivalue_line("markers", "unsupported: input outside the documented character sets")


# ============================================================================
# Document Fixtures
# ============================================================================


@pytest.fixture
def loose_document():
    """A loose document with bare keys and literal tab/newline in values."""
    return LOOSE_DOCUMENT


@pytest.fixture
def strict_document():
    """The strict, double-quoted form of ``loose_document``."""
    return STRICT_DOCUMENT


# ============================================================================
# Engine Fixtures
# ============================================================================


@pytest.fixture
def quiet_converter():
    """A file converter that writes in place and prints nothing."""
    return FileConverter(verbose=False)


# ============================================================================
# Temporary File Fixtures
# ============================================================================


@pytest.fixture
def loose_file(tmp_path):
    """Create a temporary loose JSON file."""
    file_path = tmp_path / "loose.json"
    file_path.write_text(LOOSE_DOCUMENT, encoding="utf-8")
    return file_path


@pytest.fixture
def strict_file(tmp_path):
    """Create a temporary strict JSON file."""
    file_path = tmp_path / "strict.json"
    file_path.write_text(STRICT_DOCUMENT, encoding="utf-8")
    return file_path


@pytest.fixture
def loose_dir(tmp_path):
    """Create a directory with loose files and one unsupported file."""
    source_dir = tmp_path / "loose_docs"
    source_dir.mkdir()
    (source_dir / "full.json").write_text(LOOSE_DOCUMENT, encoding="utf-8")
    (source_dir / "simple.json5").write_text(LOOSE_SIMPLE_DOCUMENT, encoding="utf-8")
    (source_dir / "notes.md").write_text("{key: 1}", encoding="utf-8")
    return source_dir
