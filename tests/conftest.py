"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from hunkfold.models.hunk import Hunk


@pytest.fixture(autouse=True)
def clear_hunkfold_env(monkeypatch):
    """Keep configuration overrides from the calling shell out of the tests."""
    monkeypatch.delenv("HUNKFOLD_STRICT_ORDER", raising=False)


@pytest.fixture
def make_hunk():
    """Build a single-line hunk at the given line in both numberings."""
    def _make(line, content=None, **kwargs):
        return Hunk(
            old_start=line,
            old_end=line,
            new_start=line,
            new_end=line,
            new_content=[content if content is not None else f"line {line}"],
            **kwargs,
        )
    return _make
