from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.build_builder import BuildBuilder


@pytest.fixture
def build_builder(tmp_path: Path) -> BuildBuilder:
    """Provide a reusable build output builder rooted at the pytest tmp_path."""
    return BuildBuilder(tmp_path)
