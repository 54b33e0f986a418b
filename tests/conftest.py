from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from scrollmarks.logging import reset_logging
from scrollmarks.models import FeatureFlags
from tests._fixtures.source_builder import SourceBuilder


@pytest.fixture
def source_builder(tmp_path: Path) -> SourceBuilder:
    """Provide a reusable source builder rooted at the pytest tmp_path."""
    return SourceBuilder(tmp_path)


@pytest.fixture
def all_flags() -> FeatureFlags:
    """Every marker kind enabled, access specifiers shortened."""
    return FeatureFlags(
        show_headers=True,
        show_functions=True,
        show_classes=True,
        show_access_specifiers=True,
        shorten_access_specifiers=True,
    )


@pytest.fixture(autouse=True)
def _reset_scrollmarks_logger() -> Iterator[None]:
    """Undo CLI logging configuration so caplog keeps seeing records."""
    yield
    reset_logging()
