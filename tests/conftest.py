"""Shared pytest fixtures for the full naconorm test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

_FILES_DIR = Path(__file__).parent / "files"


@pytest.fixture
def headings_fixture_path() -> Path:
    """Provide the bundled upper-case heading fixture file."""

    return _FILES_DIR / "naco_headings.tsv"


@pytest.fixture
def lower_headings_fixture_path() -> Path:
    """Provide the bundled lower-case heading fixture file."""

    return _FILES_DIR / "naco_headings_lower.tsv"
