"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from tests.fixtures.sample_sheets import FULL_CCD, MINIMAL_CCD


@pytest.fixture
def minimal_ccd_file(tmp_path: Path) -> Path:
    """Return path to a minimal CCD sheet written to a temporary directory."""
    path = tmp_path / "disc.ccd"
    path.write_text(MINIMAL_CCD)
    return path


@pytest.fixture
def full_ccd_file(tmp_path: Path) -> Path:
    """Return path to a full CCD sheet (with CD-Text) in a temporary directory."""
    path = tmp_path / "disc.ccd"
    path.write_text(FULL_CCD)
    return path
