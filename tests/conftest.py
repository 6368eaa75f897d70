"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _clear_sigrecon_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep SIGRECON_* settings from the caller's shell out of tests."""
    for key in ("RELATIVE_BOF", "RELATIVE_EOF", "TRANSCRIPTION_MARKER", "BLANK_NODE_TYPE"):
        monkeypatch.delenv(f"SIGRECON_{key}", raising=False)
