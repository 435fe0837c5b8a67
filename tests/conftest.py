"""Pytest configuration for history file test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_HISTORY_ENV_VARS = ("HISTORY_FILE_LAYOUT", "HISTORY_FILE_FALLBACK", "HISTORY_FILE_DATE_FORMAT")


def pytest_sessionstart() -> None:
    """Put the src directory on sys.path so tests import the packages directly."""
    src_path = Path(__file__).resolve().parent.parent / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def clean_history_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test without HISTORY_FILE_* overrides from the shell."""
    for name in _HISTORY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
