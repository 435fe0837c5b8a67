"""Unit tests for structured logging configuration."""

from __future__ import annotations

import json

import pytest

from core.logging_config import get_logger


def test_get_logger_renders_json_event_lines(capsys: pytest.CaptureFixture[str]) -> None:
    """Logged events should be JSON lines carrying level, logger, and fields."""
    logger = get_logger("history.tests.logging")

    logger.info("history_fallback_resolved", fallback_path="./1983.02.01-f")

    line = capsys.readouterr().out.strip().splitlines()[-1]
    payload = json.loads(line)
    assert payload["event"] == "history_fallback_resolved"
    assert payload["level"] == "info"
    assert payload["logger"] == "history.tests.logging"
    assert payload["fallback_path"] == "./1983.02.01-f"
    assert "timestamp" in payload
