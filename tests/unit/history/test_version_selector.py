"""Unit tests for the point-in-time version selector."""

from __future__ import annotations

from datetime import date, datetime
import os

import pytest

from core.config import HistoryFileConfig
from core.errors import HistoryFileUsageError
from history.version_selector import VersionSelector, date_fallback_glob, format_version_tag


def test_for_version_formats_zero_padded_date_tag() -> None:
    """Selector should tag access with a YYYY.MM.DD prefix."""
    selector = VersionSelector(HistoryFileConfig())

    access = selector.for_version(date(1979, 2, 3))

    assert access.prefix == "1979.02.03"
    assert access.layout == "flat"


def test_for_version_configures_date_fallback_glob() -> None:
    """Selector should enable the fixed date fallback pattern."""
    access = VersionSelector(HistoryFileConfig()).for_version(datetime(1983, 4, 3, 12, 30))

    assert access.fallback_glob == "[0-9][0-9][0-9][0-9].[0-9][0-9].[0-9][0-9]-"


def test_for_version_uses_config_layout() -> None:
    """Nested selectors should build nested access with a directory glob."""
    selector = VersionSelector(HistoryFileConfig(layout="nested"))

    access = selector.for_version(date(1983, 4, 3))

    assert access.layout == "nested"
    assert access.fallback_glob == "[0-9][0-9][0-9][0-9].[0-9][0-9].[0-9][0-9]" + os.sep


def test_for_version_respects_disabled_fallback() -> None:
    """Config can turn the fallback search off."""
    selector = VersionSelector(HistoryFileConfig(fallback_enabled=False))

    assert selector.for_version(date(1983, 4, 3)).fallback_glob is None


def test_item_access_matches_for_version() -> None:
    """Subscript form should behave like for_version."""
    selector = VersionSelector(HistoryFileConfig())

    assert selector[date(1983, 4, 3)].prefix == "1983.04.03"


def test_for_version_rejects_values_without_strftime() -> None:
    """Offsets without strftime should raise a usage error naming them."""
    selector = VersionSelector(HistoryFileConfig())

    with pytest.raises(HistoryFileUsageError, match="Offset today must respond to strftime"):
        selector.for_version("today")


def test_selector_reads_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Selector without explicit config should use environment settings."""
    monkeypatch.setenv("HISTORY_FILE_LAYOUT", "nested")

    selector = VersionSelector()

    assert selector.config.layout == "nested"


def test_format_version_tag_uses_custom_format() -> None:
    """Tag formatting should honor the configured strftime format."""
    assert format_version_tag(date(2024, 1, 5), "%Y-%m-%d") == "2024-01-05"


def test_date_fallback_glob_for_flat_layout() -> None:
    """Flat date glob should end with the tag separator."""
    assert date_fallback_glob("flat").endswith("-")
