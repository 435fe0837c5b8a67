"""Point-in-time entry point for versioned file access.

This module turns a date-like value into a version tag and builds a
VersionedFileAccess preconfigured with the date fallback pattern.
"""

from __future__ import annotations

import os
from typing import Any

from core.config import HistoryFileConfig
from core.constants import DATE_TAG_GLOB, FLAT_TAG_SEPARATOR
from core.errors import HistoryFileUsageError
from core.logging_config import get_logger
from core.types import LayoutMode
from history.versioned_file_access import VersionedFileAccess

_LOGGER = get_logger(__name__)


class VersionSelector:
    """Factory for access objects bound to a point in time."""

    def __init__(self, config: HistoryFileConfig | None = None) -> None:
        self._config = config or HistoryFileConfig.from_env()

    @property
    def config(self) -> HistoryFileConfig:
        return self._config

    def for_version(self, offset: Any) -> VersionedFileAccess:
        """Build access for the version tag of a point in time.

        Args:
            offset: Any value with a ``strftime`` method, e.g. a date.

        Returns:
            Access object tagged with the formatted date.

        Raises:
            HistoryFileUsageError: If offset cannot format dates.
        """
        tag = format_version_tag(offset, self._config.date_format)
        fallback_glob = None
        if self._config.fallback_enabled:
            fallback_glob = date_fallback_glob(self._config.layout)
        _LOGGER.debug("history_access_created", prefix=tag, layout=self._config.layout)
        return VersionedFileAccess(tag, layout=self._config.layout, fallback_glob=fallback_glob)

    __getitem__ = for_version


def format_version_tag(offset: Any, date_format: str) -> str:
    """Format a point in time as a version tag.

    Raises:
        HistoryFileUsageError: If offset has no callable ``strftime``.
    """
    strftime = getattr(offset, "strftime", None)
    if not callable(strftime):
        raise HistoryFileUsageError(f"Offset {offset} must respond to strftime")
    return str(strftime(date_format))


def date_fallback_glob(layout: LayoutMode) -> str:
    """Return the glob template matching any date tag in a layout."""
    if layout == "nested":
        return DATE_TAG_GLOB + os.sep
    return DATE_TAG_GLOB + FLAT_TAG_SEPARATOR
