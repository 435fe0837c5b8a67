"""Public API surface for history file access.

This module provides a stable import path for callers.
It re-exports the access engine, the selector, and typed models.
"""

from __future__ import annotations

from typing import Any

from core.config import HistoryFileConfig
from core.errors import HistoryFileConfigError, HistoryFileError, HistoryFileUsageError
from core.types import AccessOptions, LayoutMode, OperationClass
from history.operation_table import OPERATION_CLASSES, classify_operation
from history.path_rewriter import rewrite_path
from history.version_selector import VersionSelector
from history.versioned_file_access import VersionedFileAccess


def at(offset: Any, config: HistoryFileConfig | None = None) -> VersionedFileAccess:
    """Return access to the files versioned at a point in time.

    Args:
        offset: Any value with a ``strftime`` method.
        config: Optional config, read from the environment when omitted.

    Returns:
        Configured access object.
    """
    return VersionSelector(config).for_version(offset)


__all__ = [
    "AccessOptions",
    "HistoryFileConfig",
    "HistoryFileConfigError",
    "HistoryFileError",
    "HistoryFileUsageError",
    "LayoutMode",
    "OPERATION_CLASSES",
    "OperationClass",
    "VersionSelector",
    "VersionedFileAccess",
    "at",
    "classify_operation",
    "rewrite_path",
]
