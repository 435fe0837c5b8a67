"""History file exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Missing files are reported with the built-in FileNotFoundError.
"""

from __future__ import annotations


class HistoryFileError(Exception):
    """Base exception for all history file failures."""


class HistoryFileConfigError(HistoryFileError):
    """Raised for invalid runtime configuration."""


class HistoryFileUsageError(HistoryFileError):
    """Raised for invalid construction arguments or operation names."""
