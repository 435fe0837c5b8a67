"""Structured logging configuration.

This module builds the structlog loggers used by the access layer.
Events such as history_fallback_resolved are rendered as JSON lines
with an ISO timestamp and level, so fallback decisions can be audited.
"""

from __future__ import annotations

from typing import Any

import structlog

_PROCESSORS = [
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.add_log_level,
    structlog.processors.JSONRenderer(),
]


def get_logger(name: str) -> Any:
    """Return a structlog logger bound to a module name.

    Args:
        name: Logger name, usually __name__.

    Returns:
        Logger accepting an event name plus keyword fields.
    """
    structlog.configure(processors=_PROCESSORS, cache_logger_on_first_use=True)
    return structlog.get_logger(name).bind(logger=name)
