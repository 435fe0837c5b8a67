"""Runtime configuration model for history file access.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import cast

from core.constants import (
    DATE_FORMAT_ENV_VAR,
    DEFAULT_DATE_FORMAT,
    DEFAULT_LAYOUT,
    FALLBACK_ENV_VAR,
    FALSY_VALUES,
    LAYOUT_ENV_VAR,
    SUPPORTED_LAYOUTS,
    TRUTHY_VALUES,
)
from core.errors import HistoryFileConfigError
from core.types import LayoutMode


@dataclass(frozen=True)
class HistoryFileConfig:
    """Validated runtime configuration.

    Attributes:
        layout: Layout used by version selectors built from this config.
        fallback_enabled: Whether selectors configure a fallback glob.
        date_format: strftime format turning a point in time into a tag.
    """

    layout: LayoutMode = "flat"
    fallback_enabled: bool = True
    date_format: str = DEFAULT_DATE_FORMAT

    @classmethod
    def from_env(cls) -> "HistoryFileConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            HistoryFileConfigError: If environment values are invalid.
        """
        layout_value = os.getenv(LAYOUT_ENV_VAR, DEFAULT_LAYOUT)
        fallback_value = os.getenv(FALLBACK_ENV_VAR, "true")
        date_format = os.getenv(DATE_FORMAT_ENV_VAR, DEFAULT_DATE_FORMAT)
        if not date_format.strip():
            raise HistoryFileConfigError(
                f"Invalid {DATE_FORMAT_ENV_VAR} value: expected a strftime format, "
                "got an empty string. Unset it to use the default."
            )
        return cls(
            layout=_parse_layout(layout_value),
            fallback_enabled=_parse_flag(FALLBACK_ENV_VAR, fallback_value),
            date_format=date_format,
        )


def _parse_layout(raw_value: str) -> LayoutMode:
    """Parse the layout environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Normalized layout mode.

    Raises:
        HistoryFileConfigError: If value is not a supported layout.
    """
    normalized = raw_value.strip().lower()
    if normalized not in SUPPORTED_LAYOUTS:
        raise HistoryFileConfigError(
            f"Invalid {LAYOUT_ENV_VAR} value: expected one of "
            f"{', '.join(SUPPORTED_LAYOUTS)}, got '{raw_value}'."
        )
    return cast(LayoutMode, normalized)


def _parse_flag(name: str, raw_value: str) -> bool:
    normalized = raw_value.strip().lower()
    if normalized in TRUTHY_VALUES:
        return True
    if normalized in FALSY_VALUES:
        return False
    raise HistoryFileConfigError(
        f"Invalid {name} value: expected a boolean flag, got '{raw_value}'. "
        f"Use one of {', '.join(TRUTHY_VALUES + FALSY_VALUES)}."
    )
