"""Core constants used across history file modules.

This module centralizes naming and formatting constants.
Keeping values here avoids magic literals in the access layer.
"""

from __future__ import annotations

DEFAULT_DATE_FORMAT = "%Y.%m.%d"
DEFAULT_LAYOUT = "flat"
SUPPORTED_LAYOUTS = ("flat", "nested")
FLAT_TAG_SEPARATOR = "-"
CURRENT_DIRECTORY = "."
DATE_TAG_GLOB = "[0-9][0-9][0-9][0-9].[0-9][0-9].[0-9][0-9]"
LAYOUT_ENV_VAR = "HISTORY_FILE_LAYOUT"
FALLBACK_ENV_VAR = "HISTORY_FILE_FALLBACK"
DATE_FORMAT_ENV_VAR = "HISTORY_FILE_DATE_FORMAT"
TRUTHY_VALUES = ("1", "true", "yes", "on")
FALSY_VALUES = ("0", "false", "no", "off")
