"""Logical to physical path rewriting.

This module embeds a version tag into a filename, either as a basename
prefix (flat layout) or as a containing subdirectory (nested layout).
It performs no I/O so the fallback search can probe paths freely.
"""

from __future__ import annotations

import os

from core.constants import CURRENT_DIRECTORY, FLAT_TAG_SEPARATOR
from core.types import LayoutMode


def split_logical_path(raw_path: str | os.PathLike[str]) -> tuple[str, str]:
    """Split a logical filename into directory and basename.

    Args:
        raw_path: Logical filename as given by the caller.

    Returns:
        Directory (``.`` when none is given) and basename.
    """
    path_text = os.fspath(raw_path)
    directory = os.path.dirname(path_text) or CURRENT_DIRECTORY
    return directory, os.path.basename(path_text)


def rewrite_path(raw_path: str | os.PathLike[str], tag: str, layout: LayoutMode) -> str:
    """Build the physical path for a logical filename and version tag.

    Args:
        raw_path: Logical filename.
        tag: Version tag, e.g. ``1979.12.22``.
        layout: ``flat`` for ``dir/tag-name`` or ``nested`` for ``dir/tag/name``.

    Returns:
        Physical path string.
    """
    directory, basename = split_logical_path(raw_path)
    if layout == "nested":
        return os.path.join(directory, tag, basename)
    return os.path.join(directory, f"{tag}{FLAT_TAG_SEPARATOR}{basename}")
