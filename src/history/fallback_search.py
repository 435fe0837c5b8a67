"""Fallback search for older file versions.

This module scans a directory for version-tagged copies of a logical
file and picks the newest one that sorts strictly before a bound.
"""

from __future__ import annotations

import glob
import os
from typing import Callable, Iterable

from history.path_rewriter import split_logical_path

MatchLister = Callable[[str], Iterable[str]]


def build_fallback_glob(logical_name: str | os.PathLike[str], fallback_glob: str) -> str:
    """Build the glob expression matching every version of a logical file.

    Args:
        logical_name: Logical filename as given by the caller.
        fallback_glob: Template matching any version tag.

    Returns:
        Glob expression scoped to the logical file's directory.
    """
    directory, basename = split_logical_path(logical_name)
    return os.path.join(glob.escape(directory), fallback_glob + glob.escape(basename))


def find_fallback(
    logical_name: str | os.PathLike[str],
    physical_path: str,
    fallback_glob: str | None,
    list_matches: MatchLister = glob.glob,
) -> str | None:
    """Find the newest candidate strictly older than a missing physical path.

    Candidates are compared as plain strings, so version tags must be
    fixed-width and sort chronologically.

    Args:
        logical_name: Original logical filename.
        physical_path: Rewritten path that was not found.
        fallback_glob: Template matching any version tag, or None when
            fallback is disabled.
        list_matches: Glob primitive returning matching paths.

    Returns:
        Closest older candidate path, or None when there is none.
    """
    if fallback_glob is None:
        return None
    pattern = build_fallback_glob(logical_name, fallback_glob)
    candidates = [
        candidate for candidate in sorted(list_matches(pattern)) if candidate < physical_path
    ]
    if not candidates:
        return None
    return candidates[-1]
