"""Shared typed models.

This module defines the literal types and immutable option models
used by the path rewriter, the operation table, and the access layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

LayoutMode = Literal["flat", "nested"]
OperationClass = Literal["pass_through", "single_file", "bulk_file"]


@dataclass(frozen=True)
class AccessOptions:
    """Validated construction options for versioned file access.

    Attributes:
        prefix: Version tag embedded in every rewritten path.
        layout: Whether the tag prefixes the basename or names a subdirectory.
        fallback_glob: Glob template matching every version tag, or None
            to disable fallback.
    """

    prefix: str
    layout: LayoutMode
    fallback_glob: str | None = None
