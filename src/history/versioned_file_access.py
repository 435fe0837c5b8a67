"""Versioned file access engine.

This module exposes a file-API-shaped surface over the host operations.
Calls about one concrete file get a version-tagged path and fall back
to the newest older version when that path does not exist.

Example:
    access = VersionedFileAccess("1979.12.22")
    with access.open("test.txt", "w") as handle:
        handle.write("old dude")
    # writes ./1979.12.22-test.txt
"""

from __future__ import annotations

from functools import partial
import os
from types import MappingProxyType
from typing import Any, Mapping, cast

from core.constants import SUPPORTED_LAYOUTS
from core.errors import HistoryFileUsageError
from core.logging_config import get_logger
from core.types import AccessOptions, LayoutMode
from history.fallback_search import find_fallback
from history.host_files import HostOperation, build_host_operations
from history.operation_table import classify_operation, writes_content
from history.path_rewriter import rewrite_path

_LOGGER = get_logger(__name__)


class VersionedFileAccess:
    """File access bound to one version tag.

    Instances hold only immutable configuration. Every call computes its
    physical paths fresh, so one instance can serve any number of calls.
    """

    def __init__(
        self,
        prefix: str | None = None,
        layout: str = "flat",
        fallback_glob: str | None = None,
        operations: Mapping[str, HostOperation] | None = None,
    ) -> None:
        """Initialize access for one version tag.

        Args:
            prefix: Version tag embedded in rewritten paths. Required.
            layout: ``flat`` (``dir/tag-name``) or ``nested`` (``dir/tag/name``).
            fallback_glob: Glob template matching any version tag. None
                disables fallback.
            operations: Optional operations replacing entries of the host
                operation table.

        Raises:
            HistoryFileUsageError: If prefix or layout is invalid.
        """
        self._options = _build_options(prefix, layout, fallback_glob)
        host_operations = build_host_operations()
        if operations is not None:
            host_operations.update(operations)
        self._operations = MappingProxyType(host_operations)

    @property
    def options(self) -> AccessOptions:
        return self._options

    @property
    def prefix(self) -> str:
        return self._options.prefix

    @property
    def layout(self) -> LayoutMode:
        return self._options.layout

    @property
    def fallback_glob(self) -> str | None:
        return self._options.fallback_glob

    def __repr__(self) -> str:
        return (
            f"VersionedFileAccess(prefix={self.prefix!r}, layout={self.layout!r}, "
            f"fallback_glob={self.fallback_glob!r})"
        )

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or name not in self._operations:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
        return partial(self.invoke, name)

    def physical_path(self, logical_name: str | os.PathLike[str]) -> str:
        """Return the version-tagged path for a logical filename."""
        return rewrite_path(logical_name, self.prefix, self.layout)

    def find_fallback(self, logical_name: str | os.PathLike[str]) -> str | None:
        """Return the newest existing version older than this instance's tag."""
        return self._find_fallback(logical_name, self.physical_path(logical_name))

    def resolve(self, logical_name: str | os.PathLike[str]) -> str | None:
        """Return the physical path a read of logical_name would use.

        Args:
            logical_name: Logical filename.

        Returns:
            The exact version path when it exists, else the fallback
            candidate, else None.
        """
        physical = self.physical_path(logical_name)
        if self._operations["exists"](physical):
            return physical
        return self._find_fallback(logical_name, physical)

    def ensure_version_directory(self, logical_name: str | os.PathLike[str]) -> str:
        """Create the directory that will hold the versioned file.

        Needed before writes in nested layout, where the tag names a
        subdirectory that may not exist yet.

        Returns:
            The created or already existing directory path.
        """
        directory = os.path.dirname(self.physical_path(logical_name))
        self._operations["makedirs"](directory, exist_ok=True)
        return directory

    def invoke(self, operation_name: str, *args: Any, **kwargs: Any) -> Any:
        """Invoke a host operation with version-aware path handling.

        Args:
            operation_name: Name from the host operation table.
            *args: Operation arguments, logical filenames where the
                operation takes filenames.
            **kwargs: Keyword arguments forwarded unchanged.

        Returns:
            Whatever the host operation returns.

        Raises:
            HistoryFileUsageError: For unknown operations or a missing filename.
            FileNotFoundError: If neither the requested version nor an older
                one exists. The error names the requested version's path.
        """
        operation = self._operations.get(operation_name)
        if operation is None:
            raise HistoryFileUsageError(
                f"Unknown file operation '{operation_name}'. "
                "Use one of the host operation table names."
            )
        operation_class = classify_operation(operation_name)
        if operation_class == "pass_through":
            return operation(*args, **kwargs)
        if operation_class == "bulk_file":
            physical_paths = [self.physical_path(name) for name in args]
            return operation(*physical_paths, **kwargs)
        return self._invoke_single_file(operation_name, operation, args, kwargs)

    def _invoke_single_file(
        self,
        operation_name: str,
        operation: HostOperation,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        if not args:
            raise HistoryFileUsageError(
                f"File operation '{operation_name}' needs a filename as its first argument."
            )
        logical_name, remaining_args = args[0], args[1:]
        physical = self.physical_path(logical_name)
        try:
            return operation(physical, *remaining_args, **kwargs)
        except FileNotFoundError as error:
            not_found = error
        if writes_content(operation_name, remaining_args, kwargs):
            raise not_found
        fallback = self._find_fallback(logical_name, physical)
        if fallback is None:
            _LOGGER.debug(
                "history_fallback_exhausted",
                operation=operation_name,
                logical_name=os.fspath(logical_name),
                requested_path=physical,
            )
            raise not_found
        _LOGGER.info(
            "history_fallback_resolved",
            operation=operation_name,
            logical_name=os.fspath(logical_name),
            requested_path=physical,
            fallback_path=fallback,
        )
        return operation(fallback, *remaining_args, **kwargs)

    def _find_fallback(self, logical_name: str | os.PathLike[str], physical: str) -> str | None:
        return find_fallback(
            logical_name,
            physical,
            self.fallback_glob,
            list_matches=self._operations["glob"],
        )


def _build_options(prefix: str | None, layout: str, fallback_glob: str | None) -> AccessOptions:
    """Validate construction arguments into access options.

    Raises:
        HistoryFileUsageError: If prefix is missing or layout is unsupported.
    """
    if not isinstance(prefix, str) or not prefix:
        raise HistoryFileUsageError("Missing version prefix: pass a non-empty prefix string.")
    if layout not in SUPPORTED_LAYOUTS:
        raise HistoryFileUsageError(
            f"Unsupported layout '{layout}': expected one of {', '.join(SUPPORTED_LAYOUTS)}."
        )
    return AccessOptions(
        prefix=prefix,
        layout=cast(LayoutMode, layout),
        fallback_glob=fallback_glob,
    )
