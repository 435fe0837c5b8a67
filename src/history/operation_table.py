"""Static operation classification table.

This module assigns every host file operation exactly one class:
pass_through operations never see a rewritten path, single_file
operations have their first argument rewritten, and bulk_file
operations have every argument rewritten.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from core.types import OperationClass

DEFAULT_OPERATION_CLASS: OperationClass = "single_file"

OPERATION_CLASSES: Mapping[str, OperationClass] = MappingProxyType(
    {
        "new": "single_file",
        "open": "single_file",
        "read": "single_file",
        "read_bytes": "single_file",
        "readlines": "single_file",
        "write": "single_file",
        "write_bytes": "single_file",
        "append": "single_file",
        "truncate": "single_file",
        "exists": "single_file",
        "is_file": "single_file",
        "is_symlink": "single_file",
        "is_empty": "single_file",
        "size": "single_file",
        "mtime": "single_file",
        "atime": "single_file",
        "ctime": "single_file",
        "stat": "single_file",
        "lstat": "single_file",
        "readlink": "single_file",
        "delete": "bulk_file",
        "unlink": "bulk_file",
        "safe_unlink": "bulk_file",
        "join": "pass_through",
        "split": "pass_through",
        "dirname": "pass_through",
        "basename": "pass_through",
        "extname": "pass_through",
        "splitext": "pass_through",
        "abspath": "pass_through",
        "realpath": "pass_through",
        "expanduser": "pass_through",
        "normpath": "pass_through",
        "relpath": "pass_through",
        "fnmatch": "pass_through",
        "glob": "pass_through",
        "is_dir": "pass_through",
        "chmod": "pass_through",
        "chown": "pass_through",
        "utime": "pass_through",
        "rename": "pass_through",
        "move": "pass_through",
        "copy": "pass_through",
        "link": "pass_through",
        "symlink": "pass_through",
        "identical": "pass_through",
        "compare": "pass_through",
        "mkdir": "pass_through",
        "makedirs": "pass_through",
        "umask": "pass_through",
    }
)


def classify_operation(name: str) -> OperationClass:
    """Return the operation class for an operation name.

    Args:
        name: Host operation name.

    Returns:
        Assigned class, ``single_file`` for names outside the table.
    """
    return OPERATION_CLASSES.get(name, DEFAULT_OPERATION_CLASS)


def operations_in_class(operation_class: OperationClass) -> tuple[str, ...]:
    """List table operation names assigned to one class, sorted."""
    return tuple(
        sorted(name for name, assigned in OPERATION_CLASSES.items() if assigned == operation_class)
    )


WRITING_OPERATIONS = frozenset({"write", "write_bytes", "append", "truncate"})
HANDLE_OPERATIONS = frozenset({"new", "open"})
WRITING_MODE_FLAGS = frozenset("wax+")


def writes_content(name: str, args: tuple[Any, ...], kwargs: Mapping[str, Any]) -> bool:
    """Return True when a single-file call creates or changes file content.

    Such calls never fall back, since the fallback candidate belongs to
    another version.

    Args:
        name: Host operation name.
        args: Arguments following the filename.
        kwargs: Keyword arguments of the call.

    Returns:
        Whether the call writes.
    """
    if name in WRITING_OPERATIONS:
        return True
    if name not in HANDLE_OPERATIONS:
        return False
    mode = args[0] if args else kwargs.get("mode", "r")
    return bool(WRITING_MODE_FLAGS.intersection(str(mode)))
