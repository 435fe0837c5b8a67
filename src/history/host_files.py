"""Host file-access operations.

This module exposes the local filesystem as a table of named operations.
The access layer calls into this table and never touches storage itself.
"""

from __future__ import annotations

import filecmp
import fnmatch
import glob
import os
import shutil
from typing import Any, Callable

HostOperation = Callable[..., Any]


def build_host_operations() -> dict[str, HostOperation]:
    """Build the local filesystem operation table.

    Returns:
        Mapping from operation name to callable. A missing file is always
        reported as FileNotFoundError.
    """
    return {
        # handles
        "new": open,
        "open": open,
        # content
        "read": _read_text,
        "read_bytes": _read_bytes,
        "readlines": _read_lines,
        "write": _write_text,
        "write_bytes": _write_bytes,
        "append": _append_text,
        "truncate": os.truncate,
        # single file queries
        "exists": os.path.exists,
        "is_file": os.path.isfile,
        "is_symlink": os.path.islink,
        "is_empty": _is_empty,
        "size": os.path.getsize,
        "mtime": os.path.getmtime,
        "atime": os.path.getatime,
        "ctime": os.path.getctime,
        "stat": os.stat,
        "lstat": os.lstat,
        "readlink": os.readlink,
        # removal
        "delete": _remove_all,
        "unlink": _remove_all,
        "safe_unlink": _safe_remove_all,
        # path utilities
        "join": os.path.join,
        "split": os.path.split,
        "dirname": os.path.dirname,
        "basename": os.path.basename,
        "extname": _extension,
        "splitext": os.path.splitext,
        "abspath": os.path.abspath,
        "realpath": os.path.realpath,
        "expanduser": os.path.expanduser,
        "normpath": os.path.normpath,
        "relpath": os.path.relpath,
        "fnmatch": _fnmatch,
        "glob": glob.glob,
        # operations on already known paths
        "is_dir": os.path.isdir,
        "chmod": os.chmod,
        "chown": _chown,
        "utime": os.utime,
        "rename": os.rename,
        "move": shutil.move,
        "copy": shutil.copy,
        "link": os.link,
        "symlink": os.symlink,
        "identical": os.path.samefile,
        "compare": _compare,
        "mkdir": os.mkdir,
        "makedirs": os.makedirs,
        "umask": _umask,
    }


def _read_text(path: str, encoding: str | None = None, errors: str | None = None) -> str:
    with open(path, encoding=encoding, errors=errors) as handle:
        return handle.read()


def _read_bytes(path: str) -> bytes:
    with open(path, "rb") as handle:
        return handle.read()


def _read_lines(path: str, encoding: str | None = None) -> list[str]:
    with open(path, encoding=encoding) as handle:
        return handle.readlines()


def _write_text(path: str, data: str, encoding: str | None = None) -> int:
    with open(path, "w", encoding=encoding) as handle:
        return handle.write(data)


def _write_bytes(path: str, data: bytes) -> int:
    with open(path, "wb") as handle:
        return handle.write(data)


def _append_text(path: str, data: str, encoding: str | None = None) -> int:
    with open(path, "a", encoding=encoding) as handle:
        return handle.write(data)


def _is_empty(path: str) -> bool:
    """Return True when path is an existing zero-length file."""
    return os.path.isfile(path) and os.path.getsize(path) == 0


def _remove_all(*paths: str) -> int:
    """Remove every path in order and return how many were removed."""
    for path in paths:
        os.unlink(path)
    return len(paths)


def _safe_remove_all(*paths: str) -> int:
    """Remove every existing path, skipping ones that are already gone."""
    removed = 0
    for path in paths:
        try:
            os.unlink(path)
        except FileNotFoundError:
            continue
        removed += 1
    return removed


def _extension(path: str) -> str:
    return os.path.splitext(path)[1]


def _fnmatch(pattern: str, path: str) -> bool:
    return fnmatch.fnmatch(path, pattern)


def _chown(path: str, uid: int, gid: int) -> None:
    os.chown(path, uid, gid)


def _compare(first_path: str, second_path: str) -> bool:
    """Return True when both files have identical content."""
    return filecmp.cmp(first_path, second_path, shallow=False)


def _umask(mask: int | None = None) -> int:
    """Return the process umask, setting it first when mask is given."""
    if mask is not None:
        return os.umask(mask)
    current = os.umask(0)
    os.umask(current)
    return current
