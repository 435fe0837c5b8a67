"""Unit tests for the static operation classification table."""

from __future__ import annotations

import pytest

from history.host_files import build_host_operations
from history.operation_table import (
    OPERATION_CLASSES,
    classify_operation,
    operations_in_class,
    writes_content,
)


def test_operation_table_covers_every_host_operation() -> None:
    """Every host operation should have exactly one table entry."""
    assert set(OPERATION_CLASSES) == set(build_host_operations())


def test_classify_operation_defaults_to_single_file() -> None:
    """Names outside the table should be treated as single-file operations."""
    assert classify_operation("some_future_operation") == "single_file"


def test_classify_operation_reads_table_entries() -> None:
    """Known names should use their table class."""
    assert classify_operation("join") == "pass_through"
    assert classify_operation("open") == "single_file"
    assert classify_operation("new") == "single_file"
    assert classify_operation("unlink") == "bulk_file"


def test_operations_in_class_lists_bulk_operations() -> None:
    """Bulk class should hold only the removal operations."""
    assert operations_in_class("bulk_file") == ("delete", "safe_unlink", "unlink")


def test_operation_classes_are_read_only() -> None:
    """Classification table should not be mutable at runtime."""
    with pytest.raises(TypeError):
        OPERATION_CLASSES["open"] = "pass_through"  # type: ignore[index]

    assert OPERATION_CLASSES["open"] == "single_file"


@pytest.mark.parametrize(
    ("name", "args", "kwargs", "expected"),
    [
        ("write", ("x",), {}, True),
        ("truncate", (), {}, True),
        ("open", (), {}, False),
        ("open", ("r",), {}, False),
        ("open", ("rb",), {}, False),
        ("open", ("w",), {}, True),
        ("new", ("xb",), {}, True),
        ("open", (), {"mode": "a"}, True),
        ("open", ("r+",), {}, True),
        ("read", (), {}, False),
        ("stat", (), {}, False),
    ],
)
def test_writes_content_detects_writing_calls(
    name: str, args: tuple[str, ...], kwargs: dict[str, str], expected: bool
) -> None:
    """Writing operations and write-mode opens should be recognized."""
    assert writes_content(name, args, kwargs) is expected
