from __future__ import annotations

"""
Unit tests for Domain Models.

Verifies:
1. Value semantics and immutability of entry dataclasses.
2. Ledger records behaving as (entry, message) pairs.
3. CreationReport status and serialization.
"""

import dataclasses

import pytest

from treewright.domain.creation_models import CreationError, CreationReport
from treewright.domain.entry_models import DirectoryEntry, FileEntry


def test_entries_compare_by_value() -> None:
    """TC-01: Independently built but identical entries are equal, yet distinct objects."""
    a = DirectoryEntry("foo", [FileEntry("bar", "1")])
    b = DirectoryEntry("foo", [FileEntry("bar", "1")])

    assert a == b
    assert a is not b


def test_entries_are_frozen() -> None:
    """TC-02: Entry fields cannot be reassigned after construction."""
    entry = FileEntry("foo", "bar")
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.name = "baz"  # type: ignore[misc]


def test_entry_defaults_and_kind() -> None:
    """TC-03: Defaults produce empty content and no children."""
    assert FileEntry("foo").content == ""
    assert DirectoryEntry("foo").children == []
    assert FileEntry("foo").kind == "file"
    assert DirectoryEntry("foo").kind == "directory"


def test_creation_error_unpacks_as_pair() -> None:
    """TC-04: Ledger records unpack into (entry, message)."""
    entry = FileEntry("foo")
    record = CreationError(entry, "boom")

    found_entry, message = record
    assert found_entry is entry
    assert message == "boom"
    assert record == (entry, "boom")


def test_creation_report_to_dict() -> None:
    """TC-05: Reports expose ok-ness and serialize errors by name and kind."""
    ok_report = CreationReport("/tmp/dest", created=3)
    assert ok_report.ok is True

    failed = CreationReport(
        "/tmp/dest",
        [CreationError(DirectoryEntry("foo"), "denied")],
        validated_only=True,
    )
    data = failed.to_dict()

    assert failed.ok is False
    assert data["ok"] is False
    assert data["validated_only"] is True
    assert data["errors"] == [{"name": "foo", "kind": "directory", "message": "denied"}]
