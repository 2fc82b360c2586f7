from __future__ import annotations

"""Materialize declared trees of files and directories onto the filesystem."""

from treewright.core.creation.creator import TreeCreator, create, validate
from treewright.domain.creation_models import CreationError, CreationReport
from treewright.domain.entry_models import DirectoryEntry, Entry, FileEntry

__version__ = "1.0.0"

__all__ = [
    "CreationError",
    "CreationReport",
    "DirectoryEntry",
    "Entry",
    "FileEntry",
    "TreeCreator",
    "create",
    "validate",
]
