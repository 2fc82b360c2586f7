from __future__ import annotations

"""
Declared Entry Tree Data Models.

Provides the node types that describe a hierarchy of files and directories
to be materialized on disk. Instances are owned by the caller and are never
modified by the creation machinery.
"""

from dataclasses import dataclass, field
from typing import List, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileEntry:
    """
    Represents a leaf entry (regular file) in the declared tree.

    Attributes:
        name: Path segment of the file, relative to its parent directory.
        content: Text written to the file once it has been created.
    """
    name: str
    content: str = ""

    @property
    def kind(self) -> str:
        return "file"


@dataclass(frozen=True)
class DirectoryEntry:
    """
    Represents an inner node (directory) in the declared tree.

    The order of ``children`` is both the declaration order used for
    sibling checks and the order in which entries are created.

    Attributes:
        name: Path segment of the directory, relative to its parent.
        children: Ordered child entries.
    """
    name: str
    children: List[Entry] = field(default_factory=list)

    @property
    def kind(self) -> str:
        return "directory"


Entry = Union[FileEntry, DirectoryEntry]
