from __future__ import annotations

"""
Entry Tree Validation Stage.

Walks the declared tree in pre-order and records every structural problem
(blank or invalid names, duplicate siblings, collisions with entries already
on disk, circular directory references) without touching the filesystem.
Sound entries are queued for the creation stage as they are visited, so a
directory always precedes its whole subtree in the queue.
"""

import logging
from pathlib import Path
from typing import Set

from treewright.core.creation.session import CreationSession
from treewright.domain import constants as msg
from treewright.domain.creation_models import ErrorLedger
from treewright.domain.entry_models import DirectoryEntry, Entry, FileEntry
from treewright.infra.fs import FileSystem, is_valid_path_string

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_tree(
        session: CreationSession,
        root: Entry,
        destination: str,
        fs: FileSystem,
) -> ErrorLedger:
    """
    Validate ``root`` against the ``destination`` directory.

    Destination checks short-circuit: the first failing one records a single
    error against ``root`` and the tree is not traversed.

    Args:
        session: Fresh session receiving the ledger and the work queue.
        root: Root of the declared tree.
        destination: Existing directory the tree should be created in.
        fs: Filesystem used for existence checks (read-only access).

    Returns:
        ErrorLedger: The session ledger; empty when the tree is sound.
    """
    if isinstance(destination, str) and _is_blank(destination):
        session.error(root, msg.DESTINATION_BLANK)
        return session.errors

    if not is_valid_path_string(destination):
        session.error(root, msg.DESTINATION_INVALID)
        return session.errors

    path = Path(destination)

    if not fs.is_directory(str(path)):
        session.error(root, msg.DESTINATION_NOT_DIRECTORY)
        return session.errors

    logger.debug(f"Validating '{root.name}' against destination: {path}")
    _validate_entry(session, root, path, set(), fs)

    session.visited.clear()
    return session.errors


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TRAVERSAL
# -----------------------------------------------------------------------------

def _validate_entry(
        session: CreationSession,
        entry: Entry,
        destination: Path,
        siblings: Set[str],
        fs: FileSystem,
) -> None:
    """Check the entry name, then dispatch on the entry kind."""
    if _is_blank(entry.name):
        session.error(entry, msg.NAME_BLANK)
        return

    if not is_valid_path_string(entry.name):
        session.error(entry, msg.NAME_INVALID)
        return

    if isinstance(entry, DirectoryEntry):
        _validate_directory(session, entry, destination, siblings, fs)
    elif isinstance(entry, FileEntry):
        _validate_file(session, entry, destination, siblings, fs)
    else:
        raise TypeError(f"Unsupported entry type: {type(entry).__name__}")


def _validate_file(
        session: CreationSession,
        entry: FileEntry,
        destination: Path,
        siblings: Set[str],
        fs: FileSystem,
) -> None:
    file_path = destination / entry.name
    errors_before = len(session.errors)

    # Both collisions are reported independently
    if fs.exists(str(file_path)):
        session.error(entry, msg.FILE_EXISTS_ON_DISK)

    if entry.name in siblings:
        session.error(entry, msg.FILE_DECLARED_TWICE)

    if len(session.errors) == errors_before:
        siblings.add(entry.name)
        session.enqueue(entry, file_path)


def _validate_directory(
        session: CreationSession,
        entry: DirectoryEntry,
        destination: Path,
        siblings: Set[str],
        fs: FileSystem,
) -> None:
    """
    Validate a directory and recurse into its children.

    The directory is queued before any child is visited. Children get their
    own sibling-name set, so uniqueness never crosses directory boundaries.
    """
    if not session.mark_visited(entry):
        session.error(entry, msg.DIRECTORY_CIRCULAR)
        return

    directory_path = destination / entry.name
    errors_before = len(session.errors)

    if fs.exists(str(directory_path)):
        session.error(entry, msg.DIRECTORY_EXISTS_ON_DISK)

    if entry.name in siblings:
        session.error(entry, msg.DIRECTORY_DECLARED_TWICE)

    siblings.add(entry.name)

    if len(session.errors) == errors_before:
        session.enqueue(entry, directory_path)

    children_names: Set[str] = set()
    for child in entry.children:
        _validate_entry(session, child, directory_path, children_names, fs)


def _is_blank(value: str) -> bool:
    return not isinstance(value, str) or not value.strip()
