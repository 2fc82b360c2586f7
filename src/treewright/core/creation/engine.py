from __future__ import annotations

"""
Creation Engine Stage.

Drains the work queue built by the validator and materializes each entry on
disk. Failures are recorded per entry and never abort the run: a file that
cannot be created only affects itself, while a directory that cannot be
created also suppresses its queued descendants.

Creation is not transactional. Entries created before a failure stay on disk.
"""

import logging
from pathlib import Path
from typing import Tuple, Type

from treewright.core.creation.session import CreationSession
from treewright.domain import constants as msg
from treewright.domain.creation_models import ErrorLedger
from treewright.domain.entry_models import DirectoryEntry, FileEntry
from treewright.domain.errors import (
    AlreadyExistsError,
    FsError,
    PermissionDeniedError,
    UnsupportedOperationError,
)
from treewright.infra.fs import FileSystem

logger = logging.getLogger(__name__)

# Ordered (error kind -> ledger message); GenericIOError and unknown kinds
# fall through to the generic I/O message.
_FILE_CREATE_MESSAGES: Tuple[Tuple[Type[FsError], str], ...] = (
    (AlreadyExistsError, msg.FILE_CREATE_EXISTS),
    (UnsupportedOperationError, msg.FILE_CREATE_UNSUPPORTED),
    (PermissionDeniedError, msg.FILE_CREATE_PERMISSION),
)

_DIRECTORY_CREATE_MESSAGES: Tuple[Tuple[Type[FsError], str], ...] = (
    (AlreadyExistsError, msg.DIRECTORY_CREATE_EXISTS),
    (UnsupportedOperationError, msg.DIRECTORY_CREATE_UNSUPPORTED),
    (PermissionDeniedError, msg.DIRECTORY_CREATE_PERMISSION),
)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def create_all(
        session: CreationSession,
        fs: FileSystem,
        encoding: str = msg.DEFAULT_ENCODING,
) -> ErrorLedger:
    """
    Process the session queue strictly first-in, first-out.

    Args:
        session: A validated session (queued work, empty ledger).
        fs: Filesystem receiving the mutations.
        encoding: Codec used to turn file content into bytes.

    Returns:
        ErrorLedger: Operational failures; empty on full success.

    Raises:
        RuntimeError: If the session was not validated or already holds errors.
    """
    if not session.queue:
        raise RuntimeError("Creation queue is empty; validate the tree first.")
    if session.errors:
        raise RuntimeError("Cannot create entries from a session that holds errors.")

    logger.info(f"Creating {len(session.queue)} queued entries.")

    while session.queue:
        entry, path = session.queue.popleft()
        if isinstance(entry, DirectoryEntry):
            _create_directory(session, entry, path, fs)
        else:
            _create_file(session, entry, path, fs, encoding)

    logger.info(
        f"Creation finished: {session.created} created, {len(session.errors)} failed."
    )
    return session.errors


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: ENTRY CREATION
# -----------------------------------------------------------------------------

def _create_file(
        session: CreationSession,
        entry: FileEntry,
        path: Path,
        fs: FileSystem,
        encoding: str,
) -> None:
    """Create the file, then write its content if creation succeeded."""
    try:
        fs.create_file(str(path))
    except FsError as e:
        logger.debug(f"File creation failed for {path}: {e}")
        session.error(entry, _message_for(e, _FILE_CREATE_MESSAGES, msg.FILE_CREATE_IO))
        return

    # The empty file is left in place if the write fails
    try:
        fs.write_bytes(str(path), entry.content.encode(encoding))
    except (FsError, UnicodeEncodeError) as e:
        logger.debug(f"Content write failed for {path}: {e}")
        session.error(entry, msg.FILE_WRITE_FAILED)
        return

    session.created += 1


def _create_directory(
        session: CreationSession,
        entry: DirectoryEntry,
        path: Path,
        fs: FileSystem,
) -> None:
    """Create the directory; on failure drop its queued subtree."""
    try:
        fs.create_directory(str(path))
    except FsError as e:
        logger.debug(f"Directory creation failed for {path}: {e}")
        session.error(
            entry, _message_for(e, _DIRECTORY_CREATE_MESSAGES, msg.DIRECTORY_CREATE_IO)
        )
        skipped = _drain_subtree(session, path)
        if skipped:
            logger.info(f"Skipped {skipped} entries beneath failed directory {path}")
        return

    session.created += 1


def _drain_subtree(session: CreationSession, directory_path: Path) -> int:
    """
    Discard queue-front items located beneath ``directory_path``.

    Only valid because the queue is filled in pre-order: all descendants of a
    directory sit contiguously right after it.

    Returns:
        int: Number of discarded items.
    """
    skipped = 0
    while session.queue and _is_within(session.queue[0][1], directory_path):
        session.queue.popleft()
        skipped += 1
    return skipped


def _is_within(path: Path, directory_path: Path) -> bool:
    """Component-wise prefix test ("a/bc" is not within "a/b")."""
    return path == directory_path or directory_path in path.parents


def _message_for(
        error: FsError,
        table: Tuple[Tuple[Type[FsError], str], ...],
        default: str,
) -> str:
    for kind, message in table:
        if isinstance(error, kind):
            return message
    return default
