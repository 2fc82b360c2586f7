from __future__ import annotations

"""
Tree Creation Orchestrator.

Entry point of the creation workflow:
1. Validates the whole declared tree against the destination.
2. Stops with the structural ledger if anything is wrong (nothing is created).
3. Otherwise materializes the queued entries and returns the operational ledger.

Each call works on its own CreationSession, so one TreeCreator can serve
concurrent requests targeting disjoint destinations.
"""

import codecs
import logging
import os
from typing import Optional, Union

from treewright.core.creation.engine import create_all
from treewright.core.creation.session import CreationSession
from treewright.core.creation.validator import validate_tree
from treewright.domain.constants import DEFAULT_ENCODING
from treewright.domain.creation_models import CreationReport, ErrorLedger
from treewright.domain.entry_models import Entry
from treewright.infra.fs import FileSystem, LocalFileSystem

logger = logging.getLogger(__name__)

Destination = Union[str, "os.PathLike[str]"]


class TreeCreator:
    """
    Validate and materialize declared entry trees.

    Args:
        fs: Filesystem backend; defaults to the host filesystem.
        encoding: Codec used for file contents.

    Raises:
        LookupError: If ``encoding`` is not a known codec.
    """

    def __init__(
            self,
            fs: Optional[FileSystem] = None,
            encoding: str = DEFAULT_ENCODING,
    ) -> None:
        codecs.lookup(encoding)
        self.fs: FileSystem = fs if fs is not None else LocalFileSystem()
        self.encoding = encoding

    def create(self, root: Entry, destination: Destination) -> ErrorLedger:
        """
        Create ``root`` inside the existing ``destination`` directory.

        Args:
            root: Declared tree to materialize.
            destination: Path string of an existing directory.

        Returns:
            ErrorLedger: ``(entry, message)`` pairs; empty on full success.
        """
        return self.run(root, destination).errors

    def validate(self, root: Entry, destination: Destination) -> ErrorLedger:
        """Run the structural checks only. Never mutates the filesystem."""
        return self.run(root, destination, dry_run=True).errors

    def run(
            self,
            root: Entry,
            destination: Destination,
            *,
            dry_run: bool = False,
    ) -> CreationReport:
        """
        Execute a full request and describe its outcome.

        Args:
            root: Declared tree to materialize.
            destination: Path string of an existing directory.
            dry_run: If True, stop after validation.

        Returns:
            CreationReport: Ledger plus execution metadata.
        """
        if isinstance(destination, os.PathLike):
            destination = os.fspath(destination)

        session = CreationSession()

        static_errors = validate_tree(session, root, destination, self.fs)
        if static_errors:
            logger.info(
                f"Validation rejected '{root.name}' with {len(static_errors)} error(s); "
                "nothing was created."
            )
            return CreationReport(destination, list(static_errors), validated_only=True)

        if dry_run:
            logger.info(f"Dry run: '{root.name}' is valid for {destination}.")
            return CreationReport(destination, [], validated_only=True)

        errors = create_all(session, self.fs, self.encoding)
        return CreationReport(destination, list(errors), created=session.created)


# -----------------------------------------------------------------------------
# MODULE-LEVEL SHORTCUTS
# -----------------------------------------------------------------------------

def create(
        root: Entry,
        destination: Destination,
        *,
        fs: Optional[FileSystem] = None,
        encoding: str = DEFAULT_ENCODING,
) -> ErrorLedger:
    """Create ``root`` in ``destination`` with a throwaway TreeCreator."""
    return TreeCreator(fs, encoding).create(root, destination)


def validate(
        root: Entry,
        destination: Destination,
        *,
        fs: Optional[FileSystem] = None,
) -> ErrorLedger:
    """Validate ``root`` against ``destination`` without creating anything."""
    return TreeCreator(fs).validate(root, destination)
