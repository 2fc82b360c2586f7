from __future__ import annotations

"""
Creation Session Context.

Holds every piece of mutable state needed by a single creation request:
the ordered work queue, the set of visited directories and the error
ledger. A fresh session is built for each request, so independent requests
can run concurrently without sharing state.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path
from typing import Deque, List, Set, Tuple

from treewright.domain.creation_models import CreationError
from treewright.domain.entry_models import DirectoryEntry, Entry

logger = logging.getLogger(__name__)

WorkItem = Tuple[Entry, Path]


@dataclass
class CreationSession:
    """
    Call-scoped state threaded through validation and creation.

    Attributes:
        queue: Entries awaiting creation, in pre-order, with resolved paths.
        visited: Identities (``id()``) of directories seen during the walk.
        errors: Append-only ledger of ``(entry, message)`` records.
        created: Number of queued entries fully materialized so far.
    """
    queue: Deque[WorkItem] = field(default_factory=deque)
    visited: Set[int] = field(default_factory=set)
    errors: List[CreationError] = field(default_factory=list)
    created: int = 0

    def error(self, entry: Entry, message: str) -> None:
        """Append a failure for ``entry`` to the ledger."""
        self.errors.append(CreationError(entry, message))
        logger.warning(f"{entry.kind} '{entry.name}': {message}")

    def enqueue(self, entry: Entry, path: Path) -> None:
        self.queue.append((entry, path))
        logger.debug(f"Queued {entry.kind} for creation: {path}")

    def mark_visited(self, directory: DirectoryEntry) -> bool:
        """
        Record a directory as visited by reference identity.

        Returns:
            bool: False if this exact object was already visited.
        """
        key = id(directory)
        if key in self.visited:
            return False
        self.visited.add(key)
        return True
