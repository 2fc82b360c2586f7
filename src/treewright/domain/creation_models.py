from __future__ import annotations

"""
Creation Result Data Models.

Defines the ledger record tying a failure to the entry that caused it and
the report object handed to interface layers.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple

from treewright.domain.entry_models import Entry

# -----------------------------------------------------------------------------
# LEDGER RECORDS
# -----------------------------------------------------------------------------

class CreationError(NamedTuple):
    """A single ``(entry, message)`` pair recorded in the error ledger."""
    entry: Entry
    message: str


ErrorLedger = List[CreationError]


# -----------------------------------------------------------------------------
# REPORTING
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CreationReport:
    """
    Outcome of one creation (or validation-only) request.

    Attributes:
        destination: Destination directory string as supplied by the caller.
        errors: Ledger produced by validation or creation.
        validated_only: True when the creation phase was intentionally skipped.
        created: Number of queued entries fully materialized on disk.
    """
    destination: str
    errors: List[CreationError] = field(default_factory=list)
    validated_only: bool = False
    created: int = 0

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the report into JSON-compatible primitives."""
        return {
            "ok": self.ok,
            "destination": self.destination,
            "validated_only": self.validated_only,
            "created": self.created,
            "errors": [
                {"name": e.entry.name, "kind": e.entry.kind, "message": e.message}
                for e in self.errors
            ],
        }
