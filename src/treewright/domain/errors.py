from __future__ import annotations

"""Error taxonomy for filesystem primitives and manifest parsing."""

from typing import Optional


class FsError(Exception):
    """Base error raised by a filesystem primitive."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.cause = cause


class AlreadyExistsError(FsError):
    """Raised when the target path is already occupied."""


class UnsupportedOperationError(FsError):
    """Raised when the platform cannot create the entry with default attributes."""


class PermissionDeniedError(FsError):
    """Raised when the operation is refused by filesystem permissions."""


class GenericIOError(FsError):
    """Raised for any other I/O failure."""


class ManifestError(ValueError):
    """Raised when a tree manifest cannot be converted into entries."""

    def __init__(self, message: str, location: str = "root") -> None:
        super().__init__(f"{location}: {message}")
        self.location = location
