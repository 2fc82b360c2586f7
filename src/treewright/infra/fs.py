from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the path validity check and the primitive filesystem operations
consumed by the validator and the creation engine. Native OS exceptions are
translated into the domain error taxonomy so that upper layers only ever
deal with one of four failure kinds.
"""

import io
import os
import sys
from typing import Any, Protocol

from treewright.domain.errors import (
    AlreadyExistsError,
    FsError,
    GenericIOError,
    PermissionDeniedError,
    UnsupportedOperationError,
)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

UNIX_APP_DIR_NAME = ".treewright"
APP_DIR_NAME = "treewright"

# Characters rejected by the Win32 path parser (drive colons handled separately)
_WINDOWS_RESERVED_CHARS = set('<>"|?*')

# -----------------------------------------------------------------------------
# PATH VALIDATION API
# -----------------------------------------------------------------------------

def is_valid_path_string(value: Any) -> bool:
    """
    Report whether a string can be interpreted as a filesystem path.

    Never raises. Only syntactic validity is checked; the path does not
    need to exist.

    Args:
        value: Candidate path or path segment.

    Returns:
        bool: True if the host filesystem would accept the string as a path.
    """
    if not isinstance(value, str):
        return False
    if "\x00" in value:
        return False

    if sys.platform == "win32":
        if any(ch in _WINDOWS_RESERVED_CHARS or ord(ch) < 32 for ch in value):
            return False
        # A colon is only legal as the drive separator ("C:")
        drive, rest = os.path.splitdrive(value)
        if ":" in rest:
            return False

    return True


def get_user_data_dir() -> str:
    """
    Resolve the per-user directory used for persistent settings and logs.

    Does not create the directory.

    Returns:
        str: Absolute path (``%LOCALAPPDATA%/treewright`` or ``~/.treewright``).
    """
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            return os.path.abspath(os.path.join(base, APP_DIR_NAME))
    return os.path.abspath(os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME))

# -----------------------------------------------------------------------------
# FILESYSTEM PRIMITIVES
# -----------------------------------------------------------------------------

class FileSystem(Protocol):
    """Primitive operations the creator needs from a filesystem."""

    def exists(self, path: str) -> bool: ...

    def is_directory(self, path: str) -> bool: ...

    def create_file(self, path: str) -> None: ...

    def create_directory(self, path: str) -> None: ...

    def write_bytes(self, path: str, data: bytes) -> None: ...


class LocalFileSystem:
    """
    FileSystem implementation backed by the host operating system.

    Every mutating method either succeeds or raises exactly one of
    AlreadyExistsError, UnsupportedOperationError, PermissionDeniedError
    or GenericIOError.
    """

    def exists(self, path: str) -> bool:
        # lexists so that dangling symlinks still count as collisions
        return os.path.lexists(path)

    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    def create_file(self, path: str) -> None:
        """Create an empty file, failing if anything already occupies the path."""
        try:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o666)
        except (OSError, NotImplementedError) as e:
            raise translate_os_error(e, path) from e
        os.close(fd)

    def create_directory(self, path: str) -> None:
        """Create a single directory level; parents must already exist."""
        try:
            os.mkdir(path)
        except (OSError, NotImplementedError) as e:
            raise translate_os_error(e, path) from e

    def write_bytes(self, path: str, data: bytes) -> None:
        try:
            with open(path, "wb") as f:
                f.write(data)
        except (OSError, NotImplementedError) as e:
            raise translate_os_error(e, path) from e


def translate_os_error(error: BaseException, path: str) -> FsError:
    """
    Map a native exception onto the domain filesystem error kinds.

    Args:
        error: Exception raised by the OS layer.
        path: Path the operation targeted.

    Returns:
        FsError: The matching domain error, ready to be raised.
    """
    message = f"{path}: {error}"
    if isinstance(error, FileExistsError):
        return AlreadyExistsError(message, path, error)
    if isinstance(error, (NotImplementedError, io.UnsupportedOperation)):
        return UnsupportedOperationError(message, path, error)
    if isinstance(error, PermissionError):
        return PermissionDeniedError(message, path, error)
    return GenericIOError(message, path, error)
