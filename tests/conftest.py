from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A destination directory fixture backed by pytest's tmp_path.
3. A fault-injecting filesystem used to simulate operational failures.
"""

import os
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Type

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from treewright.domain.errors import FsError  # noqa: E402
from treewright.infra.fs import LocalFileSystem  # noqa: E402


# -----------------------------------------------------------------------------
# Fakes
# -----------------------------------------------------------------------------
class FaultyFileSystem(LocalFileSystem):
    """
    Real filesystem that raises configured errors for chosen entry names.

    Each mapping goes from an entry basename to the FsError subclass raised
    when that operation targets it. Every mutating call is recorded in
    ``calls`` as ``(operation, path)``, including the failing ones.
    """

    def __init__(
            self,
            directory_errors: Optional[Dict[str, Type[FsError]]] = None,
            file_errors: Optional[Dict[str, Type[FsError]]] = None,
            write_errors: Optional[Dict[str, Type[FsError]]] = None,
    ) -> None:
        self.directory_errors = directory_errors or {}
        self.file_errors = file_errors or {}
        self.write_errors = write_errors or {}
        self.calls: List[Tuple[str, str]] = []

    def create_directory(self, path: str) -> None:
        self.calls.append(("create_directory", path))
        self._maybe_fail(self.directory_errors, path)
        super().create_directory(path)

    def create_file(self, path: str) -> None:
        self.calls.append(("create_file", path))
        self._maybe_fail(self.file_errors, path)
        super().create_file(path)

    def write_bytes(self, path: str, data: bytes) -> None:
        self.calls.append(("write_bytes", path))
        self._maybe_fail(self.write_errors, path)
        super().write_bytes(path, data)

    @staticmethod
    def _maybe_fail(errors: Dict[str, Type[FsError]], path: str) -> None:
        error_cls = errors.get(os.path.basename(path))
        if error_cls is not None:
            raise error_cls(f"simulated failure for {path}", path)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def destination(tmp_path: Path) -> Path:
    """Return an existing, empty destination directory."""
    dest = tmp_path / "dest"
    dest.mkdir()
    return dest


@pytest.fixture
def faulty_fs_cls() -> Type[FaultyFileSystem]:
    """Expose the fault-injecting filesystem class to test modules."""
    return FaultyFileSystem
