"""Error types raised by tree operations.

Failures of the underlying OS primitives are not wrapped; they propagate
as the OSError raised by the OS call.
"""

from __future__ import annotations

import errno
import os


class TreeFsError(Exception):
    """Base class for failures raised by treefs itself."""

    path: str | None = None
    operation: str | None = None


class PathNotFoundError(TreeFsError, FileNotFoundError):
    """A path that must exist for the operation does not."""

    def __init__(self, operation: str, path: str | os.PathLike[str]) -> None:
        path = os.fspath(path)
        super().__init__(errno.ENOENT, f"{operation}: {path} does not exist", path)
        self.operation = operation
        self.path = path

    def __str__(self) -> str:
        return self.strerror
