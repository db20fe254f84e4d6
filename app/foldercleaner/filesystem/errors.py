"""Filesystem error types and OS error classification.

This module provides the exception raised when a path cannot be removed,
along with predicates that classify the underlying OS errors so removal
code does not have to compare error codes inline.
"""

import errno
from pathlib import Path

# Windows reports ERROR_DIRECTORY ("The directory name is invalid") when a
# directory operation is attempted on a file.
WINDOWS_ERROR_DIRECTORY = 267


class FolderCleanerError(Exception):
    """Base exception for foldercleaner errors."""


class RemovalError(FolderCleanerError):
    """Raised when a file or directory could not be removed.

    Never raised for a path that does not exist, since removing it is
    already achieved.

    Attributes:
        path: Path of the file or directory that could not be removed.
        cause: The OS error that prevented removal.
    """

    def __init__(self, path: str | Path, cause: OSError) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f'failed to remove "{self.path}": {cause}')


def is_not_found(error: OSError) -> bool:
    """Check whether an OS error signals that a path does not exist."""
    return isinstance(error, FileNotFoundError) or error.errno == errno.ENOENT


def is_not_a_directory(error: OSError) -> bool:
    """Check whether an OS error signals that a path is unexpectedly not a directory."""
    if isinstance(error, NotADirectoryError) or error.errno == errno.ENOTDIR:
        return True
    return getattr(error, "winerror", None) == WINDOWS_ERROR_DIRECTORY


def is_a_directory(error: OSError) -> bool:
    """Check whether an OS error signals that a path is unexpectedly a directory."""
    return isinstance(error, IsADirectoryError) or error.errno == errno.EISDIR
