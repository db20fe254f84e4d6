"""Filesystem matching and removal module.

This module provides entry matching patterns and the idempotent
removal operation used by cleanup routines.
"""

from foldercleaner.filesystem.errors import (
    FolderCleanerError,
    RemovalError,
    is_not_a_directory,
    is_not_found,
)
from foldercleaner.filesystem.pattern import (
    AnyPattern,
    ExtensionPattern,
    Pattern,
    pattern_from_config,
)
from foldercleaner.filesystem.remove import remove

__all__ = [
    "AnyPattern",
    "ExtensionPattern",
    "FolderCleanerError",
    "Pattern",
    "RemovalError",
    "is_not_a_directory",
    "is_not_found",
    "pattern_from_config",
    "remove",
]
