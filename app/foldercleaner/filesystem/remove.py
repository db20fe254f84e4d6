"""Idempotent removal of files and directories.

``remove`` combines file deletion and recursive directory deletion into a
single "make sure nothing exists at this path" operation. A path that is
already gone counts as removed.
"""

import logging
import os
import shutil
import stat
from pathlib import Path

from foldercleaner.filesystem.errors import (
    RemovalError,
    is_a_directory,
    is_not_a_directory,
    is_not_found,
)

logger = logging.getLogger(__name__)


def remove(path: str | Path) -> None:
    """Remove a file or directory, whatever it is.

    Real directories are removed recursively. Files, symlinks (including
    symlinks to directories) and other entries are unlinked. The entry
    type is decided with ``lstat``; if the entry changes type before it is
    removed, the OS error is used to switch to the other strategy.

    Args:
        path: Path of the entry to remove.

    Raises:
        RemovalError: If the entry exists and could not be removed, for
            example because of missing permissions. Never raised for a
            path that does not exist.
    """
    target = Path(path)

    try:
        mode = target.lstat().st_mode
    except OSError as e:
        if is_not_found(e):
            logger.debug("Already absent: %s", target)
            return
        # lstat is unavailable, let the removal attempts decide
        mode = None

    if mode is None or stat.S_ISDIR(mode):
        _remove_tree(target)
    else:
        _remove_file(target)


def _remove_tree(target: Path) -> None:
    """Remove a directory recursively, falling back to unlink for non-directories."""
    try:
        _rmtree(target)
    except OSError as e:
        if is_not_a_directory(e) or _is_symlink(target):
            _remove_file(target)
            return
        _raise_unless_gone(target, e)


def _remove_file(target: Path) -> None:
    """Unlink a single entry, falling back to recursive removal for directories."""
    try:
        target.unlink()
    except OSError as e:
        if is_a_directory(e) or (isinstance(e, PermissionError) and _is_real_dir(target)):
            # unlink on a directory reports EISDIR on Linux and EPERM/EACCES elsewhere
            _remove_tree(target)
            return
        _raise_unless_gone(target, e)
    else:
        logger.debug("Removed %s", target)


def _rmtree(target: Path) -> None:
    """Run shutil.rmtree, retrying once if a nested entry vanished mid-removal."""
    try:
        shutil.rmtree(target)
    except OSError as e:
        if not is_not_found(e) or not os.path.lexists(target):
            raise
        logger.debug("Entry vanished while removing %s, retrying", target)
        shutil.rmtree(target)
    logger.debug("Removed directory %s", target)


def _raise_unless_gone(target: Path, error: OSError) -> None:
    """Swallow not-found errors for the target itself, raise everything else."""
    if is_not_found(error) and not os.path.lexists(target):
        logger.debug("Already absent: %s", target)
        return
    raise RemovalError(target, error) from error


def _is_symlink(target: Path) -> bool:
    try:
        return target.is_symlink()
    except OSError:
        return False


def _is_real_dir(target: Path) -> bool:
    try:
        return stat.S_ISDIR(target.lstat().st_mode)
    except OSError:
        return False
