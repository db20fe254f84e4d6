"""Cleanup routines.

A routine couples a directory, a pattern and an interval. Calling
``run`` performs one pass: every immediate entry of the directory that
matches the pattern is removed. Subdirectories are removed as a whole
when they match and are never searched for matching entries.

Example:
    >>> from datetime import timedelta
    >>> from pathlib import Path
    >>> from foldercleaner.filesystem import ExtensionPattern
    >>> desktop = Routine(
    ...     directory=Path("~/Desktop").expanduser(),
    ...     interval=timedelta(hours=1),
    ...     pattern=ExtensionPattern("lnk"),
    ... )
    >>> report = desktop.run()  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path

from foldercleaner.filesystem.errors import RemovalError
from foldercleaner.filesystem.pattern import AnyPattern, Pattern, pattern_from_config
from foldercleaner.filesystem.remove import remove
from foldercleaner.models.config import RoutineConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PassReport:
    """Outcome of a single routine pass.

    Attributes:
        directory: Directory that was cleaned.
        removed: Matching entries that are gone after the pass.
        failures: Removal errors for matching entries that could not be removed.
    """

    directory: Path
    removed: tuple[Path, ...] = ()
    failures: tuple[RemovalError, ...] = ()

    @property
    def failed(self) -> bool:
        """Check if at least one matching entry could not be removed."""
        return bool(self.failures)


@dataclass(frozen=True, slots=True)
class Routine:
    """A routine to clean a directory based on a pattern.

    Attributes:
        directory: Directory whose immediate entries are cleaned.
        interval: Time to wait between the end of one pass and the next.
        pattern: Selects which entries are removed.
    """

    directory: Path
    interval: timedelta
    pattern: Pattern = field(default_factory=AnyPattern)

    def __post_init__(self) -> None:
        """Validate routine data after initialization."""
        if self.interval <= timedelta(0):
            msg = f"Interval must be positive, got {self.interval.total_seconds()} seconds"
            raise ValueError(msg)
        if not isinstance(self.directory, Path):
            object.__setattr__(self, "directory", Path(self.directory))

    @classmethod
    def from_config(cls, config: RoutineConfig) -> Routine:
        """Create a routine from its validated configuration."""
        return cls(
            directory=config.directory,
            interval=config.interval,
            pattern=pattern_from_config(config.pattern),
        )

    def run(self) -> PassReport:
        """Execute one pass of the routine.

        Matching entries are removed one at a time in listing order. A
        failure to remove one entry is logged and recorded in the report
        but never stops the pass.

        Returns:
            PassReport listing removed entries and removal failures.

        Raises:
            OSError: If the directory cannot be listed, for example because
                it does not exist or is not readable. Nothing is removed.
        """
        removed: list[Path] = []
        failures: list[RemovalError] = []

        for entry in self._list_entries():
            if not self.pattern.matches(entry):
                continue
            try:
                remove(entry)
            except RemovalError as e:
                logger.warning("Could not remove %s: %s", entry, e.cause)
                failures.append(e)
                continue
            removed.append(entry)

        logger.debug(
            "Pass over %s finished: %d removed, %d failed",
            self.directory,
            len(removed),
            len(failures),
        )
        return PassReport(
            directory=self.directory,
            removed=tuple(removed),
            failures=tuple(failures),
        )

    def _list_entries(self) -> list[Path]:
        """List the immediate entries of the routine's directory.

        The listing is collected before anything is removed. An error
        while reading further entries ends the listing early; entries
        read so far are kept.
        """
        entries: list[Path] = []
        with os.scandir(self.directory) as it:
            while True:
                try:
                    entry = next(it)
                except StopIteration:
                    break
                except OSError as e:
                    logger.warning("Listing of %s ended early: %s", self.directory, e)
                    break
                entries.append(Path(entry.path))
        return entries
