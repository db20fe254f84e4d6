"""Matching strategies for directory entries.

A pattern decides which entries of a routine's directory are removed.
Patterns are immutable and side-effect free: ``matches`` only looks at
the path string, never at the filesystem.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import PurePath

from foldercleaner.models.config import AnyPatternConfig, ExtensionPatternConfig, PatternConfig


class Pattern(ABC):
    """Abstract base class for entry matching strategies."""

    __slots__ = ()

    @abstractmethod
    def matches(self, path: str | PurePath) -> bool:
        """Check whether a path is selected by this pattern.

        Args:
            path: Path of a directory entry.

        Returns:
            True if the entry should be removed.
        """

    @abstractmethod
    def describe(self) -> str:
        """Return a short human-readable label for display."""


@dataclass(frozen=True, slots=True)
class AnyPattern(Pattern):
    """Pattern that matches every path."""

    def matches(self, path: str | PurePath) -> bool:
        return True

    def describe(self) -> str:
        return "any"


@dataclass(frozen=True, slots=True)
class ExtensionPattern(Pattern):
    """Pattern that matches paths by their extension.

    The comparison is exact and case-sensitive against the extension of
    the final path component, without the leading dot. ``a.lnk`` matches
    ``"lnk"`` while ``a.LNK``, ``a.lnk.bak`` and ``.lnk`` do not.

    Attributes:
        extension: Extension to match, without a leading dot.
    """

    extension: str

    def matches(self, path: str | PurePath) -> bool:
        return _extension_of(path) == self.extension

    def describe(self) -> str:
        return f"*.{self.extension}"


def _extension_of(path: str | PurePath) -> str:
    """Get the extension of the final path component, without the dot.

    Returns an empty string when the name has no extension. A leading dot
    alone (``.bashrc``) does not start an extension.
    """
    return PurePath(path).suffix[1:]


def pattern_from_config(config: PatternConfig) -> Pattern:
    """Build a Pattern from its validated configuration.

    Args:
        config: Pattern section of a routine configuration.

    Returns:
        The matching Pattern instance.
    """
    if isinstance(config, ExtensionPatternConfig):
        return ExtensionPattern(config.extension)
    if isinstance(config, AnyPatternConfig):
        return AnyPattern()
    msg = f"Unsupported pattern kind: {config.kind}"
    raise ValueError(msg)
