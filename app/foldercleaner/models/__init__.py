"""Data models for foldercleaner.

This module exports the configuration models.
"""

from foldercleaner.models.config import (
    AnyPatternConfig,
    CleanerConfig,
    ExtensionPatternConfig,
    PatternConfig,
    RoutineConfig,
)

__all__ = [
    "AnyPatternConfig",
    "CleanerConfig",
    "ExtensionPatternConfig",
    "PatternConfig",
    "RoutineConfig",
]
