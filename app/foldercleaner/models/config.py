"""Configuration models for cleanup routines.

This module defines the Pydantic models representing the config.toml
structure that lists the directories to clean, how often, and which
entries to remove.
"""

from datetime import timedelta
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AnyPatternConfig(BaseModel):
    """Pattern section selecting every entry.

    Attributes:
        kind: Discriminator, always "any".
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["any"] = "any"


class ExtensionPatternConfig(BaseModel):
    """Pattern section selecting entries by extension.

    Attributes:
        kind: Discriminator, always "extension".
        extension: Extension to match, without a leading dot (e.g., "lnk").
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["extension"] = "extension"
    extension: Annotated[str, Field(min_length=1, description="Extension without leading dot")]

    @field_validator("extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        """Reject extensions written with a leading dot or a path separator."""
        if v.startswith("."):
            msg = f"Extension must not start with '.', got {v!r}"
            raise ValueError(msg)
        if "/" in v or "\\" in v:
            msg = f"Extension must not contain path separators, got {v!r}"
            raise ValueError(msg)
        return v


# Type alias for the pattern section, discriminated by "kind"
PatternConfig = Annotated[
    AnyPatternConfig | ExtensionPatternConfig,
    Field(discriminator="kind"),
]


class RoutineConfig(BaseModel):
    """Configuration for a single cleanup routine.

    Attributes:
        directory: Directory whose immediate entries are cleaned.
        interval: Time between the end of one pass and the start of the next.
            Accepts seconds or an ISO 8601 duration (e.g., "PT1H").
        pattern: Which entries to remove. Defaults to every entry.
    """

    model_config = ConfigDict(extra="forbid")

    directory: Annotated[Path, Field(description="Directory to clean")]
    interval: Annotated[timedelta, Field(description="Time between passes")]
    pattern: Annotated[
        PatternConfig,
        Field(default_factory=AnyPatternConfig, description="Entry selection pattern"),
    ]

    @field_validator("directory")
    @classmethod
    def expand_directory(cls, v: Path) -> Path:
        """Expand ~ in the configured directory."""
        return v.expanduser()

    @field_validator("interval")
    @classmethod
    def validate_interval(cls, v: timedelta) -> timedelta:
        """Validate that the interval is strictly positive."""
        if v <= timedelta(0):
            msg = f"Interval must be positive, got {v.total_seconds()} seconds"
            raise ValueError(msg)
        return v


class CleanerConfig(BaseModel):
    """Complete foldercleaner configuration.

    Attributes:
        routines: Cleanup routines, each run in its own thread.
    """

    model_config = ConfigDict(extra="forbid")

    routines: Annotated[
        list[RoutineConfig],
        Field(default_factory=list, description="Cleanup routines"),
    ]
