"""CLI commands for foldercleaner.

This package contains all subcommand implementations.
"""

from foldercleaner.cli.commands import clean, config, init, run

__all__ = ["clean", "config", "init", "run"]
