"""foldercleaner - periodically remove matching entries from directories."""

__version__ = "0.1.0"
