"""Command-line interface for foldercleaner."""
