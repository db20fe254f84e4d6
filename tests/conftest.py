"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture
def cleanup_dir(tmp_path: Path) -> Path:
    """Directory with a.lnk, b.txt and a subdirectory c/ holding d.lnk."""
    root = tmp_path / "target"
    root.mkdir()
    (root / "a.lnk").write_text("shortcut")
    (root / "b.txt").write_text("notes")
    (root / "c").mkdir()
    (root / "c" / "d.lnk").write_text("nested shortcut")
    return root


@pytest.fixture
def config_home(tmp_path: Path):
    """Point XDG_CONFIG_HOME at a temporary directory."""
    home = tmp_path / "config"
    with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(home)}):
        yield home
