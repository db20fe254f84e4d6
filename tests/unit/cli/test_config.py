"""Unit tests for config commands.

Tests for foldercleaner config show and config path.
"""

from datetime import timedelta
from pathlib import Path

from foldercleaner.cli.main import app
from foldercleaner.core.config import save_config
from foldercleaner.models.config import CleanerConfig, ExtensionPatternConfig, RoutineConfig
from typer.testing import CliRunner

runner = CliRunner()


class TestConfigShow:
    """Tests for foldercleaner config show."""

    def test_show_routines(self, tmp_path: Path) -> None:
        """Configured routines are listed in a table."""
        config = CleanerConfig(
            routines=[
                RoutineConfig(directory=Path("downloads"), interval=timedelta(hours=1)),
                RoutineConfig(
                    directory=Path("desktop"),
                    interval=timedelta(minutes=90),
                    pattern=ExtensionPatternConfig(extension="lnk"),
                ),
            ]
        )
        path = save_config(config, tmp_path / "config.toml")

        result = runner.invoke(app, ["config", "show", "--config", str(path)])

        assert result.exit_code == 0, result.output
        assert "downloads" in result.output
        assert "desktop" in result.output
        assert "any" in result.output
        assert "*.lnk" in result.output
        assert "1h 30m" in result.output

    def test_show_empty(self, tmp_path: Path) -> None:
        """An empty config reports that nothing is configured."""
        path = save_config(CleanerConfig(), tmp_path / "config.toml")

        result = runner.invoke(app, ["config", "show", "--config", str(path)])

        assert result.exit_code == 0
        assert "No routines configured" in result.output

    def test_show_missing(self, tmp_path: Path) -> None:
        """A missing config exits 1."""
        result = runner.invoke(app, ["config", "show", "--config", str(tmp_path / "x.toml")])

        assert result.exit_code == 1
        assert "Config not found" in result.output


class TestConfigPath:
    """Tests for foldercleaner config path."""

    def test_path(self, config_home: Path) -> None:
        """The default config path is printed."""
        result = runner.invoke(app, ["config", "path"])

        assert result.exit_code == 0
        assert result.output.strip() == str(config_home / "foldercleaner" / "config.toml")
