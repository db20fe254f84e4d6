"""Unit tests for the clean command.

Tests ad hoc cleaning of a single directory from the command line.
"""

from datetime import timedelta
from pathlib import Path
from unittest.mock import MagicMock, patch

from foldercleaner.cli.main import app
from foldercleaner.filesystem.pattern import AnyPattern, ExtensionPattern
from typer.testing import CliRunner

runner = CliRunner()


class TestCleanCommand:
    """Tests for foldercleaner clean."""

    def test_clean_once_with_extension(self, cleanup_dir: Path) -> None:
        """--extension limits removal to matching top-level entries."""
        result = runner.invoke(app, ["clean", str(cleanup_dir), "--extension", "lnk", "--once"])

        assert result.exit_code == 0, result.output
        assert not (cleanup_dir / "a.lnk").exists()
        assert (cleanup_dir / "b.txt").exists()
        assert (cleanup_dir / "c" / "d.lnk").exists()

    def test_clean_once_everything(self, cleanup_dir: Path) -> None:
        """Without --extension every entry is removed."""
        result = runner.invoke(app, ["clean", str(cleanup_dir), "--once"])

        assert result.exit_code == 0, result.output
        assert cleanup_dir.exists()
        assert list(cleanup_dir.iterdir()) == []
        assert "Removed 3 entries" in result.output

    def test_clean_missing_directory(self, tmp_path: Path) -> None:
        """A directory that cannot be listed exits 1."""
        result = runner.invoke(app, ["clean", str(tmp_path / "missing"), "--once"])

        assert result.exit_code == 1
        assert "Cannot list" in result.output

    def test_clean_rejects_dotted_extension(self, tmp_path: Path) -> None:
        """Extensions with a leading dot are rejected."""
        result = runner.invoke(app, ["clean", str(tmp_path), "-e", ".lnk", "--once"])

        assert result.exit_code == 1
        assert "without a leading dot" in result.output

    def test_clean_rejects_non_positive_interval(self, tmp_path: Path) -> None:
        """A zero interval is rejected."""
        result = runner.invoke(app, ["clean", str(tmp_path), "--interval", "0"])

        assert result.exit_code == 1
        assert "Interval must be positive" in result.output

    def test_clean_rejects_out_of_range_interval(self, tmp_path: Path) -> None:
        """An infinite interval is reported instead of crashing."""
        result = runner.invoke(app, ["clean", str(tmp_path), "--interval", "inf", "--once"])

        assert result.exit_code == 1
        assert "out of range" in result.output

    def test_clean_scheduled(self, tmp_path: Path) -> None:
        """Without --once a single routine is scheduled with the given interval."""
        with patch("foldercleaner.cli.types.Scheduler") as mock_scheduler_class:
            mock_scheduler = MagicMock()
            mock_scheduler_class.return_value = mock_scheduler

            result = runner.invoke(app, ["clean", str(tmp_path), "-e", "tmp", "-i", "90"])

        assert result.exit_code == 0, result.output
        routine = mock_scheduler.spawn.call_args.args[0]
        assert routine.directory == tmp_path
        assert routine.interval == timedelta(seconds=90)
        assert routine.pattern == ExtensionPattern("tmp")
        mock_scheduler.wait.assert_called_once_with()

    def test_clean_default_pattern_and_interval(self, tmp_path: Path) -> None:
        """Defaults are every entry, once a minute."""
        with patch("foldercleaner.cli.types.Scheduler") as mock_scheduler_class:
            mock_scheduler = MagicMock()
            mock_scheduler_class.return_value = mock_scheduler

            runner.invoke(app, ["clean", str(tmp_path)])

        routine = mock_scheduler.spawn.call_args.args[0]
        assert routine.pattern == AnyPattern()
        assert routine.interval == timedelta(minutes=1)
