"""Unit tests for display helpers.

Tests interval formatting, routine and result tables, and summaries.
"""

import errno
from datetime import timedelta
from pathlib import Path
from unittest.mock import patch

import pytest
from foldercleaner.cli.display import (
    create_report_table,
    create_routines_table,
    format_interval,
    print_reports_summary,
)
from foldercleaner.core.routine import PassReport, Routine
from foldercleaner.filesystem.errors import RemovalError
from foldercleaner.filesystem.pattern import ExtensionPattern


def _routine(interval: timedelta) -> Routine:
    return Routine(directory=Path("dir"), interval=interval)


class TestFormatInterval:
    """Tests for format_interval function."""

    @pytest.mark.parametrize(
        ("interval", "expected"),
        [
            (timedelta(seconds=45), "45s"),
            (timedelta(minutes=1), "1m"),
            (timedelta(hours=1, minutes=30), "1h 30m"),
            (timedelta(days=1, seconds=5), "1d 5s"),
            (timedelta(seconds=1.5), "1.5s"),
        ],
    )
    def test_format(self, interval: timedelta, expected: str) -> None:
        """Intervals are shown in compact units."""
        assert format_interval(_routine(interval)) == expected


class TestTables:
    """Tests for table builders."""

    def test_routines_table(self) -> None:
        """One row per routine."""
        routines = [
            _routine(timedelta(minutes=1)),
            Routine(Path("other"), timedelta(hours=1), ExtensionPattern("lnk")),
        ]

        table = create_routines_table(routines)

        assert table.row_count == 2
        assert [c.header for c in table.columns] == ["Directory", "Pattern", "Interval"]

    def test_report_table(self) -> None:
        """Removed entries and failures each get a row."""
        error = RemovalError(Path("dir/b"), OSError(errno.EBUSY, "Busy"))
        reports = [
            PassReport(directory=Path("dir"), removed=(Path("dir/a"), Path("dir/c"))),
            PassReport(directory=Path("dir2"), failures=(error,)),
        ]

        table = create_report_table(reports)

        assert table.row_count == 3


class TestSummary:
    """Tests for print_reports_summary function."""

    def test_all_removed(self) -> None:
        """Without failures a success message is printed."""
        reports = [PassReport(directory=Path("dir"), removed=(Path("dir/a"),))]

        with patch("foldercleaner.cli.display.print_success") as mock_success:
            print_reports_summary(reports)

        mock_success.assert_called_once_with("Removed 1 entry.")

    def test_failures(self) -> None:
        """Failures are counted in the summary."""
        error = RemovalError(Path("dir/b"), OSError(errno.EBUSY, "Busy"))
        reports = [PassReport(directory=Path("dir"), removed=(Path("dir/a"),), failures=(error,))]

        with patch("foldercleaner.cli.display.console") as mock_console:
            print_reports_summary(reports, listing_failures=2)

        printed = mock_console.print.call_args.args[0]
        assert "1 removed" in printed
        assert "1 failed" in printed
        assert "2 directory listing(s) failed" in printed
