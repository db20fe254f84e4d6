"""Shared Rich display functions for routines and pass reports.

Provides reusable table builders and summary printers used by the
run, clean and config commands.
"""

from rich.table import Table

from foldercleaner.core.routine import PassReport, Routine
from foldercleaner.utils.formatting import console, print_success


def format_interval(routine: Routine) -> str:
    """Format a routine interval as a compact string (e.g., "1h 30m", "45s")."""
    total = routine.interval.total_seconds()
    if not total.is_integer():
        return f"{total:g}s"

    remaining = int(total)
    parts: list[str] = []
    for unit, size in (("d", 86400), ("h", 3600), ("m", 60), ("s", 1)):
        count, remaining = divmod(remaining, size)
        if count:
            parts.append(f"{count}{unit}")
    return " ".join(parts)


def create_routines_table(routines: list[Routine]) -> Table:
    """Create a Rich table displaying configured routines.

    Args:
        routines: Routines to display.

    Returns:
        Rich Table with Directory, Pattern and Interval columns.
    """
    table = Table(
        title="Routines",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Directory", no_wrap=True)
    table.add_column("Pattern", width=12)
    table.add_column("Interval", justify="right")

    for routine in routines:
        table.add_row(
            f"[path]{routine.directory}[/path]",
            routine.pattern.describe(),
            f"[muted]{format_interval(routine)}[/muted]",
        )

    return table


def create_report_table(reports: list[PassReport]) -> Table:
    """Create a Rich table displaying the entries handled by passes.

    Removed entries show "OK"; entries that could not be removed show
    "FAIL" with the underlying OS error.

    Args:
        reports: Reports of the passes to display.

    Returns:
        Rich Table with Status, Path and Message columns.
    """
    table = Table(
        title="Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=8, justify="center")
    table.add_column("Path", no_wrap=True)
    table.add_column("Message")

    for report in reports:
        for path in report.removed:
            table.add_row("[success]OK[/success]", f"[removed]{path}[/removed]", "")
        for failure in report.failures:
            table.add_row(
                "[error]FAIL[/error]",
                str(failure.path),
                f"[muted]{failure.cause}[/muted]",
            )

    return table


def print_reports_summary(reports: list[PassReport], listing_failures: int = 0) -> None:
    """Print a summary of one pass over every routine.

    Args:
        reports: Reports of the passes that could list their directory.
        listing_failures: Number of routines whose directory could not be listed.
    """
    removed_count = sum(len(r.removed) for r in reports)
    failed_count = sum(len(r.failures) for r in reports)

    if failed_count == 0 and listing_failures == 0:
        print_success(f"Removed {removed_count} entr{'y' if removed_count == 1 else 'ies'}.")
        return

    parts = [f"[success]{removed_count} removed[/success]"]
    if failed_count:
        parts.append(f"[error]{failed_count} failed[/error]")
    if listing_failures:
        parts.append(f"[error]{listing_failures} directory listing(s) failed[/error]")
    console.print(f"\n{', '.join(parts)}")
