"""Shared helpers for CLI commands.

This module runs routines for the run and clean commands, either as a
single pass over each routine or as long-running scheduled threads.
"""

import typer

from foldercleaner.cli.display import (
    create_report_table,
    create_routines_table,
    print_reports_summary,
)
from foldercleaner.core.routine import PassReport, Routine
from foldercleaner.core.scheduler import Scheduler
from foldercleaner.utils.formatting import console, print_error, print_info, print_warning


def run_routines_once(routines: list[Routine]) -> None:
    """Run one pass of every routine and display the results.

    Args:
        routines: Routines to run, in order.

    Raises:
        typer.Exit: With code 1 if any directory could not be listed or any
            matching entry could not be removed.
    """
    reports: list[PassReport] = []
    listing_failures = 0

    for routine in routines:
        try:
            reports.append(routine.run())
        except OSError as e:
            print_error(f"Cannot list {routine.directory}: {e}")
            listing_failures += 1

    if any(r.removed or r.failures for r in reports):
        console.print(create_report_table(reports))

    print_reports_summary(reports, listing_failures)

    if listing_failures or any(r.failed for r in reports):
        raise typer.Exit(code=1)


def run_routines_forever(routines: list[Routine]) -> None:
    """Spawn one thread per routine and block until interrupted.

    Args:
        routines: Routines to schedule.
    """
    console.print(create_routines_table(routines))

    scheduler = Scheduler(on_pass=_report_pass)
    for routine in routines:
        scheduler.spawn(routine)

    print_info(f"Running {len(routines)} routine(s). Press Ctrl+C to stop.")
    scheduler.wait()
    print_info("Stopped.")


def _report_pass(routine: Routine, report: PassReport) -> None:
    """Surface removal failures of a scheduled pass on the console."""
    for failure in report.failures:
        print_warning(f"Could not remove {failure.path}: {failure.cause}")
