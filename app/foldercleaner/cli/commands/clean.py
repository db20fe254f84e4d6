"""Clean command implementation.

Cleans a single directory given on the command line, without a
configuration file. Registered on the main app as a plain command.
"""

from datetime import timedelta
from pathlib import Path
from typing import Annotated

import typer

from foldercleaner.cli.types import run_routines_forever, run_routines_once
from foldercleaner.core.routine import Routine
from foldercleaner.filesystem.pattern import AnyPattern, ExtensionPattern, Pattern
from foldercleaner.utils.formatting import print_error


def clean_directory(
    directory: Annotated[
        Path,
        typer.Argument(help="Directory whose entries are removed."),
    ],
    extension: Annotated[
        str | None,
        typer.Option(
            "--extension",
            "-e",
            help="Only remove entries with this extension (without the dot).",
        ),
    ] = None,
    interval: Annotated[
        float,
        typer.Option(
            "--interval",
            "-i",
            help="Seconds between passes.",
        ),
    ] = 60.0,
    once: Annotated[
        bool,
        typer.Option(
            "--once",
            help="Run a single pass and exit.",
        ),
    ] = False,
) -> None:
    """Remove matching entries of DIRECTORY, repeatedly or once.

    Examples:
        foldercleaner clean ~/Downloads --once            # Empty Downloads now
        foldercleaner clean ~/Desktop -e lnk -i 3600      # Remove shortcuts hourly
    """
    if extension is not None and (not extension or extension.startswith(".")):
        print_error("Extension must be non-empty and given without a leading dot.")
        raise typer.Exit(code=1)

    pattern: Pattern = ExtensionPattern(extension) if extension else AnyPattern()

    try:
        routine = Routine(
            directory=directory.expanduser(),
            interval=timedelta(seconds=interval),
            pattern=pattern,
        )
    except OverflowError as e:
        print_error(f"Interval out of range: {interval} seconds")
        raise typer.Exit(code=1) from e
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if once:
        run_routines_once([routine])
        return

    run_routines_forever([routine])
