"""Run command implementation.

Runs every routine from the configuration file, either once or
repeatedly on each routine's interval.
"""

from pathlib import Path
from typing import Annotated

import typer

from foldercleaner.cli.types import run_routines_forever, run_routines_once
from foldercleaner.core.config import require_routines
from foldercleaner.utils.formatting import print_warning

app = typer.Typer(
    help="Run the configured cleanup routines.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def run_routines(
    ctx: typer.Context,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file.",
        ),
    ] = None,
    once: Annotated[
        bool,
        typer.Option(
            "--once",
            help="Run a single pass of every routine and exit.",
        ),
    ] = False,
) -> None:
    """Run the configured cleanup routines.

    Each routine runs in its own thread: it removes the matching entries
    of its directory, waits for its interval, and repeats until the
    process is interrupted.

    Examples:
        foldercleaner run                      # Run until Ctrl+C
        foldercleaner run --once               # Single pass, then exit
        foldercleaner run --config my.toml     # Use a custom config file
    """
    if ctx.invoked_subcommand is not None:
        return

    routines = require_routines(config_path)
    if not routines:
        print_warning("No routines configured.")
        return

    if once:
        run_routines_once(routines)
        return

    run_routines_forever(routines)
