"""Config inspection commands.

Provides a command to display the routines defined in the
configuration file.
"""

from pathlib import Path
from typing import Annotated

import typer

from foldercleaner.cli.display import create_routines_table
from foldercleaner.core.config import require_routines
from foldercleaner.core.paths import get_config_path
from foldercleaner.utils.formatting import console, print_info

app = typer.Typer(
    help="Inspect the configuration.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def show(
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file.",
        ),
    ] = None,
) -> None:
    """Show the configured routines."""
    routines = require_routines(config_path)
    if not routines:
        print_info("No routines configured.")
        return

    console.print(create_routines_table(routines))


@app.command()
def path() -> None:
    """Print the default config file path."""
    console.print(str(get_config_path()), soft_wrap=True)
