"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from foldercleaner import __version__
from foldercleaner.cli.commands import clean, config, init, run
from foldercleaner.utils.formatting import configure_logging

# Create main Typer app
app = typer.Typer(
    name="foldercleaner",
    help="Periodically remove matching entries from directories.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"foldercleaner version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """foldercleaner - keep directories clean on a schedule.

    Each routine names a directory, a pattern and an interval; matching
    entries are removed on every pass.
    """
    configure_logging(verbose=verbose, quiet=quiet)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


# Register commands
app.add_typer(run.app, name="run")
app.command(name="clean")(clean.clean_directory)
app.add_typer(init.app, name="init")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
