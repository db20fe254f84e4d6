"""Init command implementation.

Creates a starter config.toml with an example routine.
"""

from datetime import timedelta
from pathlib import Path
from typing import Annotated

import typer

from foldercleaner.core.config import ConfigError, config_exists, save_config
from foldercleaner.core.paths import ensure_config_dir, get_config_path
from foldercleaner.models.config import CleanerConfig, ExtensionPatternConfig, RoutineConfig
from foldercleaner.utils.formatting import print_error, print_info, print_success, print_warning

app = typer.Typer(
    help="Create a starter configuration file.",
    invoke_without_command=True,
)


def _create_starter_config() -> CleanerConfig:
    """Create a config with a single routine removing desktop shortcuts hourly."""
    return CleanerConfig(
        routines=[
            RoutineConfig(
                directory=Path.home() / "Desktop",
                interval=timedelta(hours=1),
                pattern=ExtensionPatternConfig(extension="lnk"),
            )
        ]
    )


@app.callback(invoke_without_command=True)
def init_config(
    ctx: typer.Context,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path for config file.",
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite existing config without prompting.",
        ),
    ] = False,
) -> None:
    """Create a starter configuration file.

    Examples:
        foldercleaner init                    # Create config in default location
        foldercleaner init --output my.toml   # Create config at custom path
        foldercleaner init --force            # Overwrite existing config
    """
    if ctx.invoked_subcommand is not None:
        return

    output_path = output or get_config_path()

    if config_exists(output_path):
        if not force:
            print_error(f"Config already exists: {output_path}")
            print_info("Use --force to overwrite or specify a different path with --output.")
            raise typer.Exit(code=1)
        print_warning(f"Overwriting existing config: {output_path}")

    if output is None:
        try:
            ensure_config_dir()
        except RuntimeError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e

    try:
        saved_path = save_config(_create_starter_config(), output_path)
    except ConfigError as e:
        print_error(f"Failed to save config: {e}")
        raise typer.Exit(code=1) from e

    print_success(f"Config created: {saved_path}")
    print_info("Edit the routines, then start cleaning with 'foldercleaner run'.")
