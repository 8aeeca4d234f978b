"""
themegen CLI application.

Defines the Typer app, global options (--version, --verbose), logging
setup, and registers the theme commands.
"""

from __future__ import annotations

import logging
import os
import platform
from typing import Annotated

import typer

from themegen._version import get_version

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVEL_ENV = "THEMEGEN_LOG_LEVEL"


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging once; THEMEGEN_LOG_LEVEL overrides --verbose."""
    level_name = os.getenv(LOG_LEVEL_ENV, "DEBUG" if verbose else "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("themegen").setLevel(level)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        from themegen.emit import TargetRegistry

        typer.echo(f"themegen version {get_version()}")
        typer.echo(f"  Python:   {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Targets:  {', '.join(TargetRegistry.list_targets())}")
        raise typer.Exit()


# =============================================================================
# Main Application
# =============================================================================

app = typer.Typer(
    help="""themegen - design tokens to typed theme source code

Reads theme definition files (JSON token sets or legacy flat themes),
resolves color references and modifiers, validates the theme set, and
generates a color interface, per-theme color objects, and a theme registry.
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and environment information",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """themegen CLI main callback for global options."""
    configure_logging(verbose)


# =============================================================================
# Theme Commands (imported from cli.commands)
# =============================================================================

from themegen.cli.commands import (  # noqa: E402
    generate_command,
    inspect_command,
    targets_command,
    validate_command,
)

app.command(name="generate")(generate_command)
app.command(name="validate")(validate_command)
app.command(name="inspect")(inspect_command)
app.command(name="targets")(targets_command)


def main() -> None:
    """Entry point for the themegen console script."""
    app()
