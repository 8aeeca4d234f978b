"""
themegen CLI package.

- app.py: Typer app, global options, logging setup
- commands.py: generate, validate, inspect, targets
"""

from themegen.cli.app import app, configure_logging, main, version_callback

__all__ = ["app", "main", "configure_logging", "version_callback"]
