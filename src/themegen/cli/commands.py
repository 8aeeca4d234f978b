"""
Theme generation commands for the themegen CLI.

- generate: parse, validate, and emit the generated sources
- validate: parse and validate without writing anything
- inspect: show parsed themes and resolved colors
- targets: list available emission targets
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from themegen.core import colors
from themegen.core.errors import ConfigError, ThemegenError
from themegen.core.ir import ParsedTheme
from themegen.core.parser import DEFAULT_SUFFIXES, parse_theme_directory
from themegen.core.registry import ThemeRegistry
from themegen.core.validator import validate_themes
from themegen.emit import CONFIG_FILE, GenerationRunner, TargetName, TargetRegistry
from themegen.emit.config import build_config, load_config_file

console = Console()

ConfigOption = Annotated[
    Path,
    typer.Option("--config", "-c", help=f"Path to {CONFIG_FILE} (optional)"),
]
InputOption = Annotated[
    Path | None,
    typer.Option("--input", "-i", help="Directory of theme definition files"),
]
SuffixOption = Annotated[
    list[str] | None,
    typer.Option("--suffix", help="Theme file extension to read (repeatable, default .json)"),
]


def _fail(error: Exception) -> typer.Exit:
    typer.echo(typer.style(f"✗ {error}", fg=typer.colors.RED), err=True)
    return typer.Exit(code=1)


def _load_validated_themes(
    config_path: Path, input_dir: Path | None, suffixes: list[str] | None
) -> list[ParsedTheme]:
    """Parse and validate themes using only the input settings."""
    file_values = load_config_file(config_path)
    input_dir = input_dir or file_values.get("input_dir")
    if input_dir is None:
        raise ConfigError(
            f"Missing required setting: input_dir. Pass --input or set it in {CONFIG_FILE}."
        )
    suffixes = suffixes or file_values.get("file_suffixes") or list(DEFAULT_SUFFIXES)

    themes = parse_theme_directory(Path(input_dir), suffixes)
    validate_themes(themes, source=str(input_dir))
    return themes


def _swatch(value: str) -> str:
    """Rich markup showing a color chip next to its hex value."""
    if colors.is_valid_hex(value) and len(value) == 7:
        return f"[on {value}]    [/] {value}"
    return escape(value)


# =============================================================================
# Commands
# =============================================================================


def generate_command(
    config_path: ConfigOption = Path(CONFIG_FILE),
    input_dir: InputOption = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output directory (fully owned by themegen)"),
    ] = None,
    package: Annotated[
        str | None,
        typer.Option("--package", "-p", help="Package / namespace of the generated code"),
    ] = None,
    target: Annotated[
        TargetName | None,
        typer.Option("--target", "-t", help="Emission target (default: kotlin)"),
    ] = None,
    support_package: Annotated[
        str | None,
        typer.Option("--support-package", help="Package of the app's ThemeData/AppColors (kotlin)"),
    ] = None,
    suffixes: SuffixOption = None,
    no_clean: Annotated[
        bool,
        typer.Option("--no-clean", help="Keep existing files in the output directory"),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "-n", help="Preview the generated files without writing"),
    ] = False,
) -> None:
    """
    Generate theme sources from a directory of theme definition files.

    Options override the [themegen] section of themegen.toml.

    Examples:
        themegen generate
        themegen generate -i themes -o build/generated -p com.example.generated
        themegen generate --target python --dry-run
    """
    try:
        config = build_config(
            load_config_file(config_path),
            input_dir=input_dir,
            output_dir=output_dir,
            package=package,
            target=target,
            support_package=support_package,
            file_suffixes=suffixes or None,
            clean=False if no_clean else None,
        )
        result = GenerationRunner(config).run(dry_run=dry_run)
    except ThemegenError as e:
        raise _fail(e) from None

    for warning in result.warnings:
        typer.echo(typer.style(f"! {warning}", fg=typer.colors.YELLOW), err=True)

    if dry_run:
        typer.echo("Dry run mode - no files were written:")
        for path in result.files:
            typer.echo(f"  {path}")
        typer.echo(result.summary())
        return

    typer.echo(typer.style(f"✓ {result.summary()}", fg=typer.colors.GREEN, bold=True))
    for path in result.files:
        typer.echo(f"  {path}")


def validate_command(
    config_path: ConfigOption = Path(CONFIG_FILE),
    input_dir: InputOption = None,
    suffixes: SuffixOption = None,
) -> None:
    """
    Parse and validate theme definition files without generating code.
    """
    try:
        themes = _load_validated_themes(config_path, input_dir, suffixes)
    except ThemegenError as e:
        raise _fail(e) from None

    roles = len(themes[0].colors)
    message = f"✓ {len(themes)} theme(s) valid, {roles} color role(s) each"
    typer.echo(typer.style(message, fg=typer.colors.GREEN))


def inspect_command(
    config_path: ConfigOption = Path(CONFIG_FILE),
    input_dir: InputOption = None,
    suffixes: SuffixOption = None,
    theme: Annotated[
        str | None,
        typer.Option("--theme", help="Only show the theme with this identifier"),
    ] = None,
) -> None:
    """
    Show parsed themes and their resolved colors.
    """
    try:
        registry = ThemeRegistry(_load_validated_themes(config_path, input_dir, suffixes))
        selected = [registry.get(theme)] if theme else list(registry)
    except ThemegenError as e:
        raise _fail(e) from None

    themes_table = Table(title="Themes")
    themes_table.add_column("Identifier", style="cyan")
    themes_table.add_column("Name")
    themes_table.add_column("Source", style="dim")
    for parsed in selected:
        themes_table.add_row(parsed.identifier, escape(parsed.display_name), parsed.source or "-")
    console.print(themes_table)

    colors_table = Table(title="Colors")
    colors_table.add_column("Role", style="cyan")
    for parsed in selected:
        colors_table.add_column(parsed.identifier)
    for role in registry.roles:
        cells = [_swatch(parsed.colors.get(role, "-")) for parsed in selected]
        colors_table.add_row(escape(role), *cells)
    console.print(colors_table)


def targets_command() -> None:
    """
    List available emission targets.
    """
    table = Table(title="Targets")
    table.add_column("Name", style="cyan")
    table.add_column("Output")
    for name in TargetRegistry.list_targets():
        target_class = TargetRegistry.get(name)
        table.add_row(name, target_class.description if target_class else "")
    console.print(table)
