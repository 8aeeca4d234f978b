"""
Theme definition file parser.

Reads every theme file in an input directory and produces the list of
ParsedTheme records for the run. Two file shapes are accepted:

- token set: semantic categories (color, dimension, typography) plus an
  optional $themes map naming one or more themes backed by the file's palette
- legacy: {"name", "enumName", "colors"} with literal hex colors

The shape is picked by a discriminator and the other one is tried as a
fallback; a file that fits neither raises ThemeFileParseError carrying both
failures.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from . import naming
from .errors import ErrorContext, ThemeFileParseError, ThemegenError, ThemeParseError
from .ir import LegacyThemeDocument, ParsedTheme, ThemeFileFormat, TokenSetDocument
from .resolver import resolve_tokens

logger = logging.getLogger(__name__)

DEFAULT_SUFFIXES: tuple[str, ...] = (".json",)


# =============================================================================
# Format detection
# =============================================================================


def detect_format(data: Any) -> ThemeFileFormat:
    """Pick the shape a decoded theme file most likely has.

    A file is read as legacy when it carries a top-level "colors" mapping
    and none of the token-set markers; everything else is a token set.
    """
    if isinstance(data, dict):
        has_token_markers = "color" in data or "$themes" in data or "themes" in data
        if "colors" in data and not has_token_markers:
            return ThemeFileFormat.LEGACY
    return ThemeFileFormat.TOKEN_SET


def _format_validation_error(error: ValidationError) -> str:
    """Condense a pydantic error into one line per failing location."""
    parts = []
    for item in error.errors():
        location = ".".join(str(loc) for loc in item["loc"]) or "<root>"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


# =============================================================================
# Shape interpreters
# =============================================================================


def _themes_from_token_set(document: TokenSetDocument, path: Path) -> list[ParsedTheme]:
    if document.color is None:
        logger.info(f"{path.name}: no color category, skipping")
        return []

    color_tokens = {}
    for name, token in document.color.items():
        if not token.is_color:
            logger.warning(f"{path.name}: skipping non-color token '{name}' of type '{token.kind}'")
            continue
        color_tokens[name] = token

    resolved = resolve_tokens(color_tokens)
    logger.debug(f"{path.name}: resolved {len(resolved)} color tokens")

    if not document.themes:
        return [
            ParsedTheme(
                display_name=naming.display_name_from_stem(path.stem),
                identifier=naming.identifier_from_key(path.stem),
                colors=resolved,
                source=path.name,
            )
        ]

    themes = []
    for key, metadata in document.themes.items():
        identifier = metadata.enum_name or naming.identifier_from_key(key)
        if metadata.enum_name is None:
            logger.debug(f"{path.name}: theme '{key}' has no enumName, using {identifier}")
        themes.append(
            ParsedTheme(
                display_name=metadata.name,
                identifier=identifier,
                colors=dict(resolved),
                source=path.name,
            )
        )
    return themes


def _themes_from_legacy(document: LegacyThemeDocument, path: Path) -> list[ParsedTheme]:
    return [
        ParsedTheme(
            display_name=document.name,
            identifier=document.enum_name,
            colors=dict(document.colors),
            source=path.name,
        )
    ]


def _interpret(data: Any, shape: ThemeFileFormat, path: Path) -> list[ParsedTheme]:
    if shape is ThemeFileFormat.LEGACY:
        return _themes_from_legacy(LegacyThemeDocument.model_validate(data), path)
    return _themes_from_token_set(TokenSetDocument.model_validate(data), path)


# =============================================================================
# Public API
# =============================================================================


def parse_theme_data(data: Any, path: Path) -> list[ParsedTheme]:
    """
    Interpret already-decoded JSON data from one theme file.

    Args:
        data: Decoded JSON content
        path: Path of the file, used for names and error context

    Returns:
        Zero or more ParsedTheme records

    Raises:
        ThemeFileParseError: If the data fits neither file shape
        ThemegenError: Resolution errors, carrying the file name as context
    """
    preferred = detect_format(data)
    if preferred is ThemeFileFormat.TOKEN_SET:
        fallback = ThemeFileFormat.LEGACY
    else:
        fallback = ThemeFileFormat.TOKEN_SET

    failures: dict[str, str] = {}
    for shape in (preferred, fallback):
        try:
            themes = _interpret(data, shape, path)
        except ValidationError as e:
            failures[shape.value] = _format_validation_error(e)
            continue
        except ThemegenError as e:
            raise e.with_context(ErrorContext(file=path.name)) from None

        if shape is not preferred and shape is ThemeFileFormat.TOKEN_SET and not themes:
            # A broken legacy file is not an empty token set
            failures[shape.value] = "no 'color' category"
            continue
        if shape is not preferred:
            logger.debug(f"{path.name}: read as {shape.value} after {preferred.value} failed")
        return themes

    raise ThemeFileParseError(path.name, failures)


def parse_theme_file(path: Path) -> list[ParsedTheme]:
    """Read and interpret a single theme definition file."""
    logger.debug(f"Parsing {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ThemeFileParseError(path.name, {"json": str(e)}) from e
    except OSError as e:
        raise ThemeParseError(f"Cannot read theme file: {e}", ErrorContext(file=path.name)) from e
    return parse_theme_data(data, path)


def find_theme_files(input_dir: Path, suffixes: Iterable[str] = DEFAULT_SUFFIXES) -> list[Path]:
    """List theme files in input_dir, sorted by filename."""
    wanted = {suffix.lower() for suffix in suffixes}
    return sorted(
        (p for p in input_dir.iterdir() if p.is_file() and p.suffix.lower() in wanted),
        key=lambda p: p.name,
    )


def parse_theme_directory(
    input_dir: Path, suffixes: Iterable[str] = DEFAULT_SUFFIXES
) -> list[ParsedTheme]:
    """
    Parse every theme file in a directory.

    Files are processed in filename order so the resulting theme order (and
    therefore generated output) does not depend on the platform.

    Raises:
        ThemeParseError: If the directory does not exist or a file cannot be parsed
    """
    if not input_dir.is_dir():
        raise ThemeParseError(f"Theme input directory not found: {input_dir}")

    themes: list[ParsedTheme] = []
    files = find_theme_files(input_dir, suffixes)
    for path in files:
        file_themes = parse_theme_file(path)
        logger.debug(f"{path.name}: {len(file_themes)} theme(s)")
        themes.extend(file_themes)

    logger.info(f"Parsed {len(themes)} theme(s) from {len(files)} file(s) in {input_dir}")
    return themes
