"""Core themegen functionality: IR, color math, token resolution, parsing, validation."""

from . import colors, ir, naming
from .errors import (
    CircularReferenceError,
    ConfigError,
    EmitError,
    ErrorContext,
    InvalidColorFormat,
    ThemeFileParseError,
    ThemegenError,
    ThemeParseError,
    ThemeValidationError,
    UnknownThemeIdentifierError,
)
from .parser import parse_theme_directory, parse_theme_file
from .registry import ThemeRegistry
from .resolver import TokenResolver, resolve_tokens
from .validator import validate_themes

__all__ = [
    "colors",
    "ir",
    "naming",
    "ThemegenError",
    "ErrorContext",
    "InvalidColorFormat",
    "CircularReferenceError",
    "ThemeParseError",
    "ThemeFileParseError",
    "ThemeValidationError",
    "EmitError",
    "ConfigError",
    "UnknownThemeIdentifierError",
    "TokenResolver",
    "resolve_tokens",
    "parse_theme_file",
    "parse_theme_directory",
    "validate_themes",
    "ThemeRegistry",
]
