"""
themegen - design tokens to typed theme source code.

Reads a directory of JSON theme definitions, resolves color token
references and modifiers, validates the theme set, and emits a color-role
interface, per-theme color objects, and a theme registry.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import (
    ConfigError,
    EmitError,
    ThemegenError,
    ThemeParseError,
    ThemeValidationError,
    TokenResolutionError,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "ThemegenError",
    "TokenResolutionError",
    "ThemeParseError",
    "ThemeValidationError",
    "EmitError",
    "ConfigError",
]
