"""
Intermediate representation for themegen.

Re-exports the token and theme types so callers can write
``from themegen.core.ir import ParsedTheme``.
"""

from .tokens import (
    COLOR_KIND,
    DEFAULT_COLOR_SPACE,
    AlphaModifier,
    DarkenModifier,
    LegacyThemeDocument,
    LightenModifier,
    MixModifier,
    Modifier,
    ModifierType,
    ParsedTheme,
    RawToken,
    ThemeFileFormat,
    ThemeMetadata,
    TokenSetDocument,
    flatten_token_groups,
)

__all__ = [
    "COLOR_KIND",
    "DEFAULT_COLOR_SPACE",
    "AlphaModifier",
    "DarkenModifier",
    "LegacyThemeDocument",
    "LightenModifier",
    "MixModifier",
    "Modifier",
    "ModifierType",
    "ParsedTheme",
    "RawToken",
    "ThemeFileFormat",
    "ThemeMetadata",
    "TokenSetDocument",
    "flatten_token_groups",
]
