"""
Cross-theme consistency checks.

Runs after parsing and before emission. Each check either passes or raises
a ThemeValidationError subclass; duplicate checks collect every offender
before raising so one run reports them all.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence

from . import colors
from .errors import (
    DuplicateIdentifierError,
    DuplicateNameError,
    EmptyThemeSetError,
    ErrorContext,
    InconsistentColorKeysError,
    InvalidColorValueError,
)
from .ir import ParsedTheme

logger = logging.getLogger(__name__)


def _duplicates(values: Sequence[str]) -> list[str]:
    return sorted(value for value, count in Counter(values).items() if count > 1)


def check_not_empty(themes: Sequence[ParsedTheme], source: str | None = None) -> None:
    if not themes:
        raise EmptyThemeSetError(source)


def check_unique_names(themes: Sequence[ParsedTheme]) -> None:
    duplicates = _duplicates([theme.display_name for theme in themes])
    if duplicates:
        raise DuplicateNameError(duplicates)


def check_unique_identifiers(themes: Sequence[ParsedTheme]) -> None:
    duplicates = _duplicates([theme.identifier for theme in themes])
    if duplicates:
        raise DuplicateIdentifierError(duplicates)


def check_consistent_keys(themes: Sequence[ParsedTheme]) -> None:
    """
    Compare every theme's color roles against the first theme's.

    Raises:
        InconsistentColorKeysError: For the first theme whose roles differ
    """
    if not themes:
        return

    reference = themes[0]
    expected = set(reference.colors)
    for theme in themes[1:]:
        actual = set(theme.colors)
        if actual != expected:
            raise InconsistentColorKeysError(
                theme.display_name,
                missing=expected - actual,
                extra=actual - expected,
                reference_name=reference.display_name,
            )


def check_color_values(themes: Sequence[ParsedTheme]) -> None:
    """
    Require every color to be a hex color or a dotted token reference.

    Raises:
        InvalidColorValueError: For the first offending role encountered
    """
    for theme in themes:
        for role, value in theme.colors.items():
            if colors.is_valid_hex(value) or colors.is_token_reference(value):
                continue
            error = InvalidColorValueError(theme.display_name, role, value)
            if theme.source:
                error.with_context(ErrorContext(file=theme.source))
            raise error


def validate_themes(themes: Sequence[ParsedTheme], source: str | None = None) -> None:
    """
    Run every check in order: non-empty, unique names, unique identifiers,
    consistent color keys, valid color values.

    Args:
        themes: Parsed themes for one generation run
        source: Optional description of where the themes came from, used in
            the empty-set message

    Raises:
        ThemeValidationError: The first category of violation found
    """
    check_not_empty(themes, source)
    check_unique_names(themes)
    check_unique_identifiers(themes)
    check_consistent_keys(themes)
    check_color_values(themes)

    logger.info(f"Validated {len(themes)} theme(s) with {len(themes[0].colors)} color role(s)")
