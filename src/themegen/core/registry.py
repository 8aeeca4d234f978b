"""
In-memory theme registry over a validated theme set.

Mirrors the lookup contract of the generated registries: iteration keeps
input order and asking for an unknown identifier raises instead of
returning None.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .errors import UnknownThemeIdentifierError
from .ir import ParsedTheme


class ThemeRegistry:
    """Ordered, identifier-keyed view of a generation run's themes."""

    def __init__(self, themes: Sequence[ParsedTheme]):
        self._themes = list(themes)
        self._by_identifier = {theme.identifier: theme for theme in self._themes}

    def __iter__(self) -> Iterator[ParsedTheme]:
        return iter(self._themes)

    def __len__(self) -> int:
        return len(self._themes)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._by_identifier

    @property
    def identifiers(self) -> list[str]:
        return [theme.identifier for theme in self._themes]

    @property
    def roles(self) -> list[str]:
        """Every color role used by any theme, sorted."""
        names: set[str] = set()
        for theme in self._themes:
            names.update(theme.colors)
        return sorted(names)

    def get(self, identifier: str) -> ParsedTheme:
        """
        Look up a theme by identifier.

        Raises:
            UnknownThemeIdentifierError: If no theme has that identifier
        """
        try:
            return self._by_identifier[identifier]
        except KeyError:
            raise UnknownThemeIdentifierError(identifier, self.identifiers) from None
