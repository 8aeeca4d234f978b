"""
Error types for themegen token parsing, resolution, validation, and emission.

Every error raised by the generation pipeline derives from ThemegenError so the
CLI and build integrations can catch a single type and fail the build with a
message naming the offending file, theme, or role.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorContext:
    """
    Location information for an error.

    Attributes:
        file: Name of the theme definition file being processed
        theme: Display name of the theme involved
        role: Color role (token name) involved
    """

    file: str | None = None
    theme: str | None = None
    role: str | None = None

    def format(self) -> str:
        """
        Format the context as a human-readable prefix.

        Returns:
            String like: "ocean.json, theme 'Ocean Fire', role 'primary'"
        """
        parts = []
        if self.file:
            parts.append(self.file)
        if self.theme:
            parts.append(f"theme '{self.theme}'")
        if self.role:
            parts.append(f"role '{self.role}'")
        return ", ".join(parts)


class ThemegenError(Exception):
    """Base exception for all themegen errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            location = self.context.format()
            if location:
                return f"{location}: {self.message}"
        return self.message

    def with_context(self, context: ErrorContext) -> ThemegenError:
        """Attach context to an error raised before its location was known.

        Fields already set on the error's context are kept.
        """
        if self.context is not None:
            context = ErrorContext(
                file=self.context.file or context.file,
                theme=self.context.theme or context.theme,
                role=self.context.role or context.role,
            )
        self.context = context
        self.args = (self._format_message(),)
        return self


# =============================================================================
# Color math
# =============================================================================


class ColorError(ThemegenError):
    """Base class for color value errors."""


class InvalidColorFormat(ColorError):
    """
    Raised when a string is not a usable hex color.

    Examples:
    - Wrong number of digits ("#12345")
    - Non-hex characters ("#GG0000")
    - An 8-digit value handed to an operation that needs plain RGB
    """

    def __init__(self, value: str, context: ErrorContext | None = None):
        self.value = value
        super().__init__(f"Invalid hex color format: {value!r}", context)


# =============================================================================
# Token resolution
# =============================================================================


class TokenResolutionError(ThemegenError):
    """Base class for errors while resolving token references."""


class CircularReferenceError(TokenResolutionError):
    """Raised when a chain of {color.X} references loops back on itself."""

    def __init__(self, token: str, cycle: list[str] | None = None):
        self.token = token
        self.cycle = cycle or [token]
        path = " -> ".join(self.cycle)
        super().__init__(f"Circular reference detected for token '{token}': {path}")


class UnknownTokenReferenceError(TokenResolutionError):
    """Raised when a {color.X} reference names a token the file does not define."""

    def __init__(self, token: str, reference: str):
        self.token = token
        self.reference = reference
        super().__init__(f"Token '{token}' references unknown token {reference}")


# =============================================================================
# Parsing
# =============================================================================


class ThemeParseError(ThemegenError):
    """Base class for theme definition file errors."""


class ThemeFileParseError(ThemeParseError):
    """
    Raised when a theme file matches neither the token-set shape nor the
    legacy flat shape.

    Attributes:
        filename: Name of the offending file
        failures: The underlying failure for each interpretation attempted
    """

    def __init__(self, filename: str, failures: dict[str, str]):
        self.filename = filename
        self.failures = failures
        lines = [f"Failed to parse theme file {filename}"]
        for shape, reason in failures.items():
            lines.append(f"  as {shape}: {reason}")
        super().__init__("\n".join(lines))


# =============================================================================
# Validation
# =============================================================================


class ThemeValidationError(ThemegenError):
    """Base class for cross-theme consistency violations."""


class EmptyThemeSetError(ThemeValidationError):
    """Raised when a generation run finds no themes at all."""

    def __init__(self, source: str | None = None):
        where = f" in {source}" if source else ""
        super().__init__(f"No themes found{where}")


class DuplicateNameError(ThemeValidationError):
    """Raised when two or more themes share a display name."""

    def __init__(self, names: Iterable[str]):
        self.names = sorted(set(names))
        super().__init__(f"Duplicate theme names found: {', '.join(self.names)}")


class DuplicateIdentifierError(ThemeValidationError):
    """Raised when two or more themes share an identifier."""

    def __init__(self, identifiers: Iterable[str]):
        self.identifiers = sorted(set(identifiers))
        super().__init__(f"Duplicate theme identifiers found: {', '.join(self.identifiers)}")


class InconsistentColorKeysError(ThemeValidationError):
    """Raised when a theme's color roles differ from the reference theme's."""

    def __init__(
        self,
        theme_name: str,
        missing: Iterable[str],
        extra: Iterable[str],
        reference_name: str | None = None,
    ):
        self.theme_name = theme_name
        self.missing = sorted(missing)
        self.extra = sorted(extra)
        self.reference_name = reference_name

        against = f" compared to '{reference_name}'" if reference_name else ""
        lines = [f"Theme '{theme_name}' has inconsistent color keys{against}"]
        if self.missing:
            lines.append(f"  Missing colors: {', '.join(self.missing)}")
        if self.extra:
            lines.append(f"  Extra colors: {', '.join(self.extra)}")
        super().__init__("\n".join(lines))


class InvalidColorValueError(ThemeValidationError):
    """Raised when a resolved color is neither a hex color nor a token reference."""

    def __init__(self, theme_name: str, role_name: str, value: str):
        self.theme_name = theme_name
        self.role_name = role_name
        self.value = value
        super().__init__(
            f"Invalid color value '{value}' for color '{role_name}' in theme '{theme_name}'. "
            "Expected hex color format like #FF0000 or #F00"
        )


# =============================================================================
# Emission and consumption
# =============================================================================


class EmitError(ThemegenError):
    """
    Raised when a target cannot render the validated theme set.

    Examples:
    - Unknown target name
    - Two roles sanitising to the same property name
    - Theme identifier that is not a valid identifier in the target language
    - Unresolved reference that cannot be converted to a packed color
    """


class UnknownThemeIdentifierError(ThemegenError, LookupError):
    """Raised when a theme registry is asked for an identifier it does not know."""

    def __init__(self, identifier: str, known: Iterable[str] = ()):
        self.identifier = identifier
        self.known = list(known)
        message = f"Theme data not found for {identifier}"
        if self.known:
            message += f" (known: {', '.join(self.known)})"
        super().__init__(message)


class ConfigError(ThemegenError):
    """Raised when the generator configuration is missing or malformed."""
