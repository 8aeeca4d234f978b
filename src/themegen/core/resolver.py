"""
Token reference resolution.

Turns a file's color tokens (literal hex values or {color.<name>} references,
each with an optional modifier) into a flat mapping of token name to
resolved hex color.

Resolution is a depth-first walk over an explicit stack rather than Python
recursion, so arbitrarily long reference chains do not hit the interpreter's
recursion limit and a cycle is reported with its full path.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from . import colors
from .errors import (
    CircularReferenceError,
    ErrorContext,
    InvalidColorFormat,
    UnknownTokenReferenceError,
)
from .ir import (
    DEFAULT_COLOR_SPACE,
    AlphaModifier,
    DarkenModifier,
    LightenModifier,
    MixModifier,
    Modifier,
    RawToken,
)

logger = logging.getLogger(__name__)

COLOR_REFERENCE_RE = re.compile(r"^\{color\.(?P<name>[^{}]+)\}$")


def reference_target(value: str) -> str | None:
    """Return the token name a {color.<name>} reference points at, else None."""
    match = COLOR_REFERENCE_RE.match(value.strip())
    return match.group("name") if match else None


def apply_modifier(base_color: str, modifier: Modifier) -> str:
    """Apply a lighten/darken/alpha/mix modifier to a resolved hex color.

    Raises:
        InvalidColorFormat: If the base color (or a mix color) is not plain RGB hex.
    """
    if modifier.color_space.lower() != DEFAULT_COLOR_SPACE:
        logger.debug(
            f"Color space hint '{modifier.color_space}' ignored, blending in {DEFAULT_COLOR_SPACE}"
        )

    rgb = colors.parse(base_color)
    if isinstance(modifier, LightenModifier):
        return colors.lighten(rgb, modifier.amount)
    if isinstance(modifier, DarkenModifier):
        return colors.darken(rgb, modifier.amount)
    if isinstance(modifier, AlphaModifier):
        return colors.apply_alpha(rgb, modifier.amount)
    if isinstance(modifier, MixModifier):
        return colors.mix(rgb, modifier.mix_color, modifier.amount)

    logger.warning(f"Unsupported color modifier {modifier!r}, leaving {base_color} unchanged")
    return base_color


class TokenResolver:
    """
    Resolves one file's color tokens.

    Results are cached per resolver, so resolving every token of a file costs
    one visit per token regardless of how references are shared.

    Example:
        resolver = TokenResolver({
            "primary": RawToken(value="#4682B4"),
            "surface": RawToken(value="{color.primary}"),
        })
        resolver.resolve_all()  # {"primary": "#4682B4", "surface": "#4682B4"}
    """

    def __init__(self, tokens: Mapping[str, RawToken]):
        self._tokens: dict[str, RawToken] = dict(tokens)
        self._resolved: dict[str, str] = {}

    def resolve_all(self) -> dict[str, str]:
        """Resolve every token, preserving input order."""
        for name in self._tokens:
            self.resolve(name)
        return {name: self._resolved[name] for name in self._tokens}

    def resolve(self, name: str) -> str:
        """
        Resolve a single token.

        Raises:
            CircularReferenceError: If the reference chain loops.
            UnknownTokenReferenceError: If a {color.X} reference names a missing token.
            InvalidColorFormat: If a literal value is not a valid hex color.
        """
        if name in self._resolved:
            return self._resolved[name]
        if name not in self._tokens:
            raise UnknownTokenReferenceError(name, f"{{color.{name}}}")

        path: list[str] = [name]
        visiting: set[str] = {name}

        while path:
            current = path[-1]
            token = self._tokens[current]
            target = reference_target(token.value)

            if target is not None and target not in self._resolved:
                if target in visiting:
                    cycle = path[path.index(target) :] + [target]
                    raise CircularReferenceError(target, cycle)
                if target not in self._tokens:
                    raise UnknownTokenReferenceError(current, token.value)
                path.append(target)
                visiting.add(target)
                continue

            base = self._resolved[target] if target is not None else None
            self._resolved[current] = self._finish(current, token, base)
            path.pop()
            visiting.discard(current)

        return self._resolved[name]

    def _finish(self, name: str, token: RawToken, base: str | None) -> str:
        """Compute a token's final value once its reference (if any) is resolved."""
        if base is None:
            value = token.value.strip()
            if colors.is_token_reference(value):
                # Not a color.* path; keep verbatim for tokens this generator does not model
                logger.warning(f"Token '{name}' keeps unresolved reference {value}")
                return value
            if not colors.is_valid_hex(value):
                raise InvalidColorFormat(token.value, ErrorContext(role=name))
            base = colors.normalize(value)
        elif not colors.is_valid_hex(base):
            logger.warning(f"Token '{name}' inherits unresolved reference {base}")
            return base

        if token.modifier is None:
            return base

        try:
            return apply_modifier(base, token.modifier)
        except InvalidColorFormat as e:
            raise e.with_context(ErrorContext(role=name)) from None


def resolve_tokens(tokens: Mapping[str, RawToken]) -> dict[str, str]:
    """Resolve a mapping of token name -> RawToken to token name -> hex color."""
    return TokenResolver(tokens).resolve_all()
