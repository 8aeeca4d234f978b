"""
Pure-Python hex color math.

Parses, validates, and normalizes hex color strings and applies the
lighten/darken/alpha/mix transforms used by token modifiers. All blending
happens in sRGB byte space. Lighten, darken, and mix truncate toward zero;
alpha rounds half up. Golden-file output depends on that asymmetry.

Alpha rounding departs from the Android generator, which truncated the alpha
byte: alpha 0.5 on #FF5722 gives #80FF5722 here and #7FFF5722 there.
"""

from __future__ import annotations

import math
import re

from .errors import InvalidColorFormat

RGB = tuple[int, int, int]

_HEX_COLOR_RE = re.compile(r"^#(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")
_HEX_DIGITS_RE = re.compile(r"^[0-9A-Fa-f]+$")


def _clamp_channel(value: float) -> int:
    """Truncate toward zero and clamp into a byte."""
    return max(0, min(255, int(value)))


def _format_rgb(rgb: RGB) -> str:
    r, g, b = rgb
    return f"#{r:02X}{g:02X}{b:02X}"


# =============================================================================
# Parsing and validation
# =============================================================================


def parse(hex_color: str) -> RGB:
    """Parse a 3- or 6-digit hex color into an (r, g, b) triple.

    The leading '#' is optional. 3-digit values are expanded by doubling
    each digit ("F00" -> (255, 0, 0)).

    Raises:
        InvalidColorFormat: For any other length or non-hex content.
    """
    digits = hex_color.strip().removeprefix("#")
    if not _HEX_DIGITS_RE.match(digits):
        raise InvalidColorFormat(hex_color)

    if len(digits) == 3:
        return (int(digits[0] * 2, 16), int(digits[1] * 2, 16), int(digits[2] * 2, 16))
    if len(digits) == 6:
        return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
    raise InvalidColorFormat(hex_color)


def is_valid_hex(value: str) -> bool:
    """True iff value is '#' followed by exactly 3, 6, or 8 hex digits."""
    return bool(_HEX_COLOR_RE.match(value))


def normalize(value: str) -> str:
    """Normalize a hex color to '#'-prefixed uppercase.

    3-digit values expand to 6 digits; 6- and 8-digit values keep their length.
    """
    digits = value.strip().removeprefix("#").upper()
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits}"


def is_token_reference(value: str) -> bool:
    """True iff value looks like a dotted reference path such as {color.primary}."""
    return value.startswith("{") and value.endswith("}") and "." in value[1:-1]


def to_argb_int(value: str) -> int:
    """Convert a hex color to a packed 0xAARRGGBB integer.

    Values without an alpha channel are treated as fully opaque.

    Raises:
        InvalidColorFormat: If value is not a valid hex color.
    """
    if not is_valid_hex(value.strip()):
        raise InvalidColorFormat(value)
    digits = normalize(value)[1:]
    if len(digits) == 6:
        digits = "FF" + digits
    return int(digits, 16)


# =============================================================================
# Transforms
# =============================================================================


def lighten(rgb: RGB, amount: float) -> str:
    """Move each channel toward white: c + (255 - c) * amount."""
    r, g, b = rgb
    return _format_rgb(
        (
            _clamp_channel(r + (255 - r) * amount),
            _clamp_channel(g + (255 - g) * amount),
            _clamp_channel(b + (255 - b) * amount),
        )
    )


def darken(rgb: RGB, amount: float) -> str:
    """Move each channel toward black: c * (1 - amount)."""
    r, g, b = rgb
    return _format_rgb(
        (
            _clamp_channel(r * (1 - amount)),
            _clamp_channel(g * (1 - amount)),
            _clamp_channel(b * (1 - amount)),
        )
    )


def apply_alpha(rgb: RGB, alpha: float) -> str:
    """Return #AARRGGBB with AA = round(alpha * 255), RGB unchanged."""
    alpha_byte = max(0, min(255, math.floor(alpha * 255 + 0.5)))
    r, g, b = rgb
    return f"#{alpha_byte:02X}{r:02X}{g:02X}{b:02X}"


def mix(rgb: RGB, other_hex: str, ratio: float) -> str:
    """Linearly interpolate from rgb toward other_hex.

    Computes a * (1 - ratio) + b * ratio as a + (b - a) * ratio so that mixing
    a color with itself is exact. The ratio is clamped into [0, 1] first.

    Raises:
        InvalidColorFormat: If other_hex cannot be parsed.
    """
    ratio = max(0.0, min(1.0, ratio))
    r1, g1, b1 = rgb
    r2, g2, b2 = parse(other_hex)
    return _format_rgb(
        (
            _clamp_channel(r1 + (r2 - r1) * ratio),
            _clamp_channel(g1 + (g2 - g1) * ratio),
            _clamp_channel(b1 + (b2 - b1) * ratio),
        )
    )
