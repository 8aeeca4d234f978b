"""
Naming helpers shared by the parser and the emission targets.

Turns filenames, theme keys, identifiers, and role names into the
display names and source identifiers used in generated code.
"""

from __future__ import annotations

import re

_NON_ALNUM_RE = re.compile(r"[^A-Za-z0-9]")
_NON_IDENTIFIER_RE = re.compile(r"[^A-Z0-9_]")
_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def display_name_from_stem(stem: str) -> str:
    """Derive a display name from a filename stem.

    "ocean-fire" -> "Ocean Fire"
    """
    words = [word for word in stem.replace("-", " ").split(" ") if word]
    return " ".join(word[:1].upper() + word[1:] for word in words)


def identifier_from_key(key: str) -> str:
    """Derive an enum-style identifier from a filename stem or theme key.

    "ocean-fire" -> "OCEAN_FIRE"
    """
    return _NON_IDENTIFIER_RE.sub("_", key.upper())


def role_property_name(role: str) -> str:
    """Sanitise a color role into a lowercase-leading property name.

    Strips every non-alphanumeric character, then lowercases the first one:
    "on-primary" -> "onprimary", "Primary_Container" -> "primaryContainer".
    """
    stripped = _NON_ALNUM_RE.sub("", role)
    return stripped[:1].lower() + stripped[1:]


def object_name(identifier: str) -> str:
    """Name of the per-theme color object.

    "OCEAN_FIRE" -> "OceanFire"
    """
    segments = identifier.lower().split("_")
    return "".join(segment[:1].upper() + segment[1:] for segment in segments)


def is_identifier(name: str) -> bool:
    """True if name is usable as an identifier in the generated languages."""
    return bool(_IDENTIFIER_RE.match(name))
