"""
Token IR types for theme definition files.

Defines the two accepted file shapes (a structured token set, optionally
declaring named themes, and the flat legacy shape), the raw color token with
its optional modifier, and the ParsedTheme record that crosses the
parser -> validator -> emitter boundary.

Alternate key names from the W3C design-token format ($value, $type, ...) and
the Tokens Studio format (value, type, studio.tokens extensions) are both
accepted. The $-prefixed name wins when both are present.
"""

from __future__ import annotations

import json
import logging
from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

logger = logging.getLogger(__name__)

# =============================================================================
# Enums
# =============================================================================


class ModifierType(StrEnum):
    """Supported color modifier kinds."""

    LIGHTEN = "lighten"
    DARKEN = "darken"
    ALPHA = "alpha"
    MIX = "mix"


class ThemeFileFormat(StrEnum):
    """Shapes a theme definition file can take."""

    TOKEN_SET = "token set"
    LEGACY = "legacy"


COLOR_KIND = "color"
DEFAULT_COLOR_SPACE = "srgb"

_MODIFIER_TYPES = frozenset(m.value for m in ModifierType)


# =============================================================================
# Modifiers
# =============================================================================


class _ModifierBase(BaseModel):
    """Fields shared by all modifier variants."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    amount: float = Field(
        validation_alias=AliasChoices("value", "amount"),
        description="Strength of the transform, nominally 0-1",
    )
    color_space: str = Field(
        default=DEFAULT_COLOR_SPACE,
        validation_alias=AliasChoices("space", "colorSpace", "color_space"),
        description="Color space hint; accepted but blending is always sRGB",
    )


class LightenModifier(_ModifierBase):
    """Blend toward white."""

    type: Literal["lighten"] = "lighten"


class DarkenModifier(_ModifierBase):
    """Blend toward black."""

    type: Literal["darken"] = "darken"


class AlphaModifier(_ModifierBase):
    """Set the alpha channel, producing an #AARRGGBB value."""

    type: Literal["alpha"] = "alpha"


class MixModifier(_ModifierBase):
    """Blend toward another hex color."""

    type: Literal["mix"] = "mix"
    mix_color: str = Field(
        validation_alias=AliasChoices("color", "mixColor", "mix_color"),
        description="Hex color to blend toward",
    )


Modifier = Annotated[
    LightenModifier | DarkenModifier | AlphaModifier | MixModifier,
    Field(discriminator="type"),
]


def _extract_modifier(extensions: Any) -> Any:
    """Pull the modify block out of a token's extensions, if any.

    Accepts {"studio.tokens": {"modify": {...}}} and {"modify": {...}}.
    """
    if not isinstance(extensions, dict):
        return None
    studio = extensions.get("studio.tokens")
    if isinstance(studio, dict) and studio.get("modify") is not None:
        return studio["modify"]
    return extensions.get("modify")


# =============================================================================
# Tokens
# =============================================================================


class RawToken(BaseModel):
    """One color token entry before reference resolution."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(description="Literal hex color or {color.<name>} reference")
    kind: str = Field(default=COLOR_KIND, description="Token type; only 'color' is resolved")
    description: str | None = None
    modifier: Modifier | None = None

    @model_validator(mode="before")
    @classmethod
    def _coerce_alternate_keys(cls, data: Any) -> Any:
        """Map W3C and Tokens Studio key names onto the canonical fields."""
        if isinstance(data, str):
            return {"value": data}
        if not isinstance(data, dict):
            return data

        value = data.get("$value")
        if value is None or value == "":
            value = data.get("value", "")
        kind = data.get("$type") or data.get("type") or data.get("kind") or COLOR_KIND
        if not isinstance(value, str) and str(kind).lower() != COLOR_KIND:
            # Numbers and composite values of other token kinds are skipped later
            value = json.dumps(value)
        description = data.get("$description") or data.get("description")
        if "modifier" in data:
            modifier = data["modifier"]
        else:
            modifier = _extract_modifier(data.get("$extensions") or data.get("extensions"))

        if isinstance(modifier, dict) and isinstance(modifier.get("type"), str):
            modifier = {**modifier, "type": modifier["type"].lower()}
            if modifier["type"] not in _MODIFIER_TYPES:
                logger.warning(
                    f"Ignoring unsupported color modifier type '{modifier['type']}'"
                )
                modifier = None

        return {
            "value": value,
            "kind": kind,
            "description": description,
            "modifier": modifier,
        }

    @property
    def is_color(self) -> bool:
        return self.kind.lower() == COLOR_KIND


# =============================================================================
# File shapes
# =============================================================================


class ThemeMetadata(BaseModel):
    """One named theme declared in a token set's $themes map."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(validation_alias=AliasChoices("name", "displayName", "display_name"))
    enum_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("enumName", "identifier", "enum_name"),
    )


class TokenSetDocument(BaseModel):
    """Structured token-set file: semantic categories plus optional named themes."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    color: dict[str, RawToken] | None = None
    dimension: dict[str, Any] | None = None
    typography: dict[str, Any] | None = None
    themes: dict[str, ThemeMetadata] | None = Field(
        default=None,
        validation_alias=AliasChoices("$themes", "themes"),
    )

    @model_validator(mode="before")
    @classmethod
    def _flatten_color_groups(cls, data: Any) -> Any:
        """Flatten nested color groups into dotted token names."""
        if not isinstance(data, dict) or not isinstance(data.get("color"), dict):
            return data
        return {**data, "color": flatten_token_groups(data["color"])}


class LegacyThemeDocument(BaseModel):
    """Flat legacy file: one theme with literal hex colors."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(validation_alias=AliasChoices("name", "displayName", "display_name"))
    enum_name: str = Field(validation_alias=AliasChoices("enumName", "identifier", "enum_name"))
    colors: dict[str, str]


def _is_token_entry(node: Any) -> bool:
    return not isinstance(node, dict) or "value" in node or "$value" in node


def flatten_token_groups(group: dict[str, Any], prefix: str = "") -> dict[str, Any]:
    """Flatten {"brand": {"primary": {...}}} into {"brand.primary": {...}}.

    A mapping without a value/$value key is a group; anything else is a token.
    Keys starting with '$' on a group (e.g. $type, $description) are group
    metadata and are skipped.
    """
    flat: dict[str, Any] = {}
    for key, node in group.items():
        if key.startswith("$"):
            continue
        name = f"{prefix}{key}"
        if _is_token_entry(node):
            flat[name] = node
        else:
            flat.update(flatten_token_groups(node, prefix=f"{name}."))
    return flat


# =============================================================================
# Parsed theme
# =============================================================================


class ParsedTheme(BaseModel):
    """A fully resolved theme ready for validation and emission."""

    model_config = ConfigDict(frozen=True)

    display_name: str = Field(description="Human-readable theme name")
    identifier: str = Field(description="Enum-style identifier, e.g. OCEAN_FIRE")
    colors: dict[str, str] = Field(description="Role name -> resolved color value")
    source: str | None = Field(default=None, description="File the theme came from")
