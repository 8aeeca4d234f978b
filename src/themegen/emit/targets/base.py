"""
Base class and registry for emission targets.

Every target renders the same two artifacts from a validated theme set:

- a colors file: the ThemeColorObject shape naming every color role, plus
  one immutable color object per theme
- a themes file: the AppTheme enumeration, the per-theme records, and a
  lookup that fails loudly for unknown themes

Subclasses only decide syntax. Role ordering, property naming, object
naming, and packed color conversion are shared here so every target sees
the same names.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from themegen.core import colors, naming
from themegen.core.errors import EmitError, ErrorContext, InvalidColorFormat
from themegen.core.ir import ParsedTheme
from themegen.emit.generator import Generator, GeneratorResult

logger = logging.getLogger(__name__)

GENERATED_HEADER = "Auto-generated file - do not modify"
COLOR_INTERFACE_NAME = "ThemeColorObject"


class EmitterTarget(Generator, ABC):
    """
    Base class for theme code emitters.

    Attributes:
        name: Registry key, e.g. "kotlin"
        description: One-line summary shown by `themegen targets`
        reserved_names: Names the generated files declare themselves

    support_package names where hand-written companion types live, for
    targets whose generated code refers to them.
    """

    name: str = ""
    description: str = ""
    reserved_names: frozenset[str] = frozenset(
        {COLOR_INTERFACE_NAME, "AppTheme", "ThemeData", "AllThemes", "AppColors"}
    )
    uses_support_package: bool = False

    def __init__(
        self,
        themes: Sequence[ParsedTheme],
        package: str,
        support_package: str | None = None,
    ):
        super().__init__(themes, package)
        self.support_package = support_package
        self.roles = self._collect_roles()
        self.properties = self._property_names()
        self.object_names = self._object_names()

    def generate(self) -> GeneratorResult:
        """Render the colors file and the themes file."""
        result = GeneratorResult()
        self.check_package()
        if self.support_package and not self.uses_support_package:
            message = f"support_package is ignored by the {self.name} target"
            logger.warning(message)
            result.add_warning(message)
        for theme in self.themes:
            self.check_identifier(theme)

        result.add_file(self.package_path / self.colors_filename, self.render_colors())
        result.add_file(self.package_path / self.themes_filename, self.render_themes())
        result.add_artifact("roles", list(self.roles))

        logger.debug(
            f"{self.name}: rendered {len(self.themes)} theme(s) x {len(self.roles)} role(s)"
        )
        return result

    # -------------------------------------------------------------------------
    # Target-specific hooks
    # -------------------------------------------------------------------------

    @property
    @abstractmethod
    def colors_filename(self) -> str:
        """File name of the colors artifact."""

    @property
    @abstractmethod
    def themes_filename(self) -> str:
        """File name of the theme registry artifact."""

    @abstractmethod
    def render_colors(self) -> str:
        """Render the color-role shape and one color object per theme."""

    @abstractmethod
    def render_themes(self) -> str:
        """Render the theme enumeration and registry."""

    def escape_property(self, name: str) -> str:
        """Adjust a sanitised role name that clashes with the target's keywords."""
        return name

    def check_package(self) -> None:
        """Reject package names the target cannot express."""
        for segment in self.package.split("."):
            if not naming.is_identifier(segment):
                raise EmitError(f"Invalid package name '{self.package}' for target {self.name}")

    def check_identifier(self, theme: ParsedTheme) -> None:
        """Reject theme identifiers the target cannot express."""
        if not naming.is_identifier(theme.identifier):
            raise EmitError(
                f"Theme identifier '{theme.identifier}' is not a valid {self.name} identifier",
                ErrorContext(file=theme.source, theme=theme.display_name),
            )

    # -------------------------------------------------------------------------
    # Shared naming
    # -------------------------------------------------------------------------

    def _collect_roles(self) -> list[str]:
        names: set[str] = set()
        for theme in self.themes:
            names.update(theme.colors)
        return sorted(names)

    def _property_names(self) -> dict[str, str]:
        """Map each role to its property name, rejecting empty names and collisions."""
        properties: dict[str, str] = {}
        claimed: dict[str, str] = {}
        for role in self.roles:
            prop = naming.role_property_name(role)
            if not prop:
                raise EmitError(f"Color role '{role}' has no alphanumeric characters")
            if prop[0].isdigit():
                prop = f"_{prop}"
            prop = self.escape_property(prop)
            if prop in claimed:
                raise EmitError(
                    f"Color roles '{claimed[prop]}' and '{role}' both map to property '{prop}'"
                )
            claimed[prop] = role
            properties[role] = prop
        return properties

    def _object_names(self) -> dict[str, str]:
        """Map each theme identifier to its color object name, rejecting collisions."""
        names: dict[str, str] = {}
        claimed: dict[str, str] = {name: name for name in self.reserved_names}
        for theme in self.themes:
            obj = naming.object_name(theme.identifier)
            if obj in claimed:
                raise EmitError(
                    f"Theme '{theme.identifier}' maps to object '{obj}', "
                    f"already used by '{claimed[obj]}'",
                    ErrorContext(file=theme.source, theme=theme.display_name),
                )
            claimed[obj] = theme.identifier
            names[theme.identifier] = obj
        return names

    def packed_color(self, theme: ParsedTheme, role: str) -> str:
        """
        Packed 0xAARRGGBB literal for one theme's role.

        Raises:
            EmitError: If the value is missing or is not a hex color
        """
        context = ErrorContext(file=theme.source, theme=theme.display_name, role=role)
        value = theme.colors.get(role)
        if value is None:
            raise EmitError("Theme has no value for color role", context)
        try:
            return f"0x{colors.to_argb_int(value):08X}"
        except InvalidColorFormat:
            raise EmitError(
                f"Cannot convert '{value}' to a packed color; only hex colors can be emitted",
                context,
            ) from None


class TargetRegistry:
    """
    Registry for emission targets.

    Maps configuration values to target implementations.
    """

    _targets: dict[str, type[EmitterTarget]] = {}

    @classmethod
    def register(cls, name: str, target: type[EmitterTarget]) -> None:
        """Register a target."""
        cls._targets[name] = target

    @classmethod
    def get(cls, name: str) -> type[EmitterTarget] | None:
        """Get target by name."""
        return cls._targets.get(name)

    @classmethod
    def list_targets(cls) -> list[str]:
        """List registered target names."""
        return list(cls._targets.keys())

