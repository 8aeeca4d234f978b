"""
Python emission target.

Generates:
- generated_colors.py: frozen ThemeColorObject dataclass and one instance per theme
- generated_themes.py: AppTheme enum, ThemeData records, and get_theme_data()

Colors are packed 0xAARRGGBB ints. The generated modules only use the
standard library, so the consuming app does not depend on themegen at
runtime; UnknownThemeIdentifierError is declared in the generated module.
"""

from __future__ import annotations

import json
import keyword

from themegen.core.errors import EmitError, ErrorContext
from themegen.core.ir import ParsedTheme

from .base import COLOR_INTERFACE_NAME, GENERATED_HEADER, EmitterTarget, TargetRegistry

INDENT = "    "


def python_string(value: str) -> str:
    """Quote a value as a double-quoted Python string literal."""
    return json.dumps(value, ensure_ascii=False)


class PythonTarget(EmitterTarget):
    """Frozen dataclasses and an Enum-keyed theme registry."""

    name = "python"
    description = "Python: generated_colors.py + generated_themes.py"
    reserved_names = EmitterTarget.reserved_names | {
        "Enum",
        "Mapping",
        "MappingProxyType",
        "UnknownThemeIdentifierError",
    }

    @property
    def colors_filename(self) -> str:
        return "generated_colors.py"

    @property
    def themes_filename(self) -> str:
        return "generated_themes.py"

    def escape_property(self, name: str) -> str:
        if keyword.iskeyword(name):
            return f"{name}_"
        return name

    def check_package(self) -> None:
        super().check_package()
        for segment in self.package.split("."):
            if keyword.iskeyword(segment):
                raise EmitError(f"Invalid package name '{self.package}' for target python")

    def check_identifier(self, theme: ParsedTheme) -> None:
        super().check_identifier(theme)
        context = ErrorContext(file=theme.source, theme=theme.display_name)
        if theme.identifier.startswith("_"):
            raise EmitError(
                f"Theme identifier '{theme.identifier}' cannot start with '_' in a Python Enum",
                context,
            )
        obj = self.object_names[theme.identifier]
        if keyword.iskeyword(obj) or keyword.iskeyword(theme.identifier):
            raise EmitError(f"Theme identifier '{theme.identifier}' is a Python keyword", context)

    def _file_header(self, docstring: str) -> list[str]:
        return [
            f"# {GENERATED_HEADER}",
            f'"""{docstring}"""',
            "",
            "from __future__ import annotations",
            "",
        ]

    # -------------------------------------------------------------------------
    # generated_colors.py
    # -------------------------------------------------------------------------

    def render_colors(self) -> str:
        lines = self._file_header("Theme color objects. Colors are packed 0xAARRGGBB integers.")
        lines.extend(
            [
                "from dataclasses import dataclass",
                "",
                "",
                "@dataclass(frozen=True)",
                f"class {COLOR_INTERFACE_NAME}:",
            ]
        )
        if not self.roles:
            lines.append(f"{INDENT}pass")
        for role in self.roles:
            lines.append(f"{INDENT}{self.properties[role]}: int")

        for theme in self.themes:
            obj = self.object_names[theme.identifier]
            lines.extend(["", "", f"{obj} = {COLOR_INTERFACE_NAME}("])
            for role in self.roles:
                lines.append(f"{INDENT}{self.properties[role]}={self.packed_color(theme, role)},")
            lines.append(")")

        return "\n".join(lines) + "\n"

    # -------------------------------------------------------------------------
    # generated_themes.py
    # -------------------------------------------------------------------------

    def render_themes(self) -> str:
        objects = [self.object_names[theme.identifier] for theme in self.themes]
        imported = ", ".join(sorted(objects) + [COLOR_INTERFACE_NAME])

        lines = self._file_header("Theme registry: AppTheme enumeration and per-theme records.")
        lines.extend(
            [
                "from collections.abc import Mapping",
                "from dataclasses import dataclass",
                "from enum import Enum",
                "from types import MappingProxyType",
                "",
                f"from .{self.colors_filename.removesuffix('.py')} import {imported}",
                "",
                "_ROLE_PROPERTIES = {",
            ]
        )
        for role in self.roles:
            lines.append(f"{INDENT}{python_string(role)}: {python_string(self.properties[role])},")
        lines.append("}")

        lines.extend(
            [
                "",
                "",
                "class UnknownThemeIdentifierError(LookupError):",
                f'{INDENT}"""Raised when no theme is registered for the requested identifier."""',
                "",
                "",
                "class AppTheme(Enum):",
            ]
        )
        for theme in self.themes:
            lines.append(f"{INDENT}{theme.identifier} = {python_string(theme.display_name)}")
        lines.extend(
            [
                "",
                f"{INDENT}@property",
                f"{INDENT}def display_name(self) -> str:",
                f"{INDENT * 2}return self.value",
                "",
                "",
                "@dataclass(frozen=True)",
                "class ThemeData:",
                f"{INDENT}theme: AppTheme",
                f"{INDENT}name: str",
                f"{INDENT}color_object: {COLOR_INTERFACE_NAME}",
                f"{INDENT}app_colors: Mapping[str, int]",
                "",
                f"{INDENT}def color_by_role(self, role: str) -> int | None:",
                f"{INDENT * 2}return self.app_colors.get(role)",
                "",
                "",
                f"def _app_colors(color_object: {COLOR_INTERFACE_NAME}) -> Mapping[str, int]:",
                f"{INDENT}return MappingProxyType(",
                f"{INDENT * 2}{{role: getattr(color_object, prop)"
                " for role, prop in _ROLE_PROPERTIES.items()}",
                f"{INDENT})",
                "",
                "",
                "THEMES: tuple[ThemeData, ...] = (",
            ]
        )
        for theme, obj in zip(self.themes, objects, strict=True):
            lines.extend(
                [
                    f"{INDENT}ThemeData(",
                    f"{INDENT * 2}theme=AppTheme.{theme.identifier},",
                    f"{INDENT * 2}name={python_string(theme.display_name)},",
                    f"{INDENT * 2}color_object={obj},",
                    f"{INDENT * 2}app_colors=_app_colors({obj}),",
                    f"{INDENT}),",
                ]
            )
        lines.extend(
            [
                ")",
                "",
                "ALL_APP_THEMES: tuple[AppTheme, ...] = tuple(data.theme for data in THEMES)",
                "",
                "THEME_MAP: Mapping[AppTheme, ThemeData] = MappingProxyType(",
                f"{INDENT}{{data.theme: data for data in THEMES}}",
                ")",
                "",
                "",
                "def _not_found(theme: object) -> str:",
                f'{INDENT}return f"Theme data not found for {{theme}}"',
                "",
                "",
                "def get_theme_data(theme: AppTheme | str) -> ThemeData:",
                f'{INDENT}"""Return the record for a theme or identifier; never returns None."""',
                f"{INDENT}if isinstance(theme, str):",
                f"{INDENT * 2}try:",
                f"{INDENT * 3}theme = AppTheme[theme]",
                f"{INDENT * 2}except KeyError:",
                f"{INDENT * 3}raise UnknownThemeIdentifierError(_not_found(theme)) from None",
                f"{INDENT}try:",
                f"{INDENT * 2}return THEME_MAP[theme]",
                f"{INDENT}except (KeyError, TypeError):",
                f"{INDENT * 2}raise UnknownThemeIdentifierError(_not_found(theme)) from None",
            ]
        )
        return "\n".join(lines) + "\n"


TargetRegistry.register("python", PythonTarget)
