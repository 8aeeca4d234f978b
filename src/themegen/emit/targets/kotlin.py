"""
Kotlin / Jetpack Compose emission target.

Generates:
- GeneratedColors.kt: ThemeColorObject interface and one @Immutable object per theme
- GeneratedThemes.kt: AppTheme enum and the AllThemes registry

The registry builds ThemeData and AppColors records, which are hand-written
in the consuming app (optionally in a separate support package).
"""

from __future__ import annotations

from themegen.core.errors import EmitError, ErrorContext
from themegen.core.ir import ParsedTheme

from .base import COLOR_INTERFACE_NAME, GENERATED_HEADER, EmitterTarget, TargetRegistry

KOTLIN_HARD_KEYWORDS = frozenset(
    (
        "as break class continue do else false for fun if in interface is null object "
        "package return super this throw true try typealias typeof val var when while"
    ).split()
)

INDENT = "    "


def kotlin_string(value: str) -> str:
    """Quote a value as a Kotlin string literal."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("$", "\\$")
        .replace("\n", "\\n")
    )
    return f'"{escaped}"'


class KotlinTarget(EmitterTarget):
    """Jetpack Compose color objects and theme registry."""

    name = "kotlin"
    description = "Jetpack Compose: GeneratedColors.kt + GeneratedThemes.kt"
    uses_support_package = True

    @property
    def colors_filename(self) -> str:
        return "GeneratedColors.kt"

    @property
    def themes_filename(self) -> str:
        return "GeneratedThemes.kt"

    def escape_property(self, name: str) -> str:
        if name in KOTLIN_HARD_KEYWORDS:
            return f"`{name}`"
        return name

    def check_package(self) -> None:
        super().check_package()
        if self.support_package:
            for segment in self.support_package.split("."):
                if segment in KOTLIN_HARD_KEYWORDS or not segment.isidentifier():
                    raise EmitError(f"Invalid support package name '{self.support_package}'")

    def check_identifier(self, theme: ParsedTheme) -> None:
        super().check_identifier(theme)
        if theme.identifier in KOTLIN_HARD_KEYWORDS:
            raise EmitError(
                f"Theme identifier '{theme.identifier}' is a Kotlin keyword",
                ErrorContext(file=theme.source, theme=theme.display_name),
            )

    def _file_header(self) -> list[str]:
        return [f"// {GENERATED_HEADER}", f"package {self.package}", ""]

    # -------------------------------------------------------------------------
    # GeneratedColors.kt
    # -------------------------------------------------------------------------

    def render_colors(self) -> str:
        lines = self._file_header()
        lines.extend(
            [
                "import androidx.compose.runtime.Immutable",
                "import androidx.compose.ui.graphics.Color",
                "",
                f"interface {COLOR_INTERFACE_NAME} {{",
            ]
        )
        for role in self.roles:
            lines.append(f"{INDENT}val {self.properties[role]}: Color")
        lines.append("}")

        for theme in self.themes:
            lines.extend(
                [
                    "",
                    "@Immutable",
                    f"object {self.object_names[theme.identifier]} : {COLOR_INTERFACE_NAME} {{",
                ]
            )
            for role in self.roles:
                packed = self.packed_color(theme, role)
                prop = self.properties[role]
                lines.append(f"{INDENT}override val {prop}: Color = Color({packed})")
            lines.append("}")

        return "\n".join(lines) + "\n"

    # -------------------------------------------------------------------------
    # GeneratedThemes.kt
    # -------------------------------------------------------------------------

    def render_themes(self) -> str:
        lines = self._file_header()
        if self.support_package and self.support_package != self.package:
            lines.extend(
                [
                    f"import {self.support_package}.AppColors",
                    f"import {self.support_package}.ThemeData",
                    "",
                ]
            )

        lines.append("enum class AppTheme(val displayName: String) {")
        for theme in self.themes:
            lines.append(f"{INDENT}{theme.identifier}({kotlin_string(theme.display_name)}),")
        lines.extend([f"{INDENT};", "}", ""])

        lines.append("object AllThemes {")
        lines.append(f"{INDENT}val themes: List<ThemeData> = listOf(")
        for theme in self.themes:
            obj = self.object_names[theme.identifier]
            lines.extend(
                [
                    f"{INDENT * 2}ThemeData(",
                    f"{INDENT * 3}theme = AppTheme.{theme.identifier},",
                    f"{INDENT * 3}name = {kotlin_string(theme.display_name)},",
                    f"{INDENT * 3}colorObject = {obj},",
                    f"{INDENT * 3}appColors = AppColors({obj}),",
                    f"{INDENT * 2}),",
                ]
            )
        lines.extend(
            [
                f"{INDENT})",
                "",
                f"{INDENT}val allAppThemes: List<AppTheme> = themes.map {{ it.theme }}",
                "",
                f"{INDENT}val themeMap: Map<AppTheme, ThemeData> =",
                f"{INDENT * 2}themes.associateBy {{ it.theme }}",
                "",
                f"{INDENT}fun getThemeData(theme: AppTheme): ThemeData =",
                f'{INDENT * 2}themeMap[theme] ?: error("Theme data not found for $theme")',
                "}",
            ]
        )
        return "\n".join(lines) + "\n"


TargetRegistry.register("kotlin", KotlinTarget)
