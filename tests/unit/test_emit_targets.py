"""Tests for themegen.emit.targets (Kotlin and Python emitters)."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

import pytest

from themegen.core.errors import EmitError
from themegen.emit.targets import KotlinTarget, PythonTarget, TargetRegistry

PACKAGE = "com.example.generated"


@pytest.fixture
def themes(make_theme):
    return [
        make_theme(
            "Ocean Fire",
            colors={
                "primary": "#FF5722",
                "onPrimary": "#FFFFFF",
                "scrim": "#80FF5722",
            },
            source="ocean.json",
        ),
        make_theme(
            "Royal",
            colors={
                "primary": "#4169E1",
                "onPrimary": "#FFF",
                "scrim": "#804169E1",
            },
            source="royal.json",
        ),
    ]


class TestRegistry:
    def test_builtin_targets(self):
        assert TargetRegistry.get("kotlin") is KotlinTarget
        assert TargetRegistry.get("python") is PythonTarget
        assert TargetRegistry.get("swift") is None
        assert {"kotlin", "python"} <= set(TargetRegistry.list_targets())


# =============================================================================
# Shared naming
# =============================================================================


class TestNaming:
    def test_roles_sorted(self, themes):
        target = KotlinTarget(themes, PACKAGE)
        assert target.roles == ["onPrimary", "primary", "scrim"]

    def test_object_names(self, themes):
        target = KotlinTarget(themes, PACKAGE)
        assert target.object_names == {"OCEAN_FIRE": "OceanFire", "ROYAL": "Royal"}

    def test_property_collision(self, make_theme):
        theme = make_theme(colors={"on-primary": "#000", "onprimary": "#111"})
        with pytest.raises(EmitError, match="both map to property 'onprimary'"):
            KotlinTarget([theme], PACKAGE)

    def test_role_without_alphanumerics(self, make_theme):
        with pytest.raises(EmitError, match="no alphanumeric"):
            KotlinTarget([make_theme(colors={"--": "#000"})], PACKAGE)

    def test_digit_leading_role(self, make_theme):
        target = KotlinTarget([make_theme(colors={"1st": "#000"})], PACKAGE)
        assert target.properties == {"1st": "_1st"}

    def test_object_name_collision(self, make_theme):
        themes = [
            make_theme("Ocean Fire", identifier="OCEAN_FIRE"),
            make_theme("Ocean  Fire", identifier="OCEAN__FIRE"),
        ]
        with pytest.raises(EmitError, match="already used by 'OCEAN_FIRE'"):
            KotlinTarget(themes, PACKAGE)

    def test_reserved_object_name(self, make_theme):
        with pytest.raises(EmitError, match="AppTheme"):
            KotlinTarget([make_theme("App Theme", identifier="APP_THEME")], PACKAGE)


# =============================================================================
# Kotlin
# =============================================================================


class TestKotlinTarget:
    def test_file_paths(self, themes):
        result = KotlinTarget(themes, PACKAGE).generate()
        assert set(result.files) == {
            Path("com/example/generated/GeneratedColors.kt"),
            Path("com/example/generated/GeneratedThemes.kt"),
        }

    def test_colors_file(self, themes):
        result = KotlinTarget(themes, PACKAGE).generate()
        content = result.files[Path("com/example/generated/GeneratedColors.kt")]

        assert content.startswith("// Auto-generated file - do not modify\n")
        assert "package com.example.generated" in content
        assert "import androidx.compose.runtime.Immutable" in content
        assert "interface ThemeColorObject {\n    val onPrimary: Color\n" in content
        assert "@Immutable\nobject OceanFire : ThemeColorObject {" in content
        assert "override val primary: Color = Color(0xFFFF5722)" in content
        assert "override val scrim: Color = Color(0x80FF5722)" in content
        assert "override val onPrimary: Color = Color(0xFFFFFFFF)" in content

    def test_themes_file(self, themes):
        result = KotlinTarget(themes, PACKAGE).generate()
        content = result.files[Path("com/example/generated/GeneratedThemes.kt")]

        assert "enum class AppTheme(val displayName: String) {" in content
        assert '    OCEAN_FIRE("Ocean Fire"),\n    ROYAL("Royal"),\n    ;' in content
        assert "theme = AppTheme.OCEAN_FIRE," in content
        assert "colorObject = OceanFire," in content
        assert "appColors = AppColors(Royal)," in content
        assert "val allAppThemes: List<AppTheme> = themes.map { it.theme }" in content
        assert 'themeMap[theme] ?: error("Theme data not found for $theme")' in content
        assert "import " not in content

    def test_theme_order_follows_input(self, themes):
        content = KotlinTarget(list(reversed(themes)), PACKAGE).render_themes()
        assert content.index("ROYAL(") < content.index("OCEAN_FIRE(")

    def test_support_package_imports(self, themes):
        target = KotlinTarget(themes, PACKAGE, support_package="com.example.theme")
        content = target.render_themes()
        assert "import com.example.theme.AppColors" in content
        assert "import com.example.theme.ThemeData" in content

    def test_display_name_escaped(self, make_theme):
        theme = make_theme('Cost $ "Saver"', identifier="SAVER")
        content = KotlinTarget([theme], PACKAGE).render_themes()
        assert 'SAVER("Cost \\$ \\"Saver\\""),' in content

    def test_keyword_property_backticked(self, make_theme):
        target = KotlinTarget([make_theme(colors={"object": "#000"})], PACKAGE)
        assert "val `object`: Color" in target.render_colors()

    def test_keyword_identifier_rejected(self, make_theme):
        target = KotlinTarget([make_theme("In", identifier="in")], PACKAGE)
        with pytest.raises(EmitError, match="Kotlin keyword"):
            target.generate()

    def test_invalid_package(self, themes):
        with pytest.raises(EmitError, match="Invalid package name"):
            KotlinTarget(themes, "com.1example").generate()

    def test_unresolved_reference_cannot_be_emitted(self, make_theme):
        theme = make_theme(colors={"gap": "{spacing.small}"}, source="spacing.json")
        with pytest.raises(EmitError) as exc_info:
            KotlinTarget([theme], PACKAGE).generate()
        assert exc_info.value.context.role == "gap"
        assert exc_info.value.context.file == "spacing.json"

    def test_missing_role_value(self, make_theme):
        themes = [
            make_theme("Royal", colors={"primary": "#000"}),
            make_theme("Dusk", colors={}),
        ]
        with pytest.raises(EmitError, match="no value for color role"):
            KotlinTarget(themes, PACKAGE).generate()

    def test_idempotent(self, themes):
        first = KotlinTarget(themes, PACKAGE).generate()
        second = KotlinTarget(themes, PACKAGE).generate()
        assert first.files == second.files

    def test_roles_artifact(self, themes):
        result = KotlinTarget(themes, PACKAGE).generate()
        assert result.artifacts == {"roles": ["onPrimary", "primary", "scrim"]}


# =============================================================================
# Python
# =============================================================================


@pytest.fixture
def import_generated(tmp_path, monkeypatch):
    """Write a PythonTarget result under tmp_path and import its themes module."""

    def _import(target: PythonTarget):
        for path, content in target.generate().files.items():
            destination = tmp_path / path
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_text(content, encoding="utf-8")

        monkeypatch.syspath_prepend(str(tmp_path))
        return importlib.import_module(f"{target.package}.generated_themes")

    yield _import

    for name in [m for m in sys.modules if m.split(".")[0] == "generated_pkg"]:
        del sys.modules[name]


class TestPythonTarget:
    PACKAGE = "generated_pkg.themes"

    def test_file_paths(self, themes):
        result = PythonTarget(themes, self.PACKAGE).generate()
        assert set(result.files) == {
            Path("generated_pkg/themes/generated_colors.py"),
            Path("generated_pkg/themes/generated_themes.py"),
        }

    def test_colors_file(self, themes):
        content = PythonTarget(themes, self.PACKAGE).render_colors()
        assert content.startswith("# Auto-generated file - do not modify\n")
        assert "@dataclass(frozen=True)\nclass ThemeColorObject:" in content
        assert "OceanFire = ThemeColorObject(" in content
        assert "    scrim=0x80FF5722," in content

    def test_generated_registry(self, themes, import_generated):
        module = import_generated(PythonTarget(themes, self.PACKAGE))

        assert [t.name for t in module.ALL_APP_THEMES] == ["OCEAN_FIRE", "ROYAL"]
        assert module.AppTheme.OCEAN_FIRE.display_name == "Ocean Fire"

        data = module.get_theme_data(module.AppTheme.ROYAL)
        assert data.name == "Royal"
        assert data.color_object.primary == 0xFF4169E1
        assert data.color_object.onPrimary == 0xFFFFFFFF
        assert data.color_by_role("scrim") == 0x804169E1
        assert data.color_by_role("missing") is None

        assert module.get_theme_data("OCEAN_FIRE").theme is module.AppTheme.OCEAN_FIRE

    def test_generated_lookup_fails_loudly(self, themes, import_generated):
        module = import_generated(PythonTarget(themes, self.PACKAGE))

        with pytest.raises(module.UnknownThemeIdentifierError, match="Theme data not found"):
            module.get_theme_data("NOPE")
        with pytest.raises(LookupError):
            module.get_theme_data(42)

    def test_generated_objects_are_immutable(self, themes, import_generated):
        module = import_generated(PythonTarget(themes, self.PACKAGE))
        data = module.get_theme_data("ROYAL")

        with pytest.raises(AttributeError):
            data.color_object.primary = 0
        with pytest.raises(TypeError):
            data.app_colors["primary"] = 0

    def test_keyword_role(self, make_theme, import_generated):
        theme = make_theme("Royal", colors={"class": "#000000"})
        module = import_generated(PythonTarget([theme], self.PACKAGE))
        data = module.get_theme_data("ROYAL")
        assert data.color_object.class_ == 0xFF000000
        assert data.color_by_role("class") == 0xFF000000

    def test_underscore_identifier_rejected(self, make_theme):
        target = PythonTarget([make_theme("Hidden", identifier="_HIDDEN")], self.PACKAGE)
        with pytest.raises(EmitError, match="cannot start with '_'"):
            target.generate()

    def test_keyword_package_rejected(self, themes):
        with pytest.raises(EmitError, match="Invalid package name"):
            PythonTarget(themes, "generated.import").generate()

    def test_support_package_warning(self, themes):
        result = PythonTarget(themes, self.PACKAGE, support_package="app.theme").generate()
        assert result.warnings == ["support_package is ignored by the python target"]
