"""Tests for the themegen CLI commands."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from themegen.cli import app

runner = CliRunner()


@pytest.fixture
def no_config(tmp_path):
    """Path to a themegen.toml that does not exist."""
    return str(tmp_path / "missing.toml")


# =============================================================================
# Global options
# =============================================================================


class TestGlobalOptions:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "themegen version" in result.output
        assert "kotlin" in result.output

    def test_targets(self):
        result = runner.invoke(app, ["targets"])
        assert result.exit_code == 0
        assert "kotlin" in result.output
        assert "python" in result.output


# =============================================================================
# generate
# =============================================================================


class TestGenerate:
    def test_generate(self, theme_dir, tmp_path, no_config):
        out = tmp_path / "out"
        result = runner.invoke(
            app,
            ["generate", "-c", no_config, "-i", str(theme_dir), "-o", str(out), "-p", "com.app"],
        )
        assert result.exit_code == 0, result.output
        assert "Generated 2 file(s) for 2 theme(s), 4 color role(s)" in result.output
        assert (out / "com" / "app" / "GeneratedColors.kt").exists()
        assert (out / "com" / "app" / "GeneratedThemes.kt").exists()

    def test_generate_python_target(self, theme_dir, tmp_path, no_config):
        out = tmp_path / "out"
        result = runner.invoke(
            app,
            [
                "generate",
                "-c",
                no_config,
                "-i",
                str(theme_dir),
                "-o",
                str(out),
                "-p",
                "app_themes",
                "--target",
                "python",
            ],
        )
        assert result.exit_code == 0, result.output
        assert (out / "app_themes" / "generated_themes.py").exists()

    def test_generate_from_config_file(self, theme_dir, tmp_path):
        config = tmp_path / "themegen.toml"
        config.write_text(
            '[themegen]\ninput_dir = "themes"\noutput_dir = "gen"\npackage = "com.app"\n',
            encoding="utf-8",
        )
        result = runner.invoke(app, ["generate", "-c", str(config)])
        assert result.exit_code == 0, result.output
        assert (tmp_path / "gen" / "com" / "app" / "GeneratedThemes.kt").exists()

    def test_dry_run(self, theme_dir, tmp_path, no_config):
        out = tmp_path / "out"
        result = runner.invoke(
            app,
            ["generate", "-c", no_config, "-i", str(theme_dir), "-o", str(out), "-p", "a.b", "-n"],
        )
        assert result.exit_code == 0, result.output
        assert "Dry run mode" in result.output
        assert "Would generate 2 file(s)" in result.output
        assert not out.exists()

    def test_missing_settings(self, theme_dir, no_config):
        result = runner.invoke(app, ["generate", "-c", no_config, "-i", str(theme_dir)])
        assert result.exit_code == 1
        assert "Missing required setting(s): output_dir, package" in result.output

    def test_invalid_theme_fails_build(self, theme_dir, tmp_path, no_config, write_json):
        write_json(theme_dir / "loop.json", {"color": {"a": {"value": "{color.a}"}}})
        result = runner.invoke(
            app,
            ["generate", "-c", no_config, "-i", str(theme_dir), "-o", str(tmp_path), "-p", "a"],
        )
        assert result.exit_code == 1
        assert "Circular reference" in result.output
        assert "loop.json" in result.output


# =============================================================================
# validate / inspect
# =============================================================================


class TestValidate:
    def test_valid(self, theme_dir, no_config):
        result = runner.invoke(app, ["validate", "-c", no_config, "-i", str(theme_dir)])
        assert result.exit_code == 0, result.output
        assert "2 theme(s) valid, 4 color role(s) each" in result.output

    def test_inconsistent_keys(self, theme_dir, no_config, write_json):
        write_json(
            theme_dir / "dusk.json",
            {"name": "Dusk", "enumName": "DUSK", "colors": {"primary": "#000000"}},
        )
        result = runner.invoke(app, ["validate", "-c", no_config, "-i", str(theme_dir)])
        assert result.exit_code == 1
        assert "inconsistent color keys" in result.output

    def test_missing_input(self, no_config):
        result = runner.invoke(app, ["validate", "-c", no_config])
        assert result.exit_code == 1
        assert "input_dir" in result.output


class TestInspect:
    def test_inspect_all(self, theme_dir, no_config):
        result = runner.invoke(app, ["inspect", "-c", no_config, "-i", str(theme_dir)])
        assert result.exit_code == 0, result.output
        assert "OCEAN_FIRE" in result.output
        assert "FOREST" in result.output
        assert "#80FF5722" in result.output

    def test_inspect_one_theme(self, theme_dir, no_config):
        result = runner.invoke(
            app, ["inspect", "-c", no_config, "-i", str(theme_dir), "--theme", "FOREST"]
        )
        assert result.exit_code == 0, result.output
        assert "OCEAN_FIRE" not in result.output

    def test_inspect_unknown_theme(self, theme_dir, no_config):
        result = runner.invoke(
            app, ["inspect", "-c", no_config, "-i", str(theme_dir), "--theme", "NOPE"]
        )
        assert result.exit_code == 1
        assert "Theme data not found for NOPE" in result.output
