"""Shared pytest fixtures for themegen tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from themegen.core.ir import ParsedTheme


def _write_json(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def write_json():
    """Write data as JSON to a path and return the path."""
    return _write_json


@pytest.fixture
def ocean_fire_data() -> dict[str, Any]:
    """Token set with one named theme, a reference, and an alpha modifier."""
    return {
        "color": {
            "primary": {"value": "#FF5722", "type": "color"},
            "onPrimary": {"value": "#FFFFFF", "type": "color"},
            "surface": {"value": "{color.primary}", "type": "color"},
            "scrim": {
                "value": "{color.primary}",
                "type": "color",
                "$extensions": {"studio.tokens": {"modify": {"type": "alpha", "value": 0.5}}},
            },
        },
        "$themes": {"ocean-fire": {"name": "Ocean Fire", "enumName": "OCEAN_FIRE"}},
    }


@pytest.fixture
def forest_legacy_data() -> dict[str, Any]:
    """Legacy flat theme with the same roles as ocean_fire_data."""
    return {
        "name": "Forest",
        "enumName": "FOREST",
        "colors": {
            "primary": "#2E7D32",
            "onPrimary": "#FFFFFF",
            "surface": "#1B5E20",
            "scrim": "#802E7D32",
        },
    }


@pytest.fixture
def theme_dir(tmp_path: Path, ocean_fire_data, forest_legacy_data) -> Path:
    """Input directory holding one token-set file and one legacy file."""
    themes = tmp_path / "themes"
    _write_json(themes / "ocean.json", ocean_fire_data)
    _write_json(themes / "forest.json", forest_legacy_data)
    return themes


@pytest.fixture
def make_theme():
    """Factory for ParsedTheme records."""

    def _make(
        name: str = "Royal",
        identifier: str | None = None,
        colors: dict[str, str] | None = None,
        source: str | None = None,
    ) -> ParsedTheme:
        return ParsedTheme(
            display_name=name,
            identifier=identifier or name.upper().replace(" ", "_"),
            colors=colors if colors is not None else {"primary": "#4682B4", "surface": "#FFF"},
            source=source,
        )

    return _make
