"""
Generator configuration models.

Parses the [themegen] section from themegen.toml and merges it with
command-line overrides into a typed GeneratorConfig.

Example themegen.toml:

    [themegen]
    input_dir = "themes"
    output_dir = "build/generated/themes"
    package = "com.example.generated"
    target = "kotlin"
"""

from __future__ import annotations

import re
import tomllib
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from themegen.core.errors import ConfigError

CONFIG_FILE = "themegen.toml"
CONFIG_SECTION = "themegen"

_PACKAGE_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$")
_PATH_KEYS = ("input_dir", "output_dir")


class TargetName(str, Enum):
    """Supported emission targets."""

    KOTLIN = "kotlin"
    PYTHON = "python"


class GeneratorConfig(BaseModel):
    """Complete configuration for one generation run."""

    model_config = ConfigDict(frozen=True)

    input_dir: Path = Field(description="Directory holding the theme definition files")
    output_dir: Path = Field(description="Directory the generator owns and rewrites")
    package: str = Field(description="Target package / namespace for generated code")
    target: TargetName = TargetName.KOTLIN
    clean: bool = Field(default=True, description="Clear the output directory before writing")
    file_suffixes: list[str] = Field(default_factory=lambda: [".json"])
    support_package: str | None = Field(
        default=None,
        description="Package holding the app's ThemeData/AppColors types (kotlin only)",
    )

    @field_validator("package", "support_package")
    @classmethod
    def _check_package(cls, value: str | None) -> str | None:
        if value is not None and not _PACKAGE_RE.match(value):
            raise ValueError(f"'{value}' is not a dotted package name")
        return value

    @field_validator("file_suffixes")
    @classmethod
    def _normalize_suffixes(cls, value: list[str]) -> list[str]:
        return [s if s.startswith(".") else f".{s}" for s in value]


def load_config_file(toml_path: Path) -> dict[str, Any]:
    """
    Load the [themegen] section from a themegen.toml file.

    Relative directories are resolved against the file's own directory.

    Args:
        toml_path: Path to themegen.toml

    Returns:
        Raw settings, or an empty dict if the file does not exist

    Raises:
        ConfigError: If the file is not valid TOML
    """
    if not toml_path.exists():
        return {}

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {toml_path}: {e}") from e

    section = dict(data.get(CONFIG_SECTION, {}))
    base_dir = toml_path.parent
    for key in _PATH_KEYS:
        if key in section:
            path = Path(section[key])
            section[key] = path if path.is_absolute() else base_dir / path
    return section


def build_config(
    file_values: dict[str, Any] | None = None, **overrides: Any
) -> GeneratorConfig:
    """
    Merge file settings with overrides (None means "not given") into a config.

    Raises:
        ConfigError: If a required value is missing or a value is invalid
    """
    values = dict(file_values or {})
    values.update({key: value for key, value in overrides.items() if value is not None})

    missing = [key for key in ("input_dir", "output_dir", "package") if key not in values]
    if missing:
        raise ConfigError(
            f"Missing required setting(s): {', '.join(missing)}. "
            f"Pass them as options or set them under [{CONFIG_SECTION}] in {CONFIG_FILE}."
        )

    try:
        return GeneratorConfig(**values)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError(f"Invalid configuration: {details}") from e


def load_config(toml_path: Path, **overrides: Any) -> GeneratorConfig:
    """Load themegen.toml (if present) and apply overrides."""
    return build_config(load_config_file(toml_path), **overrides)
