"""themegen version lookup."""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DISTRIBUTION = "themegen"
_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _checkout_version() -> str:
    """Version declared by the source checkout's pyproject.toml, if it is ours."""
    if not _PYPROJECT.is_file():
        return "0.0.0"
    with open(_PYPROJECT, "rb") as f:
        project = tomllib.load(f).get("project", {})
    if project.get("name") != DISTRIBUTION:
        return "0.0.0"
    return project.get("version", "0.0.0")


def get_version() -> str:
    """Installed distribution version, else the one in pyproject.toml."""
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        return _checkout_version()
