"""
Base generator classes for theme code emission.

A generator renders one set of artifacts from a validated theme list. It
never touches the filesystem itself: files are collected in memory on a
GeneratorResult, keyed by path relative to the output directory, and the
runner writes them once every generator has succeeded.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from themegen.core.ir import ParsedTheme


@dataclass
class GeneratorResult:
    """
    Result from a generator execution.

    Attributes:
        files: Rendered file contents keyed by path relative to the output directory
        artifacts: Data the runner reports on, e.g. the emitted color roles
        warnings: Any warnings to display to user
    """

    files: dict[Path, str] = field(default_factory=dict)
    artifacts: dict[str, Any] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    def add_file(self, path: Path, content: str) -> None:
        """Record a rendered file."""
        self.files[path] = content

    def add_artifact(self, key: str, value: Any) -> None:
        self.artifacts[key] = value

    def add_warning(self, warning: str) -> None:
        self.warnings.append(warning)


class Generator(ABC):
    """
    Base class for all generators.

    Example:
        class ReadmeGenerator(Generator):
            def generate(self) -> GeneratorResult:
                result = GeneratorResult()
                names = ", ".join(t.display_name for t in self.themes)
                result.add_file(Path("THEMES.md"), f"Themes: {names}\\n")
                return result
    """

    def __init__(self, themes: Sequence[ParsedTheme], package: str):
        """
        Initialize generator.

        Args:
            themes: Validated themes, in registry order
            package: Target package / namespace for the generated code
        """
        self.themes = list(themes)
        self.package = package

    @abstractmethod
    def generate(self) -> GeneratorResult:
        """
        Render artifacts.

        Returns:
            GeneratorResult with the rendered files

        Raises:
            EmitError: If the theme set cannot be expressed in the target
        """

    @property
    def package_path(self) -> Path:
        """Directory for the package, e.g. com.example.themes -> com/example/themes."""
        return Path(*self.package.split("."))
