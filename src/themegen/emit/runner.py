"""
Generation runner - orchestrates one theme generation run.

parse -> validate -> render (in memory) -> clear output -> write

Nothing touches the output directory until every file has rendered, so a
failing run leaves the previous output exactly as it was.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from themegen.core.errors import EmitError
from themegen.core.ir import ParsedTheme
from themegen.core.parser import parse_theme_directory
from themegen.core.validator import validate_themes

from .config import GeneratorConfig
from .generator import GeneratorResult
from .targets import EmitterTarget, TargetRegistry

logger = logging.getLogger(__name__)


class GenerationResult:
    """
    Result of a generation run.

    Tracks the themes that went in and the files that came out.
    """

    def __init__(self, output_dir: Path, themes: list[ParsedTheme]):
        self.output_dir = output_dir
        self.themes = themes
        self.files: dict[Path, str] = {}
        self.roles: list[str] = []
        self.warnings: list[str] = []
        self.written = False

    def merge_generator_result(self, result: GeneratorResult) -> None:
        """Merge a GeneratorResult, anchoring its paths at the output directory.

        The "roles" artifact is collected for the summary.
        """
        for path, content in result.files.items():
            self.files[self.output_dir / path] = content
        for role in result.artifacts.get("roles", []):
            if role not in self.roles:
                self.roles.append(role)
        self.warnings.extend(result.warnings)

    def write_files(self) -> None:
        """Write all files to disk."""
        for path, content in self.files.items():
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8", newline="\n")
        self.written = True

    def summary(self) -> str:
        """Get a summary of the generation result."""
        verb = "Generated" if self.written else "Would generate"
        lines = [
            f"{verb} {len(self.files)} file(s) for {len(self.themes)} theme(s), "
            f"{len(self.roles)} color role(s)"
        ]
        if self.warnings:
            lines.append(f"Warnings: {len(self.warnings)}")
        return "\n".join(lines)


class GenerationRunner:
    """
    Orchestrates a generation run.

    Example:
        config = build_config(input_dir=Path("themes"), output_dir=Path("out"),
                              package="com.example.generated")
        result = GenerationRunner(config).run()
        print(result.summary())
    """

    def __init__(self, config: GeneratorConfig):
        self.config = config

    def load_themes(self) -> list[ParsedTheme]:
        """Parse and validate the input directory."""
        themes = parse_theme_directory(self.config.input_dir, self.config.file_suffixes)
        validate_themes(themes, source=str(self.config.input_dir))
        return themes

    def create_target(self, themes: list[ParsedTheme]) -> EmitterTarget:
        """
        Instantiate the configured emission target.

        Raises:
            EmitError: If no target is registered under the configured name
        """
        name = self.config.target.value
        target_class = TargetRegistry.get(name)
        if target_class is None:
            raise EmitError(
                f"Unknown target: {name} (available: {', '.join(TargetRegistry.list_targets())})"
            )
        return target_class(
            themes, self.config.package, support_package=self.config.support_package
        )

    def render(self) -> GenerationResult:
        """Run the pipeline in memory without touching the output directory."""
        logger.info(
            f"Generating {self.config.target.value} themes: {self.config.input_dir} -> "
            f"{self.config.output_dir} (package {self.config.package})"
        )
        themes = self.load_themes()
        target = self.create_target(themes)

        result = GenerationResult(self.config.output_dir, themes)
        result.merge_generator_result(target.generate())
        return result

    def run(self, dry_run: bool = False, clean: bool | None = None) -> GenerationResult:
        """
        Run the generation.

        Args:
            dry_run: Render only; leave the output directory untouched
            clean: Clear the output directory first (uses config if None)

        Returns:
            GenerationResult with rendered (and, unless dry_run, written) files

        Raises:
            ThemegenError: Any parse, validation, or emission failure
        """
        result = self.render()
        if dry_run:
            logger.info(f"Dry run: {len(result.files)} file(s) not written")
            return result

        output_dir = self.config.output_dir
        should_clean = clean if clean is not None else self.config.clean
        if should_clean and output_dir.exists():
            logger.debug(f"Clearing {output_dir}")
            shutil.rmtree(output_dir)

        output_dir.mkdir(parents=True, exist_ok=True)
        result.write_files()
        logger.info(f"Wrote {len(result.files)} file(s) to {output_dir}")
        return result


def generate(config: GeneratorConfig, dry_run: bool = False) -> GenerationResult:
    """Convenience entry point for build integrations."""
    return GenerationRunner(config).run(dry_run=dry_run)

