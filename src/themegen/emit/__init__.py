"""
Theme code emission.

Turns a directory of theme definition files into generated source for a
target language.

Usage:
    themegen generate                 # Uses themegen.toml
    themegen generate --target python # Emit Python instead of Kotlin
    themegen generate --dry-run       # Preview without writing
"""

from .config import (
    CONFIG_FILE,
    GeneratorConfig,
    TargetName,
    build_config,
    load_config,
    load_config_file,
)
from .generator import Generator, GeneratorResult
from .runner import GenerationResult, GenerationRunner, generate
from .targets import EmitterTarget, KotlinTarget, PythonTarget, TargetRegistry

__all__ = [
    # Config
    "CONFIG_FILE",
    "GeneratorConfig",
    "TargetName",
    "build_config",
    "load_config",
    "load_config_file",
    # Generator
    "Generator",
    "GeneratorResult",
    # Targets
    "EmitterTarget",
    "TargetRegistry",
    "KotlinTarget",
    "PythonTarget",
    # Runner
    "GenerationRunner",
    "GenerationResult",
    "generate",
]
