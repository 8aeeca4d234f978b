"""
Emission targets for generated theme code.

Each target renders the colors file and the theme registry file for one
language:
- kotlin: Jetpack Compose objects and AllThemes registry
- python: frozen dataclasses and an Enum-keyed registry
"""

from .base import GENERATED_HEADER, EmitterTarget, TargetRegistry
from .kotlin import KotlinTarget
from .python import PythonTarget

__all__ = [
    # Base classes
    "EmitterTarget",
    "TargetRegistry",
    "GENERATED_HEADER",
    # Implementations
    "KotlinTarget",
    "PythonTarget",
]
