"""
themegen - design token JSON to CSS custom properties.

Converts W3C design token exports (variables with modes) and design tool
style exports (text and effect styles) into a single generated theme
stylesheet with light/dark scheme and theme class support.
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import (
    ConfigError,
    SourceError,
    StyleDocumentError,
    ThemegenError,
    TokenDocumentError,
)
from .core.manifest import ThemegenManifest, default_manifest, load_manifest
from .core.pipeline import BuildResult, build_theme, run_build

__version__ = get_version()

__all__ = [
    "__version__",
    "BuildResult",
    "ThemegenManifest",
    "build_theme",
    "default_manifest",
    "load_manifest",
    "run_build",
    "ThemegenError",
    "ConfigError",
    "SourceError",
    "StyleDocumentError",
    "TokenDocumentError",
]
