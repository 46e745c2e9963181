"""Core themegen functionality: IR, manifest, token traversal, CSS and style generation."""

from . import ir
from .collection_processor import (
    ProcessedTokens,
    build_variable_lookup,
    process_collection,
    process_token_document,
)
from .css_generator import collection_css_lines, generate_theme_css
from .errors import (
    ConfigError,
    ErrorContext,
    SourceError,
    StyleDocumentError,
    ThemegenError,
    TokenDocumentError,
)
from .manifest import BuildConfig, PathsConfig, ThemegenManifest, load_manifest
from .pipeline import BuildResult, build_theme, run_build, write_outputs
from .sources import JsonFileSource, TokenSource
from .style_processor import parse_style_records, process_styles
from .traverse import TraversalContext, traverse
from .values import value_to_css

__all__ = [
    "ir",
    "ThemegenError",
    "ConfigError",
    "ErrorContext",
    "SourceError",
    "StyleDocumentError",
    "TokenDocumentError",
    "BuildConfig",
    "PathsConfig",
    "ThemegenManifest",
    "load_manifest",
    "TraversalContext",
    "traverse",
    "value_to_css",
    "ProcessedTokens",
    "build_variable_lookup",
    "process_collection",
    "process_token_document",
    "collection_css_lines",
    "generate_theme_css",
    "parse_style_records",
    "process_styles",
    "BuildResult",
    "build_theme",
    "run_build",
    "write_outputs",
    "JsonFileSource",
    "TokenSource",
]
