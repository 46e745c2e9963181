"""
End-to-end theme build.

Usage::

    from themegen.core.manifest import load_manifest
    from themegen.core.pipeline import run_build
    from themegen.core.sources import JsonFileSource

    manifest = load_manifest(Path("themegen.toml"))
    source = JsonFileSource(manifest.paths.tokens, manifest.paths.styles)
    result = run_build(manifest, source)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .collection_processor import build_variable_lookup, process_token_document
from .css_generator import generate_theme_css
from .ir.tokens import ProcessedCollection, VariableLookup
from .manifest import PathsConfig, ThemegenManifest
from .snippet import build_variable_syntax_snippet
from .sources import TokenSource
from .style_processor import parse_style_records, process_styles

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Everything a build produced, before anything is written."""

    css: str
    snippet: str
    collections: dict[str, ProcessedCollection] = field(default_factory=dict)
    lookup: VariableLookup = field(default_factory=dict)
    skipped: list[str] = field(default_factory=list)
    auto_configured: list[str] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)


def build_theme(tokens: Any, styles: Any, manifest: ThemegenManifest) -> BuildResult:
    """
    Build theme CSS from the token and style documents.

    Args:
        tokens: Parsed token document (collections at the root)
        styles: Parsed style document (array of style records)
        manifest: Build configuration

    Returns:
        BuildResult with the CSS text and the variable syntax snippet

    Raises:
        TokenDocumentError: If the token document is structurally invalid.
        StyleDocumentError: If the style document is structurally invalid.
    """
    build = manifest.build
    processed = process_token_document(tokens, manifest.collections, build)
    lookup = build_variable_lookup(processed.collections)
    records = parse_style_records(styles)

    lines = [
        *generate_theme_css(processed.collections, build.token_prefix, build.generator),
        *process_styles(records, lookup, build.token_prefix),
    ]
    return BuildResult(
        css="\n".join(lines) + "\n",
        snippet=build_variable_syntax_snippet(processed.collections),
        collections=processed.collections,
        lookup=lookup,
        skipped=processed.skipped,
        auto_configured=processed.auto_configured,
    )


def write_snippet(snippet: str, path: Path) -> bool:
    """Write the snippet; failures are logged, never raised."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(snippet, encoding="utf-8")
    except OSError as e:
        logger.warning("Unable to write %s: %s", path.name, e)
        return False
    logger.info("Wrote variable syntax snippet to %s", path)
    return True


def write_outputs(result: BuildResult, paths: PathsConfig) -> list[Path]:
    """
    Write the CSS file, then the snippet if one is configured.

    Returns:
        Paths that were written
    """
    paths.output.parent.mkdir(parents=True, exist_ok=True)
    paths.output.write_text(result.css, encoding="utf-8")
    logger.info("Wrote theme CSS to %s", paths.output)
    written = [paths.output]

    if paths.snippet is not None and write_snippet(result.snippet, paths.snippet):
        written.append(paths.snippet)
    result.written = written
    return written


def run_build(manifest: ThemegenManifest, source: TokenSource) -> BuildResult:
    """Load both documents, build, and write the outputs."""
    tokens = source.load_tokens()
    styles = source.load_styles()
    result = build_theme(tokens, styles, manifest)
    write_outputs(result, manifest.paths)
    return result
