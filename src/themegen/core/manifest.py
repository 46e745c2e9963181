"""
themegen.toml manifest loading.

Example::

    [build]
    token_prefix = "wds-"
    convert_to_rem = true
    namespaces = ["com.figma.wds", "org.wds"]

    [paths]
    tokens = "tokens.json"
    styles = "styles.json"
    output = "../../src/theme.css"

    [[collections]]
    key = "color"
    prefix = "color"
    color_schemes = ["wds_light"]
    color_schemes_dark = ["wds_dark"]
    scheme_light_strip = "_light"
    scheme_dark_strip = "_dark"

    [collections.replacements]
    color_primitives = "color"
"""

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .errors import ConfigError, ErrorContext
from .ir.tokens import CollectionConfig
from .presets import (
    DEFAULT_COLLECTION_KEY_PREFIX,
    DEFAULT_NAMESPACES,
    DEFAULT_TOKEN_PREFIX,
    wds_collections,
)

logger = logging.getLogger(__name__)

MANIFEST_FILE = "themegen.toml"


@dataclass
class BuildConfig:
    """Build-wide settings shared by all collections."""

    token_prefix: str = DEFAULT_TOKEN_PREFIX
    convert_to_rem: bool = True  # default for collections that don't say
    namespaces: list[str] = field(default_factory=lambda: list(DEFAULT_NAMESPACES))
    collection_key_prefix: str = DEFAULT_COLLECTION_KEY_PREFIX
    auto_configure: bool = True  # add default settings for unconfigured collections
    generator: str = "themegen"  # named in the generated file header


@dataclass
class PathsConfig:
    """Input and output locations."""

    tokens: Path = Path("tokens.json")
    styles: Path | None = Path("styles.json")
    output: Path = Path("theme.css")
    snippet: Path | None = Path("tokenVariableSyntaxAndDescriptionSnippet.js")


@dataclass
class ThemegenManifest:
    """
    Complete build configuration.

    Loaded once at startup and passed into the pipeline; nothing mutates it
    during a build.
    """

    build: BuildConfig = field(default_factory=BuildConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)
    collections: list[CollectionConfig] = field(default_factory=wds_collections)
    project_root: Path = field(default_factory=Path.cwd)


def default_manifest(project_root: Path | None = None) -> ThemegenManifest:
    """Manifest with the built-in WDS preset, paths relative to ``project_root``."""
    root = project_root or Path.cwd()
    defaults = PathsConfig()
    paths = PathsConfig(
        tokens=root / defaults.tokens,
        styles=_resolve(root, None, defaults.styles),
        output=root / defaults.output,
        snippet=_resolve(root, None, defaults.snippet),
    )
    return ThemegenManifest(paths=paths, project_root=root)


def _resolve(root: Path, value: str | None, default: Path | None) -> Path | None:
    if value is None:
        return root / default if default is not None else None
    if value == "":
        return None
    path = Path(value)
    return path if path.is_absolute() else root / path


def _parse_collections(raw: list[dict[str, Any]], path: Path) -> list[CollectionConfig]:
    collections: list[CollectionConfig] = []
    seen: set[str] = set()
    for index, item in enumerate(raw):
        try:
            collection = CollectionConfig.model_validate(item)
        except ValidationError as e:
            raise ConfigError(
                f"Invalid settings for collection #{index + 1}: {e}",
                ErrorContext(file=path, token_path=f"collections[{index}]"),
            ) from e
        if collection.key in seen:
            raise ConfigError(
                f"Duplicate collection key '{collection.key}'",
                ErrorContext(file=path, token_path=f"collections[{index}]"),
            )
        seen.add(collection.key)
        collections.append(collection)
    return collections


def load_manifest(path: Path) -> ThemegenManifest:
    """
    Load a themegen.toml manifest.

    Relative paths are resolved against the manifest's directory. A manifest
    without [[collections]] uses the built-in WDS preset.

    Raises:
        ConfigError: If the file is missing, not TOML, or has invalid settings.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigError(f"Manifest not found: {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML: {e}", ErrorContext(file=path)) from e

    root = path.parent.resolve()
    build_data = data.get("build", {})
    paths_data = data.get("paths", {})
    defaults = BuildConfig()
    path_defaults = PathsConfig()

    build = BuildConfig(
        token_prefix=build_data.get("token_prefix", defaults.token_prefix),
        convert_to_rem=build_data.get("convert_to_rem", defaults.convert_to_rem),
        namespaces=list(build_data.get("namespaces", defaults.namespaces)),
        collection_key_prefix=build_data.get(
            "collection_key_prefix", defaults.collection_key_prefix
        ),
        auto_configure=build_data.get("auto_configure", defaults.auto_configure),
        generator=build_data.get("generator", defaults.generator),
    )

    tokens_path = _resolve(root, paths_data.get("tokens"), path_defaults.tokens)
    output_path = _resolve(root, paths_data.get("output"), path_defaults.output)
    if tokens_path is None or output_path is None:
        raise ConfigError("[paths] tokens and output must not be empty", ErrorContext(file=path))

    paths = PathsConfig(
        tokens=tokens_path,
        styles=_resolve(root, paths_data.get("styles"), path_defaults.styles),
        output=output_path,
        snippet=_resolve(root, paths_data.get("snippet"), path_defaults.snippet),
    )

    raw_collections = data.get("collections")
    if raw_collections is None:
        logger.debug("No [[collections]] in %s, using the WDS preset", path)
        collections = wds_collections(build.collection_key_prefix)
    else:
        collections = _parse_collections(raw_collections, path)

    return ThemegenManifest(
        build=build,
        paths=paths,
        collections=collections,
        project_root=root,
    )


def find_manifest(start: Path) -> Path | None:
    """Return themegen.toml in ``start`` if present."""
    candidate = start / MANIFEST_FILE
    return candidate if candidate.exists() else None
