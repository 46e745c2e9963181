"""
CSS generator for processed token collections.

Renders each collection as CSS custom property blocks: the default mode in
``:root``, other modes in theme classes, and for collections with color
schemes a ``prefers-color-scheme: dark`` media block.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from .ir.tokens import ProcessedCollection, TokenDefinition

logger = logging.getLogger(__name__)

INDENT = "  "


def file_header(generator: str) -> list[str]:
    """Comment lines placed once at the top of the generated file."""
    return [
        "/*",
        f" * This file is automatically generated by {generator}!",
        " */",
    ]


def theme_class(token_prefix: str, collection_key: str, mode: str) -> str:
    """Class for a non-default mode, e.g. ``.wds-theme-size-compact``."""
    return f".{token_prefix}theme-{collection_key}-{mode}"


def scheme_class(token_prefix: str, collection_key: str, scheme: str, strip: str) -> str:
    """Class for a non-default color scheme, e.g. ``.wds-scheme-color-contrast``."""
    name = scheme.replace(strip, "", 1) if strip else scheme
    return f".{token_prefix}scheme-{collection_key}-{name}"


def declaration_lines(definitions: Iterable[TokenDefinition], depth: int = 1) -> list[str]:
    """
    Render definitions as ``--property: value;`` lines sorted by property.

    Args:
        definitions: Definitions of a single mode
        depth: Nesting depth; each level indents by two spaces

    Returns:
        List of CSS declaration lines
    """
    prefix = INDENT * depth
    return [
        f"{prefix}{definition.property}: {definition.value};"
        for definition in sorted(definitions, key=lambda d: d.property)
    ]


def _block(
    comment: str,
    selector: str,
    definitions: Iterable[TokenDefinition],
    depth: int = 0,
) -> list[str]:
    prefix = INDENT * depth
    return [
        f"{prefix}/* {comment} */",
        f"{prefix}{selector} {{",
        *declaration_lines(definitions, depth + 1),
        f"{prefix}}}",
    ]


def _scheme_definitions(
    collection: ProcessedCollection, key: str, scheme: str
) -> list[TokenDefinition]:
    definitions = collection.definitions.get(scheme)
    if definitions is None:
        logger.warning('Color scheme "%s" not found in collection "%s"', scheme, key)
        return []
    return definitions


def _scheme_blocks(
    collection: ProcessedCollection,
    key: str,
    token_prefix: str,
    schemes: list[str],
    strip: str,
    depth: int,
) -> list[str]:
    lines: list[str] = []
    for index, scheme in enumerate(schemes):
        definitions = _scheme_definitions(collection, key, scheme)
        if index == 0:
            lines.extend(_block(f"{key}: {scheme} (default)", ":root", definitions, depth))
        else:
            selector = scheme_class(token_prefix, key, scheme, strip)
            lines.extend(_block(f"{key}: {scheme}", selector, definitions, depth))
    return lines


def collection_css_lines(
    collection: ProcessedCollection,
    key: str,
    token_prefix: str,
) -> list[str]:
    """
    Render one collection as CSS lines.

    Without color schemes the first mode (document order) goes to ``:root``
    and every other mode gets a theme class. With color schemes the light
    list drives ``:root`` and scheme classes, and the dark list repeats the
    pattern inside a ``prefers-color-scheme: dark`` media query.

    Args:
        collection: Processed definitions and settings
        key: Collection key used in class names
        token_prefix: Build-wide CSS prefix

    Returns:
        List of CSS lines
    """
    settings = collection.settings
    lines: list[str] = []

    if settings.color_schemes:
        lines.extend(
            _scheme_blocks(
                collection,
                key,
                token_prefix,
                settings.color_schemes,
                settings.scheme_light_strip,
                depth=0,
            )
        )
        if settings.color_schemes_dark:
            lines.append("@media (prefers-color-scheme: dark) {")
            lines.extend(
                _scheme_blocks(
                    collection,
                    key,
                    token_prefix,
                    settings.color_schemes_dark,
                    settings.scheme_dark_strip,
                    depth=1,
                )
            )
            lines.append("}")
        return lines

    for index, (mode, definitions) in enumerate(collection.definitions.items()):
        if index == 0:
            lines.extend(_block(f"{key}: {mode} (default)", ":root", definitions))
        else:
            lines.extend(
                _block(f"{key}: {mode}", theme_class(token_prefix, key, mode), definitions)
            )
    return lines


def generate_theme_css(
    collections: Mapping[str, ProcessedCollection],
    token_prefix: str,
    generator: str = "themegen",
) -> list[str]:
    """
    Render all collections, in order, below the file header.

    Returns:
        List of CSS lines
    """
    lines = file_header(generator)
    for key, collection in collections.items():
        lines.extend(collection_css_lines(collection, key, token_prefix))
    return lines
