"""
Token collection processing.

Applies per-collection settings to a token document: each configured
collection found in the document is walked once and its definitions are
grouped by mode. Collections missing from the document are skipped with a
warning.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from .errors import TokenDocumentError
from .ir.tokens import (
    CollectionConfig,
    DefinitionsByMode,
    ProcessedCollection,
    VariableLookup,
)
from .manifest import BuildConfig
from .traverse import TraversalContext, dedupe, traverse

logger = logging.getLogger(__name__)


@dataclass
class ProcessedTokens:
    """Result of processing a whole token document."""

    collections: dict[str, ProcessedCollection] = field(default_factory=dict)
    skipped: list[str] = field(default_factory=list)
    auto_configured: list[str] = field(default_factory=list)


def definitions_key(collection: CollectionConfig, build: BuildConfig) -> str:
    """Raw document key of a collection, e.g. ``@color``."""
    return f"{build.collection_key_prefix}{collection.key}"


def full_prefix(collection: CollectionConfig, build: BuildConfig) -> str:
    """CSS prefix of a collection, e.g. ``wds-color``."""
    return f"{build.token_prefix}{collection.prefix}"


def process_collection(
    data: Mapping[str, Any],
    collection: CollectionConfig,
    key: str,
    build: BuildConfig,
) -> ProcessedCollection:
    """
    Walk one collection of the token document.

    Args:
        data: The whole token document
        collection: Settings for the collection
        key: Raw document key of the collection; must be present in ``data``
        build: Build-wide settings

    Returns:
        The collection's definitions grouped by mode
    """
    prefix = full_prefix(collection, build)
    context = TraversalContext(
        definitions_key=key,
        prefix=prefix,
        convert_to_rem=collection.rem_enabled(build.convert_to_rem),
        replacements=collection.replacements,
        namespaces=build.namespaces,
    )
    definitions: DefinitionsByMode = {}
    traverse(definitions, data[key], context, "", [prefix] if prefix else [])
    definitions = dedupe(definitions)
    logger.debug(
        "Collection %s: %d mode(s), %d token(s)",
        key,
        len(definitions),
        sum(len(entries) for entries in definitions.values()),
    )
    return ProcessedCollection(settings=collection, definitions=definitions)


def configure_collections(
    data: Mapping[str, Any],
    collections: Sequence[CollectionConfig],
    build: BuildConfig,
) -> tuple[list[CollectionConfig], list[str]]:
    """
    Extend the configured collections with defaults for unconfigured ones.

    Every document key starting with the collection marker that has no
    settings gets ``prefix`` = key with underscores turned into hyphens and
    rem conversion on. The configured list itself is left untouched.

    Returns:
        (collections in output order, keys that were auto-configured)
    """
    configured = list(collections)
    known = {collection.key for collection in configured}
    added: list[str] = []
    marker = build.collection_key_prefix
    for raw_key in data:
        if not raw_key.startswith(marker):
            continue
        key = raw_key[len(marker) :]
        if not key or key in known:
            continue
        configured.append(
            CollectionConfig(key=key, prefix=key.replace("_", "-"), convert_to_rem=True)
        )
        known.add(key)
        added.append(key)
        logger.warning(
            'Added default token collection settings for "%s". '
            "Consider configuring it explicitly if special handling is needed.",
            key,
        )
    return configured, added


def process_token_document(
    data: Any,
    collections: Sequence[CollectionConfig],
    build: BuildConfig,
) -> ProcessedTokens:
    """
    Process every configured collection of a token document.

    Raises:
        TokenDocumentError: If the document is not a JSON object.
    """
    if not isinstance(data, Mapping):
        raise TokenDocumentError(
            f"Token document must be a JSON object, got {type(data).__name__}"
        )

    result = ProcessedTokens()
    if build.auto_configure:
        collections, result.auto_configured = configure_collections(data, collections, build)

    for collection in collections:
        key = definitions_key(collection, build)
        if key not in data:
            logger.warning('Skipping token collection "%s" - not found in tokens', key)
            result.skipped.append(collection.key)
            continue
        result.collections[collection.key] = process_collection(data, collection, key, build)
    return result


def build_variable_lookup(collections: Mapping[str, ProcessedCollection]) -> VariableLookup:
    """
    Map stable variable ids to their definitions.

    Uses the first mode of every collection; definitions without an id are
    left out.
    """
    lookup: VariableLookup = {}
    for processed in collections.values():
        for definition in processed.first_mode():
            if definition.stable_id:
                lookup[definition.stable_id] = definition
    return lookup
