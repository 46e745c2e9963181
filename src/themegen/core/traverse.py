"""
W3C design token tree traversal.

Walks a nested token group, carrying the property path and the inherited
``$type`` down to every leaf, and appends one flat definition per leaf per
mode to an explicitly passed ``DefinitionsByMode`` accumulator.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from .errors import make_token_error
from .ir.tokens import DEFAULT_MODE, DefinitionsByMode, TokenDefinition
from .values import is_unitless_ratio, value_to_css

logger = logging.getLogger(__name__)

MARKER = "$"
VALUE_KEY = "$value"
TYPE_KEY = "$type"
DESCRIPTION_KEY = "$description"
EXTENSIONS_KEY = "$extensions"

_FRAGMENT_SPLIT_RE = re.compile(r"[^\dA-Za-z]")


@dataclass(frozen=True)
class TraversalContext:
    """Per-collection settings that stay fixed for a whole walk."""

    definitions_key: str
    prefix: str = ""
    convert_to_rem: bool = True
    replacements: Mapping[str, str] = field(default_factory=dict)
    namespaces: Sequence[str] = ()


def property_for(keys: Sequence[str]) -> str:
    """``["wds-color", "blue", "500"]`` -> ``--wds-color-blue-500``."""
    return f"--{'-'.join(keys)}"


def property_name_for(keys: Sequence[str]) -> str:
    """``["wds-color", "blue", "500"]`` -> ``wdsColorBlue500``."""
    full = "".join(
        fragment[:1].upper() + fragment[1:]
        for key in keys
        for fragment in _FRAGMENT_SPLIT_RE.split(key)
    )
    return full[:1].lower() + full[1:]


def apply_replacements(value: str, replacements: Mapping[str, str]) -> str:
    """Apply each find/replace pair once, in table order, then lowercase."""
    for find, replace in replacements.items():
        value = value.replace(find, replace, 1)
    return value.lower()


def namespace_data(extensions: Any, namespaces: Sequence[str]) -> Any:
    """Return the first extension block found under one of ``namespaces``."""
    if not isinstance(extensions, Mapping):
        return None
    for namespace in namespaces:
        data = extensions.get(namespace)
        if data:
            return data
    return None


def dedupe(definitions: DefinitionsByMode) -> DefinitionsByMode:
    """Keep one definition per property and mode: first position, last value."""
    result: DefinitionsByMode = {}
    for mode, entries in definitions.items():
        by_property: dict[str, TokenDefinition] = {}
        for definition in entries:
            if definition.property in by_property:
                logger.warning("Duplicate token %s in mode %s", definition.property, mode)
            by_property[definition.property] = definition
        result[mode] = list(by_property.values())
    return result


def traverse(
    definitions: DefinitionsByMode,
    node: Any,
    context: TraversalContext,
    current_type: str = "",
    keys: Sequence[str] = (),
    path: Sequence[str] = (),
) -> None:
    """
    Collect flat definitions for every token under ``node``.

    A node with ``$value`` is a token; anything else is a group whose
    children not starting with ``$`` are walked in document order. A group's
    ``$type`` is inherited by untyped descendants.

    Args:
        definitions: Accumulator, mode name -> definitions in document order
        node: Token or group object
        context: Collection settings
        current_type: Type inherited from the enclosing groups
        keys: Property path segments so far (seeded with the collection prefix)
        path: Document path segments, for error reporting

    Raises:
        TokenDocumentError: If a token or group is not an object.
    """
    if not isinstance(node, Mapping):
        raise make_token_error(
            f"Expected a token or group object, got {type(node).__name__}",
            [context.definitions_key, *path],
        )

    token_type = node.get(TYPE_KEY) or current_type
    if VALUE_KEY not in node:
        for key, child in node.items():
            if not key.startswith(MARKER):
                traverse(definitions, child, context, token_type, [*keys, key], [*path, key])
        return

    property = property_for(keys)
    property_name = property_name_for(keys)
    description = node.get(DESCRIPTION_KEY) or ""
    extension = namespace_data(node.get(EXTENSIONS_KEY), context.namespaces)
    if extension is not None and not isinstance(extension, Mapping):
        raise make_token_error(
            f"Expected extension data to be an object, got {type(extension).__name__}",
            [context.definitions_key, *path],
        )
    stable_id = extension.get("figmaId") if extension else None
    modes = extension.get("modes") if extension else None

    if modes is not None and not isinstance(modes, Mapping):
        raise make_token_error(
            f"Expected modes to be an object, got {type(modes).__name__}",
            [context.definitions_key, *path],
        )
    # An empty modes object yields no definitions
    mode_values = list(modes.items()) if modes is not None else [(DEFAULT_MODE, node[VALUE_KEY])]

    for mode, raw_value in mode_values:
        css_value = value_to_css(
            property,
            raw_value,
            context.definitions_key,
            context.convert_to_rem,
            context.prefix,
        )
        if not is_unitless_ratio(property, raw_value):
            css_value = apply_replacements(css_value, context.replacements)
        definitions.setdefault(mode, []).append(
            TokenDefinition(
                property=property,
                property_name=property_name,
                stable_id=stable_id,
                description=description,
                value=css_value,
                type=token_type,
            ),
        )
