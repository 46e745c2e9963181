"""
Style JSON processing.

Turns exported text and effect styles into ``:root`` custom properties:
one ``font`` shorthand per text style, and box-shadow, filter and
backdrop-filter values per effect style. Values bound to design tool
variables are resolved to ``var()`` references through the variable
lookup table built from the processed tokens.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from .errors import ErrorContext, StyleDocumentError
from .fonts import derive_font_parts
from .ir.styles import BoundValue, Effect, EffectStyleRecord, StyleRecord, TextStyleRecord
from .ir.tokens import TokenDefinition, VariableLookup
from .values import format_number

logger = logging.getLogger(__name__)

SHADOW_TYPES = ("DROP_SHADOW", "INNER_SHADOW")
BLUR_TYPES = ("LAYER_BLUR", "BACKGROUND_BLUR")

_WEIGHT_RE = re.compile(r"^[1-9]00$")
_LEADING_JUNK_RE = re.compile(r"^[^a-zA-Z0-9]+")
_NON_ALNUM_RUN_RE = re.compile(r"[^a-zA-Z0-9]+")
_NON_ALNUM_SPACE_RE = re.compile(r"[^a-zA-Z0-9 ]")
_SPACE_RUN_RE = re.compile(r" +")

_RECORD_MODELS: dict[str, type[BaseModel]] = {
    "TEXT": TextStyleRecord,
    "EFFECT": EffectStyleRecord,
}


# =============================================================================
# Parsing
# =============================================================================


def parse_style_records(data: Any) -> list[StyleRecord]:
    """
    Parse the exported style array into typed records.

    Records of other types (e.g. PAINT) are dropped.

    Raises:
        StyleDocumentError: If the document is not an array or a TEXT/EFFECT
            record has fields of the wrong shape.
    """
    if not isinstance(data, list):
        raise StyleDocumentError(
            f"Style document must be a JSON array, got {type(data).__name__}"
        )

    records: list[StyleRecord] = []
    for index, item in enumerate(data):
        if not isinstance(item, Mapping):
            raise StyleDocumentError(
                f"Style record must be an object, got {type(item).__name__}",
                ErrorContext(token_path=f"[{index}]"),
            )
        model = _RECORD_MODELS.get(item.get("type", ""))
        if model is None:
            continue
        try:
            records.append(model.model_validate(item))  # type: ignore[arg-type]
        except ValidationError as e:
            raise StyleDocumentError(
                f"Invalid {item.get('type')} style: {e}",
                ErrorContext(token_path=f"[{index}] {item.get('name', '')}".strip()),
            ) from e
    return records


# =============================================================================
# Variable resolution
# =============================================================================


class VariableResolver:
    """Resolves bound variable references against the variable lookup table."""

    def __init__(self, lookup: VariableLookup):
        self.lookup = lookup
        self._definitions = list(lookup.values())

    def _by_value(self, value: str) -> TokenDefinition | None:
        return next((d for d in self._definitions if d.value == value), None)

    def resolve(self, item: BoundValue | None, fallback: str = "") -> str:
        """
        Return a ``var()`` reference for a bound value, or the fallback.

        ``{"id": ...}`` objects are looked up by variable id. A bare weight
        such as ``"700"`` is matched against definition values, since styles
        carry weights as numbers where variables name them.
        """
        if isinstance(item, Mapping):
            variable_id = str(item.get("id", ""))
            definition = self.lookup.get(variable_id)
            if definition is None:
                logger.debug("Unresolved variable %s, using %r", variable_id, fallback)
                return fallback
            return f"var({definition.property})"

        if item is None:
            text = ""
        elif isinstance(item, float):
            text = format_number(item)
        else:
            text = str(item)
        if _WEIGHT_RE.match(text):
            definition = self._by_value(text)
            return f"var({definition.property})" if definition else text
        return text or fallback

    def bound(self, bound_variables: Mapping[str, BoundValue], name: str, literal: str) -> str:
        """Resolve ``name`` if it is bound, otherwise keep the literal."""
        if bound_variables.get(name):
            return self.resolve(bound_variables[name], literal)
        return literal


# =============================================================================
# Naming
# =============================================================================


def font_property_name(name: str) -> str:
    """``"Heading/H1 Bold"`` -> ``heading-h1-bold``."""
    return _NON_ALNUM_RUN_RE.sub("-", _LEADING_JUNK_RE.sub("", name)).lower()


def sanitize_name(name: str) -> str:
    """``"Elevation / 200"`` -> ``elevation-200``."""
    return _SPACE_RUN_RE.sub("-", _NON_ALNUM_SPACE_RE.sub(" ", name).strip()).lower()


# =============================================================================
# Formatting
# =============================================================================


def format_text_style(record: TextStyleRecord, resolver: VariableResolver) -> str:
    """CSS ``font`` shorthand value: style weight size family."""
    parts = derive_font_parts(
        family=record.font_name.family,
        style=record.font_name.style,
        font_size=record.font_size,
        fallback_family=record.font_family,
        fallback_style=record.font_style,
        fallback_weight=record.font_weight,
    )
    bound = record.bound_variables
    return " ".join(
        [
            resolver.bound(bound, "fontStyle", parts.font_style),
            resolver.bound(bound, "fontWeight", parts.font_weight),
            resolver.bound(bound, "fontSize", parts.font_size),
            resolver.bound(bound, "fontFamily", parts.font_family),
        ]
    )


def format_effect(effect: Effect, resolver: VariableResolver) -> str | None:
    """
    Render one effect as a shadow or ``blur()`` value.

    Shadows are ``[inset] x y radius spread color``; each part is resolved
    separately when bound. Effects of unknown types render as None.
    """
    bound = effect.bound_variables
    if effect.type in SHADOW_TYPES:
        parts = [
            resolver.bound(bound, "offsetX", f"{format_number(effect.offset.x)}px"),
            resolver.bound(bound, "offsetY", f"{format_number(effect.offset.y)}px"),
            resolver.bound(bound, "radius", f"{format_number(effect.radius)}px"),
            resolver.bound(bound, "spread", f"{format_number(effect.spread)}px"),
            resolver.bound(bound, "color", effect.hex or ""),
        ]
        shadow = " ".join(part for part in parts if part)
        return f"inset {shadow}" if effect.type == "INNER_SHADOW" else shadow
    if effect.type in BLUR_TYPES:
        radius = resolver.bound(bound, "radius", f"{format_number(effect.radius)}px")
        return f"blur({radius})"
    return None


def effect_declarations(
    record: EffectStyleRecord, resolver: VariableResolver, token_prefix: str
) -> list[str]:
    """
    Custom property declarations for one effect style.

    All visible shadows are joined into one list. Only the first visible
    layer blur and the first visible background blur are used.
    """
    name = sanitize_name(record.name)
    shadows: list[str] = []
    filters: list[str] = []
    backdrop_filters: list[str] = []
    for effect in record.effects:
        if not effect.visible:
            continue
        value = format_effect(effect, resolver)
        if value is None:
            continue
        if "SHADOW" in effect.type:
            shadows.append(value)
        elif effect.type == "LAYER_BLUR":
            filters.append(value)
        elif effect.type == "BACKGROUND_BLUR":
            backdrop_filters.append(value)

    declarations = []
    if shadows:
        declarations.append(f"--{token_prefix}effects-shadows-{name}: {', '.join(shadows)};")
    if filters:
        declarations.append(f"--{token_prefix}effects-filter-{name}: {filters[0]};")
    if backdrop_filters:
        declarations.append(
            f"--{token_prefix}effects-backdrop-filter-{name}: {backdrop_filters[0]};"
        )
    return declarations


def process_styles(
    records: Iterable[StyleRecord],
    lookup: VariableLookup,
    token_prefix: str,
) -> list[str]:
    """
    Render text and effect styles as a ``:root`` block.

    Text style declarations come first, then effect declarations, each in
    record order.

    Args:
        records: Parsed style records
        lookup: Variable id -> definition table from the processed tokens
        token_prefix: Build-wide CSS prefix

    Returns:
        List of CSS lines
    """
    resolver = VariableResolver(lookup)
    text: list[str] = []
    effects: list[str] = []
    for record in records:
        if isinstance(record, TextStyleRecord):
            name = font_property_name(record.name)
            text.append(f"--{token_prefix}font-{name}: {format_text_style(record, resolver)};")
        elif isinstance(record, EffectStyleRecord):
            effects.extend(effect_declarations(record, resolver, token_prefix))

    return [
        "/* styles */",
        ":root {",
        *(f"  {declaration}" for declaration in [*text, *effects]),
        "}",
    ]
