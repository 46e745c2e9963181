"""
Token value to CSS value conversion.

Turns one raw token value into a CSS literal: alias references become
``var(--...)``, bare numbers become px or rem dimensions, ratios are
rounded and unitless, and font families get a generic fallback.
"""

from __future__ import annotations

import math
import re
from typing import Any

ALIAS_OPEN = "{"
REM_BASE = 16

_DIGITS_RE = re.compile(r"^-?\d+(\.\d+)?$")
_ALIAS_SEPARATORS_RE = re.compile(r"[. ]")
_RATIO_RE = re.compile(r"ratio-")
_NOT_DIMENSION_RE = re.compile(r"weight|ratio-")

# Checked in order against the property path
_FONT_FALLBACKS = (
    ("family-mono", "monospace"),
    ("family-sans", "sans-serif"),
    ("family-serif", "serif"),
)


def format_number(number: float) -> str:
    """Render a number the way CSS expects it: ``1.0`` -> ``1``, ``0.5`` -> ``0.5``."""
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return str(number)


def value_text(value: Any) -> str:
    """Text form of a raw JSON value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format_number(value)
    return str(value)


def is_alias(value: Any) -> bool:
    return value_text(value).startswith(ALIAS_OPEN)


def is_unitless_ratio(property: str, value: Any) -> bool:
    """Whether ``value_to_css`` renders ``value`` as a rounded ratio number rather than text."""
    return _RATIO_RE.search(property) is not None and not is_alias(value)


def alias_to_var(alias: str, definitions_key: str, prefix: str) -> str:
    """
    Rewrite an alias reference into a ``var()`` expression.

    The raw collection key is swapped for the collection's CSS prefix, path
    separators become hyphens and the braces are dropped. Text that doesn't
    parse cleanly still comes out as a (malformed) ``var()`` so it shows up
    in the generated CSS.

    Args:
        alias: Reference text, e.g. ``{@color_primitives.blue.500}``
        definitions_key: Raw document key of the current collection
        prefix: Full CSS prefix of the current collection

    Returns:
        CSS expression, e.g. ``var(--wds-color-blue-500)``
    """
    name = alias.replace(definitions_key, prefix, 1)
    name = _ALIAS_SEPARATORS_RE.sub("-", name)
    name = name.removeprefix("{").removesuffix("}")
    return f"var(--{name})"


def round_ratio(value: Any) -> str:
    """Round to 4 decimal places (halves round up); ``NaN`` if not numeric."""
    try:
        number = float(value_text(value))
    except ValueError:
        return "NaN"
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "-Infinity" if number < 0 else "Infinity"
    return format_number(math.floor(number * 10000 + 0.5) / 10000)


def value_to_css(
    property: str,
    value: Any,
    definitions_key: str,
    convert_to_rem: bool,
    prefix: str = "",
) -> str:
    """
    Convert a W3C token value to a CSS value.

    Args:
        property: CSS custom property the value belongs to (e.g. ``--wds-size-4``)
        value: Raw token value for one mode
        definitions_key: Raw document key of the collection (e.g. ``@size``)
        convert_to_rem: Emit ``n/16 rem`` instead of ``n px`` for dimensions
        prefix: Full CSS prefix used when rewriting aliases

    Returns:
        CSS-ready value
    """
    text = value_text(value)
    if text.startswith(ALIAS_OPEN):
        return alias_to_var(text, definitions_key, prefix)

    is_ratio = _RATIO_RE.search(property) is not None
    if _DIGITS_RE.match(text) and not _NOT_DIMENSION_RE.search(property):
        if convert_to_rem:
            return f"{format_number(float(text) / REM_BASE)}rem"
        return f"{text}px"
    if is_ratio:
        return round_ratio(text)

    for marker, generic in _FONT_FALLBACKS:
        if marker in property:
            return f'"{text}", {generic}'
    return text
