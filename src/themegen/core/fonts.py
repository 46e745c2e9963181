"""
Font style descriptor parsing.

Design tools describe a font face with a single style name such as
"Semi Bold Italic". These helpers split that into CSS ``font-style`` and a
numeric ``font-weight``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from .values import format_number

# Checked in order for fuzzy matches, so longer names that contain a
# shorter one ("extra light" / "light") come first where it matters.
FONT_WEIGHTS: dict[str, str] = {
    "thin": "100",
    "extra light": "200",
    "ultralight": "200",
    "light": "300",
    "book": "350",
    "normal": "400",
    "regular": "400",
    "roman": "400",
    "medium": "500",
    "semi bold": "600",
    "demi bold": "600",
    "bold": "700",
    "extra bold": "800",
    "black": "900",
    "heavy": "900",
}

DEFAULT_WEIGHT = "400"
DEFAULT_FONT_SIZE = "16px"
GENERIC_FAMILY = "sans-serif"

_WEIGHT_NUMBER_RE = re.compile(r"\d{3}")
_SPACES_RE = re.compile(r" +")
_HYPHENS_RE = re.compile(r"-+")


@dataclass(frozen=True)
class FontStyle:
    font_style: str
    font_weight: str


@dataclass(frozen=True)
class FontParts:
    """Literal CSS values for each part of the ``font`` shorthand."""

    font_style: str
    font_weight: str
    font_size: str
    font_family: str


def parse_font_style(style_name: str = "") -> FontStyle:
    """
    Parse a style descriptor into font style and weight.

    The weight word is looked up directly, then by substring, then any
    embedded three digit number is used, then 400.

    Examples:
        >>> parse_font_style("Semi Bold Italic")
        FontStyle(font_style='italic', font_weight='600')
        >>> parse_font_style("W700")
        FontStyle(font_style='normal', font_weight='700')
    """
    if not style_name:
        return FontStyle(font_style="normal", font_weight=DEFAULT_WEIGHT)

    lower = style_name.lower()
    is_italic = "italic" in lower
    weight_key = _SPACES_RE.sub(" ", lower.replace("italic", "", 1)).strip()
    weight_key = _HYPHENS_RE.sub(" ", weight_key).strip()

    weight = FONT_WEIGHTS.get(weight_key)
    if not weight and weight_key:
        fuzzy = next((name for name in FONT_WEIGHTS if name in weight_key), None)
        if fuzzy:
            weight = FONT_WEIGHTS[fuzzy]
        elif match := _WEIGHT_NUMBER_RE.search(weight_key):
            weight = match.group(0)

    return FontStyle(
        font_style="italic" if is_italic else "normal",
        font_weight=weight or DEFAULT_WEIGHT,
    )


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float):
        return format_number(value)
    return str(value).strip()


def derive_font_parts(
    family: str = "",
    style: str = "",
    font_size: float | None = None,
    fallback_family: str | None = None,
    fallback_style: str | None = None,
    fallback_weight: Any = None,
) -> FontParts:
    """
    Derive literal font values for a text style.

    The combined ``style`` descriptor wins; without one, a descriptor is
    assembled from the separate style and weight fields. A ``normal``
    style field carries no weight information and is left out, so that
    ``fontStyle="normal", fontWeight=700`` resolves to 700 rather than
    matching "normal" as a weight name.

    Args:
        family: Family from the combined font name
        style: Style descriptor from the combined font name
        font_size: Size in px
        fallback_family: Separate ``fontFamily`` field
        fallback_style: Separate ``fontStyle`` field
        fallback_weight: Separate ``fontWeight`` field

    Returns:
        FontParts with CSS-ready literals
    """
    resolved_family = family or fallback_family or ""
    descriptor = style
    if not descriptor:
        parts = [_text(fallback_style), _text(fallback_weight)]
        if parts[0].lower() == "normal" and parts[1]:
            parts = parts[1:]
        descriptor = " ".join(part for part in parts if part).strip()

    parsed = parse_font_style(descriptor)
    return FontParts(
        font_style=parsed.font_style,
        font_weight=parsed.font_weight,
        font_size=f"{format_number(font_size)}px" if font_size is not None else DEFAULT_FONT_SIZE,
        font_family=(
            f'"{resolved_family}", {GENERIC_FAMILY}' if resolved_family else GENERIC_FAMILY
        ),
    )
