"""
Built-in build presets for themegen.

Used when no themegen.toml is present. The WDS preset describes the
collections of the WDS design file: primitives, semantic colors with
light/dark schemes, sizing and typography.
"""

from __future__ import annotations

from .ir.tokens import CollectionConfig

DEFAULT_TOKEN_PREFIX = "wds-"
DEFAULT_NAMESPACES = ("com.figma.wds", "org.wds")
DEFAULT_COLLECTION_KEY_PREFIX = "@"

# Font style names as exported, mapped to "<weight> <style>" shorthand
_ITALIC_WEIGHTS = {
    "Extra Bold Italic": "800 italic",
    "Semi Bold Italic": "600 italic",
    "Medium Italic": "500 italic",
    "Regular Italic": "400 italic",
    "Extra Light Italic": "200 italic",
    "Light Italic": "300 italic",
    "Black Italic": "900 italic",
    "Bold Italic": "700 italic",
    "Thin Italic": "100 italic",
}


def wds_collections(key_prefix: str = DEFAULT_COLLECTION_KEY_PREFIX) -> list[CollectionConfig]:
    """
    Collection settings for the WDS design file, in output order.

    Args:
        key_prefix: Collection marker used in replacement keys that refer
            to other collections by their raw document key.

    Returns:
        Ordered collection configs.
    """
    return [
        CollectionConfig(key="color_primitives", prefix="color"),
        CollectionConfig(key="new_color_primitives", prefix="new-color"),
        CollectionConfig(
            key="color",
            prefix="color",
            color_schemes=["wds_light"],
            color_schemes_dark=["wds_dark"],
            scheme_light_strip="_light",
            scheme_dark_strip="_dark",
            replacements={
                "color_primitives": "color",
                f"{key_prefix}new_color_primitives": "wds-new-color",
                f"{key_prefix}new_color": "wds-new-color",
            },
        ),
        CollectionConfig(
            key="size",
            prefix="size",
            convert_to_rem=True,
            replacements={f"{key_prefix}responsive": "responsive"},
        ),
        CollectionConfig(
            key="typography_primitives",
            prefix="typography",
            convert_to_rem=True,
            replacements={f"{key_prefix}responsive": "responsive", **_ITALIC_WEIGHTS},
        ),
        CollectionConfig(
            key="typography",
            prefix="typography",
            convert_to_rem=True,
            replacements={"typography_primitives": "typography"},
        ),
        CollectionConfig(key="responsive", prefix="responsive", convert_to_rem=True),
    ]


WDS_COLLECTIONS = wds_collections()
