"""
Token IR types.

Collection configuration records and the flat definitions produced by
walking a W3C design token tree. Definitions are grouped per mode and per
collection; the CSS generator consumes them once per build.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_MODE = "default"


# =============================================================================
# Collection configuration
# =============================================================================


class CollectionConfig(BaseModel):
    """
    Per-collection build settings.

    Example:
        CollectionConfig(
            key="color",
            prefix="color",
            color_schemes=["wds_light"],
            color_schemes_dark=["wds_dark"],
            scheme_light_strip="_light",
            scheme_dark_strip="_dark",
            replacements={"color_primitives": "color"},
        )
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(description="Collection name without the collection marker")
    prefix: str = Field(default="", description="CSS property prefix for the collection")
    convert_to_rem: bool | None = Field(
        default=None,
        description="Convert pixel dimensions to rem (None = build default)",
    )
    replacements: dict[str, str] = Field(
        default_factory=dict,
        description="Find/replace pairs applied in order to every CSS value",
    )
    color_schemes: list[str] | None = Field(
        default=None, description="Light scheme mode names, first is the default"
    )
    color_schemes_dark: list[str] | None = Field(
        default=None, description="Dark scheme mode names, first is the default"
    )
    scheme_light_strip: str = Field(
        default="", description="Substring removed from light scheme class names"
    )
    scheme_dark_strip: str = Field(
        default="", description="Substring removed from dark scheme class names"
    )

    @field_validator("key")
    @classmethod
    def _key_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("collection key must not be empty")
        return value

    def rem_enabled(self, default: bool) -> bool:
        """Resolve rem conversion against the build-wide default."""
        return default if self.convert_to_rem is None else self.convert_to_rem


# =============================================================================
# Flat definitions
# =============================================================================


class TokenDefinition(BaseModel):
    """
    One CSS custom property for one token in one mode.

    Example:
        TokenDefinition(
            property="--wds-color-blue-500",
            property_name="wdsColorBlue500",
            stable_id="VariableID:1:23",
            value="#2563eb",
            type="color",
        )
    """

    model_config = ConfigDict(frozen=True)

    property: str = Field(description="CSS custom property name, including leading --")
    property_name: str = Field(description="camelCase variant of the property path")
    stable_id: str | None = Field(default=None, description="Design tool variable id")
    description: str = Field(default="", description="Token description")
    value: str = Field(description="Final CSS value")
    type: str = Field(default="", description="Token type, inherited from groups")


DefinitionsByMode = dict[str, list[TokenDefinition]]
VariableLookup = dict[str, TokenDefinition]


class ProcessedCollection(BaseModel):
    """Definitions for one collection, keyed by mode in document order."""

    model_config = ConfigDict(frozen=True)

    settings: CollectionConfig
    definitions: DefinitionsByMode = Field(default_factory=dict)

    @property
    def modes(self) -> list[str]:
        return list(self.definitions)

    def first_mode(self) -> list[TokenDefinition]:
        """Definitions of the first (default) mode, empty when there are none."""
        for definitions in self.definitions.values():
            return definitions
        return []
