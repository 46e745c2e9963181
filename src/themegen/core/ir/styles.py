"""
Style record IR types.

Flat text and effect style records exported from the design tool. Field
names follow the exported JSON (camelCase) through aliases; records are
read-only once parsed.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

# Bound variable references are usually {"type": "VARIABLE_ALIAS", "id": "..."},
# but plain strings and numbers occur in hand-authored exports.
BoundValue = dict[str, Any] | str | int | float


class FontName(BaseModel):
    """Combined family + style descriptor (e.g. family="Inter", style="Semi Bold Italic")."""

    model_config = ConfigDict(frozen=True)

    family: str = ""
    style: str = ""


class Offset(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float = 0
    y: float = 0


class Effect(BaseModel):
    """A single shadow or blur inside an effect style."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: str = Field(description="DROP_SHADOW | INNER_SHADOW | LAYER_BLUR | BACKGROUND_BLUR")
    visible: bool = Field(default=False)
    radius: float = Field(default=0)
    spread: float = Field(default=0)
    offset: Offset = Field(default_factory=Offset)
    hex: str | None = Field(default=None, description="Pre-converted #rrggbbaa color")
    bound_variables: dict[str, BoundValue] = Field(default_factory=dict, alias="boundVariables")


class TextStyleRecord(BaseModel):
    """A TEXT style record."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["TEXT"] = "TEXT"
    name: str
    font_size: float | None = Field(default=None, alias="fontSize")
    font_family: str | None = Field(default=None, alias="fontFamily")
    font_weight: str | int | float | None = Field(default=None, alias="fontWeight")
    font_style: str | None = Field(default=None, alias="fontStyle")
    font_name: FontName = Field(default_factory=FontName, alias="fontName")
    bound_variables: dict[str, BoundValue] = Field(default_factory=dict, alias="boundVariables")


class EffectStyleRecord(BaseModel):
    """An EFFECT style record."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["EFFECT"] = "EFFECT"
    name: str
    effects: list[Effect] = Field(default_factory=list)


StyleRecord = TextStyleRecord | EffectStyleRecord
