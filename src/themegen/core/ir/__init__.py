"""
Intermediate representation for themegen.

Token collections, flat CSS definitions and design tool style records.
"""

from .styles import (
    BoundValue,
    Effect,
    EffectStyleRecord,
    FontName,
    Offset,
    StyleRecord,
    TextStyleRecord,
)
from .tokens import (
    DEFAULT_MODE,
    CollectionConfig,
    DefinitionsByMode,
    ProcessedCollection,
    TokenDefinition,
    VariableLookup,
)

__all__ = [
    "DEFAULT_MODE",
    "CollectionConfig",
    "DefinitionsByMode",
    "ProcessedCollection",
    "TokenDefinition",
    "VariableLookup",
    "BoundValue",
    "Effect",
    "EffectStyleRecord",
    "FontName",
    "Offset",
    "StyleRecord",
    "TextStyleRecord",
]
