"""
Variable code syntax snippet.

Generates JavaScript to paste into the design tool's plugin console. It
sets each variable's WEB code syntax to the generated ``var(--...)`` name
and syncs its description, so designers see the CSS names in the tool.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping

from .ir.tokens import ProcessedCollection, TokenDefinition

_TEMPLATE = """Promise.all([
{entries},
].map(async ([variableId, webSyntax, description]) => {{
  const variable = await figma.variables.getVariableByIdAsync(variableId);
  if (variable) {{
    variable.setVariableCodeSyntax("WEB", webSyntax);
    variable.description = description;
  }}
  return;
}})).then(() => console.log("DONE!")).catch(console.error)"""


def _entries(definitions: Iterable[TokenDefinition]) -> str:
    rows = [
        "  "
        + json.dumps([d.stable_id, f"var({d.property})", d.description], ensure_ascii=False)
        for d in definitions
        if d.stable_id
    ]
    return ",\n".join(sorted(rows))


def build_variable_syntax_snippet(collections: Mapping[str, ProcessedCollection]) -> str:
    """Snippet covering the first mode of every collection."""
    groups = [_entries(collection.first_mode()) for collection in collections.values()]
    return _TEMPLATE.format(entries=",\n".join(sorted(group for group in groups if group)))
