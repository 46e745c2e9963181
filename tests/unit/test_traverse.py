"""Tests for W3C token tree traversal."""

from __future__ import annotations

import pytest

from themegen.core.errors import TokenDocumentError
from themegen.core.ir.tokens import DEFAULT_MODE, DefinitionsByMode
from themegen.core.traverse import (
    TraversalContext,
    apply_replacements,
    dedupe,
    namespace_data,
    property_for,
    property_name_for,
    traverse,
)

NS = "com.figma.wds"


def _walk(node, context: TraversalContext | None = None, keys=("wds-color",)) -> DefinitionsByMode:
    definitions: DefinitionsByMode = {}
    context = context or TraversalContext(
        definitions_key="@color", prefix="wds-color", namespaces=[NS]
    )
    traverse(definitions, node, context, "", list(keys))
    return definitions


class TestNaming:
    def test_property_joins_path(self) -> None:
        assert property_for(["color", "primitive", "blue", "500"]) == "--color-primitive-blue-500"

    def test_property_name_is_camel_case(self) -> None:
        assert property_name_for(["wds-color", "blue", "500"]) == "wdsColorBlue500"

    def test_property_name_splits_on_non_alphanumerics(self) -> None:
        assert property_name_for(["wds-typography", "font_size", "body lg"]) == (
            "wdsTypographyFontSizeBodyLg"
        )


class TestReplacements:
    def test_applied_once_in_order_then_lowercased(self) -> None:
        replacements = {"Semi Bold Italic": "600 italic", "a": "b"}
        assert apply_replacements("Semi Bold Italic aa", replacements) == "600 itblic aa"

    def test_no_replacements_only_lowercases(self) -> None:
        assert apply_replacements("#FFAA00", {}) == "#ffaa00"


class TestNamespaceData:
    def test_first_matching_namespace_wins(self) -> None:
        extensions = {"org.wds": {"figmaId": "b"}, NS: {"figmaId": "a"}}
        assert namespace_data(extensions, [NS, "org.wds"]) == {"figmaId": "a"}

    def test_fallback_namespace(self) -> None:
        assert namespace_data({"org.wds": {"figmaId": "b"}}, [NS, "org.wds"]) == {"figmaId": "b"}

    def test_missing(self) -> None:
        assert namespace_data(None, [NS]) is None
        assert namespace_data({"other": {}}, [NS]) is None


class TestTraverse:
    """Tree walking, type inheritance and mode fan-out."""

    def test_nested_path_becomes_property(self) -> None:
        tree = {"primitive": {"blue": {"500": {"$value": "#00F"}}}}
        definitions = _walk(tree)
        [definition] = definitions[DEFAULT_MODE]
        assert definition.property == "--wds-color-primitive-blue-500"
        assert definition.property_name == "wdsColorPrimitiveBlue500"
        assert definition.value == "#00f"

    def test_leaf_without_modes_uses_default_mode(self) -> None:
        definitions = _walk({"a": {"$value": "red"}})
        assert list(definitions) == [DEFAULT_MODE]
        assert definitions[DEFAULT_MODE][0].stable_id is None

    def test_mode_fan_out(self) -> None:
        tree = {
            "bg": {
                "$value": "#fff",
                "$extensions": {NS: {"figmaId": "V:1", "modes": {"light": "#fff", "dark": "#000"}}},
            }
        }
        definitions = _walk(tree)
        assert list(definitions) == ["light", "dark"]
        light, dark = definitions["light"][0], definitions["dark"][0]
        assert light.property == dark.property == "--wds-color-bg"
        assert (light.value, dark.value) == ("#fff", "#000")
        assert light.stable_id == dark.stable_id == "V:1"

    def test_extension_without_modes_keeps_id(self) -> None:
        tree = {"x": {"$value": "1px", "$extensions": {NS: {"figmaId": "V:9"}}}}
        [definition] = _walk(tree)[DEFAULT_MODE]
        assert definition.stable_id == "V:9"

    def test_type_inherited_from_group(self) -> None:
        tree = {
            "$type": "color",
            "a": {"$value": "#111"},
            "b": {"$type": "dimension", "c": {"$value": "4"}, "d": {"$value": "5", "$type": "x"}},
        }
        types = {d.property: d.type for d in _walk(tree)[DEFAULT_MODE]}
        assert types == {
            "--wds-color-a": "color",
            "--wds-color-b-c": "dimension",
            "--wds-color-b-d": "x",
        }

    def test_marker_keys_are_not_children(self) -> None:
        tree = {"$description": "group", "$extensions": {}, "a": {"$value": "1"}}
        properties = [d.property for d in _walk(tree)[DEFAULT_MODE]]
        assert properties == ["--wds-color-a"]

    def test_empty_group_produces_nothing(self) -> None:
        assert _walk({"$type": "color", "empty": {}}) == {}

    def test_description_carried(self) -> None:
        [definition] = _walk({"a": {"$value": "1", "$description": "One"}})[DEFAULT_MODE]
        assert definition.description == "One"

    def test_replacements_applied_to_values(self) -> None:
        context = TraversalContext(
            definitions_key="@color",
            prefix="wds-color",
            replacements={"color_primitives": "color"},
            namespaces=[NS],
        )
        tree = {"bg": {"$value": "{@color_primitives.blue.500}"}}
        [definition] = _walk(tree, context)[DEFAULT_MODE]
        assert definition.value == "var(--wds-color-blue-500)"

    def test_dimensions_use_context_units(self) -> None:
        context = TraversalContext(
            definitions_key="@size", prefix="wds-size", convert_to_rem=False
        )
        [definition] = _walk({"4": {"$value": 16}}, context, keys=("wds-size",))[DEFAULT_MODE]
        assert definition.value == "16px"

    def test_no_prefix_seed(self) -> None:
        context = TraversalContext(definitions_key="@x")
        [definition] = _walk({"a": {"b": {"$value": "1"}}}, context, keys=())[DEFAULT_MODE]
        assert definition.property == "--a-b"

    def test_scalar_group_child_raises(self) -> None:
        with pytest.raises(TokenDocumentError, match="@color.a.b"):
            _walk({"a": {"b": "not-a-token"}})

    def test_modes_must_be_object(self) -> None:
        tree = {"a": {"$value": "1", "$extensions": {NS: {"figmaId": "V", "modes": ["x"]}}}}
        with pytest.raises(TokenDocumentError):
            _walk(tree)

    def test_extension_block_must_be_object(self) -> None:
        tree = {"a": {"$value": "1", "$extensions": {NS: "V:1"}}}
        with pytest.raises(TokenDocumentError, match="@color.a"):
            _walk(tree)

    def test_empty_modes_produce_nothing(self) -> None:
        tree = {"a": {"$value": "1", "$extensions": {NS: {"figmaId": "V:1", "modes": {}}}}}
        assert _walk(tree) == {}

    def test_ratio_results_skip_lowercasing(self) -> None:
        tree = {
            "ratio-base": {"$value": "golden"},
            "ratio-scale": {"$value": "{@color.ratio-base}"},
        }
        values = {d.property: d.value for d in _walk(tree)[DEFAULT_MODE]}
        assert values == {
            "--wds-color-ratio-base": "NaN",
            "--wds-color-ratio-scale": "var(--wds-color-ratio-base)",
        }


class TestDedupe:
    def test_last_write_wins_in_first_position(self) -> None:
        definitions: DefinitionsByMode = {}
        context = TraversalContext(definitions_key="@c", prefix="c")
        traverse(definitions, {"a": {"$value": "red"}, "b": {"$value": "blue"}}, context, "", ["c"])
        traverse(definitions, {"a": {"$value": "green"}}, context, "", ["c"])
        result = dedupe(definitions)[DEFAULT_MODE]
        assert [(d.property, d.value) for d in result] == [("--c-a", "green"), ("--c-b", "blue")]
