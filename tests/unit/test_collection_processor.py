"""Tests for collection processing and the variable lookup table."""

from __future__ import annotations

import logging

import pytest

from themegen.core.collection_processor import (
    build_variable_lookup,
    configure_collections,
    full_prefix,
    process_collection,
    process_token_document,
)
from themegen.core.errors import TokenDocumentError
from themegen.core.ir.tokens import CollectionConfig
from themegen.core.manifest import BuildConfig


class TestProcessCollection:
    def test_prefix_seeds_paths(self, token_document, build_config) -> None:
        collection = CollectionConfig(key="color_primitives", prefix="color")
        processed = process_collection(
            token_document, collection, "@color_primitives", build_config
        )
        assert processed.modes == ["Default"]
        values = {d.property: d.value for d in processed.definitions["Default"]}
        assert values == {
            "--wds-color-blue-500": "#2563eb",
            "--wds-color-blue-700": "#1d4ed8",
        }

    def test_alias_resolves_to_referenced_property(self, token_document, build_config) -> None:
        primitives = process_collection(
            token_document,
            CollectionConfig(key="color_primitives", prefix="color"),
            "@color_primitives",
            build_config,
        )
        color = process_collection(
            token_document,
            CollectionConfig(
                key="color", prefix="color", replacements={"color_primitives": "color"}
            ),
            "@color",
            build_config,
        )
        [light] = color.definitions["wds_light"]
        referenced = primitives.definitions["Default"][0].property
        assert light.value == f"var({referenced})"

    def test_rem_defaults_to_build_setting(self, token_document) -> None:
        build = BuildConfig(convert_to_rem=False, namespaces=["com.figma.wds"])
        processed = process_collection(
            token_document, CollectionConfig(key="size", prefix="size"), "@size", build
        )
        assert processed.definitions["default"][0].value == "16px"

    def test_collection_setting_overrides_build(self, token_document) -> None:
        build = BuildConfig(convert_to_rem=False, namespaces=["com.figma.wds"])
        collection = CollectionConfig(key="size", prefix="size", convert_to_rem=True)
        processed = process_collection(token_document, collection, "@size", build)
        assert [d.value for d in processed.definitions["compact"]] == ["0.75rem", "1.25rem"]

    def test_empty_prefixes(self) -> None:
        build = BuildConfig(token_prefix="", namespaces=[])
        collection = CollectionConfig(key="misc")
        data = {"@misc": {"a": {"$value": "x"}}}
        processed = process_collection(data, collection, "@misc", build)
        assert processed.definitions["default"][0].property == "--a"

    def test_full_prefix(self, build_config) -> None:
        assert full_prefix(CollectionConfig(key="c", prefix="color"), build_config) == "wds-color"


class TestProcessTokenDocument:
    def test_configured_collections_in_order(
        self, token_document, collections, build_config
    ) -> None:
        result = process_token_document(token_document, collections, build_config)
        assert list(result.collections) == [
            "color_primitives",
            "color",
            "size",
            "typography_primitives",
        ]
        assert result.skipped == []

    def test_missing_collection_skipped(self, token_document, build_config, caplog) -> None:
        collections = [CollectionConfig(key="absent", prefix="x"), CollectionConfig(key="size")]
        with caplog.at_level(logging.WARNING):
            result = process_token_document(token_document, collections, build_config)
        assert "absent" not in result.collections
        assert result.skipped == ["absent"]
        assert "@absent" in caplog.text

    def test_document_must_be_object(self, collections, build_config) -> None:
        with pytest.raises(TokenDocumentError):
            process_token_document(["not", "an", "object"], collections, build_config)

    def test_auto_configure_adds_unconfigured(self, token_document, build_config) -> None:
        build = BuildConfig(namespaces=build_config.namespaces, auto_configure=True)
        configured = [CollectionConfig(key="size", prefix="size")]
        result = process_token_document(token_document, configured, build)
        assert list(result.collections) == [
            "size",
            "color_primitives",
            "color",
            "typography_primitives",
        ]
        assert result.auto_configured == ["color_primitives", "color", "typography_primitives"]
        assert result.collections["color_primitives"].settings.prefix == "color-primitives"
        assert len(configured) == 1

    def test_configure_ignores_unmarked_keys(self, build_config) -> None:
        configured, added = configure_collections({"plain": {}, "@": {}}, [], build_config)
        assert configured == []
        assert added == []


class TestVariableLookup:
    def test_keyed_by_stable_id(self, token_document, collections, build_config) -> None:
        result = process_token_document(token_document, collections, build_config)
        lookup = build_variable_lookup(result.collections)
        assert lookup["VariableID:1:1"].property == "--wds-color-blue-500"
        assert lookup["VariableID:4:1"].value == '"inter", sans-serif'

    def test_uses_first_mode_only(self, token_document, collections, build_config) -> None:
        result = process_token_document(token_document, collections, build_config)
        lookup = build_variable_lookup(result.collections)
        assert lookup["VariableID:3:1"].value == "1rem"
        assert lookup["VariableID:2:1"].value == "var(--wds-color-blue-500)"

    def test_definitions_without_id_left_out(self, build_config) -> None:
        collection = CollectionConfig(key="misc")
        processed = process_collection(
            {"@misc": {"a": {"$value": "x"}}}, collection, "@misc", build_config
        )
        assert build_variable_lookup({"misc": processed}) == {}
