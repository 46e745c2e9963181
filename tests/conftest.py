"""Shared pytest fixtures for themegen tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from themegen.core.ir.tokens import CollectionConfig
from themegen.core.manifest import BuildConfig, PathsConfig, ThemegenManifest

NS = "com.figma.wds"


def token(
    value: Any,
    figma_id: str | None = None,
    modes: dict[str, Any] | None = None,
    **extra: Any,
) -> dict[str, Any]:
    """Build a W3C token leaf, with figma extension data when an id is given."""
    node: dict[str, Any] = {"$value": value, **extra}
    if figma_id is not None:
        data: dict[str, Any] = {"figmaId": figma_id}
        if modes is not None:
            data["modes"] = modes
        node["$extensions"] = {NS: data}
    return node


@pytest.fixture
def token_document() -> dict[str, Any]:
    """A small token export with primitives, schemed colors, sizes and typography."""
    return {
        "@color_primitives": {
            "$type": "color",
            "blue": {
                "500": token(
                    "#2563EB",
                    "VariableID:1:1",
                    {"Default": "#2563EB"},
                    **{"$description": "Brand blue"},
                ),
                "700": token("#1D4ED8", "VariableID:1:2", {"Default": "#1D4ED8"}),
            },
        },
        "@color": {
            "$type": "color",
            "background": {
                "primary": token(
                    "{@color_primitives.blue.500}",
                    "VariableID:2:1",
                    {
                        "wds_light": "{@color_primitives.blue.500}",
                        "wds_dark": "{@color_primitives.blue.700}",
                    },
                ),
            },
        },
        "@size": {
            "$type": "dimension",
            "spacing": {
                "4": token(16, "VariableID:3:1", {"default": 16, "compact": 12}),
                "6": token(24, "VariableID:3:2", {"default": 24, "compact": 20}),
            },
        },
        "@typography_primitives": {
            "family": {
                "sans": token(
                    "Inter", "VariableID:4:1", {"Default": "Inter"}, **{"$type": "fontFamily"}
                ),
            },
            "weight": {
                "bold": token(700, "VariableID:4:2", {"Default": 700}, **{"$type": "number"}),
            },
            "size": {
                "body": token(16, "VariableID:4:3", {"Default": 16}, **{"$type": "dimension"}),
            },
            "line": {
                "ratio-body": token(1.23456789, "VariableID:4:4", {"Default": 1.23456789}),
            },
        },
    }


@pytest.fixture
def style_document() -> list[dict[str, Any]]:
    """Text and effect styles, one bound to variables."""
    return [
        {
            "type": "TEXT",
            "name": "Body/Regular",
            "fontSize": 16,
            "fontName": {"family": "Inter", "style": "Regular"},
            "boundVariables": {},
        },
        {
            "type": "TEXT",
            "name": "Heading/H1 Bold",
            "fontSize": 32,
            "fontName": {"family": "Inter", "style": "Bold"},
            "boundVariables": {
                "fontFamily": {"type": "VARIABLE_ALIAS", "id": "VariableID:4:1"},
                "fontSize": {"type": "VARIABLE_ALIAS", "id": "VariableID:missing"},
            },
        },
        {
            "type": "EFFECT",
            "name": "Elevation / 200",
            "effects": [
                {
                    "type": "DROP_SHADOW",
                    "visible": True,
                    "radius": 8,
                    "spread": 0,
                    "offset": {"x": 2, "y": 4},
                    "hex": "#000000ff",
                },
                {"type": "LAYER_BLUR", "visible": False, "radius": 4},
            ],
        },
        {"type": "PAINT", "name": "Ignored", "paints": []},
    ]


@pytest.fixture
def build_config() -> BuildConfig:
    return BuildConfig(token_prefix="wds-", namespaces=[NS], auto_configure=False)


@pytest.fixture
def collections() -> list[CollectionConfig]:
    return [
        CollectionConfig(key="color_primitives", prefix="color"),
        CollectionConfig(
            key="color",
            prefix="color",
            color_schemes=["wds_light"],
            color_schemes_dark=["wds_dark"],
            scheme_light_strip="_light",
            scheme_dark_strip="_dark",
            replacements={"color_primitives": "color"},
        ),
        CollectionConfig(key="size", prefix="size"),
        CollectionConfig(key="typography_primitives", prefix="typography"),
    ]


@pytest.fixture
def manifest(tmp_path: Path, build_config: BuildConfig, collections) -> ThemegenManifest:
    return ThemegenManifest(
        build=build_config,
        paths=PathsConfig(
            tokens=tmp_path / "tokens.json",
            styles=tmp_path / "styles.json",
            output=tmp_path / "out" / "theme.css",
            snippet=tmp_path / "snippet.js",
        ),
        collections=collections,
        project_root=tmp_path,
    )


@pytest.fixture
def project_dir(tmp_path: Path, token_document, style_document) -> Path:
    """A directory with tokens.json and styles.json written to disk."""
    (tmp_path / "tokens.json").write_text(json.dumps(token_document), encoding="utf-8")
    (tmp_path / "styles.json").write_text(json.dumps(style_document), encoding="utf-8")
    return tmp_path
