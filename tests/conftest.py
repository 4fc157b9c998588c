"""Shared pytest fixtures for story-to-block tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from story_to_block.core.config import validate_config
from story_to_block.core.tokens import StbConfig


@pytest.fixture
def full_config_data() -> dict[str, Any]:
    """Raw config touching all ten categories, with named and unnamed tokens."""
    return {
        "prefix": "test",
        "tokens": {
            "color": {
                "primary": {"value": "#0073aa", "name": "Primary", "slug": "primary"},
                "primary-hover": {"value": "#005a87"},
            },
            "spacing": {
                "md": {"value": "1rem", "slug": "40", "name": "Medium"},
            },
            "fontFamily": {
                "base": {"value": "sans-serif", "name": "Sans", "slug": "body"},
            },
            "fontSize": {
                "sm": {"value": "0.875rem", "slug": "small", "name": "Small"},
                "xs": {"value": "0.75rem"},
            },
            "fontWeight": {
                "bold": {"value": "700"},
            },
            "lineHeight": {
                "normal": {"value": "1.5"},
            },
            "radius": {
                "none": {"value": "0"},
                "md": {"value": "4px"},
            },
            "shadow": {
                "sm": {"value": "0 1px 2px 0 rgb(0 0 0 / 0.05)"},
            },
            "transition": {
                "fast": {"value": "150ms ease"},
            },
            "zIndex": {
                "modal": {"value": "300"},
            },
        },
    }


@pytest.fixture
def full_config(full_config_data: dict[str, Any]) -> StbConfig:
    return validate_config(full_config_data)


@pytest.fixture
def inttest_config_data() -> dict[str, Any]:
    """Raw config used by the end-to-end tests."""
    return {
        "prefix": "inttest",
        "tokensPath": "src/tokens.css",
        "outDir": "out/wp",
        "tokens": {
            "color": {
                "primary": {"value": "#ff0000", "name": "Primary", "slug": "primary"},
                "muted": {"value": "#999999"},
            },
            "spacing": {
                "md": {"value": "1rem", "slug": "40", "name": "Medium"},
            },
            "fontWeight": {
                "bold": {"value": "700"},
            },
            "zIndex": {
                "modal": {"value": "300"},
            },
        },
    }


@pytest.fixture
def config_file(tmp_path: Path, inttest_config_data: dict[str, Any]) -> Path:
    """Write the end-to-end config to tmp_path/stb.config.json."""
    path = tmp_path / "stb.config.json"
    path.write_text(json.dumps(inttest_config_data, indent=2), encoding="utf-8")
    return path
