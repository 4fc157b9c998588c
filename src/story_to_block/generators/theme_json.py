"""
theme.json generator.

Maps tokens onto WordPress theme.json settings:

- color, spacing, fontFamily, fontSize: named tokens become editor presets
  (palette, spacingSizes, fontFamilies, fontSizes). Unnamed tokens are
  CSS-only and left out.
- fontWeight, lineHeight, radius, shadow, transition: every token goes to
  settings.custom, which WordPress exposes as --wp--custom--* variables.
- zIndex: never written.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

from story_to_block.core.tokens import NamedToken, StbConfig, TokenCategory, TokenGroup

logger = logging.getLogger(__name__)

THEME_JSON_SCHEMA = "https://schemas.wp.org/trunk/theme.json"
THEME_JSON_VERSION = 3

# Categories written to settings.custom, in output order
CUSTOM_CATEGORIES: tuple[TokenCategory, ...] = (
    TokenCategory.FONT_WEIGHT,
    TokenCategory.LINE_HEIGHT,
    TokenCategory.RADIUS,
    TokenCategory.SHADOW,
    TokenCategory.TRANSITION,
)


def _preset_entries(
    group: TokenGroup, build: Callable[[NamedToken], dict[str, str]]
) -> list[dict[str, str]]:
    return [build(entry) for entry in group.values() if isinstance(entry, NamedToken)]


def build_theme_settings(config: StbConfig) -> dict[str, Any]:
    """Build the ``settings`` object of theme.json.

    Sections that would be empty are omitted.
    """
    settings: dict[str, Any] = {}

    palette = _preset_entries(
        config.group(TokenCategory.COLOR),
        lambda e: {"slug": e.slug, "color": e.value, "name": e.name},
    )
    if palette:
        settings["color"] = {"palette": palette}

    spacing_sizes = _preset_entries(
        config.group(TokenCategory.SPACING),
        lambda e: {"slug": e.slug, "size": e.value, "name": e.name},
    )
    if spacing_sizes:
        settings["spacing"] = {"spacingSizes": spacing_sizes}

    font_families = _preset_entries(
        config.group(TokenCategory.FONT_FAMILY),
        lambda e: {"slug": e.slug, "fontFamily": e.value, "name": e.name},
    )
    font_sizes = _preset_entries(
        config.group(TokenCategory.FONT_SIZE),
        lambda e: {"slug": e.slug, "size": e.value, "name": e.name},
    )
    if font_families or font_sizes:
        typography: dict[str, Any] = {}
        if font_families:
            typography["fontFamilies"] = font_families
        if font_sizes:
            typography["fontSizes"] = font_sizes
        settings["typography"] = typography

    custom: dict[str, dict[str, str]] = {}
    for category in CUSTOM_CATEGORIES:
        values = {key: entry.value for key, entry in config.group(category).items()}
        if values:
            custom[category.value] = values
    if custom:
        settings["custom"] = custom

    return settings


def build_theme_json(config: StbConfig) -> dict[str, Any]:
    """Build the full theme.json document as a dict."""
    return {
        "$schema": THEME_JSON_SCHEMA,
        "version": THEME_JSON_VERSION,
        "settings": build_theme_settings(config),
    }


def generate_theme_json(config: StbConfig) -> str:
    """Generate theme.json text, pretty-printed with a trailing newline."""
    document = build_theme_json(config)
    logger.debug("Generating theme.json with sections: %s", ", ".join(document["settings"]))
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"
