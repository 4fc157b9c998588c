"""
tokens.wp.css generator.

Same custom properties as tokens.css, but named tokens in preset-capable
categories read the WordPress preset variable first and fall back to the
literal value:

    --acme-color-primary: var(--wp--preset--color--primary, #0073aa);

Everything else (unnamed tokens, categories without a preset) keeps its
literal value, so a missing preset never breaks the cascade.
"""

from __future__ import annotations

import logging

from story_to_block.core.tokens import (
    WP_PRESET_MAPPING,
    NamedToken,
    StbConfig,
    TokenCategory,
    TokenEntry,
)

from .css import render_root_block

logger = logging.getLogger(__name__)

BANNER = "Design tokens mapped to WordPress presets. Generated by story-to-block, do not edit."


def wp_token_value(category: TokenCategory, entry: TokenEntry) -> str:
    """Return the declared value of a token in tokens.wp.css."""
    preset = WP_PRESET_MAPPING.get(category)
    if preset is not None and isinstance(entry, NamedToken):
        return f"var({preset}--{entry.slug}, {entry.value})"
    return entry.value


def generate_tokens_wp_css(config: StbConfig) -> str:
    """Generate tokens.wp.css with preset fallbacks for named tokens."""
    logger.debug("Generating tokens.wp.css for %d tokens", config.token_count())
    return render_root_block(config, BANNER, wp_token_value)
