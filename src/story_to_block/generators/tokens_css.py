"""tokens.css generator: plain custom properties for local development (Storybook)."""

from __future__ import annotations

import logging

from story_to_block.core.tokens import StbConfig, TokenCategory, TokenEntry

from .css import render_root_block

logger = logging.getLogger(__name__)

BANNER = "Design tokens. Generated by story-to-block, do not edit."


def _literal(category: TokenCategory, entry: TokenEntry) -> str:
    return entry.value


def generate_tokens_css(config: StbConfig) -> str:
    """Generate tokens.css with every token as a literal custom property."""
    logger.debug("Generating tokens.css for %d tokens", config.token_count())
    return render_root_block(config, BANNER, _literal)
