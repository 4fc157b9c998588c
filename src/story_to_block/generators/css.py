"""
Shared rendering for the custom-property stylesheets.

tokens.css and tokens.wp.css have the same layout: a banner comment and a
single ``:root`` block with one declaration per token, in category order and
then token order. They differ only in how a token's value is written.
"""

from __future__ import annotations

from collections.abc import Callable

from story_to_block.core.tokens import StbConfig, TokenCategory, TokenEntry, css_variable_name

ValueResolver = Callable[[TokenCategory, TokenEntry], str]


def render_root_block(config: StbConfig, banner: str, resolve_value: ValueResolver) -> str:
    """Render a ``:root`` block of custom properties.

    Args:
        config: Validated config.
        banner: Comment text placed above the block.
        resolve_value: Returns the declared value for a token.

    Returns:
        Stylesheet text ending in a newline.
    """
    lines = [f"/* {banner} */", ":root {"]

    for category, group in config.tokens.items():
        for key, entry in group.items():
            name = css_variable_name(config.prefix, category, key)
            lines.append(f"  {name}: {resolve_value(category, entry)};")

    lines.append("}")
    return "\n".join(lines) + "\n"
