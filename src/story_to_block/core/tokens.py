"""
Token IR types for declarative design-token configuration.

Defines the validated shape of stb.config.json: a closed set of token
categories, the named/unnamed token variants, and the StbConfig that every
generator consumes. Also holds the static per-category naming tables.
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Categories
# =============================================================================


class TokenCategory(StrEnum):
    """Supported token categories, keyed by their config name."""

    COLOR = "color"
    SPACING = "spacing"
    FONT_FAMILY = "fontFamily"
    FONT_SIZE = "fontSize"
    FONT_WEIGHT = "fontWeight"
    LINE_HEIGHT = "lineHeight"
    RADIUS = "radius"
    SHADOW = "shadow"
    TRANSITION = "transition"
    Z_INDEX = "zIndex"


# CSS variable segment per category (fontFamily -> "font-family", zIndex -> "z")
CATEGORY_CSS_SEGMENT: MappingProxyType[TokenCategory, str] = MappingProxyType(
    {
        TokenCategory.COLOR: "color",
        TokenCategory.SPACING: "spacing",
        TokenCategory.FONT_FAMILY: "font-family",
        TokenCategory.FONT_SIZE: "font-size",
        TokenCategory.FONT_WEIGHT: "font-weight",
        TokenCategory.LINE_HEIGHT: "line-height",
        TokenCategory.RADIUS: "radius",
        TokenCategory.SHADOW: "shadow",
        TokenCategory.TRANSITION: "transition",
        TokenCategory.Z_INDEX: "z",
    }
)

# WordPress preset variable path per category. Only categories with a native
# theme.json preset are listed; everything else stays a literal in tokens.wp.css.
WP_PRESET_MAPPING: MappingProxyType[TokenCategory, str] = MappingProxyType(
    {
        TokenCategory.COLOR: "--wp--preset--color",
        TokenCategory.SPACING: "--wp--preset--spacing",
        TokenCategory.FONT_FAMILY: "--wp--preset--font-family",
        TokenCategory.FONT_SIZE: "--wp--preset--font-size",
    }
)


# =============================================================================
# Token entries
# =============================================================================


class UnnamedToken(BaseModel):
    """Internal token that only ever reaches the CSS outputs."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unnamed"] = "unnamed"
    value: str


class NamedToken(BaseModel):
    """Token exposed to WordPress presets and the editor UI."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["named"] = "named"
    value: str
    name: str = Field(min_length=1)
    slug: str = Field(min_length=1)


TokenEntry = NamedToken | UnnamedToken
TokenGroup = dict[str, TokenEntry]


# =============================================================================
# Config
# =============================================================================

DEFAULT_TOKENS_PATH = "src/styles/tokens.css"
DEFAULT_OUT_DIR = "dist/wp"


class StbConfig(BaseModel):
    """Validated story-to-block configuration.

    ``tokens`` keeps the category order of the source document, and each
    group keeps its token order; generators emit in that order.
    """

    model_config = ConfigDict(frozen=True)

    prefix: str = Field(min_length=1, description="CSS custom property namespace")
    tokens_path: str = Field(
        default=DEFAULT_TOKENS_PATH,
        description="Output path of the plain tokens.css, relative to the base directory",
    )
    out_dir: str = Field(
        default=DEFAULT_OUT_DIR,
        description="Directory for the WordPress assets, relative to the base directory",
    )
    tokens: dict[TokenCategory, TokenGroup] = Field(default_factory=dict)

    def group(self, category: TokenCategory) -> TokenGroup:
        """Return the tokens of one category, empty when the category is absent."""
        return self.tokens.get(category, {})

    def token_count(self) -> int:
        return sum(len(group) for group in self.tokens.values())


def css_variable_name(prefix: str, category: TokenCategory, key: str) -> str:
    """Build the custom property name for a token, e.g. ``--acme-font-size-sm``."""
    return f"--{prefix}-{CATEGORY_CSS_SEGMENT[category]}-{key}"
