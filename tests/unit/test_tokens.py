"""Tests for the token IR types and naming tables."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from story_to_block.core.tokens import (
    CATEGORY_CSS_SEGMENT,
    WP_PRESET_MAPPING,
    NamedToken,
    StbConfig,
    TokenCategory,
    UnnamedToken,
    css_variable_name,
)


class TestCategories:
    def test_ten_categories_in_config_order(self):
        assert [c.value for c in TokenCategory] == [
            "color",
            "spacing",
            "fontFamily",
            "fontSize",
            "fontWeight",
            "lineHeight",
            "radius",
            "shadow",
            "transition",
            "zIndex",
        ]

    def test_every_category_has_a_css_segment(self):
        assert set(CATEGORY_CSS_SEGMENT) == set(TokenCategory)
        assert CATEGORY_CSS_SEGMENT[TokenCategory.FONT_FAMILY] == "font-family"
        assert CATEGORY_CSS_SEGMENT[TokenCategory.Z_INDEX] == "z"

    def test_exactly_four_preset_categories(self):
        assert dict(WP_PRESET_MAPPING) == {
            TokenCategory.COLOR: "--wp--preset--color",
            TokenCategory.SPACING: "--wp--preset--spacing",
            TokenCategory.FONT_FAMILY: "--wp--preset--font-family",
            TokenCategory.FONT_SIZE: "--wp--preset--font-size",
        }

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            CATEGORY_CSS_SEGMENT[TokenCategory.COLOR] = "colour"  # type: ignore[index]
        with pytest.raises(TypeError):
            WP_PRESET_MAPPING[TokenCategory.RADIUS] = "--wp--preset--radius"  # type: ignore[index]

    def test_css_variable_name(self):
        assert css_variable_name("acme", TokenCategory.FONT_SIZE, "sm") == "--acme-font-size-sm"
        assert css_variable_name("acme", TokenCategory.Z_INDEX, "modal") == "--acme-z-modal"


class TestTokenVariants:
    def test_named_requires_name_and_slug(self):
        with pytest.raises(ValidationError):
            NamedToken(value="#000", name="Black")  # type: ignore[call-arg]

    def test_named_rejects_empty_slug(self):
        with pytest.raises(ValidationError):
            NamedToken(value="#000", name="Black", slug="")

    def test_unnamed_has_no_name(self):
        token = UnnamedToken(value="0")
        assert token.kind == "unnamed"
        assert not hasattr(token, "slug")

    def test_tokens_are_frozen(self):
        token = NamedToken(value="#000", name="Black", slug="black")
        with pytest.raises(ValidationError):
            token.slug = "white"  # type: ignore[misc]


class TestStbConfig:
    def test_defaults(self):
        config = StbConfig(prefix="acme")
        assert config.tokens_path == "src/styles/tokens.css"
        assert config.out_dir == "dist/wp"
        assert config.tokens == {}

    def test_rejects_empty_prefix(self):
        with pytest.raises(ValidationError):
            StbConfig(prefix="")

    def test_group_of_absent_category_is_empty(self):
        config = StbConfig(
            prefix="acme", tokens={TokenCategory.COLOR: {"a": UnnamedToken(value="#000")}}
        )
        assert config.group(TokenCategory.SHADOW) == {}
        assert config.token_count() == 1
