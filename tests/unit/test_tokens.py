"""
Unit tests for design token extraction.
"""

import pytest
from bs4 import BeautifulSoup

from ui_components_server.core.errors import FailurePolicy, RetrievalError
from ui_components_server.core.tokens import (
    TokenExtractor,
    coerce_category,
    extract_color_tokens,
    extract_spacing_tokens,
    extract_typography_tokens,
    parse_tokens,
)
from ui_components_server.models.config.selectors import SelectorConfig, TokenRules
from ui_components_server.models.domain.tokens import TokenCategory


@pytest.fixture
def empty_doc():
    return BeautifulSoup("<html><body><p>No tokens here</p></body></html>", "html.parser")


class TestColorTokens:
    """Test color extraction and its value fallbacks."""

    def test_value_fallback_chain(self, tokens_doc):
        assert extract_color_tokens(tokens_doc) == {
            "primary": "#0055ff",
            "danger": "rgb(255, 0, 0)",
            "success": "#00aa00",
        }

    def test_missing_section_yields_empty(self, empty_doc):
        assert extract_color_tokens(empty_doc) == {}

    def test_background_shorthand(self):
        doc = BeautifulSoup(
            '<div class="colors"><div class="swatch" style="background: #ff0000">'
            '<span class="name">red</span></div></div>',
            "html.parser",
        )
        assert extract_color_tokens(doc) == {"red": "#ff0000"}

    def test_section_by_data_attribute(self):
        doc = BeautifulSoup(
            '<div data-colors><div class="color-item"><b class="name">ink</b>'
            '<i class="value">#111</i></div></div>',
            "html.parser",
        )
        assert extract_color_tokens(doc) == {"ink": "#111"}

    def test_custom_rules(self):
        doc = BeautifulSoup(
            '<ul class="palette"><li data-hex="#f00" data-label="red"></li></ul>',
            "html.parser",
        )
        rules = TokenRules(
            section=[".palette"],
            items=["li"],
            name=["attr:data-label"],
            value=["attr:data-hex"],
        )
        assert extract_color_tokens(doc, rules) == {"red": "#f00"}


class TestSpacingTokens:
    def test_items_and_skips(self, tokens_doc):
        assert extract_spacing_tokens(tokens_doc) == {"sm": "4px", "md": "8px"}

    def test_missing_section_yields_empty(self, empty_doc):
        assert extract_spacing_tokens(empty_doc) == {}


class TestTypographyTokens:
    def test_style_then_nested_nodes(self, tokens_doc):
        typography = extract_typography_tokens(tokens_doc)

        assert set(typography) == {"heading", "body"}
        assert typography["heading"].font_size == "32px"
        assert typography["heading"].font_weight == "700"
        assert typography["body"].font_size == "16px"
        assert typography["body"].font_weight is None

    def test_missing_section_yields_empty(self, empty_doc):
        assert extract_typography_tokens(empty_doc) == {}


class TestParseTokens:
    """Test category selection."""

    def test_all_categories(self, tokens_doc):
        payload = parse_tokens(tokens_doc, TokenCategory.ALL).to_payload()

        assert set(payload) == {"colors", "spacing", "typography"}
        assert payload["typography"]["heading"] == {"fontSize": "32px", "fontWeight": "700"}
        assert payload["typography"]["body"] == {"fontSize": "16px"}

    @pytest.mark.parametrize("category", ["colors", "spacing", "typography"])
    def test_single_category_only(self, tokens_doc, category):
        payload = parse_tokens(tokens_doc, TokenCategory(category)).to_payload()
        assert list(payload) == [category]

    def test_uses_configured_selectors(self, tokens_doc):
        selectors = SelectorConfig.model_validate(
            {"colors": {**SelectorConfig().colors.model_dump(), "section": [".nope"]}}
        )
        token_set = parse_tokens(tokens_doc, TokenCategory.COLORS, selectors)
        assert token_set.colors == {}


class TestCoerceCategory:
    def test_valid(self):
        assert coerce_category("spacing") is TokenCategory.SPACING
        assert coerce_category(TokenCategory.ALL) is TokenCategory.ALL

    def test_invalid(self):
        with pytest.raises(ValueError, match="Unknown token category 'shadows'"):
            coerce_category("shadows")


class TestTokenExtractor:
    """Test fetching plus failure policy."""

    @pytest.mark.asyncio
    async def test_extract_tokens(self, site, make_client):
        extractor = TokenExtractor(make_client(site))

        token_set = await extractor.extract_tokens("colors")

        assert token_set.colors["primary"] == "#0055ff"
        assert token_set.spacing is None
        assert site.hits("/design-tokens") == 1

    @pytest.mark.asyncio
    async def test_fetch_failure_surfaces_by_default(self, make_site, make_client):
        extractor = TokenExtractor(make_client(make_site({})))

        with pytest.raises(RetrievalError):
            await extractor.extract_tokens("all")

    @pytest.mark.asyncio
    async def test_fetch_failure_swallowed_when_requested(self, make_site, make_client):
        extractor = TokenExtractor(make_client(make_site({})))

        token_set = await extractor.extract_tokens("spacing", policy=FailurePolicy.SWALLOW)

        assert token_set.to_payload() == {"spacing": {}}

    @pytest.mark.asyncio
    async def test_invalid_category_does_not_fetch(self, site, make_client):
        extractor = TokenExtractor(make_client(site))

        with pytest.raises(ValueError):
            await extractor.extract_tokens("shadows")

        assert site.requests == []
