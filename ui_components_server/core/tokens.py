"""Extracts design tokens from the documentation site's tokens page.

Each category follows the same pattern: find the section, collect its item
nodes, then read a name and a value from every item through ordered strategy
chains. A missing section yields an empty mapping, never an error.
"""

import logging

from bs4 import Tag

from ui_components_server.core.errors import FailurePolicy, FetchError
from ui_components_server.core.fetcher import DocsSiteClient
from ui_components_server.core.selectors import resolve_first, select_first, select_union
from ui_components_server.models.config.selectors import (
    SelectorConfig,
    TokenRules,
    TypographyRules,
)
from ui_components_server.models.domain.tokens import (
    TokenCategory,
    TokenSet,
    TypographyToken,
)

logger = logging.getLogger(__name__)


def _extract_named_values(doc: Tag, rules: TokenRules) -> dict[str, str]:
    section = select_first(doc, rules.section)
    if section is None:
        return {}

    tokens = {}
    for item in select_union(section, rules.items):
        name = resolve_first(item, rules.name)
        value = resolve_first(item, rules.value)
        if name and value:
            tokens[name] = value
    return tokens


def extract_color_tokens(doc: Tag, rules: TokenRules | None = None) -> dict[str, str]:
    """Color name -> CSS color string."""
    return _extract_named_values(doc, rules or SelectorConfig().colors)


def extract_spacing_tokens(doc: Tag, rules: TokenRules | None = None) -> dict[str, str]:
    """Spacing name -> size string."""
    return _extract_named_values(doc, rules or SelectorConfig().spacing)


def extract_typography_tokens(
    doc: Tag, rules: TypographyRules | None = None
) -> dict[str, TypographyToken]:
    """Typography name -> font size/weight; items with neither are skipped."""
    rules = rules or TypographyRules()
    section = select_first(doc, rules.section)
    if section is None:
        return {}

    tokens = {}
    for item in select_union(section, rules.items):
        name = resolve_first(item, rules.name)
        if not name:
            continue
        font_size = resolve_first(item, rules.font_size)
        font_weight = resolve_first(item, rules.font_weight)
        if font_size is None and font_weight is None:
            continue
        tokens[name] = TypographyToken(font_size=font_size, font_weight=font_weight)
    return tokens


def parse_tokens(
    doc: Tag, category: TokenCategory, selectors: SelectorConfig | None = None
) -> TokenSet:
    """Run only the extractors covered by ``category``."""
    selectors = selectors or SelectorConfig()
    token_set = TokenSet()

    if category.includes(TokenCategory.COLORS):
        token_set.colors = extract_color_tokens(doc, selectors.colors)
    if category.includes(TokenCategory.SPACING):
        token_set.spacing = extract_spacing_tokens(doc, selectors.spacing)
    if category.includes(TokenCategory.TYPOGRAPHY):
        token_set.typography = extract_typography_tokens(doc, selectors.typography)

    return token_set


def empty_token_set(category: TokenCategory) -> TokenSet:
    return TokenSet(
        colors={} if category.includes(TokenCategory.COLORS) else None,
        spacing={} if category.includes(TokenCategory.SPACING) else None,
        typography={} if category.includes(TokenCategory.TYPOGRAPHY) else None,
    )


def coerce_category(category: str | TokenCategory) -> TokenCategory:
    """Validate a category name.

    Raises:
        ValueError: If the category is not one of colors/spacing/typography/all
    """
    try:
        return TokenCategory(category)
    except ValueError:
        valid = ", ".join(c.value for c in TokenCategory)
        raise ValueError(f"Unknown token category '{category}' (expected {valid})")


class TokenExtractor:
    """Fetches the design tokens page and extracts the requested categories."""

    def __init__(
        self,
        client: DocsSiteClient,
        selectors: SelectorConfig | None = None,
        tokens_path: str = "/design-tokens",
    ):
        self.client = client
        self.selectors = selectors or SelectorConfig()
        self.tokens_path = tokens_path

    async def extract_tokens(
        self,
        category: str | TokenCategory,
        policy: FailurePolicy = FailurePolicy.SURFACE,
    ) -> TokenSet:
        """Extract tokens for ``category``.

        Args:
            category: colors, spacing, typography, or all
            policy: SURFACE (default) re-raises fetch failures since there is
                no partial result worth returning; SWALLOW yields empty
                mappings for the requested categories

        Raises:
            ValueError: For an unknown category
            FetchError: On fetch failure under ``FailurePolicy.SURFACE``
        """
        category = coerce_category(category)

        try:
            doc = await self.client.fetch_document(self.tokens_path)
        except FetchError as e:
            if policy is FailurePolicy.SURFACE:
                raise
            logger.warning(f"Design tokens page unavailable: {e.message}")
            return empty_token_set(category)

        token_set = parse_tokens(doc, category, self.selectors)
        logger.debug(f"Extracted design tokens for category '{category.value}'")
        return token_set
