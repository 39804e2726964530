"""Extracts descriptions, code examples, and props from component docs pages."""

import logging

from bs4 import BeautifulSoup, Tag

from ui_components_server.core.errors import FailurePolicy, FetchError
from ui_components_server.core.fetcher import DocsSiteClient
from ui_components_server.core.selectors import (
    node_text,
    resolve_first,
    select_first,
    select_union,
)
from ui_components_server.models.config.selectors import DetailRules
from ui_components_server.models.domain.components import (
    ComponentDetails,
    Example,
    PropDefinition,
)

logger = logging.getLogger(__name__)

# Checked in order against the joined class list; first hit wins
LANGUAGE_RULES = (
    ("vue", ("vue",)),
    ("javascript", ("javascript", "js")),
    ("typescript", ("typescript", "ts")),
    ("html", ("html",)),
)


def detect_code_language(element: Tag | str | None) -> str:
    """Guess a code block's language from its class attribute.

    ``element`` may be a tag or a raw class string. Note that ``js`` is tested
    before ``ts``, so ``language-json`` reads as JavaScript.
    """
    if isinstance(element, Tag):
        classes = element.get("class") or []
        class_name = " ".join(classes) if isinstance(classes, list) else classes
    else:
        class_name = element or ""

    for language, needles in LANGUAGE_RULES:
        if any(needle in class_name for needle in needles):
            return language
    return "text"


def extract_examples(doc: Tag, rules: DetailRules) -> list[Example]:
    examples = []
    for block in select_union(doc, rules.code_blocks):
        code = block.get_text().strip()
        examples.append(
            Example(
                title=f"Example {len(examples) + 1}",
                code=code,
                language=detect_code_language(block),
            )
        )
    return examples


def extract_props(doc: Tag, rules: DetailRules) -> list[PropDefinition]:
    table = select_first(doc, rules.props_table)
    if table is None:
        return []

    props = []
    for row in select_union(table, rules.props_rows):
        cells = row.find_all("td")
        if len(cells) < 3:
            continue
        props.append(
            PropDefinition(
                name=node_text(cells[0]),
                type=node_text(cells[1]),
                description=node_text(cells[2]),
                required=len(cells) > 3 and node_text(cells[3]) == "true",
            )
        )
    return props


def parse_details(doc: BeautifulSoup, rules: DetailRules) -> ComponentDetails:
    """Pull everything we know how to read out of a parsed docs page."""
    return ComponentDetails(
        description=resolve_first(doc, rules.description),
        examples=extract_examples(doc, rules),
        props=extract_props(doc, rules),
        api_reference=resolve_first(doc, rules.api_reference),
    )


class DetailExtractor:
    """Fetches a component's documentation page and parses it."""

    def __init__(self, client: DocsSiteClient, rules: DetailRules | None = None):
        self.client = client
        self.rules = rules or DetailRules()

    async def extract_details(
        self, docs_url: str, policy: FailurePolicy = FailurePolicy.SWALLOW
    ) -> ComponentDetails:
        """Extract details from the page at ``docs_url``.

        Args:
            docs_url: Absolute URL or path relative to the site
            policy: SWALLOW returns empty details when the page cannot be
                fetched; SURFACE re-raises

        Raises:
            FetchError: Only under ``FailurePolicy.SURFACE``
        """
        try:
            doc = await self.client.fetch_document(docs_url)
        except FetchError as e:
            if policy is FailurePolicy.SURFACE:
                raise
            logger.warning(f"Could not fetch component docs {docs_url}: {e.message}")
            return ComponentDetails()

        return parse_details(doc, self.rules)
