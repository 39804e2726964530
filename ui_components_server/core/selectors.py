"""Ordered extraction strategies for tolerant HTML scraping."""

from dataclasses import dataclass

from bs4 import Tag

STRATEGY_KINDS = ("text", "style", "attr")


def parse_inline_style(style: str | list | None) -> dict[str, str]:
    """Parse an inline ``style`` attribute into lowercase property names."""
    if not style:
        return {}
    if isinstance(style, list):
        style = " ".join(style)

    properties = {}
    for declaration in style.split(";"):
        prop, sep, value = declaration.partition(":")
        if not sep:
            continue
        prop = prop.strip().lower()
        value = value.strip()
        if prop and value:
            properties[prop] = value
    return properties


def node_text(node: Tag | None) -> str | None:
    """Stripped text content of a node, or ``None`` when there is none."""
    if node is None:
        return None
    text = node.get_text().strip()
    return text or None


@dataclass(frozen=True)
class ExtractionStrategy:
    """One named way of reading a value from a node."""

    kind: str
    argument: str

    def apply(self, node: Tag) -> str | None:
        if self.kind == "text":
            return node_text(node.select_one(self.argument))

        if self.kind == "style":
            return parse_inline_style(node.get("style")).get(self.argument.lower())

        value = node.get(self.argument)
        if isinstance(value, list):
            value = " ".join(value)
        if value is None:
            return None
        return value.strip() or None

    def __str__(self) -> str:
        return f"{self.kind}:{self.argument}"


def parse_strategy(rule: str) -> ExtractionStrategy:
    """Parse ``kind:argument`` into an ``ExtractionStrategy``.

    Raises:
        ValueError: If the kind is unknown or the argument is empty
    """
    kind, sep, argument = rule.partition(":")
    kind = kind.strip().lower()
    argument = argument.strip()

    if not sep or kind not in STRATEGY_KINDS:
        raise ValueError(
            f"Invalid extraction strategy '{rule}': expected one of "
            f"{', '.join(k + ':<arg>' for k in STRATEGY_KINDS)}"
        )
    if not argument:
        raise ValueError(f"Extraction strategy '{rule}' is missing its argument")

    return ExtractionStrategy(kind=kind, argument=argument)


def resolve_first(node: Tag, rules: list[str]) -> str | None:
    """Try each strategy in order and return the first non-empty value."""
    for rule in rules:
        value = parse_strategy(rule).apply(node)
        if value:
            return value
    return None


def select_first(node: Tag, selectors: list[str]) -> Tag | None:
    """Return the match of the first selector that matches anything."""
    for selector in selectors:
        match = node.select_one(selector)
        if match is not None:
            return match
    return None


def select_union(node: Tag, selectors: list[str]) -> list[Tag]:
    """All descendants matching any selector, in document order, without repeats."""
    if not selectors:
        return []
    return node.select(", ".join(selectors))


__all__ = [
    "STRATEGY_KINDS",
    "ExtractionStrategy",
    "parse_inline_style",
    "node_text",
    "parse_strategy",
    "resolve_first",
    "select_first",
    "select_union",
]
