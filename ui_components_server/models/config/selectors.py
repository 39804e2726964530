"""Selector rule configuration for scraping the documentation site.

Every field is an ordered chain. Section and table chains are CSS selectors
tried in order until one matches. Item chains are CSS selectors whose matches
are unioned in document order. Name/value chains are extraction strategies
written as ``kind:argument``:

- ``text:<css>``   stripped text of the first descendant matching ``<css>``
- ``style:<prop>`` inline ``style`` property of the node itself
- ``attr:<name>``  attribute of the node itself

Markup drift on the documentation site is handled by editing these chains in a
YAML file (``UI_LIB_SELECTORS_FILE``) rather than the code.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from ui_components_server.core.selectors import parse_strategy


def _validate_strategies(v: list[str]) -> list[str]:
    for rule in v:
        parse_strategy(rule)
    return v


class DetailRules(BaseModel):
    """Rules for component documentation pages."""

    description: list[str] = Field(default_factory=lambda: ["text:.sbdocs-content p"])
    code_blocks: list[str] = Field(default_factory=lambda: ["pre code"])
    props_table: list[str] = Field(
        default_factory=lambda: ["table.props", ".api-table", "[data-props]"]
    )
    props_rows: list[str] = Field(default_factory=lambda: ["tbody tr"])
    api_reference: list[str] = Field(
        default_factory=lambda: [
            "text:.api-reference",
            "text:.component-api",
            "text:[data-api]",
        ]
    )

    @field_validator("description", "api_reference")
    @classmethod
    def validate_strategies(cls, v: list[str]) -> list[str]:
        return _validate_strategies(v)


class TokenRules(BaseModel):
    """Rules for a name -> value token section."""

    section: list[str]
    items: list[str]
    name: list[str]
    value: list[str]

    @field_validator("name", "value")
    @classmethod
    def validate_strategies(cls, v: list[str]) -> list[str]:
        return _validate_strategies(v)


class TypographyRules(BaseModel):
    """Rules for the typography section, whose values are font settings."""

    section: list[str] = Field(
        default_factory=lambda: [".typography", "[data-typography]", "#typography"]
    )
    items: list[str] = Field(
        default_factory=lambda: [".typography-item", "[data-typography]"]
    )
    name: list[str] = Field(
        default_factory=lambda: ["text:.typography-name", "text:.name"]
    )
    font_size: list[str] = Field(
        default_factory=lambda: ["style:font-size", "text:.font-size"]
    )
    font_weight: list[str] = Field(
        default_factory=lambda: ["style:font-weight", "text:.font-weight"]
    )

    @field_validator("name", "font_size", "font_weight")
    @classmethod
    def validate_strategies(cls, v: list[str]) -> list[str]:
        return _validate_strategies(v)


def _default_color_rules() -> TokenRules:
    return TokenRules(
        section=[".colors", "[data-colors]", "#colors"],
        items=[".color-item", ".swatch", "[data-color]"],
        name=["text:.color-name", "text:.name"],
        value=[
            "text:.color-value",
            "text:.value",
            "style:background-color",
            "style:background",
            "attr:data-color",
        ],
    )


def _default_spacing_rules() -> TokenRules:
    return TokenRules(
        section=[".spacing", "[data-spacing]", "#spacing"],
        items=[".spacing-item", "[data-spacing-value]"],
        name=["text:.spacing-name", "text:.name"],
        value=["text:.spacing-value", "text:.value"],
    )


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class SelectorConfig(BaseModel):
    """All selector chains used by the detail and token extractors."""

    details: DetailRules = Field(default_factory=DetailRules)
    colors: TokenRules = Field(default_factory=_default_color_rules)
    spacing: TokenRules = Field(default_factory=_default_spacing_rules)
    typography: TypographyRules = Field(default_factory=TypographyRules)

    @classmethod
    def load_from_file(cls, config_path: Path | None) -> "SelectorConfig":
        """Load overrides from YAML and merge them over the defaults.

        A missing path yields the defaults. Unreadable YAML or invalid rules
        raise ``ValueError`` so a broken override never silently disables
        scraping.
        """
        if config_path is None or not config_path.exists():
            return cls()

        try:
            with open(config_path, "r") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid selector file {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Selector file {config_path} must contain a mapping")

        try:
            return cls.model_validate(_deep_merge(cls().model_dump(), data))
        except ValidationError as e:
            raise ValueError(f"Invalid selector rules in {config_path}: {e}") from e


__all__ = ["DetailRules", "TokenRules", "TypographyRules", "SelectorConfig"]
