"""Design token domain models."""

from enum import Enum

from ui_components_server.models.domain.base import CamelModel


class TokenCategory(str, Enum):
    """Token categories that can be requested."""

    COLORS = "colors"
    SPACING = "spacing"
    TYPOGRAPHY = "typography"
    ALL = "all"

    def includes(self, category: "TokenCategory") -> bool:
        """Whether a request for this category covers ``category``."""
        return self is TokenCategory.ALL or self is category


class TypographyToken(CamelModel):
    """Font settings published for a typography token."""

    font_size: str | None = None
    font_weight: str | None = None


class TokenSet(CamelModel):
    """Tokens grouped by category; unrequested categories stay ``None``."""

    colors: dict[str, str] | None = None
    spacing: dict[str, str] | None = None
    typography: dict[str, TypographyToken] | None = None


__all__ = ["TokenCategory", "TypographyToken", "TokenSet"]
