"""Core domain models for the component catalog and design tokens."""

from ui_components_server.models.domain.base import *
from ui_components_server.models.domain.components import *
from ui_components_server.models.domain.tokens import *

__all__ = [
    "CamelModel",
    "StoryEntry",
    "Story",
    "Example",
    "PropDefinition",
    "ComponentDetails",
    "StorybookLinks",
    "Component",
    "TokenCategory",
    "TypographyToken",
    "TokenSet",
]
