"""Tool response models for the MCP surface."""

from pydantic import Field

from ui_components_server.models.domain.base import CamelModel
from ui_components_server.models.domain.components import Component, Example


class ComponentNotFound(CamelModel):
    """Result returned when a named component is absent from the catalog."""

    found: bool = False
    component_name: str
    message: str

    @classmethod
    def for_name(cls, component_name: str) -> "ComponentNotFound":
        return cls(
            component_name=component_name,
            message=f"Component '{component_name}' not found in the UI library.",
        )


class ComponentSearchResponse(CamelModel):
    """Response for component search."""

    query: str
    total_results: int
    components: list[Component] = Field(default_factory=list)


class ComponentExamplesResponse(CamelModel):
    """Usage examples of a single component."""

    component: str
    examples: list[Example] = Field(default_factory=list)


class CatalogRefreshResponse(CamelModel):
    """Response for an explicit cache invalidation."""

    cleared: int
    message: str


__all__ = [
    "ComponentNotFound",
    "ComponentSearchResponse",
    "ComponentExamplesResponse",
    "CatalogRefreshResponse",
]
