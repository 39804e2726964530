"""Response models returned by the MCP tools."""

from ui_components_server.models.api.responses import *

__all__ = [
    "ComponentNotFound",
    "ComponentSearchResponse",
    "ComponentExamplesResponse",
    "CatalogRefreshResponse",
]
