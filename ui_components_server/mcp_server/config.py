"""Configuration for the MCP server."""

from ui_components_server.models.config.selectors import SelectorConfig
from ui_components_server.models.config.server import ServerConfig

# Default configuration
DEFAULT_CONFIG = {
    "mcp_server_name": "ui-components",
    "mcp_server_version": "0.1.0",
}


class Config:
    """MCP server configuration.

    Combines environment-driven ``ServerConfig`` settings with the selector
    rules loaded from ``selectors_file``.
    """

    def __init__(
        self,
        settings: ServerConfig | None = None,
        selectors: SelectorConfig | None = None,
        **overrides: str | int | float | bool,
    ):
        """Initialize configuration with optional setting overrides."""
        self.mcp_server_name = overrides.pop(
            "mcp_server_name", DEFAULT_CONFIG["mcp_server_name"]
        )
        self.mcp_server_version = overrides.pop(
            "mcp_server_version", DEFAULT_CONFIG["mcp_server_version"]
        )
        self.settings = settings or ServerConfig(**overrides)
        self.selectors = selectors or SelectorConfig.load_from_file(
            self.settings.selectors_file
        )

    @property
    def base_url(self) -> str | None:
        return self.settings.base_url

    def __repr__(self) -> str:
        return f"Config(base_url='{self.base_url}')"
