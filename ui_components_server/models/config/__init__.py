"""Configuration models."""

from ui_components_server.models.config.selectors import *
from ui_components_server.models.config.server import *

__all__ = [
    "DetailRules",
    "TokenRules",
    "TypographyRules",
    "SelectorConfig",
    "ServerConfig",
]
