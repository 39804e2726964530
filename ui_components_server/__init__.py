"""
UI Components Server: design-system documentation as MCP tools.

Builds a catalog of UI components and design tokens from a Storybook
documentation site and exposes it to MCP clients.
"""

__version__ = "0.1.0"
