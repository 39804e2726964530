"""Main MCP server for the UI component library."""

import asyncio
import json
import logging
from typing import Any

import mcp.server.stdio
import mcp.types as types
from mcp.server import NotificationOptions, Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.models import InitializationOptions
from pydantic import AnyUrl

from ui_components_server.core.errors import FetchError
from ui_components_server.core.fetcher import DocsSiteClient
from ui_components_server.core.logging import setup_logging
from ui_components_server.mcp_server.config import Config
from ui_components_server.mcp_server.tools import UIComponentsTools
from ui_components_server.models.domain.base import CamelModel

logger = logging.getLogger(__name__)

COMPONENTS_URI = "ui-lib://components"
DESIGN_TOKENS_URI = "ui-lib://design-tokens"

# Initialize server
server = Server("ui-components")

# Global variables for configuration and tools
config: Config
client: DocsSiteClient
tools: UIComponentsTools


def _component_name_schema(description: str) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "componentName": {
                "type": "string",
                "description": description,
            }
        },
        "required": ["componentName"],
    }


@server.list_tools()
async def handle_list_tools() -> list[types.Tool]:
    """List available MCP tools."""
    return [
        types.Tool(
            name="get_component",
            description="Get information about a specific UI component: category, stories, description, props, and code examples from its documentation page.",
            inputSchema=_component_name_schema("The name of the component to retrieve"),
        ),
        types.Tool(
            name="search_components",
            description="Search for components by name or description. An empty query lists every component.",
            inputSchema={
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": "Search query for components (case-insensitive substring)",
                    }
                },
                "required": ["query"],
            },
        ),
        types.Tool(
            name="get_component_examples",
            description="Get usage examples for a component, taken from the code blocks on its documentation page.",
            inputSchema=_component_name_schema("The name of the component"),
        ),
        types.Tool(
            name="get_design_tokens",
            description="Get design tokens (colors, spacing, typography) from the UI library",
            inputSchema={
                "type": "object",
                "properties": {
                    "category": {
                        "type": "string",
                        "description": "Token category to retrieve",
                        "enum": ["colors", "spacing", "typography", "all"],
                    }
                },
                "required": ["category"],
            },
        ),
        types.Tool(
            name="refresh_catalog",
            description="Discard cached component data so the next request reloads it from the documentation site.",
            inputSchema={"type": "object", "properties": {}, "required": []},
        ),
    ]


@server.list_resources()
async def handle_list_resources() -> list[types.Resource]:
    """List readable resources."""
    return [
        types.Resource(
            uri=COMPONENTS_URI,
            name="Component Library",
            description="Complete list of available UI components",
            mimeType="application/json",
        ),
        types.Resource(
            uri=DESIGN_TOKENS_URI,
            name="Design Tokens",
            description="Design system tokens (colors, spacing, typography)",
            mimeType="application/json",
        ),
    ]


@server.read_resource()
async def handle_read_resource(uri: AnyUrl) -> list[ReadResourceContents]:
    """Read a resource as JSON."""
    uri_str = str(uri).rstrip("/")

    if uri_str == COMPONENTS_URI:
        components = await tools.list_components()
        payload = [component.to_payload() for component in components]
    elif uri_str == DESIGN_TOKENS_URI:
        payload = (await tools.get_all_design_tokens()).to_payload()
    else:
        raise ValueError(f"Unknown resource: {uri}")

    return [
        ReadResourceContents(
            content=json.dumps(payload, indent=2, ensure_ascii=False),
            mime_type="application/json",
        )
    ]


def _require(arguments: dict[str, Any], key: str) -> str:
    value = arguments.get(key)
    if not isinstance(value, str):
        raise ValueError(f"Missing required string argument '{key}'")
    return value


def _to_json(result: Any) -> Any:
    if isinstance(result, CamelModel):
        return result.to_payload()
    if isinstance(result, list):
        return [_to_json(item) for item in result]
    return result


@server.call_tool()
async def handle_call_tool(
    name: str, arguments: dict[str, Any] | None
) -> list[types.TextContent]:
    arguments = arguments or {}
    try:
        # Route tool calls to appropriate methods
        if name == "get_component":
            result = await tools.get_component(_require(arguments, "componentName"))
        elif name == "search_components":
            result = await tools.search_components(_require(arguments, "query"))
        elif name == "get_component_examples":
            result = await tools.get_component_examples(
                _require(arguments, "componentName")
            )
        elif name == "get_design_tokens":
            result = await tools.get_design_tokens(_require(arguments, "category"))
        elif name == "refresh_catalog":
            result = await tools.refresh_catalog()
        else:
            return [
                types.TextContent(type="text", text=f"Error: Unknown tool '{name}'")
            ]

        response_text = json.dumps(_to_json(result), indent=2, ensure_ascii=False)

        return [types.TextContent(type="text", text=response_text)]

    except FetchError as e:
        error_message = f"Error: {e.message}"
        if e.status_code and f"HTTP {e.status_code}" not in e.message:
            error_message += f" (HTTP {e.status_code})"

        return [types.TextContent(type="text", text=error_message)]

    except (ValueError, TypeError) as e:
        return [types.TextContent(type="text", text=f"Error: {e}")]

    except Exception as e:
        logger.error(f"Tool execution failed: {e}", exc_info=True)
        return [
            types.TextContent(
                type="text", text=f"Error: Tool execution failed - {str(e)}"
            )
        ]


def init_tools(server_config: Config | None = None) -> UIComponentsTools:
    """Create the module-level configuration, client, and tools."""
    global config, client, tools

    config = server_config or Config()
    client = DocsSiteClient(config.settings)
    tools = UIComponentsTools(client, config)
    return tools


async def main(server_config: Config | None = None):
    init_tools(server_config)
    setup_logging(config.settings.log_level)

    if config.base_url:
        logger.info(f"Starting MCP server for UI library at {config.base_url}")
    else:
        logger.warning(
            "UI_LIB_BASE_URL is not set - component tools will return empty results "
            "and design token requests will fail"
        )

    # Run the MCP server
    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            InitializationOptions(
                server_name=config.mcp_server_name,
                server_version=config.mcp_server_version,
                capabilities=server.get_capabilities(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
            ),
        )


def cli_main():
    """Synchronous entry point for script generation."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
