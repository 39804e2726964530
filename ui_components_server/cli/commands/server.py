"""MCP server commands for the UI components CLI."""

import asyncio

import click
from rich.console import Console
from rich.table import Table

from ..help_formatter import rich_help_option

console = Console()

# stdout carries the MCP protocol once the server runs
err_console = Console(stderr=True)


@click.group()
@rich_help_option("-h", "--help")
def server():
    """Run the MCP server and inspect its configuration.

    Examples:
        uic server run                                     # Serve over stdio
        uic --base-url https://ui.example.com server run   # Explicit site
        uic server config                                  # Effective settings
    """
    pass


@server.command()
@rich_help_option("-h", "--help")
@click.pass_context
def run(ctx):
    """Start the MCP server on stdio."""
    from ui_components_server.mcp_server.main import main

    config = ctx.obj["config"]
    if not config.base_url:
        err_console.print(
            "[yellow]⚠ No base URL configured; component tools will return empty results[/yellow]"
        )

    asyncio.run(main(config))


@server.command(name="config")
@rich_help_option("-h", "--help")
@click.pass_context
def show_config(ctx):
    """Show the effective server settings."""
    config = ctx.obj["config"]
    settings = config.settings

    table = Table(title=f"{config.mcp_server_name} v{config.mcp_server_version}")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("base_url", settings.base_url or "(not set)")
    table.add_row("index_path", settings.index_path)
    table.add_row("tokens_path", settings.tokens_path)
    table.add_row("request_timeout", f"{settings.request_timeout}s")
    table.add_row("cache_ttl", f"{settings.cache_ttl}s")
    table.add_row("search_fetch_details", str(settings.search_fetch_details))
    table.add_row("selectors_file", str(settings.selectors_file or "(defaults)"))
    console.print(table)
