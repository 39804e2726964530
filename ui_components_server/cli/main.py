"""Main CLI entry point for the UI components server."""

from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console

from ui_components_server.cli.help_formatter import rich_help_option
from ui_components_server.cli.utils import echo_error
from ui_components_server.core.logging import setup_logging
from ui_components_server.mcp_server.config import Config

console = Console()


@click.group(invoke_without_command=True)
@click.option("-v", "--version", is_flag=True, help="Show version information")
@click.option(
    "--base-url",
    default=None,
    help="Documentation site base URL (overrides UI_LIB_BASE_URL)",
)
@click.option(
    "--selectors",
    "selectors_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="YAML file with selector rule overrides",
)
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@rich_help_option("-h", "--help")
@click.pass_context
def cli(ctx, version, base_url, selectors_file, verbose):
    """UI Components - browse a design-system documentation site.

    Builds a component catalog from the site's Storybook index and scrapes
    documentation pages for descriptions, code examples, and design tokens.

    Examples:
        uic components list                        # List all components
        uic components show Button                 # Component details
        uic components search input                # Search by name/description
        uic tokens show --category colors          # Color tokens
        uic server run                             # Start the MCP server on stdio
    """
    if version:
        from ui_components_server import __version__

        console.print(f"UI Components Server v{__version__}")
        ctx.exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        ctx.exit()

    overrides = {}
    if base_url is not None:
        overrides["base_url"] = base_url
    if selectors_file is not None:
        overrides["selectors_file"] = selectors_file
    if verbose:
        overrides["log_level"] = "DEBUG"

    try:
        config = Config(**overrides)
    except (ValidationError, ValueError) as e:
        echo_error(f"Invalid configuration: {e}")
        ctx.exit(1)

    setup_logging(config.settings.log_level if verbose else "WARNING")

    ctx.ensure_object(dict)
    ctx.obj["config"] = config


def register_commands():
    """Register all command groups."""
    from ui_components_server.cli.commands.components import components
    from ui_components_server.cli.commands.server import server
    from ui_components_server.cli.commands.tokens import tokens

    cli.add_command(components)
    cli.add_command(tokens)
    cli.add_command(server)


def main():
    cli()


register_commands()


if __name__ == "__main__":
    main()
