"""Design token commands for the UI components CLI."""

import click
from rich.console import Console
from rich.table import Table

from ..help_formatter import rich_help_option
from ..utils import build_tools, echo_error, echo_info, print_json, run_async
from ui_components_server.core.errors import FetchError

console = Console()


@click.group()
@rich_help_option("-h", "--help")
def tokens():
    """Inspect design tokens published by the documentation site.

    Examples:
        uic tokens show                          # Every category
        uic tokens show --category colors        # Colors only
        uic tokens show --format json            # Raw JSON
    """
    pass


@tokens.command()
@click.option(
    "--category",
    default="all",
    type=click.Choice(["colors", "spacing", "typography", "all"]),
    help="Token category",
)
@click.option(
    "--format",
    "output_format",
    default="table",
    type=click.Choice(["table", "json"]),
    help="Output format",
)
@rich_help_option("-h", "--help")
@click.pass_context
def show(ctx, category, output_format):
    """Show design tokens for a category."""
    tools = build_tools(ctx.obj["config"])

    try:
        token_set = run_async(tools.get_design_tokens(category))
    except FetchError as e:
        echo_error(f"Failed to retrieve design tokens: {e.message}")
        ctx.exit(1)

    if output_format == "json":
        print_json(token_set.to_payload())
        return

    for title, values in (("Colors", token_set.colors), ("Spacing", token_set.spacing)):
        if values is None:
            continue
        if not values:
            echo_info(f"No {title.lower()} tokens found")
            continue
        table = Table(title=title)
        table.add_column("Name", style="cyan")
        table.add_column("Value")
        for name, value in values.items():
            table.add_row(name, value)
        console.print(table)

    if token_set.typography is not None:
        if not token_set.typography:
            echo_info("No typography tokens found")
            return
        table = Table(title="Typography")
        table.add_column("Name", style="cyan")
        table.add_column("Font size")
        table.add_column("Font weight")
        for name, token in token_set.typography.items():
            table.add_row(name, token.font_size or "-", token.font_weight or "-")
        console.print(table)
