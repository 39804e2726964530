"""Component catalog commands for the UI components CLI."""

import click
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from ..help_formatter import rich_help_option
from ..utils import build_tools, echo_error, echo_info, print_json, run_async
from ui_components_server.models.api.responses import ComponentNotFound
from ui_components_server.models.domain.components import Component, Example

console = Console()


def _components_table(title: str, items: list[Component]) -> Table:
    table = Table(title=title)
    table.add_column("Name", style="cyan")
    table.add_column("Category")
    table.add_column("Stories", justify="right")
    table.add_column("Docs URL", style="dim")

    for component in items:
        table.add_row(
            component.name,
            component.category,
            str(len(component.stories)),
            component.docs_url,
        )
    return table


def _print_examples(examples: list[Example]) -> None:
    for example in examples:
        console.print(
            Panel(
                Syntax(example.code, example.language, theme="monokai", word_wrap=True),
                title=f"{example.title} [dim]({example.language})[/dim]",
                border_style="green",
            )
        )


@click.group()
@rich_help_option("-h", "--help")
def components():
    """Browse the component catalog.

    The catalog is built from the documentation site's story index; every
    component groups the stories filed under the same title.

    Examples:
        uic components list                     # All components
        uic components list --format json       # Catalog as JSON
        uic components show Button              # Details for one component
        uic components examples Button          # Code examples only
        uic components search form              # Search names and descriptions
    """
    pass


@components.command(name="list")
@click.option(
    "--format",
    "output_format",
    default="table",
    type=click.Choice(["table", "json"]),
    help="Output format",
)
@rich_help_option("-h", "--help")
@click.pass_context
def list_components(ctx, output_format):
    """List every component in the catalog."""
    tools = build_tools(ctx.obj["config"])
    catalog = run_async(tools.list_components())

    if output_format == "json":
        print_json([component.to_payload() for component in catalog])
        return

    if not catalog:
        echo_info("No components found. Check UI_LIB_BASE_URL or --base-url.")
        return

    console.print(_components_table(f"Components ({len(catalog)})", catalog))


@components.command()
@click.argument("name")
@click.option(
    "--format",
    "output_format",
    default="rich",
    type=click.Choice(["rich", "json"]),
    help="Output format",
)
@rich_help_option("-h", "--help")
@click.pass_context
def show(ctx, name, output_format):
    """Show a component with its documentation details.

    Args:
        name: Component name (case-insensitive)
    """
    tools = build_tools(ctx.obj["config"])
    result = run_async(tools.get_component(name))

    if isinstance(result, ComponentNotFound):
        echo_error(result.message)
        ctx.exit(1)

    if output_format == "json":
        print_json(result.to_payload())
        return

    info = Table(title=f"Component: {result.name}", show_header=False)
    info.add_column("Property", style="cyan")
    info.add_column("Value")
    info.add_row("Title", result.title)
    info.add_row("Category", result.category)
    info.add_row("Path", result.component_path or "-")
    info.add_row("Docs", result.docs_url)
    info.add_row("Description", result.description or "-")
    info.add_row("Stories", ", ".join(story.name or "?" for story in result.stories))
    console.print(info)

    if result.props:
        props = Table(title="Props")
        props.add_column("Name", style="cyan")
        props.add_column("Type")
        props.add_column("Required")
        props.add_column("Description")
        for prop in result.props:
            props.add_row(
                prop.name or "",
                prop.type or "",
                "yes" if prop.required else "no",
                prop.description or "",
            )
        console.print(props)

    _print_examples(result.examples or [])


@components.command()
@click.argument("name")
@rich_help_option("-h", "--help")
@click.pass_context
def examples(ctx, name):
    """Show the code examples from a component's documentation page.

    Args:
        name: Component name (case-insensitive)
    """
    tools = build_tools(ctx.obj["config"])
    result = run_async(tools.get_component_examples(name))

    if isinstance(result, ComponentNotFound):
        echo_error(result.message)
        ctx.exit(1)

    if not result.examples:
        echo_info(f"No examples found for '{name}'")
        return

    _print_examples(result.examples)


@components.command()
@click.argument("query")
@click.option(
    "--format",
    "output_format",
    default="table",
    type=click.Choice(["table", "json"]),
    help="Output format",
)
@rich_help_option("-h", "--help")
@click.pass_context
def search(ctx, query, output_format):
    """Search components by name or description.

    Args:
        query: Case-insensitive substring
    """
    tools = build_tools(ctx.obj["config"])
    response = run_async(tools.search_components(query))

    if output_format == "json":
        print_json(response.to_payload())
        return

    if not response.components:
        echo_info(f"No components match '{query}'")
        return

    console.print(
        _components_table(
            f"Results for '{query}' ({response.total_results})", response.components
        )
    )
