"""Utility functions for the UI components CLI."""

import asyncio
import json
from collections.abc import Coroutine
from typing import Any

from rich.console import Console
from rich.syntax import Syntax

from ui_components_server.core.fetcher import DocsSiteClient
from ui_components_server.mcp_server.config import Config
from ui_components_server.mcp_server.tools import UIComponentsTools

console = Console()


def echo_error(message: str) -> None:
    """Print error message."""
    console.print(f"[red]✗ {message}[/red]")


def echo_info(message: str) -> None:
    """Print info message."""
    console.print(f"[blue]ℹ {message}[/blue]")


def print_json(payload: Any) -> None:
    """Print a JSON-serializable payload with syntax highlighting."""
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    console.print(Syntax(text, "json", theme="monokai", word_wrap=True))


def build_tools(config: Config) -> UIComponentsTools:
    """Create the query layer for one CLI invocation."""
    return UIComponentsTools(DocsSiteClient(config.settings), config)


def run_async(coro: Coroutine) -> Any:
    return asyncio.run(coro)
