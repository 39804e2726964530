"""Rich-enabled help formatter for Click commands."""

import click
from rich.console import Console
from rich.panel import Panel


class RichHelpFormatter:
    """Renders Click help pages as a Rich panel."""

    def __init__(self, console: Console = None):
        self.console = console or Console()

    def render(self, ctx: click.Context) -> str:
        """Build the markup for ``ctx``'s help page."""
        command = ctx.command
        sections = [f"[bold cyan]{ctx.command_path}[/bold cyan]", ""]

        sections.append("[bold yellow]Usage:[/bold yellow]")
        sections.append(f"  {self._format_usage(ctx)}")
        sections.append("")

        if command.help:
            sections.append("[bold yellow]Description:[/bold yellow]")
            for part in command.help.split("\n\n"):
                sections.append(self._format_help_part(part))
            sections.append("")

        options = self._format_options(ctx)
        if options:
            sections.append(options)

        commands = getattr(command, "commands", None)
        if commands:
            sections.append(self._format_commands(commands))

        return "\n".join(sections)

    def format_help(self, ctx: click.Context) -> None:
        self.console.print(
            Panel(
                self.render(ctx),
                title=f"[bold blue]Help: {ctx.info_name}[/bold blue]",
                border_style="blue",
                padding=(1, 2),
            )
        )

    def _format_usage(self, ctx):
        pieces = [f"[bold green]{ctx.command_path}[/bold green]", "[dim]\\[OPTIONS][/dim]"]
        for param in ctx.command.params:
            if isinstance(param, click.Argument):
                name = param.name.upper()
                pieces.append(f"[yellow]{name}[/yellow]" if param.required else f"[dim]\\[{name}][/dim]")
        if isinstance(ctx.command, click.Group):
            pieces.append("[yellow]COMMAND[/yellow]")
        return " ".join(pieces)

    def _format_help_part(self, text):
        if not text.strip().startswith(("Examples:", "Args:")):
            return f"  {text.strip()}"

        lines = []
        for line in text.split("\n"):
            stripped = line.strip()
            if stripped.startswith("uic"):
                lines.append(f"    [dim green]{stripped}[/dim green]")
            elif stripped.endswith(":"):
                lines.append(f"\n[bold yellow]{stripped}[/bold yellow]")
            elif stripped:
                lines.append(f"    {stripped}")
        return "\n".join(lines)

    def _format_options(self, ctx):
        lines = []
        for param in ctx.command.params:
            if not isinstance(param, click.Option):
                continue
            names = ", ".join(f"[cyan]{opt}[/cyan]" for opt in param.opts)
            if isinstance(param.type, click.Choice):
                names += f" [dim]\\[{'|'.join(param.type.choices)}][/dim]"

            help_text = param.help or ""
            if param.default not in (None, "", ()) and not param.is_flag:
                help_text += f" [dim](default: {param.default})[/dim]"
            lines.append(f"    {names:<45} {help_text}")

        if not lines:
            return ""
        return "[bold yellow]Options:[/bold yellow]\n" + "\n".join(lines)

    def _format_commands(self, commands):
        lines = []
        for name, command in sorted(commands.items()):
            desc = (command.short_help or command.help or "").split("\n")[0]
            spacing = " " * max(1, 20 - len(name))
            lines.append(f"    [green]{name}[/green]{spacing}{desc}")
        return "[bold yellow]Commands:[/bold yellow]\n" + "\n".join(lines)


def rich_help_option(*param_decls, **kwargs):
    """Help option that prints a Rich-formatted help page."""

    def decorator(f):
        def callback(ctx, param, value):
            if not value or ctx.resilient_parsing:
                return

            RichHelpFormatter().format_help(ctx)
            ctx.exit()

        kwargs.setdefault("is_flag", True)
        kwargs.setdefault("expose_value", False)
        kwargs.setdefault("is_eager", True)
        kwargs.setdefault("help", "Show this message and exit.")
        kwargs["callback"] = callback

        return click.option(*param_decls, **kwargs)(f)

    return decorator
