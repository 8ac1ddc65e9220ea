"""Output formatting utilities using Rich."""

import json
from enum import Enum
from typing import Any, Iterable

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table
from tabulate import tabulate


class OutputFormat(str, Enum):
    """Supported output formats."""

    TABLE = "table"
    JSON = "json"
    YAML = "yaml"
    RAW = "raw"


class OutputFormatter:
    """Handles output formatting for CLI commands."""

    def __init__(
        self,
        format: OutputFormat = OutputFormat.TABLE,
        color: bool = True,
        quiet: bool = False,
    ):
        self.format = format
        self.color = color
        self.quiet = quiet
        self._console = Console(force_terminal=color, no_color=not color, soft_wrap=True)
        self._error_console = Console(
            stderr=True, force_terminal=color, no_color=not color, soft_wrap=True
        )

    def print(self, message: str, style: str | None = None) -> None:
        """Print a message to stdout."""
        if self.quiet:
            return
        self._console.print(message, style=style)

    def print_error(self, message: str) -> None:
        """Print an error message to stderr."""
        self._error_console.print(f"[red]Error:[/red] {escape(message)}")

    def print_warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if self.quiet:
            return
        self._error_console.print(f"[yellow]Warning:[/yellow] {escape(message)}")

    def print_success(self, message: str) -> None:
        """Print a success message to stderr."""
        if self.quiet:
            return
        self._error_console.print(f"[green]✓[/green] {escape(message)}")

    def print_info(self, message: str) -> None:
        """Print an info message to stderr."""
        if self.quiet:
            return
        self._error_console.print(f"[blue]ℹ[/blue] {escape(message)}")

    def print_data(
        self,
        data: list[dict[str, Any]] | dict[str, Any],
        headers: list[str] | None = None,
        title: str | None = None,
    ) -> None:
        """Print data in the configured format."""
        if self.format == OutputFormat.JSON:
            self.print_json(data)
        elif self.format == OutputFormat.YAML:
            self.print_yaml(data)
        elif self.format == OutputFormat.RAW:
            self._print_raw(data)
        else:
            self._print_table(data, headers, title)

    def print_resources(
        self,
        resources: Any,
        rows: list[dict[str, Any]],
        columns: list[str],
        title: str | None = None,
    ) -> None:
        """Print API resources.

        Structured formats get the full resource objects, table and raw
        output get the summarised rows.
        """
        if self.format == OutputFormat.JSON:
            self.print_json(resources)
        elif self.format == OutputFormat.YAML:
            self.print_yaml(resources)
        elif self.format == OutputFormat.RAW:
            self._print_raw(rows)
        else:
            self._print_table(rows, columns, title)

    def print_json(self, data: Any) -> None:
        """Print data as JSON."""
        json_str = json.dumps(data, indent=2, default=str)
        if self.color:
            syntax = Syntax(json_str, "json", theme="monokai")
            self._console.print(syntax)
        else:
            click.echo(json_str)

    def print_yaml(self, data: Any) -> None:
        """Print data as YAML."""
        yaml_str = yaml.safe_dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)
        if self.color:
            syntax = Syntax(yaml_str, "yaml", theme="monokai")
            self._console.print(syntax)
        else:
            click.echo(yaml_str, nl=False)

    def write(self, text: str) -> None:
        """Write text to stdout unformatted."""
        click.echo(text, nl=False)

    def stream(self, chunks: Iterable[str]) -> None:
        """Copy an iterable of text chunks to stdout."""
        for chunk in chunks:
            click.echo(chunk, nl=False)

    def _print_raw(self, data: Any) -> None:
        """Print raw data."""
        if isinstance(data, list):
            for item in data:
                if isinstance(item, dict):
                    click.echo("\t".join(str(v) for v in item.values()))
                else:
                    click.echo(item)
        elif isinstance(data, dict):
            for key, value in data.items():
                click.echo(f"{key}: {value}")
        else:
            click.echo(data)

    def _print_table(
        self,
        data: list[dict[str, Any]] | dict[str, Any],
        headers: list[str] | None = None,
        title: str | None = None,
    ) -> None:
        """Print data as a formatted table."""
        if isinstance(data, dict):
            # Single record - display as key-value pairs
            if not self.color:
                click.echo(tabulate([(k, v) for k, v in data.items()], tablefmt="plain", disable_numparse=True))
                return
            table = Table(title=title, show_header=True, header_style="bold cyan")
            table.add_column("Field", style="dim")
            table.add_column("Value")
            for key, value in data.items():
                table.add_row(str(key), escape(str(value)))
            self._console.print(table)
        elif isinstance(data, list) and len(data) > 0:
            if headers is None:
                headers = list(data[0].keys())

            if not self.color:
                body = [[_cell(row.get(h)) for h in headers] for row in data]
                click.echo(tabulate(body, headers=headers, tablefmt="plain", disable_numparse=True))
                return

            table = Table(title=title, show_header=True, header_style="bold cyan")
            for header in headers:
                table.add_column(header)

            for row in data:
                table.add_row(*[escape(_cell(row.get(h))) for h in headers])

            self._console.print(table)
        else:
            self._console.print("[dim]No data to display[/dim]")

    def confirm(self, message: str, default: bool = False) -> bool:
        """Ask for confirmation."""
        if self.quiet:
            return default

        suffix = " [Y/n]" if default else " [y/N]"
        self._error_console.print(f"{escape(message)}{escape(suffix)}", end=" ")

        try:
            response = input().strip().lower()
            if not response:
                return default
            return response in ("y", "yes")
        except (EOFError, KeyboardInterrupt):
            return False


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_bytes(size: int | float) -> str:
    """Format bytes to human-readable string."""
    for unit in ["B", "KB", "MB", "GB", "TB", "PB"]:
        if abs(size) < 1024.0:
            return f"{size:3.1f} {unit}"
        size /= 1024.0
    return f"{size:.1f} EB"
