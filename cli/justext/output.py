"""Rich console output utilities for the just-ext CLI."""

import json
from typing import Any

from rich.console import Console
from rich.table import Table

from extensions.naming import EXE_SUFFIX, JUST_PREFIX

console = Console()
error_console = Console(stderr=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]![/yellow] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]→[/blue] {message}")


def print_json(data: Any) -> None:
    """Print formatted JSON."""
    console.print_json(json.dumps(data, indent=2, default=str))


def print_extensions(names: list[str]) -> None:
    """Print installed extensions as a table."""
    table = Table(title="Installed Extensions")
    table.add_column("Binary", style="cyan")
    table.add_column("Command", style="green")

    for name in names:
        command = name.removeprefix(JUST_PREFIX)
        if EXE_SUFFIX:
            command = command.removesuffix(EXE_SUFFIX)
        table.add_row(name, f"just {command}")

    console.print(table)
    console.print(f"\n[dim]Total: {len(names)} extensions[/dim]")
