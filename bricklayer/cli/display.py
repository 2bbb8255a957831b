#!/usr/bin/env python3
"""
bricklayer CLI Display Module

Provides console output helpers shared by the CLI commands.

Copyright (C) 2025 Marc Rivero López

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

from typing import Any

import pyfiglet
from rich.console import Console
from rich.table import Table

console = Console()

NOT_DECLARED = "[red]not declared[/red]"
UNAVAILABLE = "[red]unavailable[/red]"


def print_banner(target: Console | None = None) -> None:
    """Print bricklayer banner"""
    out = target or console
    banner = pyfiglet.figlet_format("bricklayer", font="slant")
    out.print(f"[bold blue]{banner}[/bold blue]", highlight=False)
    out.print("[bold]Middleware-style brick pipelines[/bold]\n")


def create_bricks_table(rows: list[dict[str, Any]]) -> Table:
    """Create the table listing registered bricks"""
    table = Table(title="Registered Bricks", show_header=True, expand=True)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Class", style="green", overflow="fold")
    table.add_column("Version", style="magenta", no_wrap=True)
    for row in rows:
        if row.get("error"):
            version = UNAVAILABLE
        else:
            version = row["version"] or NOT_DECLARED
        table.add_row(row["name"], row["class"], version)
    return table


def display_result(result: Any, target: Console | None = None) -> None:
    """Display the value returned by the outermost brick"""
    out = target or console
    if result is None or result == "":
        out.print("[dim]Pipeline finished with an empty result[/dim]")
        return
    out.print("[bold green]Pipeline result:[/bold green]")
    out.print(result, markup=False)
