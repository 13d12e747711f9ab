"""
Utility functions for the release tooling.

Includes:
- JSON save/load helpers
- UI helpers
"""

import json
from pathlib import Path
from typing import Any
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

# Global console instances
console = Console()
err_console = Console(stderr=True)

def print_header(title: str, subtitle: str = ""):
    """Print a styled header."""
    console.print(Panel(f"[bold blue]{title}[/bold blue]\n[italic]{escape(subtitle)}[/italic]", expand=False))

def print_stats_table(title: str, rows: dict[str, int]):
    """Print a two-column summary table."""
    table = Table(title=title)
    table.add_column("Metric", style="cyan")
    table.add_column("Count", style="magenta")

    for name, count in rows.items():
        table.add_row(name, str(count))

    console.print(table)

def print_info(msg: str):
    console.print(f"[INFO] {msg}", markup=False)

def print_error(msg: str):
    err_console.print(f"[bold red]ERROR:[/bold red] {escape(msg)}")

def print_warning(msg: str):
    console.print(f"[bold yellow]WARNING:[/bold yellow] {escape(msg)}")

def print_success(msg: str):
    console.print(f"[bold green]SUCCESS:[/bold green] {escape(msg)}")


def save_json(data: Any, path: Path) -> None:
    """
    Save data to a JSON file with pretty formatting.

    Args:
        data: The data to serialize.
        path: The output file path.
    """
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write('\n')


def load_json(path: Path) -> Any:
    """
    Load data from a JSON file.

    Args:
        path: The input file path.

    Returns:
        The deserialized data.
    """
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)
