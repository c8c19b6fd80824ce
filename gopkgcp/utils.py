"""
Utility functions for gopkgcp.

Includes:
- Console output helpers
- Extraction summary table
- JSON report writer
"""

import json
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

# Global console instances
console = Console()
err_console = Console(stderr=True)

def print_header(title: str, subtitle: str = ""):
    """Print a styled header."""
    console.print(Panel(f"[bold blue]{title}[/bold blue]\n[italic]{subtitle}[/italic]", expand=False))

def print_report_table(report: dict):
    """Print a summary table of an extraction report."""
    table = Table(title="Extraction Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Count", style="magenta")
    
    table.add_row("Packages found", str(report.get("found_count", 0)))
    table.add_row("Copied", str(report.get("copied_count", 0)))
    table.add_row("Failed", str(report.get("failed_count", 0)))
    table.add_row("External (skipped)", str(report.get("skipped_external_count", 0)))
    table.add_row("Files rewritten", str(len(report.get("rewritten_files", []))))
    
    console.print(table)
    
    failed = report.get("failed", [])
    if failed:
        tree = Tree("[bold red]Failed packages[/bold red]")
        for item in failed[:10]:
            tree.add(f"[yellow]{escape(item['package'])}[/yellow]: {escape(item['error'])}")
        if len(failed) > 10:
            tree.add(f"[italic]... and {len(failed)-10} more[/italic]")
        console.print(tree)

def print_error(msg: str):
    err_console.print(f"[bold red]ERROR:[/bold red] {escape(msg)}", highlight=False)

def print_warning(msg: str):
    err_console.print(f"[bold yellow]WARNING:[/bold yellow] {escape(msg)}", highlight=False)

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
    print(f"[INFO] Saved: {path}")
