"""
FILE: gamify/cli/commands/system.py
PURPOSE: System commands (version, repl, tabs)
"""

import json

import typer
from rich.table import Table

from ..main import app, console, error_console, get_context_settings
from ... import __version__
from ...core.navigation import Tab


@app.command()
def version():
    """Show Gamify version."""
    console.print(f"Gamify v{__version__}")


@app.command()
def repl(ctx: typer.Context):
    """
    Launch the interactive REPL.

    Example:
        gamify repl
        gamify --daily-reset session repl
    """
    from ...core.service import GamifyService
    from ...repl.main import main as repl_main

    try:
        repl_main(GamifyService(get_context_settings(ctx)))
    except Exception as e:
        error_console.print(f"[red]Error starting REPL:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def tabs(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    List the navigation tabs.

    Example:
        gamify tabs
        gamify tabs --json
    """
    rows = [{"index": int(tab), "label": tab.label, "title": tab.title} for tab in Tab]

    if json_output:
        console.print(json.dumps(rows, indent=2))
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Index", style="cyan", width=6)
    table.add_column("Key", style="magenta", width=4)
    table.add_column("Title", style="white")
    for row in rows:
        table.add_row(str(row["index"]), row["label"], row["title"])
    console.print(table)
