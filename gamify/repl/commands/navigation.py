"""
FILE: gamify/repl/commands/navigation.py
PURPOSE: Tab switching and view commands for the REPL
NOTES:
  - Selecting a tab re-renders through the navigation listener set up in main
"""

from rich.markup import escape

from ..parser import ParseResult
from ..display import render_view, render_nav_bar


def handle_tab_command(result: ParseResult, ctx) -> None:
    """
    Handle 'tab' command - show or switch the selected tab.

    Usage:
        tab              (show current tab)
        tab 2
        tab map
    """
    if not result.args:
        tab = ctx.service.active_view
        ctx.console.print(f"Current tab: [cyan]{tab.title}[/cyan]  [dim]{escape(render_nav_bar(ctx.service))}[/dim]")
        return
    ctx.service.on_select_tab(result.args[0])


def handle_tab_shortcut(result: ParseResult, ctx) -> None:
    """Handle one-letter tab shortcuts: d, q, m, c, p."""
    ctx.service.on_select_tab(result.command)


def handle_ls_command(result: ParseResult, ctx) -> None:
    """Handle 'ls' command - redraw the current tab."""
    render_view(ctx.service, ctx.console)
