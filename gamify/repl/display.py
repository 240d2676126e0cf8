"""
FILE: gamify/repl/display.py
PURPOSE: Render the selected tab and listings with rich
EXPORTS:
  - render_view(service, console) - Draw the currently selected tab
  - render_nav_bar(service) -> str - Plain "[D] Q M C P" bar
  - display_delete_listing(items, kind, console) - Numbered list for rm
DEPENDENCIES:
  - rich (Panel, Table, Console)
  - gamify.core.service (GamifyService)
  - gamify.core.navigation (Tab)
NOTES:
  - Reads the service only; never mutates it
  - Card colours follow the app's purple palette
"""

from typing import Iterable

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..core.constants import CATEGORY_DAILY, CATEGORY_SPECIAL, CATEGORY_HIGH_LEVEL
from ..core.navigation import Tab
from ..core.service import GamifyService

DAILY_COLOR = "#BF40BF"
SPECIAL_COLOR = "#B11FB1"
HIGH_LEVEL_COLOR = "#921692"


def _task_lines(names: Iterable[str], empty_message: str) -> Text:
    text = Text()
    names = list(names)
    if not names:
        text.append(empty_message, style="dim")
        return text
    for i, name in enumerate(names):
        if i:
            text.append("\n")
        text.append("☐ ", style="bold")
        text.append(name, style="white")
    return text


def _quest_card(title: str, color: str, reward: int, names) -> Panel:
    return Panel(
        _task_lines(names, "No quests"),
        title=f"[bold]{title}[/bold]",
        subtitle=f"+{reward} each",
        border_style=color,
    )


def render_nav_bar(service: GamifyService) -> str:
    """Navigation bar with the selected label in brackets."""
    parts = []
    for tab in Tab:
        if tab == service.active_view:
            parts.append(f"[{tab.label}]")
        else:
            parts.append(tab.label)
    return " ".join(parts)


def render_view(service: GamifyService, console: Console) -> None:
    """
    Draw the currently selected tab.

    Args:
        service: State to read
        console: Rich console to print to
    """
    tab = service.active_view
    console.print(f"[bold white on grey23] {tab.title} [/bold white on grey23]")

    if tab == Tab.DAILY:
        names = [t.name for t in service.pending(CATEGORY_DAILY)]
        empty = "All done for today" if len(service.daily) else "No daily quests yet"
        console.print(Panel(
            _task_lines(names, empty),
            title="[bold]Daily Quests[/bold]",
            subtitle=f"+{service.reward_for(CATEGORY_DAILY)} each",
            border_style=DAILY_COLOR,
        ))

    elif tab == Tab.QUESTS:
        console.print(Group(
            _quest_card(
                "Special", SPECIAL_COLOR, service.reward_for(CATEGORY_SPECIAL),
                [t.name for t in service.pending(CATEGORY_SPECIAL)],
            ),
            _quest_card(
                "High Level", HIGH_LEVEL_COLOR, service.reward_for(CATEGORY_HIGH_LEVEL),
                [t.name for t in service.pending(CATEGORY_HIGH_LEVEL)],
            ),
        ))

    elif tab == Tab.MAP:
        console.print("Map screen")
        console.print(f"[yellow]Score: {service.score}[/yellow]")

    elif tab == Tab.COUNTER:
        counters = service.list_counters()
        if not counters:
            console.print("[dim]No counters yet[/dim]")
            return
        table = Table(show_header=True, header_style="bold cyan", title="Counters")
        table.add_column("Name", style="white")
        table.add_column("Count", justify="right", style="magenta")
        for counter in counters:
            table.add_row(escape(counter.name), f"Count: {counter.count}")
        console.print(table)

    else:
        console.print("Personalize screen")


def display_delete_listing(items: list, kind: str, console: Console) -> None:
    """Numbered listing of deletable items, or the empty message."""
    if not items:
        plural = "tasks" if kind == "task" else "counters"
        console.print(f"[dim]No {plural} to delete.[/dim]")
        return
    for i, item in enumerate(items, start=1):
        console.print(f"  [cyan]{i}[/cyan]: {escape(item.name)}")
