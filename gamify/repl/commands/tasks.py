"""
FILE: gamify/repl/commands/tasks.py
PURPOSE: Task command handlers for the REPL (add, done, rm)
NOTES:
  - Category comes from --category, else from the selected tab
  - On the Quests tab, done/rm search Special first, then High Level
  - On the Counter tab, add/rm act on counters
"""

from typing import List

from rich.markup import escape

from ..parser import ParseResult
from ..display import display_delete_listing
from ..pickers import pick_item
from ..style import celebrate_add, celebrate_done, celebrate_delete
from ...core.constants import CATEGORY_DAILY, CATEGORY_SPECIAL, CATEGORY_HIGH_LEVEL
from ...core.exceptions import InvalidInputError, ItemNotFoundError
from ...core.navigation import Tab
from ...core.service import normalize_category
from ...core.tasks import find_by_name

COUNTER_TARGET = "counter"
COUNTER_WORDS = ("counter", "counters")


def resolve_targets(result: ParseResult, ctx) -> List[str]:
    """
    Work out which collections a command acts on.

    Returns:
        Category names in search order, or [COUNTER_TARGET]

    Raises:
        InvalidInputError: Bad --category value, or a tab without collections
    """
    flag = result.flags.get("category")
    if flag is True:
        raise InvalidInputError("--category needs a value (daily, special, high-level, counter)")
    if flag:
        if flag.strip().lower() in COUNTER_WORDS:
            return [COUNTER_TARGET]
        return [normalize_category(flag)]

    tab = ctx.service.active_view
    if tab == Tab.DAILY:
        return [CATEGORY_DAILY]
    if tab == Tab.QUESTS:
        return [CATEGORY_SPECIAL, CATEGORY_HIGH_LEVEL]
    if tab == Tab.COUNTER:
        return [COUNTER_TARGET]
    raise InvalidInputError(
        f"Nothing to manage on the {tab.title} tab. Switch tabs or pass --category"
    )


def handle_add_command(result: ParseResult, ctx) -> None:
    """
    Handle 'add' command - create a task or counter.

    Usage:
        add Read a book                  (category from current tab)
        add "Slay the dragon" -c high
        add Pushups --category counter
    """
    console = ctx.console
    if not result.args:
        console.print("[red]Error:[/red] Name required")
        console.print("[dim]Usage: add <name> [--category daily|special|high-level|counter][/dim]")
        return

    target = resolve_targets(result, ctx)[0]
    if target == COUNTER_TARGET:
        item = ctx.service.on_add_counter(result.text)
        kind = "counter"
    else:
        item = ctx.service.on_add_task(target, result.text)
        kind = f"{target} quest"

    if item is None:
        console.print("[dim]Nothing added (name is blank)[/dim]")
        return

    console.print(f"[green]✓ Added {kind}:[/green] {escape(item.name)}  [dim]{celebrate_add()}[/dim]")


def _candidates(ctx, targets, pending_only: bool):
    pairs = []
    for category in targets:
        tasks = ctx.service.pending(category) if pending_only else ctx.service.tasks(category)
        pairs.extend((category, task) for task in tasks)
    return pairs


def _choose(result: ParseResult, ctx, pairs, title: str, usage: str, kind: str, listing: bool = False):
    """Pick by name (args) or picker (TTY). Returns (category, item) or None."""
    items = [item for _, item in pairs]
    if result.args:
        found = find_by_name(items, result.text)
        if found is None:
            raise ItemNotFoundError(kind, result.text)
    elif ctx.interactive:
        found = pick_item(title, items)
        if found is None:
            return None
    else:
        ctx.console.print(f"[dim]Usage: {usage}[/dim]")
        if listing:
            display_delete_listing(items, kind, ctx.console)
        return None

    for category, item in pairs:
        if item is found:
            return category, item
    return None


def handle_done_command(result: ParseResult, ctx) -> None:
    """
    Handle 'done' command - complete a pending quest and score points.

    Usage:
        done Read a book
        done Slay the dragon -c high
        done             (picker)
    """
    targets = resolve_targets(result, ctx)
    if targets == [COUNTER_TARGET]:
        ctx.console.print("[red]Error:[/red] Counters are not completed; use inc/dec")
        return

    chosen = _choose(
        result, ctx, _candidates(ctx, targets, pending_only=True),
        title="Complete a quest", usage="done <name>", kind="quest",
    )
    if chosen is None:
        return

    category, task = chosen
    points = ctx.service.on_complete_task(category, task)
    if points:
        ctx.console.print(
            f"[green]✓ Completed:[/green] {escape(task.name)}  {celebrate_done(points)}  "
            f"[yellow](score: {ctx.service.score})[/yellow]"
        )
    else:
        ctx.console.print(f"[dim]{escape(task.name)} is already done[/dim]")


def handle_rm_command(result: ParseResult, ctx) -> None:
    """
    Handle 'rm' command - delete a task or counter.

    Usage:
        rm Read a book
        rm Pushups --category counter
        rm               (picker, or listing when not on a TTY)
    """
    targets = resolve_targets(result, ctx)
    if targets == [COUNTER_TARGET]:
        pairs = [(COUNTER_TARGET, c) for c in ctx.service.list_counters()]
        kind = "counter"
    else:
        # Daily deletes from the full list; quests only show pending rows
        pairs = _candidates(ctx, targets, pending_only=targets != [CATEGORY_DAILY])
        kind = "task"

    chosen = _choose(
        result, ctx, pairs,
        title=f"Delete {kind}", usage="rm <name>", kind=kind, listing=True,
    )
    if chosen is None:
        return

    category, item = chosen
    if category == COUNTER_TARGET:
        ctx.service.on_delete_counter(item)
    else:
        ctx.service.on_delete_task(category, item)
    ctx.console.print(f"[green]✓ Deleted:[/green] {escape(item.name)}  [dim]{celebrate_delete()}[/dim]")
