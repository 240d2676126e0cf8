"""
FILE: gamify/repl/commands/counters.py
PURPOSE: Counter command handlers for the REPL (inc, dec)
"""

from rich.markup import escape

from ..parser import ParseResult
from ..pickers import pick_item
from ..style import celebrate_tick
from ...core.exceptions import ItemNotFoundError


def _pick_counter(result: ParseResult, ctx, usage: str):
    counters = ctx.service.list_counters()
    if result.args:
        counter = ctx.service.counters.find(result.text)
        if counter is None:
            raise ItemNotFoundError("counter", result.text)
        return counter
    if ctx.interactive:
        return pick_item("Choose a counter", counters)
    ctx.console.print(f"[dim]Usage: {usage}[/dim]")
    return None


def _report(ctx, counter, delta: int) -> None:
    ctx.console.print(f"{celebrate_tick(delta)} {escape(counter.name)}: [magenta]Count: {counter.count}[/magenta]")


def handle_inc_command(result: ParseResult, ctx) -> None:
    """
    Handle 'inc' command - add one to a counter.

    Usage:
        inc Pushups
        + Pushups
    """
    counter = _pick_counter(result, ctx, "inc <counter>")
    if counter is None:
        return
    ctx.service.on_increment(counter)
    _report(ctx, counter, 1)


def handle_dec_command(result: ParseResult, ctx) -> None:
    """
    Handle 'dec' command - subtract one from a counter (may go negative).

    Usage:
        dec Pushups
        - Pushups
    """
    counter = _pick_counter(result, ctx, "dec <counter>")
    if counter is None:
        return
    ctx.service.on_decrement(counter)
    _report(ctx, counter, -1)
