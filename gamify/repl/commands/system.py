"""
FILE: gamify/repl/commands/system.py
PURPOSE: System command handlers for the REPL (help, clear, score, reset)
"""

from rich.panel import Panel

from ..parser import ParseResult


HELP_TEXT = """[bold]Navigation[/bold]
  tab <0-4|name>       Switch tab (daily, quests, map, counter, personalize)
  d q m c p            Shortcuts for each tab
  ls                   Redraw the current tab

[bold]Quests[/bold]
  add <name>           Add to the current tab's list (quote a name
                         to keep repeated spaces: add "Read   a book")
                         --category daily|special|high-level|counter (-c)
  done <name>          Complete a pending quest and score points
  rm <name>            Delete a quest (or counter on the Counter tab)

[bold]Counters[/bold]
  inc <name>  (+)      Add one
  dec <name>  (-)      Subtract one

[bold]System[/bold]
  score                Show the current score
  reset                Start a new daily cycle (daily quests come back)
  clear                Clear the screen
  help                 Show this help
  exit, quit           Leave (nothing is saved)"""


def handle_help_command(result: ParseResult, ctx) -> None:
    """Handle 'help' command - show available commands."""
    ctx.console.print(Panel(HELP_TEXT, title="Gamify commands", border_style="cyan"))


def handle_clear_command(result: ParseResult, ctx) -> None:
    """Handle 'clear' command - clear the screen."""
    ctx.console.clear()


def handle_score_command(result: ParseResult, ctx) -> None:
    """Handle 'score' command - print the score."""
    ctx.console.print(f"[yellow]Score: {ctx.service.score}[/yellow]")


def handle_reset_command(result: ParseResult, ctx) -> None:
    """
    Handle 'reset' command - start a new daily cycle.

    Score and special/high-level quests are untouched.
    """
    ctx.service.reset_daily()
    ctx.console.print("[green]✓ New day:[/green] daily quests are available again")
