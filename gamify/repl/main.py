"""
FILE: gamify/repl/main.py
PURPOSE: Interactive REPL - the presentation layer over GamifyService
EXPORTS:
  - REPLContext (dataclass) - session state handed to every handler
  - create_context(service, console, interactive) -> REPLContext
  - execute_command(result, ctx) -> bool
  - run_repl(service) - Main REPL loop
  - main(service) - Entry point for REPL mode
DEPENDENCIES:
  - prompt_toolkit (prompt session, history, completion, toolbar)
  - rich (formatted output)
  - gamify.core.service (state and intents)
  - gamify.repl.parser / completer / display
NOTES:
  - One GamifyService per session; nothing survives exit
  - Tab changes re-render through a navigation listener
  - Bottom toolbar shows the navigation bar and score
  - Piped stdin (tests, scripts) uses plain input() and no pickers
  - Ctrl+D or "exit"/"quit" to exit
"""

import logging
import sys
import traceback
from dataclasses import dataclass
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.formatted_text import HTML
from rich.console import Console

from ..core.exceptions import GamifyError
from ..core.service import GamifyService
from .parser import parse_command, ParseResult
from .completer import create_completer
from .display import render_view, render_nav_bar
from .commands import (
    handle_add_command,
    handle_done_command,
    handle_rm_command,
    handle_inc_command,
    handle_dec_command,
    handle_tab_command,
    handle_tab_shortcut,
    handle_ls_command,
    handle_help_command,
    handle_clear_command,
    handle_score_command,
    handle_reset_command,
)

logger = logging.getLogger(__name__)


@dataclass
class REPLContext:
    """
    State for one REPL session.

    Attributes:
        service: The tracker state and intents
        console: Rich console all output goes to
        interactive: True on a real TTY (enables pickers)
    """
    service: GamifyService
    console: Console
    interactive: bool = False

    def get_prompt(self) -> str:
        """Plain prompt like "gamify:[daily quests]> "."""
        return f"gamify:[{self.service.active_view.title.lower()}]> "


def create_context(
    service: Optional[GamifyService] = None,
    console: Optional[Console] = None,
    interactive: bool = False,
) -> REPLContext:
    """Build a session context and hook tab selection to re-rendering."""
    ctx = REPLContext(
        service=service or GamifyService(),
        console=console or Console(),
        interactive=interactive,
    )
    ctx.service.navigation.subscribe(lambda tab: render_view(ctx.service, ctx.console))
    return ctx


HANDLERS = {
    "add": handle_add_command,
    "done": handle_done_command,
    "rm": handle_rm_command,
    "inc": handle_inc_command,
    "+": handle_inc_command,
    "dec": handle_dec_command,
    "-": handle_dec_command,
    "tab": handle_tab_command,
    "d": handle_tab_shortcut,
    "q": handle_tab_shortcut,
    "m": handle_tab_shortcut,
    "c": handle_tab_shortcut,
    "p": handle_tab_shortcut,
    "ls": handle_ls_command,
    "score": handle_score_command,
    "reset": handle_reset_command,
    "help": handle_help_command,
    "clear": handle_clear_command,
}


def execute_command(result: ParseResult, ctx: REPLContext) -> bool:
    """
    Execute a parsed command.

    Returns:
        True to continue the REPL loop, False to exit
    """
    command = result.command.lower()
    console = ctx.console

    if command in ("exit", "quit"):
        console.print("[dim]Goodbye![/dim]")
        return False

    if not command:
        return True

    handler = HANDLERS.get(command)
    if handler is None:
        console.print(f"[red]Unknown command:[/red] {command}")
        console.print("[dim]Type 'help' for available commands[/dim]")
        console.print()
        return True

    try:
        handler(result, ctx)
    except GamifyError as e:
        console.print(f"[red]Error:[/red] {e}")
    console.print()
    return True


def format_prompt(ctx: REPLContext) -> HTML:
    tab = ctx.service.active_view
    return HTML(f"<b>gamify:[<ansibrightmagenta>{tab.title.lower()}</ansibrightmagenta>]&gt; </b>")


def get_bottom_toolbar(ctx: REPLContext) -> HTML:
    nav = render_nav_bar(ctx.service)
    return HTML(f"<style bg='#2C2C2C' fg='#ffffff'> {nav}  |  ⭐ {ctx.service.score} </style>")


def run_repl(service: Optional[GamifyService] = None) -> None:
    """
    Main REPL loop.

    Exits on Ctrl+D (EOFError) or "exit"/"quit". Ctrl+C only cancels
    the current line.
    """
    has_tty = sys.stdin.isatty() and sys.stdout.isatty()
    ctx = create_context(service, Console(), interactive=has_tty)

    session = None
    if has_tty:
        try:
            session = PromptSession(
                history=InMemoryHistory(),
                completer=create_completer(ctx.service),
                complete_while_typing=True,
                bottom_toolbar=lambda: get_bottom_toolbar(ctx),
            )
        except Exception as e:
            ctx.console.print(f"[yellow]Warning:[/yellow] Running in simple input mode: {e}")
            ctx.interactive = False

    ctx.console.print("[bold magenta]Gamify REPL[/bold magenta] - Type 'help' for commands, 'exit' to quit")
    if session is None:
        ctx.console.print("[dim](Running in simple mode - no autocomplete)[/dim]")
    ctx.console.print()
    render_view(ctx.service, ctx.console)
    ctx.console.print()

    while True:
        try:
            if session is None:
                user_input = input(ctx.get_prompt())
            else:
                user_input = session.prompt(format_prompt(ctx))

            if not execute_command(parse_command(user_input), ctx):
                break

        except KeyboardInterrupt:
            ctx.console.print("[dim]^C (Press Ctrl+D or type 'exit' to quit)[/dim]")
            continue
        except EOFError:
            ctx.console.print()
            ctx.console.print("[dim]Goodbye![/dim]")
            break
        except Exception as e:
            logger.debug("Unhandled REPL error", exc_info=True)
            ctx.console.print(f"[red]Unexpected error:[/red] {e}")
            ctx.console.print("[dim]" + traceback.format_exc() + "[/dim]")


def main(service: Optional[GamifyService] = None) -> None:
    """Entry point for REPL mode."""
    try:
        run_repl(service)
    except Exception as e:
        Console(stderr=True).print(f"[red]Fatal error:[/red] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
