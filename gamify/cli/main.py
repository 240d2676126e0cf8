"""
FILE: gamify/cli/main.py
PURPOSE: Typer-based CLI entry point
EXPORTS:
  - app (Typer application)
  - configure_logging(level) - Install rich log handler
  - main() (entry point)
  - version() - Show version
  - repl() - Launch interactive REPL
  - tabs() - List navigation tabs
DEPENDENCIES:
  - typer (CLI framework)
  - rich (formatted output, log handler)
  - pydantic (settings validation errors)
  - gamify.core.config (Settings)
  - gamify.repl (interactive mode)
NOTES:
  - Running 'gamify' with no subcommand launches the REPL
  - Global options (--daily-reset, --log-level) override GAMIFY_* env vars
  - Exit codes: 0=success, 1=error
"""

import logging
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from ..core.config import Settings, get_settings

app = typer.Typer(
    name="gamify",
    help="Gamified personal task tracker",
    add_completion=False,
)

console = Console()
error_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    """Route log records to stderr through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=error_console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


def get_context_settings(ctx: typer.Context) -> Settings:
    if isinstance(ctx.obj, Settings):
        return ctx.obj
    return get_settings()


@app.callback(invoke_without_command=True)
def default_command(
    ctx: typer.Context,
    daily_reset: Optional[str] = typer.Option(
        None, "--daily-reset", help="When daily quests come back: midnight or session"
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level (e.g. DEBUG)"),
):
    """
    Default callback - builds settings and launches the REPL when no
    command is specified.
    """
    try:
        settings = get_settings(daily_reset=daily_reset, log_level=log_level)
    except ValidationError as e:
        error_console.print(f"[red]Invalid configuration:[/red] {e}")
        raise typer.Exit(1)

    configure_logging(settings.log_level)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        from ..repl.main import main as repl_main
        from ..core.service import GamifyService
        try:
            repl_main(GamifyService(settings))
        except Exception as e:
            error_console.print(f"[red]Error starting REPL:[/red] {e}")
            raise typer.Exit(1)


# Register subcommands
from .commands import version, repl, tabs  # noqa: E402,F401


def main():
    """Main entry point for CLI."""
    app()

