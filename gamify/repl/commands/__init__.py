"""
FILE: gamify/repl/commands/__init__.py
PURPOSE: REPL command handler modules
NOTES:
  - Every handler takes (result: ParseResult, ctx: REPLContext)
  - Handlers may raise GamifyError; the dispatcher prints it
"""

from .tasks import (
    handle_add_command,
    handle_done_command,
    handle_rm_command,
)
from .counters import (
    handle_inc_command,
    handle_dec_command,
)
from .navigation import (
    handle_tab_command,
    handle_tab_shortcut,
    handle_ls_command,
)
from .system import (
    handle_help_command,
    handle_clear_command,
    handle_score_command,
    handle_reset_command,
)

__all__ = [
    "handle_add_command",
    "handle_done_command",
    "handle_rm_command",
    "handle_inc_command",
    "handle_dec_command",
    "handle_tab_command",
    "handle_tab_shortcut",
    "handle_ls_command",
    "handle_help_command",
    "handle_clear_command",
    "handle_score_command",
    "handle_reset_command",
]
