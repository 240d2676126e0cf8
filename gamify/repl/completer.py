"""
FILE: gamify/repl/completer.py
PURPOSE: Autocomplete logic for REPL commands and arguments
EXPORTS:
  - GamifyCompleter (Completer for command/arg completion)
  - create_completer(service) -> GamifyCompleter
DEPENDENCIES:
  - prompt_toolkit.completion (Completer, Completion)
  - gamify.core.service (for live task and counter names)
NOTES:
  - Suggests command names at start of line
  - Suggests tab names after "tab"
  - Suggests category values after --category / -c
  - Suggests pending quest names after done, all names after rm,
    counter names after inc/dec (whole remaining text is the name)
  - Case-insensitive matching
"""

from typing import Iterable, List, Optional

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from ..core.constants import TASK_CATEGORIES, CATEGORY_DAILY, CATEGORY_SPECIAL, CATEGORY_HIGH_LEVEL
from ..core.navigation import Tab


class GamifyCompleter(Completer):
    """
    Context-aware completer for the Gamify REPL.

    Args:
        service: Live GamifyService used for name suggestions (optional)
    """

    COMMANDS = [
        "add", "done", "rm", "inc", "dec", "tab", "ls", "score", "reset",
        "help", "clear", "exit", "quit",
    ]

    COMMAND_DESCRIPTIONS = {
        "add": "Add a quest or counter",
        "done": "Complete a quest",
        "rm": "Delete a quest or counter",
        "inc": "Counter +1",
        "dec": "Counter -1",
        "tab": "Switch tab",
        "ls": "Redraw current tab",
        "score": "Show score",
        "reset": "New daily cycle",
        "help": "Show commands",
        "clear": "Clear screen",
        "exit": "Leave",
        "quit": "Leave",
    }

    TAB_NAMES = [tab.name.lower() for tab in Tab]

    CATEGORY_VALUES = list(TASK_CATEGORIES) + ["counter"]

    FLAG_COMMANDS = {"add", "done", "rm"}

    def __init__(self, service=None):
        self.service = service

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        text = document.text_before_cursor
        words = text.split()
        trailing_space = text.endswith(" ")

        # Command name
        if not words or (len(words) == 1 and not trailing_space):
            yield from self._complete_from(self.COMMANDS, words[0] if words else "", describe=True)
            return

        command = words[0].lower()
        current = "" if trailing_space else words[-1]

        # Value for --category / -c
        previous = words[-1] if trailing_space else (words[-2] if len(words) >= 2 else "")
        if previous in ("--category", "-c"):
            yield from self._complete_from(self.CATEGORY_VALUES, current)
            return

        if command == "tab" and len(words) <= 2:
            yield from self._complete_from(self.TAB_NAMES, current)
            return

        if current.startswith("-") and command in self.FLAG_COMMANDS:
            yield from self._complete_from(["--category"], current)
            return

        names = self._names_for(command)
        if names is None:
            return
        partial = text.lstrip().split(None, 1)
        typed = partial[1] if len(partial) > 1 else ""
        yield from self._complete_from(names, typed)

    def _names_for(self, command: str) -> Optional[List[str]]:
        if self.service is None:
            return None
        service = self.service
        if command in ("inc", "dec", "+", "-"):
            return [c.name for c in service.list_counters()]

        tab = service.active_view
        if command == "done":
            if tab == Tab.DAILY:
                return [t.name for t in service.pending(CATEGORY_DAILY)]
            if tab == Tab.QUESTS:
                return [t.name for t in service.pending(CATEGORY_SPECIAL)] + [
                    t.name for t in service.pending(CATEGORY_HIGH_LEVEL)
                ]
        if command == "rm":
            if tab == Tab.DAILY:
                return [t.name for t in service.tasks(CATEGORY_DAILY)]
            if tab == Tab.QUESTS:
                return [t.name for t in service.pending(CATEGORY_SPECIAL)] + [
                    t.name for t in service.pending(CATEGORY_HIGH_LEVEL)
                ]
            if tab == Tab.COUNTER:
                return [c.name for c in service.list_counters()]
        return None

    def _complete_from(self, options: List[str], word: str, describe: bool = False) -> Iterable[Completion]:
        word_lower = word.lower()
        seen = set()
        for option in options:
            if option in seen or not option.lower().startswith(word_lower):
                continue
            seen.add(option)
            yield Completion(
                option,
                start_position=-len(word),
                display=option,
                display_meta=self.COMMAND_DESCRIPTIONS.get(option, "") if describe else "",
            )


def create_completer(service=None) -> GamifyCompleter:
    """Create a completer bound to the running service."""
    return GamifyCompleter(service)
