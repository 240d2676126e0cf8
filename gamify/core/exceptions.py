"""
FILE: gamify/core/exceptions.py
PURPOSE: Custom exception classes for error handling
EXPORTS:
  - GamifyError (base exception)
  - InvalidInputError
  - InvalidTabError
  - ItemNotFoundError
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - All exceptions inherit from GamifyError for easy catching
  - Blank names are NOT errors: collections silently ignore them
  - Core raises these, REPL/CLI layers catch and display
"""


class GamifyError(Exception):
    """Base exception for all Gamify errors."""
    pass


class InvalidInputError(GamifyError):
    """Input validation failed."""

    def __init__(self, message: str):
        super().__init__(message)


class InvalidTabError(GamifyError):
    """Tab index or name outside the navigation bar."""

    def __init__(self, tab):
        self.tab = tab
        super().__init__(f"Tab {tab!r} does not exist")


class ItemNotFoundError(GamifyError):
    """No task or counter with the given name."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"{kind.capitalize()} '{name}' not found")
