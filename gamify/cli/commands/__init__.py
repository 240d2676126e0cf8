"""
FILE: gamify/cli/commands/__init__.py
PURPOSE: CLI command modules
"""

from .system import (
    version,
    repl,
    tabs,
)

__all__ = [
    "version",
    "repl",
    "tabs",
]
