"""
FILE: gamify/repl/__init__.py
PURPOSE: REPL package - interactive tabs, quests and counters
EXPORTS:
  - main() (from repl.main)
"""

from .main import main

__all__ = ["main"]
