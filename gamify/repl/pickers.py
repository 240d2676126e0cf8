"""
FILE: gamify/repl/pickers.py
PURPOSE: Overlay picker for choosing a task or counter with prompt_toolkit dialogs
EXPORTS:
  - item_label(item) -> str
  - pick_item(title, items) -> object | None
DEPENDENCIES:
  - prompt_toolkit.shortcuts.dialogs (radiolist_dialog)
NOTES:
  - Only used on a real TTY; callers fall back to a printed listing otherwise
  - Returns the chosen object itself (identity matters for duplicates)
"""

from typing import List, Optional


def item_label(item) -> str:
    name = (item.name or "").strip()
    short = name if len(name) <= 50 else name[:47] + "..."
    count = getattr(item, "count", None)
    if count is not None:
        return f"{short}  [count: {count}]"
    return short


def pick_item(title: str, items: List) -> Optional[object]:
    """
    Show a single-choice overlay.

    Args:
        title: Dialog title
        items: Tasks or counters to choose from

    Returns:
        The selected item, or None if cancelled or nothing to pick
    """
    if not items:
        return None

    from prompt_toolkit.shortcuts.dialogs import radiolist_dialog

    values = [(i, item_label(item)) for i, item in enumerate(items)]
    result = radiolist_dialog(
        title=title,
        text="Select one",
        values=values,
        ok_text="OK",
        cancel_text="Cancel",
    ).run()
    return items[result] if result is not None else None
