"""
FILE: gamify/core/navigation.py
PURPOSE: Navigation controller - which tab (view) is currently selected
EXPORTS:
  - Tab (IntEnum)
  - NavigationController (class)
  - resolve_tab(value) -> Tab
DEPENDENCIES:
  - enum (stdlib)
  - logging (stdlib)
  - gamify.core.constants (TAB_TITLES, TAB_LABELS)
  - gamify.core.exceptions (InvalidTabError)
NOTES:
  - Initial tab is Daily (index 0)
  - select() always notifies listeners, even when the tab is unchanged
"""

import logging
from enum import IntEnum
from typing import Callable, List, Union

from .constants import TAB_TITLES, TAB_LABELS, DEFAULT_TAB_INDEX
from .exceptions import InvalidTabError

logger = logging.getLogger(__name__)


class Tab(IntEnum):
    DAILY = 0
    QUESTS = 1
    MAP = 2
    COUNTER = 3
    PERSONALIZE = 4

    @property
    def title(self) -> str:
        return TAB_TITLES[self.value]

    @property
    def label(self) -> str:
        return TAB_LABELS[self.value]


def resolve_tab(value: Union[int, str, Tab]) -> Tab:
    """
    Turn an index, digit string, label ("d") or name ("map") into a Tab.

    Raises:
        InvalidTabError: If nothing matches or the index is out of range
    """
    if isinstance(value, Tab):
        return value
    if isinstance(value, bool):
        raise InvalidTabError(value)
    if isinstance(value, int):
        try:
            return Tab(value)
        except ValueError:
            raise InvalidTabError(value) from None

    text = str(value).strip().lower()
    if text.lstrip("-").isdecimal():
        try:
            return Tab(int(text))
        except ValueError:
            raise InvalidTabError(value) from None
    for tab in Tab:
        if text in (tab.name.lower(), tab.label.lower(), tab.title.lower()):
            return tab
    raise InvalidTabError(value)


class NavigationController:
    """Holds the selected tab and tells listeners when it is selected."""

    def __init__(self, initial: int = DEFAULT_TAB_INDEX):
        self._selected = resolve_tab(initial)
        self._listeners: List[Callable[[Tab], None]] = []

    @property
    def selected_index(self) -> int:
        return int(self._selected)

    @property
    def selected_tab(self) -> Tab:
        return self._selected

    @property
    def title(self) -> str:
        return self._selected.title

    def select(self, index: Union[int, str, Tab]) -> Tab:
        """
        Select a tab and trigger a re-render.

        Args:
            index: 0..4, a Tab, or a tab name/label

        Returns:
            The selected Tab

        Raises:
            InvalidTabError: If index is outside the navigation bar
        """
        self._selected = resolve_tab(index)
        logger.debug("Selected tab %s", self._selected.name)
        for listener in list(self._listeners):
            listener(self._selected)
        return self._selected

    def subscribe(self, listener: Callable[[Tab], None]) -> Callable[[], None]:
        """Register a re-render callback; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
