"""
FILE: gamify/core/counters.py
PURPOSE: Ordered collection of named integer counters
EXPORTS:
  - CounterCollection (class)
DEPENDENCIES:
  - logging (stdlib)
  - gamify.core.models (CounterItem)
  - gamify.core.tasks (is_blank, find_by_name)
NOTES:
  - Counts are unbounded in both directions
  - Counters never touch the score
"""

import logging
from typing import Iterator, List, Optional

from .models import CounterItem
from .tasks import is_blank, find_by_name

logger = logging.getLogger(__name__)


class CounterCollection:
    """Ordered list of counters."""

    def __init__(self):
        self._counters: List[CounterItem] = []

    def add(self, name: str) -> Optional[CounterItem]:
        """Append a counter at zero; blank names are ignored (returns None)."""
        if is_blank(name):
            logger.debug("Ignored blank counter name")
            return None
        counter = CounterItem(name)
        self._counters.append(counter)
        logger.debug("Added counter %r", name)
        return counter

    def remove(self, counter: CounterItem) -> bool:
        for i, existing in enumerate(self._counters):
            if existing is counter:
                del self._counters[i]
                logger.debug("Removed counter %r", counter.name)
                return True
        return False

    def increment(self, counter: CounterItem) -> int:
        counter.count += 1
        logger.debug("Counter %r -> %d", counter.name, counter.count)
        return counter.count

    def decrement(self, counter: CounterItem) -> int:
        # May go negative
        counter.count -= 1
        logger.debug("Counter %r -> %d", counter.name, counter.count)
        return counter.count

    def find(self, name: str) -> Optional[CounterItem]:
        return find_by_name(self._counters, name)

    def items(self) -> List[CounterItem]:
        return list(self._counters)

    def __contains__(self, counter) -> bool:
        return any(existing is counter for existing in self._counters)

    def __iter__(self) -> Iterator[CounterItem]:
        return iter(list(self._counters))

    def __len__(self) -> int:
        return len(self._counters)
