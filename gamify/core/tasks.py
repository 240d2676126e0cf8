"""
FILE: gamify/core/tasks.py
PURPOSE: Ordered, mutable task collection (one instance per category)
EXPORTS:
  - is_blank(name) -> bool
  - find_by_name(items, name) -> item | None
  - LazyView (restartable filtered view)
  - TaskCollection (class)
DEPENDENCIES:
  - logging (stdlib)
  - typing (stdlib)
  - gamify.core.models (Task)
  - gamify.core.ledger (ScoringLedger)
NOTES:
  - Insertion order preserved, never sorted
  - Blank names are silently rejected (add returns None)
  - remove() matches by identity and ignores absent tasks
  - The ledger is injected at construction; completion awards into it
"""

import logging
from typing import Callable, Iterator, List, Optional

from .ledger import ScoringLedger
from .models import Task

logger = logging.getLogger(__name__)


def is_blank(name: Optional[str]) -> bool:
    """True for None, empty, or whitespace-only names."""
    return name is None or not name.strip()


def find_by_name(items, name: str):
    """First item with exactly this name, else the first case-insensitive match."""
    for item in items:
        if item.name == name:
            return item
    folded = name.strip().casefold()
    for item in items:
        if item.name.strip().casefold() == folded:
            return item
    return None


class LazyView:
    """
    Filtered view over a live list.

    Each iteration re-reads the list, so the view can be iterated any
    number of times and always reflects the latest mutations.
    """

    def __init__(self, source: List, predicate: Callable[[object], bool]):
        self._source = source
        self._predicate = predicate

    def __iter__(self) -> Iterator:
        return (item for item in list(self._source) if self._predicate(item))

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return any(True for _ in self)


class TaskCollection:
    """
    Ordered list of tasks for a single category.

    Attributes:
        category: Category name (e.g. "special")
        reward: Points awarded per completion in this category
    """

    def __init__(self, category: str, ledger: ScoringLedger, reward: int):
        self.category = category
        self.reward = reward
        self._ledger = ledger
        self._tasks: List[Task] = []

    def add(self, name: str) -> Optional[Task]:
        """
        Append a new pending task.

        Args:
            name: Task name (kept as typed; must be non-blank)

        Returns:
            The new Task, or None if the name was blank
        """
        if is_blank(name):
            logger.debug("Ignored blank task name in %s", self.category)
            return None
        task = Task(name)
        self._tasks.append(task)
        logger.debug("Added %s task %r", self.category, name)
        return task

    def remove(self, task: Task) -> bool:
        """
        Remove a task by identity.

        Returns:
            True if removed, False if it was not in this collection
        """
        for i, existing in enumerate(self._tasks):
            if existing is task:
                del self._tasks[i]
                logger.debug("Removed %s task %r", self.category, task.name)
                return True
        return False

    def list_pending(self) -> LazyView:
        """Tasks not yet done, in insertion order."""
        return LazyView(self._tasks, lambda task: not task.done)

    def complete(self, task: Task, reward_amount: Optional[int] = None) -> int:
        """
        Mark a task done and award points.

        Args:
            task: Task from this collection
            reward_amount: Points to award (defaults to the category reward)

        Returns:
            Points awarded; 0 if the task was already done or belongs elsewhere
        """
        if task not in self:
            logger.debug("Ignored completion of foreign task %r in %s", task.name, self.category)
            return 0
        amount = self.reward if reward_amount is None else reward_amount
        awarded = task.complete(self._ledger, amount)
        if awarded:
            logger.debug("Completed %s task %r (+%d)", self.category, task.name, awarded)
        return awarded

    def find(self, name: str) -> Optional[Task]:
        return find_by_name(self._tasks, name)

    def items(self) -> List[Task]:
        """Snapshot of all tasks in insertion order."""
        return list(self._tasks)

    def __contains__(self, task) -> bool:
        return any(existing is task for existing in self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def __len__(self) -> int:
        return len(self._tasks)

    def __repr__(self) -> str:
        return f"TaskCollection({self.category!r}, {len(self._tasks)} tasks)"
