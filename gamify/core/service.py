"""
FILE: gamify/core/service.py
PURPOSE: Business logic layer - owns all tracker state and exposes user intents
EXPORTS:
  - normalize_category(name) -> str
  - GamifyService (class)
      on_add_task(category, name) -> Task | None
      on_delete_task(category, task) -> bool
      on_complete_task(category, task) -> int
      on_add_counter(name) -> CounterItem | None
      on_delete_counter(counter) -> bool
      on_increment(counter) -> int
      on_decrement(counter) -> int
      on_select_tab(index) -> Tab
      reset_daily() -> None
      score, active_view, tasks(category), pending(category), list_counters()
DEPENDENCIES:
  - gamify.core.ledger (ScoringLedger)
  - gamify.core.tasks (TaskCollection)
  - gamify.core.daily (DailyResetTracker, DailyTaskCollection)
  - gamify.core.counters (CounterCollection)
  - gamify.core.navigation (NavigationController, Tab)
  - gamify.core.config (Settings)
  - gamify.core.exceptions (InvalidInputError)
NOTES:
  - One service instance = one app session; nothing is module-level
  - Presentation layers call intents and re-read accessors to render
  - Rewards come from settings (defaults 2 / 5 / 10)
"""

import logging
from datetime import date
from typing import Callable, Dict, List, Optional

from .config import Settings, get_settings
from .constants import (
    CATEGORY_ALIASES,
    CATEGORY_DAILY,
    CATEGORY_SPECIAL,
    CATEGORY_HIGH_LEVEL,
    TASK_CATEGORIES,
)
from .counters import CounterCollection
from .daily import DailyResetTracker, DailyTaskCollection
from .exceptions import InvalidInputError
from .ledger import ScoringLedger
from .models import Task, CounterItem
from .navigation import NavigationController, Tab
from .tasks import TaskCollection

logger = logging.getLogger(__name__)


def normalize_category(name: str) -> str:
    """
    Map a user-typed category to its canonical name.

    Raises:
        InvalidInputError: If the category is unknown
    """
    key = (name or "").strip().lower()
    if key in CATEGORY_ALIASES:
        return CATEGORY_ALIASES[key]
    raise InvalidInputError(
        f"Invalid category '{name}'. Must be one of: {', '.join(TASK_CATEGORIES)}"
    )


class GamifyService:
    """
    Single owner of the tracker state.

    Args:
        settings: Rewards and daily reset policy (defaults from environment)
        clock: Returns today's date; drives the midnight rollover
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        clock: Optional[Callable[[], date]] = None,
    ):
        self.settings = settings or get_settings()
        rewards = self.settings.rewards()

        self.ledger = ScoringLedger()
        self.tracker = DailyResetTracker(self.settings.daily_reset, clock)
        self.daily = DailyTaskCollection(self.ledger, self.tracker, rewards[CATEGORY_DAILY])
        self.special = TaskCollection(CATEGORY_SPECIAL, self.ledger, rewards[CATEGORY_SPECIAL])
        self.high_level = TaskCollection(CATEGORY_HIGH_LEVEL, self.ledger, rewards[CATEGORY_HIGH_LEVEL])
        self.counters = CounterCollection()
        self.navigation = NavigationController()

        self._collections: Dict[str, TaskCollection] = {
            CATEGORY_DAILY: self.daily,
            CATEGORY_SPECIAL: self.special,
            CATEGORY_HIGH_LEVEL: self.high_level,
        }
        logger.debug("Service started (daily reset: %s)", self.settings.daily_reset)

    # --- Read accessors ---

    @property
    def score(self) -> int:
        return self.ledger.score

    @property
    def active_view(self) -> Tab:
        return self.navigation.selected_tab

    def collection(self, category: str) -> TaskCollection:
        """Task collection for a category name or alias."""
        return self._collections[normalize_category(category)]

    def reward_for(self, category: str) -> int:
        return self.collection(category).reward

    def tasks(self, category: str) -> List[Task]:
        """Every task in the category, done or not."""
        return self.collection(category).items()

    def pending(self, category: str) -> List[Task]:
        """
        Tasks still offered for completion.

        Daily: name not completed this cycle. Special/high-level: not done.
        """
        return list(self.collection(category).list_pending())

    def list_counters(self) -> List[CounterItem]:
        return self.counters.items()

    # --- Task intents ---

    def on_add_task(self, category: str, name: str) -> Optional[Task]:
        """
        Add a task to a category.

        Args:
            category: "daily", "special" or "high-level" (aliases accepted)
            name: Task name; blank names are ignored

        Returns:
            The new Task, or None for a blank name

        Raises:
            InvalidInputError: If the category is unknown
        """
        return self.collection(category).add(name)

    def on_delete_task(self, category: str, task: Task) -> bool:
        """Delete a task; False (no error) if it was not there."""
        return self.collection(category).remove(task)

    def on_complete_task(self, category: str, task: Task) -> int:
        """
        Complete a task using its category's track and reward.

        Returns:
            Points awarded (0 when nothing changed)
        """
        awarded = self.collection(category).complete(task)
        if awarded:
            logger.debug("Score is now %d", self.score)
        return awarded

    # --- Counter intents ---

    def on_add_counter(self, name: str) -> Optional[CounterItem]:
        return self.counters.add(name)

    def on_delete_counter(self, counter: CounterItem) -> bool:
        return self.counters.remove(counter)

    def on_increment(self, counter: CounterItem) -> int:
        return self.counters.increment(counter)

    def on_decrement(self, counter: CounterItem) -> int:
        return self.counters.decrement(counter)

    # --- Navigation / cycle ---

    def on_select_tab(self, index) -> Tab:
        """
        Select the visible tab.

        Raises:
            InvalidTabError: If index is outside 0..4
        """
        return self.navigation.select(index)

    def reset_daily(self) -> None:
        """Start a new daily cycle: every daily task is offered again."""
        self.tracker.reset()

    def snapshot(self) -> dict:
        """Plain-data view of the whole state."""
        tasks = {}
        for category, collection in self._collections.items():
            pending = list(collection.list_pending())
            tasks[category] = [
                {"name": t.name, "done": t.done, "pending": t in pending}
                for t in collection
            ]
        return {
            "score": self.score,
            "tab": self.navigation.selected_index,
            "tasks": tasks,
            "counters": [c.to_dict() for c in self.counters],
        }
