"""
FILE: gamify/core/daily.py
PURPOSE: Daily tasks - completion tracked by name for the current daily cycle
EXPORTS:
  - DailyResetTracker (class)
  - DailyTask (CompletableTask view over a Task)
  - DailyTaskCollection (TaskCollection subclass)
DEPENDENCIES:
  - logging (stdlib)
  - datetime (stdlib)
  - gamify.core.tasks (TaskCollection, LazyView)
  - gamify.core.constants (reset policies, DAILY_REWARD)
NOTES:
  - Two-track completion: daily tasks never touch Task.done; a name in the
    completion set means "done today" for every task carrying that name
  - "midnight" policy clears the set when the clock's date changes
  - "session" policy only clears on reset() or a fresh tracker
  - Deleting a task leaves its name in the set until the next reset
"""

import logging
from datetime import date
from typing import Callable, Iterator, List, Optional, Set

from .constants import (
    DAILY_REWARD,
    CATEGORY_DAILY,
    RESET_MIDNIGHT,
    VALID_RESET_POLICIES,
    DEFAULT_RESET_POLICY,
)
from .exceptions import InvalidInputError
from .ledger import ScoringLedger
from .models import Task
from .tasks import TaskCollection, LazyView

logger = logging.getLogger(__name__)


class DailyResetTracker:
    """
    Set of daily-task names completed in the current cycle.

    Args:
        policy: "midnight" (date rollover) or "session" (manual reset only)
        clock: Returns today's local date; injectable for tests
    """

    def __init__(
        self,
        policy: str = DEFAULT_RESET_POLICY,
        clock: Optional[Callable[[], date]] = None,
    ):
        if policy not in VALID_RESET_POLICIES:
            raise InvalidInputError(
                f"Invalid reset policy '{policy}'. Must be one of: {', '.join(VALID_RESET_POLICIES)}"
            )
        self.policy = policy
        self._clock = clock or date.today
        self._done: Set[str] = set()
        self._cycle_date = self._clock()

    @property
    def cycle_date(self) -> date:
        """Date the current cycle started on."""
        self._roll_over()
        return self._cycle_date

    def _roll_over(self) -> None:
        if self.policy != RESET_MIDNIGHT:
            return
        today = self._clock()
        if today != self._cycle_date:
            logger.info("Daily cycle rolled over from %s to %s", self._cycle_date, today)
            self._done.clear()
            self._cycle_date = today

    def mark_done(self, name: str) -> None:
        self._roll_over()
        self._done.add(name)

    def is_done_today(self, name: str) -> bool:
        self._roll_over()
        return name in self._done

    def completed_names(self) -> Set[str]:
        self._roll_over()
        return set(self._done)

    def reset(self) -> None:
        """Start a new cycle now, whatever the policy."""
        logger.info("Daily cycle reset (%d names cleared)", len(self._done))
        self._done.clear()
        self._cycle_date = self._clock()


class DailyTask:
    """Daily view of a Task: pending until its name is marked for today."""

    def __init__(self, task: Task, tracker: DailyResetTracker):
        self.task = task
        self._tracker = tracker

    @property
    def name(self) -> str:
        return self.task.name

    def is_pending(self) -> bool:
        return not self._tracker.is_done_today(self.task.name)

    def complete(self, ledger: ScoringLedger, reward: int) -> int:
        if not self.is_pending():
            return 0
        ledger.award(reward)
        self._tracker.mark_done(self.task.name)
        return reward

    def __repr__(self) -> str:
        return f"DailyTask(name={self.name!r}, completed_today={not self.is_pending()})"


class DailyTaskCollection(TaskCollection):
    """Task collection whose completion resets every daily cycle."""

    def __init__(
        self,
        ledger: ScoringLedger,
        tracker: DailyResetTracker,
        reward: int = DAILY_REWARD,
    ):
        super().__init__(CATEGORY_DAILY, ledger, reward)
        self.tracker = tracker

    def complete_today(self, task: Task, reward_amount: Optional[int] = None) -> int:
        """
        Record a daily task as done for today and award points.

        Does not set task.done.

        Returns:
            Points awarded; 0 if already done today or not in this collection
        """
        if task not in self:
            logger.debug("Ignored completion of foreign task %r in daily", task.name)
            return 0
        amount = self.reward if reward_amount is None else reward_amount
        awarded = DailyTask(task, self.tracker).complete(self._ledger, amount)
        if awarded:
            logger.debug("Completed daily task %r for today (+%d)", task.name, awarded)
        return awarded

    def list_pending_today(self) -> LazyView:
        """Tasks whose name is not in today's completion set, in insertion order."""
        return LazyView(self._tasks, lambda task: not self.tracker.is_done_today(task.name))

    # Generic collection API routes through the daily track
    def complete(self, task: Task, reward_amount: Optional[int] = None) -> int:
        return self.complete_today(task, reward_amount)

    def list_pending(self) -> LazyView:
        return self.list_pending_today()

    def entries(self) -> Iterator[DailyTask]:
        return (DailyTask(task, self.tracker) for task in self)

    def completed_today(self) -> List[Task]:
        return [task for task in self if self.tracker.is_done_today(task.name)]
