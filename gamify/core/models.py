"""
FILE: gamify/core/models.py
PURPOSE: Domain models for tasks and counters
EXPORTS:
  - CompletableTask (Protocol)
  - Task (dataclass)
  - CounterItem (dataclass)
DEPENDENCIES:
  - dataclasses (stdlib)
  - json (stdlib)
  - typing (stdlib)
NOTES:
  - Identity is by reference (eq=False): duplicate names are distinct entries
  - Task.done only moves false -> true
  - Daily tasks use name membership instead of Task.done (see core.daily.DailyTask)
"""

from dataclasses import dataclass, asdict
from typing import Protocol, runtime_checkable
import json


@runtime_checkable
class CompletableTask(Protocol):
    """Anything that can be listed as pending and completed for points."""

    name: str

    def is_pending(self) -> bool:
        ...

    def complete(self, ledger, reward: int) -> int:
        ...


@dataclass(eq=False)
class Task:
    """A named, one-way-completable task (permanent completion)."""

    name: str
    done: bool = False

    def is_pending(self) -> bool:
        return not self.done

    def complete(self, ledger, reward: int) -> int:
        """
        Mark done and award points.

        Args:
            ledger: ScoringLedger receiving the points
            reward: Points for this task's category

        Returns:
            Points awarded (0 if the task was already done)
        """
        if self.done:
            return 0
        ledger.award(reward)
        self.done = True
        return reward

    def to_dict(self) -> dict:
        return asdict(self)

    def to_json(self) -> str:
        """Serialize task to JSON string."""
        return json.dumps(self.to_dict(), indent=2)


@dataclass(eq=False)
class CounterItem:
    """A named integer tally with no bounds."""

    name: str
    count: int = 0

    def to_dict(self) -> dict:
        return asdict(self)

    def to_json(self) -> str:
        """Serialize counter to JSON string."""
        return json.dumps(self.to_dict(), indent=2)
