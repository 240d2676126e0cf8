"""
FILE: gamify/core/ledger.py
PURPOSE: Scoring ledger - single owner of the point total
EXPORTS:
  - ScoringLedger (class)
DEPENDENCIES:
  - logging (stdlib)
  - gamify.core.exceptions (InvalidInputError)
NOTES:
  - Score only grows: award() is the sole mutation
  - Passed explicitly to whatever completes tasks (no module-level score)
"""

import logging

from .exceptions import InvalidInputError

logger = logging.getLogger(__name__)


class ScoringLedger:
    """Holds the point total and the award operation."""

    def __init__(self, initial: int = 0):
        if initial < 0:
            raise InvalidInputError("Initial score cannot be negative")
        self._score = initial

    @property
    def score(self) -> int:
        return self._score

    def award(self, amount: int) -> int:
        """
        Add points to the score.

        Args:
            amount: Points to add (must be positive)

        Returns:
            New score

        Raises:
            InvalidInputError: If amount is zero or negative
        """
        if amount <= 0:
            raise InvalidInputError(f"Award amount must be positive, got {amount}")
        self._score += amount
        logger.debug("Awarded %d points (score=%d)", amount, self._score)
        return self._score

    def __repr__(self) -> str:
        return f"ScoringLedger(score={self._score})"
