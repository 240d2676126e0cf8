"""
FILE: gamify/repl/style.py
PURPOSE: Celebration messages for REPL feedback
EXPORTS:
  - celebrate_done(points) -> str
  - celebrate_add() -> str
  - celebrate_delete() -> str
  - celebrate_tick(delta) -> str
DEPENDENCIES:
  - random (for variety)
NOTES:
  - Subtle, one-line feedback; bigger rewards get a bigger flourish
"""

import random


DONE_CELEBRATIONS = [
    "✨ *sparkle* ✨",
    "🎉 *pop* 🎉",
    "⭐ *shine* ⭐",
    "💫 *twinkle* 💫",
]

# Used for rewards of 10 points or more
EPIC_CELEBRATIONS = [
    "🏆 *legendary* 🏆",
    "🐉 *quest slain* 🐉",
    "👑 *heroic* 👑",
]

ADD_CELEBRATIONS = [
    "📜 *quest accepted* 📜",
    "+ *added* +",
    "📝 *noted* 📝",
]

DELETE_ANIMATIONS = [
    "💨 *poof* 💨",
    "× *removed* ×",
    "∅ *gone* ∅",
]

EPIC_THRESHOLD = 10


def celebrate_done(points: int) -> str:
    """
    Celebration line for a completed task.

    Example:
        "⭐ *shine* ⭐ +5"
    """
    pool = EPIC_CELEBRATIONS if points >= EPIC_THRESHOLD else DONE_CELEBRATIONS
    return f"{random.choice(pool)} +{points}"


def celebrate_add() -> str:
    return random.choice(ADD_CELEBRATIONS)


def celebrate_delete() -> str:
    return random.choice(DELETE_ANIMATIONS)


def celebrate_tick(delta: int) -> str:
    """Arrow for a counter change: '▲' for up, '▼' for down."""
    return "▲" if delta > 0 else "▼"
