"""
FILE: gamify/core/constants.py
PURPOSE: Constants used throughout the application
EXPORTS:
  - CATEGORY_* / TASK_CATEGORIES: Task category names
  - DAILY_REWARD / SPECIAL_REWARD / HIGH_LEVEL_REWARD: Default points per category
  - TAB_TITLES / TAB_LABELS: Navigation titles and short labels
  - RESET_MIDNIGHT / RESET_SESSION / VALID_RESET_POLICIES: Daily cycle policies
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - Single source of truth for category names and reward values
"""

# Task categories
CATEGORY_DAILY = "daily"
CATEGORY_SPECIAL = "special"
CATEGORY_HIGH_LEVEL = "high-level"
TASK_CATEGORIES = (CATEGORY_DAILY, CATEGORY_SPECIAL, CATEGORY_HIGH_LEVEL)

# Accepted spellings for category names typed by the user
CATEGORY_ALIASES = {
    "daily": CATEGORY_DAILY,
    "d": CATEGORY_DAILY,
    "special": CATEGORY_SPECIAL,
    "s": CATEGORY_SPECIAL,
    "high-level": CATEGORY_HIGH_LEVEL,
    "high_level": CATEGORY_HIGH_LEVEL,
    "highlevel": CATEGORY_HIGH_LEVEL,
    "high": CATEGORY_HIGH_LEVEL,
    "h": CATEGORY_HIGH_LEVEL,
}

# Points
DAILY_REWARD = 2
SPECIAL_REWARD = 5
HIGH_LEVEL_REWARD = 10

# Navigation (index order matters)
TAB_TITLES = ("Daily Quests", "Quests", "Map", "Counter", "Personalize")
TAB_LABELS = ("D", "Q", "M", "C", "P")
DEFAULT_TAB_INDEX = 0

# Daily cycle reset policies
RESET_MIDNIGHT = "midnight"
RESET_SESSION = "session"
VALID_RESET_POLICIES = (RESET_MIDNIGHT, RESET_SESSION)
DEFAULT_RESET_POLICY = RESET_MIDNIGHT
