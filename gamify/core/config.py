"""
Configuration management using Pydantic Settings.

Sources, lowest to highest priority:
1. Default values (from constants)
2. Environment variables prefixed with GAMIFY_
3. Keyword overrides (CLI options)
"""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DAILY_REWARD,
    SPECIAL_REWARD,
    HIGH_LEVEL_REWARD,
    DEFAULT_RESET_POLICY,
    CATEGORY_DAILY,
    CATEGORY_SPECIAL,
    CATEGORY_HIGH_LEVEL,
)


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="GAMIFY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    daily_reset: Literal["midnight", "session"] = DEFAULT_RESET_POLICY
    daily_reward: int = DAILY_REWARD
    special_reward: int = SPECIAL_REWARD
    high_level_reward: int = HIGH_LEVEL_REWARD
    log_level: str = "WARNING"

    @field_validator("daily_reward", "special_reward", "high_level_reward")
    @classmethod
    def _reward_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("rewards must be positive")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {', '.join(LOG_LEVELS)}")
        return level

    def rewards(self) -> dict:
        """Points per task category."""
        return {
            CATEGORY_DAILY: self.daily_reward,
            CATEGORY_SPECIAL: self.special_reward,
            CATEGORY_HIGH_LEVEL: self.high_level_reward,
        }


def get_settings(**overrides) -> Settings:
    """Build settings, ignoring overrides that were left as None."""
    return Settings(**{k: v for k, v in overrides.items() if v is not None})
