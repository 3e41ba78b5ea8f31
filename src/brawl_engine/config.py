"""Application configuration using pydantic-settings."""

import random
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.enums import BattleMode


class Settings(BaseSettings):
    """Engine settings loaded from environment variables (prefix ``BRAWL_``)."""

    model_config = SettingsConfigDict(
        env_prefix="BRAWL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    debug: bool = False

    # Randomness
    random_seed: int | None = None  # Fixed seed for reproducible battles

    # Frame driver
    frame_interval_ms: int = Field(default=16, gt=0)  # ~60 ticks per second

    # Combat logging
    combat_log_enabled: bool = True

    # Exhibition runner
    exhibition_mode: BattleMode = BattleMode.TURN_BASED


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def make_rng(settings: Settings) -> random.Random:
    """Build the random source injected into the engine."""
    if settings.random_seed is None:
        return random.Random()
    return random.Random(settings.random_seed)
