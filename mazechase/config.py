"""
Runtime configuration for the game host loop.
Uses pydantic-settings for environment variable parsing.

Game rules (maze, speed ratio, rewards) are fixed in constants.py.
Only the knobs of the host loop and display are configurable here.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import TICK_INTERVAL_MS, ANIMATION_INTERVAL_MS


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MAZECHASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Timing
    tick_interval_ms: int = Field(
        default=TICK_INTERVAL_MS,
        gt=0,
        description="Milliseconds between simulation ticks"
    )
    animation_interval_ms: int = Field(
        default=ANIMATION_INTERVAL_MS,
        gt=0,
        description="Milliseconds between mouth animation steps"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root log level for the game process"
    )

    # Display
    window_title: str = Field(default="Maze Chase")
    screen_width: int = Field(
        default=40,
        gt=0,
        description="Available screen width in character cells"
    )
    screen_height: int = Field(
        default=26,
        gt=0,
        description="Available screen height in character cells"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalise_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def tick_interval(self) -> float:
        """Tick interval in seconds."""
        return self.tick_interval_ms / 1000.0

    @property
    def animation_interval(self) -> float:
        """Animation interval in seconds."""
        return self.animation_interval_ms / 1000.0


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
