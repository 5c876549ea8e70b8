"""
Configuration management for Cannon Coins.
Uses pydantic-settings for environment variable parsing.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

from cannon_coins.gameplay.constants import PLAY_WIDTH, PLAY_HEIGHT


class Settings(BaseSettings):
    """Application settings loaded from CANNON_* environment variables."""

    # Display
    play_width: int = Field(
        default=PLAY_WIDTH,
        gt=0,
        description="Play area width in pixels"
    )
    play_height: int = Field(
        default=PLAY_HEIGHT,
        gt=0,
        description="Play area height in pixels"
    )
    window_title: str = Field(default="Cannon Coins")
    fps: int = Field(
        default=60,
        gt=0,
        description="Target frame rate"
    )
    max_frame_ms: int = Field(
        default=100,
        gt=0,
        description="Longest stretch of game time a single frame may advance"
    )

    # Persistence
    highscore_file: str = Field(
        default="highscore.json",
        description="File holding the persisted high score"
    )

    # Randomness
    seed: Optional[int] = Field(
        default=None,
        description="Seed for ball placement. None means random"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ...)"
    )

    class Config:
        env_prefix = "CANNON_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
