"""
Runtime configuration for StoryCraft.

Values come from environment variables (app.py loads a .env file first).
Invalid values fail fast with a ValueError instead of silently falling back.
"""

import os
from dataclasses import dataclass
from typing import Optional

from .utils.word_count import MAX_WORD_COUNT

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def get_env_int(var_name: str, default: int, min_value: int = 1, max_value: int = 1_000_000) -> int:
    """Safely get and validate an integer environment variable."""
    value = os.getenv(var_name)
    if value is None:
        return default
    try:
        int_value = int(value)
    except ValueError:
        raise ValueError(f"{var_name} must be a valid integer, got '{value}'")
    if int_value < min_value or int_value > max_value:
        raise ValueError(
            f"{var_name} must be between {min_value} and {max_value}, got {int_value}"
        )
    return int_value


def get_env_str(var_name: str, default: str, allowed_values: Optional[list] = None) -> str:
    """Safely get and validate a string environment variable."""
    value = os.getenv(var_name, default)
    if allowed_values and value not in allowed_values:
        raise ValueError(
            f"{var_name} must be one of {allowed_values}, got '{value}'"
        )
    return value


@dataclass(frozen=True)
class Settings:
    """Resolved application settings."""

    log_level: str
    max_story_words: int
    share_base_url: str
    publish_rate_limit: str
    rate_limit_storage_uri: str
    debug: bool


def get_settings() -> Settings:
    """
    Read settings from the environment.

    Returns:
        Settings instance

    Raises:
        ValueError: If an environment variable holds an invalid value
    """
    debug = os.getenv("FLASK_ENV") == "development"
    return Settings(
        log_level=get_env_str(
            "STORYCRAFT_LOG_LEVEL",
            "DEBUG" if debug else "INFO",
            allowed_values=LOG_LEVELS,
        ),
        max_story_words=get_env_int("STORYCRAFT_MAX_STORY_WORDS", MAX_WORD_COUNT),
        share_base_url=get_env_str(
            "STORYCRAFT_SHARE_BASE_URL", "http://localhost:5000"
        ).rstrip("/"),
        publish_rate_limit=get_env_str("STORYCRAFT_PUBLISH_RATE_LIMIT", "10 per minute"),
        rate_limit_storage_uri=get_env_str("REDIS_URL", "memory://"),
        debug=debug,
    )
