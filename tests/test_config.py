"""
Tests for environment-driven configuration.
"""

import os
import pytest
from unittest.mock import patch

from src.storycraft.config import get_env_int, get_env_str, get_settings


def test_defaults():
    """Test settings when no variables are set."""
    with patch.dict(os.environ, {}, clear=True):
        settings = get_settings()
    assert settings.log_level == "INFO"
    assert settings.max_story_words == 7500
    assert settings.share_base_url == "http://localhost:5000"
    assert settings.publish_rate_limit == "10 per minute"
    assert settings.rate_limit_storage_uri == "memory://"
    assert settings.debug is False


def test_development_defaults_to_debug_logging():
    """Test that development mode turns on debug logging."""
    with patch.dict(os.environ, {"FLASK_ENV": "development"}, clear=True):
        settings = get_settings()
    assert settings.debug is True
    assert settings.log_level == "DEBUG"


def test_overrides():
    """Test that variables override defaults."""
    env = {
        "STORYCRAFT_LOG_LEVEL": "WARNING",
        "STORYCRAFT_MAX_STORY_WORDS": "1200",
        "STORYCRAFT_SHARE_BASE_URL": "https://stories.example.com/",
        "STORYCRAFT_PUBLISH_RATE_LIMIT": "3 per minute",
        "REDIS_URL": "redis://localhost:6379/0",
    }
    with patch.dict(os.environ, env, clear=True):
        settings = get_settings()
    assert settings.log_level == "WARNING"
    assert settings.max_story_words == 1200
    assert settings.share_base_url == "https://stories.example.com"
    assert settings.publish_rate_limit == "3 per minute"
    assert settings.rate_limit_storage_uri == "redis://localhost:6379/0"


def test_invalid_log_level():
    """Test that unknown log levels fail fast."""
    with patch.dict(os.environ, {"STORYCRAFT_LOG_LEVEL": "LOUD"}, clear=True):
        with pytest.raises(ValueError, match="STORYCRAFT_LOG_LEVEL must be one of"):
            get_settings()


def test_get_env_int_invalid():
    """Test integer parsing and range checks."""
    with patch.dict(os.environ, {"SOME_INT": "many"}):
        with pytest.raises(ValueError, match="must be a valid integer"):
            get_env_int("SOME_INT", 5)
    with patch.dict(os.environ, {"SOME_INT": "0"}):
        with pytest.raises(ValueError, match="must be between"):
            get_env_int("SOME_INT", 5)
    with patch.dict(os.environ, {"SOME_INT": "42"}):
        assert get_env_int("SOME_INT", 5) == 42


def test_get_env_str_default():
    """Test string default when the variable is absent."""
    with patch.dict(os.environ, {}, clear=True):
        assert get_env_str("MISSING_VAR", "fallback") == "fallback"
