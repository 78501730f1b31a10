"""
Shared pytest fixtures for test suite.

This module provides common fixtures used across multiple test files,
reducing duplication and ensuring consistency.
"""

import pytest

from src.storycraft.notifications import CollectingNotificationSink
from src.storycraft.services import (
    StoryValidationService,
    PublishValidator,
    PublishGate,
    StoryShareService,
)


class ProgressRecorder:
    """Stands in for the UI's in-progress flag setter and records every call."""

    def __init__(self):
        self.calls = []

    def __call__(self, value: bool) -> None:
        self.calls.append(value)


@pytest.fixture
def sink():
    """Notification sink that collects everything emitted."""
    return CollectingNotificationSink()


@pytest.fixture
def progress():
    """Recording in-progress flag setter."""
    return ProgressRecorder()


@pytest.fixture
def validation_service():
    """Validation service with a small word limit for length tests."""
    return StoryValidationService(max_words=50)


@pytest.fixture
def publish_validator(sink, validation_service):
    """Publish validator reporting into the shared sink."""
    return PublishValidator(sink, validation_service)


@pytest.fixture
def publish_gate(publish_validator, sink):
    """Publish gate using the default placeholder publisher."""
    return PublishGate(validator=publish_validator, sink=sink)


@pytest.fixture
def share_service():
    """Share service pointing at a fixed origin."""
    return StoryShareService("https://stories.example.com")


@pytest.fixture
def sample_story():
    """Sample story title and content."""
    return {
        "title": "The Lighthouse Keeper",
        "content": (
            "Mara kept the lighthouse for forty years.\n\n"
            "Every night she collected the voices the sea gave back."
        ),
    }
