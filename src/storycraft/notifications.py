"""
Notification sinks and the notification payloads the core emits.

A sink only receives payloads; rendering them (toast, banner, JSON response)
belongs to whoever owns the sink.
"""

import logging
from typing import List, Protocol

from .models import Notification, Severity

logger = logging.getLogger(__name__)


class NotificationSink(Protocol):
    """Anything that can receive a notification payload."""

    def notify(self, notification: Notification) -> None:
        ...


class CollectingNotificationSink:
    """Sink that keeps every notification in emission order."""

    def __init__(self):
        self.notifications: List[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    def to_list(self) -> List[dict]:
        """Return collected notifications as JSON-ready dictionaries."""
        return [notification.to_dict() for notification in self.notifications]


class LoggingNotificationSink:
    """Sink that writes notifications to the log (destructive ones as warnings)."""

    def notify(self, notification: Notification) -> None:
        level = logging.WARNING if notification.severity is Severity.DESTRUCTIVE else logging.INFO
        logger.log(level, f"{notification.title}: {notification.description}")


# Payloads shown by the publish flow

LOGIN_REQUIRED = Notification(
    title="Login required",
    description="Please login to publish stories",
    severity=Severity.DESTRUCTIVE,
)

PUBLISH_COMING_SOON = Notification(
    title="Publishing feature coming soon!",
    description=(
        "We're working hard to bring you the ability to publish stories to our "
        "community. For now, you can share stories directly with friends using "
        "the Share button."
    ),
)

PUBLISH_FAILED = Notification(
    title="Publishing failed",
    description="There was an error publishing your story",
    severity=Severity.DESTRUCTIVE,
)

MISSING_INFORMATION = Notification(
    title="Missing information",
    description="Please provide both a title and content for your story",
    severity=Severity.DESTRUCTIVE,
)


def story_too_long(word_count: int, max_words: int) -> Notification:
    """Build the notification for content over the word limit."""
    return Notification(
        title="Story too long",
        description=f"Your story has {word_count:,} words. The maximum is {max_words:,}.",
        severity=Severity.DESTRUCTIVE,
    )


def title_too_long(max_length: int) -> Notification:
    """Build the notification for a title over the length limit."""
    return Notification(
        title="Title too long",
        description=f"Please keep your story title under {max_length} characters.",
        severity=Severity.DESTRUCTIVE,
    )
