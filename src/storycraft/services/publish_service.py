"""
Publish gate.

Decides whether a story may be published and runs the publish step:
1. The validator checks title and content (and reports its own rejections).
2. Signed-out users get a "Login required" notification; no work starts.
3. Otherwise the caller's in-progress flag is raised, the publisher runs,
   and the flag is lowered again on every exit path.

Failures never propagate to the caller. They become a "Publishing failed"
notification.
"""

import logging
from contextlib import contextmanager
from typing import Awaitable, Callable, Iterator, Optional, Protocol

from src.storycraft.models import PublishAttempt, PublishOutcome
from src.storycraft.notifications import (
    NotificationSink,
    LOGIN_REQUIRED,
    PUBLISH_COMING_SOON,
    PUBLISH_FAILED,
)

logger = logging.getLogger(__name__)

ProgressSetter = Callable[[bool], None]
Publisher = Callable[[PublishAttempt, NotificationSink], Awaitable[None]]


class Validator(Protocol):
    """Decides whether a title/content pair is publishable."""

    def validate(self, title: str, content: str) -> bool:
        ...


async def announce_coming_soon(attempt: PublishAttempt, sink: NotificationSink) -> None:
    """
    Placeholder publisher.

    Community publishing has no backend yet, so the publish step only tells
    the user the feature is on its way.
    """
    logger.info(f"Publish requested for '{attempt.title}'; publishing backend not available yet")
    sink.notify(PUBLISH_COMING_SOON)


@contextmanager
def in_progress(attempt: PublishAttempt, set_in_progress: ProgressSetter) -> Iterator[PublishAttempt]:
    """Hold the caller's in-progress flag for the duration of the block."""
    try:
        attempt.in_progress = True
        set_in_progress(True)
        yield attempt
    finally:
        attempt.in_progress = False
        set_in_progress(False)


class PublishGate:
    """Validation, login gating and the publish step for a single story."""

    def __init__(
        self,
        validator: Validator,
        sink: NotificationSink,
        publisher: Optional[Publisher] = None
    ):
        """
        Initialize publish gate.

        Args:
            validator: Content validator (reports its own rejections)
            sink: Where gate notifications go
            publisher: Coroutine performing the publish (default: announce_coming_soon)
        """
        self.validator = validator
        self.sink = sink
        self.publisher = publisher or announce_coming_soon

    async def attempt_publish(
        self,
        title: str,
        content: str,
        is_signed_in: bool,
        set_in_progress: ProgressSetter
    ) -> PublishOutcome:
        """
        Try to publish a story.

        Args:
            title: Story title
            content: Story body text
            is_signed_in: Whether the user is authenticated
            set_in_progress: Setter for the caller's "publishing" flag

        Returns:
            PublishOutcome describing where the attempt ended
        """
        try:
            is_valid = self.validator.validate(title, content)
        except Exception:
            logger.error("Validator raised while checking story for publishing", exc_info=True)
            self.sink.notify(PUBLISH_FAILED)
            return PublishOutcome.FAILED

        if not is_valid:
            return PublishOutcome.REJECTED

        if not is_signed_in:
            self.sink.notify(LOGIN_REQUIRED)
            return PublishOutcome.REJECTED

        try:
            attempt = PublishAttempt(title=title, content=content, is_signed_in=is_signed_in)
            with in_progress(attempt, set_in_progress):
                await self.publisher(attempt, self.sink)
        except Exception:
            logger.error(f"Error publishing story '{title}'", exc_info=True)
            self.sink.notify(PUBLISH_FAILED)
            return PublishOutcome.FAILED

        return PublishOutcome.COMPLETED
