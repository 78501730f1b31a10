"""
Story validation service.

Handles input validation for story operations, including:
- Grammar-check text input
- Publish/share title and content validation
- The notifying validator consulted by the publish gate
"""

import logging
from typing import Dict, Any, Optional

from src.storycraft.utils.errors import ValidationError
from src.storycraft.utils.word_count import WordCountValidator, MAX_WORD_COUNT
from src.storycraft.notifications import (
    NotificationSink,
    MISSING_INFORMATION,
    story_too_long,
    title_too_long,
)

logger = logging.getLogger(__name__)


class StoryValidationService:
    """Service for validating story input parameters."""

    MAX_TITLE_LENGTH = 200

    def __init__(self, max_words: int = MAX_WORD_COUNT):
        """
        Initialize validation service.

        Args:
            max_words: Maximum allowed word count for story content
        """
        self.word_validator = WordCountValidator(max_words=max_words)

    @property
    def max_words(self) -> int:
        return self.word_validator.max_words

    def validate_text_input(self, text: Any, field: str = "text") -> str:
        """
        Validate free text sent for grammar cleanup.

        Empty text is allowed; only the type is checked.

        Args:
            text: Text to validate
            field: Field name for error details

        Returns:
            The validated text

        Raises:
            ValidationError: If text is missing or not a string
        """
        if text is None:
            raise ValidationError(
                f"'{field}' is required.",
                details={"field": field}
            )
        if not isinstance(text, str):
            raise ValidationError(
                f"'{field}' must be a string.",
                details={"field": field, "type": type(text).__name__}
            )
        return text

    def validate_publish_input(
        self,
        title: Optional[str],
        content: Optional[str]
    ) -> Dict[str, Any]:
        """
        Validate a story title and content for publishing or sharing.

        Args:
            title: Story title
            content: Story body text

        Returns:
            Dict with validated input:
                - title: str (stripped)
                - content: str
                - word_count: int

        Raises:
            ValidationError: If validation fails
        """
        for field, value in (("title", title), ("content", content)):
            if value is not None and not isinstance(value, str):
                raise ValidationError(
                    f"Story {field} must be a string.",
                    details={"field": field, "type": type(value).__name__}
                )
            if not value or not value.strip():
                raise ValidationError(
                    f"Story {field} is required.",
                    details={"field": field}
                )

        title = title.strip()
        if len(title) > self.MAX_TITLE_LENGTH:
            raise ValidationError(
                f"Story title is too long (maximum {self.MAX_TITLE_LENGTH} characters).",
                details={
                    "field": "title",
                    "length": len(title),
                    "max_length": self.MAX_TITLE_LENGTH
                }
            )

        word_count, is_valid = self.word_validator.validate(content, raise_error=False)
        if not is_valid:
            raise ValidationError(
                f"Story content is too long (maximum {self.max_words:,} words).",
                details={
                    "field": "content",
                    "word_count": word_count,
                    "max_words": self.max_words
                }
            )

        return {
            "title": title,
            "content": content,
            "word_count": word_count
        }


class PublishValidator:
    """
    Validator consulted by the publish gate.

    Returns a plain bool and reports the reason for a rejection itself,
    through its own notification sink.
    """

    def __init__(
        self,
        sink: NotificationSink,
        validation_service: Optional[StoryValidationService] = None
    ):
        """
        Initialize publish validator.

        Args:
            sink: Where rejection notifications go
            validation_service: Validation rules (default: StoryValidationService())
        """
        self.sink = sink
        self.validation_service = validation_service or StoryValidationService()

    def validate(self, title: Optional[str], content: Optional[str]) -> bool:
        """
        Check whether a story may be published.

        Args:
            title: Story title
            content: Story body text

        Returns:
            True if publishable, False otherwise (after notifying the sink)
        """
        try:
            self.validation_service.validate_publish_input(title, content)
        except ValidationError as e:
            logger.info(f"Story rejected for publishing: {e.message}")
            if "word_count" in e.details:
                self.sink.notify(story_too_long(e.details["word_count"], e.details["max_words"]))
            elif "max_length" in e.details:
                self.sink.notify(title_too_long(e.details["max_length"]))
            else:
                self.sink.notify(MISSING_INFORMATION)
            return False
        return True
