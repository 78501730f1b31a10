"""
Tests for story validation and the notifying publish validator.
"""

import pytest
from src.storycraft.models import Severity
from src.storycraft.notifications import MISSING_INFORMATION
from src.storycraft.services import StoryValidationService, PublishValidator
from src.storycraft.utils.errors import ValidationError


def test_validate_publish_input_valid(validation_service, sample_story):
    """Test that a complete story passes and the title is stripped."""
    result = validation_service.validate_publish_input(
        "  " + sample_story["title"] + "  ", sample_story["content"]
    )
    assert result["title"] == sample_story["title"]
    assert result["content"] == sample_story["content"]
    assert result["word_count"] == 17


@pytest.mark.parametrize("title,content,field", [
    ("", "Content", "title"),
    (None, "Content", "title"),
    ("   ", "Content", "title"),
    ("Title", "", "content"),
    ("Title", None, "content"),
    ("Title", "\n\n", "content"),
])
def test_validate_publish_input_missing(validation_service, title, content, field):
    """Test that missing or blank fields are rejected with the field name."""
    with pytest.raises(ValidationError) as exc_info:
        validation_service.validate_publish_input(title, content)
    assert exc_info.value.details["field"] == field
    assert exc_info.value.status_code == 400


def test_validate_publish_input_wrong_type(validation_service):
    """Test that non-string fields are rejected."""
    with pytest.raises(ValidationError) as exc_info:
        validation_service.validate_publish_input(42, "Content")
    assert exc_info.value.details == {"field": "title", "type": "int"}


def test_validate_publish_input_title_too_long(validation_service):
    """Test that overly long titles are rejected."""
    with pytest.raises(ValidationError) as exc_info:
        validation_service.validate_publish_input("T" * 201, "Content")
    assert exc_info.value.details["max_length"] == StoryValidationService.MAX_TITLE_LENGTH


def test_validate_publish_input_too_many_words(validation_service):
    """Test that content over the word limit is rejected."""
    with pytest.raises(ValidationError) as exc_info:
        validation_service.validate_publish_input("Title", "word " * 51)
    assert exc_info.value.details["word_count"] == 51
    assert exc_info.value.details["max_words"] == 50


def test_validate_text_input(validation_service):
    """Test that any string, even empty, is accepted for cleanup."""
    assert validation_service.validate_text_input("") == ""
    assert validation_service.validate_text_input("some text") == "some text"


def test_validate_text_input_rejects_non_strings(validation_service):
    """Test that missing or non-string text is rejected."""
    with pytest.raises(ValidationError):
        validation_service.validate_text_input(None)
    with pytest.raises(ValidationError) as exc_info:
        validation_service.validate_text_input(["text"])
    assert exc_info.value.details["type"] == "list"


def test_publish_validator_accepts_valid_story(publish_validator, sink, sample_story):
    """Test that a valid story passes without notifications."""
    assert publish_validator.validate(sample_story["title"], sample_story["content"]) is True
    assert sink.notifications == []


def test_publish_validator_missing_information(publish_validator, sink):
    """Test that a blank title produces the missing information notification."""
    assert publish_validator.validate("", "Content") is False
    assert sink.notifications == [MISSING_INFORMATION]
    assert sink.notifications[0].severity is Severity.DESTRUCTIVE


def test_publish_validator_story_too_long(publish_validator, sink):
    """Test that long content is reported with the word counts."""
    assert publish_validator.validate("Title", "word " * 60) is False
    assert len(sink.notifications) == 1
    notification = sink.notifications[0]
    assert notification.title == "Story too long"
    assert "60" in notification.description
    assert "50" in notification.description


def test_publish_validator_title_too_long(publish_validator, sink):
    """Test that a long title gets its own notification."""
    assert publish_validator.validate("T" * 300, "Content") is False
    assert sink.notifications[0].title == "Title too long"


def test_publish_validator_default_service(sink):
    """Test that the validator builds a default validation service."""
    validator = PublishValidator(sink)
    assert validator.validation_service.max_words == 7500
