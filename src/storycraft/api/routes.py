"""
Flask route handlers for the StoryCraft API.

The presentation layer calls these endpoints with raw story strings and gets
back corrected text, word counts, share links, or the notifications produced
by a publish attempt.
"""

import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from flask import Flask
    from flask_limiter import Limiter

from flask import request, jsonify, current_app

from src.storycraft.grammar import get_text_normalizer
from src.storycraft.notifications import CollectingNotificationSink
from src.storycraft.services import (
    StoryValidationService,
    PublishValidator,
    PublishGate,
    StoryShareService,
)

logger = logging.getLogger(__name__)

# Header set by the upstream identity provider for authenticated requests
USER_ID_HEADER = "X-User-Id"


def _validation_service() -> StoryValidationService:
    return StoryValidationService(max_words=current_app.config["MAX_STORY_WORDS"])


def register_routes(flask_app: 'Flask', limiter_instance: 'Limiter') -> None:
    """
    Register all application routes.

    Args:
        flask_app: Flask application instance
        limiter_instance: Limiter instance for rate limiting
    """

    @flask_app.route('/api/health')
    def health():
        """
        Health check endpoint.

        Returns:
            JSON response with status "ok" indicating the service is running
        """
        return jsonify({"status": "ok"})

    @flask_app.route('/api/grammar-check', methods=['POST'])
    def grammar_check():
        """
        Clean up story text.

        Request Body (JSON):
            - text (str, required): Text to normalize

        Returns:
            JSON response with the corrected text and the rules that changed it
        """
        data = request.get_json(silent=True) or {}
        text = _validation_service().validate_text_input(data.get('text'))

        report = get_text_normalizer().normalize_with_report(text)
        return jsonify({
            "text": report.text,
            "applied_rules": list(report.applied_rules),
        })

    @flask_app.route('/api/word-count', methods=['POST'])
    def word_count():
        """
        Count words in story text.

        Request Body (JSON):
            - text (str, required): Text to count

        Returns:
            JSON response with word_count, max_words and remaining
        """
        data = request.get_json(silent=True) or {}
        service = _validation_service()
        text = service.validate_text_input(data.get('text'))

        validator = service.word_validator
        return jsonify({
            "word_count": validator.count_words(text),
            "max_words": validator.max_words,
            "remaining": validator.get_remaining_words(text),
        })

    @flask_app.route('/api/share-link', methods=['POST'])
    def share_link():
        """
        Build a shareable link for a story.

        Request Body (JSON):
            - title (str, required): Story title
            - content (str, required): Story body text

        Returns:
            JSON response with url and the clipboard message

        Raises:
            ValidationError: If title or content is missing or invalid
        """
        data = request.get_json(silent=True) or {}
        validated = _validation_service().validate_publish_input(
            title=data.get('title'),
            content=data.get('content')
        )

        share_service = StoryShareService(current_app.config["SHARE_BASE_URL"])
        link = share_service.build_share_link(validated["title"], validated["content"])
        return jsonify(link.to_dict())

    @flask_app.route('/api/publish', methods=['POST'])
    @limiter_instance.limit(lambda: current_app.config["PUBLISH_RATE_LIMIT"])
    def publish_story():
        """
        Attempt to publish a story.

        Request Body (JSON):
            - title (str, required): Story title
            - content (str, required): Story body text

        Headers:
            - X-User-Id: present when the user is signed in

        Returns:
            JSON response with the outcome ("rejected", "completed" or "failed")
            and every notification emitted along the way
        """
        data = request.get_json(silent=True) or {}
        is_signed_in = bool(request.headers.get(USER_ID_HEADER, "").strip())

        sink = CollectingNotificationSink()
        gate = PublishGate(
            validator=PublishValidator(sink, _validation_service()),
            sink=sink,
        )
        outcome = asyncio.run(gate.attempt_publish(
            data.get('title'),
            data.get('content'),
            is_signed_in,
            lambda value: logger.debug(f"Publishing in progress: {value}"),
        ))

        logger.info(f"Publish attempt finished: {outcome.value} (signed_in={is_signed_in})")
        return jsonify({
            "outcome": outcome.value,
            "notifications": sink.to_list(),
        })
