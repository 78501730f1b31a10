"""
Service layer for StoryCraft.

Services hold the business logic and are independent of the HTTP layer, so
they can be used by the Flask route handlers, tests, or any other caller.
"""

from .story_validation_service import StoryValidationService, PublishValidator
from .publish_service import PublishGate, announce_coming_soon
from .share_service import StoryShareService

__all__ = [
    'StoryValidationService',
    'PublishValidator',
    'PublishGate',
    'announce_coming_soon',
    'StoryShareService',
]
