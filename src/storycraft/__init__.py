"""
StoryCraft

Text cleanup and publish gating for a story-creation tool: a deterministic
grammar pass over generated prose, and the workflow that decides whether a
story may be published or shared.
"""

from .grammar import (
    DEFAULT_RULES,
    NormalizationReport,
    RewriteRule,
    TextNormalizer,
    get_text_normalizer,
    normalize,
)
from .models import Notification, Severity, PublishAttempt, PublishOutcome, ShareLink

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_RULES",
    "NormalizationReport",
    "RewriteRule",
    "TextNormalizer",
    "get_text_normalizer",
    "normalize",
    "Notification",
    "Severity",
    "PublishAttempt",
    "PublishOutcome",
    "ShareLink",
]
