"""
Utility modules for StoryCraft.

Modules:
- word_count: Word counting and the story length bound
- errors: API exceptions and Flask error handlers
"""

from .word_count import WordCountValidator, WordCountError, MAX_WORD_COUNT

__all__ = [
    "WordCountValidator",
    "WordCountError",
    "MAX_WORD_COUNT",
]
