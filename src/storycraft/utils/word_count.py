"""
Word count validation.

Counts words the same way the editor does (runs of whitespace separate
words) and enforces the optional story length bound used before publishing.
"""

MAX_WORD_COUNT = 7500


class WordCountError(Exception):
    """Raised when word count exceeds maximum."""
    pass


class WordCountValidator:
    """Validates word count constraints for story content."""

    def __init__(self, max_words=MAX_WORD_COUNT):
        """
        Initialize validator.

        Args:
            max_words: Maximum allowed word count (default: 7500)
        """
        self.max_words = max_words

    def count_words(self, text):
        """
        Count words in text.

        Args:
            text: String to count words in (None counts as empty)

        Returns:
            Word count as integer

        Raises:
            TypeError: If text is neither a string nor None
        """
        if text is None:
            return 0
        if not isinstance(text, str):
            raise TypeError(
                f"count_words() expects a string, got {type(text).__name__}"
            )
        return len(text.split())

    def validate(self, text, raise_error=True):
        """
        Validate word count against maximum.

        Args:
            text: Text to validate
            raise_error: If True, raise WordCountError on violation

        Returns:
            Tuple of (word_count, is_valid)
        """
        word_count = self.count_words(text)
        is_valid = word_count <= self.max_words

        if not is_valid and raise_error:
            raise WordCountError(
                f"Word count {word_count} exceeds maximum of {self.max_words}"
            )

        return word_count, is_valid

    def get_remaining_words(self, text):
        """
        Get remaining words available.

        Args:
            text: Current text

        Returns:
            Number of words remaining before hitting limit
        """
        word_count = self.count_words(text)
        return max(0, self.max_words - word_count)
