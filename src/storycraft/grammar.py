"""
Grammar Cleanup

Deterministic rewrite pass for generated story prose. It fixes mechanical
defects only:
- whitespace runs inside a line
- the lowercase pronoun "i"
- contractions typed without an apostrophe
- "its" used where "it's" was meant
- missing full stops at paragraph ends
- lowercase sentence starts

Rules are regex rewrites applied in a fixed order; each rule sees the output
of the previous one. Words are never added or removed, only their case and
the surrounding punctuation and whitespace.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

Replacement = Union[str, Callable[["re.Match[str]"], str]]

CONTRACTIONS = {
    "im": "I'm",
    "dont": "don't",
    "wont": "won't",
    "cant": "can't",
}

# Words after which "its" is read as "it is" / "it has".
ITS_TRIGGER_WORDS = ("a", "the", "my", "your", "his", "her", "their")


@dataclass(frozen=True)
class RewriteRule:
    """A named pattern/replacement pair."""

    name: str
    pattern: "re.Pattern[str]"
    replacement: Replacement

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


@dataclass(frozen=True)
class NormalizationReport:
    """Normalized text plus the names of the rules that changed it."""

    text: str
    applied_rules: Tuple[str, ...]


def _fix_contraction(match: "re.Match[str]") -> str:
    word = match.group(0)
    fixed = CONTRACTIONS[word.lower()]
    # "Dont" keeps its capital, shouted "DONT" does not
    if word[0].isupper() and not word.isupper():
        return fixed[0].upper() + fixed[1:]
    return fixed


def _capitalize_sentence_start(match: "re.Match[str]") -> str:
    return match.group(1) + match.group(2).upper()


DEFAULT_RULES: Tuple[RewriteRule, ...] = (
    RewriteRule(
        "trim_line_endings",
        re.compile(r"[^\S\r\n]+(?=\r?\n|\Z)"),
        "",
    ),
    RewriteRule(
        "collapse_whitespace",
        re.compile(r"[^\S\r\n]{2,}|[^\S \r\n]"),
        " ",
    ),
    RewriteRule(
        "capitalize_pronoun_i",
        re.compile(r"\bi\b"),
        "I",
    ),
    RewriteRule(
        "repair_contractions",
        re.compile(r"\b(?:" + "|".join(CONTRACTIONS) + r")\b", re.IGNORECASE),
        _fix_contraction,
    ),
    RewriteRule(
        "its_to_it_is",
        re.compile(r"\b([Ii])ts\b(?= (?:" + "|".join(ITS_TRIGGER_WORDS) + r")\b)"),
        r"\1t's",
    ),
    RewriteRule(
        "terminate_paragraphs",
        re.compile(r"([a-z])(?=\r?\n)"),
        r"\1.",
    ),
    RewriteRule(
        "capitalize_sentences",
        re.compile(r"(^[\W\d_]*|[.!?]\s+)([a-z])"),
        _capitalize_sentence_start,
    ),
)


class TextNormalizer:
    """
    Apply an ordered sequence of rewrite rules to story text.

    The default rule order matters: whitespace is tidied before word-level
    fixes, and paragraph full stops are inserted before sentence starts are
    capitalized so the word after a new full stop is capitalized too.
    """

    def __init__(self, rules: Optional[Sequence[RewriteRule]] = None):
        """
        Initialize normalizer.

        Args:
            rules: Custom ordered rules (default: DEFAULT_RULES)
        """
        self.rules: Tuple[RewriteRule, ...] = tuple(DEFAULT_RULES if rules is None else rules)

    def normalize_with_report(self, text: str) -> NormalizationReport:
        """
        Normalize text and record which rules changed it.

        Args:
            text: Raw story text

        Returns:
            NormalizationReport with the cleaned text and applied rule names
        """
        applied: List[str] = []
        current = text
        for rule in self.rules:
            rewritten = rule.apply(current)
            if rewritten != current:
                logger.debug(f"Rule '{rule.name}' rewrote text ({len(current)} -> {len(rewritten)} chars)")
                applied.append(rule.name)
                current = rewritten
        return NormalizationReport(text=current, applied_rules=tuple(applied))

    def normalize(self, text: str) -> str:
        """Return text with all rules applied in order."""
        return self.normalize_with_report(text).text


def get_text_normalizer() -> TextNormalizer:
    """
    Get or create a singleton normalizer instance.

    Returns:
        TextNormalizer instance
    """
    global _normalizer_instance
    if '_normalizer_instance' not in globals():
        _normalizer_instance = TextNormalizer()
    return _normalizer_instance


def normalize(text: str) -> str:
    """Normalize text with the default rule set."""
    return get_text_normalizer().normalize(text)
