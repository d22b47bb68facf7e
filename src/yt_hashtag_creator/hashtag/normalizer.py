"""Text normalization for turning free text into hashtag bodies."""

from __future__ import annotations

import re

# ASCII only: hashtags are generated for a single language
_NON_WORD_PATTERN = re.compile(r"[^\w\s]", re.ASCII)
_WHITESPACE_PATTERN = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Lowercase text and strip everything but word characters and whitespace.

    Args:
        text: Free text such as a concept, title or keyword.

    Returns:
        Normalized text. Whitespace is kept so callers can split words.
    """
    if not text:
        return ""
    return _NON_WORD_PATTERN.sub("", text.lower())


def compact(text: str) -> str:
    """Remove all whitespace from text."""
    return _WHITESPACE_PATTERN.sub("", text)


def to_hashtag(text: str) -> str:
    """Build a single hashtag from free text, e.g. 'Pasta Night!' -> '#pastanight'."""
    return "#" + compact(normalize(text))
