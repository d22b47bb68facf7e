"""Enumerations for the YT Hashtag Creator.

Niche and content style values arrive as free strings from callers, so the
enums below name the supported values without rejecting unknown ones.
"""

from enum import Enum


class HashtagCategory(str, Enum):
    """Generator that produced a candidate hashtag."""

    TOPIC = "topic"
    KEYWORD = "keyword"
    NICHE = "niche"
    STYLE = "style"
    TRENDING = "trending"
    AUDIENCE = "audience"


class Niche(str, Enum):
    """Content niches with a predefined hashtag set."""

    TECH = "tech"
    GAMING = "gaming"
    EDUCATION = "education"
    LIFESTYLE = "lifestyle"
    BUSINESS = "business"
    FITNESS = "fitness"
    COOKING = "cooking"
    MUSIC = "music"
    BEAUTY = "beauty"
    TRAVEL = "travel"
    OTHER = "other"


class ContentStyle(str, Enum):
    """Video formats with a predefined hashtag set."""

    TUTORIAL = "tutorial"
    REVIEW = "review"
    VLOG = "vlog"
    ENTERTAINMENT = "entertainment"
    EDUCATIONAL = "educational"
    SHORTS = "shorts"
