"""Global constants package for the YT Hashtag Creator.

PACKAGE STRUCTURE:
-----------------
- limits.py   : YouTube limits, generator length bounds, priorities
- types.py    : Category/niche/style enums

USAGE EXAMPLES:
--------------
    from yt_hashtag_creator.constants import YOUTUBE_MAX_HASHTAGS
    from yt_hashtag_creator.constants import HashtagCategory
"""

from .limits import (
    AUDIENCE_MODIFIER_PRIORITY,
    AUDIENCE_PRIORITY,
    AUDIENCE_TAG_MAX_LENGTH,
    DEFAULT_MAX_HASHTAGS,
    KEYWORD_TAG_MAX_LENGTH,
    KEYWORD_TAG_MIN_LENGTH,
    NICHE_PRIORITY,
    NICHE_TAG_COUNT,
    PRIMARY_KEYWORD_COUNT,
    PRIMARY_KEYWORD_PRIORITY,
    PRIORITY_STEP,
    RECOMMENDED_MAX_HASHTAGS,
    RECOMMENDED_MIN_HASHTAGS,
    SECONDARY_KEYWORD_COUNT,
    SECONDARY_KEYWORD_PRIORITY,
    STYLE_PRIORITY,
    STYLE_TAG_COUNT,
    TITLE_WORD_COUNT,
    TITLE_WORD_MIN_LENGTH,
    TITLE_WORD_PRIORITY,
    TOPIC_MAIN_PRIORITY,
    TOPIC_TAG_MAX_LENGTH,
    TOPIC_WORD_COUNT,
    TOPIC_WORD_MIN_LENGTH,
    TOPIC_WORD_PRIORITY,
    TRENDING_TAG_MAX_LENGTH,
    TRENDING_TOPIC_YEAR_PRIORITY,
    TRENDING_VIRAL_PRIORITY,
    TRENDING_YEAR_PRIORITY,
    YOUTUBE_ABOVE_TITLE_COUNT,
    YOUTUBE_HASHTAG_MAX_LENGTH,
    YOUTUBE_HASHTAG_MIN_LENGTH,
    YOUTUBE_MAX_HASHTAGS,
)
from .types import ContentStyle, HashtagCategory, Niche

__all__ = [
    # Limits
    "YOUTUBE_MAX_HASHTAGS",
    "YOUTUBE_ABOVE_TITLE_COUNT",
    "YOUTUBE_HASHTAG_MIN_LENGTH",
    "YOUTUBE_HASHTAG_MAX_LENGTH",
    "RECOMMENDED_MIN_HASHTAGS",
    "RECOMMENDED_MAX_HASHTAGS",
    "DEFAULT_MAX_HASHTAGS",
    "TOPIC_TAG_MAX_LENGTH",
    "KEYWORD_TAG_MIN_LENGTH",
    "KEYWORD_TAG_MAX_LENGTH",
    "TRENDING_TAG_MAX_LENGTH",
    "AUDIENCE_TAG_MAX_LENGTH",
    "TOPIC_WORD_MIN_LENGTH",
    "TITLE_WORD_MIN_LENGTH",
    # Priorities
    "PRIORITY_STEP",
    "TOPIC_MAIN_PRIORITY",
    "TOPIC_WORD_PRIORITY",
    "TITLE_WORD_PRIORITY",
    "PRIMARY_KEYWORD_PRIORITY",
    "SECONDARY_KEYWORD_PRIORITY",
    "NICHE_PRIORITY",
    "STYLE_PRIORITY",
    "TRENDING_YEAR_PRIORITY",
    "TRENDING_TOPIC_YEAR_PRIORITY",
    "TRENDING_VIRAL_PRIORITY",
    "AUDIENCE_PRIORITY",
    "AUDIENCE_MODIFIER_PRIORITY",
    # Counts
    "TOPIC_WORD_COUNT",
    "TITLE_WORD_COUNT",
    "PRIMARY_KEYWORD_COUNT",
    "SECONDARY_KEYWORD_COUNT",
    "NICHE_TAG_COUNT",
    "STYLE_TAG_COUNT",
    # Types
    "HashtagCategory",
    "Niche",
    "ContentStyle",
]
