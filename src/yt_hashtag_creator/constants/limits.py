"""Limit constants for the YT Hashtag Creator.

This module contains all numeric constraints:
- YouTube hashtag limits
- Per-generator tag length bounds
- Priority bases used by the generators

AI CONTEXT:
-----------
The YOUTUBE_* limits come from YouTube's published hashtag rules. The
*_TAG_MAX_LENGTH bounds are stricter, generator-level limits that keep
generated tags readable. All lengths include the leading '#'.

MODIFICATION GUIDE:
------------------
- YOUTUBE_* limits: Check YouTube documentation before changing
- *_PRIORITY values: Changing them reorders every result, update tests
"""

from typing import Final

# =============================================================================
# YOUTUBE LIMITS
# =============================================================================

YOUTUBE_MAX_HASHTAGS: Final[int] = 15
"""Maximum hashtags YouTube honours on a single video."""

YOUTUBE_ABOVE_TITLE_COUNT: Final[int] = 3
"""Number of hashtags YouTube displays above the video title."""

YOUTUBE_HASHTAG_MIN_LENGTH: Final[int] = 3
"""Shortest tag kept after deduplication."""

YOUTUBE_HASHTAG_MAX_LENGTH: Final[int] = 100
"""Longest tag kept after deduplication."""

RECOMMENDED_MIN_HASHTAGS: Final[int] = 3
"""Below this count the above-title slots are not filled."""

RECOMMENDED_MAX_HASHTAGS: Final[int] = 5
"""Above this count the reporter reminds users to order their best tags."""

DEFAULT_MAX_HASHTAGS: Final[int] = 5
"""Requested hashtag count when the caller gives none."""


# =============================================================================
# GENERATOR LENGTH BOUNDS
# =============================================================================

TOPIC_TAG_MAX_LENGTH: Final[int] = 30
KEYWORD_TAG_MIN_LENGTH: Final[int] = 3
KEYWORD_TAG_MAX_LENGTH: Final[int] = 30
TRENDING_TAG_MAX_LENGTH: Final[int] = 30
AUDIENCE_TAG_MAX_LENGTH: Final[int] = 25

TOPIC_WORD_MIN_LENGTH: Final[int] = 4
"""Concept words shorter than this are not turned into tags."""

TITLE_WORD_MIN_LENGTH: Final[int] = 5
"""Title words shorter than this are not turned into tags."""


# =============================================================================
# PRIORITIES
# =============================================================================

PRIORITY_STEP: Final[int] = 5
"""Priority lost per rank within one generator."""

TOPIC_MAIN_PRIORITY: Final[int] = 100
TOPIC_WORD_PRIORITY: Final[int] = 90
TITLE_WORD_PRIORITY: Final[int] = 85
PRIMARY_KEYWORD_PRIORITY: Final[int] = 80
SECONDARY_KEYWORD_PRIORITY: Final[int] = 65
NICHE_PRIORITY: Final[int] = 70
STYLE_PRIORITY: Final[int] = 60
TRENDING_YEAR_PRIORITY: Final[int] = 55
TRENDING_TOPIC_YEAR_PRIORITY: Final[int] = 50
TRENDING_VIRAL_PRIORITY: Final[int] = 45
AUDIENCE_PRIORITY: Final[int] = 50
AUDIENCE_MODIFIER_PRIORITY: Final[int] = 45


# =============================================================================
# PER-GENERATOR COUNTS
# =============================================================================

TOPIC_WORD_COUNT: Final[int] = 2
TITLE_WORD_COUNT: Final[int] = 2
PRIMARY_KEYWORD_COUNT: Final[int] = 3
SECONDARY_KEYWORD_COUNT: Final[int] = 2
NICHE_TAG_COUNT: Final[int] = 3
STYLE_TAG_COUNT: Final[int] = 2
