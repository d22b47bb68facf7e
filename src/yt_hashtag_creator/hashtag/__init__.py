"""Hashtag generation module.

Provides:
- create_hashtags: Full pipeline from request to ranked, placed hashtags
- Generators: One function per candidate source (topic, keyword, niche, ...)
- Ranking helpers: deduplicate, rank, select, split_placement
- Models: HashtagRequest, HashtagCandidate, HashtagResult
"""

from .constants import NICHE_HASHTAGS, STYLE_HASHTAGS, USAGE_TIPS
from .creator import create_hashtags, generate_candidates, parse_request
from .generators import (
    generate_audience_hashtags,
    generate_keyword_hashtags,
    generate_niche_hashtags,
    generate_style_hashtags,
    generate_topic_hashtags,
    generate_trending_hashtags,
)
from .models import (
    HashtagCandidate,
    HashtagRequest,
    HashtagResult,
    HashtagStatistics,
    KeywordData,
    KeywordEntry,
    RecommendedKeywords,
)
from .normalizer import compact, normalize, to_hashtag
from .ranking import aggregate, deduplicate, rank, select, split_placement

__all__ = [
    "NICHE_HASHTAGS",
    "STYLE_HASHTAGS",
    "USAGE_TIPS",
    "create_hashtags",
    "generate_candidates",
    "parse_request",
    "generate_audience_hashtags",
    "generate_keyword_hashtags",
    "generate_niche_hashtags",
    "generate_style_hashtags",
    "generate_topic_hashtags",
    "generate_trending_hashtags",
    "HashtagCandidate",
    "HashtagRequest",
    "HashtagResult",
    "HashtagStatistics",
    "KeywordData",
    "KeywordEntry",
    "RecommendedKeywords",
    "compact",
    "normalize",
    "to_hashtag",
    "aggregate",
    "deduplicate",
    "rank",
    "select",
    "split_placement",
]
