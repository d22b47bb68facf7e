"""Statistics and recommendations for a hashtag selection."""

from __future__ import annotations

import math
from typing import Sequence

from ..constants import (
    RECOMMENDED_MAX_HASHTAGS,
    RECOMMENDED_MIN_HASHTAGS,
    HashtagCategory,
    Niche,
)
from .models import HashtagCandidate, HashtagStatistics

MSG_TOO_FEW = "Add at least 3 hashtags for optimal visibility above your title"
MSG_NO_TOPIC = "Include hashtags specific to your video topic"
MSG_NO_NICHE = "Add {niche}-specific hashtags to reach your target audience"
MSG_NO_TRENDING = "Consider adding trending hashtags for broader discovery"
MSG_TOO_MANY = "You have more than 5 hashtags - ensure the best 3 are listed first"
MSG_BALANCED = "Your hashtags are well-balanced for discovery!"


def count_by_category(hashtags: Sequence[HashtagCandidate]) -> dict[str, int]:
    """Count tags per category. Absent categories have no key."""
    counts: dict[str, int] = {}
    for hashtag in hashtags:
        key = hashtag.category.value
        counts[key] = counts.get(key, 0) + 1
    return counts


def average_length(hashtags: Sequence[HashtagCandidate]) -> int:
    """Mean tag length rounded half up, or 0 for an empty selection."""
    if not hashtags:
        return 0
    mean = sum(hashtag.length for hashtag in hashtags) / len(hashtags)
    return math.floor(mean + 0.5)


def build_statistics(hashtags: Sequence[HashtagCandidate]) -> HashtagStatistics:
    return HashtagStatistics(
        total=len(hashtags),
        by_type=count_by_category(hashtags),
        average_length=average_length(hashtags),
    )


def build_recommendations(hashtags: Sequence[HashtagCandidate], niche: str) -> list[str]:
    """Advice on the selection. Every rule is checked independently."""
    recommendations: list[str] = []
    counts = count_by_category(hashtags)

    if len(hashtags) < RECOMMENDED_MIN_HASHTAGS:
        recommendations.append(MSG_TOO_FEW)

    if HashtagCategory.TOPIC.value not in counts:
        recommendations.append(MSG_NO_TOPIC)

    if HashtagCategory.NICHE.value not in counts and niche != Niche.OTHER.value:
        recommendations.append(MSG_NO_NICHE.format(niche=niche))

    if HashtagCategory.TRENDING.value not in counts:
        recommendations.append(MSG_NO_TRENDING)

    if len(hashtags) > RECOMMENDED_MAX_HASHTAGS:
        recommendations.append(MSG_TOO_MANY)

    if not recommendations:
        recommendations.append(MSG_BALANCED)

    return recommendations
