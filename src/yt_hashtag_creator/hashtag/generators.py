"""Candidate hashtag generators.

Each generator is a pure function returning candidates in rank order.
Priorities follow ``base - rank * PRIORITY_STEP`` so that ties across
generators are broken by the order the generators run in.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from ..constants import (
    AUDIENCE_MODIFIER_PRIORITY,
    AUDIENCE_PRIORITY,
    AUDIENCE_TAG_MAX_LENGTH,
    KEYWORD_TAG_MAX_LENGTH,
    KEYWORD_TAG_MIN_LENGTH,
    NICHE_PRIORITY,
    NICHE_TAG_COUNT,
    PRIMARY_KEYWORD_COUNT,
    PRIMARY_KEYWORD_PRIORITY,
    PRIORITY_STEP,
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
    HashtagCategory,
)
from .constants import AUDIENCE_MODIFIERS, NICHE_HASHTAGS, STYLE_HASHTAGS, VIRAL_HASHTAG
from .models import HashtagCandidate, KeywordEntry
from .normalizer import compact, normalize, to_hashtag


def ranked_priority(base: int, rank: int) -> int:
    """Priority of the item at ``rank`` (0-based) within one generator."""
    return base - rank * PRIORITY_STEP


def _words(text: str, min_length: int, limit: int) -> list[str]:
    """First ``limit`` words of normalized text with at least ``min_length`` chars."""
    words = [word for word in normalize(text).split() if len(word) >= min_length]
    return words[:limit]


def generate_topic_hashtags(concept: str, title: str | None = None) -> list[HashtagCandidate]:
    """Generate tags from the video concept and, if given, its title.

    Produces the compacted concept (if short enough), the first two
    concept words longer than 3 chars, then the first two title words
    longer than 4 chars that this generator has not produced yet.
    """
    hashtags: list[HashtagCandidate] = []

    main_tag = to_hashtag(concept)
    if len(main_tag) <= TOPIC_TAG_MAX_LENGTH:
        hashtags.append(HashtagCandidate(
            tag=main_tag,
            category=HashtagCategory.TOPIC,
            priority=TOPIC_MAIN_PRIORITY,
            reason="Main video topic",
        ))

    for rank, word in enumerate(_words(concept, TOPIC_WORD_MIN_LENGTH, TOPIC_WORD_COUNT)):
        hashtags.append(HashtagCandidate(
            tag="#" + word,
            category=HashtagCategory.TOPIC,
            priority=ranked_priority(TOPIC_WORD_PRIORITY, rank),
            reason="Topic keyword",
        ))

    if title:
        for rank, word in enumerate(_words(title, TITLE_WORD_MIN_LENGTH, TITLE_WORD_COUNT)):
            tag = "#" + word
            if any(existing.tag == tag for existing in hashtags):
                continue
            hashtags.append(HashtagCandidate(
                tag=tag,
                category=HashtagCategory.TOPIC,
                priority=ranked_priority(TITLE_WORD_PRIORITY, rank),
                reason="Title keyword",
            ))

    return hashtags


def _keyword_candidates(
    keywords: Sequence[KeywordEntry],
    limit: int,
    base_priority: int,
    reason: str,
) -> list[HashtagCandidate]:
    hashtags: list[HashtagCandidate] = []
    for rank, entry in enumerate(keywords[:limit]):
        tag = to_hashtag(entry.keyword)
        if KEYWORD_TAG_MIN_LENGTH <= len(tag) <= KEYWORD_TAG_MAX_LENGTH:
            hashtags.append(HashtagCandidate(
                tag=tag,
                category=HashtagCategory.KEYWORD,
                priority=ranked_priority(base_priority, rank),
                reason=reason,
            ))
    return hashtags


def generate_keyword_hashtags(
    primary_keywords: Sequence[KeywordEntry] = (),
    secondary_keywords: Sequence[KeywordEntry] = (),
) -> list[HashtagCandidate]:
    """Generate tags from analyzer keywords (3 primary, 2 secondary)."""
    return (
        _keyword_candidates(
            primary_keywords, PRIMARY_KEYWORD_COUNT, PRIMARY_KEYWORD_PRIORITY, "Primary keyword"
        )
        + _keyword_candidates(
            secondary_keywords, SECONDARY_KEYWORD_COUNT, SECONDARY_KEYWORD_PRIORITY, "Secondary keyword"
        )
    )


def _table_candidates(
    tags: Iterable[str],
    category: HashtagCategory,
    base_priority: int,
    reason: str,
) -> list[HashtagCandidate]:
    return [
        HashtagCandidate(
            tag=tag,
            category=category,
            priority=ranked_priority(base_priority, rank),
            reason=reason,
        )
        for rank, tag in enumerate(tags)
    ]


def generate_niche_hashtags(niche: str) -> list[HashtagCandidate]:
    """Generate the predefined tags of a niche. Unknown niches yield nothing."""
    tags = NICHE_HASHTAGS.get(niche, ())[:NICHE_TAG_COUNT]
    return _table_candidates(tags, HashtagCategory.NICHE, NICHE_PRIORITY, f"{niche} niche hashtag")


def generate_style_hashtags(content_style: str) -> list[HashtagCandidate]:
    """Generate the predefined tags of a content style. Unknown styles yield nothing."""
    tags = STYLE_HASHTAGS.get(content_style, ())[:STYLE_TAG_COUNT]
    return _table_candidates(
        tags, HashtagCategory.STYLE, STYLE_PRIORITY, f"{content_style} content style"
    )


def generate_trending_hashtags(concept: str, year: int) -> list[HashtagCandidate]:
    """Generate the year, topic-plus-year and viral tags.

    Args:
        concept: Video concept.
        year: Year to stamp on the tags, normally the current year.
    """
    hashtags = [HashtagCandidate(
        tag=f"#{year}",
        category=HashtagCategory.TRENDING,
        priority=TRENDING_YEAR_PRIORITY,
        reason="Current year",
    )]

    concept_year = f"{to_hashtag(concept)}{year}"
    if len(concept_year) <= TRENDING_TAG_MAX_LENGTH:
        hashtags.append(HashtagCandidate(
            tag=concept_year,
            category=HashtagCategory.TRENDING,
            priority=TRENDING_TOPIC_YEAR_PRIORITY,
            reason="Topic + year trend",
        ))

    hashtags.append(HashtagCandidate(
        tag=VIRAL_HASHTAG,
        category=HashtagCategory.TRENDING,
        priority=TRENDING_VIRAL_PRIORITY,
        reason="Viral discovery",
    ))
    return hashtags


def generate_audience_hashtags(target_audience: str) -> list[HashtagCandidate]:
    """Generate the audience tag plus '<first word>for' / '<first word>tips'."""
    audience_clean = normalize(target_audience)
    hashtags = [HashtagCandidate(
        tag="#" + compact(audience_clean),
        category=HashtagCategory.AUDIENCE,
        priority=AUDIENCE_PRIORITY,
        reason=f"Target audience: {target_audience}",
    )]

    words = audience_clean.split()
    first_word = words[0] if words else ""
    for rank, modifier in enumerate(AUDIENCE_MODIFIERS):
        tag = "#" + first_word + modifier
        if len(tag) <= AUDIENCE_TAG_MAX_LENGTH:
            hashtags.append(HashtagCandidate(
                tag=tag,
                category=HashtagCategory.AUDIENCE,
                priority=ranked_priority(AUDIENCE_MODIFIER_PRIORITY, rank),
                reason="Audience modifier",
            ))
    return hashtags
