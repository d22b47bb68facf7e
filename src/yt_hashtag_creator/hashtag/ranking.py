"""Aggregation, deduplication, ranking and selection of candidates."""

from __future__ import annotations

from itertools import chain
from typing import Iterable, Sequence

from ..constants import (
    YOUTUBE_ABOVE_TITLE_COUNT,
    YOUTUBE_HASHTAG_MAX_LENGTH,
    YOUTUBE_HASHTAG_MIN_LENGTH,
    YOUTUBE_MAX_HASHTAGS,
)
from .models import HashtagCandidate


def aggregate(*groups: Iterable[HashtagCandidate]) -> list[HashtagCandidate]:
    """Concatenate generator outputs in the order given."""
    return list(chain.from_iterable(groups))


def deduplicate(candidates: Iterable[HashtagCandidate]) -> list[HashtagCandidate]:
    """Keep the first candidate per case-insensitive tag and drop bad lengths.

    Length bounds apply to the full tag, '#' included.
    """
    seen: set[str] = set()
    unique: list[HashtagCandidate] = []
    for candidate in candidates:
        normalized = candidate.tag.lower()
        if normalized in seen:
            continue
        if not YOUTUBE_HASHTAG_MIN_LENGTH <= len(normalized) <= YOUTUBE_HASHTAG_MAX_LENGTH:
            continue
        seen.add(normalized)
        unique.append(candidate)
    return unique


def rank(candidates: Iterable[HashtagCandidate]) -> list[HashtagCandidate]:
    """Sort by descending priority. Equal priorities keep their input order."""
    return sorted(candidates, key=lambda candidate: -candidate.priority)


def effective_limit(requested: int) -> int:
    """Clamp a requested count to [0, YOUTUBE_MAX_HASHTAGS]."""
    return max(0, min(requested, YOUTUBE_MAX_HASHTAGS))


def select(ranked: Sequence[HashtagCandidate], requested: int) -> list[HashtagCandidate]:
    """Take the top candidates up to the effective limit."""
    return list(ranked[:effective_limit(requested)])


def split_placement(
    selected: Sequence[HashtagCandidate],
) -> tuple[list[HashtagCandidate], list[HashtagCandidate]]:
    """Split selected tags into (above_title, in_description).

    The above-title bucket holds up to 3 tags; fewer selected tags simply
    leave it short.
    """
    return list(selected[:YOUTUBE_ABOVE_TITLE_COUNT]), list(selected[YOUTUBE_ABOVE_TITLE_COUNT:])
