"""Hashtag creation pipeline.

Runs the six generators, deduplicates and ranks their candidates, selects
the top tags and assembles the result payload.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Mapping

from pydantic import ValidationError

from ..errors import RequestValidationError
from .constants import ABOVE_TITLE_NOTE, IN_DESCRIPTION_NOTE, USAGE_TIPS
from .generators import (
    generate_audience_hashtags,
    generate_keyword_hashtags,
    generate_niche_hashtags,
    generate_style_hashtags,
    generate_topic_hashtags,
    generate_trending_hashtags,
)
from .models import (
    FormattedHashtags,
    HashtagCandidate,
    HashtagRequest,
    HashtagResult,
    Placement,
    PlacementBucket,
)
from .ranking import aggregate, deduplicate, rank, select, split_placement
from .reporter import build_recommendations, build_statistics

_logger = logging.getLogger("hashtag_creator")


def parse_request(payload: HashtagRequest | Mapping[str, Any] | None) -> HashtagRequest:
    """Coerce a raw payload into a validated HashtagRequest.

    Raises:
        RequestValidationError: If the payload is malformed or has no concept.
    """
    if isinstance(payload, HashtagRequest):
        request = payload
    else:
        try:
            request = HashtagRequest.model_validate(payload or {})
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"]) or None
            raise RequestValidationError(f"Invalid request: {first['msg']}", field=field) from e

    if not request.concept or not request.concept.strip():
        raise RequestValidationError("Concept is required", field="concept")
    return request


def generate_candidates(request: HashtagRequest, year: int) -> list[HashtagCandidate]:
    """Run every applicable generator and concatenate their output."""
    groups = [
        generate_topic_hashtags(request.concept, request.title),
        generate_keyword_hashtags(request.primary_keywords, request.secondary_keywords),
        generate_niche_hashtags(request.niche),
        generate_style_hashtags(request.content_style),
    ]
    if request.prioritize_trending:
        groups.append(generate_trending_hashtags(request.concept, year))
    if request.target_audience:
        groups.append(generate_audience_hashtags(request.target_audience))
    return aggregate(*groups)


def _bucket(hashtags: list[HashtagCandidate], note: str) -> PlacementBucket:
    return PlacementBucket(
        hashtags=hashtags,
        formatted=" ".join(h.tag for h in hashtags),
        note=note,
    )


def create_hashtags(
    request: HashtagRequest | Mapping[str, Any],
    *,
    now: datetime | None = None,
    current_year: int | None = None,
) -> HashtagResult:
    """Create ranked YouTube hashtags for a video.

    Args:
        request: HashtagRequest or its wire-format dict.
        now: Timestamp for the result. Defaults to the current UTC time.
        current_year: Year used by the trending tags. Defaults to now.year.

    Returns:
        HashtagResult with the selection, placement buckets and report.

    Raises:
        RequestValidationError: If the concept is missing or the payload is malformed.
    """
    request = parse_request(request)
    now = now or datetime.now(timezone.utc)
    year = current_year if current_year is not None else now.year

    _logger.info(
        f"HASHTAG_CREATE_START | concept:{request.concept!r} | niche:{request.niche} | "
        f"style:{request.content_style} | max:{request.max_hashtags} | "
        f"trending:{request.prioritize_trending}"
    )

    candidates = generate_candidates(request, year)
    unique = deduplicate(candidates)
    selected = select(rank(unique), request.max_hashtags)
    above_title, in_description = split_placement(selected)
    tags = [h.tag for h in selected]

    _logger.debug(
        f"HASHTAG_PIPELINE | candidates:{len(candidates)} | unique:{len(unique)} | "
        f"selected:{len(selected)}"
    )

    result = HashtagResult(
        concept=request.concept,
        niche=request.niche,
        content_style=request.content_style,
        generated_at=now,
        hashtags=selected,
        placement=Placement(
            above_title=_bucket(above_title, ABOVE_TITLE_NOTE),
            in_description=_bucket(in_description, IN_DESCRIPTION_NOTE),
        ),
        all_hashtags=tags,
        formatted=FormattedHashtags(
            spaced=" ".join(tags),
            newline="\n".join(tags),
            comma=", ".join(tags),
        ),
        statistics=build_statistics(selected),
        recommendations=build_recommendations(selected, request.niche),
        tips=list(USAGE_TIPS),
    )

    _logger.info(f"HASHTAG_CREATE_END | concept:{request.concept!r} | selected:{tags}")
    return result
