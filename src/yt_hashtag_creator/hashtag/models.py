"""Data models for hashtag generation.

Requests accept the camelCase names used on the wire as well as the
snake_case attribute names. Results serialize back to camelCase via
``to_dict()``.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from ..constants import DEFAULT_MAX_HASHTAGS, HashtagCategory


class HashtagCandidate(BaseModel):
    """A generated hashtag before or after ranking."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    tag: str = Field(alias="hashtag")
    category: HashtagCategory = Field(alias="type")
    priority: int
    reason: str = ""

    @property
    def length(self) -> int:
        """Tag length including the leading '#'."""
        return len(self.tag)


class KeywordEntry(BaseModel):
    """A keyword suggestion from an upstream keyword analyzer."""

    keyword: str


class RecommendedKeywords(BaseModel):
    """Primary and secondary keyword suggestions, best first."""

    primary: list[KeywordEntry] = Field(default_factory=list)
    secondary: list[KeywordEntry] = Field(default_factory=list)

    @field_validator("primary", "secondary", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        """Treat an explicit null list as empty."""
        return [] if v is None else v


class KeywordData(BaseModel):
    """Keyword analyzer output; only the recommended lists are used."""

    recommended: RecommendedKeywords | None = None


class HashtagRequest(BaseModel):
    """Input payload for a createHashtags call.

    Attributes:
        concept: Video concept/topic. Required and non-empty.
        title: Video title, mined for extra topic words.
        keywords: Keyword analyzer output.
        niche: Content niche. Unknown niches yield no niche tags. Default 'other'.
        content_style: Video format. Unknown styles yield no style tags. Default 'tutorial'.
        target_audience: Audience description, e.g. 'beginners'.
        max_hashtags: Requested hashtag count, capped at 15. Default 5.
        prioritize_trending: Include year/viral tags. Default True.
    """

    model_config = ConfigDict(populate_by_name=True)

    concept: str | None = None
    title: str | None = None
    keywords: KeywordData | None = None
    niche: str = "other"
    content_style: str = Field(default="tutorial", alias="contentStyle")
    target_audience: str | None = Field(default=None, alias="targetAudience")
    max_hashtags: int = Field(default=DEFAULT_MAX_HASHTAGS, alias="maxHashtags")
    prioritize_trending: bool = Field(default=True, alias="prioritizeTrending")

    @field_validator("niche", "content_style", "max_hashtags", "prioritize_trending", mode="before")
    @classmethod
    def null_as_default(cls, v: Any, info: ValidationInfo) -> Any:
        """Fall back to the field default when a caller sends null."""
        if v is None:
            return cls.model_fields[info.field_name].default
        return v

    @field_validator("max_hashtags", mode="before")
    @classmethod
    def truncate_fraction(cls, v: Any) -> Any:
        """Drop the fractional part of a finite float count (4.5 -> 4)."""
        if isinstance(v, float) and math.isfinite(v):
            return int(v)
        return v

    @property
    def primary_keywords(self) -> list[KeywordEntry]:
        if self.keywords and self.keywords.recommended:
            return self.keywords.recommended.primary
        return []

    @property
    def secondary_keywords(self) -> list[KeywordEntry]:
        if self.keywords and self.keywords.recommended:
            return self.keywords.recommended.secondary
        return []


class PlacementBucket(BaseModel):
    """Hashtags destined for one spot on the video page."""

    hashtags: list[HashtagCandidate] = Field(default_factory=list)
    formatted: str = ""
    note: str = ""


class Placement(BaseModel):
    """Above-title and description buckets."""

    model_config = ConfigDict(populate_by_name=True)

    above_title: PlacementBucket = Field(alias="aboveTitle")
    in_description: PlacementBucket = Field(alias="inDescription")


class FormattedHashtags(BaseModel):
    """Selected tags pre-joined for copy and paste."""

    spaced: str = ""
    newline: str = ""
    comma: str = ""


class HashtagStatistics(BaseModel):
    """Summary statistics over the selected tags."""

    model_config = ConfigDict(populate_by_name=True)

    total: int = 0
    by_type: dict[str, int] = Field(default_factory=dict, alias="byType")
    average_length: int = Field(default=0, alias="averageLength")


class HashtagResult(BaseModel):
    """Result payload produced by create_hashtags."""

    model_config = ConfigDict(populate_by_name=True)

    concept: str
    niche: str
    content_style: str = Field(alias="contentStyle")
    generated_at: datetime = Field(alias="generatedAt")
    hashtags: list[HashtagCandidate] = Field(default_factory=list)
    placement: Placement
    all_hashtags: list[str] = Field(default_factory=list, alias="allHashtags")
    formatted: FormattedHashtags = Field(default_factory=FormattedHashtags)
    statistics: HashtagStatistics = Field(default_factory=HashtagStatistics)
    recommendations: list[str] = Field(default_factory=list)
    tips: list[str] = Field(default_factory=list)

    @property
    def above_title(self) -> list[HashtagCandidate]:
        return self.placement.above_title.hashtags

    @property
    def in_description(self) -> list[HashtagCandidate]:
        return self.placement.in_description.hashtags

    def to_dict(self) -> dict[str, Any]:
        """Serialize the result with wire (camelCase) keys."""
        return self.model_dump(mode="json", by_alias=True)
