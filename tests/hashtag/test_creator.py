"""Tests for the full hashtag creation pipeline.

Tests cover:
- Request parsing and the missing-concept failure
- End-to-end scenarios with a fixed clock
- Selection invariants across a spread of requests
- Wire-format serialization of the result
"""

from __future__ import annotations

import pytest

from yt_hashtag_creator.errors import RequestValidationError
from yt_hashtag_creator.hashtag import (
    HashtagRequest,
    create_hashtags,
    generate_candidates,
    parse_request,
)
from yt_hashtag_creator.hashtag.constants import USAGE_TIPS
from yt_hashtag_creator.hashtag.reporter import MSG_NO_TRENDING


class TestParseRequest:
    """Test parse_request()."""

    def test_defaults(self):
        request = parse_request({"concept": "chess openings"})
        assert request.niche == "other"
        assert request.content_style == "tutorial"
        assert request.max_hashtags == 5
        assert request.prioritize_trending is True
        assert request.title is None
        assert request.target_audience is None
        assert request.primary_keywords == []
        assert request.secondary_keywords == []

    def test_accepts_wire_and_attribute_names(self):
        wire = parse_request({"concept": "x", "contentStyle": "vlog", "maxHashtags": 8})
        python = parse_request(HashtagRequest(concept="x", content_style="vlog", max_hashtags=8))
        assert wire.content_style == python.content_style == "vlog"
        assert wire.max_hashtags == python.max_hashtags == 8

    def test_extra_keyword_fields_ignored(self):
        request = parse_request({
            "concept": "x",
            "keywords": {"recommended": {"primary": [{"keyword": "chess", "volume": 900}]}},
        })
        assert [k.keyword for k in request.primary_keywords] == ["chess"]

    @pytest.mark.parametrize("payload", [
        {},
        {"concept": ""},
        {"concept": "   "},
        {"concept": None},
        None,
    ])
    def test_missing_concept(self, payload):
        with pytest.raises(RequestValidationError) as exc_info:
            parse_request(payload)
        assert str(exc_info.value) == "Concept is required"
        assert exc_info.value.field == "concept"

    def test_malformed_payload(self):
        with pytest.raises(RequestValidationError) as exc_info:
            parse_request({"concept": "x", "maxHashtags": "lots"})
        assert exc_info.value.field == "maxHashtags"

    @pytest.mark.parametrize("field,attribute,default", [
        ("niche", "niche", "other"),
        ("contentStyle", "content_style", "tutorial"),
        ("maxHashtags", "max_hashtags", 5),
        ("prioritizeTrending", "prioritize_trending", True),
    ])
    def test_null_uses_default(self, field, attribute, default):
        request = parse_request({"concept": "chess", field: None})
        assert getattr(request, attribute) == default

    def test_null_keyword_lists_are_empty(self, fixed_now):
        payload = {
            "concept": "chess",
            "keywords": {"recommended": {"primary": None, "secondary": None}},
        }
        request = parse_request(payload)
        assert request.primary_keywords == []
        assert request.secondary_keywords == []
        result = create_hashtags(payload, now=fixed_now)
        assert "keyword" not in result.statistics.by_type

    @pytest.mark.parametrize("value,expected", [(4.5, 4), (2.99, 2), (3.0, 3)])
    def test_fractional_max_is_truncated(self, value, expected):
        assert parse_request({"concept": "chess", "maxHashtags": value}).max_hashtags == expected


class TestGenerateCandidates:
    """Test generate_candidates()."""

    @pytest.mark.parametrize("audience", [None, ""])
    def test_no_audience_candidates_without_audience(self, audience):
        request = parse_request({"concept": "chess", "targetAudience": audience})
        candidates = generate_candidates(request, 2026)
        assert all(c.category.value != "audience" for c in candidates)

    def test_audience_candidates_last(self):
        request = parse_request({"concept": "chess", "targetAudience": "beginners"})
        candidates = generate_candidates(request, 2026)
        assert [c.tag for c in candidates[-3:]] == ["#beginners", "#beginnersfor", "#beginnerstips"]


class TestCookingScenario:
    """Cooking concept with trending tags disabled."""

    def test_selection(self, cooking_request, fixed_now):
        result = create_hashtags(cooking_request, now=fixed_now)
        assert result.all_hashtags == [
            "#cookingpastarecipes",
            "#cooking",
            "#pasta",
            "#recipe",
            "#food",
        ]
        assert result.hashtags[0].priority == 100
        assert [h.tag for h in result.above_title] == result.all_hashtags[:3]
        assert [h.tag for h in result.in_description] == ["#recipe", "#food"]

    def test_no_trending(self, cooking_request, fixed_now):
        result = create_hashtags(cooking_request, now=fixed_now)
        assert all(h.category.value != "trending" for h in result.hashtags)
        assert "trending" not in result.statistics.by_type
        assert MSG_NO_TRENDING in result.recommendations

    def test_statistics(self, cooking_request, fixed_now):
        result = create_hashtags(cooking_request, now=fixed_now)
        assert result.statistics.total == 5
        assert result.statistics.by_type == {"topic": 3, "niche": 2}
        assert result.statistics.average_length == 9  # 46 / 5

    def test_formats(self, cooking_request, fixed_now):
        result = create_hashtags(cooking_request, now=fixed_now)
        assert result.formatted.spaced == " ".join(result.all_hashtags)
        assert result.formatted.newline == "\n".join(result.all_hashtags)
        assert result.formatted.comma == ", ".join(result.all_hashtags)
        assert result.placement.above_title.formatted == "#cookingpastarecipes #cooking #pasta"
        assert result.placement.in_description.formatted == "#recipe #food"

    def test_echo_and_tips(self, cooking_request, fixed_now):
        result = create_hashtags(cooking_request, now=fixed_now)
        assert result.concept == "cooking pasta recipes"
        assert result.niche == "cooking"
        assert result.content_style == "tutorial"
        assert result.generated_at == fixed_now
        assert result.tips == list(USAGE_TIPS)
        assert len(result.tips) == 6


class TestTrendingScenario:
    """Trending tags use the injected year and tie-break by generator order."""

    def test_full_ranking(self, cooking_request, fixed_now):
        cooking_request.update(prioritizeTrending=True, maxHashtags=15)
        result = create_hashtags(cooking_request, now=fixed_now)
        assert [(h.tag, h.priority) for h in result.hashtags] == [
            ("#cookingpastarecipes", 100),
            ("#cooking", 90),
            ("#pasta", 85),
            ("#recipe", 65),
            ("#food", 60),
            ("#tutorial", 60),
            ("#howto", 55),
            ("#2026", 55),
            ("#cookingpastarecipes2026", 50),
            ("#viral", 45),
        ]

    def test_current_year_overrides_clock(self, cooking_request, fixed_now):
        cooking_request.update(prioritizeTrending=True, maxHashtags=15)
        result = create_hashtags(cooking_request, now=fixed_now, current_year=2030)
        assert "#2030" in result.all_hashtags
        assert "#2026" not in result.all_hashtags


class TestKeywordDeduplication:
    """The same keyword in primary and secondary survives once, from primary."""

    def test_primary_copy_survives(self, fixed_now):
        result = create_hashtags({
            "concept": "chess",
            "keywords": {
                "recommended": {
                    "primary": [{"keyword": "Chess Openings"}],
                    "secondary": [{"keyword": "chess openings"}],
                }
            },
            "maxHashtags": 15,
            "prioritizeTrending": False,
        }, now=fixed_now)
        matches = [h for h in result.hashtags if h.tag == "#chessopenings"]
        assert len(matches) == 1
        assert matches[0].priority == 80
        assert matches[0].reason == "Primary keyword"


class TestLimits:
    """Selection size limits."""

    def test_cap_is_fifteen(self, rich_request, fixed_now):
        result = create_hashtags(rich_request, now=fixed_now)
        assert len(result.hashtags) == 15
        assert result.all_hashtags[-1] == "#2026"

    def test_fewer_than_three(self, cooking_request, fixed_now):
        cooking_request["maxHashtags"] = 2
        result = create_hashtags(cooking_request, now=fixed_now)
        assert len(result.above_title) == 2
        assert result.in_description == []
        assert result.recommendations[0] == "Add at least 3 hashtags for optimal visibility above your title"

    def test_zero_requested(self, cooking_request, fixed_now):
        cooking_request["maxHashtags"] = 0
        result = create_hashtags(cooking_request, now=fixed_now)
        assert result.hashtags == []
        assert result.statistics.total == 0
        assert result.statistics.average_length == 0
        assert result.formatted.spaced == ""


INVARIANT_REQUESTS = [
    {"concept": "cooking pasta recipes", "niche": "cooking"},
    {"concept": "Speedrun Tips & Tricks!", "niche": "gaming", "contentStyle": "shorts", "maxHashtags": 15},
    {"concept": "tech", "niche": "tech", "contentStyle": "review", "title": "Tech Review: New Gadgets", "maxHashtags": 10},
    {"concept": "learn python", "niche": "education", "contentStyle": "educational",
     "targetAudience": "Beginners", "maxHashtags": 20},
    {"concept": "x", "niche": "unknown", "contentStyle": "unknown", "maxHashtags": 1},
    {"concept": "travel vlog", "niche": "travel", "contentStyle": "vlog", "maxHashtags": 3,
     "prioritizeTrending": False},
]


@pytest.mark.parametrize("payload", INVARIANT_REQUESTS)
class TestSelectionInvariants:
    """Properties that hold for every valid request."""

    def test_size_bound(self, payload, fixed_now):
        result = create_hashtags(payload, now=fixed_now)
        requested = payload.get("maxHashtags", 5)
        assert len(result.hashtags) <= min(requested, 15)

    def test_unique_case_insensitive(self, payload, fixed_now):
        result = create_hashtags(payload, now=fixed_now)
        lowered = [tag.lower() for tag in result.all_hashtags]
        assert len(lowered) == len(set(lowered))

    def test_placement_reconstructs_selection(self, payload, fixed_now):
        result = create_hashtags(payload, now=fixed_now)
        assert result.above_title + result.in_description == result.hashtags
        assert len(result.above_title) == min(3, len(result.hashtags))

    def test_sorted_by_priority(self, payload, fixed_now):
        result = create_hashtags(payload, now=fixed_now)
        priorities = [h.priority for h in result.hashtags]
        assert priorities == sorted(priorities, reverse=True)

    def test_tags_well_formed(self, payload, fixed_now):
        result = create_hashtags(payload, now=fixed_now)
        for tag in result.all_hashtags:
            assert tag.startswith("#")
            assert 3 <= len(tag) <= 100
            assert not any(ch.isspace() for ch in tag)


class TestSerialization:
    """Test HashtagResult.to_dict()."""

    def test_wire_keys(self, cooking_request, fixed_now):
        data = create_hashtags(cooking_request, now=fixed_now).to_dict()
        assert set(data) == {
            "concept",
            "niche",
            "contentStyle",
            "generatedAt",
            "hashtags",
            "placement",
            "allHashtags",
            "formatted",
            "statistics",
            "recommendations",
            "tips",
        }
        assert data["hashtags"][0] == {
            "hashtag": "#cookingpastarecipes",
            "type": "topic",
            "priority": 100,
            "reason": "Main video topic",
        }
        assert set(data["placement"]) == {"aboveTitle", "inDescription"}
        assert data["placement"]["aboveTitle"]["note"] == "These 3 hashtags will appear above your video title"
        assert data["statistics"] == {"total": 5, "byType": {"topic": 3, "niche": 2}, "averageLength": 9}
        assert data["generatedAt"].startswith("2026-03-14T09:30:00")
