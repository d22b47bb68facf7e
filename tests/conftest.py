"""Shared test fixtures and configuration.

Provides fixed clocks, sample requests and isolated settings so that
results do not depend on the wall clock or the developer's environment.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import pytest

from yt_hashtag_creator.config import get_settings

FIXED_YEAR = 2026


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Keep CLI runs from writing log files and reset cached settings."""
    monkeypatch.setenv("YT_HASHTAG_LOG_TO_FILE", "false")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fixed_now() -> datetime:
    """A fixed UTC timestamp in FIXED_YEAR."""
    return datetime(FIXED_YEAR, 3, 14, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def cooking_request() -> dict[str, Any]:
    """The cooking scenario with trending tags disabled."""
    return {
        "concept": "cooking pasta recipes",
        "niche": "cooking",
        "contentStyle": "tutorial",
        "maxHashtags": 5,
        "prioritizeTrending": False,
    }


@pytest.fixture
def rich_request() -> dict[str, Any]:
    """A request that feeds every generator and yields more than 15 unique tags."""
    return {
        "concept": "cooking pasta recipes",
        "title": "Homemade Italian Dinner Ideas",
        "keywords": {
            "recommended": {
                "primary": [
                    {"keyword": "quick meals"},
                    {"keyword": "weeknight dinner"},
                    {"keyword": "family food"},
                ],
                "secondary": [
                    {"keyword": "budget cooking"},
                    {"keyword": "meal prep"},
                ],
            }
        },
        "niche": "cooking",
        "contentStyle": "tutorial",
        "targetAudience": "busy parents",
        "maxHashtags": 20,
        "prioritizeTrending": True,
    }
