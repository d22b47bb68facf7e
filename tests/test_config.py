"""Tests for environment-driven settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from yt_hashtag_creator.config import Settings, get_settings


class TestSettings:
    """Test Settings defaults and overrides."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("YT_HASHTAG_LOG_TO_FILE")
        settings = Settings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.log_dir == Path("logs")
        assert settings.log_to_file is True
        assert settings.default_niche == "other"
        assert settings.default_content_style == "tutorial"
        assert settings.default_max_hashtags == 5
        assert settings.prioritize_trending is True

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("YT_HASHTAG_DEFAULT_MAX_HASHTAGS", "3")
        monkeypatch.setenv("YT_HASHTAG_PRIORITIZE_TRENDING", "false")
        monkeypatch.setenv("YT_HASHTAG_LOG_LEVEL", "DEBUG")
        settings = Settings(_env_file=None)
        assert settings.default_max_hashtags == 3
        assert settings.prioritize_trending is False
        assert settings.log_level == "DEBUG"

    def test_rejects_non_positive_default(self, monkeypatch):
        monkeypatch.setenv("YT_HASHTAG_DEFAULT_MAX_HASHTAGS", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestGetSettings:
    """Test the cached accessor."""

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_cache_clear_rereads_env(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("YT_HASHTAG_DEFAULT_NICHE", "gaming")
        get_settings.cache_clear()
        assert get_settings() is not first
        assert get_settings().default_niche == "gaming"
