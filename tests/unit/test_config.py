"""Tests for configuration validation."""

import pytest
from pydantic import ValidationError

from retailops.core.config import Constants, Settings


def test_search_defaults() -> None:
    """Test shipped search defaults."""
    settings = Settings(_env_file=None)

    assert settings.search_default_limit == 10
    assert settings.search_default_threshold == 0.0
    assert settings.search_picker_limit == 20
    assert settings.search_auto_select_similarity == 0.8


def test_search_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test search settings are read from environment variables."""
    monkeypatch.setenv("SEARCH_DEFAULT_LIMIT", "5")
    monkeypatch.setenv("search_picker_limit", "50")

    settings = Settings(_env_file=None)

    assert settings.search_default_limit == 5
    assert settings.search_picker_limit == 50


def test_negative_limit_rejected() -> None:
    """Test a negative default limit fails validation."""
    with pytest.raises(ValidationError, match="search_default_limit"):
        Settings(_env_file=None, search_default_limit=-1)


def test_auto_select_similarity_bounded() -> None:
    """Test the auto-select similarity must be a valid similarity."""
    with pytest.raises(ValidationError, match="search_auto_select_similarity"):
        Settings(_env_file=None, search_auto_select_similarity=1.5)


def test_logfire_token_optional() -> None:
    """Test Logfire stays optional."""
    settings = Settings(_env_file=None)

    assert settings.logfire_token is None


def test_score_bands_are_ordered() -> None:
    """Test each match band sits above the next, with room for similarity and length bonus."""
    max_bonus = Constants.LENGTH_BONUS_PIVOT / Constants.LENGTH_BONUS_DIVISOR

    assert Constants.SCORE_EXACT > Constants.SCORE_STARTS_WITH + 1 + max_bonus
    assert Constants.SCORE_STARTS_WITH > Constants.SCORE_CONTAINS + 1 + max_bonus
    assert Constants.SCORE_WORD_MATCH > 1 + max_bonus
    assert Constants.SCORE_CONTAINS > Constants.SCORE_WORD_MATCH


def test_score_buckets_are_ordered() -> None:
    """Test bucket thresholds descend from high to low."""
    assert Constants.SCORE_BUCKET_HIGH > Constants.SCORE_BUCKET_MEDIUM > Constants.SCORE_BUCKET_LOW > 0
