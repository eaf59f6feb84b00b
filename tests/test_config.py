"""Tests for environment-driven settings."""

import pydantic
import pytest

from profanity.core.definitions import FilterTarget, ReplacementStrategy
from profanity.service.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("PROFANITY_DEFAULT_STRATEGY", raising=False)
    settings = Settings(_env_file=None)

    assert settings.default_strategy is ReplacementStrategy.ASTERISK
    assert settings.default_target is FilterTarget.BODY
    assert settings.pattern_cache_ttl_seconds == 3600.0
    assert settings.pattern_cache_max_entries == 1024
    assert settings.lexicon_manifest is None
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PROFANITY_DEFAULT_STRATEGY", "Bleep")
    monkeypatch.setenv("PROFANITY_DEFAULT_TARGET", "Title")
    monkeypatch.setenv("PROFANITY_PATTERN_CACHE_TTL_SECONDS", "0")
    monkeypatch.setenv("PROFANITY_LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.default_strategy is ReplacementStrategy.BLEEP
    assert settings.default_target is FilterTarget.TITLE
    assert settings.pattern_cache_ttl_seconds == 0
    assert settings.log_level == "DEBUG"


def test_manifest_must_exist(monkeypatch, tmp_path):
    monkeypatch.setenv("PROFANITY_LEXICON_MANIFEST", str(tmp_path / "missing.yaml"))
    with pytest.raises(pydantic.ValidationError):
        Settings(_env_file=None)


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("PROFANITY_LOG_LEVEL", "chatty")
    with pytest.raises(pydantic.ValidationError):
        Settings(_env_file=None)


def test_negative_ttl_rejected(monkeypatch):
    monkeypatch.setenv("PROFANITY_PATTERN_CACHE_TTL_SECONDS", "-1")
    with pytest.raises(pydantic.ValidationError):
        Settings(_env_file=None)
