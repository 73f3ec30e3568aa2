"""Tests for GameSettings."""

import pytest
from pydantic import ValidationError

from storyecs import GameSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PROMPT", "DEBUG_COMMANDS", "LOG_LEVEL", "MAX_TURNS"):
        monkeypatch.delenv(f"STORYECS_{name}", raising=False)


def test_defaults():
    settings = GameSettings()

    assert settings.prompt == "> "
    assert settings.debug_commands is False
    assert settings.log_level == "WARNING"
    assert settings.max_turns is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("STORYECS_MAX_TURNS", "5")
    monkeypatch.setenv("STORYECS_DEBUG_COMMANDS", "true")
    monkeypatch.setenv("STORYECS_LOG_LEVEL", "DEBUG")

    settings = GameSettings()

    assert settings.max_turns == 5
    assert settings.debug_commands is True
    assert settings.log_level == "DEBUG"


def test_explicit_values_beat_environment(monkeypatch):
    monkeypatch.setenv("STORYECS_PROMPT", "? ")

    assert GameSettings(prompt=">> ").prompt == ">> "


def test_max_turns_must_be_positive():
    with pytest.raises(ValidationError):
        GameSettings(max_turns=0)


def test_log_level_is_checked():
    with pytest.raises(ValidationError):
        GameSettings(log_level="LOUD")
