"""Tests for environment configuration."""

import pytest

from alexa_skill_kit.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that verification is on with a 150 second tolerance by default."""
    for name in ("APPLICATION_ID", "IGNORE_APPLICATION_ID", "IGNORE_TIMESTAMP", "TIMESTAMP_TOLERANCE"):
        monkeypatch.delenv(f"ALEXA_SKILL_{name}", raising=False)

    settings = Settings()

    assert settings.application_id == ""
    assert settings.ignore_application_id is False
    assert settings.ignore_timestamp is False
    assert settings.timestamp_tolerance == 150
    assert settings.service_name == "alexa-skill-kit"


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that ALEXA_SKILL_* variables configure the skill."""
    monkeypatch.setenv("ALEXA_SKILL_APPLICATION_ID", "amzn1.ask.skill.ENV")
    monkeypatch.setenv("ALEXA_SKILL_IGNORE_TIMESTAMP", "true")
    monkeypatch.setenv("ALEXA_SKILL_TIMESTAMP_TOLERANCE", "30")

    settings = Settings()

    assert settings.application_id == "amzn1.ask.skill.ENV"
    assert settings.ignore_timestamp is True
    assert settings.timestamp_tolerance == 30
