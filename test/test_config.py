from __future__ import annotations

import logging

import pytest

from personality_survey.core.config import Settings
from personality_survey.core.logging_config import configure_logging


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SURVEY_PAGE_TITLE", "SURVEY_PAGE_ICON", "LOG_LEVEL", "DEBUG_ATTACH", "DEBUG_PORT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.page.title == "Personality Survey"
    assert settings.page.layout == "centered"
    assert settings.log_level == logging.INFO
    assert settings.debug_attach is False
    assert settings.debug_port == 5678


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SURVEY_PAGE_TITLE", "  Team Vibes  ")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("DEBUG_ATTACH", "1")

    settings = Settings()

    assert settings.page.title == "Team Vibes"
    assert settings.log_level == logging.DEBUG
    assert settings.debug_attach is True


def test_blank_values_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SURVEY_PAGE_TITLE", "   ")
    monkeypatch.setenv("LOG_LEVEL", "")

    settings = Settings()

    assert settings.page.title == "Personality Survey"
    assert settings.log_level == logging.INFO


def test_unknown_log_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(RuntimeError):
        Settings()


def test_debug_port_must_be_an_integer(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEBUG_PORT", "not-a-port")

    with pytest.raises(RuntimeError):
        Settings()


def test_configure_logging_returns_package_logger() -> None:
    logger = configure_logging(logging.WARNING)

    assert logger.name == "personality_survey"
    assert logger.level == logging.WARNING

    logger.setLevel(logging.NOTSET)
