from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError
from src.core.config import Settings, get_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("APP_NAME", "APP_ENV", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.app_name == "Formation Catalog"
    assert settings.environment == "local"
    assert settings.log_level == "INFO"
    assert settings.log_level_value == logging.INFO
    assert settings.log_json is True


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "staging")
    monkeypatch.setenv("LOG_LEVEL", " warning ")
    monkeypatch.setenv("LOG_JSON", "false")

    settings = Settings(_env_file=None)

    assert settings.environment == "staging"
    assert settings.log_level == "WARNING"
    assert settings.log_level_value == logging.WARNING
    assert settings.log_json is False


def test_unknown_log_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached(clean_settings: None) -> None:
    assert get_settings() is get_settings()
