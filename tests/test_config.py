"""Tests for configuration management."""

import logging

import pytest
from pydantic import ValidationError

from sheetfeed.config import Settings, configure_logging


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run each test away from any real .env and SHEETFEED_* vars."""
    for name in (
        "SHEETFEED_LOG_LEVEL",
        "SHEETFEED_TIMEOUT",
        "SHEETFEED_MAX_CONCURRENCY",
        "SHEETFEED_ACCESS_TOKEN",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_settings_has_defaults():
    """Settings should load without any environment."""
    settings = Settings()

    assert settings.log_level == "INFO"
    assert settings.timeout == 30.0
    assert settings.max_concurrency is None
    assert settings.access_token is None
    assert settings.max_connections == 10


def test_settings_loads_from_env(monkeypatch):
    """Prefixed environment variables should override defaults."""
    monkeypatch.setenv("SHEETFEED_TIMEOUT", "5")
    monkeypatch.setenv("SHEETFEED_MAX_CONCURRENCY", "4")
    monkeypatch.setenv("SHEETFEED_ACCESS_TOKEN", "ya29.token")

    settings = Settings()

    assert settings.timeout == 5.0
    assert settings.max_concurrency == 4
    assert settings.access_token == "ya29.token"


def test_settings_loads_from_dotenv(tmp_path):
    """Settings should read a .env file in the working directory."""
    (tmp_path / ".env").write_text("SHEETFEED_LOG_LEVEL=debug\n")

    settings = Settings()

    assert settings.log_level == "DEBUG"


def test_settings_validates_log_level(monkeypatch):
    """Settings should validate log level."""
    monkeypatch.setenv("SHEETFEED_LOG_LEVEL", "INVALID")

    with pytest.raises(ValidationError) as exc_info:
        Settings()

    assert "log_level must be one of" in str(exc_info.value)


def test_settings_normalizes_log_level(monkeypatch):
    """Log level should be uppercased."""
    monkeypatch.setenv("SHEETFEED_LOG_LEVEL", "warning")

    assert Settings().log_level == "WARNING"


def test_settings_rejects_zero_concurrency(monkeypatch):
    """max_concurrency must be at least 1 when set."""
    monkeypatch.setenv("SHEETFEED_MAX_CONCURRENCY", "0")

    with pytest.raises(ValidationError):
        Settings()


def test_settings_rejects_non_positive_timeout(monkeypatch):
    monkeypatch.setenv("SHEETFEED_TIMEOUT", "0")

    with pytest.raises(ValidationError):
        Settings()


def test_blank_access_token_is_none(monkeypatch):
    """An empty token should not produce an Authorization header."""
    monkeypatch.setenv("SHEETFEED_ACCESS_TOKEN", "   ")

    assert Settings().access_token is None


def test_configure_logging_applies_level(mocker):
    """configure_logging should pass the resolved level to basicConfig."""
    basic_config = mocker.patch("sheetfeed.config.logging.basicConfig")

    configure_logging("debug")

    basic_config.assert_called_once()
    assert basic_config.call_args.kwargs["level"] == logging.DEBUG
