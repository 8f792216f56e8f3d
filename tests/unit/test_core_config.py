"""Tests for core configuration module."""

import os

import pytest
from pydantic import ValidationError

from alerthook.core.config import Settings, get_settings


def test_settings_defaults() -> None:
    """Test that settings have correct default values."""
    env_vars = [
        "WEBHOOK_URL",
        "WEBHOOK_KEY",
        "WEBHOOK_TRIGGER",
        "WEBHOOK_HASH_INPUT",
        "NET_TIMEOUT",
        "NET_MOCK",
    ]
    old_values = {}
    for var in env_vars:
        old_values[var] = os.environ.pop(var, None)

    try:
        settings = Settings(_env_file=None)  # type: ignore

        assert settings.app_name == "alerthook"
        assert settings.webhook_url == "https://api.example.com/testhook"
        assert settings.webhook_key == "abc123"
        assert settings.webhook_trigger == "no"
        assert settings.webhook_hash_input == "hello world"
        assert settings.net_timeout == 1.0
        assert settings.net_mock is False
    finally:
        for var, value in old_values.items():
            if value is not None:
                os.environ[var] = value


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that environment variables override defaults."""
    monkeypatch.setenv("WEBHOOK_URL", "https://hooks.internal/alert")
    monkeypatch.setenv("NET_MAX", "3")
    monkeypatch.setenv("NET_MOCK", "true")

    settings = Settings(_env_file=None)  # type: ignore

    assert settings.webhook_url == "https://hooks.internal/alert"
    assert settings.net_max == 3
    assert settings.net_mock is True


def test_settings_rejects_non_positive_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test timeout validation."""
    monkeypatch.setenv("NET_TIMEOUT", "0")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)  # type: ignore


def test_get_settings_cached() -> None:
    """Test that get_settings returns cached instance."""
    settings1 = get_settings()
    settings2 = get_settings()

    assert settings1 is settings2
