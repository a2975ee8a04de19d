"""Unit tests for settings."""

import pytest
from pydantic import ValidationError as SettingsError

from doclineage.config import Settings, get_settings


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("DEFAULT_RETENTION_YEARS", raising=False)
    settings = Settings(_env_file=None)
    assert settings.database_url.endswith("/doclineage")
    assert settings.min_deletion_reason_length == 10
    assert settings.min_supersession_reason_length == 10
    assert settings.default_retention_years == 6
    assert settings.lock_timeout_ms == 5000
    assert settings.environment == "development"


def test_settings_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/records")
    monkeypatch.setenv("MIN_DELETION_REASON_LENGTH", "25")
    monkeypatch.setenv("ENVIRONMENT", "production")
    settings = Settings(_env_file=None)
    assert settings.database_url == "postgresql://u:p@db:5432/records"
    assert settings.min_deletion_reason_length == 25
    assert settings.environment == "production"


def test_settings_reject_invalid_values(monkeypatch) -> None:
    monkeypatch.setenv("MIN_DELETION_REASON_LENGTH", "0")
    with pytest.raises(SettingsError):
        Settings(_env_file=None)


def test_get_settings_is_cached() -> None:
    get_settings.cache_clear()
    assert get_settings() is get_settings()
    get_settings.cache_clear()
