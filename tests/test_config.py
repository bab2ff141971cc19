"""Tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from dateclash.config import Settings, get_settings
from dateclash.errors import ConfigurationError


class TestSettingsDefaults:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DATECLASH_CALENDARIFIC_API_KEY", raising=False)
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.app_name == "dateclash"
        assert settings.data_dir == Path("data")
        assert settings.proxy_hubs == frozenset({"IL", "AE", "CN"})
        assert settings.analysis_padding_days == 0
        assert settings.calendarific_api_key is None

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATECLASH_ANALYSIS_PADDING_DAYS", "14")
        monkeypatch.setenv("DATECLASH_DEBUG", "true")
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.analysis_padding_days == 14
        assert settings.debug is True

    def test_proxy_hubs_from_env_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATECLASH_PROXY_HUBS", '["IL", "IN"]')
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.proxy_hubs == frozenset({"IL", "IN"})

    def test_negative_padding_rejected(self) -> None:
        with pytest.raises(ValueError):
            Settings(analysis_padding_days=-1, _env_file=None)  # type: ignore[call-arg]


class TestCalendarificKey:
    def test_missing_key_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DATECLASH_CALENDARIFIC_API_KEY", raising=False)
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        with pytest.raises(ConfigurationError, match="CALENDARIFIC"):
            settings.require_calendarific_key()

    def test_empty_key_raises(self) -> None:
        settings = Settings(calendarific_api_key="", _env_file=None)  # type: ignore[call-arg]
        with pytest.raises(ConfigurationError):
            settings.require_calendarific_key()

    def test_key_returned(self) -> None:
        settings = Settings(calendarific_api_key="secret", _env_file=None)  # type: ignore[call-arg]
        assert settings.require_calendarific_key() == "secret"

    def test_key_hidden_in_repr(self) -> None:
        settings = Settings(calendarific_api_key="secret", _env_file=None)  # type: ignore[call-arg]
        assert "secret" not in repr(settings)


class TestGetSettings:
    def test_cached(self) -> None:
        get_settings.cache_clear()
        assert get_settings() is get_settings()
