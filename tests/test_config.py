"""Tests for settings loading."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ftc_api.config import FTC_API_VERSION, FTC_BASE_URL, FTCSettings, Settings, get_settings
from ftc_api.seasons import DEFAULT_SEASON, Season


class TestFTCSettings:
    """Tests for FTC_ environment settings."""

    def test_defaults(self) -> None:
        settings = FTCSettings()
        assert settings.season is DEFAULT_SEASON
        assert settings.base_url == FTC_BASE_URL
        assert settings.api_version == FTC_API_VERSION
        assert settings.timeout == 30.0
        assert not settings.has_credentials

    def test_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("FTC_USERNAME", "user")
        monkeypatch.setenv("FTC_KEY", "key")
        monkeypatch.setenv("FTC_SEASON", "2022")
        monkeypatch.setenv("FTC_BASE_URL", "https://example.com/")

        settings = FTCSettings()

        assert settings.username == "user"
        assert settings.key.get_secret_value() == "key"
        assert settings.season is Season.POWER_PLAY
        assert settings.base_url == "https://example.com"
        assert settings.has_credentials

    def test_season_by_name(self, monkeypatch) -> None:
        monkeypatch.setenv("FTC_SEASON", "centerstage")
        assert FTCSettings().season is Season.CENTERSTAGE

    def test_token_only_counts_as_credentials(self) -> None:
        assert FTCSettings(token="dXNlcjprZXk=").has_credentials

    def test_key_is_secret(self) -> None:
        assert "hunter2" not in repr(FTCSettings(username="user", key="hunter2"))

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            FTCSettings(timeout=0)


class TestSettings:
    """Tests for the combined settings."""

    def test_validate_credentials(self, monkeypatch) -> None:
        assert not Settings().validate_ftc_credentials()
        monkeypatch.setenv("FTC_TOKEN", "dXNlcjprZXk=")
        assert Settings().validate_ftc_credentials()

    def test_log_level(self, monkeypatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert Settings().app.log_level == "DEBUG"

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_get_settings_reads_dotenv(self, tmp_path, monkeypatch) -> None:
        (tmp_path / ".env").write_text("FTC_USERNAME=from-dotenv\nFTC_KEY=k\n")
        monkeypatch.chdir(tmp_path)
        # load_dotenv writes to os.environ; register for cleanup
        monkeypatch.setenv("FTC_USERNAME", "")
        monkeypatch.delenv("FTC_USERNAME")
        monkeypatch.setenv("FTC_KEY", "")
        monkeypatch.delenv("FTC_KEY")
        get_settings.cache_clear()

        settings = get_settings()

        assert settings.ftc.username == "from-dotenv"
        assert settings.validate_ftc_credentials()
