"""
Configuration management for the FTC API client using pydantic-settings.

Environment variables are loaded from a .env file and validated on first use.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .seasons import DEFAULT_SEASON, Season, resolve_season

FTC_BASE_URL = "https://ftc-api.firstinspires.org"
FTC_API_VERSION = "v2.0"


class FTCSettings(BaseSettings):
    """FTC Events API credentials and connection settings."""

    username: str = Field(default="", description="FTC Events API username")
    key: SecretStr = Field(default=SecretStr(""), description="FTC Events API authorization key")
    token: SecretStr = Field(
        default=SecretStr(""),
        description="Pre-encoded token (base64 of username:key); overrides username/key",
    )
    season: Season = Field(default=DEFAULT_SEASON, description="Season to query")
    base_url: str = Field(default=FTC_BASE_URL, description="API base URL")
    api_version: str = Field(default=FTC_API_VERSION, description="API version path segment")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")

    model_config = SettingsConfigDict(env_prefix="FTC_")

    @field_validator("season", mode="before")
    @classmethod
    def parse_season(cls, v: Season | int | str) -> Season:
        """Accept a year or a season name."""
        return resolve_season(v)

    @field_validator("base_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Paths are joined with a leading slash."""
        return v.rstrip("/")

    @property
    def has_credentials(self) -> bool:
        """Check if a token or a username/key pair is configured."""
        if self.token.get_secret_value():
            return True
        return bool(self.username) and bool(self.key.get_secret_value())


class AppSettings(BaseSettings):
    """General application settings."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )

    model_config = SettingsConfigDict(env_prefix="")


class Settings(BaseSettings):
    """Main settings class combining all configuration sections."""

    ftc: FTCSettings = Field(default_factory=FTCSettings)
    app: AppSettings = Field(default_factory=AppSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    def validate_ftc_credentials(self) -> bool:
        """Check if FTC credentials are configured."""
        return self.ftc.has_credentials


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload settings.
    """
    from dotenv import load_dotenv

    env_paths = [
        Path(".env"),
        Path(__file__).parent.parent.parent / ".env",  # project root
    ]

    for env_path in env_paths:
        if env_path.exists():
            load_dotenv(env_path, override=False)
            break

    return Settings()
