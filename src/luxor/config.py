"""Configuration system using pydantic-settings with environment variable loading."""

from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from luxor.models import HashRateUnit, MiningProfileName


class LuxorSettings(BaseSettings):
    """Luxor pool API connection settings."""

    model_config = SettingsConfigDict(
        env_prefix="LUXOR_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    api_key: SecretStr = SecretStr("")
    endpoint: str = "https://api.beta.luxor.tech/graphql"
    coin: MiningProfileName | None = None  # default mining profile for queries
    units: HashRateUnit | None = None  # default hash rate unit for conversions
    timeout_seconds: float = 30.0


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    log_level: str = "INFO"
    log_format: Literal["console", "json"] | None = None  # None defers to LOG_FORMAT
    luxor: LuxorSettings = Field(default_factory=LuxorSettings)  # reads LUXOR_* at load time
