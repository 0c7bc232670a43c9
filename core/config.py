"""
Application configuration using Pydantic Settings.

Each section reads its own prefixed environment variables (``DB_*``,
``SCHEDULER_*``, ``LOG_*``); ``Settings`` aggregates them together with the
Django-level options and also reads a ``.env`` file.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Literal
from urllib.parse import urlsplit, urlunsplit

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings."""

    model_config = SettingsConfigDict(env_prefix="DB_")

    url: str | None = Field(
        default=None,
        alias="DATABASE_URL",
        description="Full database URL; overrides the individual parameters",
    )
    name: str = Field(default="storefront", description="Database name")
    user: str = Field(default="postgres", description="Database user")
    password: SecretStr = Field(default=SecretStr("postgres"), description="Database password")
    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port", ge=1, le=65535)
    conn_max_age: int = Field(
        default=0,
        ge=0,
        description="Seconds to keep connections open; 0 closes them per request",
    )

    @property
    def connection_url(self) -> str:
        """Return ``DATABASE_URL`` if set, else a PostgreSQL URL from the parts."""
        if self.url:
            return self.url
        return (
            f"postgresql://{self.user}:{self.password.get_secret_value()}"
            f"@{self.host}:{self.port}/{self.name}"
        )

    @property
    def safe_url(self) -> str:
        """Connection URL with the password masked, for logs."""
        if not self.url:
            return f"postgresql://{self.user}@{self.host}:{self.port}/{self.name}"
        parts = urlsplit(self.url)
        if parts.password is None:
            return self.url
        netloc = parts.netloc.replace(f":{parts.password}@", ":***@", 1)
        return urlunsplit(parts._replace(netloc=netloc))


class SchedulerSettings(BaseSettings):
    """Settings for the cart reminder scheduler."""

    model_config = SettingsConfigDict(env_prefix="SCHEDULER_")

    timezone: str = Field(default="UTC", description="Timezone used by cron triggers")
    reminder_hour: int = Field(default=11, ge=0, le=23, description="Hour of the daily reminder")
    reminder_minute: int = Field(default=0, ge=0, le=59, description="Minute of the daily reminder")
    reminder_second: int = Field(default=0, ge=0, le=59, description="Second of the daily reminder")
    autostart: bool = Field(
        default=True,
        description="Start the background scheduler when the registry is first used",
    )


class LoggingSettings(BaseSettings):
    """Structured logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOG_", populate_by_name=True)

    level: str = Field(default="INFO", description="Minimum log level")
    json_format: bool = Field(
        default=False,
        alias="LOG_JSON",
        description="Render logs as JSON instead of console output",
    )

    @field_validator("level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Upper-case the configured level name."""
        return v.upper()


class Settings(BaseSettings):
    """Top-level settings consumed by the Django settings modules."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")
    secret_key: SecretStr = Field(
        default=SecretStr("django-insecure-change-me-in-production"),
        description="Django secret key",
    )
    allowed_hosts: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["localhost", "127.0.0.1"],
        description="Hosts Django will serve",
    )
    cors_allowed_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        description="Origins allowed to call the API from a browser",
    )

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    scheduler: SchedulerSettings = Field(default_factory=SchedulerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("allowed_hosts", "cors_allowed_origins", mode="before")
    @classmethod
    def split_comma_list(cls, v: str | list[str]) -> list[str]:
        """Accept comma-separated strings as well as lists."""
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return v

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_test(self) -> bool:
        return self.environment == "test"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings()
