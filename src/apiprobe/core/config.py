"""Configuration management using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from apiprobe.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from APIPROBE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="APIPROBE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # HTTP client
    http_timeout: float = Field(default=30.0, ge=1, le=120)
    http_retries: int = Field(default=0, ge=0, le=10)
    verify_tls: bool = Field(default=True)
    follow_redirects: bool = Field(default=True)

    # API Configuration
    api_host: str = Field(default="127.0.0.1")
    api_port: int = Field(default=8000)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    log_format: Literal["json", "text"] = Field(default="text")

    # CORS Configuration for the API (set APIPROBE_CORS_ORIGINS as a JSON list)
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="Allowed CORS origins for the scan API.",
    )
    cors_allow_credentials: bool = Field(default=False)

    @property
    def http_timeout_ms(self) -> int:
        return int(self.http_timeout * 1000)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def validate_settings(settings: Settings) -> None:
    """Check settings combinations that are valid individually but unsafe together.

    Raises:
        ConfigurationError: With the list of problems in ``details["errors"]``.
    """
    errors = []

    if not settings.verify_tls:
        errors.append("APIPROBE_VERIFY_TLS is disabled; TLS failures will not be reported")
    if "*" in settings.cors_origins and settings.cors_allow_credentials:
        errors.append("APIPROBE_CORS_ORIGINS '*' cannot be combined with credentials")

    if errors:
        raise ConfigurationError("Invalid configuration", details={"errors": errors})
