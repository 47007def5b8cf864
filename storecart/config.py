"""Configuration loading for the storecart system.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Catalog configuration
    catalog_api_url: str = Field(
        default="https://fakestoreapi.com",
        description="Base URL of the FakeStore-compatible catalog API",
    )
    catalog_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout for each catalog request in seconds",
    )

    # Stock simulation
    stock_random_seed: int | None = Field(
        default=None,
        description="Seed for availability draws (unset for non-reproducible draws)",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging",
    )

    @field_validator("catalog_api_url")
    @classmethod
    def validate_catalog_api_url(cls, v: str) -> str:
        """Ensure the catalog URL is set; drop any trailing slash."""
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("catalog_api_url must be a non-empty URL")
        return v

    @field_validator("catalog_timeout_seconds")
    @classmethod
    def validate_catalog_timeout(cls, v: float) -> float:
        """Ensure catalog timeout is positive."""
        if v <= 0:
            raise ValueError("catalog_timeout_seconds must be positive")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
