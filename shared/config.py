"""
Centralized configuration for the Catalog Accounts backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., MONGODB_*, ACCESS_TOKEN_*).
"""

from datetime import timedelta
from functools import lru_cache
from typing import Any
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Catalog Accounts API"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # MongoDB
    mongodb_url: str = "mongodb://localhost:27017"
    mongodb_database: str = "catalog"
    mongodb_users_collection: str = "users"

    # Session tokens
    access_token_secret: str = ""
    refresh_token_secret: str = ""
    access_token_ttl: timedelta = timedelta(minutes=10)
    refresh_token_ttl: timedelta = timedelta(days=7)
    jwt_algorithm: str = "HS256"

    # Profiles
    toggle_max_attempts: int = 3

    @field_validator("access_token_ttl", "refresh_token_ttl", mode="before")
    @classmethod
    def _parse_seconds(cls, value: Any) -> Any:
        """Accept a plain number of seconds as well as ISO 8601 durations."""
        if isinstance(value, str) and value.strip().isdigit():
            return int(value.strip())
        return value

    @property
    def is_production(self) -> bool:
        """Whether the service runs with production cookie policy."""
        return self.environment.lower() == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
