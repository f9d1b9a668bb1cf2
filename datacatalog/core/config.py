"""
Application configuration using Pydantic Settings.

Supports environment variable overrides for all settings.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class CategorySettings(BaseSettings):
    """Placeholder category settings."""

    model_config = SettingsConfigDict(env_prefix="CATEGORY_")

    # The fallback category is synthesized in memory and never persisted
    placeholder_name: str = "Uncategorized"
    placeholder_id: str = "uncategorized"
    placeholder_description: str = "Data types that have not been assigned to a category."


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = "sqlite+aiosqlite:///./datacatalog.db"
    create_tables: bool = True

    # Application
    app_name: str = "Data Catalog"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_v1_prefix: str = "/api/v1"

    # CORS - comma-separated list of allowed origins
    allowed_origins: list[str] = ["*"]

    # Export
    export_filename: str = "urban_data_export"

    category: CategorySettings = CategorySettings()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
