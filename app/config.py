# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values,
# including the feature flags that gate endpoints and pick the store variant.
#
# Usage:
#   from app.config import settings
#   print(settings.USE_EXPERIMENTAL_REPOSITORY)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Every setting has a default, so the service starts with no environment.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development

    All settings are accessed via the global `settings` instance, or
    via app.state.settings inside request handlers.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Feature Flags
    # -------------------------------------------------------------------------
    # Read on every request, so a changed value takes effect per request
    # rather than per process.

    USE_EXPERIMENTAL_REPOSITORY: bool = Field(
        default=False,
        description="Serve requests from the experimental forecast store"
    )

    ALLOW_GET_FORECAST_BY_DATE: bool = Field(
        default=True,
        description="Enable GET /forecasts/by-date"
    )

    # -------------------------------------------------------------------------
    # Forecast Store Settings
    # -------------------------------------------------------------------------

    V2_REPOSITORY_SUFFIX: str = Field(
        default=" (v2)",
        min_length=1,
        max_length=1000,
        description="Suffix the experimental store appends to summaries"
    )

    SEED_SAMPLE_DATA: bool = Field(
        default=True,
        description="Load one sample forecast into each store at startup"
    )

    # -------------------------------------------------------------------------
    # Request Logging
    # -------------------------------------------------------------------------

    MAX_REQUEST_BODY_SIZE_TO_LOG: int = Field(
        default=4096,
        ge=0,
        description="Request bodies larger than this (bytes) are not logged"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        # Load from .env file in project root
        env_file=".env",
        env_file_encoding="utf-8",
        # Treat empty env vars as unset so defaults apply
        env_ignore_empty=True,
        # Case-sensitive environment variable names
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
