# =============================================================================
# leetlab/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from leetlab.config import settings
#   print(settings.PORT)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
# =============================================================================

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every value has a development default, so the server starts with
    no configuration at all and listens on port 3000.
    """

    # -------------------------------------------------------------------------
    # Server
    # -------------------------------------------------------------------------

    PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port for the HTTP listener"
    )

    HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the HTTP listener to"
    )

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug logging"
    )

    # -------------------------------------------------------------------------
    # Routing
    # -------------------------------------------------------------------------

    AUTH_ROUTER: str = Field(
        default="leetlab.auth.routes:router",
        description="Import path (module:attribute) of the router mounted at /api/v1/auth"
    )

    # -------------------------------------------------------------------------
    # Body and cookie parsing
    # -------------------------------------------------------------------------

    JSON_BODY_LIMIT_KB: int = Field(
        default=100,
        ge=1,
        description="Maximum JSON request body size in KB"
    )

    COOKIE_SECRET: Optional[str] = Field(
        default=None,
        description="Secret for verifying signed cookies (s: prefix)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # PORT= (empty) falls back to the default
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def json_body_limit_bytes(self) -> int:
        """Convert the JSON body limit from KB to bytes."""
        return self.JSON_BODY_LIMIT_KB * 1024


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
settings = get_settings()
