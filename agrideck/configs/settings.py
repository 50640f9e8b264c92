"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from agrideck.configs.base import BaseSettings
from agrideck.configs.database import DatabaseSettings
from agrideck.configs.gemini import GeminiSettings
from agrideck.configs.server import ServerSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    database: DatabaseSettings = DatabaseSettings()
    gemini: GeminiSettings = GeminiSettings()
    server: ServerSettings = ServerSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from agrideck.configs import get_settings
        settings = get_settings()
    """
    return Settings()
