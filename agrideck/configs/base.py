"""
Shared settings base.

Every AgriDeck settings class reads the same .env file and process
environment; fields here are the unprefixed, service-wide ones.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Service-wide settings (ENVIRONMENT, DEBUG, LOG_LEVEL)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Deployment the admin API runs in",
    )
    debug: bool = Field(default=False, description="Enable FastAPI debug tracebacks")
    log_level: str = Field(
        default="INFO",
        description="Root log level; DEBUG also logs each translation upsert",
    )
