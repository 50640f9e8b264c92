"""
Database configuration settings.

Manages connection parameters for the hosted Supabase Postgres instance.
Supports connection pooling and async operations.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from agrideck.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """Supabase Postgres configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SUPABASE_DB_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str | None = Field(
        default=None,
        description="Full SQLAlchemy URL; overrides the individual fields when set",
    )
    host: str = Field(default="localhost", description="Postgres host")
    port: int = Field(default=5432, description="Postgres port")
    user: str = Field(default="postgres", description="Postgres user")
    password: str = Field(default="postgres", description="Postgres password")
    name: str = Field(default="postgres", description="Postgres database name")

    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    sslmode: str = Field(default="require", description="SSL mode for hosted connections")

    @property
    def async_database_url(self) -> str:
        """
        Construct async Postgres connection URL.

        Returns:
            str: SQLAlchemy async-compatible database URL (asyncpg uses 'ssl' param)
        """
        if self.url:
            return self.url
        ssl_param = "ssl=require" if self.sslmode == "require" else ""
        return (
            f"postgresql+asyncpg://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.name}?{ssl_param}"
        )
