"""
HTTP server configuration settings.

Dependencies: pydantic_settings
System role: Uvicorn and CORS configuration
"""

from pydantic import Field

from agrideck.configs.base import BaseSettings


class ServerSettings(BaseSettings):
    """Uvicorn bind address and CORS policy."""

    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8000, description="Bind port")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API",
    )
