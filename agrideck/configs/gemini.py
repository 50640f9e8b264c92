"""
Gemini configuration settings.

API key, model ids and retry/batch limits for the generative AI gateway.
A missing API key is allowed: the gateway reports "not configured" at call time.

Dependencies: pydantic_settings
System role: External AI API configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from agrideck.configs.base import BaseSettings


class GeminiSettings(BaseSettings):
    """Google Gemini API configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GEMINI_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(default=None, description="Gemini API key")
    text_model: str = Field(
        default="gemini-2.0-flash-exp",
        description="Model used for translations",
    )
    image_model: str = Field(
        default="gemini-2.0-flash-exp",
        description="Model used for commodity image generation",
    )
    max_retries: int = Field(
        default=3,
        ge=1,
        description="Attempt cap for quota-limited (429) calls",
    )
    retry_base_delay: float = Field(
        default=1.0,
        ge=0,
        description="Initial backoff in seconds, doubled on each retry",
    )
    max_batch_items: int = Field(
        default=100,
        ge=1,
        description="Largest number of items accepted in one batch prompt",
    )

    @property
    def is_configured(self) -> bool:
        """True when an API key is present."""
        return bool(self.api_key)
