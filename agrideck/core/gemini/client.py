"""
Gemini client construction.

A missing API key yields no client rather than an error, so the service
starts without AI features and reports "not configured" per request.

Dependencies: google.genai, agrideck.configs
System role: Single point of Gemini SDK instantiation
"""

import logging

from google import genai

from agrideck.configs.gemini import GeminiSettings

logger = logging.getLogger(__name__)


def build_client(settings: GeminiSettings) -> genai.Client | None:
    """
    Create a Gemini client from settings.

    Args:
        settings: Gemini configuration

    Returns:
        genai.Client, or None when GEMINI_API_KEY is not set
    """
    if not settings.is_configured:
        logger.warning(f"{__name__}:build_client - GEMINI_API_KEY is not set. AI features will not work.")
        return None
    return genai.Client(api_key=settings.api_key)
