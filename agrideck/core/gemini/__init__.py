"""
Gemini gateway package.

Exports:
  - GeminiGateway: translate_commodity, translate_mandi, translate_state,
    batch_translate, generate_commodity_image
  - build_client: SDK client factory (None without an API key)
  - call_with_retry, is_quota_error: 429 backoff policy
  - strip_code_fences: markdown fence removal for JSON answers
"""

from agrideck.core.gemini.client import build_client
from agrideck.core.gemini.gateway import GeminiGateway
from agrideck.core.gemini.parsing import strip_code_fences
from agrideck.core.gemini.retry import call_with_retry, is_quota_error

__all__ = [
    "GeminiGateway",
    "build_client",
    "call_with_retry",
    "is_quota_error",
    "strip_code_fences",
]
