"""
Gemini request validation.

Checks done in the order the dashboard relies on for its error messages.
"""

from typing import Any

from agrideck.core.exceptions import ValidationError
from agrideck.models.gemini import BatchTranslateRequest, ImageRequest, TranslateRequest

from .error_handling import MISSING_FIELDS_MESSAGE

TRANSLATION_TYPES = ("commodity", "mandi", "state")
INVALID_TYPE_MESSAGE = "Invalid translation type"


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


def parse_translate_request(payload: dict[str, Any]) -> TranslateRequest:
    """
    Validate a single translation request.

    Raises:
        ValidationError: Unknown type
        pydantic.ValidationError: Missing or empty name/targetLanguage/languageName
    """
    if payload.get("type") not in TRANSLATION_TYPES:
        raise ValidationError(INVALID_TYPE_MESSAGE, field="type")
    return TranslateRequest.model_validate(payload)


def parse_batch_request(payload: dict[str, Any]) -> BatchTranslateRequest:
    """
    Validate a batch translation request.

    Raises:
        ValidationError: Missing fields or unknown type
        pydantic.ValidationError: Malformed items
    """
    if any(_is_missing(payload.get(k)) for k in ("type", "items", "targetLanguage", "languageName")):
        raise ValidationError(MISSING_FIELDS_MESSAGE)
    if payload["type"] not in TRANSLATION_TYPES:
        raise ValidationError(INVALID_TYPE_MESSAGE, field="type")
    return BatchTranslateRequest.model_validate(payload)


def parse_image_request(payload: dict[str, Any]) -> ImageRequest:
    if _is_missing(payload.get("commodityName")):
        raise ValidationError("Commodity name is required", field="commodityName")
    return ImageRequest.model_validate(payload)
