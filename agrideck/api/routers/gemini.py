"""
Gemini proxy API endpoints.

Routes:
- POST /gemini/translate - Translate one commodity, mandi or state
- POST /gemini/batch - Translate many entities of one kind
- POST /gemini/image - Generate a commodity product image

Errors are returned as {"error": message} with 400, 429 or 500.

Dependencies: agrideck.core.gemini, agrideck.models.gemini
System role: Server-side proxy keeping the Gemini API key off the client
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from agrideck.api.deps.dependencies import get_gemini_gateway
from agrideck.core.gemini import GeminiGateway
from agrideck.models.gemini import (
    BatchTranslateResponse,
    ImageResponse,
    MandiTranslationResponse,
    TranslationResponse,
)

from .error_handling import handle_gemini_errors
from .gemini_validators import parse_batch_request, parse_image_request, parse_translate_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/gemini", tags=["gemini"])


@router.post("/translate", response_model=TranslationResponse | MandiTranslationResponse)
@handle_gemini_errors
async def translate(
    payload: dict[str, Any] = Body(...),
    gateway: GeminiGateway = Depends(get_gemini_gateway),
):
    """
    Translate a single entity.

    Body: {type, name, targetLanguage, languageName, district?, context?}

    Returns:
        {"translation"} for commodity/state, {"name", "district"} for mandi
    """
    request = parse_translate_request(payload)
    logger.info(
        f"{__name__}:translate - type={request.type}",
        extra={"entity_name": request.name, "target_language": request.target_language},
    )

    if request.type == "mandi":
        result = await gateway.translate_mandi(
            request.name,
            request.district or "",
            request.target_language,
            request.language_name,
        )
        return MandiTranslationResponse(**result)

    if request.type == "state":
        translation = await gateway.translate_state(
            request.name, request.target_language, request.language_name
        )
    else:
        translation = await gateway.translate_commodity(
            request.name,
            request.target_language,
            request.language_name,
            request.context,
        )
    return TranslationResponse(translation=translation)


@router.post("/batch", response_model=BatchTranslateResponse)
@handle_gemini_errors
async def batch_translate(
    payload: dict[str, Any] = Body(...),
    gateway: GeminiGateway = Depends(get_gemini_gateway),
):
    """
    Translate up to max_batch_items entities in one call.

    Body: {type, items: [{id, name, district?}], targetLanguage, languageName}

    Returns:
        {"translations": [...]} with one entry per item, in item order
    """
    request = parse_batch_request(payload)
    logger.info(
        f"{__name__}:batch_translate - type={request.type} items={len(request.items)}",
        extra={"target_language": request.target_language},
    )
    translations = await gateway.batch_translate(
        request.type,
        [item.model_dump() for item in request.items],
        request.target_language,
        request.language_name,
    )
    return BatchTranslateResponse(translations=translations)


@router.post("/image", response_model=ImageResponse)
@handle_gemini_errors
async def generate_image(
    payload: dict[str, Any] = Body(...),
    gateway: GeminiGateway = Depends(get_gemini_gateway),
):
    """
    Generate a product photo for a commodity.

    Body: {commodityName}

    Returns:
        {"image": base64}
    """
    request = parse_image_request(payload)
    image = await gateway.generate_commodity_image(request.commodity_name)
    return ImageResponse(image=image)
