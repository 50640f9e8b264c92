"""
Gemini translation and image gateway.

Wraps the synchronous google-genai SDK: each call runs in a worker thread
via asyncio.to_thread and goes through the quota-aware retry policy.

Dependencies: google.genai, agrideck.core.gemini, agrideck.configs
System role: Only component that talks to the Gemini API
"""

import asyncio
import base64
import logging
from typing import Any

from google import genai
from google.genai import types

from agrideck.configs.gemini import GeminiSettings
from agrideck.core.entities import EntityKind, parse_entity_kind
from agrideck.core.exceptions import (
    GeminiNotConfiguredError,
    ImageGenerationError,
    ValidationError,
)
from agrideck.core.gemini import parsing, prompts
from agrideck.core.gemini.retry import call_with_retry

logger = logging.getLogger(__name__)

NO_IMAGE_MESSAGE = (
    "Model did not generate an image. The response was text-only, blocked, or empty."
)

_BATCH_SUBJECTS = {
    EntityKind.COMMODITY: "agricultural commodities",
    EntityKind.STATE: "Indian state names",
}


class GeminiGateway:
    """
    Translation and image generation over one Gemini client.

    Attributes:
        client: SDK client, or None when no API key is configured
        settings: Model ids and retry/batch limits
    """

    def __init__(self, client: genai.Client | None, settings: GeminiSettings) -> None:
        self.client = client
        self.settings = settings

    @property
    def is_configured(self) -> bool:
        return self.client is not None

    def _require_client(self) -> genai.Client:
        if self.client is None:
            raise GeminiNotConfiguredError()
        return self.client

    async def _generate(
        self,
        model: str,
        prompt: str,
        config: types.GenerateContentConfig,
    ) -> types.GenerateContentResponse:
        client = self._require_client()

        async def attempt() -> types.GenerateContentResponse:
            return await asyncio.to_thread(
                client.models.generate_content,
                model=model,
                contents=prompt,
                config=config,
            )

        return await call_with_retry(
            attempt,
            max_attempts=self.settings.max_retries,
            base_delay=self.settings.retry_base_delay,
        )

    async def _generate_text(self, prompt: str, max_tokens: int) -> str:
        response = await self._generate(
            self.settings.text_model,
            prompt,
            types.GenerateContentConfig(temperature=0.1, max_output_tokens=max_tokens),
        )
        return (response.text or "").strip()

    async def translate_commodity(
        self,
        name: str,
        target_language: str,
        language_name: str,
        context: str | None = None,
    ) -> str:
        """
        Translate a commodity name.

        Returns:
            Translated (or transliterated) name; may be "" if the model gives nothing
        """
        logger.info(
            f"{__name__}:translate_commodity - START",
            extra={"commodity_name": name, "target_language": target_language},
        )
        prompt = prompts.commodity_prompt(name, target_language, language_name, context)
        translation = await self._generate_text(prompt, max_tokens=50)
        logger.info(
            f"{__name__}:translate_commodity - END",
            extra={"commodity_name": name, "translation": translation},
        )
        return translation

    async def translate_mandi(
        self,
        name: str,
        district: str,
        target_language: str,
        language_name: str,
    ) -> dict[str, str]:
        """
        Translate a mandi name and its district.

        Returns:
            {"name", "district"}; malformed model output yields empty strings
        """
        logger.info(
            f"{__name__}:translate_mandi - START",
            extra={"mandi_name": name, "district": district, "target_language": target_language},
        )
        prompt = prompts.mandi_prompt(name, district, target_language, language_name)
        text = await self._generate_text(prompt, max_tokens=100)
        return parsing.parse_mandi_translation(text)

    async def translate_state(self, name: str, target_language: str, language_name: str) -> str:
        logger.info(
            f"{__name__}:translate_state - START",
            extra={"state_name": name, "target_language": target_language},
        )
        prompt = prompts.state_prompt(name, target_language, language_name)
        return await self._generate_text(prompt, max_tokens=50)

    async def batch_translate(
        self,
        kind: EntityKind | str,
        items: list[dict[str, Any]],
        target_language: str,
        language_name: str,
    ) -> list[dict[str, Any]]:
        """
        Translate many entities of one kind in a single prompt.

        Args:
            kind: commodity, mandi or state
            items: [{"id", "name"}] (mandis also carry "district")
            target_language: Language code
            language_name: Human-readable language name

        Returns:
            One result per item in input order: {"id", "translation"} for
            commodities and states, {"id", "name", "district"} for mandis

        Raises:
            ValidationError: If items exceed max_batch_items
        """
        kind = parse_entity_kind(kind)
        if len(items) > self.settings.max_batch_items:
            raise ValidationError(
                f"Batch size {len(items)} exceeds the limit of {self.settings.max_batch_items} items",
                field="items",
            )
        if not items:
            return []
        self._require_client()

        logger.info(
            f"{__name__}:batch_translate - START",
            extra={"kind": kind.value, "count": len(items), "target_language": target_language},
        )

        if kind == EntityKind.MANDI:
            prompt = prompts.batch_mandis_prompt(
                [(item["name"], item.get("district") or "") for item in items],
                target_language,
                language_name,
            )
            fields: tuple[str, ...] = ("name", "district")
            tokens_per_item = 30
        else:
            prompt = prompts.batch_names_prompt(
                _BATCH_SUBJECTS[kind],
                [item["name"] for item in items],
                target_language,
                language_name,
            )
            fields = ("translation",)
            tokens_per_item = 20

        text = await self._generate_text(prompt, max_tokens=max(1000, tokens_per_item * len(items)))
        parsed = parsing.parse_batch(text, len(items), fields)
        results = [{"id": item["id"], **entry} for item, entry in zip(items, parsed)]

        logger.info(
            f"{__name__}:batch_translate - END",
            extra={
                "kind": kind.value,
                "count": len(results),
                "empty": sum(1 for r in results if not any(r[f] for f in fields)),
            },
        )
        return results

    async def generate_commodity_image(self, commodity_name: str) -> str:
        """
        Generate a product photo for a commodity.

        Returns:
            Base64-encoded image bytes

        Raises:
            ImageGenerationError: If the response carries no inline image
        """
        logger.info(
            f"{__name__}:generate_commodity_image - START",
            extra={"commodity_name": commodity_name},
        )
        response = await self._generate(
            self.settings.image_model,
            prompts.commodity_image_prompt(commodity_name),
            types.GenerateContentConfig(
                temperature=0.4,
                response_modalities=["TEXT", "IMAGE"],
            ),
        )

        for candidate in response.candidates or []:
            content = candidate.content
            for part in (content.parts if content else None) or []:
                if part.inline_data is not None and part.inline_data.data:
                    image_base64 = base64.b64encode(part.inline_data.data).decode("utf-8")
                    logger.info(
                        f"{__name__}:generate_commodity_image - END "
                        f"image_len={len(image_base64)}, mime_type={part.inline_data.mime_type}"
                    )
                    return image_base64

        logger.error(
            f"{__name__}:generate_commodity_image - no image in response",
            extra={"commodity_name": commodity_name},
        )
        raise ImageGenerationError(NO_IMAGE_MESSAGE)
