"""
Test suite for GeminiGateway.

Runs against a fake SDK client; tests cover retry behaviour, batch
ordering and limits, and image extraction.
"""

import base64

import pytest

from agrideck.configs.gemini import GeminiSettings
from agrideck.core.exceptions import (
    GeminiNotConfiguredError,
    ImageGenerationError,
    QuotaExceededError,
    ValidationError,
)
from agrideck.core.gemini import GeminiGateway, build_client
from agrideck.core.gemini.gateway import NO_IMAGE_MESSAGE


class TestTranslate:
    async def test_commodity_translation_is_trimmed(self, make_gateway, gemini_fakes) -> None:
        gateway, client = make_gateway(gemini_fakes.text("  टमाटर \n"))

        result = await gateway.translate_commodity("Tomato", "hi", "Hindi")

        assert result == "टमाटर"
        call = client.models.calls[0]
        assert call["model"] == gateway.settings.text_model
        assert "Tomato" in call["contents"]
        assert call["config"].max_output_tokens == 50

    async def test_mandi_translation_parses_fenced_json(self, make_gateway, gemini_fakes) -> None:
        gateway, _ = make_gateway(
            gemini_fakes.text('```json\n{"name": "मैसूरु", "district": "मैसूरु"}\n```')
        )

        result = await gateway.translate_mandi("Mysuru APMC", "Mysuru", "hi", "Hindi")

        assert result == {"name": "मैसूरु", "district": "मैसूरु"}

    async def test_state_translation(self, make_gateway, gemini_fakes) -> None:
        gateway, _ = make_gateway(gemini_fakes.text("कर्नाटक"))

        assert await gateway.translate_state("Karnataka", "hi", "Hindi") == "कर्नाटक"

    async def test_quota_error_is_retried(self, make_gateway, gemini_fakes) -> None:
        gateway, client = make_gateway(
            gemini_fakes.api_error(429),
            gemini_fakes.api_error(429),
            gemini_fakes.text("टमाटर"),
        )

        result = await gateway.translate_commodity("Tomato", "hi", "Hindi")

        assert result == "टमाटर"
        assert len(client.models.calls) == 3

    async def test_quota_exhausted_raises(self, make_gateway, gemini_fakes) -> None:
        gateway, client = make_gateway(*[gemini_fakes.api_error(429)] * 3)

        with pytest.raises(QuotaExceededError):
            await gateway.translate_commodity("Tomato", "hi", "Hindi")

        assert len(client.models.calls) == 3

    async def test_other_upstream_error_is_not_retried(self, make_gateway, gemini_fakes) -> None:
        gateway, client = make_gateway(gemini_fakes.api_error(500), gemini_fakes.text("unused"))

        with pytest.raises(gemini_fakes.api_error):
            await gateway.translate_commodity("Tomato", "hi", "Hindi")

        assert len(client.models.calls) == 1

    async def test_unconfigured_gateway_raises(self) -> None:
        gateway = GeminiGateway(None, GeminiSettings(api_key=None))

        assert not gateway.is_configured
        with pytest.raises(GeminiNotConfiguredError):
            await gateway.translate_commodity("Tomato", "hi", "Hindi")


class TestBatchTranslate:
    async def test_results_follow_input_order(self, make_gateway, gemini_fakes) -> None:
        gateway, _ = make_gateway(
            gemini_fakes.text(
                '```json\n[{"index": 2, "translation": "प्याज"}, {"index": 1, "translation": "टमाटर"}]\n```'
            )
        )
        items = [{"id": 7, "name": "Tomato"}, {"id": 3, "name": "Onion"}]

        results = await gateway.batch_translate("commodity", items, "hi", "Hindi")

        assert results == [
            {"id": 7, "translation": "टमाटर"},
            {"id": 3, "translation": "प्याज"},
        ]

    async def test_mandi_batch_returns_name_and_district(self, make_gateway, gemini_fakes) -> None:
        gateway, client = make_gateway(
            gemini_fakes.text('[{"index": 1, "name": "मैसूरु", "district": "मैसूरु"}]')
        )

        results = await gateway.batch_translate(
            "mandi", [{"id": 5, "name": "Mysuru APMC", "district": "Mysuru"}], "hi", "Hindi"
        )

        assert results == [{"id": 5, "name": "मैसूरु", "district": "मैसूरु"}]
        assert "Mysuru" in client.models.calls[0]["contents"]

    async def test_malformed_output_yields_empty_entries(self, make_gateway, gemini_fakes) -> None:
        gateway, _ = make_gateway(gemini_fakes.text("I cannot help with that"))
        items = [{"id": 1, "name": "Tomato"}, {"id": 2, "name": "Onion"}]

        results = await gateway.batch_translate("state", items, "hi", "Hindi")

        assert results == [{"id": 1, "translation": ""}, {"id": 2, "translation": ""}]

    async def test_empty_batch_makes_no_call(self, make_gateway) -> None:
        gateway, client = make_gateway()

        assert await gateway.batch_translate("commodity", [], "hi", "Hindi") == []
        assert client.models.calls == []

    async def test_oversize_batch_is_rejected(self, make_gateway) -> None:
        gateway, client = make_gateway()
        limit = gateway.settings.max_batch_items
        items = [{"id": i, "name": f"item {i}"} for i in range(limit + 1)]

        with pytest.raises(ValidationError):
            await gateway.batch_translate("commodity", items, "hi", "Hindi")

        assert client.models.calls == []

    async def test_unknown_kind_is_rejected(self, make_gateway) -> None:
        gateway, _ = make_gateway()

        with pytest.raises(ValidationError):
            await gateway.batch_translate("district", [{"id": 1, "name": "x"}], "hi", "Hindi")


class TestGenerateImage:
    async def test_returns_base64_of_inline_data(self, make_gateway, gemini_fakes) -> None:
        data = b"\x89PNG fake bytes"
        gateway, client = make_gateway(gemini_fakes.image(data, text="Here is your image"))

        result = await gateway.generate_commodity_image("Tomato")

        assert base64.b64decode(result) == data
        config = client.models.calls[0]["config"]
        assert client.models.calls[0]["model"] == gateway.settings.image_model
        assert config.response_modalities == ["TEXT", "IMAGE"]

    async def test_text_only_response_raises(self, make_gateway, gemini_fakes) -> None:
        gateway, _ = make_gateway(gemini_fakes.image(None, text="I can't draw that"))

        with pytest.raises(ImageGenerationError) as exc_info:
            await gateway.generate_commodity_image("Tomato")

        assert str(exc_info.value) == NO_IMAGE_MESSAGE

    async def test_no_candidates_raises(self, make_gateway, gemini_fakes) -> None:
        gateway, _ = make_gateway(gemini_fakes.text(""))

        with pytest.raises(ImageGenerationError):
            await gateway.generate_commodity_image("Tomato")


def test_build_client_without_key_returns_none() -> None:
    assert build_client(GeminiSettings(api_key=None)) is None
