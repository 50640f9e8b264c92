"""
Tests for the Gemini proxy endpoints.

The gateway runs over a fake SDK client so validation, response shapes
and the {"error": ...} mapping are exercised end to end.
"""

import base64

import pytest

from agrideck.api.deps.dependencies import get_gemini_gateway
from agrideck.configs.gemini import GeminiSettings
from agrideck.core.exceptions import QUOTA_EXCEEDED_MESSAGE
from agrideck.core.gemini import GeminiGateway

TRANSLATE_BODY = {
    "type": "commodity",
    "name": "Tomato",
    "targetLanguage": "hi",
    "languageName": "Hindi",
}


@pytest.fixture
def use_gateway(client, make_gateway):
    def _use(*responses):
        gateway, fake = make_gateway(*responses)
        client.app.dependency_overrides[get_gemini_gateway] = lambda: gateway
        return fake

    return _use


class TestTranslate:
    def test_commodity(self, client, use_gateway, gemini_fakes):
        use_gateway(gemini_fakes.text("टमाटर"))

        response = client.post("/api/gemini/translate", json=TRANSLATE_BODY)

        assert response.status_code == 200
        assert response.json() == {"translation": "टमाटर"}

    def test_mandi(self, client, use_gateway, gemini_fakes):
        use_gateway(gemini_fakes.text('{"name": "अचंपेट", "district": "नागरकर्नूल"}'))

        response = client.post(
            "/api/gemini/translate",
            json={**TRANSLATE_BODY, "type": "mandi", "name": "Achampet APMC", "district": "Nagarkurnool"},
        )

        assert response.json() == {"name": "अचंपेट", "district": "नागरकर्नूल"}

    def test_invalid_type(self, client, use_gateway):
        fake = use_gateway()

        response = client.post("/api/gemini/translate", json={**TRANSLATE_BODY, "type": "district"})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid translation type"}
        assert fake.models.calls == []

    def test_missing_fields(self, client, use_gateway):
        use_gateway()

        response = client.post("/api/gemini/translate", json={"type": "commodity", "name": "Tomato"})

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields"}

    def test_quota_exhausted(self, client, use_gateway, gemini_fakes):
        use_gateway(*[gemini_fakes.api_error(429)] * 3)

        response = client.post("/api/gemini/translate", json=TRANSLATE_BODY)

        assert response.status_code == 429
        assert response.json() == {"error": QUOTA_EXCEEDED_MESSAGE}

    def test_upstream_failure_message_passed_through(self, client, use_gateway, gemini_fakes):
        use_gateway(gemini_fakes.api_error(500, "model overloaded"))

        response = client.post("/api/gemini/translate", json=TRANSLATE_BODY)

        assert response.status_code == 500
        assert response.json() == {"error": "model overloaded"}

    def test_not_configured(self, client):
        gateway = GeminiGateway(None, GeminiSettings(api_key=None))
        client.app.dependency_overrides[get_gemini_gateway] = lambda: gateway

        response = client.post("/api/gemini/translate", json=TRANSLATE_BODY)

        assert response.status_code == 500
        assert "not configured" in response.json()["error"]


class TestBatch:
    def test_translations_in_item_order(self, client, use_gateway, gemini_fakes):
        use_gateway(
            gemini_fakes.text('[{"index": 2, "translation": "प्याज"}, {"index": 1, "translation": "टमाटर"}]')
        )

        response = client.post(
            "/api/gemini/batch",
            json={
                "type": "commodity",
                "items": [{"id": 1, "name": "Tomato"}, {"id": 2, "name": "Onion"}],
                "targetLanguage": "hi",
                "languageName": "Hindi",
            },
        )

        assert response.status_code == 200
        assert response.json() == {
            "translations": [
                {"id": 1, "translation": "टमाटर"},
                {"id": 2, "translation": "प्याज"},
            ]
        }

    def test_missing_fields_checked_before_type(self, client, use_gateway):
        use_gateway()

        response = client.post("/api/gemini/batch", json={"type": "bogus", "items": []})

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields"}

    def test_invalid_type(self, client, use_gateway):
        use_gateway()

        response = client.post(
            "/api/gemini/batch",
            json={
                "type": "bogus",
                "items": [{"id": 1, "name": "x"}],
                "targetLanguage": "hi",
                "languageName": "Hindi",
            },
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid translation type"}

    def test_oversize_batch_rejected(self, client, use_gateway, gemini_settings):
        fake = use_gateway()
        items = [{"id": i, "name": f"item {i}"} for i in range(gemini_settings.max_batch_items + 1)]

        response = client.post(
            "/api/gemini/batch",
            json={"type": "state", "items": items, "targetLanguage": "hi", "languageName": "Hindi"},
        )

        assert response.status_code == 400
        assert fake.models.calls == []


class TestImage:
    def test_returns_base64_image(self, client, use_gateway, gemini_fakes):
        use_gateway(gemini_fakes.image(b"png-bytes"))

        response = client.post("/api/gemini/image", json={"commodityName": "Tomato"})

        assert response.status_code == 200
        assert base64.b64decode(response.json()["image"]) == b"png-bytes"

    def test_requires_commodity_name(self, client, use_gateway):
        use_gateway()

        response = client.post("/api/gemini/image", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "Commodity name is required"}

    def test_text_only_response(self, client, use_gateway, gemini_fakes):
        use_gateway(gemini_fakes.image(None, text="no image today"))

        response = client.post("/api/gemini/image", json={"commodityName": "Tomato"})

        assert response.status_code == 500
        assert response.json()["error"].startswith("Model did not generate an image")
