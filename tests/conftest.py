"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory database with seed data, fake Gemini client, gateway
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from types import SimpleNamespace

import pytest


class FakeAPIError(Exception):
    """Stand-in for google.genai.errors.APIError (only .code matters)."""

    def __init__(self, code: int, message: str = "upstream error") -> None:
        super().__init__(message)
        self.code = code


class FakeModels:
    """Replays queued responses (or raises queued exceptions) per call."""

    def __init__(self, responses: list) -> None:
        self.responses = list(responses)
        self.calls: list[dict] = []

    def generate_content(self, *, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if not self.responses:
            raise AssertionError("unexpected Gemini call")
        item = self.responses.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


class FakeGeminiClient:
    def __init__(self, responses: list) -> None:
        self.models = FakeModels(responses)


def text_response(text: str):
    return SimpleNamespace(text=text, candidates=[])


def image_response(data: bytes | None, text: str | None = None):
    parts = []
    if text is not None:
        parts.append(SimpleNamespace(inline_data=None, text=text))
    if data is not None:
        parts.append(SimpleNamespace(inline_data=SimpleNamespace(data=data, mime_type="image/png")))
    return SimpleNamespace(text=text, candidates=[SimpleNamespace(content=SimpleNamespace(parts=parts))])


@pytest.fixture
def gemini_fakes():
    """Fake client pieces: FakeGeminiClient, FakeAPIError, text_response, image_response."""
    return SimpleNamespace(
        client=FakeGeminiClient,
        api_error=FakeAPIError,
        text=text_response,
        image=image_response,
    )


@pytest.fixture
def gemini_settings():
    """Gemini settings with a key and no backoff delay."""
    from agrideck.configs.gemini import GeminiSettings

    return GeminiSettings(api_key="test-key", retry_base_delay=0, max_retries=3)


@pytest.fixture
def make_gateway(gemini_settings):
    """Build a GeminiGateway over a fake client replaying the given responses."""
    from agrideck.core.gemini import GeminiGateway

    def _make(*responses):
        client = FakeGeminiClient(list(responses))
        return GeminiGateway(client, gemini_settings), client

    return _make


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from agrideck.boundary.db import models  # noqa: F401  registers tables
    from agrideck.boundary.db.base import Base

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def seeded_db(test_async_db):
    """
    Database with a small catalog.

    languages: hi, ta
    states: 1 Karnataka (hi translated), 2 Kerala
    districts: 10 Mysuru (state 1)
    commodities: 1 Tomato (hi "टमाटर", reviewed), 2 Onion (hi blank), 3 Wheat
    mandis: 5 Mysuru APMC (district 10, state 1)
    """
    from agrideck.boundary.db.models import (
        CommodityModel,
        CommodityTranslationModel,
        DistrictModel,
        LanguageModel,
        MandiModel,
        StateModel,
        StateTranslationModel,
    )

    db = test_async_db
    db.add_all([LanguageModel(code="hi", name="Hindi"), LanguageModel(code="ta", name="Tamil")])
    db.add_all([StateModel(id=1, name="Karnataka"), StateModel(id=2, name="Kerala")])
    await db.flush()
    db.add(StateTranslationModel(state_id=1, language_code="hi", name="कर्नाटक", needs_review=False))
    db.add(DistrictModel(id=10, name="Mysuru", state_id=1))
    db.add_all(
        [
            CommodityModel(id=1, name="Tomato"),
            CommodityModel(id=2, name="Onion"),
            CommodityModel(id=3, name="Wheat"),
        ]
    )
    await db.flush()
    db.add_all(
        [
            CommodityTranslationModel(
                commodity_id=1, language_code="hi", name="टमाटर", unit="किलो", needs_review=False
            ),
            CommodityTranslationModel(commodity_id=2, language_code="hi", name="  ", needs_review=True),
        ]
    )
    db.add(MandiModel(id=5, name="Mysuru APMC", district_id=10, state_id=1))
    await db.commit()
    db.expunge_all()
    return db
