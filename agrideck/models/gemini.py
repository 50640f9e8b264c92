"""
Gemini proxy request/response schemas.

Field names follow the dashboard's camelCase wire format
(targetLanguage, languageName, commodityName).

Dependencies: pydantic
System role: Gemini proxy API contracts
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

TranslationType = Literal["commodity", "mandi", "state"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class TranslateRequest(_CamelModel):
    """Single-entity translation request."""

    type: TranslationType
    name: str = Field(..., min_length=1)
    target_language: str = Field(..., min_length=1, alias="targetLanguage")
    language_name: str = Field(..., min_length=1, alias="languageName")
    district: str | None = None
    context: str | None = None


class BatchItem(BaseModel):
    id: int | str
    name: str
    district: str | None = None


class BatchTranslateRequest(_CamelModel):
    """Many entities of one kind in a single prompt."""

    type: TranslationType
    items: list[BatchItem]
    target_language: str = Field(..., min_length=1, alias="targetLanguage")
    language_name: str = Field(..., min_length=1, alias="languageName")


class ImageRequest(_CamelModel):
    commodity_name: str = Field(..., min_length=1, alias="commodityName")


class TranslationResponse(BaseModel):
    translation: str


class MandiTranslationResponse(BaseModel):
    name: str
    district: str


class BatchTranslateResponse(BaseModel):
    """translations: {id, translation} or {id, name, district}, one per item in order."""

    translations: list[dict]


class ImageResponse(BaseModel):
    image: str = Field(description="Base64-encoded image")
