"""
Dashboard and translation overview schemas.

Dependencies: pydantic
System role: Statistics API contracts
"""

from pydantic import BaseModel


class DashboardStatsResponse(BaseModel):
    total_users: int
    active_listings: int
    pending_translations: int
    completed_deals: int


class TranslationStats(BaseModel):
    total: int
    needs_review: int
    completed: int
    languages: list[str]


class TranslationOverviewResponse(BaseModel):
    commodity: TranslationStats
    mandi: TranslationStats
    state: TranslationStats


class LanguageResponse(BaseModel):
    code: str
    name: str
