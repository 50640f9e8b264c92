"""
User detail and market assignment schemas.

Dependencies: pydantic
System role: User API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel


class MandiSummary(BaseModel):
    id: int
    name: str
    district: str | None = None


class UserDetailResponse(BaseModel):
    """User with resolved state/district names and assigned markets."""

    id: uuid.UUID
    full_name: str
    phone_number: str
    role: str
    status: str
    language_preference: str
    business_name: str | None = None
    farm_name: str | None = None
    address: str | None = None
    average_rating: float | None = None
    rating_count: int = 0
    state_id: int | None = None
    state_name: str | None = None
    district_id: int | None = None
    district_name: str | None = None
    created_at: datetime
    mandis: list[MandiSummary]


class AssignMandiRequest(BaseModel):
    mandi_id: int
