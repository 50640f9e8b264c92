"""
Translation edit draft schemas.

Dependencies: pydantic
System role: Translation editor API contracts
"""

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from agrideck.models.common import PaginationResponse


class CreateDraftRequest(BaseModel):
    entity: str = Field(..., description="commodity, mandi or state")


class ChangeRequest(BaseModel):
    """One edit. Omit language_code to rename the base entity."""

    entity_id: int
    entity_name: str = ""
    field: str = Field(..., min_length=1)
    old_value: bool | str | None = None
    new_value: bool | str
    language_code: str | None = None


class PendingChangeResponse(BaseModel):
    entity_id: int
    entity_name: str
    field: str
    old_value: bool | str
    new_value: bool | str
    language_code: str | None = None


class DraftResponse(BaseModel):
    """Edit draft with its pending changes in insertion order."""

    id: uuid.UUID
    entity: str
    created_at: datetime
    pending: list[PendingChangeResponse]


class DraftRowsResponse(BaseModel):
    rows: list[dict[str, Any]]
    pagination: PaginationResponse


class SuggestRequest(BaseModel):
    language_code: str = Field(..., min_length=1)
    language_name: str = Field(..., min_length=1)


class SuggestResponse(BaseModel):
    requested: int
    succeeded: int
    failed: int


class SaveResponse(BaseModel):
    renamed: int
    upserted: int
