"""
Common response models.

Dependencies: pydantic
System role: Shared API response structures
"""

from pydantic import BaseModel, Field

from agrideck.core.table_query import PaginationState


class ErrorResponse(BaseModel):
    """Error body of the Gemini proxy endpoints."""

    error: str = Field(description="Error message")


class PaginationResponse(BaseModel):
    """Page position and size of a list response."""

    page: int
    page_size: int
    total_count: int
    total_pages: int

    @classmethod
    def from_state(cls, state: PaginationState) -> "PaginationResponse":
        return cls(
            page=state.page,
            page_size=state.page_size,
            total_count=state.total_count,
            total_pages=state.total_pages,
        )
