"""
Admin table schemas.

Dependencies: pydantic
System role: Generic table API contracts
"""

from typing import Any

from pydantic import BaseModel

from agrideck.core.table_query import PAGE_SIZE_OPTIONS, TableConfig
from agrideck.models.common import PaginationResponse


class TableColumnResponse(BaseModel):
    key: str
    label: str
    sortable: bool
    searchable: bool
    filter_type: str | None
    filter_options: list[dict[str, Any]]


class TableConfigResponse(BaseModel):
    """List view definition a client needs to render filters and headers."""

    table: str
    columns: list[TableColumnResponse]
    default_sort: dict[str, str] | None
    page_size: int
    page_size_options: list[int]

    @classmethod
    def from_config(cls, config: TableConfig) -> "TableConfigResponse":
        return cls(
            table=config.table,
            columns=[
                TableColumnResponse(
                    key=c.key,
                    label=c.label,
                    sortable=c.sortable,
                    searchable=c.searchable,
                    filter_type=c.filter_type,
                    filter_options=c.filter_options,
                )
                for c in config.columns
            ],
            default_sort=(
                {"column": config.default_sort.column, "direction": config.default_sort.direction}
                if config.default_sort
                else None
            ),
            page_size=config.page_size,
            page_size_options=PAGE_SIZE_OPTIONS,
        )


class TableRowsResponse(BaseModel):
    rows: list[dict[str, Any]]
    pagination: PaginationResponse
    total_pages: int
