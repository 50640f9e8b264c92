"""
Admin table API endpoints.

Routes:
- GET /admin/tables - Registered list view definitions
- GET /admin/tables/{table} - Filtered, sorted page of rows
- POST /admin/tables/{table} - Insert a row
- PATCH /admin/tables/{table}/{row_id} - Update a row
- DELETE /admin/tables/{table}/{row_id} - Delete a row

Any query parameter other than page, page_size, sort and direction is
treated as a filter; "search" matches the searchable columns.

Dependencies: agrideck.application.services, agrideck.models.tables
System role: Generic data table HTTP API
"""

import logging
from typing import Any, Literal

from fastapi import APIRouter, Body, Depends, Query, Request, Response, status

from agrideck.api.deps.dependencies import get_table_service
from agrideck.application.services import TableService
from agrideck.core.table_query import SortState
from agrideck.models.common import PaginationResponse
from agrideck.models.tables import TableConfigResponse, TableRowsResponse

from .error_handling import handle_admin_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/tables", tags=["tables"])

RESERVED_PARAMS = {"page", "page_size", "sort", "direction"}


@router.get("", response_model=list[TableConfigResponse])
@handle_admin_errors
async def list_tables(
    table_service: TableService = Depends(get_table_service),
) -> list[TableConfigResponse]:
    return [TableConfigResponse.from_config(c) for c in table_service.list_configs()]


@router.get("/{table}", response_model=TableRowsResponse)
@handle_admin_errors
async def list_rows(
    table: str,
    request: Request,
    page: int = Query(1, ge=1),
    page_size: int | None = Query(None, ge=1, le=1000),
    sort: str | None = None,
    direction: Literal["asc", "desc"] = "asc",
    table_service: TableService = Depends(get_table_service),
) -> TableRowsResponse:
    """
    One page of rows with the exact filtered count.

    Raises:
        HTTPException(400): Unknown table or unparseable filter value
    """
    filters = {k: v for k, v in request.query_params.items() if k not in RESERVED_PARAMS}
    sort_state = SortState(column=sort, direction=direction) if sort else None

    rows, pagination = await table_service.list_rows(
        table,
        filters=filters,
        sort=sort_state,
        page=page,
        page_size=page_size,
    )
    return TableRowsResponse(
        rows=rows,
        pagination=PaginationResponse.from_state(pagination),
        total_pages=pagination.total_pages,
    )


@router.post("/{table}", status_code=201)
@handle_admin_errors
async def insert_row(
    table: str,
    data: dict[str, Any] = Body(...),
    table_service: TableService = Depends(get_table_service),
) -> dict[str, Any]:
    """
    Insert a row.

    Raises:
        HTTPException(400): Unknown table or column
        HTTPException(409): Constraint violation
    """
    return await table_service.insert(table, data)


@router.patch("/{table}/{row_id}")
@handle_admin_errors
async def update_row(
    table: str,
    row_id: str,
    data: dict[str, Any] = Body(...),
    table_service: TableService = Depends(get_table_service),
) -> dict[str, Any]:
    """
    Update a row by id.

    Raises:
        HTTPException(404): Row not found
    """
    return await table_service.update(table, row_id, data)


@router.delete("/{table}/{row_id}", status_code=204)
@handle_admin_errors
async def delete_row(
    table: str,
    row_id: str,
    table_service: TableService = Depends(get_table_service),
) -> Response:
    await table_service.delete(table, row_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
