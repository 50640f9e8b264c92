"""
Generic admin table service.

Lists any registered table through the query builder and applies
insert/update/delete mutations by primary key.

Dependencies: sqlalchemy, agrideck.core.table_query
System role: Backing service of every admin list view
"""

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from agrideck.application.services.table_registry import TABLES, get_table
from agrideck.boundary.db.CRUD.base_crud import BaseCRUD
from agrideck.core.exceptions import ConflictError, EntityNotFoundError, ValidationError
from agrideck.core.table_query import (
    PaginationState,
    SortState,
    TableConfig,
    build_table_query,
    coerce_value,
)

logger = logging.getLogger(__name__)


def serialize_row(row: Any) -> dict[str, Any]:
    return {column.key: getattr(row, column.key) for column in row.__table__.columns}


class TableService:
    """Table list and mutation orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    def list_configs(self) -> list[TableConfig]:
        return [config for _, config in TABLES.values()]

    async def list_rows(
        self,
        table: str,
        filters: dict[str, Any] | None = None,
        sort: SortState | None = None,
        page: int = 1,
        page_size: int | None = None,
    ) -> tuple[list[dict[str, Any]], PaginationState]:
        """
        One page of a table plus its exact filtered count.

        Args:
            table: Registered table name
            filters: {"search": term, <column>: value}
            sort: Requested sort (None for the table default)
            page: 1-based page
            page_size: Rows per page (None for the table default)

        Returns:
            (rows, pagination)
        """
        model, config = get_table(table)
        query = build_table_query(model, config, filters, sort, page, page_size)

        result = await self.db.execute(query.statement)
        rows = [serialize_row(r) for r in result.scalars().all()]
        total = (await self.db.execute(query.count_statement)).scalar_one()

        logger.debug(
            f"{__name__}:list_rows - {table} page {page}",
            extra={"table": table, "returned": len(rows), "total_count": total},
        )
        return rows, PaginationState(page=query.page, page_size=query.page_size, total_count=int(total))

    def _clean_payload(self, model, data: dict[str, Any]) -> dict[str, Any]:
        columns = model.__table__.c
        unknown = sorted(set(data) - set(columns.keys()))
        if unknown:
            raise ValidationError(f"Unknown columns: {', '.join(unknown)}", field="data")
        return {
            key: value if value is None else coerce_value(columns[key], value)
            for key, value in data.items()
        }

    def _coerce_id(self, model, row_id: Any) -> Any:
        return coerce_value(model.__table__.c["id"], row_id)

    async def insert(self, table: str, data: dict[str, Any]) -> dict[str, Any]:
        """Insert a row and return it as stored."""
        model, _ = get_table(table)
        crud = BaseCRUD(model)
        try:
            row = await crud.create(self.db, **self._clean_payload(model, data))
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"{__name__}:insert - constraint violation on {table}", extra={"error": str(e.orig)})
            raise ConflictError(f"Insert into {table} violates a constraint", {"table": table}) from e
        logger.info(f"{__name__}:insert - {table}", extra={"table": table, "row_id": str(row.id)})
        return serialize_row(row)

    async def update(self, table: str, row_id: Any, data: dict[str, Any]) -> dict[str, Any]:
        """
        Update a row by id.

        Raises:
            EntityNotFoundError: If no row has this id
        """
        model, _ = get_table(table)
        if not data:
            raise ValidationError("No fields to update", field="data")
        crud = BaseCRUD(model)
        row_id = self._coerce_id(model, row_id)
        try:
            row = await crud.update_by_id(self.db, row_id, **self._clean_payload(model, data))
            if row is None:
                raise EntityNotFoundError(table, row_id)
            result = serialize_row(row)
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"{__name__}:update - constraint violation on {table}", extra={"error": str(e.orig)})
            raise ConflictError(f"Update of {table} violates a constraint", {"table": table}) from e
        logger.info(f"{__name__}:update - {table}", extra={"table": table, "row_id": str(row_id)})
        return result

    async def delete(self, table: str, row_id: Any) -> None:
        """
        Delete a row by id.

        Raises:
            EntityNotFoundError: If no row has this id
        """
        model, _ = get_table(table)
        crud = BaseCRUD(model)
        row_id = self._coerce_id(model, row_id)
        try:
            deleted = await crud.delete_by_id(self.db, row_id)
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise ConflictError(f"Row of {table} is still referenced", {"table": table}) from e
        if not deleted:
            raise EntityNotFoundError(table, row_id)
        logger.info(f"{__name__}:delete - {table}", extra={"table": table, "row_id": str(row_id)})
