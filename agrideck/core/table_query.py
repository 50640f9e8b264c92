"""
Generic filter/sort/paginate query builder for admin tables.

Turns a TableConfig plus the current filter, sort and page state into a
SQLAlchemy range query and a matching exact-count query.

Dependencies: sqlalchemy
System role: Server-side engine behind every admin list view
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Literal

from sqlalchemy import Select, String, cast, func, or_, select

from agrideck.core.exceptions import ValidationError

FilterType = Literal["text", "select", "date", "boolean"]
SortDirection = Literal["asc", "desc"]

PAGE_SIZE_OPTIONS = [10, 50, 100, 500, 1000]
DEFAULT_PAGE_SIZE = 20
SEARCH_KEY = "search"


@dataclass(frozen=True)
class TableColumn:
    """Column shown in a list view and how it may be searched, filtered and sorted."""

    key: str
    label: str
    sortable: bool = False
    searchable: bool = False
    filter_type: FilterType | None = None
    filter_options: list[dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class SortState:
    column: str
    direction: SortDirection = "asc"


@dataclass(frozen=True)
class TableConfig:
    """List view definition for one table."""

    table: str
    columns: list[TableColumn]
    default_sort: SortState | None = None
    page_size: int = DEFAULT_PAGE_SIZE

    def column(self, key: str) -> TableColumn | None:
        return next((c for c in self.columns if c.key == key), None)

    @property
    def searchable_columns(self) -> list[TableColumn]:
        return [c for c in self.columns if c.searchable]


@dataclass
class PaginationState:
    page: int
    page_size: int
    total_count: int = 0

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size) if self.page_size else 0


@dataclass(frozen=True)
class TableQuery:
    """Row query and count query built from the same filters."""

    statement: Select
    count_statement: Select
    page: int
    page_size: int


def next_sort_state(previous: SortState | None, column: str) -> SortState | None:
    """
    Cycle the sort for a clicked column header.

    A different column starts ascending; the same column goes
    asc -> desc -> cleared.
    """
    if previous is None or previous.column != column:
        return SortState(column=column, direction="asc")
    if previous.direction == "asc":
        return SortState(column=column, direction="desc")
    return None


def coerce_value(model_column, value: Any) -> Any:
    """Convert a query-string value to the column's Python type."""
    try:
        python_type = model_column.type.python_type
    except NotImplementedError:
        return value
    if isinstance(value, python_type):
        return value
    if python_type is bool:
        return str(value).lower() == "true"
    try:
        if python_type in (datetime, date):
            return python_type.fromisoformat(str(value))
        return python_type(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid value for {model_column.key}: {value}", field=model_column.key) from e


def _as_text(model_column):
    if isinstance(model_column.type, String):
        return model_column
    return cast(model_column, String)


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def build_table_query(
    model: type,
    config: TableConfig,
    filters: dict[str, Any] | None = None,
    sort: SortState | None = None,
    page: int = 1,
    page_size: int | None = None,
) -> TableQuery:
    """
    Build the range query and exact-count query for a list view.

    Args:
        model: ORM model mapped to config.table
        config: Column definitions
        filters: {"search": term, <column key>: value, ...}; blank values and
            keys that are not configured columns are ignored
        sort: Requested sort; None or a non-sortable column uses config.default_sort
        page: 1-based page number
        page_size: Rows per page (defaults to config.page_size)

    Returns:
        TableQuery with statement selecting rows
        (page-1)*page_size .. page*page_size-1 and a count over the same filters

    Raises:
        ValidationError: If page or page_size is not positive
    """
    page_size = page_size or config.page_size
    if page < 1:
        raise ValidationError("page must be >= 1", field="page")
    if page_size < 1:
        raise ValidationError("page_size must be >= 1", field="page_size")

    table = model.__table__
    criteria = []

    for key, value in (filters or {}).items():
        if _is_blank(value):
            continue
        if key == SEARCH_KEY:
            conditions = [
                _as_text(table.c[c.key]).ilike(f"%{value}%")
                for c in config.searchable_columns
                if c.key in table.c
            ]
            if conditions:
                criteria.append(or_(*conditions))
            continue

        column = config.column(key)
        if column is None or key not in table.c:
            continue
        model_column = table.c[key]
        if column.filter_type == "boolean":
            criteria.append(model_column == (str(value).lower() == "true"))
        elif column.filter_type == "select":
            criteria.append(model_column == coerce_value(model_column, value))
        else:
            criteria.append(_as_text(model_column).ilike(f"%{value}%"))

    statement = select(model)
    count_statement = select(func.count()).select_from(model)
    if criteria:
        statement = statement.where(*criteria)
        count_statement = count_statement.where(*criteria)

    requested = sort if sort is not None and _is_sortable(config, sort.column) else None
    effective = requested or config.default_sort
    if effective is not None and effective.column in table.c:
        order_column = table.c[effective.column]
        statement = statement.order_by(
            order_column.desc() if effective.direction == "desc" else order_column.asc()
        )

    statement = statement.offset((page - 1) * page_size).limit(page_size)
    return TableQuery(
        statement=statement,
        count_statement=count_statement,
        page=page,
        page_size=page_size,
    )


def _is_sortable(config: TableConfig, key: str) -> bool:
    column = config.column(key)
    return column is not None and column.sortable
