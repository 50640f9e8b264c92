"""
List view definitions for the admin tables.

Dependencies: agrideck.boundary.db.models, agrideck.core.table_query
System role: Which tables the generic list/mutation API exposes, and how
"""

from agrideck.boundary.db.base import Base
from agrideck.boundary.db.models import (
    CommodityModel,
    DealModel,
    DealStatus,
    DistrictModel,
    ListingModel,
    ListingStatus,
    MandiModel,
    StateModel,
    UserModel,
    UserRole,
    UserStatus,
)
from agrideck.core.exceptions import ValidationError
from agrideck.core.table_query import SortState, TableColumn, TableConfig


def _options(enum_cls) -> list[dict[str, str]]:
    return [{"label": m.value.replace("_", " ").title(), "value": m.value} for m in enum_cls]


USERS = TableConfig(
    table="users",
    columns=[
        TableColumn("full_name", "Name", sortable=True, searchable=True),
        TableColumn("phone_number", "Phone", searchable=True),
        TableColumn("business_name", "Business", sortable=True, searchable=True),
        TableColumn("role", "Role", sortable=True, filter_type="select", filter_options=_options(UserRole)),
        TableColumn("status", "Status", sortable=True, filter_type="select", filter_options=_options(UserStatus)),
        TableColumn("language_preference", "Language", filter_type="text"),
        TableColumn("created_at", "Joined", sortable=True, filter_type="date"),
    ],
    default_sort=SortState("created_at", "desc"),
)

COMMODITIES = TableConfig(
    table="commodities",
    columns=[
        TableColumn("id", "ID", sortable=True),
        TableColumn("name", "Name", sortable=True, searchable=True),
        TableColumn("image", "Image"),
    ],
    default_sort=SortState("name", "asc"),
)

MANDIS = TableConfig(
    table="mandis",
    columns=[
        TableColumn("id", "ID", sortable=True),
        TableColumn("name", "Name", sortable=True, searchable=True),
        TableColumn("district_id", "District", filter_type="select"),
        TableColumn("state_id", "State", filter_type="select"),
    ],
    default_sort=SortState("name", "asc"),
)

STATES = TableConfig(
    table="states",
    columns=[
        TableColumn("id", "ID", sortable=True),
        TableColumn("name", "Name", sortable=True, searchable=True),
    ],
    default_sort=SortState("name", "asc"),
)

DISTRICTS = TableConfig(
    table="districts",
    columns=[
        TableColumn("id", "ID", sortable=True),
        TableColumn("name", "Name", sortable=True, searchable=True),
        TableColumn("state_id", "State", filter_type="select"),
        TableColumn("created_at", "Created", sortable=True, filter_type="date"),
    ],
    default_sort=SortState("name", "asc"),
)

LISTINGS = TableConfig(
    table="listings",
    columns=[
        TableColumn("title", "Title", sortable=True, searchable=True),
        TableColumn("status", "Status", sortable=True, filter_type="select", filter_options=_options(ListingStatus)),
        TableColumn("price_per_unit", "Price", sortable=True),
        TableColumn("quantity", "Quantity", sortable=True),
        TableColumn("quantity_unit", "Unit", filter_type="text"),
        TableColumn("commodity_id", "Commodity", filter_type="select"),
        TableColumn("created_at", "Created", sortable=True, filter_type="date"),
    ],
    default_sort=SortState("created_at", "desc"),
)

DEALS = TableConfig(
    table="deals",
    columns=[
        TableColumn("final_price", "Final price", sortable=True),
        TableColumn("farmer_status", "Farmer status", filter_type="select", filter_options=_options(DealStatus)),
        TableColumn("buyer_status", "Buyer status", filter_type="select", filter_options=_options(DealStatus)),
        TableColumn("created_at", "Created", sortable=True, filter_type="date"),
    ],
    default_sort=SortState("created_at", "desc"),
)

TABLES: dict[str, tuple[type[Base], TableConfig]] = {
    config.table: (model, config)
    for model, config in (
        (UserModel, USERS),
        (CommodityModel, COMMODITIES),
        (MandiModel, MANDIS),
        (StateModel, STATES),
        (DistrictModel, DISTRICTS),
        (ListingModel, LISTINGS),
        (DealModel, DEALS),
    )
}


def get_table(table: str) -> tuple[type[Base], TableConfig]:
    """
    Look up a registered table.

    Raises:
        ValidationError: If the table is not exposed
    """
    try:
        return TABLES[table]
    except KeyError:
        raise ValidationError(f"Unknown table: {table}", field="table") from None
