"""
Listing and deal ORM models.

Only the columns the admin dashboard reads are mapped.

Dependencies: sqlalchemy, agrideck.boundary.db.base
System role: Marketplace activity used by dashboard statistics and tables
"""

import enum
import uuid

from sqlalchemy import Enum, Float, ForeignKey, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from agrideck.boundary.db.base import Base, TimestampMixin, UUIDMixin
from agrideck.boundary.db.models.user_model import _enum_values


class ListingStatus(str, enum.Enum):
    """listing_status_enum."""

    ACTIVE = "active"
    EXPIRED = "expired"
    CANCELLED = "cancelled"
    DELETED = "deleted"
    SOLD_OUT = "sold_out"


class DealStatus(str, enum.Enum):
    """deal_status_enum, tracked separately for each side of a deal."""

    ACCEPTED = "accepted"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    PENDING = "pending"


class ListingModel(Base, UUIDMixin, TimestampMixin):
    """Farmer's offer to sell a quantity of a commodity."""

    __tablename__ = "listings"

    farmer_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id"), nullable=False
    )
    commodity_id: Mapped[int] = mapped_column(ForeignKey("commodities.id"), nullable=False)
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status: Mapped[ListingStatus] = mapped_column(
        Enum(ListingStatus, name="listing_status_enum", values_callable=_enum_values),
        nullable=False,
        default=ListingStatus.ACTIVE,
    )
    price_per_unit: Mapped[float] = mapped_column(Float, nullable=False)
    quantity: Mapped[float] = mapped_column(Float, nullable=False)
    quantity_unit: Mapped[str] = mapped_column(String(32), nullable=False)


class DealModel(Base, UUIDMixin, TimestampMixin):
    """Agreed trade between a farmer and a buyer for one listing."""

    __tablename__ = "deals"

    listing_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("listings.id"), nullable=False
    )
    buyer_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False)
    farmer_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False)
    final_price: Mapped[float] = mapped_column(Float, nullable=False)
    farmer_status: Mapped[DealStatus | None] = mapped_column(
        Enum(DealStatus, name="deal_status_enum", values_callable=_enum_values),
        nullable=True,
        default=DealStatus.PENDING,
    )
    buyer_status: Mapped[DealStatus | None] = mapped_column(
        Enum(DealStatus, name="deal_status_enum", values_callable=_enum_values),
        nullable=True,
        default=DealStatus.PENDING,
    )
