"""
User ORM models.

Represents marketplace participants (farmers, buyers, admins) and the
mandis each user trades in.

Dependencies: sqlalchemy, agrideck.boundary.db.base
System role: User persistence for the admin dashboard
"""

import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, Float, ForeignKey, Integer, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from agrideck.boundary.db.base import Base, TimestampMixin, UUIDMixin


class UserRole(str, enum.Enum):
    """Marketplace role (role_enum)."""

    ADMIN = "admin"
    FARMER = "farmer"
    BUYER = "buyer"


class UserStatus(str, enum.Enum):
    """Account status (user_status_enum)."""

    ACTIVE = "active"
    SUSPENDED = "suspended"
    DELETED = "deleted"


def _enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    return [member.value for member in enum_cls]


class UserModel(Base, UUIDMixin, TimestampMixin):
    """
    Marketplace user.

    Attributes:
        full_name: Display name
        phone_number: Login phone (OTP handled by Supabase auth)
        role: admin / farmer / buyer
        status: active / suspended / deleted
        language_preference: Language code used by the mobile app
        state_id, district_id: Home location
        user_mandis: Markets assigned to the user
    """

    __tablename__ = "users"

    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(32), nullable=False)
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, name="role_enum", values_callable=_enum_values),
        nullable=False,
        default=UserRole.FARMER,
    )
    status: Mapped[UserStatus] = mapped_column(
        Enum(UserStatus, name="user_status_enum", values_callable=_enum_values),
        nullable=False,
        default=UserStatus.ACTIVE,
    )
    language_preference: Mapped[str] = mapped_column(String(10), nullable=False, default="en")
    business_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    farm_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    address: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    average_rating: Mapped[float | None] = mapped_column(Float, nullable=True)
    rating_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    state_id: Mapped[int | None] = mapped_column(ForeignKey("states.id"), nullable=True)
    district_id: Mapped[int | None] = mapped_column(ForeignKey("districts.id"), nullable=True)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    state = relationship("StateModel")
    district = relationship("DistrictModel")
    user_mandis = relationship("UserMandiModel", back_populates="user")


class UserMandiModel(Base):
    """Assignment of a mandi to a user; unique per (user_id, mandi_id)."""

    __tablename__ = "user_mandis"

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    )
    mandi_id: Mapped[int] = mapped_column(
        ForeignKey("mandis.id", ondelete="CASCADE"), primary_key=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    user = relationship("UserModel", back_populates="user_mandis")
    mandi = relationship("MandiModel")
