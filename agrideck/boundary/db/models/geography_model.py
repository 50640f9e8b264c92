"""
State and district ORM models.

Dependencies: sqlalchemy, agrideck.boundary.db.base
System role: Geography hierarchy used by mandis and users
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from agrideck.boundary.db.base import Base


class StateModel(Base):
    """
    Indian state with English canonical name.

    Attributes:
        id: Integer primary key
        name: English name
        state_translations: Localized names, one per language
    """

    __tablename__ = "states"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    state_translations = relationship(
        "StateTranslationModel",
        back_populates="state",
        order_by="StateTranslationModel.language_code",
    )


class StateTranslationModel(Base):
    """Localized state name keyed by (state_id, language_code)."""

    __tablename__ = "state_translations"

    state_id: Mapped[int] = mapped_column(
        ForeignKey("states.id", ondelete="CASCADE"), primary_key=True
    )
    language_code: Mapped[str] = mapped_column(
        ForeignKey("languages.code"), primary_key=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    needs_review: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=True)

    state = relationship("StateModel", back_populates="state_translations")


class DistrictModel(Base):
    """District within a state."""

    __tablename__ = "districts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    state_id: Mapped[int | None] = mapped_column(ForeignKey("states.id"), nullable=True)
    created_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    state = relationship("StateModel")
