"""
Mandi (wholesale market) ORM models.

Dependencies: sqlalchemy, agrideck.boundary.db.base
System role: Regional markets and their localized names
"""

from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from agrideck.boundary.db.base import Base


class MandiModel(Base):
    """
    Regional agricultural wholesale market.

    Attributes:
        id: Integer primary key
        name: English name (often suffixed "APMC")
        district_id: Owning district
        state_id: Owning state
        mandi_translations: Localized name/district, one per language
    """

    __tablename__ = "mandis"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    district_id: Mapped[int | None] = mapped_column(ForeignKey("districts.id"), nullable=True)
    state_id: Mapped[int | None] = mapped_column(ForeignKey("states.id"), nullable=True)

    district = relationship("DistrictModel")
    state = relationship("StateModel")
    mandi_translations = relationship(
        "MandiTranslationModel",
        back_populates="mandi",
        order_by="MandiTranslationModel.language_code",
    )


class MandiTranslationModel(Base):
    """Localized mandi name and district keyed by (mandi_id, language_code)."""

    __tablename__ = "mandi_translations"

    mandi_id: Mapped[int] = mapped_column(
        ForeignKey("mandis.id", ondelete="CASCADE"), primary_key=True
    )
    language_code: Mapped[str] = mapped_column(
        ForeignKey("languages.code"), primary_key=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    district: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    needs_review: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=True)

    mandi = relationship("MandiModel", back_populates="mandi_translations")
