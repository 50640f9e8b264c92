"""
Commodity ORM models.

Dependencies: sqlalchemy, agrideck.boundary.db.base
System role: Tradable agricultural commodities and their localized names
"""

from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from agrideck.boundary.db.base import Base


class CommodityModel(Base):
    """
    Commodity with English canonical name and optional image path.

    Attributes:
        id: Integer primary key
        name: English name
        image: Storage path or URL of the product photo
        commodity_translations: Localized names, one per language
    """

    __tablename__ = "commodities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    image: Mapped[str | None] = mapped_column(String(1024), nullable=True)

    commodity_translations = relationship(
        "CommodityTranslationModel",
        back_populates="commodity",
        order_by="CommodityTranslationModel.language_code",
    )


class CommodityTranslationModel(Base):
    """
    Localized commodity name keyed by (commodity_id, language_code).

    needs_review marks machine output that no human has verified yet.
    """

    __tablename__ = "commodity_translations"

    commodity_id: Mapped[int] = mapped_column(
        ForeignKey("commodities.id", ondelete="CASCADE"), primary_key=True
    )
    language_code: Mapped[str] = mapped_column(
        ForeignKey("languages.code"), primary_key=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    unit: Mapped[str | None] = mapped_column(String(64), nullable=True)
    needs_review: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=True)

    commodity = relationship("CommodityModel", back_populates="commodity_translations")
