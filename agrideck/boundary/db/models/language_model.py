"""
Language ORM model.

Dependencies: sqlalchemy, agrideck.boundary.db.base
System role: Lookup table of translation target languages
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from agrideck.boundary.db.base import Base


class LanguageModel(Base):
    """
    Supported language (e.g. code "hi", name "Hindi").

    Every translation row references a language by code.
    """

    __tablename__ = "languages"

    code: Mapped[str] = mapped_column(String(10), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
