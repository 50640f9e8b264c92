"""
Language CRUD operations.

Dependencies: sqlalchemy, agrideck.boundary.db.models
System role: Lookup of translation target languages
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from agrideck.boundary.db.CRUD.base_crud import BaseCRUD
from agrideck.boundary.db.models import LanguageModel


class LanguageCRUD(BaseCRUD[LanguageModel]):
    """CRUD operations for the languages lookup table."""

    def __init__(self) -> None:
        super().__init__(LanguageModel)

    async def list_ordered(self, session: AsyncSession) -> Sequence[LanguageModel]:
        """All languages ordered by code."""
        result = await session.execute(select(LanguageModel).order_by(LanguageModel.code))
        return result.scalars().all()

    async def get_by_code(self, session: AsyncSession, code: str) -> LanguageModel | None:
        result = await session.execute(select(LanguageModel).where(LanguageModel.code == code))
        return result.scalar_one_or_none()


language_crud = LanguageCRUD()
