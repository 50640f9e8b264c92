"""
User CRUD operations.

Extends BaseCRUD with detail loading (state, district, assigned mandis)
and mandi assignment management.

Dependencies: sqlalchemy, agrideck.boundary.db.models
System role: User and user-mandi persistence
"""

import logging
from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from agrideck.boundary.db.CRUD.base_crud import BaseCRUD
from agrideck.boundary.db.models import MandiModel, UserMandiModel, UserModel
from agrideck.core.exceptions import ConflictError

logger = logging.getLogger(__name__)

DUPLICATE_ASSIGNMENT_MESSAGE = "This market is already assigned to the user."


class UserCRUD(BaseCRUD[UserModel]):
    """
    CRUD operations for UserModel.

    Inherits standard operations from BaseCRUD and adds:
    - get_detail: user with state, district and mandis eagerly loaded
    - list_mandis_in_state: candidate markets for assignment
    - assign_mandi / remove_mandi: user_mandis maintenance
    """

    def __init__(self) -> None:
        """Initialize UserCRUD with UserModel."""
        super().__init__(UserModel)

    async def get_detail(self, session: AsyncSession, user_id: UUID) -> UserModel | None:
        """
        Retrieve a user with location and assigned mandis loaded.

        Args:
            session: Async database session
            user_id: User UUID

        Returns:
            UserModel if found, None otherwise
        """
        stmt = (
            select(UserModel)
            .where(UserModel.id == user_id)
            .options(
                selectinload(UserModel.state),
                selectinload(UserModel.district),
                selectinload(UserModel.user_mandis)
                .selectinload(UserMandiModel.mandi)
                .selectinload(MandiModel.district),
            )
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_mandis_in_state(
        self,
        session: AsyncSession,
        state_id: int,
    ) -> Sequence[MandiModel]:
        """Mandis located in a state, ordered by name."""
        stmt = (
            select(MandiModel)
            .where(MandiModel.state_id == state_id)
            .options(selectinload(MandiModel.district))
            .order_by(MandiModel.name)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def assign_mandi(
        self,
        session: AsyncSession,
        user_id: UUID,
        mandi_id: int,
    ) -> UserMandiModel:
        """
        Assign a mandi to a user.

        Raises:
            ConflictError: If the pair already exists
        """
        existing = await session.get(UserMandiModel, (user_id, mandi_id))
        if existing is not None:
            raise ConflictError(DUPLICATE_ASSIGNMENT_MESSAGE)

        link = UserMandiModel(user_id=user_id, mandi_id=mandi_id)
        session.add(link)
        try:
            await session.flush()
        except IntegrityError as e:
            await session.rollback()
            logger.warning(
                f"{__name__}:assign_mandi - duplicate assignment",
                extra={"user_id": str(user_id), "mandi_id": mandi_id},
            )
            raise ConflictError(DUPLICATE_ASSIGNMENT_MESSAGE) from e
        return link

    async def remove_mandi(self, session: AsyncSession, user_id: UUID, mandi_id: int) -> bool:
        """Remove an assignment. Returns False when no such pair existed."""
        stmt = delete(UserMandiModel).where(
            UserMandiModel.user_id == user_id,
            UserMandiModel.mandi_id == mandi_id,
        )
        result = await session.execute(stmt)
        return result.rowcount > 0


user_crud = UserCRUD()
