"""
User service orchestrator.

User detail for the admin user page and mandi (market) assignment.

Dependencies: sqlalchemy, agrideck.boundary.db.CRUD
System role: User management use cases
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from agrideck.boundary.db.CRUD import user_crud
from agrideck.boundary.db.models import MandiModel, UserModel
from agrideck.core.exceptions import EntityNotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _mandi_summary(mandi: MandiModel) -> dict[str, Any]:
    return {
        "id": mandi.id,
        "name": mandi.name,
        "district": mandi.district.name if mandi.district else None,
    }


class UserService:
    """User detail and market assignment orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize user service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def _require_user(self, user_id: UUID) -> UserModel:
        user = await user_crud.get_detail(self.db, user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return user

    async def get_user_detail(self, user_id: UUID) -> dict[str, Any]:
        """
        Get user with location names and assigned mandis.

        Raises:
            EntityNotFoundError: If user not found
        """
        user = await self._require_user(user_id)
        return {
            "id": user.id,
            "full_name": user.full_name,
            "phone_number": user.phone_number,
            "role": user.role.value,
            "status": user.status.value,
            "language_preference": user.language_preference,
            "business_name": user.business_name,
            "farm_name": user.farm_name,
            "address": user.address,
            "average_rating": user.average_rating,
            "rating_count": user.rating_count,
            "state_id": user.state_id,
            "state_name": user.state.name if user.state else None,
            "district_id": user.district_id,
            "district_name": user.district.name if user.district else None,
            "created_at": user.created_at,
            "mandis": [_mandi_summary(link.mandi) for link in user.user_mandis],
        }

    async def get_available_mandis(self, user_id: UUID) -> list[dict[str, Any]]:
        """
        Mandis in the user's state that are not yet assigned to them.

        Raises:
            EntityNotFoundError: If user not found
            ValidationError: If the user has no state
        """
        user = await self._require_user(user_id)
        if user.state_id is None:
            raise ValidationError("User does not have a state assigned.", field="state_id")

        assigned = {link.mandi_id for link in user.user_mandis}
        mandis = await user_crud.list_mandis_in_state(self.db, user.state_id)
        return [_mandi_summary(m) for m in mandis if m.id not in assigned]

    async def assign_mandi(self, user_id: UUID, mandi_id: int) -> None:
        """
        Assign a market to a user.

        Raises:
            EntityNotFoundError: If user not found
            ConflictError: If already assigned
        """
        await self._require_user(user_id)
        await user_crud.assign_mandi(self.db, user_id, mandi_id)
        await self.db.commit()
        logger.info(
            f"{__name__}:assign_mandi - market assigned",
            extra={"user_id": str(user_id), "mandi_id": mandi_id},
        )

    async def remove_mandi(self, user_id: UUID, mandi_id: int) -> None:
        """
        Remove a market from a user.

        Raises:
            EntityNotFoundError: If the assignment does not exist
        """
        removed = await user_crud.remove_mandi(self.db, user_id, mandi_id)
        if not removed:
            raise EntityNotFoundError("Market assignment", f"{user_id}/{mandi_id}")
        await self.db.commit()
        logger.info(
            f"{__name__}:remove_mandi - market removed",
            extra={"user_id": str(user_id), "mandi_id": mandi_id},
        )
