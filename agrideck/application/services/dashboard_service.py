"""
Dashboard and translation overview service.

Aggregates counts for the admin home page and per-kind translation
coverage for the translations overview.

Dependencies: sqlalchemy, agrideck.boundary.db
System role: Read-only statistics use cases
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from agrideck.boundary.db.CRUD import BaseCRUD, get_translation_crud, language_crud
from agrideck.boundary.db.models import (
    CommodityTranslationModel,
    DealModel,
    DealStatus,
    ListingModel,
    ListingStatus,
    UserModel,
)
from agrideck.core.entities import EntityKind

logger = logging.getLogger(__name__)


class DashboardService:
    """Statistics orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_stats(self) -> dict[str, int]:
        """
        Headline numbers for the dashboard.

        Returns:
            dict with total_users, active_listings, pending_translations
            (commodity translations needing review) and completed_deals
            (completed on both sides)
        """
        total_users = await BaseCRUD(UserModel).count(self.db)
        active_listings = await BaseCRUD(ListingModel).count(
            self.db, ListingModel.status == ListingStatus.ACTIVE
        )
        pending_translations = await BaseCRUD(CommodityTranslationModel).count(
            self.db, CommodityTranslationModel.needs_review.is_(True)
        )
        completed_deals = await BaseCRUD(DealModel).count(
            self.db,
            DealModel.farmer_status == DealStatus.COMPLETED,
            DealModel.buyer_status == DealStatus.COMPLETED,
        )
        return {
            "total_users": total_users,
            "active_listings": active_listings,
            "pending_translations": pending_translations,
            "completed_deals": completed_deals,
        }

    async def get_translation_overview(self) -> dict[str, dict]:
        """
        Coverage per translatable kind.

        A kind whose queries fail reports zeros instead of failing the
        whole overview.

        Returns:
            {kind: {"total", "needs_review", "completed", "languages"}}
        """
        overview = {}
        for kind in EntityKind:
            crud = get_translation_crud(kind)
            try:
                total = await crud.count(self.db)
                needs_review = await crud.count_needing_review(self.db)
                languages = await crud.languages_present(self.db)
            except Exception as e:
                await self.db.rollback()
                logger.error(
                    f"{__name__}:get_translation_overview - {kind.value} stats failed - {type(e).__name__}: {e}"
                )
                total, needs_review, languages = 0, 0, []
            overview[kind.value] = {
                "total": total,
                "needs_review": needs_review,
                "completed": total - needs_review,
                "languages": languages,
            }
        return overview

    async def list_languages(self) -> list[dict[str, str]]:
        languages = await language_crud.list_ordered(self.db)
        return [{"code": lang.code, "name": lang.name} for lang in languages]
