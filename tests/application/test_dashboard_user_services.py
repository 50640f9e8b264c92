"""
Test suite for DashboardService and UserService.
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from agrideck.application.services import DashboardService, UserService
from agrideck.boundary.db.models import (
    DealModel,
    DealStatus,
    ListingModel,
    ListingStatus,
    MandiModel,
    UserMandiModel,
    UserModel,
    UserRole,
)
from agrideck.core.exceptions import ConflictError, EntityNotFoundError, ValidationError


@pytest.fixture
async def marketplace_db(seeded_db):
    """Seeded catalog plus a farmer in Karnataka, a buyer without a state, and activity."""
    farmer_id, buyer_id = uuid4(), uuid4()
    seeded_db.add_all(
        [
            UserModel(
                id=farmer_id,
                full_name="Ravi Kumar",
                phone_number="+919000000001",
                role=UserRole.FARMER,
                state_id=1,
                district_id=10,
            ),
            UserModel(id=buyer_id, full_name="Asha", phone_number="+919000000002", role=UserRole.BUYER),
            MandiModel(id=6, name="Bengaluru APMC", state_id=1),
            MandiModel(id=7, name="Kochi APMC", state_id=2),
        ]
    )
    await seeded_db.flush()
    listing_ids = [uuid4(), uuid4()]
    seeded_db.add_all(
        [
            ListingModel(
                id=listing_ids[0],
                farmer_id=farmer_id,
                commodity_id=1,
                status=ListingStatus.ACTIVE,
                price_per_unit=20.0,
                quantity=100,
                quantity_unit="kg",
            ),
            ListingModel(
                id=listing_ids[1],
                farmer_id=farmer_id,
                commodity_id=2,
                status=ListingStatus.EXPIRED,
                price_per_unit=15.0,
                quantity=50,
                quantity_unit="kg",
            ),
            UserMandiModel(user_id=farmer_id, mandi_id=5, created_at=datetime.now(timezone.utc)),
        ]
    )
    await seeded_db.flush()
    seeded_db.add_all(
        [
            DealModel(
                listing_id=listing_ids[0],
                buyer_id=buyer_id,
                farmer_id=farmer_id,
                final_price=1900.0,
                farmer_status=DealStatus.COMPLETED,
                buyer_status=DealStatus.COMPLETED,
            ),
            DealModel(
                listing_id=listing_ids[1],
                buyer_id=buyer_id,
                farmer_id=farmer_id,
                final_price=700.0,
                farmer_status=DealStatus.COMPLETED,
                buyer_status=DealStatus.PENDING,
            ),
        ]
    )
    await seeded_db.commit()
    seeded_db.expunge_all()
    return seeded_db, farmer_id, buyer_id


class TestDashboardService:
    async def test_stats(self, marketplace_db) -> None:
        db, _, _ = marketplace_db

        stats = await DashboardService(db).get_stats()

        assert stats == {
            "total_users": 2,
            "active_listings": 1,
            "pending_translations": 1,
            "completed_deals": 1,
        }

    async def test_translation_overview(self, seeded_db) -> None:
        overview = await DashboardService(seeded_db).get_translation_overview()

        assert overview["commodity"] == {
            "total": 3,
            "needs_review": 1,
            "completed": 2,
            "languages": ["hi"],
        }
        assert overview["state"]["languages"] == ["hi"]
        assert overview["mandi"] == {"total": 1, "needs_review": 0, "completed": 1, "languages": []}

    async def test_languages_ordered_by_code(self, seeded_db) -> None:
        languages = await DashboardService(seeded_db).list_languages()

        assert languages == [{"code": "hi", "name": "Hindi"}, {"code": "ta", "name": "Tamil"}]


class TestUserService:
    async def test_user_detail_includes_location_and_mandis(self, marketplace_db) -> None:
        db, farmer_id, _ = marketplace_db

        detail = await UserService(db).get_user_detail(farmer_id)

        assert detail["state_name"] == "Karnataka"
        assert detail["district_name"] == "Mysuru"
        assert detail["role"] == "farmer"
        assert detail["mandis"] == [{"id": 5, "name": "Mysuru APMC", "district": "Mysuru"}]

    async def test_unknown_user(self, seeded_db) -> None:
        with pytest.raises(EntityNotFoundError):
            await UserService(seeded_db).get_user_detail(uuid4())

    async def test_available_mandis_excludes_assigned_and_other_states(self, marketplace_db) -> None:
        db, farmer_id, _ = marketplace_db

        mandis = await UserService(db).get_available_mandis(farmer_id)

        assert [m["id"] for m in mandis] == [6]

    async def test_available_mandis_requires_state(self, marketplace_db) -> None:
        db, _, buyer_id = marketplace_db

        with pytest.raises(ValidationError, match="does not have a state"):
            await UserService(db).get_available_mandis(buyer_id)

    async def test_assign_then_duplicate_conflicts(self, marketplace_db) -> None:
        db, farmer_id, _ = marketplace_db
        service = UserService(db)

        await service.assign_mandi(farmer_id, 6)
        db.expunge_all()

        assert await service.get_available_mandis(farmer_id) == []
        with pytest.raises(ConflictError, match="already assigned"):
            await service.assign_mandi(farmer_id, 6)

    async def test_remove_mandi(self, marketplace_db) -> None:
        db, farmer_id, _ = marketplace_db
        service = UserService(db)

        await service.remove_mandi(farmer_id, 5)

        with pytest.raises(EntityNotFoundError):
            await service.remove_mandi(farmer_id, 5)
