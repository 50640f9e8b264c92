"""
Database models package.

Exports:
  - LanguageModel: Translation target languages
  - StateModel, StateTranslationModel, DistrictModel: Geography
  - CommodityModel, CommodityTranslationModel: Commodities
  - MandiModel, MandiTranslationModel: Markets
  - UserModel, UserMandiModel, UserRole, UserStatus: Users and market assignment
  - ListingModel, DealModel, ListingStatus, DealStatus: Marketplace activity

Dependencies: sqlalchemy, agrideck.boundary.db.base
System role: Database model definitions mirroring the Supabase schema
"""

from agrideck.boundary.db.models.language_model import LanguageModel
from agrideck.boundary.db.models.geography_model import (
    DistrictModel,
    StateModel,
    StateTranslationModel,
)
from agrideck.boundary.db.models.commodity_model import (
    CommodityModel,
    CommodityTranslationModel,
)
from agrideck.boundary.db.models.mandi_model import MandiModel, MandiTranslationModel
from agrideck.boundary.db.models.user_model import (
    UserMandiModel,
    UserModel,
    UserRole,
    UserStatus,
)
from agrideck.boundary.db.models.marketplace_model import (
    DealModel,
    DealStatus,
    ListingModel,
    ListingStatus,
)

__all__ = [
    "LanguageModel",
    "StateModel",
    "StateTranslationModel",
    "DistrictModel",
    "CommodityModel",
    "CommodityTranslationModel",
    "MandiModel",
    "MandiTranslationModel",
    "UserModel",
    "UserMandiModel",
    "UserRole",
    "UserStatus",
    "ListingModel",
    "ListingStatus",
    "DealModel",
    "DealStatus",
]
