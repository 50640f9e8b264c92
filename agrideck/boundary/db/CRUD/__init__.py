"""
CRUD operations for database models.

Exports the base CRUD class, model-specific implementations and
pre-instantiated singletons.

Usage:
    from agrideck.boundary.db.CRUD import language_crud, get_translation_crud

    languages = await language_crud.list_ordered(db)
    commodities = get_translation_crud("commodity")
"""

from agrideck.boundary.db.CRUD.base_crud import BaseCRUD
from agrideck.boundary.db.CRUD.language_crud import LanguageCRUD, language_crud
from agrideck.boundary.db.CRUD.translation_crud import TranslationCRUD, get_translation_crud
from agrideck.boundary.db.CRUD.user_crud import UserCRUD, user_crud

__all__ = [
    "BaseCRUD",
    "LanguageCRUD",
    "language_crud",
    "TranslationCRUD",
    "get_translation_crud",
    "UserCRUD",
    "user_crud",
]
