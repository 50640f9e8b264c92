"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - TranslatableEntity, EntityKind, get_translatable: Translation table registry
  - language_crud, user_crud, get_translation_crud: CRUD entry points

Dependencies: sqlalchemy, agrideck.configs
System role: Database adapter over the hosted Supabase Postgres schema
"""

from agrideck.boundary.db.base import Base, TimestampMixin, UUIDMixin
from agrideck.boundary.db.connection import (
    dispose_engine,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from agrideck.boundary.db.translatable import (
    TRANSLATABLE_ENTITIES,
    EntityKind,
    TranslatableEntity,
    get_translatable,
)
from agrideck.boundary.db.CRUD import (
    BaseCRUD,
    LanguageCRUD,
    TranslationCRUD,
    UserCRUD,
    get_translation_crud,
    language_crud,
    user_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "dispose_engine",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Registry
    "TRANSLATABLE_ENTITIES",
    "EntityKind",
    "TranslatableEntity",
    "get_translatable",
    # CRUD
    "BaseCRUD",
    "LanguageCRUD",
    "TranslationCRUD",
    "UserCRUD",
    "get_translation_crud",
    "language_crud",
    "user_crud",
]
