"""
Translation CRUD operations.

Reads translatable entities together with their translation rows and
writes base-name renames and conflict-free translation upserts.

Dependencies: sqlalchemy, agrideck.boundary.db.translatable
System role: Persistence for the batch translation workflow
"""

import logging
from typing import Any, Sequence

from sqlalchemy import distinct, func, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from agrideck.boundary.db.base import Base
from agrideck.boundary.db.CRUD.base_crud import BaseCRUD
from agrideck.boundary.db.translatable import EntityKind, TranslatableEntity, get_translatable
from agrideck.core.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class TranslationCRUD(BaseCRUD[Base]):
    """
    CRUD operations for one translatable entity kind.

    Wraps the base model (rename) and its translations table (upsert,
    review counts, language coverage).
    """

    def __init__(self, entity: TranslatableEntity) -> None:
        """Initialize with a registry entry."""
        super().__init__(entity.model)
        self.entity = entity

    async def list_with_translations(
        self,
        session: AsyncSession,
        search: str | None = None,
    ) -> Sequence[Base]:
        """
        Retrieve all entities ordered by name with translations eagerly loaded.

        Args:
            session: Async database session
            search: Optional case-insensitive filter on the English name

        Returns:
            Sequence of base model rows
        """
        model = self.entity.model
        stmt = (
            select(model)
            .options(selectinload(getattr(model, self.entity.translations_key)))
            .order_by(model.name)
        )
        if self.entity.kind == EntityKind.MANDI:
            stmt = stmt.options(selectinload(model.district), selectinload(model.state))
        if search:
            stmt = stmt.where(model.name.ilike(f"%{search}%"))
        result = await session.execute(stmt)
        return result.scalars().all()

    async def rename(self, session: AsyncSession, entity_id: Any, name: str) -> None:
        """
        Update the English canonical name of an entity.

        Raises:
            EntityNotFoundError: If no row has this id
        """
        model = self.entity.model
        stmt = update(model).where(model.id == entity_id).values(name=name)
        result = await session.execute(stmt)
        if result.rowcount == 0:
            raise EntityNotFoundError(self.entity.kind.value, entity_id)

    async def upsert_translation(self, session: AsyncSession, payload: dict[str, Any]) -> None:
        """
        Insert a translation row or update only the supplied fields of the existing one.

        Args:
            session: Async database session
            payload: {fk_column: id, "language_code": code, <field>: value, ...}
        """
        key_columns = self.entity.conflict_columns
        changed = {k: v for k, v in payload.items() if k not in key_columns}
        values = {**self.entity.new_row_defaults(), **payload}

        insert_fn = pg_insert if session.get_bind().dialect.name == "postgresql" else sqlite_insert
        stmt = insert_fn(self.entity.translation_model).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=list(key_columns),
            set_={column: stmt.excluded[column] for column in changed},
        )
        await session.execute(stmt)
        logger.debug(
            f"{__name__}:upsert_translation - {self.entity.translation_model.__tablename__} "
            f"{payload[self.entity.fk_column]}/{payload['language_code']} fields={sorted(changed)}"
        )

    async def count_needing_review(self, session: AsyncSession) -> int:
        """Count translation rows flagged needs_review."""
        translation_model = self.entity.translation_model
        stmt = (
            select(func.count())
            .select_from(translation_model)
            .where(translation_model.needs_review.is_(True))
        )
        result = await session.execute(stmt)
        return int(result.scalar_one())

    async def languages_present(self, session: AsyncSession) -> list[str]:
        """Sorted distinct language codes that have at least one translation row."""
        translation_model = self.entity.translation_model
        stmt = select(distinct(translation_model.language_code)).order_by(
            translation_model.language_code
        )
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def list_missing_translation(
        self,
        session: AsyncSession,
        language_code: str,
        limit: int,
    ) -> Sequence[Base]:
        """
        Entities whose translation for language_code is absent or blank.

        Args:
            session: Async database session
            language_code: Target language
            limit: Maximum rows to return (first by name)
        """
        model = self.entity.model
        translation_model = self.entity.translation_model
        fk = getattr(translation_model, self.entity.fk_column)
        translated = (
            select(fk)
            .where(translation_model.language_code == language_code)
            .where(func.trim(translation_model.name) != "")
        )
        stmt = (
            select(model)
            .where(model.id.not_in(translated))
            .order_by(model.name)
            .limit(limit)
        )
        if self.entity.kind == EntityKind.MANDI:
            stmt = stmt.options(selectinload(model.district))
        result = await session.execute(stmt)
        return result.scalars().all()


def get_translation_crud(kind: str | EntityKind) -> TranslationCRUD:
    """Build the CRUD wrapper for an entity kind."""
    return TranslationCRUD(get_translatable(kind))
