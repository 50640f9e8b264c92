"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: agrideck.configs, agrideck.application, agrideck.boundary, agrideck.core
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from agrideck.application.services import (
    DashboardService,
    EditDraftStore,
    TableService,
    TranslationEditorService,
    UserService,
)
from agrideck.boundary.db import get_async_db
from agrideck.configs import get_settings
from agrideck.core.gemini import GeminiGateway, build_client


class ServiceCache:
    """Container for process-wide service instances."""

    def __init__(self):
        self._gemini_gateway = None
        self._draft_store = None

    @property
    def gemini_gateway(self) -> GeminiGateway:
        """Get cached Gemini gateway."""
        if self._gemini_gateway is None:
            settings = get_settings().gemini
            self._gemini_gateway = GeminiGateway(build_client(settings), settings)
        return self._gemini_gateway

    @property
    def draft_store(self) -> EditDraftStore:
        """Get the edit draft store shared by all requests."""
        if self._draft_store is None:
            self._draft_store = EditDraftStore()
        return self._draft_store

    def clear(self) -> None:
        """Clear all cached instances."""
        self._gemini_gateway = None
        self._draft_store = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_gemini_gateway() -> GeminiGateway:
    return get_service_cache().gemini_gateway


def get_draft_store() -> EditDraftStore:
    return get_service_cache().draft_store


def get_translation_editor_service(
    db: AsyncSession = Depends(get_async_db),
    store: EditDraftStore = Depends(get_draft_store),
    gateway: GeminiGateway = Depends(get_gemini_gateway),
) -> TranslationEditorService:
    """
    Get translation editor service instance.

    Args:
        db: Async database session (injected via Depends)
        store: Process-wide edit draft store
        gateway: Gemini gateway used for suggestions

    Returns:
        TranslationEditorService: Editor service bound to this request's session
    """
    return TranslationEditorService(db=db, store=store, gateway=gateway)


def get_table_service(db: AsyncSession = Depends(get_async_db)) -> TableService:
    """
    Get table service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        TableService: Generic table service instance
    """
    return TableService(db=db)


def get_dashboard_service(db: AsyncSession = Depends(get_async_db)) -> DashboardService:
    return DashboardService(db=db)


def get_user_service(db: AsyncSession = Depends(get_async_db)) -> UserService:
    return UserService(db=db)
