"""FastAPI dependency factories."""

from agrideck.api.deps.dependencies import (
    get_dashboard_service,
    get_draft_store,
    get_gemini_gateway,
    get_service_cache,
    get_table_service,
    get_translation_editor_service,
    get_user_service,
)

__all__ = [
    "get_dashboard_service",
    "get_draft_store",
    "get_gemini_gateway",
    "get_service_cache",
    "get_table_service",
    "get_translation_editor_service",
    "get_user_service",
]
