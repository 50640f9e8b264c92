"""
API routers.

Exports one APIRouter per resource for assembly in agrideck.api.main.
"""

from .dashboard import router as dashboard_router
from .edits import router as edits_router
from .gemini import router as gemini_router
from .health import router as health_router
from .tables import router as tables_router
from .translations import router as translations_router
from .users import router as users_router

__all__ = [
    "dashboard_router",
    "edits_router",
    "gemini_router",
    "health_router",
    "tables_router",
    "translations_router",
    "users_router",
]
