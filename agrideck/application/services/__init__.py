"""
Application services.

Exports:
  - TranslationEditorService, EditDraftStore, EditDraft: batch translation editing
  - TableService: generic admin tables
  - DashboardService: statistics, translation overview, languages
  - UserService: user detail and market assignment
"""

from agrideck.application.services.dashboard_service import DashboardService
from agrideck.application.services.edit_draft_store import EditDraft, EditDraftStore
from agrideck.application.services.table_service import TableService
from agrideck.application.services.translation_editor_service import TranslationEditorService
from agrideck.application.services.user_service import UserService

__all__ = [
    "DashboardService",
    "EditDraft",
    "EditDraftStore",
    "TableService",
    "TranslationEditorService",
    "UserService",
]
