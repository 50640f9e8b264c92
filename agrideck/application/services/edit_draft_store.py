"""
In-process store of translation edit drafts.

A draft pairs an entity kind with its pending-change ledger. Drafts live
in this process only; they are not shared between workers and do not
survive a restart.

Dependencies: agrideck.core
System role: Server-side home of the pending-change ledger
"""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from agrideck.core.change_ledger import ChangeLedger
from agrideck.core.entities import EntityKind
from agrideck.core.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


@dataclass
class EditDraft:
    """Pending edits against one entity kind."""

    entity: EntityKind
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    ledger: ChangeLedger = field(default_factory=ChangeLedger)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class EditDraftStore:
    """Map of draft id to EditDraft."""

    def __init__(self) -> None:
        self._drafts: dict[uuid.UUID, EditDraft] = {}

    def __len__(self) -> int:
        return len(self._drafts)

    def create(self, entity: EntityKind) -> EditDraft:
        draft = EditDraft(entity=entity)
        self._drafts[draft.id] = draft
        logger.info(
            f"{__name__}:create - draft opened",
            extra={"draft_id": str(draft.id), "entity": entity.value},
        )
        return draft

    def get(self, draft_id: uuid.UUID) -> EditDraft:
        """
        Look up a draft.

        Raises:
            EntityNotFoundError: If no draft has this id
        """
        draft = self._drafts.get(draft_id)
        if draft is None:
            raise EntityNotFoundError("Edit draft", draft_id)
        return draft

    def remove(self, draft_id: uuid.UUID) -> None:
        """Forget a draft; unknown ids raise EntityNotFoundError."""
        self.get(draft_id)
        del self._drafts[draft_id]

    def clear(self) -> None:
        self._drafts.clear()
