"""
OwnedRepository - CRUD over one owned table of the data store.

Every record kind that carries an owner_id gets a subclass naming its
table, id label and model. Subclasses hook in with:
- _merge:     how an update payload combines with the stored record
- _prepare:   derived fields and defaults, run on create and update
- _on_delete: cascades after a record is removed

Method bodies never await, so each call runs to completion before any
other request touches the store.
"""

import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from app.core.errors import NotFoundOrForbidden
from app.db.store import DataStore
from app.models.base import OwnedRecord

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=OwnedRecord)

# Keys a payload may never override
PROTECTED_KEYS = ("id", "owner_id")


def ensure_owner(record: Optional[RecordT], owner_id: int, kind: str, record_id: int) -> RecordT:
    """Return the record if the caller owns it, else raise NotFoundOrForbidden."""
    if record is None or record.owner_id != owner_id:
        raise NotFoundOrForbidden(kind, record_id)
    return record


class OwnedRepository(Generic[RecordT]):
    """Generic owner-scoped repository."""

    table_name: str
    id_label: str
    kind: str
    model: Type[RecordT]

    def __init__(self, store: DataStore):
        self.store = store
        self.records: Dict[int, RecordT] = store.table(self.table_name)

    def _merge(self, existing: RecordT, data: Dict[str, Any]) -> Dict[str, Any]:
        # Full replace
        return data

    def _prepare(self, data: Dict[str, Any], existing: Optional[RecordT]) -> Dict[str, Any]:
        return data

    def _on_delete(self, record: RecordT) -> None:
        pass

    def _get_owned(self, owner_id: int, record_id: int) -> RecordT:
        return ensure_owner(self.records.get(record_id), owner_id, self.kind, record_id)

    def _build(self, data: Dict[str, Any], record_id: int, owner_id: int) -> RecordT:
        for key in PROTECTED_KEYS:
            data.pop(key, None)
        return self.model(**data, id=record_id, owner_id=owner_id)

    async def list(self, owner_id: int) -> List[RecordT]:
        """List records owned by a user."""
        return [
            record.model_copy(deep=True)
            for record in self.records.values()
            if record.owner_id == owner_id
        ]

    async def get(self, owner_id: int, record_id: int) -> RecordT:
        """Get one record owned by a user."""
        return self._get_owned(owner_id, record_id).model_copy(deep=True)

    async def create(self, owner_id: int, data: Dict[str, Any]) -> RecordT:
        """Create a record for a user."""
        data = self._prepare(dict(data), None)
        record = self._build(data, self.store.ids.next(self.id_label), owner_id)
        self.records[record.id] = record
        logger.debug("Created %s %s for user %s", self.kind, record.id, owner_id)
        return record.model_copy(deep=True)

    async def update(self, owner_id: int, record_id: int, data: Dict[str, Any]) -> RecordT:
        """Update a record; id and owner are kept."""
        existing = self._get_owned(owner_id, record_id)
        data = self._prepare(self._merge(existing, dict(data)), existing)
        record = self._build(data, existing.id, existing.owner_id)
        self.records[record.id] = record
        logger.debug("Updated %s %s for user %s", self.kind, record.id, owner_id)
        return record.model_copy(deep=True)

    async def delete(self, owner_id: int, record_id: int) -> None:
        """Delete a record and run its cascades."""
        record = self._get_owned(owner_id, record_id)
        del self.records[record_id]
        self._on_delete(record)
        logger.info("Deleted %s %s for user %s", self.kind, record_id, owner_id)
