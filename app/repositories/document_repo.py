from typing import Any, Dict, Optional

from app.models.base import _utcnow
from app.models.document import DocumentInDB
from app.repositories.base import OwnedRepository


class DocumentRepository(OwnedRepository[DocumentInDB]):
    """Document store operations."""
    table_name = "documents"
    id_label = "document"
    kind = "Document"
    model = DocumentInDB

    def _prepare(self, data: Dict[str, Any], existing: Optional[DocumentInDB]) -> Dict[str, Any]:
        now = _utcnow()
        if existing is not None:
            data["created_at"] = existing.created_at
            data["updated_at"] = now
        else:
            if data.get("created_at") is None:
                data["created_at"] = now
            if data.get("updated_at") is None:
                data["updated_at"] = data["created_at"]
        return data
