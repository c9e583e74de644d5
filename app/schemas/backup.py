from typing import Dict
from pydantic import BaseModel


class KindCounts(BaseModel):
    imported: int = 0
    failed: int = 0


class RestoreSummary(BaseModel):
    """Outcome of replaying a backup snapshot."""
    kinds: Dict[str, KindCounts]
    imported: int
    failed: int
