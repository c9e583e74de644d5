from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, List

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from app.utils.validation import normalize_tags


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


Tags = Annotated[List[str], AfterValidator(normalize_tags)]

# Request-side money. Stored records keep the canonical text instead.
PositiveAmount = Annotated[Decimal, Field(gt=0, allow_inf_nan=False)]
NonNegativeAmount = Annotated[Decimal, Field(ge=0, allow_inf_nan=False)]


class StoredRecord(BaseModel):
    """Base of every record held by the data store."""
    id: int

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True
    )


class OwnedRecord(StoredRecord):
    """Record scoped to a single user."""
    owner_id: int
