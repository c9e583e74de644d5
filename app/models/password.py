from typing import Optional

from pydantic import BaseModel, Field

from app.models.base import OwnedRecord


class PasswordBase(BaseModel):
    """Base password entry schema."""
    person_name: str = Field(..., min_length=1, max_length=100)
    service_name: str = Field(..., min_length=1, max_length=100)
    username: str = Field(..., min_length=1, max_length=200)
    password: str = Field(..., min_length=1)
    # False when the entry only stores a pattern or hint
    is_actual_password: bool = False
    notes: Optional[str] = None


class PasswordCreate(PasswordBase):
    """Password entry creation / replacement schema."""
    pass


class PasswordInDB(OwnedRecord, PasswordBase):
    pass
