"""
Loan model - money given to or received from a person.

Lifecycle:
- Status: active -> completed (terminal)
- Completion stamps completed_at
- Repayments hang off a loan and are removed with it
- Amounts are stored as canonical decimal text
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from app.models.base import OwnedRecord, PositiveAmount, StoredRecord, Tags, _utcnow


class LoanType(str, Enum):
    GIVEN = "given"
    RECEIVED = "received"


class LoanStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"


class LoanCreate(BaseModel):
    """Loan creation schema."""
    person_name: str = Field(..., min_length=1, max_length=100)
    amount: PositiveAmount
    type: LoanType
    description: Optional[str] = None
    tags: Tags = []


class LoanUpdate(BaseModel):
    """Loan update schema. Only the fields sent are changed."""
    person_name: Optional[str] = Field(None, min_length=1, max_length=100)
    amount: Optional[PositiveAmount] = None
    type: Optional[LoanType] = None
    description: Optional[str] = None
    tags: Optional[Tags] = None


class LoanInDB(OwnedRecord):
    """
    Loan as held by the store.

    Invariants:
    - completed_at is set iff status has been completed
    - amount is canonical text, e.g. "1000" or "99.5"
    """
    person_name: str
    amount: str
    type: LoanType
    description: Optional[str] = None
    tags: Tags = []
    status: LoanStatus = LoanStatus.ACTIVE
    created_at: datetime = Field(default_factory=_utcnow)
    completed_at: Optional[datetime] = None


class RepaymentCreate(BaseModel):
    """Repayment creation schema. Date defaults to now."""
    amount: PositiveAmount
    date: Optional[datetime] = None
    note: Optional[str] = None


class RepaymentInDB(StoredRecord):
    loan_id: int  # access is checked through the parent loan's owner
    amount: str
    date: datetime
    note: Optional[str] = None
