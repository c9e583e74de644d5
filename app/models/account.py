from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.models.base import OwnedRecord, Tags
from app.utils.validation import normalize_ifsc


class BankAccountBase(BaseModel):
    """Base bank account schema."""
    bank_name: str = Field(..., min_length=1, max_length=100)
    account_number: str = Field(..., min_length=1, max_length=34)
    account_type: str = Field(..., min_length=1, max_length=50)
    customer_id: Optional[str] = None
    ifsc_code: str
    net_banking_password: Optional[str] = None  # pattern or hint
    mpin: Optional[str] = None
    tags: Tags = []


class BankAccountCreate(BankAccountBase):
    """Bank account creation / replacement schema."""

    @field_validator("ifsc_code")
    @classmethod
    def check_ifsc(cls, value: str) -> str:
        return normalize_ifsc(value)

    @field_validator("account_number")
    @classmethod
    def check_account_number(cls, value: str) -> str:
        if not value.isdigit():
            raise ValueError("Account number must contain only digits")
        return value


class BankAccountInDB(OwnedRecord, BankAccountBase):
    pass
