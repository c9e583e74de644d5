"""
Business bookkeeping models: customer credits, expenses and daily sales.

All amounts are accepted as numbers and stored as canonical decimal text.
"""

from datetime import date, datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from app.models.base import NonNegativeAmount, OwnedRecord, PositiveAmount, _utcnow
from app.utils.validation import RecordValidationError, validate_payer, validate_shares


class CreditStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"


class PaymentMethod(str, Enum):
    CASH = "Cash"
    CARD = "Card"
    UPI = "UPI"


class PayerSource(str, Enum):
    BUSINESS = "Business"
    PERSONAL = "Personal"
    OTHER = "Other"


# Customer credits

class CustomerCreditCreate(BaseModel):
    """Customer credit creation schema."""
    customer_name: str = Field(..., min_length=1, max_length=100)
    amount: PositiveAmount
    notes: Optional[str] = None


class CustomerCreditInDB(OwnedRecord):
    customer_name: str
    amount: str
    notes: Optional[str] = None
    status: CreditStatus = CreditStatus.PENDING
    created_at: datetime = Field(default_factory=_utcnow)
    paid_date: Optional[datetime] = None


# Expenses

class ExpenseShare(BaseModel):
    """One payer's part of a shared expense."""
    payer_type: PayerSource
    payer_name: Optional[str] = None
    amount: PositiveAmount
    payment_method: PaymentMethod


class ExpenseShareRecord(BaseModel):
    payer_type: PayerSource
    payer_name: Optional[str] = None
    amount: str
    payment_method: PaymentMethod


class ExpenseCreate(BaseModel):
    """
    Expense creation / replacement schema.

    A single-payer expense names its payer and payment method. A shared
    expense instead lists shares whose amounts add up to the total.
    """
    category: str = Field(..., min_length=1, max_length=100)
    amount: PositiveAmount
    date: date
    description: Optional[str] = None
    is_shared: bool = False
    paid_by: Optional[PayerSource] = None
    payer_name: Optional[str] = None
    payment_method: Optional[PaymentMethod] = None
    shares: List[ExpenseShare] = []

    @model_validator(mode="after")
    def check_payers(self):
        if self.is_shared:
            validate_shares(self.shares, self.amount)
            self.paid_by = None
            self.payer_name = None
            self.payment_method = None
        else:
            if self.paid_by is None or self.payment_method is None:
                raise RecordValidationError("Payer and payment method are required")
            validate_payer(self.paid_by, self.payer_name)
            if self.shares:
                raise RecordValidationError("Only shared expenses have shares")
        return self


class ExpenseInDB(OwnedRecord):
    category: str
    amount: str
    date: date
    description: Optional[str] = None
    is_shared: bool = False
    paid_by: Optional[PayerSource] = None
    payer_name: Optional[str] = None
    payment_method: Optional[PaymentMethod] = None
    shares: List[ExpenseShareRecord] = []


# Daily sales

class DailySalesCreate(BaseModel):
    """
    Daily sales creation / replacement schema.

    total_amount is accepted for client convenience but always
    recomputed from the three channels by the store.
    """
    date: date
    cash_amount: NonNegativeAmount = 0
    card_amount: NonNegativeAmount = 0
    upi_amount: NonNegativeAmount = 0
    total_amount: Optional[NonNegativeAmount] = None
    notes: Optional[str] = None


class DailySalesInDB(OwnedRecord):
    date: date
    cash_amount: str
    card_amount: str
    upi_amount: str
    total_amount: str
    notes: Optional[str] = None
