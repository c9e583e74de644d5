from enum import Enum

from pydantic import BaseModel, Field, model_validator

from app.models.base import OwnedRecord, Tags
from app.utils.validation import validate_card_number, validate_cvv, validate_expiry


class CardNetwork(str, Enum):
    VISA = "Visa"
    MASTERCARD = "Mastercard"
    RUPAY = "Rupay"
    AMEX = "American Express"


class CardFields(BaseModel):
    """Fields shared by credit and debit cards."""
    card_name: str = Field(..., min_length=1, max_length=100)
    card_number: str
    expiry_date: str  # MM/YY
    cvv: str
    card_network: CardNetwork
    bank_name: str = Field(..., min_length=1, max_length=100)
    tags: Tags = []


class CardCreate(CardFields):
    """
    Card creation / replacement schema.

    Amex cards have 15 digit numbers and 4 digit CVVs, every other
    network 16 and 3.
    """

    @model_validator(mode="after")
    def check_card(self):
        network = self.card_network.value
        validate_card_number(self.card_number, network)
        validate_cvv(self.cvv, network)
        validate_expiry(self.expiry_date)
        return self


class CreditCardInDB(OwnedRecord, CardFields):
    pass


class DebitCardInDB(OwnedRecord, CardFields):
    pass
