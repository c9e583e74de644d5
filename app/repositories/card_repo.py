from app.models.card import CreditCardInDB, DebitCardInDB
from app.repositories.base import OwnedRepository


class CreditCardRepository(OwnedRepository[CreditCardInDB]):
    """Credit card store operations."""
    table_name = "credit_cards"
    id_label = "credit_card"
    kind = "Credit card"
    model = CreditCardInDB


class DebitCardRepository(OwnedRepository[DebitCardInDB]):
    """Debit card store operations."""
    table_name = "debit_cards"
    id_label = "debit_card"
    kind = "Debit card"
    model = DebitCardInDB
