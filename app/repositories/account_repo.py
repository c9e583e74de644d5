from app.models.account import BankAccountInDB
from app.repositories.base import OwnedRepository


class BankAccountRepository(OwnedRepository[BankAccountInDB]):
    """Bank account store operations."""
    table_name = "bank_accounts"
    id_label = "account"
    kind = "Bank account"
    model = BankAccountInDB
