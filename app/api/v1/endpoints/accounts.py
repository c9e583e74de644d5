from app.api.v1.endpoints.crud import build_crud_router
from app.models.account import BankAccountCreate, BankAccountInDB
from app.repositories.account_repo import BankAccountRepository

router = build_crud_router(BankAccountRepository, BankAccountCreate, BankAccountInDB)
