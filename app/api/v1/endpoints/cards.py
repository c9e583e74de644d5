from app.api.v1.endpoints.crud import build_crud_router
from app.models.card import CardCreate, CreditCardInDB, DebitCardInDB
from app.repositories.card_repo import CreditCardRepository, DebitCardRepository

credit_router = build_crud_router(CreditCardRepository, CardCreate, CreditCardInDB)
debit_router = build_crud_router(DebitCardRepository, CardCreate, DebitCardInDB)
