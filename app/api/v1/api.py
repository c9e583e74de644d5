from fastapi import APIRouter
from app.api.v1.endpoints import accounts, auth, backup, business, cards, documents, loans, passwords, users

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["authentication"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(cards.credit_router, prefix="/credit-cards", tags=["credit cards"])
api_router.include_router(cards.debit_router, prefix="/debit-cards", tags=["debit cards"])
api_router.include_router(accounts.router, prefix="/bank-accounts", tags=["bank accounts"])
api_router.include_router(loans.router, prefix="/loans", tags=["loans"])
api_router.include_router(passwords.router, prefix="/passwords", tags=["passwords"])
api_router.include_router(documents.router, prefix="/documents", tags=["documents"])
api_router.include_router(business.router, prefix="/business", tags=["business"])
api_router.include_router(backup.router, tags=["backup"])
