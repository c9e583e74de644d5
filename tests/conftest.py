from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from main import app
from app.db.session import get_store
from app.db.store import DataStore
from app.repositories.account_repo import BankAccountRepository
from app.repositories.business_repo import (
    CustomerCreditRepository,
    DailySalesRepository,
    ExpenseRepository,
)
from app.repositories.card_repo import CreditCardRepository, DebitCardRepository
from app.repositories.document_repo import DocumentRepository
from app.repositories.loan_repo import LoanRepository
from app.repositories.password_repo import PasswordRepository

VISA_CARD = {
    "card_name": "Travel Card",
    "card_number": "4111111111111111",
    "expiry_date": "12/99",
    "cvv": "123",
    "card_network": "Visa",
    "bank_name": "HDFC Bank",
    "tags": ["travel"]
}

# Validated payloads, as the route layer hands them to the repositories
SAMPLE_RECORDS = {
    "credit_card": (CreditCardRepository, dict(VISA_CARD)),
    "debit_card": (DebitCardRepository, {
        **VISA_CARD,
        "card_name": "Salary Debit",
        "card_number": "5555555555554444",
        "card_network": "Mastercard",
    }),
    "bank_account": (BankAccountRepository, {
        "bank_name": "State Bank of India",
        "account_number": "12345678901",
        "account_type": "Savings",
        "customer_id": "CUST01",
        "ifsc_code": "SBIN0001234",
        "net_banking_password": "first pet + year",
        "mpin": None,
        "tags": ["salary"],
    }),
    "loan": (LoanRepository, {
        "person_name": "Alice",
        "amount": Decimal("1000"),
        "type": "given",
        "description": "Rent help",
        "tags": [],
    }),
    "password": (PasswordRepository, {
        "person_name": "Me",
        "service_name": "Email",
        "username": "me@example.com",
        "password": "dog name + 42",
        "is_actual_password": False,
        "notes": None,
    }),
    "document": (DocumentRepository, {
        "document_type": "Passport",
        "custom_type": None,
        "additional_info": "Renew in 2030",
        "file_name": "passport.pdf",
        "file_data": "aGVsbG8=",
        "tags": ["id"],
    }),
    "customer_credit": (CustomerCreditRepository, {
        "customer_name": "Ravi",
        "amount": Decimal("350.50"),
        "notes": None,
    }),
    "expense": (ExpenseRepository, {
        "category": "Supplies",
        "amount": Decimal("250"),
        "date": date(2024, 3, 20),
        "description": "Paper",
        "is_shared": False,
        "paid_by": "Business",
        "payer_name": None,
        "payment_method": "UPI",
        "shares": [],
    }),
    "daily_sales": (DailySalesRepository, {
        "date": date(2024, 1, 1),
        "cash_amount": Decimal("100"),
        "card_amount": Decimal("50"),
        "upi_amount": Decimal("25"),
        "total_amount": None,
        "notes": None,
    }),
}


@pytest.fixture
def store():
    """Fresh in-memory store for each test."""
    store = DataStore()
    yield store
    store.reset()


@pytest.fixture
def sample_payloads():
    """Repository class and payload for every owned record kind."""
    return {kind: (repo_cls, dict(payload)) for kind, (repo_cls, payload) in SAMPLE_RECORDS.items()}


@pytest.fixture
def sample_records(store, sample_payloads):
    """Create one record of every kind for an owner; the loan gets two repayments."""
    async def _create(owner_id: int):
        loan = None
        for repo_cls, payload in sample_payloads.values():
            record = await repo_cls(store).create(owner_id, payload)
            if repo_cls is LoanRepository:
                loan = record
        for amount in (400, 600):
            await LoanRepository(store).add_repayment(owner_id, loan.id, {"amount": amount})
        return loan
    return _create


@pytest.fixture
def test_client(store):
    """FastAPI test client wired to the test store."""
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def register_user(test_client):
    """Register a user through the API and return auth headers."""
    def _register(username: str = "alice", password: str = "SecurePassword123") -> dict:
        response = test_client.post(
            "/api/v1/auth/register",
            json={"username": username, "password": password}
        )
        assert response.status_code == 201, response.text
        token = response.json()["access_token"]
        return {"Authorization": f"Bearer {token}"}
    return _register


@pytest.fixture
def auth_headers(register_user):
    return register_user("alice")


@pytest.fixture
def other_headers(register_user):
    return register_user("bob")
