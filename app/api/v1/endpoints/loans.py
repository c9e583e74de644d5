from typing import List
from fastapi import APIRouter, Depends, Response, status
from app.core.auth import get_current_user
from app.db.session import get_store
from app.db.store import DataStore
from app.models.loan import LoanCreate, LoanInDB, LoanUpdate, RepaymentCreate, RepaymentInDB
from app.models.user import UserInDB
from app.repositories.loan_repo import LoanRepository

router = APIRouter()

@router.get("", response_model=List[LoanInDB])
async def list_loans(
    current_user: UserInDB = Depends(get_current_user),
    store: DataStore = Depends(get_store)
):
    """List loans for the current user."""
    return await LoanRepository(store).list(current_user.id)

@router.post("", response_model=LoanInDB, status_code=status.HTTP_201_CREATED)
async def create_loan(
    loan_in: LoanCreate,
    current_user: UserInDB = Depends(get_current_user),
    store: DataStore = Depends(get_store)
):
    """Create a loan. New loans start active."""
    return await LoanRepository(store).create(current_user.id, loan_in.model_dump())

@router.get("/{loan_id}", response_model=LoanInDB)
async def get_loan(
    loan_id: int,
    current_user: UserInDB = Depends(get_current_user),
    store: DataStore = Depends(get_store)
):
    """Get a specific loan"""
    return await LoanRepository(store).get(current_user.id, loan_id)

@router.patch("/{loan_id}", response_model=LoanInDB)
async def update_loan(
    loan_id: int,
    loan_in: LoanUpdate,
    current_user: UserInDB = Depends(get_current_user),
    store: DataStore = Depends(get_store)
):
    """Update the fields sent; the rest of the loan is kept."""
    return await LoanRepository(store).update(
        current_user.id, loan_id, loan_in.model_dump(exclude_unset=True)
    )

@router.post("/{loan_id}/complete", response_model=LoanInDB)
async def complete_loan(
    loan_id: int,
    current_user: UserInDB = Depends(get_current_user),
    store: DataStore = Depends(get_store)
):
    """Mark a loan completed."""
    return await LoanRepository(store).complete(current_user.id, loan_id)

@router.delete("/{loan_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_loan(
    loan_id: int,
    current_user: UserInDB = Depends(get_current_user),
    store: DataStore = Depends(get_store)
):
    """Delete a loan and its repayments."""
    await LoanRepository(store).delete(current_user.id, loan_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/{loan_id}/repayments", response_model=List[RepaymentInDB])
async def list_repayments(
    loan_id: int,
    current_user: UserInDB = Depends(get_current_user),
    store: DataStore = Depends(get_store)
):
    """List repayments of a loan."""
    return await LoanRepository(store).list_repayments(current_user.id, loan_id)

@router.post("/{loan_id}/repayments", response_model=RepaymentInDB, status_code=status.HTTP_201_CREATED)
async def add_repayment(
    loan_id: int,
    repayment_in: RepaymentCreate,
    current_user: UserInDB = Depends(get_current_user),
    store: DataStore = Depends(get_store)
):
    """Record a repayment against a loan."""
    return await LoanRepository(store).add_repayment(current_user.id, loan_id, repayment_in.model_dump())
