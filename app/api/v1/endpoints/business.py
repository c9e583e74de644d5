from fastapi import APIRouter, Depends
from app.api.v1.endpoints.crud import build_crud_router
from app.core.auth import get_current_user
from app.db.session import get_store
from app.db.store import DataStore
from app.models.business import (
    CustomerCreditCreate,
    CustomerCreditInDB,
    DailySalesCreate,
    DailySalesInDB,
    ExpenseCreate,
    ExpenseInDB,
)
from app.models.user import UserInDB
from app.repositories.business_repo import (
    CustomerCreditRepository,
    DailySalesRepository,
    ExpenseRepository,
)
from app.schemas.analytics import BusinessSummaryResponse
from app.services.analytics_service import AnalyticsService

router = APIRouter()

credits_router = build_crud_router(CustomerCreditRepository, CustomerCreditCreate, CustomerCreditInDB)

@credits_router.post("/{credit_id}/paid", response_model=CustomerCreditInDB)
async def mark_credit_paid(
    credit_id: int,
    current_user: UserInDB = Depends(get_current_user),
    store: DataStore = Depends(get_store)
):
    """Mark a customer credit paid."""
    return await CustomerCreditRepository(store).mark_paid(current_user.id, credit_id)

@router.get("/analytics", response_model=BusinessSummaryResponse)
async def get_analytics(
    current_user: UserInDB = Depends(get_current_user),
    store: DataStore = Depends(get_store)
):
    """Sales and expense totals for the current user"""
    return await AnalyticsService.for_user(store, current_user.id)

router.include_router(credits_router, prefix="/credits")
router.include_router(build_crud_router(ExpenseRepository, ExpenseCreate, ExpenseInDB), prefix="/expenses")
router.include_router(build_crud_router(DailySalesRepository, DailySalesCreate, DailySalesInDB), prefix="/sales")
