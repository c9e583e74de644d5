import logging
from typing import Any, Dict, List, Optional

from app.models.base import _utcnow
from app.models.business import (
    CreditStatus,
    CustomerCreditInDB,
    DailySalesInDB,
    ExpenseInDB,
)
from app.repositories.base import OwnedRepository
from app.utils.amounts import format_amount, sales_total

logger = logging.getLogger(__name__)


class CustomerCreditRepository(OwnedRepository[CustomerCreditInDB]):
    """Customer credit store operations."""
    table_name = "customer_credits"
    id_label = "credit"
    kind = "Customer credit"
    model = CustomerCreditInDB

    def _prepare(self, data: Dict[str, Any], existing: Optional[CustomerCreditInDB]) -> Dict[str, Any]:
        data["amount"] = format_amount(data["amount"])
        if existing is not None:
            # Lifecycle fields survive a full replace
            data["status"] = existing.status
            data["created_at"] = existing.created_at
            data["paid_date"] = existing.paid_date
        else:
            data.setdefault("status", CreditStatus.PENDING)
            if data.get("created_at") is None:
                data["created_at"] = _utcnow()
        return data

    async def mark_paid(self, owner_id: int, credit_id: int) -> CustomerCreditInDB:
        """
        Mark a credit paid and stamp paid_date.

        Calling it again on a paid credit re-stamps paid_date.
        """
        credit = self._get_owned(owner_id, credit_id)
        paid = credit.model_copy(update={
            "status": CreditStatus.PAID,
            "paid_date": _utcnow()
        })
        self.records[credit_id] = paid
        logger.info("Customer credit %s paid for user %s", credit_id, owner_id)
        return paid.model_copy(deep=True)


class ExpenseRepository(OwnedRepository[ExpenseInDB]):
    """Expense store operations. Grouping by date is left to the client."""
    table_name = "expenses"
    id_label = "expense"
    kind = "Expense"
    model = ExpenseInDB

    def _prepare(self, data: Dict[str, Any], existing: Optional[ExpenseInDB]) -> Dict[str, Any]:
        data["amount"] = format_amount(data["amount"])
        data["shares"] = [
            {**share, "amount": format_amount(share["amount"])}
            for share in data.get("shares") or []
        ]
        return data


class DailySalesRepository(OwnedRepository[DailySalesInDB]):
    """Daily sales store operations."""
    table_name = "daily_sales"
    id_label = "sales"
    kind = "Daily sales"
    model = DailySalesInDB

    def _prepare(self, data: Dict[str, Any], existing: Optional[DailySalesInDB]) -> Dict[str, Any]:
        for key in ("cash_amount", "card_amount", "upi_amount"):
            data[key] = format_amount(data.get(key) or 0)
        # Never trust a caller supplied total
        data["total_amount"] = sales_total(data["cash_amount"], data["card_amount"], data["upi_amount"])
        return data

    async def list(self, owner_id: int) -> List[DailySalesInDB]:
        """List a user's sales, newest date first."""
        sales = await super().list(owner_id)
        return sorted(sales, key=lambda s: (s.date, s.id), reverse=True)
