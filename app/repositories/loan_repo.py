"""
LoanRepository - loans and their repayments.

Differences from the other kinds:
1. Updates merge a partial payload instead of replacing the record
2. complete() moves a loan to completed and stamps completed_at
3. Repayments have no owner; every repayment call is authorized
   through the parent loan
4. Deleting a loan deletes its repayments
"""

import logging
from typing import Any, Dict, List, Optional

from app.models.base import _utcnow
from app.models.loan import LoanInDB, LoanStatus, RepaymentInDB
from app.repositories.base import OwnedRepository, PROTECTED_KEYS
from app.utils.amounts import format_amount

logger = logging.getLogger(__name__)

# Optional loan fields a partial update may clear by sending null
CLEARABLE_FIELDS = ("description",)


class LoanRepository(OwnedRepository[LoanInDB]):
    """Loan store operations."""
    table_name = "loans"
    id_label = "loan"
    kind = "Loan"
    model = LoanInDB

    @property
    def repayments(self) -> Dict[int, RepaymentInDB]:
        return self.store.table("repayments")

    def _merge(self, existing: LoanInDB, data: Dict[str, Any]) -> Dict[str, Any]:
        merged = existing.model_dump(exclude=set(PROTECTED_KEYS))
        merged.update({
            key: value for key, value in data.items()
            if value is not None or key in CLEARABLE_FIELDS
        })
        return merged

    def _prepare(self, data: Dict[str, Any], existing: Optional[LoanInDB]) -> Dict[str, Any]:
        data["amount"] = format_amount(data["amount"])
        if existing is None:
            data.setdefault("status", LoanStatus.ACTIVE)
            if data.get("created_at") is None:
                data["created_at"] = _utcnow()
        return data

    def _on_delete(self, record: LoanInDB) -> None:
        doomed = [rid for rid, repayment in self.repayments.items() if repayment.loan_id == record.id]
        for rid in doomed:
            del self.repayments[rid]
        if doomed:
            logger.info("Removed %s repayments of loan %s", len(doomed), record.id)

    async def complete(self, owner_id: int, loan_id: int) -> LoanInDB:
        """
        Mark a loan completed.

        Calling it again on a completed loan re-stamps completed_at.
        """
        loan = self._get_owned(owner_id, loan_id)
        completed = loan.model_copy(update={
            "status": LoanStatus.COMPLETED,
            "completed_at": _utcnow()
        })
        self.records[loan_id] = completed
        logger.info("Completed loan %s for user %s", loan_id, owner_id)
        return completed.model_copy(deep=True)

    async def list_repayments(self, owner_id: int, loan_id: int) -> List[RepaymentInDB]:
        """List repayments of a loan the caller owns."""
        self._get_owned(owner_id, loan_id)
        return [repayment.model_copy() for repayment in self.store.repayments_for_loan(loan_id)]

    async def add_repayment(self, owner_id: int, loan_id: int, data: Dict[str, Any]) -> RepaymentInDB:
        """Record a repayment against a loan the caller owns."""
        self._get_owned(owner_id, loan_id)
        data = dict(data)
        for key in ("id", "loan_id"):
            data.pop(key, None)
        data["amount"] = format_amount(data["amount"])
        if data.get("date") is None:
            data["date"] = _utcnow()

        repayment = RepaymentInDB(**data, id=self.store.ids.next("repayment"), loan_id=loan_id)
        self.repayments[repayment.id] = repayment
        logger.debug("Added repayment %s to loan %s", repayment.id, loan_id)
        return repayment.model_copy()
