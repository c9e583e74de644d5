"""
In-memory data store.

One table (dict keyed by record id) per record kind, plus the per-kind
identifier counters. A single DataStore is built at process start and
handed to request handlers; nothing here is persisted.

Every mutating method is plain synchronous dict work, so a cascade is
never observed half-done by another request.
"""
import logging
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

# Tables whose records carry an owner_id
OWNED_TABLES = (
    "credit_cards",
    "debit_cards",
    "bank_accounts",
    "loans",
    "passwords",
    "customer_credits",
    "expenses",
    "daily_sales",
    "documents",
)

TABLES = ("users", "repayments") + OWNED_TABLES


class IdAllocator:
    """Monotonic counters, one per label. Freed ids are never reused."""

    def __init__(self):
        self._counters: Dict[str, int] = {}

    def next(self, label: str) -> int:
        value = self._counters.get(label, 1)
        self._counters[label] = value + 1
        return value

    def reset(self) -> None:
        self._counters.clear()


class DataStore:
    """Authoritative holder of all record state for the process lifetime."""

    def __init__(self):
        self.ids = IdAllocator()
        self.tables: Dict[str, Dict[int, Any]] = {name: {} for name in TABLES}

    def table(self, name: str) -> Dict[int, Any]:
        return self.tables[name]

    def reset(self) -> None:
        """Drop every record and restart the id counters."""
        for table in self.tables.values():
            table.clear()
        self.ids.reset()

    def repayments_for_loan(self, loan_id: int) -> List[Any]:
        """Repayments whose parent is the given loan, oldest id first."""
        return sorted(
            (r for r in self.tables["repayments"].values() if r.loan_id == loan_id),
            key=lambda r: r.id,
        )

    def clear_user_data(self, user_id: int) -> Dict[str, int]:
        """
        Remove everything a user owns.

        Repayments carry no owner, so they are matched through the loans
        table before the loans themselves are removed. The user record
        is kept. Returns the number of removed records per table.
        """
        loan_ids = {
            loan_id for loan_id, loan in self.tables["loans"].items()
            if loan.owner_id == user_id
        }

        removed = {}
        repayments = self.tables["repayments"]
        doomed = [rid for rid, repayment in repayments.items() if repayment.loan_id in loan_ids]
        for rid in doomed:
            del repayments[rid]
        removed["repayments"] = len(doomed)

        for name in OWNED_TABLES:
            table = self.tables[name]
            doomed = [rid for rid, record in table.items() if record.owner_id == user_id]
            for rid in doomed:
                del table[rid]
            removed[name] = len(doomed)

        logger.info("Cleared data for user %s: %s records", user_id, sum(removed.values()))
        return removed
