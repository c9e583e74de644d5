"""
Backup snapshots of everything a user owns.

A snapshot is a plain JSON document: one list per record kind with ids and
owners stripped, loans carrying their repayments inline. Restoring wipes the
user's data and replays the snapshot through the ordinary repository create
calls, one record at a time. There is no batch atomicity: a record that
fails validation is skipped and counted, the rest are still imported.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Tuple, Type

from pydantic import BaseModel

from app.core.config import settings
from app.core.errors import StoreError
from app.db.store import DataStore
from app.models.account import BankAccountBase
from app.models.business import CustomerCreditCreate, DailySalesCreate, ExpenseCreate
from app.models.card import CardFields
from app.models.document import DocumentBase
from app.models.loan import LoanCreate, RepaymentCreate
from app.models.password import PasswordCreate
from app.repositories.account_repo import BankAccountRepository
from app.repositories.base import OwnedRepository
from app.repositories.business_repo import (
    CustomerCreditRepository,
    DailySalesRepository,
    ExpenseRepository,
)
from app.repositories.card_repo import CreditCardRepository, DebitCardRepository
from app.repositories.document_repo import DocumentRepository
from app.repositories.loan_repo import LoanRepository
from app.repositories.password_repo import PasswordRepository
from app.repositories.user_repo import UserRepository
from app.schemas.backup import KindCounts, RestoreSummary

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1


class InvalidSnapshot(Exception):
    """Snapshot document cannot be restored at all."""
    pass


@dataclass(frozen=True)
class SnapshotKind:
    key: str
    repository: Type[OwnedRepository]
    # Structural model used on restore. Business rules that depend on
    # the current date (card expiry, upload size) are not re-applied.
    schema: Type[BaseModel]
    lifecycle: Tuple[str, ...] = ()


SNAPSHOT_KINDS = (
    SnapshotKind("credit_cards", CreditCardRepository, CardFields),
    SnapshotKind("debit_cards", DebitCardRepository, CardFields),
    SnapshotKind("bank_accounts", BankAccountRepository, BankAccountBase),
    SnapshotKind("loans", LoanRepository, LoanCreate, ("status", "created_at", "completed_at")),
    SnapshotKind("passwords", PasswordRepository, PasswordCreate),
    SnapshotKind("documents", DocumentRepository, DocumentBase, ("created_at", "updated_at")),
    SnapshotKind("customer_credits", CustomerCreditRepository, CustomerCreditCreate, ("status", "created_at", "paid_date")),
    SnapshotKind("expenses", ExpenseRepository, ExpenseCreate),
    SnapshotKind("daily_sales", DailySalesRepository, DailySalesCreate),
)


class BackupService:
    @staticmethod
    def file_name(now: datetime | None = None) -> str:
        now = now or datetime.now(timezone.utc)
        return f"{settings.BACKUP_FILE_PREFIX}-{now.strftime('%Y-%m-%dT%H-%M-%SZ')}.json"

    @staticmethod
    async def create_snapshot(store: DataStore, user_id: int) -> Dict[str, Any]:
        """Serialize every record the user owns."""
        snapshot: Dict[str, Any] = {
            "version": SNAPSHOT_VERSION,
            "created_at": datetime.now(timezone.utc).isoformat(),
        }

        for kind in SNAPSHOT_KINDS:
            repo = kind.repository(store)
            entries = []
            for record in await repo.list(user_id):
                entry = record.model_dump(mode="json", exclude={"id", "owner_id"})
                if kind.key == "loans":
                    entry["repayments"] = [
                        repayment.model_dump(mode="json", exclude={"id", "loan_id"})
                        for repayment in store.repayments_for_loan(record.id)
                    ]
                entries.append(entry)
            snapshot[kind.key] = entries

        logger.info(
            "Built snapshot for user %s: %s",
            user_id,
            {kind.key: len(snapshot[kind.key]) for kind in SNAPSHOT_KINDS}
        )
        return snapshot

    @staticmethod
    def _check(snapshot: Any) -> None:
        if not isinstance(snapshot, dict):
            raise InvalidSnapshot("Snapshot must be a JSON object")
        if snapshot.get("version") != SNAPSHOT_VERSION:
            raise InvalidSnapshot(f"Unsupported snapshot version: {snapshot.get('version')!r}")
        for kind in SNAPSHOT_KINDS:
            if not isinstance(snapshot.get(kind.key, []), list):
                raise InvalidSnapshot(f"'{kind.key}' must be a list")
        for position, loan in enumerate(snapshot.get("loans", [])):
            if isinstance(loan, dict) and not isinstance(loan.get("repayments", []), (list, type(None))):
                raise InvalidSnapshot(f"Repayments of loan entry {position} must be a list")

    @staticmethod
    async def restore_snapshot(store: DataStore, user_id: int, snapshot: Dict[str, Any]) -> RestoreSummary:
        """
        Replace the user's data with the snapshot contents.

        The snapshot shape is checked before anything is cleared.
        Individual records that fail are logged and counted.
        """
        BackupService._check(snapshot)
        await UserRepository(store).clear_user_data(user_id)

        counts: Dict[str, KindCounts] = {}
        repayments = KindCounts()

        for kind in SNAPSHOT_KINDS:
            repo = kind.repository(store)
            kind_counts = KindCounts()

            for position, entry in enumerate(snapshot.get(kind.key, [])):
                try:
                    payload = kind.schema.model_validate(entry).model_dump()
                    for field in kind.lifecycle:
                        if entry.get(field) is not None:
                            payload[field] = entry[field]
                    record = await repo.create(user_id, payload)
                except (ValueError, StoreError) as e:
                    kind_counts.failed += 1
                    if kind.key == "loans" and isinstance(entry, dict):
                        # Repayments of a skipped loan are lost with it
                        repayments.failed += len(entry.get("repayments") or [])
                    logger.warning("Skipped %s entry %s for user %s: %s", kind.key, position, user_id, e)
                    continue
                kind_counts.imported += 1

                if kind.key == "loans":
                    for repayment in entry.get("repayments") or []:
                        try:
                            data = RepaymentCreate.model_validate(repayment).model_dump()
                            await repo.add_repayment(user_id, record.id, data)
                        except (ValueError, StoreError) as e:
                            repayments.failed += 1
                            logger.warning("Skipped repayment of loan %s: %s", record.id, e)
                            continue
                        repayments.imported += 1

            counts[kind.key] = kind_counts
        counts["repayments"] = repayments

        summary = RestoreSummary(
            kinds=counts,
            imported=sum(c.imported for c in counts.values()),
            failed=sum(c.failed for c in counts.values())
        )
        logger.info(
            "Restored snapshot for user %s: %s imported, %s failed",
            user_id, summary.imported, summary.failed
        )
        return summary
