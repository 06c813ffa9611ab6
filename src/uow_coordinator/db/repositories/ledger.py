"""
uow_coordinator.db.repositories.ledger

Repository for `LedgerEntry` rows, bound to one transaction.

Responsibilities:
- Append balance movements.
- List an account's movements in insertion order.
"""

from __future__ import annotations

import uuid

from sqlalchemy import Row, select

from uow_coordinator.db.models import LedgerEntry, utcnow
from uow_coordinator.db.transaction import SqlAlchemyTransaction


class LedgerRepo:
    def __init__(self, tx: SqlAlchemyTransaction) -> None:
        self._tx = tx

    async def add(self, *, account_id: uuid.UUID, amount: int, memo: str = "") -> None:
        # Ledger entries are append-only (no update/delete) in normal operation.
        await self._tx.connection.execute(
            LedgerEntry.__table__.insert().values(
                account_id=account_id, amount=amount, memo=memo, created_at=utcnow()
            )
        )

    async def list_for_account(self, account_id: uuid.UUID) -> list[Row]:
        stmt = (
            select(LedgerEntry.__table__)
            .where(LedgerEntry.account_id == account_id)
            .order_by(LedgerEntry.id)
        )
        return list((await self._tx.connection.execute(stmt)).all())


# --- Module Notes -----------------------------------------------------------
# Amounts are signed minor units; the sum of an account's entries equals its balance when
# every balance change goes through `services.transfer_service`.
