"""
uow_coordinator.db.repositories.accounts

Repository for `Account` rows, bound to one transaction.

Responsibilities:
- Open accounts and read them back.
- Move balances up or down, refusing to overdraw.
"""

from __future__ import annotations

import uuid

from sqlalchemy import Row, select, update

from uow_coordinator.db.models import Account, utcnow
from uow_coordinator.db.transaction import SqlAlchemyTransaction


class AccountNotFound(LookupError):
    def __init__(self, account_id: uuid.UUID) -> None:
        super().__init__(f"account not found: {account_id}")
        self.account_id = account_id


class InsufficientFunds(ValueError):
    def __init__(self, account_id: uuid.UUID, balance: int, amount: int) -> None:
        super().__init__(f"insufficient funds in {account_id}: balance {balance} < {amount}")
        self.account_id = account_id
        self.balance = balance
        self.amount = amount


class AccountRepo:
    def __init__(self, tx: SqlAlchemyTransaction) -> None:
        self._tx = tx

    @property
    def transaction(self) -> SqlAlchemyTransaction:
        return self._tx

    async def create(self, *, owner: str, balance: int = 0) -> uuid.UUID:
        account_id = uuid.uuid4()
        now = utcnow()
        await self._tx.connection.execute(
            Account.__table__.insert().values(
                id=account_id, owner=owner, balance=balance, created_at=now, updated_at=now
            )
        )
        return account_id

    async def get(self, account_id: uuid.UUID) -> Row | None:
        stmt = select(Account.__table__).where(Account.id == account_id)
        return (await self._tx.connection.execute(stmt)).one_or_none()

    async def list_all(self) -> list[Row]:
        stmt = select(Account.__table__).order_by(Account.owner, Account.created_at)
        return list((await self._tx.connection.execute(stmt)).all())

    async def deposit(self, account_id: uuid.UUID, amount: int) -> int:
        if amount <= 0:
            raise ValueError("deposit amount must be positive")
        return await self._adjust(account_id, amount)

    async def withdraw(self, account_id: uuid.UUID, amount: int) -> int:
        if amount <= 0:
            raise ValueError("withdrawal amount must be positive")
        account = await self.get(account_id)
        if account is None:
            raise AccountNotFound(account_id)
        if account.balance < amount:
            raise InsufficientFunds(account_id, account.balance, amount)
        return await self._adjust(account_id, -amount)

    async def _adjust(self, account_id: uuid.UUID, delta: int) -> int:
        stmt = (
            update(Account.__table__)
            .where(Account.id == account_id)
            .values(balance=Account.balance + delta, updated_at=utcnow())
        )
        result = await self._tx.connection.execute(stmt)
        if result.rowcount == 0:
            raise AccountNotFound(account_id)
        account = await self.get(account_id)
        if account is None:
            raise AccountNotFound(account_id)
        return account.balance


# --- Module Notes -----------------------------------------------------------
# Overdraft checks read then update inside the caller's transaction; on backends with weaker
# isolation than SQLite's, lock the row (SELECT ... FOR UPDATE) before withdrawing.
