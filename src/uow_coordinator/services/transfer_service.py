"""
uow_coordinator.services.transfer_service

Account operations expressed as units of work.

Responsibilities:
- Open accounts with an optional opening deposit.
- Move funds between accounts atomically: both balances and both ledger entries
  commit together or not at all.
"""

from __future__ import annotations

import uuid

from uow_coordinator.coordinator import UnitOfWork
from uow_coordinator.db.repositories import ACCOUNTS, LEDGER
from uow_coordinator.db.repositories.accounts import AccountNotFound, AccountRepo
from uow_coordinator.db.repositories.ledger import LedgerRepo
from uow_coordinator.observability.logging import get_logger

log = get_logger(__name__)


class TransferService:
    def __init__(self, *, uow: UnitOfWork, begin_timeout: float | None = None) -> None:
        self._uow = uow
        self._timeout = begin_timeout

    async def open_account(self, *, owner: str, initial_deposit: int = 0) -> uuid.UUID:
        if initial_deposit < 0:
            raise ValueError("initial deposit cannot be negative")

        async def work(uow: UnitOfWork) -> uuid.UUID:
            accounts: AccountRepo = await uow.get_repository(ACCOUNTS)
            ledger: LedgerRepo = await uow.get_repository(LEDGER)
            account_id = await accounts.create(owner=owner, balance=initial_deposit)
            if initial_deposit:
                await ledger.add(account_id=account_id, amount=initial_deposit, memo="opening")
            return account_id

        account_id = await self._uow.do(work, timeout=self._timeout)
        log.info("account_opened", account_id=str(account_id))
        return account_id

    async def transfer(
        self,
        *,
        source_id: uuid.UUID,
        target_id: uuid.UUID,
        amount: int,
        memo: str = "transfer",
    ) -> None:
        if amount <= 0:
            raise ValueError("transfer amount must be positive")
        if source_id == target_id:
            raise ValueError("cannot transfer to the same account")

        async def work(uow: UnitOfWork) -> None:
            accounts: AccountRepo = await uow.get_repository(ACCOUNTS)
            ledger: LedgerRepo = await uow.get_repository(LEDGER)
            # Debit first so an overdraft fails before anything else is written.
            await accounts.withdraw(source_id, amount)
            await accounts.deposit(target_id, amount)
            await ledger.add(account_id=source_id, amount=-amount, memo=memo)
            await ledger.add(account_id=target_id, amount=amount, memo=memo)

        await self._uow.do(work, timeout=self._timeout)
        log.info(
            "transfer_committed",
            source_id=str(source_id),
            target_id=str(target_id),
            amount=amount,
        )

    async def balance(self, account_id: uuid.UUID) -> int:
        async def work(uow: UnitOfWork) -> int:
            accounts: AccountRepo = await uow.get_repository(ACCOUNTS)
            account = await accounts.get(account_id)
            if account is None:
                raise AccountNotFound(account_id)
            return account.balance

        return await self._uow.do(work, timeout=self._timeout)


# --- Module Notes -----------------------------------------------------------
# Each public method owns exactly one `do` call; methods never nest, since the
# coordinator is not reentrant.
