"""
uow_coordinator.db.repositories

Repository package.

Responsibilities:
- Group transaction-bound repositories and their factory registrations.
"""

from __future__ import annotations

from uow_coordinator.coordinator import UnitOfWork
from uow_coordinator.db.repositories.accounts import AccountRepo
from uow_coordinator.db.repositories.ledger import LedgerRepo

ACCOUNTS = "accounts"
LEDGER = "ledger"


def register_default_repositories(uow: UnitOfWork) -> None:
    uow.register(ACCOUNTS, AccountRepo)
    uow.register(LEDGER, LedgerRepo)


# --- Module Notes -----------------------------------------------------------
# Repository classes double as factories: calling the class with a transaction
# produces an instance bound to it.
