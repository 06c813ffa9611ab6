"""
uow_coordinator.errors

Exception hierarchy for the unit-of-work coordinator.

Responsibilities:
- Name every failure the coordinator itself raises.
- Compose rollback failures with the error that triggered the rollback.

Begin-transaction failures are not wrapped: the collaborator's own exception reaches
the caller unchanged.
"""

from __future__ import annotations


class UnitOfWorkError(Exception):
    pass


class RepositoryNotFound(UnitOfWorkError, LookupError):
    def __init__(self, name: str) -> None:
        super().__init__(f"repository not found: {name}")
        self.name = name


class TransactionAlreadyStarted(UnitOfWorkError):
    def __init__(self) -> None:
        super().__init__("transaction already started")


class NoActiveTransaction(UnitOfWorkError):
    def __init__(self) -> None:
        super().__init__("no active transaction")


class TransactionAlreadyResolved(UnitOfWorkError):
    def __init__(self) -> None:
        super().__init__("transaction has already been committed or rolled back")


class DatabaseClosed(UnitOfWorkError):
    def __init__(self) -> None:
        super().__init__("database is closed")


class ComposedRollbackError(UnitOfWorkError):
    """
    Raised when the cleanup rollback fails after the unit of work (or its commit) failed.

    The rollback failure comes first and the original failure last, so the message reads
    `rollback error: <rollback_error> due to: <original>`.
    """

    def __init__(self, rollback_error: BaseException, original: BaseException) -> None:
        super().__init__(f"rollback error: {rollback_error} due to: {original}")
        self.rollback_error = rollback_error
        self.original = original


# --- Module Notes -----------------------------------------------------------
# Message strings are part of the public contract; callers and tests match on them.
