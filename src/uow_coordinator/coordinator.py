"""
uow_coordinator.coordinator

Unit-of-Work coordinator (transaction lifecycle owner).

Responsibilities:
- Lazily begin one transaction and share it across every repository requested by name.
- Run a caller-supplied unit of work and resolve its transaction exactly once.
- Compose rollback failures with the failure that triggered them.

Lifecycle per execution: Idle (no handle) -> Active (handle open) -> Resolved (handle
cleared, Idle again). An instance holds a single handle without locking, so it must be
used by one logical flow at a time.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from uow_coordinator.db.transaction import Database, Transaction
from uow_coordinator.errors import (
    ComposedRollbackError,
    NoActiveTransaction,
    TransactionAlreadyStarted,
)
from uow_coordinator.observability.logging import get_logger, unit_of_work_scope
from uow_coordinator.registry import RepositoryFactory, RepositoryRegistry

log = get_logger(__name__)

T = TypeVar("T")

DoFunc = Callable[["UnitOfWork"], Awaitable[T]]


class UnitOfWork:
    def __init__(
        self,
        database: Database,
        *,
        registry: RepositoryRegistry | None = None,
    ) -> None:
        # The database handle is borrowed: the coordinator never closes it.
        self._db = database
        self._registry = registry if registry is not None else RepositoryRegistry()
        self._tx: Transaction | None = None

    @property
    def registry(self) -> RepositoryRegistry:
        return self._registry

    @property
    def transaction(self) -> Transaction | None:
        return self._tx

    @property
    def in_transaction(self) -> bool:
        return self._tx is not None

    def register(self, name: str, factory: RepositoryFactory) -> None:
        self._registry.register(name, factory)

    def unregister(self, name: str) -> None:
        # Repositories already bound to the active transaction keep working.
        self._registry.unregister(name)

    async def get_repository(self, name: str, *, timeout: float | None = None) -> Any:
        """
        Return the repository registered under `name`, bound to the active transaction.

        A transaction is begun first when none is active, so an unknown name still leaves
        one open (resolved later by `do` or `rollback`).
        """

        await self._start(timeout=timeout, fail_if_started=False)
        factory = self._registry.lookup(name)
        return factory(self._tx)

    async def do(self, fn: DoFunc[T], *, timeout: float | None = None) -> T:
        """
        Run `fn` inside a fresh transaction; commit if it returns, roll back if it raises.

        Not reentrant: raises `TransactionAlreadyStarted` without calling `fn` when this
        instance already holds an active transaction. Log events emitted during the run
        carry a shared `unit_of_work_id`.
        """

        with unit_of_work_scope():
            await self._start(timeout=timeout, fail_if_started=True)
            try:
                result = await fn(self)
            except Exception as err:
                await self._rollback_after(err)
                raise
            except BaseException:
                await self._release_after_interrupt()
                raise

            await self._commit_or_rollback()
            return result

    async def rollback(self) -> None:
        """
        Roll back the active transaction.

        The handle is cleared before the rollback is awaited, so a failed rollback never
        leaves this instance holding a dead transaction.
        """

        tx = self._tx
        if tx is None:
            raise NoActiveTransaction()
        self._tx = None
        await tx.rollback()
        log.debug("transaction_rolled_back")

    async def _start(self, *, timeout: float | None, fail_if_started: bool) -> None:
        if self._tx is not None:
            if fail_if_started:
                raise TransactionAlreadyStarted()
            return
        # Errors from the collaborator propagate as-is; nothing is retained on failure.
        # Unlike `wait_for`, `timeout()` never drops a begin that completed at the deadline.
        async with asyncio.timeout(timeout):
            tx = await self._db.begin()
        self._tx = tx
        log.debug("transaction_begun")

    async def _commit_or_rollback(self) -> None:
        tx = self._tx
        if tx is None:
            raise NoActiveTransaction()
        try:
            await tx.commit()
        except Exception as err:
            log.warning("commit_failed", error=str(err))
            await self._rollback_after(err)
            raise
        except BaseException:
            # Interrupted mid-commit: the outcome is unknown and the handle is unusable.
            self._tx = None
            log.warning("commit_interrupted")
            raise
        self._tx = None
        log.debug("transaction_committed")

    async def _rollback_after(self, err: Exception) -> None:
        # Returns normally when the rollback succeeded; the caller re-raises `err`.
        try:
            await self.rollback()
        except Exception as rb_err:
            log.warning("rollback_failed", error=str(rb_err), cause=str(err))
            raise ComposedRollbackError(rb_err, err) from rb_err

    async def _release_after_interrupt(self) -> None:
        # Cancellation or interpreter shutdown: free the handle and let the interrupt win.
        if self._tx is None:
            return
        try:
            await self.rollback()
        except Exception as rb_err:
            log.warning("rollback_failed", error=str(rb_err), cause="interrupted")


# --- Module Notes -----------------------------------------------------------
# No retries are attempted anywhere here; retry policy belongs to the caller of `do`.
