"""
uow_coordinator.db.transaction

Transaction boundary contracts and their SQLAlchemy (async) implementation.

Responsibilities:
- Describe what the coordinator needs from a database and a transaction (Protocols).
- Begin transactions on an `AsyncEngine`, one pooled connection per transaction.
- Enforce exactly-once resolution: a second commit/rollback fails loudly.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, AsyncTransaction

from uow_coordinator.db.engine import create_engine
from uow_coordinator.errors import DatabaseClosed, TransactionAlreadyResolved
from uow_coordinator.observability.logging import get_logger
from uow_coordinator.settings import Settings

log = get_logger(__name__)


@runtime_checkable
class Transaction(Protocol):
    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


@runtime_checkable
class Database(Protocol):
    async def begin(self) -> Transaction: ...


class SqlAlchemyTransaction:
    """
    One open transaction on a dedicated connection.

    Repositories issue statements through `connection`. SQLAlchemy treats a repeated
    rollback as a no-op, so resolution is tracked here instead.
    """

    def __init__(self, connection: AsyncConnection, transaction: AsyncTransaction) -> None:
        self._connection = connection
        self._transaction = transaction
        self._resolved = False

    @property
    def connection(self) -> AsyncConnection:
        if self._resolved:
            raise TransactionAlreadyResolved()
        return self._connection

    @property
    def resolved(self) -> bool:
        return self._resolved

    async def commit(self) -> None:
        self._mark_resolved()
        try:
            await self._transaction.commit()
        finally:
            await self._connection.close()

    async def rollback(self) -> None:
        self._mark_resolved()
        try:
            await self._transaction.rollback()
        finally:
            await self._connection.close()

    def _mark_resolved(self) -> None:
        # An attempted resolution counts, even if the driver call then fails.
        if self._resolved:
            raise TransactionAlreadyResolved()
        self._resolved = True


class SqlAlchemyDatabase:
    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine
        self._closed = False

    @classmethod
    def from_settings(cls, settings: Settings) -> SqlAlchemyDatabase:
        return cls(create_engine(settings))

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def closed(self) -> bool:
        return self._closed

    async def begin(self) -> SqlAlchemyTransaction:
        if self._closed:
            raise DatabaseClosed()
        conn = await self._engine.connect()
        try:
            trans = await conn.begin()
        except BaseException:
            # Covers cancellation (e.g. a begin timeout) as well as driver errors.
            await conn.close()
            raise
        return SqlAlchemyTransaction(conn, trans)

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        await self._engine.dispose()
        log.info("database_closed")


# --- Module Notes -----------------------------------------------------------
# Any object with an awaitable `begin()` returning something with awaitable
# `commit()`/`rollback()` satisfies the coordinator; tests rely on this with fakes.
