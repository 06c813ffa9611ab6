"""
uow_coordinator.bootstrap

Composition root for processes embedding the coordinator.

Responsibilities:
- Configure logging once, build the database adapter and coordinator from settings.
- Register the bundled repositories and wire the service layer.
- Dispose shared infrastructure on shutdown.
"""

from __future__ import annotations

from dataclasses import dataclass

from uow_coordinator.coordinator import UnitOfWork
from uow_coordinator.db.init_db import init_db
from uow_coordinator.db.repositories import register_default_repositories
from uow_coordinator.db.transaction import SqlAlchemyDatabase
from uow_coordinator.observability.logging import configure_logging, get_logger
from uow_coordinator.services.transfer_service import TransferService
from uow_coordinator.settings import Settings

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Runtime:
    settings: Settings
    database: SqlAlchemyDatabase
    uow: UnitOfWork
    transfers: TransferService

    async def close(self) -> None:
        # The coordinator never closes the database; the owner of the runtime does.
        await self.database.close()
        log.info("shutdown")


async def create_runtime(*, settings: Settings) -> Runtime:
    configure_logging(settings)
    log.info("startup", env=settings.env)

    database = SqlAlchemyDatabase.from_settings(settings)
    if settings.env in ("dev", "test"):
        # Dev/test convenience: create tables automatically. Prod manages its own schema.
        await init_db(database.engine)

    uow = UnitOfWork(database)
    register_default_repositories(uow)
    transfers = TransferService(uow=uow, begin_timeout=settings.begin_timeout)
    return Runtime(settings=settings, database=database, uow=uow, transfers=transfers)


# --- Module Notes -----------------------------------------------------------
# One `Runtime` serves one sequential flow of control. Concurrent flows should each build
# their own `UnitOfWork` over the shared `database`.
