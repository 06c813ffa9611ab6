"""
uow_coordinator.db.engine

Async SQLAlchemy engine construction.

Responsibilities:
- Create the async engine from settings.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from uow_coordinator.settings import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    # pool_pre_ping helps detect stale connections in long-lived processes.
    return create_async_engine(
        settings.database_url,
        pool_pre_ping=settings.pool_pre_ping,
    )
