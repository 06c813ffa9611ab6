"""
tests.conftest

Shared fixtures for the coordinator tests.

Responsibilities:
- Provide a coordinator over the scriptable fake database (see `tests/fakes.py`).
- Provide a real SQLite (aiosqlite) database for end-to-end tests.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from fakes import FakeDatabase, Repo

from uow_coordinator.coordinator import UnitOfWork
from uow_coordinator.db.init_db import init_db
from uow_coordinator.db.transaction import SqlAlchemyDatabase
from uow_coordinator.settings import Settings


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def uow(fake_db: FakeDatabase) -> UnitOfWork:
    u = UnitOfWork(fake_db)
    u.register("repo1", Repo)
    return u


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(env="test", database_url=f"sqlite+aiosqlite:///{tmp_path / 'uow.db'}")


@pytest_asyncio.fixture
async def database(settings: Settings) -> AsyncIterator[SqlAlchemyDatabase]:
    db = SqlAlchemyDatabase.from_settings(settings)
    await init_db(db.engine)
    try:
        yield db
    finally:
        await db.close()


# --- Module Notes -----------------------------------------------------------
# File-backed SQLite is used instead of :memory: so separate pooled connections see
# each other's committed writes.
