"""
uow_coordinator

Unit-of-Work coordinator: one database transaction shared by a set of named repositories.

Responsibilities:
- Expose package version metadata.
- Re-export the public coordinator surface.
"""

from uow_coordinator.coordinator import DoFunc, UnitOfWork
from uow_coordinator.errors import (
    ComposedRollbackError,
    DatabaseClosed,
    NoActiveTransaction,
    RepositoryNotFound,
    TransactionAlreadyResolved,
    TransactionAlreadyStarted,
    UnitOfWorkError,
)
from uow_coordinator.registry import RepositoryFactory, RepositoryRegistry

__all__ = [
    "ComposedRollbackError",
    "DatabaseClosed",
    "DoFunc",
    "NoActiveTransaction",
    "RepositoryFactory",
    "RepositoryNotFound",
    "RepositoryRegistry",
    "TransactionAlreadyResolved",
    "TransactionAlreadyStarted",
    "UnitOfWork",
    "UnitOfWorkError",
    "__version__",
]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# The SQLAlchemy adapter, sample repositories and services live in subpackages and are
# imported explicitly by callers that need them.
