"""
uow_coordinator.registry

Name-keyed registry of repository factories.

Responsibilities:
- Map logical repository names to factories that bind a repository to a transaction.
- Report unknown names with `RepositoryNotFound`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from uow_coordinator.errors import RepositoryNotFound

# A factory receives whatever handle the coordinator's `Database.begin()` produced, so
# its parameter is typed by the factory itself (e.g. `AccountRepo` takes a
# `SqlAlchemyTransaction`). The coordinator never inspects what a factory returns.
RepositoryFactory = Callable[[Any], Any]


class RepositoryRegistry:
    def __init__(self) -> None:
        self._factories: dict[str, RepositoryFactory] = {}

    def register(self, name: str, factory: RepositoryFactory) -> None:
        self._factories[name] = factory

    def unregister(self, name: str) -> None:
        self._factories.pop(name, None)

    def lookup(self, name: str) -> RepositoryFactory:
        try:
            return self._factories[name]
        except KeyError:
            raise RepositoryNotFound(name) from None

    def names(self) -> tuple[str, ...]:
        return tuple(sorted(self._factories))

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)


# --- Module Notes -----------------------------------------------------------
# Re-registering a name replaces the factory for future lookups only; repositories already
# built from the old factory stay bound to their transaction.
