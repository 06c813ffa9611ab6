"""
tests.test_registry

Repository registry tests.

Responsibilities:
- Pin register/overwrite/unregister semantics and the not-found message.
- Check that lookup follows the most recent operation per name.
"""

from __future__ import annotations

import pytest

from uow_coordinator.errors import RepositoryNotFound, UnitOfWorkError
from uow_coordinator.registry import RepositoryRegistry


def _factory(tx):
    return ("repo", tx)


def _other_factory(tx):
    return ("other", tx)


def test_register_and_lookup() -> None:
    registry = RepositoryRegistry()
    registry.register("repo1", _factory)

    assert "repo1" in registry
    assert len(registry) == 1
    assert registry.lookup("repo1") is _factory


def test_register_overwrites_previous_factory() -> None:
    registry = RepositoryRegistry()
    registry.register("repo1", _factory)
    registry.register("repo1", _other_factory)

    assert len(registry) == 1
    assert registry.lookup("repo1") is _other_factory


def test_lookup_missing_name() -> None:
    registry = RepositoryRegistry()

    with pytest.raises(RepositoryNotFound) as excinfo:
        registry.lookup("repo1")

    assert str(excinfo.value) == "repository not found: repo1"
    assert excinfo.value.name == "repo1"
    assert isinstance(excinfo.value, UnitOfWorkError)
    assert isinstance(excinfo.value, LookupError)


def test_unregister_removes_and_ignores_missing() -> None:
    registry = RepositoryRegistry()
    registry.register("repo1", _factory)

    registry.unregister("repo1")
    registry.unregister("repo1")
    registry.unregister("never-registered")

    assert len(registry) == 0
    assert "repo1" not in registry


def test_names_are_sorted() -> None:
    registry = RepositoryRegistry()
    registry.register("ledger", _factory)
    registry.register("accounts", _factory)

    assert registry.names() == ("accounts", "ledger")


@pytest.mark.parametrize(
    "ops",
    [
        [("reg", "a"), ("unreg", "a")],
        [("reg", "a"), ("unreg", "a"), ("reg", "a")],
        [("unreg", "a"), ("reg", "b")],
        [("reg", "a"), ("reg", "b"), ("unreg", "b"), ("reg", "a")],
        [("reg", "a"), ("unreg", "b"), ("unreg", "a"), ("unreg", "a")],
    ],
)
def test_lookup_tracks_last_operation_per_name(ops) -> None:
    registry = RepositoryRegistry()
    last: dict[str, str] = {}
    for op, name in ops:
        if op == "reg":
            registry.register(name, _factory)
        else:
            registry.unregister(name)
        last[name] = op

    for name, op in last.items():
        if op == "reg":
            assert registry.lookup(name) is _factory
        else:
            with pytest.raises(RepositoryNotFound):
                registry.lookup(name)


# --- Module Notes -----------------------------------------------------------
# The registry has no transaction awareness; coordinator-level lookups are covered in
# `tests/test_coordinator.py`.
