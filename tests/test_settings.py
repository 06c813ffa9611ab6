"""
tests.test_settings

Configuration tests.

Responsibilities:
- Check defaults, the `UOW_` env prefix and validation of `begin_timeout`.
- Keep credentials in `database_url` out of repr.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from uow_coordinator.settings import Settings


def test_defaults() -> None:
    s = Settings()

    assert s.env == "dev"
    assert s.database_url.startswith("sqlite+aiosqlite://")
    assert s.begin_timeout is None


def test_env_prefix(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UOW_BEGIN_TIMEOUT", "2.5")
    monkeypatch.setenv("UOW_DATABASE_URL", "postgresql+asyncpg://u:secret@db/app")

    s = Settings()

    assert s.begin_timeout == 2.5
    # Credentials embedded in the URL stay out of repr/logging.
    assert "secret" not in repr(s)


def test_begin_timeout_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        Settings(begin_timeout=0)


def test_get_settings_is_cached() -> None:
    from uow_coordinator.settings import get_settings

    assert get_settings() is get_settings()


# --- Module Notes -----------------------------------------------------------
# `get_settings` is cached process-wide; tests that need overrides build `Settings` directly.
