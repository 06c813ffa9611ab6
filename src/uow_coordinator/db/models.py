"""
uow_coordinator.db.models

Sample persistence schema used by the bundled repositories.

Responsibilities:
- Define ORM models:
  - Account: owner and current balance (integer minor units)
  - LedgerEntry: append-only balance movements per account
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from sqlalchemy import ForeignKey, Index, Integer, String, Uuid as SAUuid
from sqlalchemy.orm import Mapped, mapped_column

from uow_coordinator.db.base import Base


def utcnow() -> datetime:
    # Naive UTC timestamps keep SQLite and Postgres round-trips identical.
    return datetime.now(UTC).replace(tzinfo=None)


class Account(Base):
    __tablename__ = "accounts"

    id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    owner: Mapped[str] = mapped_column(String(256), nullable=False, index=True)
    balance: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(nullable=False, default=utcnow, onupdate=utcnow)


class LedgerEntry(Base):
    __tablename__ = "ledger_entries"

    # Integer key doubles as insertion order for a stable ledger listing.
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    account_id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), ForeignKey("accounts.id"), nullable=False
    )
    amount: Mapped[int] = mapped_column(Integer, nullable=False)  # signed: credit > 0
    memo: Mapped[str] = mapped_column(String(256), nullable=False, default="")

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=utcnow)

    __table_args__ = (Index("ix_ledger_account_id", "account_id", "id"),)


# --- Module Notes -----------------------------------------------------------
# Balances are integers in minor units to keep arithmetic exact on every backend.
