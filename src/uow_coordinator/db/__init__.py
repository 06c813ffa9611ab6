"""
uow_coordinator.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide the database/transaction adapter the coordinator runs on.
- Provide sample ORM models and transaction-bound repositories.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The coordinator depends only on the Protocols in `db.transaction`; swapping the
# backend means providing another `Database` implementation.
