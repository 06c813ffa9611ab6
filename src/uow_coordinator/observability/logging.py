"""
uow_coordinator.observability.logging

Structured logging for transaction lifecycle events.

Responsibilities:
- Configure `structlog` from `Settings` (level, service/env tagging, logger caching).
- Scope every unit-of-work execution with a `unit_of_work_id` so the begin, commit and
  rollback events of one execution can be correlated.
- Provide a small wrapper for obtaining bound loggers.
"""

from __future__ import annotations

import logging
import sys
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from uow_coordinator.settings import Settings

UNIT_OF_WORK_ID = "unit_of_work_id"


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _add_deployment(service_name=settings.service_name, env=settings.env),
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        # Cached loggers ignore later reconfiguration (e.g. log capture in tests).
        cache_logger_on_first_use=settings.env == "prod",
    )


def _add_deployment(*, service_name: str, env: str):
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        event_dict.setdefault("env", env)
        return event_dict

    return processor


@contextmanager
def unit_of_work_scope() -> Iterator[str]:
    """
    Bind a fresh `unit_of_work_id` for the duration of one execution.

    Values bound by the caller (e.g. a request id) stay in place and are restored
    unchanged on exit.
    """

    uow_id = uuid.uuid4().hex
    with structlog.contextvars.bound_contextvars(**{UNIT_OF_WORK_ID: uow_id}):
        yield uow_id


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


# --- Module Notes -----------------------------------------------------------
# The coordinator only logs through `get_logger`; output is configured once by
# `bootstrap.create_runtime`, so library imports stay free of side effects.
