"""
data_exporter.observability.logging

Structured logging configuration for the service.

Responsibilities:
- Configure `structlog` to render one JSON object per log event.
- Stamp every event with the service name and package version.
- Keep driver loggers (SQLAlchemy engine, aiosqlite) out of the request log.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from data_exporter import __version__

# Per-statement SQL and driver chatter; raise to INFO/DEBUG locally when needed.
QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "uvicorn.access")


def configure_logging(*, service_name: str, level: str) -> None:
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            add_service_fields(service_name),
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def add_service_fields(service_name: str):
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        event_dict.setdefault("version", __version__)
        return event_dict

    return processor


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


# --- Module Notes -----------------------------------------------------------
# Policy events (`policy_created`, `policy_rejected`) come from the service layer;
# the per-request access line comes from `observability.middleware`.
