"""Structured JSON logging.

Modules log through ``logging.getLogger(__name__)`` and attach fields with
``extra={...}``; the JSON formatter turns those fields into top-level keys.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "fieldops-finance"


class ServiceJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter that stamps level and service name on every record."""

    def add_fields(
        self, log_record: dict[str, Any], record: logging.LogRecord, message_dict: dict[str, Any]
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["level"] = record.levelname
        log_record["service"] = SERVICE_NAME


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging(level: str | None = None) -> None:
    """Replace root handlers with a single JSON handler on stdout."""
    root = logging.getLogger()
    root.setLevel(level or log_level())
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ServiceJsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    root.addHandler(handler)
