"""Structured logging for command line runs."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Mapping

JSON_LOGS_ENV = "STREAMEXT_JSON_LOGS"


def json_logs_enabled() -> bool:
    return os.getenv(JSON_LOGS_ENV, "false").lower() == "true"


class EventFormatter(logging.Formatter):
    """Renders mapping messages as JSON objects or ``key=value`` pairs.

    Plain string messages fall through to the normal ``logging`` format.
    """

    def __init__(self, json_logs: bool = False) -> None:
        super().__init__("%(message)s" if json_logs else "%(levelname)s:%(name)s:%(message)s")
        self.json_logs = json_logs

    def format(self, record: logging.LogRecord) -> str:
        if not isinstance(record.msg, Mapping):
            return super().format(record)
        fields = dict(record.msg)
        if self.json_logs:
            return json.dumps({"level": record.levelname, "logger": record.name, **fields}, default=str)
        pairs = " ".join(f"{key}={value}" for key, value in fields.items())
        return f"{record.levelname}:{record.name}:{pairs}"


def configure_logging(level: str = "INFO", json_logs: bool | None = None) -> None:
    """Install an :class:`EventFormatter` handler on the root logger.

    ``json_logs`` defaults to the ``STREAMEXT_JSON_LOGS`` environment switch.
    """

    if json_logs is None:
        json_logs = json_logs_enabled()

    handler = logging.StreamHandler()
    handler.setFormatter(EventFormatter(json_logs=json_logs))
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), handlers=[handler])


def log_event(logger: logging.Logger, event: str, *, level: int = logging.INFO, **fields: Any) -> None:
    """Log ``event`` with ``fields`` as one structured record."""

    logger.log(level, {"event": event, **fields})
