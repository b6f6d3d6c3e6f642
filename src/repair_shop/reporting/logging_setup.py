"""
Logging for the repair shop.

Every narrated shop event carries record.event (see repair_shop.shop.events)
and its fields in record.structured. The text format prints the message
only, the way the workshop has always narrated; the JSON format writes one
object per line with the event and fields merged in.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import IO, Optional

ROOT_LOGGER = "repair_shop"


class JSONFormatter(logging.Formatter):
    """Formats log records as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        event = getattr(record, "event", None)
        if event is not None:
            entry["event"] = event

        # Merge structured fields from extra
        if hasattr(record, "structured"):
            entry.update(record.structured)

        if record.exc_info and record.exc_info[0] is not None:
            entry["exception.type"] = record.exc_info[0].__name__
            entry["exception.message"] = str(record.exc_info[1])

        return json.dumps(entry, default=str)


def configure_logging(
    level: str = "INFO",
    fmt: str = "text",
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    Install a single handler on the repair_shop logger.

    Calling it again replaces the previous handler, so scripts and tests can
    reconfigure freely.
    """
    if fmt not in ("text", "json"):
        raise ValueError(f"unknown log format: {fmt}")

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = logging.StreamHandler(stream or sys.stdout)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
