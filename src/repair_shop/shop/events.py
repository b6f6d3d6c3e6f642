from __future__ import annotations

import logging
from enum import Enum
from typing import Any


class ShopEvent(str, Enum):
    ORDER_CREATED = "order-created"
    ORDER_REJECTED = "order-creation-rejected"
    REPAIR_STARTED = "repair-started"
    REPAIR_SUCCEEDED = "repair-succeeded"
    REPAIR_FAILED = "repair-failed"
    FINAL_STATUS = "final-status-reported"


def narrate(
    logger: logging.Logger,
    event: ShopEvent,
    message: str,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """
    Emit one shop event.

    The event name lands on record.event, the remaining fields on
    record.structured (picked up by JSONFormatter).
    """
    logger.log(level, message, extra={"event": event.value, "structured": fields})
