"""Structured logging for store mutations."""

import logging
from typing import Any

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str) -> None:
    """Apply the configured log level and format to the root logger."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())


class StructuredStoreLogger:
    """Structured logger for itinerary store operations."""

    def log_operation(
        self,
        operation: str,
        outcome: str,
        itinerary_id: str | None = None,
        item_id: str | None = None,
        latency_ms: float | None = None,
        error_reason: str | None = None,
    ) -> None:
        """Log a store operation with structured data."""
        log_data: dict[str, Any] = {
            "operation": operation,
            "outcome": outcome,
        }

        if itinerary_id:
            log_data["itinerary_id"] = itinerary_id
        if item_id:
            log_data["item_id"] = item_id
        if latency_ms is not None:
            log_data["latency_ms"] = round(latency_ms, 2)
        if error_reason:
            log_data["error_reason"] = error_reason

        log_msg = f"Store operation: {operation} - {outcome}"

        if outcome == "error":
            logger.error(log_msg, extra={"structured": log_data})
        elif outcome == "not_found":
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.debug(log_msg, extra={"structured": log_data})
