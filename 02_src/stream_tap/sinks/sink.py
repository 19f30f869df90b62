"""Trace sink implementations."""

import logging
from typing import Protocol, runtime_checkable

from ..logging_config import TRACE, get_logger


@runtime_checkable
class ITraceSink(Protocol):
    """Accepts structured records for trace-level emission."""

    def trace(self, record: dict) -> None:
        """Emit one record. Return value is ignored."""
        ...


class LoggerSink:
    """Forwards records to a stdlib logger at TRACE level."""

    def __init__(self, logger: logging.Logger | None = None):
        self._logger = logger or get_logger("stream_tap.trace")

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def trace(self, record: dict) -> None:
        """Log record["msg"] with the full record attached as context."""
        if not self._logger.isEnabledFor(TRACE):
            return
        self._logger.log(TRACE, record.get("msg", ""), extra={"context": record})


class MemorySink:
    """Keeps records in memory, in arrival order."""

    def __init__(self):
        self.records: list[dict] = []

    def trace(self, record: dict) -> None:
        self.records.append(record)

    def clear(self) -> None:
        """Drop all collected records."""
        self.records.clear()
