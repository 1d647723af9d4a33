"""
Logger Façade
-------------
Small wrapper around a structlog logger for consistency across projects.

Every severity method takes a Message, a RequestResponse, a plain mapping or a
bare string, shapes it into one flat record and forwards it to the sink:

    logger.info({"message": "hello world", "extra": {"key": "value"}})
    # {"message": "hello world", "key": "value", "level": "info", "time": ...}

The wrapper never validates its input and never raises by itself. Errors from
the sink's own write path propagate to the caller unchanged.
"""

from typing import Any

from logwrap.models.schemas import LogInput
from logwrap.services.shaping import build_record


class Logger:
    def __init__(self, logger: Any):
        self.logger = logger

    def _forward(self, severity: str, entry: LogInput | Any) -> None:
        record = build_record(entry)
        # Handed over whole as the event; flatten_record spreads it back out.
        getattr(self.logger, severity)(record)

    def trace(self, entry: LogInput | Any) -> None:
        """
        Accepted and dropped. Neither stdlib logging nor structlog has a TRACE
        level, so nothing is forwarded to the sink.
        """

    def debug(self, entry: LogInput | Any) -> None:
        self._forward("debug", entry)

    def info(self, entry: LogInput | Any) -> None:
        self._forward("info", entry)

    def warn(self, entry: LogInput | Any) -> None:
        self._forward("warn", entry)

    def error(self, entry: LogInput | Any) -> None:
        self._forward("error", entry)

    def fatal(self, entry: LogInput | Any) -> None:
        """
        Unimplemented on purpose: takes the same input shape as the other
        levels and does nothing. Use `error` for failures that must be logged.
        """
