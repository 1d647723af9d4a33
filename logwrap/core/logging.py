"""
Logging Setup
-------------
Wires structlog on top of the stdlib `logging` module.

Two output formats:
  - console   "<time> <LEVEL> <message>", timestamp in magenta, level colored
  - json      one JSON object per line: message, level, time + all record fields

Both go to stdout through a single StreamHandler on the configured logger,
which makes them ingestible by any log aggregator (json) or readable in a
terminal (console).
"""

import logging
import sys

import structlog

from logwrap.core.config import Settings, get_settings
from logwrap.core.errors import ConfigurationError, ErrorCode
from logwrap.services.logger import Logger
from logwrap.services.transforms import (
    CapitalizeLevel,
    ColorizeLevel,
    LineRenderer,
    Timestamp,
    flatten_record,
    magenta,
)

LOG_FORMATS = ("console", "json")

# Stdlib logger that owns the handler; set by configure_logging.
_base_name: str | None = None


def build_processors(log_format: str, colorize: bool = True) -> list:
    """Ordered processor chain for the given output format."""
    processors: list = [
        flatten_record,
        structlog.stdlib.filter_by_level,
        structlog.processors.add_log_level,
    ]

    if log_format == "json":
        processors += [
            Timestamp(),
            structlog.processors.JSONRenderer(),
        ]
        return processors

    processors += [
        Timestamp(magenta if colorize else None),
        CapitalizeLevel(),
    ]
    if colorize:
        processors.append(ColorizeLevel())
    processors.append(LineRenderer())
    return processors


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            ErrorCode.INVALID_LOG_LEVEL,
            f"Unknown log level {name!r}.",
        )
    return level


def configure_logging(
    settings: Settings | None = None,
    *,
    log_level: str | None = None,
    log_format: str | None = None,
) -> None:
    """
    Configure structlog and the stdlib logger it writes through.
    Keyword overrides win over settings. Safe to call more than once.
    """
    settings = settings or get_settings()
    level = _resolve_level(log_level or settings.log_level)
    log_format = log_format or settings.log_format

    if log_format not in LOG_FORMATS:
        raise ConfigurationError(
            ErrorCode.INVALID_LOG_FORMAT,
            f"Unknown log format {log_format!r}. Expected one of: {', '.join(LOG_FORMATS)}.",
        )

    structlog.configure(
        processors=build_processors(log_format, settings.colorize),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    global _base_name
    _base_name = settings.logger_name

    std_logger = logging.getLogger(_base_name)
    for handler in list(std_logger.handlers):
        std_logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    std_logger.addHandler(handler)
    std_logger.setLevel(level)
    std_logger.propagate = False


def get_logger(name: str | None = None) -> Logger:
    """
    Names are nested under the configured logger so every wrapper shares its
    handler and level: get_logger("myapp") logs through "logwrap.myapp".
    """
    base = _base_name or get_settings().logger_name
    if name and name != base and not name.startswith(f"{base}."):
        name = f"{base}.{name}"
    return Logger(structlog.get_logger(name or base))
