"""
Output Transforms
-----------------
structlog processors applied by the sink before a line is written.
Each one takes the event dict and returns a new one; the originals are
never mutated.

  flatten_record   first step: spreads the wrapper's record into the event
  Timestamp        adds `time` (local ISO-8601, milliseconds, offset)
  CapitalizeLevel  upper-cases a textual `level`
  ColorizeLevel    wraps a textual `level` in its ANSI color
  LineRenderer     final step: "<time> <level> <message>"
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Callable, MutableMapping

from colorama import Fore, Style

EventDict = MutableMapping[str, Any]

# ── ANSI colors ───────────────────────────────────────────────────────────────


def _painter(color: str) -> Callable[[str], str]:
    def paint(text: str) -> str:
        return f"{color}{text}{Style.RESET_ALL}"
    return paint


red = _painter(Fore.RED)
green = _painter(Fore.GREEN)
yellow = _painter(Fore.YELLOW)
blue = _painter(Fore.BLUE)
magenta = _painter(Fore.MAGENTA)

LEVEL_COLORS: dict[str, Callable[[str], str]] = {
    "debug": blue,
    "info": green,
    "warn": yellow,
    "warning": yellow,
    "error": red,
    "critical": magenta,
}


def flatten_record(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    The wrapper hands its record over as the event itself, so caller keys never
    meet the bound logger's own parameter names. Spread it back to the top level;
    record keys win over bound context.
    """
    record = event_dict.get("event")
    if not isinstance(record, Mapping):
        return event_dict
    flat = {key: value for key, value in event_dict.items() if key != "event"}
    flat.update(record)
    return flat


def to_iso_string(moment: datetime) -> str:
    """
    YYYY-MM-DDTHH:MM:SS.mmm±HH:MM in the moment's own offset.
    Naive datetimes are read as local time.
    """
    if moment.tzinfo is None:
        moment = moment.astimezone()

    offset_minutes = int(moment.utcoffset().total_seconds() // 60)
    sign = "+" if offset_minutes >= 0 else "-"
    hours, minutes = divmod(abs(offset_minutes), 60)

    return (
        f"{moment:%Y-%m-%dT%H:%M:%S}.{moment.microsecond // 1000:03d}"
        f"{sign}{hours:02d}:{minutes:02d}"
    )


class Timestamp:
    """Stamp each event with the current local time under `time`."""

    def __init__(
        self,
        color: Callable[[str], str] | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.color = color
        self.clock = clock or (lambda: datetime.now().astimezone())

    def __call__(self, logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        stamp = to_iso_string(self.clock())
        if self.color:
            stamp = self.color(stamp)
        return {**event_dict, "time": stamp}


class CapitalizeLevel:
    def __call__(self, logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        level = event_dict.get("level")
        if not isinstance(level, str):
            return event_dict
        return {**event_dict, "level": level.upper()}


class ColorizeLevel:
    def __call__(self, logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        level = event_dict.get("level")
        if not isinstance(level, str):
            return event_dict
        paint = LEVEL_COLORS.get(level.lower())
        if paint is None:
            return event_dict
        return {**event_dict, "level": paint(level)}


class LineRenderer:
    """
    Render the event as one human-readable line. Must be the last processor:
    structlog writes the returned string as-is. Fields other than time, level
    and message are not shown; use a JSON renderer to keep them.
    """

    def __call__(self, logger: Any, method_name: str, event_dict: EventDict) -> str:
        return f"{event_dict.get('time')} {event_dict.get('level')} {event_dict.get('message')}"
