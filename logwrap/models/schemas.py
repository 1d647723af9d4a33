"""
Pydantic Models — Log Input Shapes
----------------------------------
Two concrete input shapes, told apart by the `type` discriminant:
  1. Message          plain log line: message, optional error and extra fields
  2. RequestResponse  Message + HTTP request/response metadata, type="request"

The models describe what callers are expected to send. The logger itself never
validates: mapping input is turned into a model with `model_construct`, so a
malformed log call is shaped as-is instead of raising.
"""

from collections.abc import Mapping
from typing import Any, Literal, Union, get_args

from pydantic import BaseModel, Field

Method = Literal[
    "GET", "HEAD", "POST", "PUT", "DELETE", "CONNECT", "OPTIONS", "TRACE", "PATCH",
]

HTTP_METHODS: frozenset[str] = frozenset(get_args(Method))

# One flattened log event as handed to the sink.
LogRecord = dict[str, Any]


# ── Plain shape ───────────────────────────────────────────────────────────────

class Message(BaseModel):
    message: str
    error: Any = None
    extra: dict[str, Any] | None = Field(
        default=None,
        description="Merged into the record at top level, not nested.",
    )


# ── Request / response shape ──────────────────────────────────────────────────

class RequestResponse(Message):
    method: Method
    status: int
    client_ip: str
    path: str
    response_size: int | None = None
    elapsed: float | None = None
    type: Literal["request"] = "request"

    def has_http_fields(self) -> bool:
        """All four identifying fields set and the discriminant matches."""
        return bool(
            self.client_ip
            and self.method
            and self.status
            and self.path
            and self.type == "request"
        )


LogInput = Union[RequestResponse, Message]

_REQUEST_FIELDS = ("method", "status", "client_ip", "path", "response_size", "elapsed", "type")


def coerce_input(entry: Any) -> LogInput:
    """
    Pick the input shape for whatever the caller passed.

    Models are used as they are. Mappings become a RequestResponse when
    `type == "request"` and a Message otherwise. Anything else is taken to be
    the message itself.
    """
    if isinstance(entry, Message):
        return entry

    if isinstance(entry, Mapping):
        base = {
            "message": entry.get("message"),
            "error": entry.get("error"),
            "extra": entry.get("extra"),
        }
        if entry.get("type") == "request":
            return RequestResponse.model_construct(
                **base, **{name: entry.get(name) for name in _REQUEST_FIELDS}
            )
        return Message.model_construct(**base)

    return Message.model_construct(message=entry, error=None, extra=None)
