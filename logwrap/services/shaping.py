"""
Record Shaping Service
----------------------
Turns one log input into the flat record the sink receives.
No I/O. Pure computation. Never raises on malformed input.

Steps applied, in order:
  1. message copied verbatim
  2. error rendered to text (only when supplied)
  3. extra fields flattened to the top level (last write wins)
  4. http_* fields for a complete request/response input
"""

import traceback
from typing import Any

from logwrap.models.schemas import LogInput, LogRecord, RequestResponse, coerce_input


def render_error(error: Any) -> str:
    """
    Exceptions become their message, followed by the traceback when they
    were actually raised. Any other value becomes its text form.
    """
    if isinstance(error, BaseException):
        text = str(error)
        if error.__traceback__ is not None:
            stack = "".join(
                traceback.format_exception(type(error), error, error.__traceback__)
            )
            text = f"{text}\n {stack}"
        return text
    return f"{error}"


def _extra_fields(extra: Any) -> LogRecord:
    if not extra or not hasattr(extra, "items"):
        return {}
    return {str(key): value for key, value in extra.items()}


def _http_fields(entry: RequestResponse) -> LogRecord:
    fields: LogRecord = {
        "http_method": entry.method,
        "http_status": entry.status,
        "http_client_ip": entry.client_ip,
        "http_url": entry.path,
    }
    # Unset values are left out, matching what a JSON sink would emit.
    if entry.response_size is not None:
        fields["http_response_size"] = entry.response_size
    if entry.elapsed is not None:
        fields["http_elapsed"] = entry.elapsed
    return fields


def build_record(entry: LogInput | Any) -> LogRecord:
    """Build a fresh flat record for a single log call."""
    entry = coerce_input(entry)

    record: LogRecord = {"message": entry.message}

    if entry.error is not None:
        record["error"] = render_error(entry.error)

    record.update(_extra_fields(entry.extra))

    if isinstance(entry, RequestResponse) and entry.has_http_fields():
        record.update(_http_fields(entry))

    return record
