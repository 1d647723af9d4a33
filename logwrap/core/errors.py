"""
Error Contract
--------------
The logging path defines no errors: a log call never fails because of the
wrapper. The only typed errors come from setting the pipeline up, where a bad
level or format should stop the service at boot rather than lose logs later.
"""

from enum import Enum


class ErrorCode(str, Enum):
    INVALID_LOG_LEVEL = "invalid_log_level"
    INVALID_LOG_FORMAT = "invalid_log_format"


class ConfigurationError(Exception):
    """Raised by configure_logging when the requested setup is unusable."""

    def __init__(self, code: ErrorCode, detail: str = ""):
        self.code = code
        self.detail = detail or code.value.replace("_", " ").capitalize()
        super().__init__(self.detail)

    def to_dict(self) -> dict:
        return {
            "error": self.code.value,
            "detail": self.detail,
        }
