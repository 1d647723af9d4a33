__all__ = [
    "Logger",
    "Message",
    "RequestResponse",
    "Timestamp",
    "CapitalizeLevel",
    "ColorizeLevel",
    "LineRenderer",
    "configure_logging",
    "get_logger",
]
__version__ = "0.1.0"

from .models.schemas import Message, RequestResponse
from .services.logger import Logger
from .services.transforms import CapitalizeLevel, ColorizeLevel, LineRenderer, Timestamp
from .core.logging import configure_logging, get_logger
