"""
Request Logging Middleware
--------------------------
Emits one request/response record per HTTP request through the wrapper:

    {"message": "request_completed", "http_method": "GET", "http_status": 200,
     "http_client_ip": "1.2.3.4", "http_url": "/health",
     "http_response_size": 15, "http_elapsed": 3, ...}

Unhandled application exceptions are logged at error level and re-raised
untouched so the app's own exception handlers still run.
"""

import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from logwrap.models.schemas import HTTP_METHODS, Message, RequestResponse
from logwrap.services.logger import Logger


def _client_ip(request: Request) -> str:
    return request.client.host if request.client else "unknown"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, logger: Logger):
        super().__init__(app)
        self.logger = logger

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        t_start = time.monotonic()
        try:
            response = await call_next(request)
        except Exception as exc:
            self.logger.error(Message(
                message="unhandled_exception",
                error=exc,
                extra={"path": request.url.path, "client_ip": _client_ip(request)},
            ))
            raise

        elapsed_ms = int((time.monotonic() - t_start) * 1000)
        fields = {
            "method": request.method,
            "status": response.status_code,
            "client_ip": _client_ip(request),
            "path": request.url.path,
            "response_size": int(response.headers.get("content-length", 0)),
            "elapsed": elapsed_ms,
        }

        if request.method in HTTP_METHODS:
            self.logger.info(RequestResponse(message="request_completed", **fields))
        else:
            # Verbs outside the known set still get logged, just unshaped.
            self.logger.info(Message(message="request_completed", extra=fields))

        return response
