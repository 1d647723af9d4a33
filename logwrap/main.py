"""
logwrap — Demo Application
FastAPI service wired with the request logging middleware.
Run with: uvicorn logwrap.main:app
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from logwrap.api.middleware import RequestLoggingMiddleware
from logwrap.core.logging import configure_logging, get_logger
from logwrap.services.logger import Logger


def create_app(logger: Logger | None = None) -> FastAPI:
    logger = logger or get_logger()

    app = FastAPI(
        title="logwrap demo",
        description="Shows request/response records emitted through the logging wrapper.",
        version="0.1.0",
        docs_url="/docs",
        redoc_url=None,
    )
    app.add_middleware(RequestLoggingMiddleware, logger=logger)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        # Already logged by RequestLoggingMiddleware.
        return JSONResponse(
            status_code=500,
            content={"error": "internal_server_error", "detail": "An unexpected error occurred."},
        )

    @app.get("/health")
    async def health():
        return {"status": "ok", "service": "logwrap"}

    return app


configure_logging()
app = create_app()
