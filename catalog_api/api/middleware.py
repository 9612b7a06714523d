"""API middleware for the Catalog API.

Provides:
- Request ID correlation
- Error handling
"""

import re
import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger()


# ============================================================================
# Request ID Middleware
# ============================================================================


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID and bind it into the log context.

    A well-formed X-Request-ID from the client is echoed back; anything
    else (missing, too long, or with characters outside [A-Za-z0-9._-])
    is replaced by a fresh UUID4. Request ID, method and path are bound
    into the structlog context so catalog and store logs carry them.
    """

    HEADER_NAME = "X-Request-ID"
    MAX_LENGTH = 128
    ALLOWED = re.compile(r"[A-Za-z0-9._-]+")

    @classmethod
    def resolve_request_id(cls, incoming: str | None) -> str:
        """Return the client's request ID if usable, else a new UUID4."""
        if incoming and len(incoming) <= cls.MAX_LENGTH and cls.ALLOWED.fullmatch(incoming):
            return incoming
        return str(uuid4())

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        request_id = self.resolve_request_id(request.headers.get(self.HEADER_NAME))
        request.state.request_id = request_id

        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        start_time = time.perf_counter()
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            logger.info(
                "Request completed",
                status_code=status_code,
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            structlog.contextvars.unbind_contextvars("request_id", "method", "path")

        response.headers[self.HEADER_NAME] = request_id

        return response


# ============================================================================
# Error Handling Middleware
# ============================================================================


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Turn exceptions no handler claimed into a generic 500 response.

    Domain errors never reach this point; they are mapped by the exception
    handlers in catalog_api.main. The exception text is logged but not sent.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            # method and path come from the bound request context
            logger.exception(
                "Unhandled exception",
                error_type=type(e).__name__,
                error=str(e),
            )

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "error_code": "INTERNAL_ERROR",
                    "message": "An internal error occurred",
                    "details": [],
                    "request_id": getattr(request.state, "request_id", None),
                },
            )


# ============================================================================
# Middleware Setup
# ============================================================================


def setup_middleware(app: FastAPI) -> None:
    """Configure all middleware for the application.

    Middleware is added in reverse order (last added = first executed).

    Args:
        app: FastAPI application instance.
    """
    # Error handling (inner - turns handler crashes into 500 responses)
    app.add_middleware(ErrorHandlerMiddleware)

    # Request ID correlation (outer - tags every response, errors included)
    app.add_middleware(RequestIdMiddleware)
