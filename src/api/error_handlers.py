"""Global exception handlers: every failure leaves as an error envelope.

- DomainError -> its own status and code
- Starlette HTTPException -> 404 NOT_FOUND ("Route not found"), 405 METHOD_NOT_ALLOWED, else HTTP_<status>
- RequestValidationError -> 400 VALIDATION_ERROR
- Exception (catch-all) -> classified, never leaks a traceback

The catch-all runs as HTTP middleware registered before CORS, so CORS stays the
outermost layer and 500 envelopes still carry CORS headers.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.core.errors import DomainError, DomainFailure
from src.api.responses import failure_response
from src.api.state import get_state

logger = logging.getLogger(__name__)


def _http_failure(exc: StarletteHTTPException) -> DomainFailure:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return DomainFailure("Route not found", "NOT_FOUND", 404)
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return DomainFailure("Method not allowed", "METHOD_NOT_ALLOWED", 405)
    detail = exc.detail if isinstance(exc.detail, str) and exc.detail else "HTTP error"
    return DomainFailure(detail, f"HTTP_{exc.status_code}", exc.status_code)


# PUBLIC_INTERFACE
def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return failure_response(get_state(request.app), exc, request.url.path)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return failure_response(get_state(request.app), _http_failure(exc), request.url.path)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return failure_response(
            get_state(request.app),
            DomainFailure("Invalid request data", "VALIDATION_ERROR", 400),
            request.url.path,
        )

    @app.middleware("http")
    async def uncaught_error_middleware(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            return failure_response(get_state(request.app), exc, request.url.path)

    # Last resort for faults raised outside the middleware stack above.
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        return failure_response(get_state(request.app), exc, request.url.path)
