"""Error Handlers — global exception handlers for the TinMarin API.

Invariants:
    - TinMarinError → its own http_status with {"error": message, "code": ...}
    - RequestValidationError → 400 with field-level details
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (TinMarinError), validation (Pydantic), catch-all (Exception)
    - Request handlers already convert expected outcomes; these only see what escapes them
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from tinmarin.core.errors import TinMarinError
from tinmarin.core.field_validation import validation_details

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_tinmarin_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_tinmarin_error_handler(app: FastAPI) -> None:
    """Register TinMarin domain/infrastructure error handler."""

    @app.exception_handler(TinMarinError)
    async def tinmarin_error_handler(request: Request, exc: TinMarinError):
        """Handle all TinMarin domain/infrastructure errors."""
        logger.error(
            f"TinMarinError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "Invalid request data.",
                "details": validation_details(exc.errors()),
            },
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal Server Error."},
        )
