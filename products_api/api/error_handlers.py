"""Error Handlers: global exception handlers for the Products API.

Invariants:
    - ProductApiError → its own envelope and status (400 errors list, 404/500 error string)
    - RequestValidationError → 400 with the same violation shape as the rule sets
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (ProductApiError), validation (Pydantic), catch-all (Exception)
    - Registered from main.py through register_error_handlers
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from products_api.core.errors import ProductApiError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_product_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_product_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(ProductApiError)
    async def product_error_handler(request: Request, exc: ProductApiError):
        """Handle all Products API domain/infrastructure errors."""
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"ProductApiError on {request.method} {request.url.path}: {exc.message}",
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
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build the {"errors": [...]} body from Pydantic errors."""
    errors = []
    for e in exc.errors():
        location, *path = [str(loc) for loc in e["loc"]] or [""]
        errors.append({
            "type": "field",
            "msg": e["msg"],
            "path": ".".join(path),
            "location": "params" if location == "path" else location,
        })
    return {"errors": errors}
