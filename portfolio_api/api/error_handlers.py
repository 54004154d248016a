"""Error Handlers — global exception handlers mapping outcomes to HTTP responses.

Invariants:
    - PortfolioError → its http_status and to_response() body
    - RequestValidationError (bad JSON, missing or mistyped field) → 400 with field details
    - Starlette HTTPException (unknown path, wrong method, undecodable body) →
      its own status with the same {"msg", "error"} body; its headers are kept
    - Exception (catch-all) → 500 generic body, never leaks internal details
    - 4xx logged at WARNING, 5xx at ERROR with traceback

Design Decisions:
    - Four-layer handler: domain (PortfolioError), validation (Pydantic),
      HTTP layer (Starlette), catch-all (Exception)
    - Extracted from main.py to keep the app module small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio_api.core.errors import (
    PayloadValidationError, PortfolioError, RequestError, internal_error_response,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_portfolio_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_portfolio_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(PortfolioError)
    async def portfolio_error_handler(request: Request, exc: PortfolioError):
        """Handle all portfolio domain/infrastructure errors."""
        extra = {
            "error_code": exc.code,
            "path": request.url.path,
            "resource": exc.context.resource,
            "resource_id": exc.context.resource_id,
        }
        if exc.is_client_error:
            logger.warning(f"{exc.code}: {exc.message}", extra=extra)
        else:
            logger.error(f"{exc.code}: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed bodies and schema violations."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=jsonable_encoder(
                build_validation_error(exc).to_response(),
            ),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for errors raised by routing and body parsing."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        error = RequestError(exc.status_code, str(exc.detail))
        extra = {"error_code": error.code, "path": request.url.path}
        if error.is_client_error:
            logger.warning(f"{error.code}: {error.message}", extra=extra)
        else:
            logger.error(f"{error.code}: {error.message}", extra=extra)
        return JSONResponse(
            status_code=exc.status_code,
            content=error.to_response(),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=internal_error_response(),
        )


def build_validation_error(exc: RequestValidationError) -> PayloadValidationError:
    """Translate FastAPI's validation error into the domain error."""
    return PayloadValidationError(
        "Invalid request data",
        details=[
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    )
