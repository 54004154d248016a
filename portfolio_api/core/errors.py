"""Error Hierarchy — typed, categorized exceptions for every portfolio failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) carry a descriptive "msg"; infrastructure errors
      (500-level) always render the generic "Server Error" body
    - to_response() never includes SQL text, driver messages, or stack state

Design Decisions:
    - Single hierarchy with PortfolioError base: one FastAPI handler catches all
      (ADR: uniform error shape)
    - "msg" key kept at the top level so existing frontends reading res.data.msg keep working
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

GENERIC_ERROR_MESSAGE = "Server Error"


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    REQUEST = "request"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs only (never sent to clients)."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    resource_id: str | None = None
    debug_info: dict[str, Any] | None = None


class PortfolioError(Exception):
    """Base exception for all portfolio API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    @property
    def is_client_error(self) -> bool:
        return self.http_status < 500

    def to_response(self) -> dict:
        """Convert to the REST error body. Server-side errors are masked."""
        if not self.is_client_error:
            return internal_error_response()
        return {
            "msg": self.message,
            "error": {
                "code": self.code,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            },
        }


def internal_error_response() -> dict:
    """Generic 500 body shared by store failures and the catch-all handler."""
    return {
        "msg": GENERIC_ERROR_MESSAGE,
        "error": {
            "code": "INTERNAL_ERROR",
            "category": ErrorCategory.INTERNAL.value,
            "severity": ErrorSeverity.CRITICAL.value,
        },
    }


# ─── Domain Errors (400-level) ──────────────────────────────────

class NotFoundError(PortfolioError):
    """Requested resource does not exist (or the id cannot name one)."""
    def __init__(
        self, resource: str, resource_id: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource = resource
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.resource = resource
        self.resource_id = resource_id


class PayloadValidationError(PortfolioError):
    """Request payload is malformed or misses a required field."""
    def __init__(
        self, message: str, details: list[dict] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.details = details or []

    def to_response(self) -> dict:
        body = super().to_response()
        body["error"]["details"] = self.details
        return body


class RequestError(PortfolioError):
    """Request rejected by the HTTP layer before any route ran (unknown path,
    wrong method, unreadable body)."""
    def __init__(
        self, http_status: int, message: str, context: ErrorContext | None = None,
    ):
        code, category = _REQUEST_ERROR_CODES.get(
            http_status, ("HTTP_ERROR", ErrorCategory.REQUEST),
        )
        super().__init__(
            message, code, category, ErrorSeverity.WARNING, context, http_status,
        )


_REQUEST_ERROR_CODES = {
    400: ("BAD_REQUEST", ErrorCategory.VALIDATION),
    404: ("RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND),
    405: ("METHOD_NOT_ALLOWED", ErrorCategory.REQUEST),
}


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreError(PortfolioError):
    """Persistence layer failed: connectivity, constraint or malformed statement."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class PoolExhaustedError(PortfolioError):
    """No pooled connection became available within the checkout timeout."""
    def __init__(self, timeout_seconds: float | None = None, context: ErrorContext | None = None):
        detail = (
            f" after {timeout_seconds:g}s" if timeout_seconds is not None else ""
        )
        super().__init__(
            f"Connection pool exhausted{detail}",
            "POOL_EXHAUSTED", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.timeout_seconds = timeout_seconds
