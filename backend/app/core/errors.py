"""Error Hierarchy — typed, categorized exceptions for every structured failure.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Each error renders its own response body via to_response()
    - Validation and routing errors are client-caused (400/404); faults are 500
    - Secret configuration values never appear in an error body

Design Decisions:
    - Single hierarchy with CivicApiError base: the dispatcher guard and the
      FastAPI global handler catch all (ADR: uniform error shape)
    - Bodies keep the public wire shapes clients already consume, so each
      subclass overrides to_response() instead of wrapping in an envelope
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from app.core.timestamps import iso_timestamp


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories, one per failure kind."""
    VALIDATION = "validation"
    ROUTING = "routing"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: str | None = None
    route: str | None = None
    debug_info: dict[str, Any] | None = None


class CivicApiError(Exception):
    """Base exception for all structured API errors."""

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

    def to_response(self) -> dict:
        """Convert to a REST error body."""
        return {"error": self.code, "message": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidZipcodeError(CivicApiError):
    """Zipcode candidate is not exactly five ASCII digits."""
    def __init__(self, candidate: str | list[str] | None, context: ErrorContext | None = None):
        super().__init__(
            "Invalid zipcode format", "INVALID_ZIPCODE",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, context, 400,
        )
        self.candidate = candidate

    def to_response(self) -> dict:
        return {"error": self.message, "supported": False}


class RouteNotFoundError(CivicApiError):
    """No handler is bound to the requested path."""
    def __init__(self, path: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.path = path
        super().__init__(
            f"Route {path} not found", "ROUTE_NOT_FOUND",
            ErrorCategory.ROUTING, ErrorSeverity.INFO, ctx, 404,
        )
        self.path = path

    def to_response(self) -> dict:
        return {
            "error": "Not Found",
            "message": self.message,
            "timestamp": iso_timestamp(self.context.timestamp),
        }


# ─── Internal Faults (500-level) ────────────────────────────────

class HandlerFaultError(CivicApiError):
    """A handler raised something unexpected while building its response."""
    def __init__(
        self, label: str, fault: BaseException, context: ErrorContext | None = None,
    ):
        super().__init__(
            str(fault), "HANDLER_FAULT",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL, context, 500,
        )
        self.label = label
        self.fault = fault

    def to_response(self) -> dict:
        return {"error": self.label, "message": self.message}
