"""Error Hierarchy: typed, categorized exceptions for every Primer failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Argument errors are raised before any computation starts
    - InvalidArgumentError is also a TypeError; DivisionByZeroError is also a ZeroDivisionError
    - to_response() produces the REST envelope; no internal details leaked
    - Context identifiers (operation, argument, model_id, item_id) feed both logs and responses

Design Decisions:
    - Single hierarchy with PrimerError base: FastAPI global handler catches all (ADR: uniform error shape)
    - Built-in exception as second base: plain-Python callers keep catching TypeError / ZeroDivisionError
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    ARITHMETIC = "arithmetic"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    argument: str | None = None
    model_id: str | None = None
    item_id: str | None = None

    def identifiers(self) -> dict[str, str]:
        """Non-empty operation/argument/resource ids, keyed for logs and responses."""
        return {
            key: value
            for key in ("operation", "argument", "model_id", "item_id")
            if (value := getattr(self, key)) is not None
        }


class PrimerError(Exception):
    """Base exception for all Primer errors."""

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

    def log_extra(self) -> dict:
        """Structured fields for the log record emitted when this error is handled."""
        return {
            "error_code": self.code,
            "severity": self.severity.value,
            **self.context.identifiers(),
        }

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": self.context.identifiers(),
            }
        }


# ─── Input Errors (400-level) ───────────────────────────────────

class InvalidArgumentError(PrimerError, TypeError):
    """An argument failed its type or shape constraint."""
    def __init__(
        self,
        message: str,
        argument: str,
        operation: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.argument = argument
        ctx.operation = ctx.operation or operation
        super().__init__(
            message, "INVALID_ARGUMENT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.argument = argument


class NonFiniteResultError(PrimerError):
    """An operation overflowed to an infinite or NaN float result."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = ctx.operation or operation
        super().__init__(
            f"{operation} produced a result outside the finite float range",
            "NON_FINITE_RESULT", ErrorCategory.ARITHMETIC,
            ErrorSeverity.ERROR, ctx, 400,
        )


class DivisionByZeroError(PrimerError, ZeroDivisionError):
    """divide() called with an exact-zero divisor."""
    def __init__(self, operation: str = "divide", context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = ctx.operation or operation
        ctx.argument = "b"
        super().__init__(
            "cannot divide by zero",
            "DIVISION_BY_ZERO", ErrorCategory.ARITHMETIC,
            ErrorSeverity.ERROR, ctx, 400,
        )


class ResourceNotFoundError(PrimerError):
    """Requested resource does not exist."""
    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        model_id: str | None = None,
        item_id: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.model_id = ctx.model_id or model_id
        ctx.item_id = ctx.item_id or item_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id
