"""Error Hierarchy — typed, categorized exceptions for every userbase failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors are 400-level; the core never swallows or retries them
    - EntityValidationError always carries the validator's field-error map
    - to_response() produces the REST envelope used by the global handlers

Design Decisions:
    - Single hierarchy with UserbaseError base: one FastAPI handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: observability without coupling to the logging setup
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from userbase.core.domain_types import FieldsErrors


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BAD_REQUEST = "bad_request"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity_id: str | None = None
    repository: str | None = None
    debug_info: dict[str, Any] | None = None


class UserbaseError(Exception):
    """Base exception for all userbase errors."""

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
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class NotFoundError(UserbaseError):
    """Entity absent for an id- or email-based lookup."""
    def __init__(self, message: str = "Entity not found", context: ErrorContext | None = None):
        super().__init__(
            message, "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )


class ConflictError(UserbaseError):
    """Domain-level uniqueness violation (e.g. duplicate email)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )


class ValidationError(UserbaseError):
    """Generic rejected payload."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 422,
        )


class EntityValidationError(UserbaseError):
    """Entity construction or update rejected by its validator."""
    def __init__(self, errors: FieldsErrors | None, context: ErrorContext | None = None):
        super().__init__(
            "Entity Validation Error", "ENTITY_VALIDATION_ERROR",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, context, 422,
        )
        self.errors: FieldsErrors = dict(errors or {})

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = self.errors
        return response


class BadRequestError(UserbaseError):
    """Use-case input incomplete or malformed."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "BAD_REQUEST", ErrorCategory.BAD_REQUEST,
            ErrorSeverity.ERROR, context, 400,
        )


class RequestDataError(UserbaseError):
    """HTTP request body, query or path rejected before reaching a use case."""
    def __init__(self, errors: FieldsErrors, context: ErrorContext | None = None):
        super().__init__(
            "Invalid request data", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.errors: FieldsErrors = dict(errors)

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = self.errors
        return response


# ─── Internal Errors (500-level) ────────────────────────────────

class InternalError(UserbaseError):
    """Unexpected failure; the message never carries internal details."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "An unexpected error occurred", "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
