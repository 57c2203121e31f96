"""Error Hierarchy — typed, categorized exceptions for all backend failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with TLAError base: one global handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
    - CORS preflight rejection is NOT an error here: it is a bare 400 decided
      by the middleware
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
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
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    FORBIDDEN = "forbidden"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    uid: str | None = None
    cid: str | None = None
    pid: str | None = None
    debug_info: dict[str, Any] | None = None


class TLAError(Exception):
    """Base exception for all backend errors."""

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
                "context": {
                    "uid": self.context.uid,
                    "cid": self.context.cid,
                    "pid": self.context.pid,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidFieldError(TLAError):
    """A request field is missing or out of range."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_FIELD", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class UnsupportedLanguageError(TLAError):
    """Program language is not one of the supported languages."""
    def __init__(self, language: str, context: ErrorContext | None = None):
        super().__init__(
            f"Unsupported language '{language}'",
            "UNSUPPORTED_LANGUAGE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.language = language


class ResourceNotFoundError(TLAError):
    """Requested document does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class NotAMemberError(TLAError):
    """User is neither a member nor an instructor of the class."""
    def __init__(self, uid: str, cid: str):
        super().__init__(
            f"User '{uid}' does not belong to class '{cid}'",
            "NOT_A_MEMBER", ErrorCategory.FORBIDDEN,
            ErrorSeverity.WARNING, ErrorContext(uid=uid, cid=cid), 403,
        )


class NotPermittedError(TLAError):
    """User may not perform the operation on the document."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "NOT_PERMITTED", ErrorCategory.FORBIDDEN,
            ErrorSeverity.WARNING, context, 403,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(TLAError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
