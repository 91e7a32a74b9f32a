"""Error Hierarchy — typed, categorized exceptions for TinMarin failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the {"error": message} body shared by every fault response
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with TinMarinError base: FastAPI global handler catches all
    - Exceptions are raised by the storage client only; persistence operations turn
      write faults into Result failures before they reach request handlers
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


class TinMarinError(Exception):
    """Base exception for all TinMarin errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {"error": self.message, "code": self.code}


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(TinMarinError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 503,
        )
        self.operation = operation


class UniqueViolationError(DatabaseError):
    """A write collided with a storage-level uniqueness constraint."""
    def __init__(self, message: str, operation: str = "commit"):
        super().__init__(message, operation)
        self.code = "UNIQUE_VIOLATION"
        self.category = ErrorCategory.CONFLICT
        self.severity = ErrorSeverity.WARNING
        self.http_status = 403
