"""Error Hierarchy — typed, categorized exceptions for every Helium failure mode.

Invariants:
    - Every API error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() always carries "message" and "status"; validation failures
      carry "message" as a list of violation strings
    - Store errors (DocumentStoreError family) never reach the client directly;
      services translate them into NotFound / UpstreamFault
    - No stack traces in user-facing payloads

Design Decisions:
    - Single hierarchy with HeliumError base: FastAPI global handler catches all
    - Store errors kept separate from HeliumError: they describe the store,
      not the HTTP contract
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    UPSTREAM = "upstream"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


class HeliumError(Exception):
    """Base exception for all errors that map onto the HTTP contract."""

    def __init__(
        self,
        message: str | list[str],
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(
            message if isinstance(message, str) else "; ".join(message),
        )
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the JSON error body."""
        return {
            "message": self.message,
            "status": self.http_status,
            "code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class ValidationFailedError(HeliumError):
    """Request body violated one or more field rules."""
    def __init__(self, messages: list[str]):
        super().__init__(
            list(messages), "VALIDATION_FAILED", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.messages = list(messages)


class ResourceNotFoundError(HeliumError):
    """Requested document does not exist."""
    def __init__(self, message: str = "Not Found"):
        super().__init__(
            message, "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )


class ResourceConflictError(HeliumError):
    """The target id already belongs to a document of another type."""
    def __init__(self, message: str):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class UpstreamFaultError(HeliumError):
    """Document store call failed for a reason other than not-found."""
    def __init__(self, message: str):
        super().__init__(
            message, "UPSTREAM_FAULT", ErrorCategory.UPSTREAM,
            ErrorSeverity.CRITICAL, 500,
        )


class StartupConfigMissingError(HeliumError):
    """A mandatory setting could not be resolved before serving."""
    def __init__(self, setting: str, detail: str | None = None):
        super().__init__(
            detail or f"Failed to resolve mandatory setting {setting}",
            "STARTUP_CONFIG_MISSING", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, 500,
        )
        self.setting = setting


# ─── Store Errors ───────────────────────────────────────────────

class DocumentStoreError(Exception):
    """Opaque document store failure."""

    def __init__(self, message: str, operation: str, status_code: int | None = None):
        super().__init__(f"Document store {operation} failed: {message}")
        self.detail = message
        self.operation = operation
        self.status_code = status_code


class DocumentNotFoundError(DocumentStoreError):
    """The store reported the target document (or container) as absent."""

    def __init__(self, message: str, operation: str):
        super().__init__(message, operation, status_code=404)
