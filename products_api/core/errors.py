"""Error Hierarchy: typed, categorized exceptions for every API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error knows its HTTP status and its own response envelope
    - Client errors (400/404) are recoverable; storage errors (500) are critical
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ProductApiError base: one global handler catches all
    - Envelopes follow the public contract, not a generic shape:
      validation → {"errors": [...]}, everything else → {"error": "<message>"}
"""

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from products_api.core.validation import Violation


PRODUCT_NOT_FOUND_MESSAGE = "Producto no encontrado"
DATABASE_ERROR_MESSAGE = "Database error"


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


class ProductApiError(Exception):
    """Base exception for all Products API errors."""

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
        """Convert to the public REST error envelope."""
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class InputValidationError(ProductApiError):
    """One or more request fields failed validation."""
    def __init__(self, violations: list["Violation"]):
        super().__init__(
            f"{len(violations)} validation error(s)",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.violations = violations

    def to_response(self) -> dict:
        return {"errors": [v.to_dict() for v in self.violations]}


class ProductNotFoundError(ProductApiError):
    """Syntactically valid id with no matching row."""
    def __init__(self, product_id: int):
        super().__init__(
            PRODUCT_NOT_FOUND_MESSAGE,
            "PRODUCT_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.product_id = product_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ProductApiError):
    """Persistence operation failed. Transient and permanent failures look the same."""
    def __init__(self, operation: str, detail: str | None = None):
        super().__init__(
            DATABASE_ERROR_MESSAGE,
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
        self.detail = detail
