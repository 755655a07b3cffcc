"""Error Hierarchy: typed, categorized exceptions for every expense tracker failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400/404) are raised before any write reaches the store
    - Store errors (409/503) come only from the gateway and are never retried
    - extensions feeds GraphQL errors[].extensions
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ExpenseTrackerError base: the GraphQL error hook and
      the session manager both key off it
    - extensions is a plain dict attribute: graphql-core copies it from the
      original error into errors[].extensions without a custom formatter
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    expense_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class ExpenseTrackerError(Exception):
    """Base exception for all expense tracker errors."""

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
        self.extensions = {
            "code": code,
            "category": category.value,
            "severity": severity.value,
        }

    @property
    def is_domain_error(self) -> bool:
        """True for caller mistakes (validation / not found), False for store failures."""
        return self.category in (
            ErrorCategory.VALIDATION, ErrorCategory.RESOURCE_NOT_FOUND,
        )


# ─── Domain Errors (400/404) ────────────────────────────────────

class UserNotFoundError(ExpenseTrackerError):
    """Expense references a user that does not exist."""
    def __init__(self, user_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_id = user_id
        super().__init__(
            "User does not exist",
            "USER_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.user_id = user_id


class InvalidAmountError(ExpenseTrackerError):
    """Amount is zero, negative or not a finite number."""
    def __init__(self, amount: float, context: ErrorContext | None = None):
        super().__init__(
            "Amount must be greater than 0",
            "INVALID_AMOUNT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.amount = amount


class InvalidDescriptionError(ExpenseTrackerError):
    """Description is shorter than the minimum once trimmed."""
    def __init__(self, min_length: int, context: ErrorContext | None = None):
        super().__init__(
            f"Description must be at least {min_length} characters long",
            "INVALID_DESCRIPTION", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.min_length = min_length


class ExpenseNotFoundError(ExpenseTrackerError):
    """Update targeted an expense id that does not exist."""
    def __init__(self, expense_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.expense_id = expense_id
        super().__init__(
            "Expense not found",
            "EXPENSE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.expense_id = expense_id


# ─── Store Errors (409/503) ─────────────────────────────────────

class StoreUnavailableError(ExpenseTrackerError):
    """Store connectivity, driver or query failure."""
    def __init__(
        self,
        message: str,
        operation: str,
        context: ErrorContext | None = None,
        code: str = "STORE_UNAVAILABLE",
        http_status: int = 503,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Database {operation} failed: {message}",
            code, ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, http_status,
        )
        self.operation = operation


class StoreIntegrityError(StoreUnavailableError):
    """Store rejected a write because a constraint was violated."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        super().__init__(
            "Integrity constraint violated", operation, context,
            code="STORE_CONSTRAINT_VIOLATION", http_status=409,
        )
