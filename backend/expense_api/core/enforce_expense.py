"""Expense Rule Enforcement: pure checks run before any expense write.

Invariants:
    - Every check is PURE: returns an error instance or None, never raises, never does IO
    - Creation order is fixed: user existence -> amount -> description
    - Update order is fixed: amount -> description (user_id is immutable)
    - MIN_DESCRIPTION_LENGTH (3) is the single source of truth for the cutoff

Design Decisions:
    - User existence arrives as a bool: the shell performs the lookup, the core
      only decides what it means
    - Chains use `or`: the first non-None error wins, matching the reporting order
"""

import math

from expense_api.core.errors import (
    ExpenseTrackerError,
    InvalidAmountError,
    InvalidDescriptionError,
    UserNotFoundError,
)


MIN_DESCRIPTION_LENGTH: int = 3


def check_user_exists(
    user_id: str, user_found: bool,
) -> ExpenseTrackerError | None:
    """Rule 1: the referenced user must exist."""
    if not user_found:
        return UserNotFoundError(user_id)
    return None


def check_amount(amount: float) -> ExpenseTrackerError | None:
    """Rule 2: amount must be a finite number strictly greater than zero."""
    if not math.isfinite(amount) or amount <= 0:
        return InvalidAmountError(amount)
    return None


def check_description(description: str) -> ExpenseTrackerError | None:
    """Rule 3: trimmed description must have at least MIN_DESCRIPTION_LENGTH chars."""
    if len(description.strip()) < MIN_DESCRIPTION_LENGTH:
        return InvalidDescriptionError(MIN_DESCRIPTION_LENGTH)
    return None


def validate_new_expense(
    user_id: str, user_found: bool, amount: float, description: str,
) -> ExpenseTrackerError | None:
    """Chain all creation checks. Returns first error or None."""
    return (
        check_user_exists(user_id, user_found)
        or check_amount(amount)
        or check_description(description)
    )


def validate_expense_update(
    amount: float, description: str,
) -> ExpenseTrackerError | None:
    """Chain the checks that apply to mutable fields. Returns first error or None."""
    return check_amount(amount) or check_description(description)
