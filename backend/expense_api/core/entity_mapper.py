"""Entity Mapper: store rows <-> API entities for users and expenses.

Invariants:
    - Field renaming only (user_id column <-> Expense.user_id / wire userId) plus
      numeric normalization (store Decimal <-> API float)
    - No validation, no IO: every function is total over well-formed rows
    - expense_from_row(expense_to_row(x)) == x for every Expense x
    - Extra row columns (created_at) are ignored on the way in

Design Decisions:
    - Rows are plain Mappings (RowMapping or dict): the mapper never touches ORM objects
    - Decimal(str(amount)) on the way out: float repr round-trips exactly, and the
      amount column is unconstrained NUMERIC so nothing is rounded in between
"""

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from expense_api.core.domain_types import (
    Expense, ExpenseId, ExpenseInput, User, UserId,
)


def _to_api_amount(value: Any) -> float:
    """Coerce a store numeric (Decimal, int, float, numeric text) to float."""
    return float(value)


def _to_store_amount(value: float) -> Decimal:
    return Decimal(str(value))


# ─── Users ───────────────────────────────────────────────────────

def user_from_row(row: Mapping[str, Any]) -> User:
    return User(id=UserId(str(row["id"])), name=row["name"])


def user_to_row(user: User) -> dict:
    return {"id": user.id, "name": user.name}


# ─── Expenses ────────────────────────────────────────────────────

def expense_from_row(row: Mapping[str, Any]) -> Expense:
    """Map an `expenses` row to the API entity."""
    return Expense(
        id=ExpenseId(str(row["id"])),
        name=row["name"],
        amount=_to_api_amount(row["amount"]),
        description=row["description"],
        user_id=UserId(str(row["user_id"])),
    )


def expense_to_row(expense: Expense) -> dict:
    """Map the API entity back to `expenses` column values."""
    return {
        "id": expense.id,
        "name": expense.name,
        "amount": _to_store_amount(expense.amount),
        "description": expense.description,
        "user_id": expense.user_id,
    }


def expense_changes_to_row(amount: float, description: str) -> dict:
    """Column values for the mutable subset of an expense."""
    return {"amount": _to_store_amount(amount), "description": description}


def expense_input_to_row(expense_id: str, data: ExpenseInput) -> dict:
    """Build the insert row for a validated creation payload."""
    return expense_to_row(
        Expense(
            id=ExpenseId(expense_id),
            name=data.name,
            amount=data.amount,
            description=data.description,
            user_id=data.user_id,
        ),
    )
