"""Expense Mutation Handlers: addExpense, updateExpense, deleteExpense.

Invariants:
    - create_expense: one existence read, then rules in order user -> amount -> description,
      then one insert; the first violation is raised and nothing is written
    - update_expense: amount -> description re-validated; only amount and description change;
      a missing id raises ExpenseNotFoundError and writes nothing
    - delete_expense: True when a row was removed, False (not an error) otherwise

Design Decisions:
    - Existence check and insert are not one transaction: a user deleted in between is
      caught by the expenses.user_id foreign key where the store enforces it, and the
      resulting StoreIntegrityError is reported as UserNotFoundError
"""

import logging

from sqlalchemy import delete, insert, select, update

from expense_api.core.domain_types import Expense, ExpenseInput, new_identifier
from expense_api.core.enforce_expense import (
    validate_expense_update,
    validate_new_expense,
)
from expense_api.core.entity_mapper import (
    expense_changes_to_row,
    expense_from_row,
    expense_input_to_row,
)
from expense_api.core.errors import (
    ExpenseNotFoundError,
    StoreIntegrityError,
    UserNotFoundError,
)
from expense_api.core.repository_protocols import StoreGateway
from expense_api.models.user import UserRecord
from expense_api.services.handle_expense_queries import (
    EXPENSE_COLUMNS,
    expenses_table,
)

logger = logging.getLogger(__name__)

users_table = UserRecord.__table__


class ExpenseMutationHandlers:
    """Expense resolvers that write to the store."""

    def __init__(self, gateway: StoreGateway):
        self.gateway = gateway

    async def create_expense(self, data: ExpenseInput) -> Expense:
        """Validate and insert a new expense."""
        user_row = await self.gateway.fetch_one(
            select(users_table.c.id).where(users_table.c.id == data.user_id),
        )
        error = validate_new_expense(
            data.user_id, user_row is not None, data.amount, data.description,
        )
        if error:
            logger.warning(
                f"Expense rejected: {error.message}",
                extra={"error_code": error.code, "user_id": data.user_id},
            )
            raise error

        expense_id = new_identifier()
        try:
            row = await self.gateway.write_returning(
                insert(expenses_table)
                .values(**expense_input_to_row(expense_id, data))
                .returning(*EXPENSE_COLUMNS),
            )
        except StoreIntegrityError as e:
            logger.warning(
                "User vanished before expense insert",
                extra={"user_id": data.user_id},
            )
            raise UserNotFoundError(data.user_id) from e

        logger.info(
            "Expense created",
            extra={"expense_id": expense_id, "user_id": data.user_id},
        )
        return expense_from_row(row)

    async def update_expense(
        self, expense_id: str, amount: float, description: str,
    ) -> Expense:
        """Replace amount and description of an existing expense."""
        error = validate_expense_update(amount, description)
        if error:
            logger.warning(
                f"Expense update rejected: {error.message}",
                extra={"error_code": error.code, "expense_id": expense_id},
            )
            raise error

        row = await self.gateway.write_returning(
            update(expenses_table)
            .where(expenses_table.c.id == expense_id)
            .values(**expense_changes_to_row(amount, description))
            .returning(*EXPENSE_COLUMNS),
        )
        if row is None:
            raise ExpenseNotFoundError(expense_id)

        logger.info("Expense updated", extra={"expense_id": expense_id})
        return expense_from_row(row)

    async def delete_expense(self, expense_id: str) -> bool:
        affected = await self.gateway.execute(
            delete(expenses_table).where(expenses_table.c.id == expense_id),
        )
        if affected:
            logger.info("Expense deleted", extra={"expense_id": expense_id})
        return affected > 0
