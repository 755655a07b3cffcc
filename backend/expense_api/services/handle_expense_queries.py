"""Expense Query Handlers: expenses, expensesByUser, totalExpense.

Invariants:
    - All three are read-only
    - list_expenses keeps the store's default order; list_expenses_by_user is newest-first,
      rows created at the same instant ordered by id descending
    - list_expenses_by_user never checks user existence: unknown user -> []
    - total_expense is computed by the store (COALESCE(SUM(amount), 0)), never by
      fetching rows

Design Decisions:
    - The two listings deliberately keep different ordering contracts; unifying them
      is a product decision, not a resolver one
"""

from sqlalchemy import func, select

from expense_api.core.domain_types import Expense
from expense_api.core.entity_mapper import expense_from_row
from expense_api.core.repository_protocols import StoreGateway
from expense_api.models.expense import ExpenseRecord

expenses_table = ExpenseRecord.__table__

EXPENSE_COLUMNS = (
    expenses_table.c.id,
    expenses_table.c.name,
    expenses_table.c.amount,
    expenses_table.c.description,
    expenses_table.c.user_id,
)


class ExpenseQueryHandlers:
    """Read-only expense resolvers."""

    def __init__(self, gateway: StoreGateway):
        self.gateway = gateway

    async def list_expenses(self) -> list[Expense]:
        rows = await self.gateway.fetch_all(select(*EXPENSE_COLUMNS))
        return [expense_from_row(r) for r in rows]

    async def list_expenses_by_user(self, user_id: str) -> list[Expense]:
        """Expenses for one user, newest first."""
        rows = await self.gateway.fetch_all(
            select(*EXPENSE_COLUMNS)
            .where(expenses_table.c.user_id == user_id)
            .order_by(
                expenses_table.c.created_at.desc(), expenses_table.c.id.desc(),
            ),
        )
        return [expense_from_row(r) for r in rows]

    async def total_expense(self) -> float:
        """Sum of every stored amount, 0 when there are none."""
        total = await self.gateway.fetch_scalar(
            select(func.coalesce(func.sum(expenses_table.c.amount), 0)),
        )
        return float(total or 0)
