"""Service test fixtures: handlers wired to a fresh in-memory database.

Invariants:
    - Every test gets its own database (root conftest test_engine)
    - Handlers share one SqlStoreGateway, as they do within one request
"""

import pytest

from expense_api.core.domain_types import ExpenseInput
from expense_api.services.handle_expense_mutations import ExpenseMutationHandlers
from expense_api.services.handle_expense_queries import ExpenseQueryHandlers
from expense_api.services.handle_users import UserHandlers


@pytest.fixture
def user_handlers(gateway):
    return UserHandlers(gateway)


@pytest.fixture
def expense_queries(gateway):
    return ExpenseQueryHandlers(gateway)


@pytest.fixture
def expense_mutations(gateway):
    return ExpenseMutationHandlers(gateway)


@pytest.fixture
async def two_users(user_handlers):
    """Users U1 and U2."""
    u1 = await user_handlers.create_user("Asha")
    u2 = await user_handlers.create_user("Ben")
    return u1, u2


@pytest.fixture
def make_input():
    """Factory for creation payloads with sensible defaults."""
    def _make(
        user_id: str, amount: float = 100, description: str = "groceries",
        name: str = "Shopping",
    ) -> ExpenseInput:
        return ExpenseInput(
            name=name, amount=amount, description=description, user_id=user_id,
        )
    return _make
