"""Resolver Set: explicit field routing.

Tests cover:
    - All 10 API fields are registered
    - Fields route to the expected handler methods
    - Unknown fields raise KeyError
"""

import pytest

from expense_api.infrastructure.message_store import MessageStore
from expense_api.services.resolver_set import ResolverSet


@pytest.fixture
def resolvers(gateway):
    return ResolverSet(gateway, MessageStore())


def test_every_api_field_registered(resolvers):
    assert set(resolvers.operations) == {
        "messages", "users", "expenses", "expensesByUser", "totalExpense",
        "addMessage", "addUser", "addExpense", "deleteExpense", "updateExpense",
    }


def test_fields_route_to_handlers(resolvers):
    assert resolvers.resolver_for("addExpense") == resolvers.expense_mutations.create_expense
    assert resolvers.resolver_for("expensesByUser") == resolvers.expense_queries.list_expenses_by_user
    assert resolvers.resolver_for("users") == resolvers.users.list_users
    assert resolvers.resolver_for("addMessage") == resolvers.messages.add_message


def test_unknown_field_raises(resolvers):
    with pytest.raises(KeyError):
        resolvers.resolver_for("dropDatabase")


async def test_message_store_shared_across_resolver_sets(gateway):
    store = MessageStore()
    ResolverSet(gateway, store).resolver_for("addMessage")("hi")
    listed = ResolverSet(gateway, store).resolver_for("messages")()
    assert [m.text for m in listed] == ["hi"]
