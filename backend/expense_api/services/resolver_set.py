"""Resolver Set: explicit routing from API field name to resolver.

Invariants:
    - Every field->resolver mapping is visible in `operations`: no getattr magic on names
    - One ResolverSet per request: handlers share that request's gateway
    - The message store is process-wide and shared by every ResolverSet
    - No resolver calls another resolver

Design Decisions:
    - Handlers split by concern (users, expense reads, expense writes): max ~4 methods per class
"""

import logging

from expense_api.core.repository_protocols import StoreGateway
from expense_api.infrastructure.message_store import MessageStore
from expense_api.services.handle_expense_mutations import ExpenseMutationHandlers
from expense_api.services.handle_expense_queries import ExpenseQueryHandlers
from expense_api.services.handle_users import UserHandlers

logger = logging.getLogger(__name__)


class ResolverSet:
    """Routes API field name -> resolver. Explicit registration, no auto-discovery."""

    def __init__(self, gateway: StoreGateway, messages: MessageStore):
        self.users = UserHandlers(gateway)
        self.expense_queries = ExpenseQueryHandlers(gateway)
        self.expense_mutations = ExpenseMutationHandlers(gateway)
        self.messages = messages

        # Adding an API field requires editing this dict
        self.operations = {
            # Queries (no side effects)
            "messages": self.messages.list_messages,
            "users": self.users.list_users,
            "expenses": self.expense_queries.list_expenses,
            "expensesByUser": self.expense_queries.list_expenses_by_user,
            "totalExpense": self.expense_queries.total_expense,

            # Mutations
            "addMessage": self.messages.add_message,
            "addUser": self.users.create_user,
            "addExpense": self.expense_mutations.create_expense,
            "deleteExpense": self.expense_mutations.delete_expense,
            "updateExpense": self.expense_mutations.update_expense,
        }

    def resolver_for(self, field_name: str):
        """Look up the resolver bound to an API field; KeyError for unknown fields."""
        try:
            return self.operations[field_name]
        except KeyError:
            logger.error(f"Unknown API field: {field_name}")
            raise
