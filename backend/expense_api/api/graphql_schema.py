"""GraphQL Schema: wire types and field resolvers for the expense tracker.

Invariants:
    - Field and argument names are camelCase on the wire (expensesByUser, userId)
    - Every field delegates to exactly one ResolverSet operation
    - Domain errors reach the client as errors[].extensions.code with HTTP 200
    - Store errors additionally set the HTTP status (503, or 409 for constraint violations)

Design Decisions:
    - Wire types are separate from core entities: the core never imports strawberry
    - process_errors logs domain errors at WARNING, everything else at ERROR with traceback
"""

import logging
from typing import Optional

import strawberry
from strawberry.types import Info

from expense_api.core.domain_types import Expense, ExpenseInput, Message, User, UserId
from expense_api.core.errors import ExpenseTrackerError, StoreUnavailableError
from expense_api.services.resolver_set import ResolverSet

logger = logging.getLogger(__name__)


# ─── Wire Types ──────────────────────────────────────────────────

@strawberry.type(name="Expense")
class ExpenseType:
    id: strawberry.ID
    name: str
    amount: float
    description: str
    user_id: strawberry.ID

    @classmethod
    def from_entity(cls, expense: Expense) -> "ExpenseType":
        return cls(
            id=strawberry.ID(expense.id),
            name=expense.name,
            amount=expense.amount,
            description=expense.description,
            user_id=strawberry.ID(expense.user_id),
        )


@strawberry.type(name="User")
class UserType:
    id: strawberry.ID
    name: Optional[str]

    @classmethod
    def from_entity(cls, user: User) -> "UserType":
        return cls(id=strawberry.ID(user.id), name=user.name)


@strawberry.type(name="Message")
class MessageType:
    id: strawberry.ID
    text: str

    @classmethod
    def from_entity(cls, message: Message) -> "MessageType":
        return cls(id=strawberry.ID(message.id), text=message.text)


@strawberry.input
class AddExpenseInput:
    name: str
    amount: float
    description: str
    user_id: strawberry.ID

    def to_entity(self) -> ExpenseInput:
        return ExpenseInput(
            name=self.name,
            amount=self.amount,
            description=self.description,
            user_id=UserId(str(self.user_id)),
        )


def _operation(info: Info, field_name: str):
    resolvers: ResolverSet = info.context["resolvers"]
    return resolvers.resolver_for(field_name)


# ─── Root Types ──────────────────────────────────────────────────

@strawberry.type
class Query:
    @strawberry.field
    def messages(self, info: Info) -> list[MessageType]:
        return [
            MessageType.from_entity(m) for m in _operation(info, "messages")()
        ]

    @strawberry.field
    async def users(self, info: Info) -> list[UserType]:
        users = await _operation(info, "users")()
        return [UserType.from_entity(u) for u in users]

    @strawberry.field
    async def expenses(self, info: Info) -> list[ExpenseType]:
        expenses = await _operation(info, "expenses")()
        return [ExpenseType.from_entity(e) for e in expenses]

    @strawberry.field
    async def expenses_by_user(
        self, info: Info, user_id: strawberry.ID,
    ) -> list[ExpenseType]:
        expenses = await _operation(info, "expensesByUser")(str(user_id))
        return [ExpenseType.from_entity(e) for e in expenses]

    @strawberry.field
    async def total_expense(self, info: Info) -> float:
        return await _operation(info, "totalExpense")()


@strawberry.type
class Mutation:
    @strawberry.mutation
    def add_message(self, info: Info, text: str) -> MessageType:
        return MessageType.from_entity(_operation(info, "addMessage")(text))

    @strawberry.mutation
    async def add_user(self, info: Info, name: str) -> UserType:
        user = await _operation(info, "addUser")(name)
        return UserType.from_entity(user)

    @strawberry.mutation
    async def add_expense(
        self, info: Info, input: AddExpenseInput,
    ) -> ExpenseType:
        expense = await _operation(info, "addExpense")(input.to_entity())
        return ExpenseType.from_entity(expense)

    @strawberry.mutation
    async def delete_expense(self, info: Info, id: strawberry.ID) -> bool:
        return await _operation(info, "deleteExpense")(str(id))

    @strawberry.mutation
    async def update_expense(
        self, info: Info, id: strawberry.ID, amount: float, description: str,
    ) -> ExpenseType:
        expense = await _operation(info, "updateExpense")(
            str(id), amount, description,
        )
        return ExpenseType.from_entity(expense)


# ─── Schema ──────────────────────────────────────────────────────

class ExpenseSchema(strawberry.Schema):
    """Schema with error logging keyed off the ExpenseTrackerError hierarchy."""

    def process_errors(self, errors, execution_context=None) -> None:
        for error in errors:
            original = error.original_error
            if isinstance(original, ExpenseTrackerError) and original.is_domain_error:
                logger.warning(
                    f"GraphQL domain error: {original.message}",
                    extra={"error_code": original.code},
                )
                continue
            if isinstance(original, StoreUnavailableError):
                logger.error(
                    f"GraphQL store error: {original.message}",
                    extra={"error_code": original.code},
                )
                _set_response_status(execution_context, original.http_status)
                continue
            if original is None:
                logger.warning(f"GraphQL request error: {error.message}")
                continue
            logger.error(
                f"GraphQL resolver failed: {error.message}", exc_info=original,
            )


def _set_response_status(execution_context, status_code: int) -> None:
    """Surface a store failure as a transport-level failure."""
    context = getattr(execution_context, "context", None)
    if isinstance(context, dict) and context.get("response") is not None:
        context["response"].status_code = status_code


schema = ExpenseSchema(query=Query, mutation=Mutation)
