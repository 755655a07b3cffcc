"""Domain Types: identity types, API entities and identifier generation.

Invariants:
    - UserId, ExpenseId, MessageId wrap opaque strings, never parsed
    - Entities are frozen: a changed expense is a new Expense value
    - new_identifier() is collision-resistant and independent of wall-clock time
    - Attribute names are snake_case; the GraphQL layer exposes them camelCase

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - UUID4 text ids: 122 random bits, safe under concurrent creation
"""

import uuid
from dataclasses import dataclass
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
ExpenseId = NewType("ExpenseId", str)
MessageId = NewType("MessageId", str)


def new_identifier() -> str:
    """Fresh opaque identifier for any entity collection."""
    return str(uuid.uuid4())


# ─── Entities ────────────────────────────────────────────────────

@dataclass(frozen=True)
class User:
    id: UserId
    name: str


@dataclass(frozen=True)
class Expense:
    id: ExpenseId
    name: str
    amount: float
    description: str
    user_id: UserId


@dataclass(frozen=True)
class Message:
    id: MessageId
    text: str


@dataclass(frozen=True)
class ExpenseInput:
    """Creation payload for an expense, already deserialized by the transport."""
    name: str
    amount: float
    description: str
    user_id: UserId
