"""Domain Types: identifiers and entity value semantics.

Tests:
    - new_identifier() yields unique UUID text
    - Entities compare by value and are immutable
"""

import dataclasses
import uuid

import pytest

from expense_api.core.domain_types import (
    Expense, ExpenseId, Message, MessageId, User, UserId, new_identifier,
)


def test_new_identifier_is_uuid_text():
    ident = new_identifier()
    assert isinstance(ident, str)
    assert str(uuid.UUID(ident)) == ident


def test_new_identifier_never_repeats():
    ids = {new_identifier() for _ in range(10_000)}
    assert len(ids) == 10_000


def test_identity_types_wrap_str():
    assert UserId("u1") == "u1"
    assert ExpenseId("e1") == "e1"
    assert MessageId("m1") == "m1"


def test_entities_compare_by_value():
    a = Expense(id="e1", name="n", amount=1.0, description="abc", user_id="u1")
    b = Expense(id="e1", name="n", amount=1.0, description="abc", user_id="u1")
    assert a == b
    assert User(id="u1", name="x") == User(id="u1", name="x")


def test_entities_are_frozen():
    message = Message(id="m1", text="hi")
    with pytest.raises(dataclasses.FrozenInstanceError):
        message.text = "changed"
