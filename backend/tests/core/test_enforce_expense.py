"""Expense Rule Enforcement: tests for pure creation/update checks.

Tests cover:
    - check_user_exists / check_amount / check_description individually
    - validate_new_expense reports the user first, then amount, then description
    - validate_expense_update skips the user rule
"""

import math

import pytest

from expense_api.core.enforce_expense import (
    MIN_DESCRIPTION_LENGTH,
    check_amount,
    check_description,
    check_user_exists,
    validate_expense_update,
    validate_new_expense,
)
from expense_api.core.errors import (
    InvalidAmountError,
    InvalidDescriptionError,
    UserNotFoundError,
)


# ─── check_user_exists ───────────────────────────────────────────

def test_missing_user_returns_user_not_found():
    error = check_user_exists("missing", user_found=False)
    assert isinstance(error, UserNotFoundError)
    assert error.code == "USER_NOT_FOUND"
    assert error.user_id == "missing"


def test_existing_user_passes():
    assert check_user_exists("u1", user_found=True) is None


# ─── check_amount ────────────────────────────────────────────────

@pytest.mark.parametrize("amount", [0, 0.0, -0.01, -5, -1e9])
def test_non_positive_amount_rejected(amount):
    error = check_amount(amount)
    assert isinstance(error, InvalidAmountError)
    assert error.code == "INVALID_AMOUNT"


@pytest.mark.parametrize("amount", [math.nan, math.inf, -math.inf])
def test_non_finite_amount_rejected(amount):
    assert isinstance(check_amount(amount), InvalidAmountError)


@pytest.mark.parametrize("amount", [0.01, 1, 100, 42.5])
def test_positive_amount_passes(amount):
    assert check_amount(amount) is None


# ─── check_description ───────────────────────────────────────────

@pytest.mark.parametrize("description", ["", "x", "ab", "   ", "  ab  ", "\tab\n"])
def test_short_description_rejected(description):
    error = check_description(description)
    assert isinstance(error, InvalidDescriptionError)
    assert error.min_length == MIN_DESCRIPTION_LENGTH


@pytest.mark.parametrize("description", ["abc", "  abc  ", "groceries"])
def test_long_enough_description_passes(description):
    assert check_description(description) is None


def test_min_description_length_is_three():
    assert MIN_DESCRIPTION_LENGTH == 3


# ─── validate_new_expense ────────────────────────────────────────

def test_user_reported_before_amount_and_description():
    error = validate_new_expense("missing", False, -5, "x")
    assert isinstance(error, UserNotFoundError)


def test_amount_reported_before_description():
    error = validate_new_expense("u1", True, -5, "x")
    assert isinstance(error, InvalidAmountError)


def test_description_reported_when_only_rule_broken():
    error = validate_new_expense("u1", True, 10, "x")
    assert isinstance(error, InvalidDescriptionError)


def test_valid_new_expense_returns_none():
    assert validate_new_expense("u1", True, 10, "lunch") is None


# ─── validate_expense_update ─────────────────────────────────────

def test_update_checks_amount_first():
    assert isinstance(validate_expense_update(0, "x"), InvalidAmountError)


def test_update_checks_description():
    assert isinstance(validate_expense_update(10, " a "), InvalidDescriptionError)


def test_valid_update_returns_none():
    assert validate_expense_update(200, "new desc") is None
