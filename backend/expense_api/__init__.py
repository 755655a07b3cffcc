"""Expense Tracker API Package: users, expenses, totals and transient messages over GraphQL.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
