"""ORM Models: SQLAlchemy declarative models for persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Messages are not persisted and have no model here

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all runs
"""

from expense_api.models.user import UserRecord  # noqa: F401
from expense_api.models.expense import ExpenseRecord  # noqa: F401
