"""Expense ORM: persists a single spend attributed to a user.

Invariants:
    - id is a server-generated opaque string (UUID4 text), immutable
    - user_id references users.id; name and user_id never change after insert
    - amount > 0 and trimmed description >= 3 chars (enforced before insert)

Design Decisions:
    - Unconstrained NUMERIC for amount: the float sent by the client is stored
      without rounding, and SUM() stays exact on stores with a native decimal
    - Foreign key on user_id: where the store enforces it, the insert itself
      rejects a user deleted after the existence check
    - Composite (user_id, created_at) index serves the per-user newest-first listing
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Numeric, DateTime, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column

from expense_api.db.base import Base


class ExpenseRecord(Base):
    """Row in the `expenses` table."""
    __tablename__ = "expenses"
    __table_args__ = (
        Index("ix_expenses_user_id_created_at", "user_id", "created_at"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    amount: Mapped[float] = mapped_column(Numeric(asdecimal=False), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id"), nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
