"""User ORM: persists the people expenses are attributed to.

Invariants:
    - id is a server-generated opaque string (UUID4 text), immutable
    - Users are never updated or deleted by the API
    - created_at drives newest-first listings
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from expense_api.db.base import Base


class UserRecord(Base):
    """Row in the `users` table."""
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
