"""User Handlers: addUser and users.

Invariants:
    - create_user performs exactly one insert; no validation beyond the store accepting it
    - list_users is read-only, newest-first by created_at, then id descending
"""

import logging

from sqlalchemy import insert, select

from expense_api.core.domain_types import User, UserId, new_identifier
from expense_api.core.entity_mapper import user_from_row, user_to_row
from expense_api.core.repository_protocols import StoreGateway
from expense_api.models.user import UserRecord

logger = logging.getLogger(__name__)

users_table = UserRecord.__table__


class UserHandlers:
    """User resolvers."""

    def __init__(self, gateway: StoreGateway):
        self.gateway = gateway

    async def create_user(self, name: str) -> User:
        """Persist a new user with a fresh id."""
        user = User(id=UserId(new_identifier()), name=name)
        row = await self.gateway.write_returning(
            insert(users_table)
            .values(**user_to_row(user))
            .returning(users_table.c.id, users_table.c.name),
        )
        logger.info("User created", extra={"user_id": user.id})
        return user_from_row(row)

    async def list_users(self) -> list[User]:
        rows = await self.gateway.fetch_all(
            select(users_table.c.id, users_table.c.name)
            .order_by(users_table.c.created_at.desc(), users_table.c.id.desc()),
        )
        return [user_from_row(r) for r in rows]
