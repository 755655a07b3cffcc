"""Boundary Protocols: contracts between the resolvers and the store.

Invariants:
    - Resolvers depend on StoreGateway, never on AsyncSession directly
    - Statements are SQLAlchemy Core constructs; user values are bound parameters
    - Write methods commit before returning; read methods never commit
    - Store failures surface as StoreUnavailableError / StoreIntegrityError

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
"""

from collections.abc import Mapping
from typing import Any, Protocol

from sqlalchemy import Executable


class StoreGateway(Protocol):
    """Contract for parameterized query/execute against the relational store."""

    async def fetch_all(self, statement: Executable) -> list[Mapping[str, Any]]: ...

    async def fetch_one(self, statement: Executable) -> Mapping[str, Any] | None: ...

    async def fetch_scalar(self, statement: Executable) -> Any: ...

    async def write_returning(
        self, statement: Executable,
    ) -> Mapping[str, Any] | None: ...

    async def execute(self, statement: Executable) -> int: ...
