"""Store Gateway: parameterized query/execute over one pooled AsyncSession.

Invariants:
    - Only SQLAlchemy Core statements are executed: user values are bound, never interpolated
    - Reads return plain row mappings (snake_case keys); the mapper owns renaming
    - Writes commit before returning; any failure rolls the session back first
    - IntegrityError -> StoreIntegrityError, every other SQLAlchemyError -> StoreUnavailableError

Design Decisions:
    - Error mapping mirrors DatabaseSessionManager.session() so a failure raised
      inside a resolver reaches the caller as a store error, not a domain error
    - No retries: a store failure propagates on the first attempt
"""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import Executable

from expense_api.core.errors import StoreIntegrityError, StoreUnavailableError

logger = logging.getLogger(__name__)


class SqlStoreGateway:
    """StoreGateway implementation backed by a request-scoped AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def fetch_all(self, statement: Executable) -> list[Mapping[str, Any]]:
        """Run a query and return every row as a mapping."""
        try:
            result = await self.db.execute(statement)
            return list(result.mappings().all())
        except SQLAlchemyError as e:
            raise await self._store_error(e, "query")

    async def fetch_one(self, statement: Executable) -> Mapping[str, Any] | None:
        """Run a query and return the first row, or None."""
        try:
            result = await self.db.execute(statement)
            return result.mappings().first()
        except SQLAlchemyError as e:
            raise await self._store_error(e, "query")

    async def fetch_scalar(self, statement: Executable) -> Any:
        """Run an aggregate/scalar query."""
        try:
            return await self.db.scalar(statement)
        except SQLAlchemyError as e:
            raise await self._store_error(e, "query")

    async def write_returning(
        self, statement: Executable,
    ) -> Mapping[str, Any] | None:
        """Run an INSERT/UPDATE ... RETURNING, commit, and return the affected row."""
        try:
            result = await self.db.execute(statement)
            row = result.mappings().first()
            await self.db.commit()
            return row
        except SQLAlchemyError as e:
            raise await self._store_error(e, "write")

    async def execute(self, statement: Executable) -> int:
        """Run a write, commit, and return the affected-row count."""
        try:
            result = await self.db.execute(statement)
            affected = result.rowcount or 0
            await self.db.commit()
            return affected
        except SQLAlchemyError as e:
            raise await self._store_error(e, "execute")

    async def _store_error(
        self, exc: SQLAlchemyError, operation: str,
    ) -> StoreUnavailableError:
        """Roll back, log, and translate a SQLAlchemy failure."""
        await self.db.rollback()
        if isinstance(exc, IntegrityError):
            logger.error(
                f"Store integrity error: {exc}", extra={"operation": operation},
            )
            return StoreIntegrityError(operation)
        if isinstance(exc, OperationalError):
            logger.error(
                f"Store operational error: {exc}", extra={"operation": operation},
            )
            return StoreUnavailableError(
                "Connection or operational error", operation,
            )
        logger.error(f"Store error: {exc}", extra={"operation": operation})
        return StoreUnavailableError("Database operation failed", operation)
