"""Async Session Factory: provides async DB sessions outside FastAPI.

Invariants:
    - Tables are created from Base.metadata when create_tables=True
    - Meant for scripts and test fixtures; the app uses DatabaseSessionManager

Design Decisions:
    - Separate from infrastructure/database.py: no pool tuning, no error mapping
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)

from expense_api.db.base import Base


async def create_engine_with_schema(
    database_url: str, create_tables: bool = True,
) -> AsyncEngine:
    """Create an async engine and, optionally, every registered table."""
    import expense_api.models  # noqa: F401  (registers tables on Base.metadata)

    engine = create_async_engine(database_url, echo=False)
    if create_tables:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    return engine


def create_session_factory(
    engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory bound to the given engine."""
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
