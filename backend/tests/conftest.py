"""Root conftest: shared test configuration and async DB fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database with all tables
    - Environment defaults keep tests away from any real database
    - created_at comes from a clock that advances one second per row, so
      newest-first listings never depend on the host clock resolution

Design Decisions:
    - SQLite in-memory: fast, no external dependency; Postgres-only behavior
      (enforced foreign keys) is exercised through stub gateways instead
"""

import os
from datetime import datetime, timedelta, timezone

# Ensure tests never reach a real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402

import expense_api.models.expense as expense_model  # noqa: E402
import expense_api.models.user as user_model  # noqa: E402
from expense_api.db.session import (  # noqa: E402
    create_engine_with_schema, create_session_factory,
)
from expense_api.infrastructure.store_gateway import SqlStoreGateway  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_engine():
    engine = await create_engine_with_schema(TEST_DATABASE_URL)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return create_session_factory(test_engine)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def gateway(test_db):
    return SqlStoreGateway(test_db)


class SteppingClock:
    """Stand-in for `datetime` in the ORM defaults: each now() moves forward by step."""

    def __init__(self, step: timedelta = timedelta(seconds=1)):
        self.current = datetime(2024, 1, 1, tzinfo=timezone.utc)
        self.step = step

    def now(self, tz=None):
        self.current += self.step
        return self.current


@pytest.fixture(autouse=True)
def clock(monkeypatch):
    clock = SteppingClock()
    monkeypatch.setattr(expense_model, "datetime", clock)
    monkeypatch.setattr(user_model, "datetime", clock)
    return clock
