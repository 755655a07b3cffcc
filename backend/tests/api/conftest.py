"""API test fixtures: FastAPI app over httpx with the DB dependency overridden.

Invariants:
    - get_db yields sessions from the per-test in-memory database
    - get_message_store yields a fresh MessageStore per test
    - db_manager patched for the readiness probe, which bypasses get_db
"""

import pytest
from httpx import ASGITransport, AsyncClient

import expense_api.infrastructure.database as db_module
from expense_api.infrastructure.database import DatabaseSessionManager, get_db
from expense_api.infrastructure.message_store import MessageStore, get_message_store
from expense_api.main import app


@pytest.fixture
def message_store():
    return MessageStore()


@pytest.fixture
async def client(test_engine, test_session_factory, message_store):
    """FastAPI test client with DB and message store dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_message_store] = lambda: message_store

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def graphql(client):
    """POST a GraphQL operation and return (status_code, body)."""
    async def _run(query: str, variables: dict | None = None):
        res = await client.post(
            "/graphql", json={"query": query, "variables": variables or {}},
        )
        return res.status_code, res.json()
    return _run
