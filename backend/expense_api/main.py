"""Expense Tracker API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Unhandled exceptions on REST routes -> structured 500 JSON, never internals
    - CORS configured from settings (not hardcoded)
    - Database pool and message store initialized on startup, pool disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Tables created on startup instead of migrations (database_create_tables)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from expense_api.infrastructure.database import init_db
from expense_api.infrastructure.message_store import init_message_store
from expense_api.infrastructure.observability import setup_logging
from expense_api.config import get_settings
from expense_api.api.error_handlers import register_error_handlers
from expense_api.api.routes import health
from expense_api.api.routes.graphql import build_graphql_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_tables:
        await manager.create_tables()
    init_message_store()
    logger.info("Expense Tracker API started")
    yield
    logger.info("Expense Tracker API shutting down")
    await manager.dispose()


app = FastAPI(
    title="Expense Tracker API", version=health.SERVICE_VERSION, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.ping_router)
app.include_router(health.router)
app.include_router(build_graphql_router(settings.graphiql), prefix="/graphql")

register_error_handlers(app)
