"""Error Handlers: global catch-all for the non-GraphQL routes.

Invariants:
    - Any unhandled exception on a REST route -> structured JSON (500)
    - The response never leaks internal details; the traceback goes to the log

Design Decisions:
    - Domain and store errors never reach FastAPI: they are raised inside GraphQL
      resolvers and reported in the response body (see api/graphql_schema.py)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from expense_api.core.errors import ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register the global error handlers on the FastAPI app."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )
