"""GraphQL Route: mounts the schema at /graphql with a request-scoped ResolverSet.

Invariants:
    - One AsyncSession per request (get_db), wrapped in one SqlStoreGateway
    - The process-wide MessageStore is shared by every request
    - GraphiQL is served on GET only when enabled in settings
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.fastapi import GraphQLRouter

from expense_api.api.graphql_schema import schema
from expense_api.infrastructure.database import get_db
from expense_api.infrastructure.message_store import MessageStore, get_message_store
from expense_api.infrastructure.store_gateway import SqlStoreGateway
from expense_api.services.resolver_set import ResolverSet


async def get_context(
    db: AsyncSession = Depends(get_db),
    messages: MessageStore = Depends(get_message_store),
) -> dict:
    """Build the GraphQL context for one request."""
    return {"resolvers": ResolverSet(SqlStoreGateway(db), messages)}


def build_graphql_router(graphiql: bool = True) -> GraphQLRouter:
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if graphiql else None,
    )
