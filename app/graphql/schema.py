"""
GraphQL schema and FastAPI router
"""

from typing import Any

import strawberry
from fastapi import Request
from strawberry.fastapi import GraphQLRouter

from .mutations import Mutation
from .queries import Query

schema = strawberry.Schema(query=Query, mutation=Mutation)


def create_graphql_router(path: str = "/query") -> GraphQLRouter[dict[str, Any], None]:
    """Create the GraphQL router; resolvers find the Database in the context."""

    async def get_context(request: Request) -> dict[str, Any]:
        return {
            "request": request,
            "database": request.app.state.database,
        }

    return GraphQLRouter(
        schema,
        path=path,
        graphql_ide="graphiql",
        context_getter=get_context,
    )
