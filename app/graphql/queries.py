"""
Root GraphQL query definitions
"""

import strawberry

from .inputs import FetchTodo
from .resolvers import resolve_todo, resolve_todos, resolve_users
from .types import Todo, User


@strawberry.type
class Query:
    """Root GraphQL query type. Queries never modify state."""

    @strawberry.field
    async def todos(self, info: strawberry.Info) -> list[Todo]:
        """List every todo with its owner."""
        return await resolve_todos(info)

    @strawberry.field
    async def users(self, info: strawberry.Info) -> list[User]:
        """List every user."""
        return await resolve_users(info)

    @strawberry.field
    async def todo(self, info: strawberry.Info, input: FetchTodo) -> Todo:
        """Get a todo by ID."""
        return await resolve_todo(info, input)
