"""
Root GraphQL mutation definitions
"""

import strawberry

from . import resolvers
from .inputs import EditTodo, NewTodo, NewUser
from .types import Todo, User


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="createTodo")
    async def create_todo(self, info: strawberry.Info, input: NewTodo) -> Todo:
        """Create a todo that is not done yet."""
        return await resolvers.create_todo(info, input)

    @strawberry.mutation(name="updateTodo")
    async def update_todo(self, info: strawberry.Info, input: EditTodo) -> Todo:
        """Replace the text of a todo."""
        return await resolvers.update_todo(info, input)

    @strawberry.mutation(name="deleteTodo")
    async def delete_todo(self, info: strawberry.Info, input: int) -> Todo:
        """Delete a todo and return it as it was before deletion."""
        return await resolvers.delete_todo(info, input)

    @strawberry.mutation(name="createUser")
    async def create_user(self, info: strawberry.Info, input: NewUser) -> User:
        """Create a user."""
        return await resolvers.create_user(info, input)
