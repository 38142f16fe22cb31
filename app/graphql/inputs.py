"""
GraphQL input types
"""

import strawberry

from app.schemas.todo import TodoCreate, TodoUpdate
from app.schemas.user import UserCreate


@strawberry.input
class NewTodo:
    """Input for creating a todo."""

    text: str
    user_id: int

    def to_schema(self) -> TodoCreate:
        return TodoCreate(text=self.text, user_id=self.user_id)


@strawberry.input
class EditTodo:
    """Input for changing the text of a todo."""

    id: int
    text: str

    def to_schema(self) -> TodoUpdate:
        return TodoUpdate(id=self.id, text=self.text)


@strawberry.input
class NewUser:
    """Input for creating a user."""

    name: str

    def to_schema(self) -> UserCreate:
        return UserCreate(name=self.name)


@strawberry.input
class FetchTodo:
    """Input for fetching a single todo."""

    id: int
