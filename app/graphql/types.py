"""
GraphQL output types
"""

import strawberry

from app.models.todo import Todo as TodoModel
from app.models.user import User as UserModel


@strawberry.type
class User:
    """A user who owns todos."""

    id: int
    name: str

    @classmethod
    def from_model(cls, user: UserModel) -> "User":
        return cls(id=user.id, name=user.name)


@strawberry.type
class Todo:
    """A todo item and its owner."""

    id: int
    text: str
    done: bool
    user_id: int = strawberry.field(name="userID")
    user: User | None

    @classmethod
    def from_model(cls, todo: TodoModel) -> "Todo":
        return cls(
            id=todo.id,
            text=todo.text,
            done=todo.done,
            user_id=todo.user_id,
            user=User.from_model(todo.user) if todo.user is not None else None,
        )
