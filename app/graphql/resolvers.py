from collections.abc import Iterator
from contextlib import contextmanager

import strawberry
from graphql import GraphQLError

from app.database import Database
from app.errors import NotFoundError
from app.services.todo_service import TodoService
from app.services.user_service import UserService

from .inputs import EditTodo, FetchTodo, NewTodo, NewUser
from .types import Todo, User

todo_service = TodoService()
user_service = UserService()


def get_database(info: strawberry.Info) -> Database:
    return info.context["database"]


@contextmanager
def not_found_as_graphql_error() -> Iterator[None]:
    try:
        yield
    except NotFoundError as e:
        raise GraphQLError(str(e), extensions={"code": "NOT_FOUND"}) from e


# Query resolvers
async def resolve_todos(info: strawberry.Info) -> list[Todo]:
    async with get_database(info).session() as db:
        todos = await todo_service.list_todos(db)
        return [Todo.from_model(todo) for todo in todos]


async def resolve_users(info: strawberry.Info) -> list[User]:
    async with get_database(info).session() as db:
        users = await user_service.list_users(db)
        return [User.from_model(user) for user in users]


async def resolve_todo(info: strawberry.Info, input: FetchTodo) -> Todo:
    async with get_database(info).session() as db:
        with not_found_as_graphql_error():
            todo = await todo_service.get_todo(db, input.id)
        return Todo.from_model(todo)


# Mutation resolvers
async def create_todo(info: strawberry.Info, input: NewTodo) -> Todo:
    async with get_database(info).session() as db:
        todo = await todo_service.create_todo(db, input.to_schema())
        return Todo.from_model(todo)


async def update_todo(info: strawberry.Info, input: EditTodo) -> Todo:
    async with get_database(info).session() as db:
        with not_found_as_graphql_error():
            todo = await todo_service.update_todo(db, input.to_schema())
        return Todo.from_model(todo)


async def delete_todo(info: strawberry.Info, id: int) -> Todo:
    async with get_database(info).session() as db:
        with not_found_as_graphql_error():
            todo = await todo_service.delete_todo(db, id)
        return Todo.from_model(todo)


async def create_user(info: strawberry.Info, input: NewUser) -> User:
    async with get_database(info).session() as db:
        user = await user_service.create_user(db, input.to_schema())
        return User.from_model(user)
