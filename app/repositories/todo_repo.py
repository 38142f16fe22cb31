from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.todo import Todo
from app.repositories.base import BaseRepository
from app.schemas.todo import TodoCreate

class TodoRepository(BaseRepository[Todo]):
    def __init__(self):
        super().__init__(Todo)

    async def create(self, db: AsyncSession, todo_in: TodoCreate) -> Todo:
        todo = Todo(**todo_in.model_dump(), done=False)
        await super().create(db, todo)
        await db.refresh(todo, attribute_names=["user"])
        return todo

    async def list(self, db: AsyncSession) -> list[Todo]:
        return await super().list(db, options=[selectinload(Todo.user)])

    async def get(self, db: AsyncSession, todo_id: int, *, for_update: bool = False) -> Todo | None:
        return await super().get(db, todo_id, options=[selectinload(Todo.user)], for_update=for_update)
