from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import TodoNotFoundError
from app.logging import get_logger
from app.models.todo import Todo
from app.repositories.todo_repo import TodoRepository
from app.schemas.todo import TodoCreate, TodoUpdate

logger = get_logger(__name__)


class TodoService:
    def __init__(self):
        self.repo = TodoRepository()

    async def create_todo(self, db: AsyncSession, todo_in: TodoCreate) -> Todo:
        async with db.begin():
            todo = await self.repo.create(db, todo_in)
        logger.info("Todo created", todo_id=todo.id, user_id=todo.user_id)
        return todo

    async def update_todo(self, db: AsyncSession, todo_in: TodoUpdate) -> Todo:
        # row stays locked until commit, so a concurrent update cannot be lost
        async with db.begin():
            todo = await self._get_or_raise(db, todo_in.id, for_update=True)
            todo.text = todo_in.text
            await db.flush()
        logger.info("Todo updated", todo_id=todo.id)
        return todo

    async def delete_todo(self, db: AsyncSession, todo_id: int) -> Todo:
        """Delete a todo and return it as it was before deletion."""
        async with db.begin():
            todo = await self._get_or_raise(db, todo_id, for_update=True)
            await self.repo.delete(db, todo)
        logger.info("Todo deleted", todo_id=todo_id)
        return todo

    async def list_todos(self, db: AsyncSession) -> list[Todo]:
        async with db.begin():
            return await self.repo.list(db)

    async def get_todo(self, db: AsyncSession, todo_id: int) -> Todo:
        async with db.begin():
            return await self._get_or_raise(db, todo_id)

    async def _get_or_raise(self, db: AsyncSession, todo_id: int, *, for_update: bool = False) -> Todo:
        todo = await self.repo.get(db, todo_id, for_update=for_update)
        if todo is None:
            logger.info("Todo not found", todo_id=todo_id)
            raise TodoNotFoundError(todo_id)
        return todo
